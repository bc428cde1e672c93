"""
Module: arranger.loading.vocabulary

Purpose:
    Intern free-text tags into dense integer ids. A mutable builder is
    used while one input is parsed; it is then frozen into an immutable
    TagVocabulary that is passed explicitly to later stages.

Key Classes:
    - VocabularyBuilder: Assigns ids in first-seen order
    - TagVocabulary: Frozen tag table indexed by id

Used By:
    - arranger.loading.parser: Tag interning during ingestion
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


class VocabularyBuilder:
    """
    Mutable tag interner for a single input.

    Example:
        >>> builder = VocabularyBuilder()
        >>> builder.intern("cat"), builder.intern("sun"), builder.intern("cat")
        (0, 1, 0)
        >>> len(builder.freeze())
        2
    """

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def intern(self, tag: str) -> int:
        """Id for tag, assigning the next free id on first sight."""
        tag_id = self._ids.get(tag)
        if tag_id is None:
            tag_id = len(self._ids)
            self._ids[tag] = tag_id
        return tag_id

    def intern_all(self, tags: Iterable[str]) -> Tuple[int, ...]:
        """
        Intern several tags and return their ids sorted and deduplicated.

        Args:
            tags: Tag strings of one picture

        Returns:
            Strictly ascending tuple of tag ids
        """
        return tuple(sorted({self.intern(tag) for tag in tags}))

    def freeze(self) -> TagVocabulary:
        """Immutable snapshot of the interned tags."""
        return TagVocabulary(tuple(self._ids))


@dataclass(frozen=True)
class TagVocabulary:
    """
    Immutable tag vocabulary for one input.

    Attributes:
        tags: Tag strings indexed by their id

    Invariants:
        - Ids are dense: 0 .. len(tags) - 1
        - Tag strings are unique
    """

    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate uniqueness."""
        if len(set(self.tags)) != len(self.tags):
            raise ValueError("Vocabulary tags must be unique")

    def __len__(self) -> int:
        return len(self.tags)
