"""
Module: pictures

Purpose:
    Provides the Picture dataclass - one ingested image record with an
    orientation and a sorted tag-id set. Pictures are created once by
    ingestion and consumed exactly once, either directly (horizontal) or
    by the pairing engine (vertical).

Key Classes:
    - Orientation: HORIZONTAL / VERTICAL enum with the input file markers
    - Picture: Immutable picture record

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - arranger.loading.parser: Builds Pictures from input records
    - arranger.engine.pairing: Turns Pictures into Slides
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple


class Orientation(str, Enum):
    """Picture orientation, valued by its input file marker."""
    HORIZONTAL = "H"
    VERTICAL = "V"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_marker(cls, marker: str) -> Orientation:
        """
        Resolve an input file marker ("H" or "V").

        Raises:
            ValueError: If the marker is not a known orientation
        """
        try:
            return cls(marker)
        except ValueError:
            raise ValueError(f"Invalid orientation marker: {marker!r}") from None


def is_strictly_ascending(tags: Sequence[int]) -> bool:
    """True if tags are sorted ascending with no duplicates."""
    return all(left < right for left, right in zip(tags, tags[1:]))


@dataclass(frozen=True, slots=True)
class Picture:
    """
    Ingested picture record (immutable).

    Attributes:
        id: Picture id, the 0-based position of its record in the input
        orientation: HORIZONTAL or VERTICAL
        tags: Tag ids, strictly ascending

    Invariants:
        - id >= 0
        - tags strictly ascending (no duplicates)

    Example:
        >>> pic = Picture(0, Orientation.VERTICAL, (1, 4, 9))
        >>> pic.is_vertical
        True
        >>> pic.tag_count
        3
    """

    id: int
    orientation: Orientation
    tags: Tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate picture on construction."""
        if self.id < 0:
            raise ValueError(f"Picture id must be non-negative: {self.id}")
        if not is_strictly_ascending(self.tags):
            raise ValueError(
                f"Picture {self.id} tags must be strictly ascending: {self.tags}"
            )

    @property
    def is_vertical(self) -> bool:
        return self.orientation is Orientation.VERTICAL

    @property
    def tag_count(self) -> int:
        return len(self.tags)
