"""
Module: slides

Purpose:
    Provides the Slide, SlideSet and Arrangement dataclasses. A Slide is
    the display unit (one horizontal picture or two combined vertical
    pictures); an Arrangement is the final ordered permutation of slides.

Key Functions:
    - Slide.from_picture(p): Wrap a single picture
    - Slide.composite(a, b, tags): Two vertical pictures with merged tags
    - Arrangement.score: Calculated interest score of the whole sequence
    - Arrangement.is_permutation_of(slides): Check the tour invariant

Dependencies:
    - dataclasses (std)
    - functools (std)
    - .pictures.Picture
    - core.scoring: rate_arrangement

Used By:
    - arranger.engine.pairing: Emits SlideSet
    - arranger.engine.tour: Builds Arrangement
    - arranger.output.writer: Serializes Arrangement
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Iterator, Optional, Tuple

from ..scoring import rate_arrangement
from .pictures import Picture, is_strictly_ascending


@dataclass(frozen=True, slots=True)
class Slide:
    """
    Display unit (immutable).

    Attributes:
        primary_picture_id: Id of the (first) picture shown
        secondary_picture_id: Id of the partner vertical picture, if any
        tags: Tag ids, strictly ascending. For a composite slide this is
              the sorted union of both pictures' tags.

    Invariants:
        - tags strictly ascending
        - secondary_picture_id != primary_picture_id

    Example:
        >>> Slide(3, 7, (1, 2, 3)).picture_ids
        (3, 7)
    """

    primary_picture_id: int
    secondary_picture_id: Optional[int]
    tags: Tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate slide on construction."""
        if self.secondary_picture_id == self.primary_picture_id:
            raise ValueError(
                f"Slide cannot pair picture {self.primary_picture_id} with itself"
            )
        if not is_strictly_ascending(self.tags):
            raise ValueError(
                f"Slide {self.picture_ids} tags must be strictly ascending: {self.tags}"
            )

    @classmethod
    def from_picture(cls, picture: Picture) -> Slide:
        """Slide showing one picture, tags taken verbatim."""
        return cls(picture.id, None, picture.tags)

    @classmethod
    def composite(cls, primary: Picture, secondary: Picture, tags: Tuple[int, ...]) -> Slide:
        """Slide combining two vertical pictures with pre-merged tags."""
        return cls(primary.id, secondary.id, tags)

    @property
    def is_composite(self) -> bool:
        return self.secondary_picture_id is not None

    @property
    def picture_ids(self) -> Tuple[int, ...]:
        if self.secondary_picture_id is None:
            return (self.primary_picture_id,)
        return (self.primary_picture_id, self.secondary_picture_id)


@dataclass(frozen=True)
class SlideSet:
    """
    Output of the pairing engine (immutable).

    Attributes:
        slides: Horizontal slides in ingestion order, then composite slides
                in pairing order
        dropped_picture_ids: Vertical pictures left without a partner

    Invariants:
        - No picture id appears in more than one slide
    """

    slides: Tuple[Slide, ...]
    dropped_picture_ids: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate no picture is used twice."""
        counts = Counter(pid for slide in self.slides for pid in slide.picture_ids)
        reused = sorted(pid for pid, count in counts.items() if count > 1)
        if reused:
            raise ValueError(f"Pictures used in more than one slide: {reused}")

    def __len__(self) -> int:
        return len(self.slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    @property
    def composite_count(self) -> int:
        return sum(1 for slide in self.slides if slide.is_composite)


@dataclass(frozen=True)
class Arrangement:
    """
    Ordered slideshow (immutable).

    Attributes:
        slides: Slides in display order

    Example:
        >>> arrangement = Arrangement((Slide(0, None, (1, 2)), Slide(1, None, (2, 3))))
        >>> arrangement.score
        1
    """

    slides: Tuple[Slide, ...]

    def __len__(self) -> int:
        return len(self.slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def score(self) -> int:
        """
        Sum of interest scores over consecutive slide pairs.

        Returns:
            The reported objective value of the slideshow
        """
        return rate_arrangement(self.slides)

    @property
    def picture_count(self) -> int:
        return sum(len(slide.picture_ids) for slide in self.slides)

    def is_permutation_of(self, slides: Iterable[Slide]) -> bool:
        """
        Check every given slide appears exactly once and nothing else does.

        Args:
            slides: The slide set the tour was built from

        Returns:
            True if this arrangement is a permutation of slides
        """
        return Counter(self.slides) == Counter(slides)
