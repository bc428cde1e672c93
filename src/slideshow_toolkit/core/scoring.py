"""
Module: core.scoring

Purpose:
    Pure tag-overlap primitives shared by the pairing engine and the
    arrangement rater; waste defines how the tour builder ranks
    candidates. The overlap functions take tag sequences that are
    already sorted ascending without duplicates.

Key Functions:
    - common_count(a, b): Tags present in both, single merge walk
    - interest_score(a, b): min(common, left-only, right-only)
    - waste(a, b): Excess of the three quantities over their minimum
    - merge_tags(a, b): Sorted, deduplicated union
    - rate_arrangement(slides): Sum of interest scores of consecutive slides

Dependencies:
    - numpy: Sorted set union

Used By:
    - core.models.slides: Arrangement.score
    - arranger.engine.pairing
    - arranger.engine.rating
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Tuple

import numpy as np

if TYPE_CHECKING:
    from .models.slides import Slide


def common_count(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Count tags present in both sorted sequences.

    Walks both sequences once, advancing whichever side is behind.

    Example:
        >>> common_count((1, 2, 3), (2, 3, 4))
        2
    """
    i = j = 0
    common = 0
    left_len, right_len = len(left), len(right)
    while i < left_len and j < right_len:
        a = left[i]
        b = right[j]
        if a < b:
            i += 1
        elif b < a:
            j += 1
        else:
            common += 1
            i += 1
            j += 1
    return common


def interest_score(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Interest factor between two consecutive slides.

    Example:
        >>> interest_score((1, 2, 3), (2, 3, 4))
        1
    """
    common = common_count(left, right)
    return min(common, len(left) - common, len(right) - common)


def waste(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Candidate-ranking proxy for the tour builder.

    Sum of how far common, left-only and right-only tag counts exceed
    their shared minimum (the interest score). Lower is better.

    Example:
        >>> waste((1, 2, 3), (2, 3, 4))
        1
    """
    common = common_count(left, right)
    left_only = len(left) - common
    right_only = len(right) - common
    score = min(common, left_only, right_only)
    return (left_only - score) + (right_only - score) + (common - score)


def merge_tags(left: Sequence[int], right: Sequence[int]) -> Tuple[int, ...]:
    """
    Sorted, deduplicated union of two tag sequences.

    Example:
        >>> merge_tags((5, 6), (5, 7))
        (5, 6, 7)
    """
    merged = np.union1d(
        np.asarray(left, dtype=np.int64),
        np.asarray(right, dtype=np.int64),
    )
    return tuple(int(tag) for tag in merged)


def transition_scores(slides: Sequence[Slide]) -> List[int]:
    """Interest score of every consecutive slide pair, in order."""
    return [
        interest_score(left.tags, right.tags)
        for left, right in zip(slides, slides[1:])
    ]


def rate_arrangement(slides: Sequence[Slide]) -> int:
    """
    Sum interest scores over consecutive slide pairs.

    Args:
        slides: Slides in display order

    Returns:
        Total score, 0 for fewer than two slides

    Example:
        >>> rate_arrangement([Slide(0, None, (1, 2, 3)), Slide(1, None, (2, 3, 4))])
        1
    """
    return sum(transition_scores(tuple(slides)))
