"""
Module: arranger.engine.overlap

Purpose:
    Vectorised tag-overlap counts for the tour builder. An inverted index
    from tag id to the slides carrying it is built once per tour; each
    step then counts the common tags of the current slide against every
    slide with one bincount, and turns the counts into waste values with
    array arithmetic.

Key Classes:
    - TagIndex: Inverted tag index over a slide set

Key Functions:
    - waste_counts(): Waste of one slide against many, from common counts

Dependencies:
    - numpy: Posting lists, bincount, array arithmetic

Used By:
    - arranger.engine.tour: Candidate scan
"""

from __future__ import annotations

from itertools import chain
from typing import Sequence

import numpy as np


class TagIndex:
    """
    Inverted index from tag id to slide indices (read-only once built).

    Posting lists are stored as one array sorted by tag, so the postings
    of a tag are the slice between its left and right search positions.

    Example:
        >>> index = TagIndex([(1, 2), (2, 3), (4,)])
        >>> index.common_counts(0).tolist()
        [2, 1, 0]
    """

    def __init__(self, tags: Sequence[Sequence[int]]) -> None:
        count = len(tags)
        self.sizes = np.fromiter((len(t) for t in tags), dtype=np.int64, count=count)
        self._offsets = np.zeros(count + 1, dtype=np.int64)
        np.cumsum(self.sizes, out=self._offsets[1:])

        flat = np.fromiter(chain.from_iterable(tags), dtype=np.int64, count=int(self._offsets[-1]))
        owners = np.repeat(np.arange(count, dtype=np.int64), self.sizes)
        order = np.argsort(flat, kind="stable")

        self._flat = flat
        self._sorted_tags = flat[order]
        self._postings = owners[order]

    def __len__(self) -> int:
        return len(self.sizes)

    def tags_of(self, slide_index: int) -> np.ndarray:
        return self._flat[self._offsets[slide_index]:self._offsets[slide_index + 1]]

    def common_counts(self, slide_index: int) -> np.ndarray:
        """
        Common tag count of one slide against every slide in the index.

        Args:
            slide_index: Slide whose tags are looked up

        Returns:
            int64 array of length len(self), indexed by slide index
        """
        own = self.tags_of(slide_index)
        if not len(own):
            return np.zeros(len(self), dtype=np.int64)

        starts = np.searchsorted(self._sorted_tags, own, side="left")
        stops = np.searchsorted(self._sorted_tags, own, side="right")
        hits = np.concatenate([
            self._postings[start:stop]
            for start, stop in zip(starts.tolist(), stops.tolist())
        ])
        return np.bincount(hits, minlength=len(self)).astype(np.int64, copy=False)


def waste_counts(common: np.ndarray, current_size: int, candidate_sizes: np.ndarray) -> np.ndarray:
    """
    Waste of the current slide against each candidate.

    Same quantity as core.scoring.waste, computed element-wise.

    Args:
        common: Common tag counts, one per candidate
        current_size: Tag count of the current slide
        candidate_sizes: Tag counts of the candidates

    Returns:
        int64 array of waste values, aligned with the inputs
    """
    left_only = current_size - common
    right_only = candidate_sizes - common
    score = np.minimum(np.minimum(common, left_only), right_only)
    return (left_only - score) + (right_only - score) + (common - score)
