"""
Module: arranger.engine.pool

Purpose:
    Index-addressable working pool of slide indices for the tour builder.
    Removal swaps the removed member with the last one, so each tour step
    removes in O(1) while the candidate scan stays O(n).

Key Classes:
    - SlidePool: Arena of slide indices with swap-to-end removal

Dependencies:
    - numpy: Member and position arrays

Used By:
    - arranger.engine.tour: build_tour
"""

from __future__ import annotations

from typing import List

import numpy as np


class SlidePool:
    """
    Remaining slides of a tour under construction.

    Members are indices into the tour's slide tuple, held in a fixed
    numpy arena whose live prefix is the pool. The pool is only mutated
    between scan steps; scans read `members` as a snapshot.

    Example:
        >>> pool = SlidePool(4)
        >>> pool.remove(0)
        >>> pool.members.tolist()
        [3, 1, 2]
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Pool size must be non-negative: {size}")
        self._members = np.arange(size, dtype=np.int64)
        # slide index -> position in _members, -1 once removed
        self._positions = np.arange(size, dtype=np.int64)
        self._size = size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, slide_index: int) -> bool:
        return 0 <= slide_index < len(self._positions) and self._positions[slide_index] >= 0

    @property
    def members(self) -> np.ndarray:
        """Live members in scan order (a view, valid until the next remove)."""
        return self._members[:self._size]

    def first(self) -> int:
        """Slide index at the pool's first position."""
        if not self._size:
            raise IndexError("first() on an empty pool")
        return int(self._members[0])

    def remove(self, slide_index: int) -> None:
        """
        Remove a slide by swapping it with the last member.

        Raises:
            KeyError: If slide_index is not in the pool
        """
        if slide_index not in self:
            raise KeyError(f"Slide {slide_index} is not in the pool")
        position = self._positions[slide_index]
        last = self._members[self._size - 1]
        self._members[position] = last
        self._positions[last] = position
        self._positions[slide_index] = -1
        self._size -= 1

    def chunks(self, count: int) -> List[range]:
        """
        Split member positions into at most count contiguous ranges.

        Args:
            count: Desired number of chunks (>= 1)

        Returns:
            Non-empty position ranges covering every member exactly once
        """
        size = self._size
        count = max(1, min(count, size))
        base, extra = divmod(size, count)
        ranges = []
        start = 0
        for i in range(count):
            stop = start + base + (1 if i < extra else 0)
            ranges.append(range(start, stop))
            start = stop
        return ranges
