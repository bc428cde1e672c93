"""
Module: arranger.engine.odd_vertical

Purpose:
    Enum defining what the pairing engine does with the single vertical
    picture left over when the vertical picture count is odd.

Key Classes:
    - OddVerticalPolicy: DROP / SINGLE

Used By:
    - arranger.engine.config: EngineConfig
    - arranger.engine.pairing: create_slides
    - cli: --odd-vertical option
"""

from enum import Enum


class OddVerticalPolicy(str, Enum):
    """
    Controls the leftover vertical picture of an odd-sized pool.

    Attributes:
        DROP: Discard the picture. It appears in no slide and is reported
              in SlideSet.dropped_picture_ids.
        SINGLE: Emit it as a degenerate single-picture vertical slide.

    Example:
        >>> OddVerticalPolicy("drop") is OddVerticalPolicy.DROP
        True
    """

    DROP = "drop"
    SINGLE = "single"

    def __str__(self) -> str:
        return self.value
