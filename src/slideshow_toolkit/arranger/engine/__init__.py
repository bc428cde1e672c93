"""
Module: arranger.engine

Purpose:
    The optimization engine: vertical picture pairing, greedy tour
    construction and arrangement rating.

Key Functions:
    - create_slides(): Pictures -> SlideSet
    - build_tour(): Slides -> Arrangement
    - rate_arrangement(): Arrangement -> score

Key Classes:
    - EngineConfig: Engine configuration
    - OddVerticalPolicy: Leftover vertical picture handling
    - SlidePool: Tour working pool
    - TagIndex: Inverted tag index for the tour scan

Used By:
    - arranger.controller: Per-input pipeline
"""

from .config import EngineConfig
from .odd_vertical import OddVerticalPolicy
from .overlap import TagIndex
from .pairing import create_slides, pair_vertical_pictures
from .pool import SlidePool
from .tour import build_tour
from .rating import rate_arrangement, transition_scores

__all__ = [
    "EngineConfig",
    "OddVerticalPolicy",
    "TagIndex",
    "create_slides",
    "pair_vertical_pictures",
    "SlidePool",
    "build_tour",
    "rate_arrangement",
    "transition_scores",
]
