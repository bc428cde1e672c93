"""
Module: arranger.engine.rating

Purpose:
    Rate an arrangement: the sum of interest scores between consecutive
    slides. This is the reported objective value of a run. The rater
    lives with the other scoring primitives in core.scoring so that
    Arrangement.score can use it; it is re-exported here as the engine's
    rating stage.

Key Functions:
    - rate_arrangement(): Total score
    - transition_scores(): Score of each consecutive pair

Used By:
    - arranger.controller: Score reporting
"""

from slideshow_toolkit.core.scoring import rate_arrangement, transition_scores

__all__ = ["rate_arrangement", "transition_scores"]
