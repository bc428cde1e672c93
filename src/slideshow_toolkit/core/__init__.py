"""
Slideshow Toolkit Core Package

Shared data models and tag scoring primitives. These are the single source
of truth for every arranger stage.

**CONVENTIONS:**

1. **Immutable Data Models**
   - Frozen dataclasses; new instances are created instead of mutating.

2. **Sorted Tag Tuples**
   - Every Picture and Slide holds its tag ids as a strictly ascending
     tuple, validated on construction. Scoring relies on this to count
     overlaps in a single merge walk.

3. **Calculated Scores (Never Stored)**
   - `Arrangement.score` is always derived from the slide order.
"""

from .models import Orientation, Picture, Slide, SlideSet, Arrangement
from .scoring import (
    common_count,
    interest_score,
    waste,
    merge_tags,
    rate_arrangement,
    transition_scores,
)

__all__ = [
    "Orientation",
    "Picture",
    "Slide",
    "SlideSet",
    "Arrangement",
    "common_count",
    "interest_score",
    "waste",
    "merge_tags",
    "rate_arrangement",
    "transition_scores",
]
