"""
Core Models Package

Immutable, validated data models shared by every stage of the arranger.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation between pairing and tour building
2. Safe to pass between threads/processes
3. Can be used as dict keys or in sets (permutation checks)

| Type | Created By | Consumed By |
|------|------------|-------------|
| `Picture` | loading.parser | engine.pairing |
| `Slide` / `SlideSet` | engine.pairing | engine.tour |
| `Arrangement` | engine.tour | engine.rating, output.writer |
"""

from .pictures import Orientation, Picture
from .slides import Slide, SlideSet, Arrangement

__all__ = [
    "Orientation",
    "Picture",
    "Slide",
    "SlideSet",
    "Arrangement",
]
