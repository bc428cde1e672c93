"""
Module: arranger.output

Purpose:
    Serialize arrangements to slideshow listing files.

Key Functions:
    - format_arrangement(): Listing text
    - write_arrangement(): Atomic file write
    - output_path_for(): Output naming
"""

from .writer import format_arrangement, output_path_for, write_arrangement

__all__ = [
    "format_arrangement",
    "output_path_for",
    "write_arrangement",
]
