"""
Module: arranger.output.writer

Purpose:
    Serialize an Arrangement to the slideshow listing format: the slide
    count, then one line per slide holding one picture id (horizontal)
    or two space-separated ids, primary first (vertical).

Key Functions:
    - format_arrangement(): Arrangement -> listing text
    - write_arrangement(): Atomic write of the listing
    - output_path_for(): Output file path of a named input

Dependencies:
    - tempfile (std): Atomic replace

Used By:
    - arranger.controller: Per-input pipeline
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from slideshow_toolkit.core.models import Arrangement

logger = logging.getLogger(__name__)


def output_path_for(name: str, output_dir: Path) -> Path:
    """Output listing path for a named input, e.g. output_b.txt."""
    return Path(output_dir) / f"output_{Path(name).stem}.txt"


def format_arrangement(arrangement: Arrangement) -> str:
    """
    Render the listing text.

    Example:
        >>> print(format_arrangement(arrangement), end="")
        3
        0
        3
        1 2
    """
    lines = [str(len(arrangement))]
    lines.extend(
        " ".join(str(pid) for pid in slide.picture_ids)
        for slide in arrangement
    )
    return "\n".join(lines) + "\n"


def write_arrangement(arrangement: Arrangement, path: Path) -> Path:
    """
    Write the listing atomically (temp file in the target dir, then replace).

    Args:
        arrangement: Slides in display order
        path: Target file

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        suffix=".tmp",
        dir=path.parent,
        delete=False,
    ) as f:
        f.write(format_arrangement(arrangement))
        temp_path = Path(f.name)

    temp_path.replace(path)
    logger.debug(f"Wrote {len(arrangement)} slides to {path}")
    return path
