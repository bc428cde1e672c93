"""
Module: arranger.loading.loader

Purpose:
    Resolve named inputs to files inside the input directory and load
    them into Pictures.

Key Functions:
    - resolve_input_path(): Name -> file path
    - load_pictures(): Name -> ParsedInput

Key Classes:
    - MissingInputError: Exception for inputs that cannot be found/read

Dependencies:
    - pathlib (std)
    - arranger.loading.parser: parse_input_text

Used By:
    - arranger.controller: Per-input pipeline
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from .parser import ParsedInput, parse_input_text

logger = logging.getLogger(__name__)


# Short names of the standard inputs
INPUT_CATALOGUE: Dict[str, str] = {
    "a": "a_example.txt",
    "b": "b_lovely_landscapes.txt",
    "c": "c_memorable_moments.txt",
    "d": "d_pet_pictures.txt",
    "e": "e_shiny_selfies.txt",
}

DEFAULT_INPUTS = tuple(INPUT_CATALOGUE)


class MissingInputError(Exception):
    """Named input cannot be located or read."""
    pass


def resolve_input_path(name: str, input_dir: Path) -> Path:
    """
    Locate the file for a named input.

    Lookup order:
    1. Catalogue short name ("a" -> "a_example.txt")
    2. Literal file name inside input_dir
    3. File name with ".txt" appended

    Args:
        name: Input name
        input_dir: Directory holding input files

    Returns:
        Path to an existing file

    Raises:
        MissingInputError: If no candidate exists
    """
    candidates = []
    if name in INPUT_CATALOGUE:
        candidates.append(input_dir / INPUT_CATALOGUE[name])
    candidates.append(input_dir / name)
    candidates.append(input_dir / f"{name}.txt")

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    raise MissingInputError(
        f"Input {name!r} not found in {input_dir} "
        f"(tried: {', '.join(c.name for c in candidates)})"
    )


def load_pictures(name: str, input_dir: Path) -> ParsedInput:
    """
    Load and parse a named input.

    Args:
        name: Input name (catalogue short name or file name)
        input_dir: Directory holding input files

    Returns:
        ParsedInput for the file

    Raises:
        MissingInputError: If the file cannot be found or read
        MalformedRecordError: If the contents do not parse
    """
    path = resolve_input_path(name, Path(input_dir))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MissingInputError(f"Cannot read input {name!r} at {path}: {e}") from e

    logger.debug(f"Loading input {name!r} from {path}")
    return parse_input_text(text, source=path.name)
