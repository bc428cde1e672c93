"""
Module: arranger.loading.parser

Purpose:
    Parse the picture listing format into Picture objects. The first line
    holds the picture count; each following line is one picture record:
    orientation marker (H or V), tag count, then that many tag tokens.

Key Functions:
    - parse_input_text(): Parse a whole listing
    - parse_record(): Parse one picture line

Key Classes:
    - ParsedInput: Pictures plus the vocabulary built while parsing
    - MalformedRecordError: Exception for unparseable lines

Dependencies:
    - arranger.loading.vocabulary: Tag interning
    - slideshow_toolkit.core.models: Picture, Orientation

Used By:
    - arranger.loading.loader: load_pictures
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from slideshow_toolkit.core.models import Orientation, Picture

from .vocabulary import TagVocabulary, VocabularyBuilder

logger = logging.getLogger(__name__)


class MalformedRecordError(Exception):
    """Error parsing a line of a picture listing."""

    def __init__(self, message: str, *, source: str = "<input>", line_number: Optional[int] = None):
        self.source = source
        self.line_number = line_number
        location = f"{source}:{line_number}" if line_number is not None else source
        super().__init__(f"{location}: {message}")


@dataclass(frozen=True)
class ParsedInput:
    """
    Result of parsing one picture listing.

    Attributes:
        pictures: Pictures in record order (id == record index)
        vocabulary: Tags interned while parsing
        declared_count: Picture count from the header line
    """

    pictures: Tuple[Picture, ...]
    vocabulary: TagVocabulary
    declared_count: int

    @property
    def vertical_count(self) -> int:
        return sum(1 for p in self.pictures if p.is_vertical)

    @property
    def horizontal_count(self) -> int:
        return len(self.pictures) - self.vertical_count


def _parse_int(token: str, field_name: str, source: str, line_number: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MalformedRecordError(
            f"{field_name} is not an integer: {token!r}",
            source=source, line_number=line_number,
        ) from None
    if value < 0:
        raise MalformedRecordError(
            f"{field_name} must be non-negative: {value}",
            source=source, line_number=line_number,
        )
    return value


def parse_record(
    line: str,
    picture_id: int,
    vocabulary: VocabularyBuilder,
    *,
    source: str = "<input>",
    line_number: int = 0,
) -> Picture:
    """
    Parse a single picture record.

    Args:
        line: Record text, e.g. "V 2 selfie smile"
        picture_id: Id to assign (record index)
        vocabulary: Builder used to intern the tags
        source: Input name for error messages
        line_number: 1-based line number for error messages

    Returns:
        Picture with sorted, deduplicated tag ids

    Raises:
        MalformedRecordError: Unknown orientation, missing or non-integer
            tag count, or tag count not matching the tag tokens
    """
    tokens = line.split()
    if not tokens:
        raise MalformedRecordError("empty record", source=source, line_number=line_number)

    try:
        orientation = Orientation.from_marker(tokens[0])
    except ValueError as e:
        raise MalformedRecordError(str(e), source=source, line_number=line_number) from e

    if len(tokens) < 2:
        raise MalformedRecordError("missing tag count", source=source, line_number=line_number)
    tag_count = _parse_int(tokens[1], "tag count", source, line_number)

    tag_tokens = tokens[2:]
    if len(tag_tokens) != tag_count:
        raise MalformedRecordError(
            f"declares {tag_count} tags but lists {len(tag_tokens)}",
            source=source, line_number=line_number,
        )

    return Picture(picture_id, orientation, vocabulary.intern_all(tag_tokens))


def parse_input_text(text: str, *, source: str = "<input>") -> ParsedInput:
    """
    Parse a complete picture listing.

    Blank lines are ignored. Picture ids are assigned in record order
    starting at 0.

    Args:
        text: Full listing contents
        source: Input name for messages

    Returns:
        ParsedInput with pictures and the frozen vocabulary

    Raises:
        MalformedRecordError: If the header or any record is malformed

    Example:
        >>> parsed = parse_input_text("2\\nH 2 cat sun\\nV 1 cat\\n")
        >>> [p.tags for p in parsed.pictures]
        [(0, 1), (0,)]
    """
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise MalformedRecordError("missing picture count header", source=source, line_number=1)

    declared_count = _parse_int(lines[0].strip(), "picture count", source, 1)

    vocabulary = VocabularyBuilder()
    pictures: List[Picture] = []
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        pictures.append(
            parse_record(
                line, len(pictures), vocabulary,
                source=source, line_number=line_number,
            )
        )

    if declared_count != len(pictures):
        logger.warning(
            f"{source}: header declares {declared_count} pictures but {len(pictures)} records were read"
        )

    logger.debug(f"{source}: parsed {len(pictures)} pictures with {len(vocabulary)} distinct tags")

    return ParsedInput(
        pictures=tuple(pictures),
        vocabulary=vocabulary.freeze(),
        declared_count=declared_count,
    )
