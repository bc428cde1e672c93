"""
Module: arranger.loading

Purpose:
    Ingest picture listings: locate named inputs, parse records and intern
    tags into a per-input vocabulary.

Key Functions:
    - load_pictures(): Load a named input
    - parse_input_text(): Parse listing text

Key Classes:
    - TagVocabulary / VocabularyBuilder: Tag interning
    - MalformedRecordError / MissingInputError: Ingestion failures
"""

from .vocabulary import TagVocabulary, VocabularyBuilder
from .parser import ParsedInput, MalformedRecordError, parse_input_text, parse_record
from .loader import (
    DEFAULT_INPUTS,
    INPUT_CATALOGUE,
    MissingInputError,
    load_pictures,
    resolve_input_path,
)

__all__ = [
    "TagVocabulary",
    "VocabularyBuilder",
    "ParsedInput",
    "MalformedRecordError",
    "parse_input_text",
    "parse_record",
    "DEFAULT_INPUTS",
    "INPUT_CATALOGUE",
    "MissingInputError",
    "load_pictures",
    "resolve_input_path",
]
