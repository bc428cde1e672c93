"""
Module: arranger

Purpose:
    Slideshow arranging pipeline. Loads tagged picture listings, pairs
    vertical pictures into slides, orders all slides with a greedy tour,
    rates the result and writes the slideshow listing.

Key Functions:
    - run_inputs(): Process every named input of a run
    - arrange_input(): Process one named input
    - arrange_pictures(): Engine only, for already ingested pictures

Key Classes:
    - RunConfig: Run configuration
    - EngineConfig: Pairing/tour configuration
    - RunSummary / InputResult: Results
    - RunError: Exception for failed inputs

Dependencies:
    - numpy: Tag set union, tour chunk reduction
    - portalocker: Locked run reports

Used By:
    - slideshow_toolkit.cli: Command line interface
"""

from .config import RunConfig
from .engine import EngineConfig, OddVerticalPolicy
from .loading import MalformedRecordError, MissingInputError
from .controller import (
    InputResult,
    RunError,
    RunSummary,
    arrange_input,
    arrange_pictures,
    run_inputs,
)

__all__ = [
    # Config
    "RunConfig",
    "EngineConfig",
    "OddVerticalPolicy",
    # Errors
    "MalformedRecordError",
    "MissingInputError",
    "RunError",
    # Controller
    "InputResult",
    "RunSummary",
    "arrange_input",
    "arrange_pictures",
    "run_inputs",
]
