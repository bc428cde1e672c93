"""
Command line entry point: arrange one or more named inputs and report
per-input and total scores.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from slideshow_toolkit import __version__
from slideshow_toolkit.arranger import (
    EngineConfig,
    OddVerticalPolicy,
    RunConfig,
    RunError,
    run_inputs,
)
from slideshow_toolkit.arranger.loading import DEFAULT_INPUTS
from slideshow_toolkit.common.logging_utils import configure_logging

logger = logging.getLogger("slideshow_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slideshow-toolkit",
        description="Arrange tagged pictures into a slideshow maximising transition interest",
    )
    parser.add_argument(
        "inputs", nargs="*", default=list(DEFAULT_INPUTS),
        help="Input names: catalogue letters (a-e) or file names in --input-dir",
    )
    parser.add_argument("--input-dir", type=Path, default=Path("inputs"), help="Directory holding input listings")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Directory for output listings and reports")
    parser.add_argument("--workers", type=int, default=1, help="Threads per tour step scan")
    parser.add_argument("--input-workers", type=int, default=1, help="Processes used across inputs")
    parser.add_argument(
        "--odd-vertical", choices=[p.value for p in OddVerticalPolicy],
        default=OddVerticalPolicy.DROP.value,
        help="What to do with an unpaired vertical picture",
    )
    parser.add_argument(
        "--positional-ties", action="store_true",
        help="Break equal-waste ties by scan position instead of slide index",
    )
    parser.add_argument("--keep-going", action="store_true", help="Continue with other inputs after a failure")
    parser.add_argument("--no-reports", action="store_true", help="Skip scores.jsonl and timing.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging and a timing summary")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Build the run configuration from parsed arguments."""
    engine = EngineConfig(
        workers=args.workers,
        deterministic_ties=not args.positional_ties,
        odd_vertical_policy=OddVerticalPolicy(args.odd_vertical),
    )
    return RunConfig(
        inputs=tuple(args.inputs),
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        engine=engine,
        input_workers=args.input_workers,
        keep_going=args.keep_going,
        write_reports=not args.no_reports,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        summary = run_inputs(config)
    except RunError as e:
        logger.error(str(e))
        return 1

    if args.verbose:
        logger.info(summary.timings.summary())

    return 0 if summary.succeeded else 1


if __name__ == "__main__":
    raise SystemExit(main())
