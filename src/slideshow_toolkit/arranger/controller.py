"""
Module: arranger.controller

Purpose:
    Orchestrate the arranging pipeline for each named input and for a
    whole run.
    Load → Pair → Tour → Rate → Write

Key Functions:
    - arrange_pictures(): Engine only, Pictures -> (SlideSet, Arrangement)
    - arrange_input(): Full pipeline for one named input
    - run_inputs(): All inputs of a run, sequential or in worker processes

Key Classes:
    - InputResult: Outcome of one input
    - RunSummary: Outcome of a run
    - RunError: Exception for a failed input

Dependencies:
    - concurrent.futures: Inputs in parallel worker processes
    - arranger.loading / arranger.engine / arranger.output
    - common.timing / common.file_locking: Run reports

Used By:
    - cli: Command line entry point
"""

from __future__ import annotations

import logging
import multiprocessing
import threading
from concurrent.futures import Future, ProcessPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from slideshow_toolkit.common.file_locking import locked_append_jsonl
from slideshow_toolkit.common.logging_utils import configure_worker_logging, start_log_listener
from slideshow_toolkit.common.timing import TimingLog, timed_phase
from slideshow_toolkit.core.models import Arrangement, Picture, SlideSet

from .config import RunConfig
from .engine import EngineConfig, build_tour, create_slides, rate_arrangement
from .loading import MalformedRecordError, MissingInputError, load_pictures
from .output import output_path_for, write_arrangement

logger = logging.getLogger(__name__)


class RunError(Exception):
    """Error processing a named input."""

    def __init__(self, input_name: str, message: str):
        self.input_name = input_name
        self.message = message
        super().__init__(f"Input {input_name!r} failed: {message}")

    def __reduce__(self):
        # Re-raised in the parent after crossing a process boundary
        return (self.__class__, (self.input_name, self.message))


@dataclass(frozen=True)
class InputResult:
    """
    Outcome of one input (immutable).

    Attributes:
        name: Input name
        score: Sum of interest scores of the arrangement
        arrangement: Slides in display order
        picture_count: Pictures read from the input
        dropped_picture_ids: Vertical pictures left unpaired
        output_path: Written listing
        timings: Phase durations for this input
    """
    name: str
    score: int
    arrangement: Arrangement
    picture_count: int
    dropped_picture_ids: Tuple[int, ...]
    output_path: Path
    timings: TimingLog = field(default_factory=TimingLog, compare=False)

    @property
    def slide_count(self) -> int:
        return len(self.arrangement)

    def to_record(self) -> Dict[str, object]:
        """Score ledger record."""
        return {
            "input": self.name,
            "score": self.score,
            "slides": self.slide_count,
            "pictures": self.picture_count,
            "dropped": list(self.dropped_picture_ids),
            "output": str(self.output_path),
            "seconds": round(self.timings.total(self.name), 3),
        }


@dataclass(frozen=True)
class RunSummary:
    """
    Outcome of a run (immutable).

    Attributes:
        results: Successful inputs, in configured order
        failures: (input name, error message) for inputs that failed
                  under keep_going
    """
    results: Tuple[InputResult, ...]
    failures: Tuple[Tuple[str, str], ...] = ()

    @property
    def total_score(self) -> int:
        return sum(result.score for result in self.results)

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def timings(self) -> TimingLog:
        """Phase timings of every successful input, merged into one log."""
        merged = TimingLog()
        for result in self.results:
            merged.merge(result.timings)
        return merged

    def score_for(self, name: str) -> Optional[int]:
        for result in self.results:
            if result.name == name:
                return result.score
        return None


def arrange_pictures(
    pictures: Sequence[Picture],
    engine: Optional[EngineConfig] = None,
    *,
    name: str = "",
) -> Tuple[SlideSet, Arrangement]:
    """
    Run the engine on already ingested pictures.

    Args:
        pictures: Pictures in ingestion order
        engine: Engine configuration
        name: Input name for progress messages

    Returns:
        Tuple of (slide set, arrangement)

    Example:
        >>> slide_set, arrangement = arrange_pictures(parsed.pictures)
        >>> arrangement.is_permutation_of(slide_set.slides)
        True
    """
    engine = engine or EngineConfig()
    slide_set = create_slides(pictures, engine)
    arrangement = build_tour(slide_set.slides, engine, name=name)
    return slide_set, arrangement


def arrange_input(name: str, config: RunConfig) -> InputResult:
    """
    Process one named input from start to finish.

    Pipeline:
    1. Load and parse the input listing
    2. Pair vertical pictures into slides
    3. Build the tour
    4. Rate the arrangement
    5. Write the output listing (and run reports)

    Args:
        name: Input name
        config: Run configuration

    Returns:
        InputResult for the input

    Raises:
        RunError: If the input is missing or malformed
    """
    timings = TimingLog()
    logger.debug(f"Starting input {name!r}")

    try:
        with timed_phase(timings, name, "ingest"):
            parsed = load_pictures(name, config.input_dir)
    except (MissingInputError, MalformedRecordError) as e:
        raise RunError(name, str(e)) from e

    logger.debug(
        f"{name}: {parsed.horizontal_count} horizontal, "
        f"{parsed.vertical_count} vertical pictures, {len(parsed.vocabulary)} tags"
    )

    with timed_phase(timings, name, "pair"):
        slide_set = create_slides(parsed.pictures, config.engine)

    with timed_phase(timings, name, "tour"):
        arrangement = build_tour(slide_set.slides, config.engine, name=name)

    with timed_phase(timings, name, "rate"):
        score = rate_arrangement(arrangement.slides)

    with timed_phase(timings, name, "write"):
        output_path = write_arrangement(arrangement, output_path_for(name, config.output_dir))

    result = InputResult(
        name=name,
        score=score,
        arrangement=arrangement,
        picture_count=len(parsed.pictures),
        dropped_picture_ids=slide_set.dropped_picture_ids,
        output_path=output_path,
        timings=timings,
    )

    if config.write_reports:
        locked_append_jsonl(config.scores_path, result.to_record())
        timings.save(config.timing_path)

    logger.info(f"Score for {name}: {score}")
    return result


def run_inputs(config: RunConfig) -> RunSummary:
    """
    Process every input of a run.

    Inputs share no data. With input_workers > 1 they run in separate
    processes; results are still reported in configured order.

    Args:
        config: Run configuration

    Returns:
        RunSummary with per-input results and the aggregate score

    Raises:
        RunError: On the first failing input, unless keep_going is set
    """
    if config.input_workers > 1 and len(config.inputs) > 1:
        summary = _run_parallel(config)
    else:
        summary = _run_sequential(config)

    for failed_name, message in summary.failures:
        logger.error(f"No output for {failed_name}: {message}")
    logger.info(f"Total score: {summary.total_score}")
    return summary


def _run_sequential(config: RunConfig) -> RunSummary:
    results: List[InputResult] = []
    failures: List[Tuple[str, str]] = []

    for name in config.inputs:
        try:
            results.append(arrange_input(name, config))
        except RunError as e:
            if not config.keep_going:
                raise
            logger.error(str(e))
            failures.append((name, str(e)))

    return RunSummary(results=tuple(results), failures=tuple(failures))


def _run_parallel(config: RunConfig) -> RunSummary:
    """Run inputs in worker processes, forwarding their log records."""
    workers = min(config.input_workers, len(config.inputs))
    mp_log_queue = multiprocessing.Queue()
    stop_event = threading.Event()
    listener = start_log_listener(mp_log_queue, stop_event)

    results: List[InputResult] = []
    failures: List[Tuple[str, str]] = []
    try:
        with ProcessPoolExecutor(
            max_workers=workers,
            initializer=configure_worker_logging,
            initargs=(mp_log_queue, logging.getLogger().getEffectiveLevel()),
        ) as executor:
            futures: Dict[str, Future] = {
                name: executor.submit(arrange_input, name, config)
                for name in config.inputs
            }
            for name, future in futures.items():
                try:
                    results.append(future.result())
                except RunError as e:
                    if not config.keep_going:
                        executor.shutdown(wait=True, cancel_futures=True)
                        raise
                    logger.error(str(e))
                    failures.append((name, str(e)))
    finally:
        mp_log_queue.put(None)
        stop_event.set()
        listener.join()

    return RunSummary(results=tuple(results), failures=tuple(failures))
