"""
Module: common.timing

Purpose:
    Timing instrumentation for the arranging pipeline. Records how long
    each phase (ingest, pair, tour, rate, write) took for each input.

Key Classes:
    - TimingLog: Collects per-input phase durations

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - common.file_locking: Merged report writing

Used By:
    - arranger.controller: Per-input pipeline, RunSummary.timings
    - cli: Timing summary under --verbose
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Phase durations per input.

    Attributes:
        input_timings: input name -> {phase name -> seconds}

    Example:
        >>> log = TimingLog()
        >>> log.log("b", "tour", 12.5)
        >>> log.total("b")
        12.5
    """
    input_timings: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def log(self, input_name: str, phase: str, duration: float) -> None:
        """Record one phase duration (accumulates on repeat)."""
        phases = self.input_timings.setdefault(input_name, {})
        phases[phase] = phases.get(phase, 0.0) + duration

    def total(self, input_name: str) -> float:
        """Total recorded time for one input."""
        return sum(self.input_timings.get(input_name, {}).values())

    def merge(self, other: TimingLog) -> None:
        """Fold another log (e.g. from a worker process) into this one."""
        for input_name, phases in other.input_timings.items():
            for phase, duration in phases.items():
                self.log(input_name, phase, duration)

    def slowest_phases(self) -> List[Tuple[str, str, float]]:
        """(input, phase, seconds) of the slowest phase of every input."""
        results = []
        for input_name, phases in self.input_timings.items():
            if phases:
                phase, duration = max(phases.items(), key=lambda x: x[1])
                results.append((input_name, phase, duration))
        results.sort(key=lambda x: x[2], reverse=True)
        return results

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Arrangement Timing Summary ==="]
        for input_name in sorted(self.input_timings):
            lines.append(f"{input_name}: {self.total(input_name):.3f}s")
            for phase, duration in self.input_timings[input_name].items():
                lines.append(f"  {phase:10s} {duration:.3f}s")

        slowest = self.slowest_phases()
        if slowest:
            lines.append("Slowest phases:")
            for input_name, phase, duration in slowest:
                lines.append(f"  {input_name}: {phase} ({duration:.3f}s)")
        lines.append("")
        return "\n".join(lines)

    def save(self, path: Path) -> None:
        """
        Merge this log into a JSON timing report.

        PARALLEL SAFE: the report is updated under an exclusive file lock,
        so inputs running in separate processes can share one report.
        Entries for the same input are replaced, not accumulated.
        """
        from .file_locking import locked_read_modify_write_json

        def merge_timing_data(existing: Dict[str, Any]) -> Dict[str, Any]:
            timings = existing.setdefault("input_timings", {})
            timings.update(self.input_timings)
            existing["input_totals"] = {
                name: sum(phases.values()) for name, phases in timings.items()
            }
            return existing

        locked_read_modify_write_json(
            path,
            merge_timing_data,
            default=lambda: {"input_timings": {}, "input_totals": {}},
        )
        logger.debug(f"Merged timing data to {path}")


@contextmanager
def timed_phase(log: TimingLog, input_name: str, phase: str) -> Iterator[None]:
    """
    Time a block and record it in log.

    The duration is recorded even if the block raises.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "b", "tour"):
        ...     arrangement = build_tour(slides)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        log.log(input_name, phase, time.perf_counter() - start)
