"""
Module: arranger.config

Purpose:
    Configuration dataclass for a run over a set of named inputs.
    Immutable configuration with validation on construction.

Key Classes:
    - RunConfig: Inputs, directories, concurrency and failure policy

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - arranger.controller: run_inputs / arrange_input
    - cli: Built from command line arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple

from .engine.config import EngineConfig
from .loading.loader import DEFAULT_INPUTS
from .output.writer import output_path_for


@dataclass(frozen=True)
class RunConfig:
    """
    Configuration for one run (immutable).

    Attributes:
        inputs: Named inputs to process, in reporting order
        input_dir: Directory holding the input listings
        output_dir: Directory for output listings and reports
        engine: Pairing/tour configuration shared by all inputs
        input_workers: Processes used across inputs (1 = sequential)
        keep_going: Record failed inputs and continue instead of aborting
        write_reports: Append scores.jsonl and merge timing.json

    Invariants:
        - inputs is non-empty and has no duplicates
        - no two inputs share an output file
        - input_workers >= 1

    Example:
        >>> config = RunConfig(inputs=("a", "b"), input_dir=Path("inputs"))
        >>> config.output_dir
        PosixPath('.')
    """

    inputs: Tuple[str, ...] = DEFAULT_INPUTS
    input_dir: Path = Path("inputs")
    output_dir: Path = Path(".")
    engine: EngineConfig = field(default_factory=EngineConfig)

    # Concurrency / failure policy
    input_workers: int = 1
    keep_going: bool = False

    # Reports
    write_reports: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Accept any iterable of names, store a tuple
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "input_dir", Path(self.input_dir))
        object.__setattr__(self, "output_dir", Path(self.output_dir))

        if not self.inputs:
            raise ValueError("At least one input name is required")
        if len(set(self.inputs)) != len(self.inputs):
            raise ValueError(f"Duplicate input names: {self.inputs}")
        outputs: Dict[str, str] = {}
        for name in self.inputs:
            output_name = output_path_for(name, self.output_dir).name
            if output_name in outputs:
                raise ValueError(
                    f"Inputs {outputs[output_name]!r} and {name!r} would both write {output_name}"
                )
            outputs[output_name] = name
        if self.input_workers < 1:
            raise ValueError(f"input_workers must be at least 1: {self.input_workers}")

    @property
    def scores_path(self) -> Path:
        return self.output_dir / "scores.jsonl"

    @property
    def timing_path(self) -> Path:
        return self.output_dir / "timing.json"
