"""
Module: arranger.engine.config

Purpose:
    Configuration dataclass for the pairing engine and tour builder.
    Immutable configuration with validation on construction.

Key Classes:
    - EngineConfig: Worker count, tie-breaking and progress settings

Dependencies:
    - dataclasses (std)

Used By:
    - arranger.engine.pairing: Odd vertical policy
    - arranger.engine.tour: Parallel scan settings
    - arranger.config: RunConfig
"""

from __future__ import annotations

from dataclasses import dataclass

from .odd_vertical import OddVerticalPolicy


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for the arranging engine (immutable).

    Attributes:
        workers: Threads used for each tour step's candidate scan.
                 1 scans sequentially in the calling thread.
        min_chunk_size: Smallest pool slice handed to one worker. Pools
                        smaller than two chunks are scanned sequentially.
        deterministic_ties: Break equal-waste ties on the lowest original
                            slide index instead of pool scan position, so
                            the tour does not depend on partitioning.
        odd_vertical_policy: What to do with an unpaired vertical picture
        progress_interval: Log remaining slide count every N slides

    Invariants:
        - workers >= 1
        - min_chunk_size >= 1
        - progress_interval >= 1

    Example:
        >>> config = EngineConfig(workers=4)
        >>> config.is_parallel
        True
    """

    # Tour scan
    workers: int = 1
    min_chunk_size: int = 2048
    deterministic_ties: bool = True

    # Pairing
    odd_vertical_policy: OddVerticalPolicy = OddVerticalPolicy.DROP

    # Reporting
    progress_interval: int = 10000

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1: {self.workers}")
        if self.min_chunk_size < 1:
            raise ValueError(f"min_chunk_size must be at least 1: {self.min_chunk_size}")
        if self.progress_interval < 1:
            raise ValueError(f"progress_interval must be at least 1: {self.progress_interval}")

    @property
    def is_parallel(self) -> bool:
        return self.workers > 1

    def chunk_count(self, pool_size: int) -> int:
        """
        Number of chunks to split a scan of pool_size candidates into.

        Args:
            pool_size: Remaining candidates for this step

        Returns:
            Between 1 and workers, never leaving a chunk below min_chunk_size
        """
        if not self.is_parallel:
            return 1
        return max(1, min(self.workers, pool_size // self.min_chunk_size))
