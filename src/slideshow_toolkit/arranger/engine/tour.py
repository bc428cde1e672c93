"""
Module: arranger.engine.tour

Purpose:
    Order the slide set into an Arrangement by greedy nearest-neighbour
    path construction. Each step commits to the remaining slide with the
    lowest waste relative to the current slide; there is no backtracking.

Key Functions:
    - build_tour(): Main entry point, returns an Arrangement
    - select_next(): One parallel scan-and-reduce step

Algorithm:
    1. Start from the slide at the pool's first position
    2. Remove the current slide from the pool, append it to the tour
    3. Partition the remaining pool into chunks, reduce each chunk to its
       minimum-waste candidate with array arithmetic, combine partial
       minima with min-by-key
    4. The winner becomes the current slide; repeat until the pool is empty

Dependencies:
    - concurrent.futures: Parallel chunk reduction
    - numpy: Per-chunk waste and minimum search
    - arranger.engine.overlap: Common tag counts per step

Used By:
    - arranger.controller: Per-input pipeline
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from contextlib import nullcontext
from typing import Iterable, List, NamedTuple, Optional

import numpy as np

from slideshow_toolkit.core.models import Arrangement, Slide

from .config import EngineConfig
from .overlap import TagIndex, waste_counts
from .pool import SlidePool

logger = logging.getLogger(__name__)


class Candidate(NamedTuple):
    """Best candidate found by one chunk reduction."""
    waste: int
    slide_index: int
    position: int  # position in the pool scan order


def build_tour(
    slides: Iterable[Slide],
    config: Optional[EngineConfig] = None,
    *,
    name: str = "",
) -> Arrangement:
    """
    Arrange slides by greedy minimum-waste nearest neighbour.

    Args:
        slides: Full slide set (any order; the first slide starts the tour)
        config: Engine configuration (workers, tie-breaking, progress)
        name: Input name used in progress messages

    Returns:
        Arrangement that is a permutation of slides

    Invariants:
        - len(result) == len(slides)
        - With deterministic_ties, the result does not depend on workers

    Example:
        >>> arrangement = build_tour(slide_set.slides, EngineConfig(workers=4), name="b")
        >>> arrangement.is_permutation_of(slide_set.slides)
        True
    """
    config = config or EngineConfig()
    slides = tuple(slides)
    if not slides:
        return Arrangement(())

    index = TagIndex([slide.tags for slide in slides])
    pool = SlidePool(len(slides))
    order: List[int] = []
    current = pool.first()

    executor_cm = ThreadPoolExecutor(max_workers=config.workers) if config.is_parallel else nullcontext()
    with executor_cm as executor:
        while True:
            if len(pool) % config.progress_interval == 0:
                logger.info(f"Slides remaining for {name}: {len(pool)}")

            pool.remove(current)
            order.append(current)
            if not pool:
                break

            current = select_next(index, current, pool, config, executor)

    return Arrangement(tuple(slides[i] for i in order))


def select_next(
    index: TagIndex,
    current: int,
    pool: SlidePool,
    config: EngineConfig,
    executor: Optional[Executor] = None,
) -> int:
    """
    Slide index in the pool with the lowest waste against current.

    Common tag counts against every slide come from one index lookup;
    the chunks then reduce slices of them in parallel.

    Args:
        index: Tag index over the tour's slide set
        current: Slide index just appended to the tour
        pool: Non-empty remaining pool (read-only during the scan)
        config: Engine configuration
        executor: Thread pool for chunk reductions, None for sequential

    Returns:
        Winning slide index
    """
    common = index.common_counts(current)
    current_size = int(index.sizes[current])
    members = pool.members
    chunks = pool.chunks(config.chunk_count(len(pool)))
    deterministic = config.deterministic_ties

    def reduce(chunk: range) -> Candidate:
        candidates = members[chunk.start:chunk.stop]
        wastes = waste_counts(common[candidates], current_size, index.sizes[candidates])
        return reduce_chunk(wastes, candidates, chunk.start, deterministic)

    if executor is None or len(chunks) == 1:
        partials = [reduce(chunk) for chunk in chunks]
    else:
        partials = list(executor.map(reduce, chunks))

    return combine_candidates(partials, deterministic).slide_index


def reduce_chunk(
    wastes: np.ndarray,
    candidates: np.ndarray,
    offset: int,
    deterministic: bool,
) -> Candidate:
    """
    Minimum-waste candidate within one contiguous slice of the pool.

    Ties go to the lowest slide index when deterministic, otherwise to
    the first candidate in scan order.

    Args:
        wastes: Waste of each candidate against the current slide
        candidates: Slide indices of the slice, in scan order
        offset: Pool position of the slice's first candidate
        deterministic: Tie-break on slide index instead of position
    """
    if deterministic:
        tied = np.flatnonzero(wastes == wastes.min())
        best = int(tied[np.argmin(candidates[tied])])
    else:
        best = int(np.argmin(wastes))

    return Candidate(
        waste=int(wastes[best]),
        slide_index=int(candidates[best]),
        position=offset + best,
    )


def combine_candidates(partials: Iterable[Candidate], deterministic: bool) -> Candidate:
    """
    Combine chunk minima into the global minimum.

    The key is unique per candidate, so the combine is commutative and
    associative regardless of how the pool was partitioned.
    """
    if deterministic:
        return min(partials, key=lambda c: (c.waste, c.slide_index))
    return min(partials, key=lambda c: (c.waste, c.position))
