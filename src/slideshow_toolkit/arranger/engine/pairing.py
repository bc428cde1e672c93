"""
Module: arranger.engine.pairing

Purpose:
    Turn ingested pictures into slides. Horizontal pictures pass through
    as single-picture slides; vertical pictures are combined into
    composite slides by greedy minimum-overlap matching so that each
    composite carries as many distinct tags as possible.

Key Functions:
    - create_slides(): Main entry point, returns a SlideSet
    - pair_vertical_pictures(): The greedy matching itself
    - find_partner_index(): Minimum-overlap scan for one picture

Algorithm:
    1. Order vertical pictures by descending tag count (stable)
    2. Take the front picture, scan the rest for the lowest common_count,
       stopping at the first zero-overlap partner
    3. Remove both, emit a composite slide with the merged tags
    4. Repeat while at least two pictures remain

Dependencies:
    - slideshow_toolkit.core.scoring: common_count, merge_tags
    - arranger.engine.config: EngineConfig

Used By:
    - arranger.controller: Per-input pipeline
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from slideshow_toolkit.core.models import Picture, Slide, SlideSet
from slideshow_toolkit.core.scoring import common_count, merge_tags

from .config import EngineConfig
from .odd_vertical import OddVerticalPolicy

logger = logging.getLogger(__name__)


def create_slides(
    pictures: Sequence[Picture],
    config: Optional[EngineConfig] = None,
) -> SlideSet:
    """
    Build the full slide set for one input.

    Args:
        pictures: All pictures of the input, in ingestion order
        config: Engine configuration (odd vertical policy)

    Returns:
        SlideSet with horizontal slides first (ingestion order), then
        composite slides (pairing order)

    Invariants:
        - Every horizontal picture appears in exactly one slide
        - Every vertical picture appears in at most one slide
        - V even => exactly V/2 composite slides

    Example:
        >>> slide_set = create_slides(pictures)
        >>> slide_set.composite_count
        2
    """
    config = config or EngineConfig()

    horizontal_slides = [Slide.from_picture(p) for p in pictures if not p.is_vertical]
    vertical_pictures = [p for p in pictures if p.is_vertical]

    composite_slides, leftover = pair_vertical_pictures(vertical_pictures)

    dropped: Tuple[int, ...] = ()
    if leftover is not None:
        if config.odd_vertical_policy is OddVerticalPolicy.SINGLE:
            logger.info(f"Keeping unpaired vertical picture {leftover.id} as a single slide")
            composite_slides.append(Slide.from_picture(leftover))
        else:
            logger.warning(f"Dropping unpaired vertical picture {leftover.id} (odd vertical count)")
            dropped = (leftover.id,)

    logger.debug(
        f"Created {len(horizontal_slides)} horizontal and "
        f"{len(composite_slides)} vertical slides from {len(pictures)} pictures"
    )

    return SlideSet(
        slides=tuple(horizontal_slides + composite_slides),
        dropped_picture_ids=dropped,
    )


def pair_vertical_pictures(
    pictures: Sequence[Picture],
) -> Tuple[List[Slide], Optional[Picture]]:
    """
    Greedily pair vertical pictures into composite slides.

    Args:
        pictures: Vertical pictures in ingestion order

    Returns:
        Tuple of (composite slides in pairing order, leftover picture or
        None when the count was even)
    """
    # sorted() is stable, so equal tag counts keep ingestion order
    pool: List[Picture] = sorted(pictures, key=lambda p: -p.tag_count)
    slides: List[Slide] = []

    while len(pool) >= 2:
        current = pool.pop(0)
        partner = pool.pop(find_partner_index(current, pool))
        slides.append(Slide.composite(current, partner, merge_tags(current.tags, partner.tags)))

    leftover = pool[0] if pool else None
    return slides, leftover


def find_partner_index(current: Picture, candidates: Sequence[Picture]) -> int:
    """
    Index of the candidate sharing the fewest tags with current.

    The first candidate reaching the minimum wins. The scan stops as soon
    as a candidate with no common tags is found.

    Args:
        current: Picture looking for a partner
        candidates: Non-empty remaining pool

    Returns:
        Index into candidates
    """
    if not candidates:
        raise ValueError(f"No partner candidates left for picture {current.id}")

    best_index = 0
    best_overlap: Optional[int] = None
    for index, candidate in enumerate(candidates):
        overlap = common_count(current.tags, candidate.tags)
        if best_overlap is None or overlap < best_overlap:
            best_overlap = overlap
            best_index = index
        if overlap == 0:
            break
    return best_index
