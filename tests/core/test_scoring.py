"""
Unit tests for tag scoring primitives.
"""

import itertools
import os
import subprocess
import sys
from pathlib import Path

import pytest

from slideshow_toolkit.core.models import Arrangement, Slide
from slideshow_toolkit.core.scoring import (
    common_count,
    interest_score,
    merge_tags,
    rate_arrangement,
    transition_scores,
    waste,
)

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


TAG_SETS = [
    (),
    (1,),
    (1, 2, 3),
    (2, 3, 4),
    (0, 5, 9, 12),
    (3, 4, 5, 6, 7, 8),
    (100, 200),
]


class TestCommonCount:
    """Tests for common_count."""

    def test_common_count_when_overlapping_then_counts_shared(self):
        assert common_count((1, 2, 3), (2, 3, 4)) == 2

    def test_common_count_when_disjoint_then_zero(self):
        assert common_count((1, 3, 5), (2, 4, 6)) == 0

    def test_common_count_when_empty_side_then_zero(self):
        assert common_count((), (1, 2)) == 0
        assert common_count((1, 2), ()) == 0

    def test_common_count_when_identical_then_full_length(self):
        assert common_count((4, 8, 15, 16), (4, 8, 15, 16)) == 4

    def test_common_count_when_swapped_then_symmetric(self):
        for left, right in itertools.product(TAG_SETS, repeat=2):
            assert common_count(left, right) == common_count(right, left)

    def test_common_count_when_compared_to_set_intersection_then_equal(self):
        for left, right in itertools.product(TAG_SETS, repeat=2):
            assert common_count(left, right) == len(set(left) & set(right))


class TestInterestScore:
    """Tests for interest_score."""

    def test_interest_score_when_example_then_one(self):
        # common=2, left-only=1, right-only=1
        assert interest_score((1, 2, 3), (2, 3, 4)) == 1

    def test_interest_score_when_disjoint_then_zero(self):
        assert interest_score((1, 2, 3), (4, 5, 6)) == 0

    def test_interest_score_when_identical_then_zero(self):
        assert interest_score((1, 2), (1, 2)) == 0

    def test_interest_score_when_any_pair_then_bounded_by_smaller_set(self):
        for left, right in itertools.product(TAG_SETS, repeat=2):
            assert interest_score(left, right) <= min(len(left), len(right))

    def test_interest_score_when_composite_slides_then_zero(self):
        assert interest_score((1, 2, 3, 4), (5, 6, 7)) == 0


class TestWaste:
    """Tests for waste."""

    def test_waste_when_example_then_one(self):
        # (1-1) + (1-1) + (2-1)
        assert waste((1, 2, 3), (2, 3, 4)) == 1

    def test_waste_when_balanced_overlap_then_zero(self):
        # common=2, left-only=2, right-only=2
        assert waste((1, 2, 3, 4), (3, 4, 5, 6)) == 0

    def test_waste_when_disjoint_then_total_tags(self):
        assert waste((1, 2), (3, 4, 5)) == 5

    @pytest.mark.parametrize("left,right", list(itertools.product(TAG_SETS, repeat=2)))
    def test_waste_when_any_pair_then_matches_definition(self, left, right):
        common = len(set(left) & set(right))
        score = interest_score(left, right)
        expected = (len(left) - common - score) + (len(right) - common - score) + (common - score)
        assert waste(left, right) == expected


class TestMergeTags:
    """Tests for merge_tags."""

    def test_merge_tags_when_overlapping_then_sorted_union(self):
        assert merge_tags((5, 6), (5, 7)) == (5, 6, 7)

    def test_merge_tags_when_disjoint_then_all_tags(self):
        assert merge_tags((3, 4), (1, 2)) == (1, 2, 3, 4)

    def test_merge_tags_when_empty_then_other_side(self):
        assert merge_tags((), (2, 9)) == (2, 9)

    def test_merge_tags_then_returns_python_ints(self):
        merged = merge_tags((1,), (2,))
        assert all(type(tag) is int for tag in merged)


class TestRateArrangement:
    """Tests for the rater living in core.scoring."""

    def test_rate_arrangement_when_core_only_then_matches_score(self):
        slides = (Slide(0, None, (1, 2, 3)), Slide(1, None, (2, 3, 4)), Slide(2, None, (4, 5)))
        assert transition_scores(slides) == [1, 1]
        assert rate_arrangement(slides) == Arrangement(slides).score == 2

    def test_rate_arrangement_when_imported_from_engine_then_same_function(self):
        from slideshow_toolkit.arranger.engine import rating

        assert rating.rate_arrangement is rate_arrangement

    def test_core_import_then_arranger_not_loaded(self):
        code = (
            "import sys; import slideshow_toolkit.core as core; "
            "core.Arrangement((core.Slide(0, None, (1,)),)).score; "
            "sys.exit(any(m.startswith('slideshow_toolkit.arranger') for m in sys.modules))"
        )
        env = {**os.environ, "PYTHONPATH": str(SRC_DIR)}
        completed = subprocess.run([sys.executable, "-c", code], env=env)
        assert completed.returncode == 0
