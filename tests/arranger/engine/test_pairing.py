"""
Unit tests for vertical picture pairing.
"""

import pytest

from slideshow_toolkit.core.models import Orientation, Picture
from slideshow_toolkit.arranger.engine import EngineConfig, OddVerticalPolicy, create_slides
from slideshow_toolkit.arranger.engine.pairing import find_partner_index, pair_vertical_pictures


def make_picture(pid: int, tags, vertical: bool = True) -> Picture:
    """Helper to create a picture with sorted tags."""
    orientation = Orientation.VERTICAL if vertical else Orientation.HORIZONTAL
    return Picture(pid, orientation, tuple(sorted(set(tags))))


class TestFindPartnerIndex:
    """Tests for find_partner_index."""

    def test_find_partner_index_when_disjoint_candidate_then_chosen(self):
        current = make_picture(0, [1, 2, 3])
        candidates = [make_picture(1, [1, 2]), make_picture(2, [3]), make_picture(3, [7, 8])]
        assert find_partner_index(current, candidates) == 2

    def test_find_partner_index_when_tied_then_first_wins(self):
        current = make_picture(0, [1, 2, 3])
        candidates = [make_picture(1, [1, 9]), make_picture(2, [2, 8]), make_picture(3, [1, 2])]
        assert find_partner_index(current, candidates) == 0

    def test_find_partner_index_when_zero_overlap_then_first_zero_wins(self):
        current = make_picture(0, [1])
        candidates = [make_picture(1, [1]), make_picture(2, [5]), make_picture(3, [6])]
        assert find_partner_index(current, candidates) == 1

    def test_find_partner_index_when_no_candidates_then_raises_error(self):
        with pytest.raises(ValueError, match="No partner"):
            find_partner_index(make_picture(0, [1]), [])


class TestPairVerticalPictures:
    """Tests for pair_vertical_pictures."""

    def test_pair_when_two_pictures_then_merged_tags(self):
        slides, leftover = pair_vertical_pictures([make_picture(0, [1, 2]), make_picture(1, [3, 4])])
        assert leftover is None
        assert len(slides) == 1
        assert slides[0].picture_ids == (0, 1)
        assert slides[0].tags == (1, 2, 3, 4)

    def test_pair_when_shared_tags_then_deduplicated(self):
        slides, _ = pair_vertical_pictures([make_picture(0, [5, 6]), make_picture(1, [5, 7])])
        assert slides[0].tags == (5, 6, 7)

    def test_pair_when_largest_first_then_largest_is_primary(self):
        pictures = [
            make_picture(0, [1]),
            make_picture(1, [2, 3, 4]),
            make_picture(2, [1, 5]),
            make_picture(3, [9]),
        ]
        slides, _ = pair_vertical_pictures(pictures)
        # Pool order is [1, 2, 0, 3]; picture 2 is the first disjoint partner of 1
        assert slides[0].picture_ids == (1, 2)
        assert slides[1].picture_ids == (0, 3)

    def test_pair_when_equal_tag_counts_then_ingestion_order_kept(self):
        pictures = [make_picture(i, [i * 10, i * 10 + 1]) for i in range(4)]
        slides, _ = pair_vertical_pictures(pictures)
        assert [s.picture_ids for s in slides] == [(0, 1), (2, 3)]

    def test_pair_when_minimum_overlap_then_avoids_shared_tags(self):
        pictures = [
            make_picture(0, [1, 2, 3]),
            make_picture(1, [1, 2]),
            make_picture(2, [3, 4]),
            make_picture(3, [5, 6]),
        ]
        slides, _ = pair_vertical_pictures(pictures)
        assert slides[0].picture_ids == (0, 3)
        assert slides[1].picture_ids == (1, 2)

    def test_pair_when_odd_count_then_one_leftover(self):
        pictures = [make_picture(i, [i]) for i in range(5)]
        slides, leftover = pair_vertical_pictures(pictures)
        assert len(slides) == 2
        assert leftover is not None
        used = {pid for s in slides for pid in s.picture_ids}
        assert leftover.id not in used

    def test_pair_when_empty_then_nothing(self):
        assert pair_vertical_pictures([]) == ([], None)


class TestCreateSlides:
    """Tests for create_slides."""

    def test_create_slides_when_mixed_then_horizontal_first(self):
        pictures = [
            make_picture(0, [1], vertical=True),
            make_picture(1, [2], vertical=False),
            make_picture(2, [3], vertical=True),
            make_picture(3, [4], vertical=False),
        ]
        slide_set = create_slides(pictures)
        assert [s.picture_ids for s in slide_set] == [(1,), (3,), (0, 2)]

    def test_create_slides_when_even_verticals_then_half_as_many_composites(self):
        pictures = [make_picture(i, [i, i + 100]) for i in range(10)]
        slide_set = create_slides(pictures)
        assert slide_set.composite_count == 5
        assert slide_set.dropped_picture_ids == ()

    def test_create_slides_when_any_input_then_no_picture_reused(self):
        pictures = [make_picture(i, [i % 3, i % 5 + 10, i % 7 + 20]) for i in range(21)]
        slide_set = create_slides(pictures)
        ids = [pid for s in slide_set for pid in s.picture_ids]
        assert len(ids) == len(set(ids))

    def test_create_slides_when_odd_and_drop_then_reported(self, caplog):
        pictures = [make_picture(0, [1, 2]), make_picture(1, [3]), make_picture(2, [4])]
        slide_set = create_slides(pictures, EngineConfig(odd_vertical_policy=OddVerticalPolicy.DROP))
        assert len(slide_set) == 1
        assert slide_set.dropped_picture_ids == (2,)
        assert "Dropping unpaired vertical picture 2" in caplog.text

    def test_create_slides_when_odd_and_single_then_kept_as_slide(self):
        pictures = [make_picture(0, [1, 2]), make_picture(1, [3]), make_picture(2, [4])]
        slide_set = create_slides(pictures, EngineConfig(odd_vertical_policy=OddVerticalPolicy.SINGLE))
        assert [s.picture_ids for s in slide_set] == [(0, 1), (2,)]
        assert slide_set.dropped_picture_ids == ()
