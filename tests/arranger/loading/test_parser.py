"""
Unit tests for picture listing parsing and tag interning.
"""

import pytest

from slideshow_toolkit.core.models import Orientation
from slideshow_toolkit.arranger.loading import (
    MalformedRecordError,
    TagVocabulary,
    VocabularyBuilder,
    parse_input_text,
    parse_record,
)


class TestVocabulary:
    """Tests for VocabularyBuilder and TagVocabulary."""

    def test_intern_when_repeated_then_same_id(self):
        builder = VocabularyBuilder()
        assert builder.intern("cat") == 0
        assert builder.intern("sun") == 1
        assert builder.intern("cat") == 0
        assert len(builder) == 2

    def test_intern_all_then_sorted_and_deduplicated(self):
        builder = VocabularyBuilder()
        builder.intern("a")
        builder.intern("b")
        assert builder.intern_all(["b", "c", "a", "b"]) == (0, 1, 2)

    def test_freeze_then_tags_indexed_by_id(self):
        builder = VocabularyBuilder()
        builder.intern_all(["y", "x"])
        vocabulary = builder.freeze()
        assert vocabulary.tags == ("y", "x")
        assert len(vocabulary) == 2

    def test_init_when_duplicate_tags_then_raises_error(self):
        with pytest.raises(ValueError, match="unique"):
            TagVocabulary(("a", "a"))


class TestParseRecord:
    """Tests for parse_record."""

    def test_parse_record_when_vertical_then_sorted_tags(self):
        builder = VocabularyBuilder()
        builder.intern("z")
        picture = parse_record("V 3 q z p", 7, builder)
        assert picture.id == 7
        assert picture.orientation is Orientation.VERTICAL
        assert picture.tags == (0, 1, 2)

    def test_parse_record_when_duplicate_tag_tokens_then_deduplicated(self):
        picture = parse_record("H 3 a b a", 0, VocabularyBuilder())
        assert picture.tags == (0, 1)

    def test_parse_record_when_zero_tags_then_empty(self):
        assert parse_record("H 0", 0, VocabularyBuilder()).tags == ()

    @pytest.mark.parametrize("line,message", [
        ("X 1 cat", "Invalid orientation"),
        ("h 1 cat", "Invalid orientation"),
        ("H", "missing tag count"),
        ("H two cat dog", "not an integer"),
        ("V -1", "non-negative"),
        ("V 3 cat dog", "declares 3 tags but lists 2"),
    ])
    def test_parse_record_when_malformed_then_raises_error(self, line, message):
        with pytest.raises(MalformedRecordError, match=message):
            parse_record(line, 0, VocabularyBuilder(), source="b.txt", line_number=4)

    def test_malformed_record_error_then_carries_location(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_record("Q 0", 0, VocabularyBuilder(), source="b.txt", line_number=4)
        assert exc_info.value.source == "b.txt"
        assert exc_info.value.line_number == 4
        assert str(exc_info.value).startswith("b.txt:4:")


class TestParseInputText:
    """Tests for parse_input_text."""

    def test_parse_input_text_when_example_then_pictures_in_order(self, example_listing):
        parsed = parse_input_text(example_listing)
        assert parsed.declared_count == 4
        assert [p.id for p in parsed.pictures] == [0, 1, 2, 3]
        assert parsed.horizontal_count == 2
        assert parsed.vertical_count == 2
        # cat=0 beach=1 sun=2 selfie=3 smile=4 garden=5
        assert [p.tags for p in parsed.pictures] == [(0, 1, 2), (3, 4), (3, 5), (0, 5)]
        assert len(parsed.vocabulary) == 6

    def test_parse_input_text_when_blank_lines_then_skipped(self):
        parsed = parse_input_text("2\n\nH 1 a\n\nV 1 b\n\n")
        assert [p.id for p in parsed.pictures] == [0, 1]

    def test_parse_input_text_when_count_mismatch_then_warns(self, caplog):
        parsed = parse_input_text("5\nH 1 a\n", source="x.txt")
        assert len(parsed.pictures) == 1
        assert "header declares 5 pictures but 1 records were read" in caplog.text

    def test_parse_input_text_when_header_missing_then_raises_error(self):
        with pytest.raises(MalformedRecordError, match="missing picture count"):
            parse_input_text("")

    def test_parse_input_text_when_header_not_integer_then_raises_error(self):
        with pytest.raises(MalformedRecordError, match="picture count is not an integer"):
            parse_input_text("four\nH 1 a\n")

    def test_parse_input_text_when_bad_record_then_reports_line_number(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_input_text("2\nH 1 a\nW 1 b\n", source="c.txt")
        assert exc_info.value.line_number == 3
