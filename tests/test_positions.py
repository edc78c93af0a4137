"""Tests for line/offset translation."""

import pytest

from stampnotes.positions import (
    from_offset_space,
    line_to_offset,
    offset_to_line,
    to_offset_space,
)

DOCUMENTS = [
    [""],
    ["hello"],
    ["hello", "world"],
    ["", "", "a", ""],
    ["first line", "", "third", "x", ""],
]


class TestLineToOffset:
    def test_first_line_starts_at_zero(self):
        assert line_to_offset(["abc", "de"], 0) == 0

    def test_counts_separators(self):
        assert line_to_offset(["abc", "de", "f"], 2) == 7

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            line_to_offset(["a"], 1)


class TestOffsetToLine:
    def test_inside_line(self):
        assert offset_to_line(["hello", "world"], 2) == 0
        assert offset_to_line(["hello", "world"], 8) == 1

    def test_newline_position_belongs_to_its_line(self):
        assert offset_to_line(["ab", "cd"], 2) == 0

    def test_line_start_belongs_to_that_line(self):
        assert offset_to_line(["ab", "cd"], 3) == 1

    def test_document_end_belongs_to_last_line(self):
        assert offset_to_line(["ab", "cd"], 5) == 1

    def test_out_of_range_is_none(self):
        assert offset_to_line(["ab", "cd"], 6) is None
        assert offset_to_line(["ab"], -1) is None

    @pytest.mark.parametrize("lines", DOCUMENTS)
    def test_round_trip(self, lines):
        for i in range(len(lines)):
            assert offset_to_line(lines, line_to_offset(lines, i)) == i


class TestMapConversion:
    def test_to_offset_space(self):
        lines = ["hello", "world", "again"]
        assert to_offset_space(lines, {0: 1, 2: 3}) == {0: 1, 12: 3}

    def test_to_offset_space_skips_missing_lines(self):
        assert to_offset_space(["a"], {4: 9}) == {}

    def test_from_offset_space(self):
        lines = ["hello", "world"]
        assert from_offset_space(lines, {0: 1000, 6: 3000, 99: 5}) == {0: 1000, 1: 3000}

    def test_from_offset_space_lowest_offset_wins(self):
        lines = ["hello", "world"]
        assert from_offset_space(lines, {9: 2, 6: 1}) == {1: 1}
