"""Tests for the line model."""

import pytest

from stampnotes.lines import INSERT, REMOVE, LineDelta, LineModel


class TestConstruction:
    def test_empty_document_has_one_line(self):
        model = LineModel()
        assert model.lines == [""]
        assert len(model) == 1

    def test_from_text_splits_on_newline(self):
        model = LineModel.from_text("a\n\nb")
        assert model.lines == ["a", "", "b"]
        assert model.text == "a\n\nb"

    def test_rejects_newline_in_line(self):
        with pytest.raises(ValueError):
            LineModel(["a\nb"])


class TestSetLine:
    def test_replaces_content(self):
        model = LineModel(["a", "b"])
        assert model.set_line(1, "bee") is None
        assert model.lines == ["a", "bee"]

    def test_empty_value_deletes_line(self):
        model = LineModel(["a", "b", "c"])
        delta = model.set_line(1, "")
        assert delta == LineDelta(REMOVE, 1)
        assert model.lines == ["a", "c"]

    def test_empty_value_keeps_only_line(self):
        model = LineModel(["a"])
        assert model.set_line(0, "") is None
        assert model.lines == [""]

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            LineModel(["a"]).set_line(3, "x")


class TestStructuralEdits:
    def test_split_inserts_tail_after(self):
        model = LineModel(["ab"])
        delta = model.split_line(0, 1)
        assert delta == LineDelta(INSERT, 1)
        assert model.lines == ["a", "b"]

    def test_split_at_end_creates_empty_line(self):
        model = LineModel(["ab", "c"])
        model.split_line(0, 2)
        assert model.lines == ["ab", "", "c"]

    def test_split_offset_is_clamped(self):
        model = LineModel(["ab"])
        model.split_line(0, 99)
        assert model.lines == ["ab", ""]

    def test_merge_with_previous(self):
        model = LineModel(["hello", "world", "!"])
        delta = model.merge_with_previous(1)
        assert delta == LineDelta(REMOVE, 1)
        assert model.lines == ["helloworld", "!"]

    def test_merge_first_line_raises(self):
        with pytest.raises(ValueError):
            LineModel(["a", "b"]).merge_with_previous(0)

    def test_delete_line(self):
        model = LineModel(["a", "b"])
        assert model.delete_line(0) == LineDelta(REMOVE, 0)
        assert model.lines == ["b"]

    def test_delete_only_line_raises(self):
        with pytest.raises(ValueError):
            LineModel(["a"]).delete_line(0)

    def test_insert_line(self):
        model = LineModel(["a", "c"])
        assert model.insert_line(1, "b") == LineDelta(INSERT, 1)
        assert model.lines == ["a", "b", "c"]

    def test_insert_line_at_end(self):
        model = LineModel(["a"])
        model.insert_line(1)
        assert model.lines == ["a", ""]
