"""Tests for timestamp index renumbering."""

from stampnotes.lines import INSERT, REMOVE, LineDelta
from stampnotes.timestamps import TimestampIndex


class TestApply:
    def test_insert_shifts_anchors_at_or_after(self):
        index = TimestampIndex({0: 100, 2: 200, 3: 300})
        index.apply(LineDelta(INSERT, 2))
        assert index.as_dict() == {0: 100, 3: 200, 4: 300}
        assert 2 not in index

    def test_remove_drops_anchor_and_shifts_down(self):
        index = TimestampIndex({0: 100, 2: 200, 3: 300})
        index.apply(LineDelta(REMOVE, 2))
        assert index.as_dict() == {0: 100, 2: 300}

    def test_remove_without_anchor_only_shifts(self):
        index = TimestampIndex({0: 100, 4: 400})
        index.apply(LineDelta(REMOVE, 1))
        assert index.as_dict() == {0: 100, 3: 400}

    def test_insert_then_remove_restores(self):
        index = TimestampIndex({1: 10, 5: 50})
        index.apply(LineDelta(INSERT, 3))
        index.apply(LineDelta(REMOVE, 3))
        assert index.as_dict() == {1: 10, 5: 50}


class TestEntries:
    def test_get_missing_is_none(self):
        assert TimestampIndex().get(7) is None

    def test_remove_missing_is_noop(self):
        index = TimestampIndex({1: 5})
        index.remove(9)
        assert index.as_dict() == {1: 5}

    def test_set_clamps_negative_time(self):
        index = TimestampIndex()
        index.set(0, -50)
        assert index.get(0) == 0

    def test_iteration_is_sorted(self):
        index = TimestampIndex({3: 1, 0: 2, 1: 3})
        assert list(index) == [0, 1, 3]
        assert len(index) == 3
