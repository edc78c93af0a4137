"""Tests for the notes editing session, including end-to-end scenarios."""

import random

from stampnotes.seek import SeekRequest
from stampnotes.session import NotesSession, format_time


class FakeNow:
    def __init__(self, value: int = 0) -> None:
        self.value = value

    def __call__(self) -> int:
        return self.value


def _recording_session(text: str = "", timestamps=None, start: int = 1_000_000):
    now = FakeNow(start)
    session = NotesSession(text, timestamps, now=now)
    session.start_recording()
    return session, now


class TestScenarios:
    def test_first_character_while_recording(self):
        session, now = _recording_session()
        now.value += 500
        result = session.set_line(0, "a")
        assert result.anchored == [0]
        assert session.line_timestamps() == {0: 0}

    def test_backspace_at_line_start_merges_and_drops_anchor(self):
        session = NotesSession("hello\nworld", {1: 3000})
        result = session.press_backspace(1, 0)
        assert session.lines == ["helloworld"]
        assert session.line_timestamps() == {}
        assert result.focus == (0, 5)

    def test_enter_splits_and_anchors_new_line(self):
        session, now = _recording_session("ab", {0: 100}, start=0)
        now.value = 5000
        result = session.press_enter(0, 1)
        assert session.lines == ["a", "b"]
        assert session.line_timestamps() == {0: 100, 1: 3000}
        assert result.anchored == [1]
        assert result.focus == (1, 0)

    def test_offset_anchor_follows_insert_before_it(self):
        first = "hello world"
        second = "x" * 28
        session = NotesSession(f"{first}\n{second}", {1: 7000})
        assert len(session.notes) == 40
        assert session.offset_timestamps() == {12: 7000}
        session.insert_text(0, 10, "ABCDE")
        assert session.offset_timestamps() == {17: 7000}


class TestStructuralEdits:
    def test_split_then_merge_restores_anchors(self):
        session = NotesSession("one\ntwo\nthree", {0: 1, 1: 2, 2: 3})
        session.press_enter(1, 1)
        assert session.lines == ["one", "t", "wo", "three"]
        assert session.line_timestamps() == {0: 1, 1: 2, 3: 3}
        session.press_backspace(2, 0)
        assert session.lines == ["one", "two", "three"]
        assert session.line_timestamps() == {0: 1, 1: 2, 2: 3}

    def test_clearing_a_line_deletes_it_and_its_anchor(self):
        session = NotesSession("a\nb\nc\nd", {0: 1, 1: 2, 3: 4})
        result = session.set_line(1, "")
        assert session.lines == ["a", "c", "d"]
        assert session.line_timestamps() == {0: 1, 2: 4}
        assert result.structural
        assert result.focus == (0, 1)

    def test_clearing_only_line_keeps_it(self):
        session = NotesSession("a", {0: 5})
        result = session.set_line(0, "")
        assert session.lines == [""]
        assert not result.structural
        assert session.line_timestamps() == {0: 5}

    def test_backspace_mid_line_is_not_structural(self):
        session = NotesSession("ab\ncd")
        assert session.press_backspace(1, 1) is None
        assert session.press_backspace(0, 0) is None
        assert session.lines == ["ab", "cd"]

    def test_enter_at_line_start_keeps_anchor_on_upper_line(self):
        session = NotesSession("ab", {0: 10})
        session.press_enter(0, 0)
        assert session.lines == ["", "ab"]
        assert session.line_timestamps() == {0: 10}

    def test_anchor_count_never_exceeds_line_count(self):
        rng = random.Random(1234)
        session, now = _recording_session()
        for _ in range(500):
            now.value += rng.randint(0, 3000)
            line = rng.randrange(len(session.lines))
            op = rng.choice(["type", "clear", "enter", "backspace", "paste"])
            if op == "type":
                session.set_line(line, session.lines[line] + rng.choice("abc "))
            elif op == "clear":
                session.set_line(line, "")
            elif op == "enter":
                session.press_enter(line, rng.randint(0, len(session.lines[line])))
            elif op == "backspace":
                session.press_backspace(line, 0)
            else:
                session.insert_text(line, 0, "p\nq")
            assert len(session.line_timestamps()) <= len(session.lines)
            assert all(0 <= k < len(session.lines) for k in session.line_timestamps())


class TestAnchoring:
    def test_no_anchor_without_recording(self):
        session = NotesSession()
        session.set_line(0, "a")
        assert session.line_timestamps() == {}

    def test_typing_more_does_not_move_anchor(self):
        session, now = _recording_session()
        now.value += 5000
        session.set_line(0, "a")
        now.value += 5000
        session.set_line(0, "ab")
        assert session.line_timestamps() == {0: 3000}

    def test_stop_disables_new_anchors(self):
        session, now = _recording_session()
        session.stop_recording()
        now.value += 5000
        session.set_line(0, "a")
        assert session.line_timestamps() == {}
        assert not session.recording

    def test_multiline_paste_anchors_each_new_line(self):
        session, now = _recording_session()
        now.value += 4000
        result = session.insert_text(0, 0, "a\nb\n\nc")
        assert session.lines == ["a", "b", "", "c"]
        assert session.line_timestamps() == {0: 2000, 1: 2000, 3: 2000}
        assert result.focus == (3, 1)

    def test_paste_keeps_later_anchors_aligned(self):
        session = NotesSession("x\ny", {1: 500})
        session.insert_text(0, 1, "1\n2")
        assert session.lines == ["x1", "2", "y"]
        assert session.line_timestamps() == {2: 500}

    def test_single_line_paste(self):
        session = NotesSession("ac")
        result = session.insert_text(0, 1, "b")
        assert session.lines == ["abc"]
        assert result.focus == (0, 2)


class TestSeeking:
    def test_activate_line_dispatches_seconds(self):
        session = NotesSession("hello\nworld", {1: 3000})
        seen = []
        session.seeker.subscribe(seen.append)
        assert session.activate_line(1) == 3.0
        assert seen == [SeekRequest(time=3.0)]

    def test_activate_line_without_anchor(self):
        session = NotesSession("hello\nworld", {1: 3000})
        seen = []
        session.seeker.subscribe(seen.append)
        assert session.activate_line(0) is None
        assert seen == []

    def test_activate_offset_uses_nearest_anchor(self):
        session = NotesSession("hello\nworld", {1: 3000})
        assert session.activate_offset(10) == 3.0

    def test_activate_offset_outside_threshold(self):
        session = NotesSession("a" * 50 + "\nb", {1: 3000}, seek_threshold=20)
        assert session.activate_offset(0) is None


class TestHostInterop:
    def test_from_host_converts_offsets_to_lines(self):
        session = NotesSession.from_host("hello\nworld", {0: 1000, 6: 3000, 99: 5})
        assert session.line_timestamps() == {0: 1000, 1: 3000}

    def test_round_trip_through_offsets(self):
        session = NotesSession("a\n\nccc\nd", {0: 1, 2: 3, 3: 4})
        rebuilt = NotesSession.from_host(session.notes, session.offset_timestamps())
        assert rebuilt.line_timestamps() == session.line_timestamps()

    def test_stale_line_anchors_are_ignored(self):
        session = NotesSession("a", {0: 1, 5: 2})
        assert session.line_timestamps() == {0: 1}

    def test_render_with_markers(self):
        session = NotesSession("hello\nworld", {1: 3000})
        assert session.render_with_markers() == "hello\n[00:00:03] world"

    def test_timestamp_label(self):
        session = NotesSession("hello\nworld", {1: 65_000})
        assert session.timestamp_label(1) == "00:01:05"
        assert session.timestamp_label(0) == ""


class TestFormatTime:
    def test_hours_minutes_seconds(self):
        assert format_time(3_723_000) == "01:02:03"

    def test_rounds_down(self):
        assert format_time(999) == "00:00:00"
