"""Editing session: one notes buffer, its timestamp anchors and the clock.

Each public edit method is one turn. Within a turn the line model changes
first, every delta is applied to the timestamp index, and only then is the
auto-anchor trigger evaluated. Nothing here touches the UI; edits return an
``EditResult`` with a focus hint the surface may act on later.

Anchors are kept in line space. Offset-space views are derived on demand
through ``stampnotes.positions``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping

from stampnotes.anchors import SEEK_THRESHOLD, AutoAnchorTrigger, nearest_anchor
from stampnotes.clock import TIME_OFFSET_MS, RecordingClock
from stampnotes.lines import LineDelta, LineModel
from stampnotes.positions import from_offset_space, to_offset_space
from stampnotes.seek import SeekDispatcher
from stampnotes.timestamps import TimestampIndex

logger = logging.getLogger(__name__)


def format_time(ms: int) -> str:
    """Render milliseconds as HH:MM:SS (whole seconds, rounded down)."""
    total = max(0, int(ms)) // 1000
    hrs, rem = divmod(total, 3600)
    mins, secs = divmod(rem, 60)
    return f"{hrs:02d}:{mins:02d}:{secs:02d}"


@dataclass
class EditResult:
    deltas: list[LineDelta] = field(default_factory=list)
    anchored: list[int] = field(default_factory=list)
    focus: tuple[int, int] | None = None  # (line, column)

    @property
    def structural(self) -> bool:
        return bool(self.deltas)


class NotesSession:
    """Owns the notes text and its line-indexed timestamps."""

    def __init__(
        self,
        text: str = "",
        timestamps: Mapping[int, int] | None = None,
        *,
        time_offset_ms: int = TIME_OFFSET_MS,
        seek_threshold: int = SEEK_THRESHOLD,
        now: Callable[[], int] | None = None,
    ) -> None:
        self.model = LineModel.from_text(text)
        self.timestamps = TimestampIndex()
        for line, time_ms in (timestamps or {}).items():
            if 0 <= line < len(self.model):
                self.timestamps.set(line, time_ms)
            else:
                logger.debug("Ignoring anchor for missing line %d", line)
        self.clock = RecordingClock(offset_ms=time_offset_ms, now=now)
        self.trigger = AutoAnchorTrigger(self.timestamps, self.clock)
        self.seeker = SeekDispatcher()
        self.seek_threshold = seek_threshold

    @classmethod
    def from_host(
        cls,
        notes: str,
        offset_map: Mapping[int, int],
        **kwargs,
    ) -> NotesSession:
        """Build a session from a host that keys timestamps by character offset."""
        lines = notes.split("\n")
        return cls(notes, from_offset_space(lines, offset_map), **kwargs)

    # -- state -------------------------------------------------------------

    @property
    def notes(self) -> str:
        return self.model.text

    @property
    def lines(self) -> list[str]:
        return self.model.lines

    @property
    def recording(self) -> bool:
        return self.clock.active

    def start_recording(self) -> None:
        self.clock.start()

    def stop_recording(self) -> None:
        self.clock.stop()

    def line_timestamps(self) -> dict[int, int]:
        return self.timestamps.as_dict()

    def offset_timestamps(self) -> dict[int, int]:
        return to_offset_space(self.model.lines, self.timestamps.as_dict())

    def timestamp_label(self, line: int) -> str:
        time_ms = self.timestamps.get(line)
        return format_time(time_ms) if time_ms is not None else ""

    def render_with_markers(self) -> str:
        """Notes text with ``[HH:MM:SS] `` in front of every anchored line."""
        out = []
        for i, line in enumerate(self.model.lines):
            time_ms = self.timestamps.get(i)
            out.append(f"[{format_time(time_ms)}] {line}" if time_ms is not None else line)
        return "\n".join(out)

    # -- edits -------------------------------------------------------------

    def _apply(self, delta: LineDelta, result: EditResult) -> None:
        self.timestamps.apply(delta)
        result.deltas.append(delta)

    def _evaluate(self, line: int, previous: str, result: EditResult) -> None:
        if self.trigger.evaluate(line, previous, self.model[line]) is not None:
            result.anchored.append(line)

    def set_line(self, index: int, value: str) -> EditResult:
        """Replace a line; emptying one of several lines deletes it."""
        result = EditResult()
        previous = self.model[index]
        if value == previous:
            return result
        delta = self.model.set_line(index, value)
        if delta is not None:
            self._apply(delta, result)
            target = max(0, index - 1)
            result.focus = (target, len(self.model[target]) if index > 0 else 0)
            return result
        self._evaluate(index, previous, result)
        return result

    def press_enter(self, index: int, cursor: int) -> EditResult:
        """Split the line at the cursor; the tail becomes a fresh line."""
        result = EditResult(focus=(index + 1, 0))
        self._apply(self.model.split_line(index, cursor), result)
        self._evaluate(index + 1, "", result)
        return result

    def press_backspace(self, index: int, cursor: int) -> EditResult | None:
        """Merge with the previous line when the cursor is at column 0.

        Returns ``None`` when the key is an ordinary character deletion the
        editing widget handles itself.
        """
        if cursor != 0 or index == 0:
            return None
        previous = self.model[index - 1]
        result = EditResult(focus=(index - 1, len(previous)))
        self._apply(self.model.merge_with_previous(index), result)
        self._evaluate(index - 1, previous, result)
        return result

    def insert_text(self, index: int, cursor: int, text: str) -> EditResult:
        """Paste *text* at the cursor.

        Every line created by a multi-line paste is a new line and is
        evaluated for an anchor on its own.
        """
        pieces = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        original = self.model[index]
        cursor = max(0, min(cursor, len(original)))
        head, tail = original[:cursor], original[cursor:]
        if len(pieces) == 1:
            result = self.set_line(index, head + text + tail)
            if not result.structural:
                result.focus = (index, cursor + len(text))
            return result

        result = EditResult()
        self._apply(self.model.split_line(index, cursor), result)
        for offset, piece in enumerate(pieces[1:-1], start=1):
            self._apply(self.model.insert_line(index + offset, piece), result)
        last = index + len(pieces) - 1
        if pieces[0]:
            self.model.set_line(index, head + pieces[0])
        if pieces[-1]:
            self.model.set_line(last, pieces[-1] + tail)

        self._evaluate(index, original, result)
        for line in range(index + 1, last + 1):
            self._evaluate(line, "", result)
        result.focus = (last, len(pieces[-1]))
        logger.debug("Pasted %d lines at line %d", len(pieces), index)
        return result

    # -- seeking -----------------------------------------------------------

    def activate_line(self, index: int) -> float | None:
        """Seek to the anchor of line *index*; ``None`` when it has none."""
        time_ms = self.timestamps.get(index)
        if time_ms is None:
            return None
        self.seeker.dispatch(time_ms)
        return time_ms / 1000

    def activate_offset(self, offset: int) -> float | None:
        """Seek to the anchor nearest a character offset, within the threshold."""
        offsets = self.offset_timestamps()
        anchor = nearest_anchor(offsets, offset, self.seek_threshold)
        if anchor is None:
            return None
        self.seeker.dispatch(offsets[anchor])
        return offsets[anchor] / 1000
