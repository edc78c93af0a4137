"""Notes editor screen: one row per line, timestamp column on the left.

Enter splits the focused line, Backspace at column 0 merges it into the
line above, and a double click on a timestamp seeks the player. Dismisses
with the session on save or None if cancelled.
"""

from __future__ import annotations

import logging

from textual import events
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Button, Input, Static

from stampnotes.screens.base import NOTES_BINDINGS
from stampnotes.screens.modals import ConfirmCancelScreen
from stampnotes.screens.top_bar import TopBar
from stampnotes.seek import SeekRequest
from stampnotes.session import EditResult, NotesSession, format_time

logger = logging.getLogger(__name__)

NotesResult = NotesSession | None


class LineInput(Input):
    """Single-line input that reports line-structure keys to the screen."""

    class MergeRequested(Message):
        """Backspace pressed at column 0."""

        def __init__(self, line_input: LineInput) -> None:
            super().__init__()
            self.line_input = line_input

        @property
        def control(self) -> LineInput:
            return self.line_input

    class Pasted(Message):
        """Multi-line text pasted into the line."""

        def __init__(self, line_input: LineInput, text: str) -> None:
            super().__init__()
            self.line_input = line_input
            self.text = text

        @property
        def control(self) -> LineInput:
            return self.line_input

    def __init__(self, value: str, line_index: int, **kwargs) -> None:
        super().__init__(value=value, select_on_focus=False, **kwargs)
        self.line_index = line_index

    def action_delete_left(self) -> None:
        if self.cursor_position == 0:
            self.post_message(self.MergeRequested(self))
            return
        super().action_delete_left()

    def _on_paste(self, event: events.Paste) -> None:
        if "\n" in event.text or "\r" in event.text:
            event.prevent_default()
            event.stop()
            self.post_message(self.Pasted(self, event.text))


class TimestampCell(Static):
    """Timestamp column cell; double click asks for a seek."""

    class Activated(Message):
        def __init__(self, line_index: int) -> None:
            super().__init__()
            self.line_index = line_index

    def __init__(self, label: str, line_index: int) -> None:
        super().__init__(label, classes="timestamp-cell")
        self.line_index = line_index

    def on_click(self, event: events.Click) -> None:
        if event.chain >= 2:
            self.post_message(self.Activated(self.line_index))


class NotesScreen(Screen[NotesResult]):
    """Notes editor. Dismisses with the session on save or None if cancelled."""

    BINDINGS = NOTES_BINDINGS

    def __init__(
        self,
        session: NotesSession,
        show_timestamps: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.session = session
        self.show_timestamps = show_timestamps
        self.session.seeker.subscribe(self._on_seek)

    def compose(self):
        with Vertical(classes="screen-frame"):
            yield TopBar(variant="hero", section="Notes")
            with ScrollableContainer(id="lines"):
                yield from self._make_rows()
            yield Static(
                "Type to timestamp a new line • Enter for new line • double click a time to seek",
                id="notes-help",
            )
            with Horizontal(classes="screen-body-footer"):
                yield Button("^s Save", id="btn-save", classes="btn primary inline")
                yield Static("", classes="spacer-row")
                yield Button("^r Record", id="btn-record", classes="btn secondary inline")
                yield Static("", classes="spacer-row")
                yield Button("^t Timestamps", id="btn-timestamps", classes="btn secondary inline")
                yield Static("", classes="spacer-row")
                yield Button("^c Cancel", id="btn-back", classes="btn danger inline")

    def on_mount(self) -> None:
        self._update_status()
        self.set_interval(0.5, self._update_status)
        self.call_after_refresh(self._focus_line, 0, 0)

    def _make_rows(self) -> list[Horizontal]:
        rows = []
        for i, line in enumerate(self.session.lines):
            rows.append(
                Horizontal(
                    TimestampCell(self._label(i), i),
                    LineInput(line, i, placeholder="Start typing..." if i == 0 else ""),
                    classes="line-row",
                )
            )
        return rows

    def _label(self, line: int) -> str:
        if not self.show_timestamps:
            return ""
        return self.session.timestamp_label(line)

    def _update_status(self) -> None:
        if self.session.recording and self.session.clock.started_at is not None:
            elapsed = self.session.clock.now() - self.session.clock.started_at
            status = f"●  REC  {format_time(elapsed)}"
        else:
            status = "Not recording"
        try:
            self.query_one(TopBar).status_text = status
        except Exception:
            pass

    # -- edits -------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        line_input = event.input
        if not isinstance(line_input, LineInput) or not line_input.is_attached:
            return
        self._after_edit(self.session.set_line(line_input.line_index, event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        line_input = event.input
        if not isinstance(line_input, LineInput):
            return
        event.stop()
        self._after_edit(self.session.press_enter(line_input.line_index, line_input.cursor_position))

    def on_line_input_merge_requested(self, message: LineInput.MergeRequested) -> None:
        result = self.session.press_backspace(message.line_input.line_index, 0)
        if result is not None:
            self._after_edit(result)

    def on_line_input_pasted(self, message: LineInput.Pasted) -> None:
        line_input = message.line_input
        self._after_edit(
            self.session.insert_text(line_input.line_index, line_input.cursor_position, message.text)
        )

    def _after_edit(self, result: EditResult) -> None:
        if result.structural:
            self.call_next(self._rebuild_rows, result.focus)
            return
        for line in result.anchored:
            self._refresh_cell(line)

    async def _rebuild_rows(self, focus: tuple[int, int] | None) -> None:
        container = self.query_one("#lines", ScrollableContainer)
        await container.remove_children()
        await container.mount_all(self._make_rows())
        logger.debug("Rebuilt %d rows", len(self.session.lines))
        if focus is not None:
            self.call_after_refresh(self._focus_line, *focus)

    def _refresh_cell(self, line: int) -> None:
        for cell in self.query(TimestampCell):
            if cell.line_index == line:
                cell.update(self._label(line))

    def _focus_line(self, line: int, column: int) -> None:
        for line_input in self.query(LineInput):
            if line_input.line_index == line:
                line_input.focus()
                line_input.cursor_position = column
                return

    def _focused_line(self) -> int | None:
        focused = self.focused
        if isinstance(focused, LineInput):
            return focused.line_index
        return None

    # -- seeking -----------------------------------------------------------

    def on_timestamp_cell_activated(self, message: TimestampCell.Activated) -> None:
        self.session.activate_line(message.line_index)

    def action_seek_line(self) -> None:
        line = self._focused_line()
        if line is None or self.session.activate_line(line) is None:
            self.notify("No timestamp on this line")

    def _on_seek(self, request: SeekRequest) -> None:
        self.notify(f"Seek to {format_time(int(request.time * 1000))}")

    # -- actions -----------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        bid = event.button.id
        if bid == "btn-save":
            self.action_save()
        elif bid == "btn-record":
            self.action_toggle_recording()
        elif bid == "btn-timestamps":
            self.action_toggle_timestamps()
        elif bid == "btn-back":
            self.action_cancel()

    def action_toggle_recording(self) -> None:
        if self.session.recording:
            self.session.stop_recording()
            self.notify("Recording stopped")
        else:
            self.session.start_recording()
            self.notify("Recording started")
        self._update_status()

    def action_toggle_timestamps(self) -> None:
        self.show_timestamps = not self.show_timestamps
        for cell in self.query(TimestampCell):
            cell.update(self._label(cell.line_index))

    def action_save(self) -> None:
        self.session.stop_recording()
        self.session.seeker.unsubscribe(self._on_seek)
        self.dismiss(self.session)

    def action_cancel(self) -> None:
        self.app.push_screen(ConfirmCancelScreen(), self._on_cancel_confirmed)

    def _on_cancel_confirmed(self, confirmed: bool | None) -> None:
        if confirmed:
            self.session.stop_recording()
            self.session.seeker.unsubscribe(self._on_seek)
            self.dismiss(None)
