"""Textual TUI app hosting the notes editor.

Layout:
┌─────────────────────────────────────────────┐
│  stampnotes  ●  REC  00:01:23        Notes  │
├──────────┬──────────────────────────────────┤
│ 00:00:04 │ Budget review starts             │
│          │ still on Q3                      │
│ 00:01:10 │ Action: email finance            │
├──────────┴──────────────────────────────────┤
│  ^s Save   ^r Record   ^t Timestamps  ^c    │
└─────────────────────────────────────────────┘
"""

from __future__ import annotations

from textual.app import App

from stampnotes.config import load_config
from stampnotes.screens.notes import NotesResult, NotesScreen
from stampnotes.session import NotesSession


class NotesApp(App[NotesResult]):
    """Runs one notes session; exits with the session on save, None on cancel."""

    CSS = """
    .screen-frame {
        height: 100%;
    }

    #lines {
        height: 1fr;
        border: round $accent;
        background: $surface;
    }

    .line-row {
        height: auto;
    }

    .timestamp-cell {
        width: 12;
        padding: 1 1 0 1;
        text-align: right;
        color: $accent;
        background: $panel;
    }

    .line-row Input {
        width: 1fr;
        border: none;
        height: 3;
    }

    #notes-help {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    .screen-body-footer {
        height: 3;
    }

    .spacer-row {
        width: 1;
    }

    #cancel-confirm-container {
        align: center middle;
        width: 60;
        height: auto;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }
    """

    def __init__(
        self,
        session: NotesSession | None = None,
        record: bool = False,
    ) -> None:
        super().__init__()
        cfg = load_config()
        self.session = session or NotesSession(
            time_offset_ms=int(cfg.get("time_offset_ms", 2000)),
            seek_threshold=int(cfg.get("seek_threshold", 20)),
        )
        self.show_timestamps = bool(cfg.get("show_timestamps", True))
        self.record = record

    def on_mount(self) -> None:
        try:
            self.theme = "tokyo-night"
        except Exception:
            pass
        if self.record:
            self.session.start_recording()
        self.push_screen(
            NotesScreen(self.session, show_timestamps=self.show_timestamps),
            self.exit,
        )
