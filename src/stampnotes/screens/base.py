"""Shared bindings and brand rendering for the stampnotes TUI."""

from __future__ import annotations

from pyfiglet import Figlet
from textual.binding import Binding

from stampnotes import __version__

NOTES_BINDINGS = [
    Binding("ctrl+r", "toggle_recording", "Record", key_display="^r"),
    Binding("ctrl+t", "toggle_timestamps", "Timestamps", key_display="^t"),
    Binding("ctrl+g", "seek_line", "Seek", key_display="^g"),
    Binding("ctrl+s", "save", "Save", key_display="^s"),
    Binding("ctrl+c", "cancel", "Cancel", key_display="^c", priority=True),
]

__all__ = ["NOTES_BINDINGS", "__version__", "render_brand"]


def render_brand() -> str:
    """Render the brand title as ASCII art."""
    try:
        return Figlet(font="small").renderText("stampnotes").rstrip()
    except Exception:
        return "stampnotes"
