"""TUI screens: the notes editor and its modals."""

from stampnotes.screens.modals import ConfirmCancelScreen
from stampnotes.screens.notes import NotesResult, NotesScreen

__all__ = [
    "ConfirmCancelScreen",
    "NotesResult",
    "NotesScreen",
]
