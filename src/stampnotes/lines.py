"""Line model for the notes buffer.

The document is an ordered list of lines and always holds at least one
(possibly empty) line. Structural edits return a ``LineDelta`` describing
which index was inserted or removed; the model knows nothing about
timestamps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal

logger = logging.getLogger(__name__)

INSERT = "insert"
REMOVE = "remove"

DeltaKind = Literal["insert", "remove"]


@dataclass(frozen=True)
class LineDelta:
    kind: DeltaKind
    at: int


class LineModel:
    """Ordered list of text lines with split / merge / delete operations."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: list[str] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines = [""]
        for line in self._lines:
            _check_single_line(line)

    @classmethod
    def from_text(cls, text: str) -> LineModel:
        return cls(text.split("\n"))

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        self._check_index(index)
        return self._lines[index]

    def set_line(self, index: int, content: str) -> LineDelta | None:
        """Replace a line's content.

        An empty *content* on a multi-line document deletes the line instead
        and returns the removal delta. Plain replacements return ``None``.
        """
        self._check_index(index)
        _check_single_line(content)
        if content == "" and len(self._lines) > 1:
            return self.delete_line(index)
        self._lines[index] = content
        return None

    def split_line(self, index: int, at_offset: int) -> LineDelta:
        """Split line *index* at *at_offset*; the tail becomes line ``index + 1``."""
        self._check_index(index)
        line = self._lines[index]
        at_offset = max(0, min(at_offset, len(line)))
        self._lines[index] = line[:at_offset]
        self._lines.insert(index + 1, line[at_offset:])
        logger.debug("Split line %d at %d", index, at_offset)
        return LineDelta(INSERT, index + 1)

    def merge_with_previous(self, index: int) -> LineDelta:
        """Append line *index* to line ``index - 1`` and drop it."""
        self._check_index(index)
        if index == 0:
            raise ValueError("Cannot merge the first line with a previous line")
        self._lines[index - 1] += self._lines.pop(index)
        logger.debug("Merged line %d into %d", index, index - 1)
        return LineDelta(REMOVE, index)

    def insert_line(self, index: int, content: str = "") -> LineDelta:
        """Insert a new line so that it ends up at *index*."""
        if not 0 <= index <= len(self._lines):
            raise IndexError(f"Cannot insert at {index} (document has {len(self._lines)} lines)")
        _check_single_line(content)
        self._lines.insert(index, content)
        return LineDelta(INSERT, index)

    def delete_line(self, index: int) -> LineDelta:
        self._check_index(index)
        if len(self._lines) == 1:
            raise ValueError("Cannot delete the only line of the document")
        del self._lines[index]
        logger.debug("Deleted line %d", index)
        return LineDelta(REMOVE, index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"Line {index} out of range (document has {len(self._lines)} lines)")


def _check_single_line(content: str) -> None:
    if "\n" in content:
        raise ValueError("Line content must not contain a newline")
