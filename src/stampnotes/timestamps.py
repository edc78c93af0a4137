"""Line-indexed timestamp anchors, renumbered from LineModel deltas."""

from __future__ import annotations

import logging
from typing import Iterator

from stampnotes.lines import INSERT, REMOVE, LineDelta

logger = logging.getLogger(__name__)


class TimestampIndex:
    """Mapping of line index -> elapsed recording time in milliseconds."""

    def __init__(self, entries: dict[int, int] | None = None) -> None:
        self._entries: dict[int, int] = {}
        for anchor, time_ms in (entries or {}).items():
            self.set(anchor, time_ms)

    def apply(self, delta: LineDelta) -> None:
        """Renumber every anchor after a structural edit."""
        k = delta.at
        renumbered: dict[int, int] = {}
        if delta.kind == INSERT:
            for anchor, time_ms in self._entries.items():
                renumbered[anchor + 1 if anchor >= k else anchor] = time_ms
        elif delta.kind == REMOVE:
            for anchor, time_ms in self._entries.items():
                if anchor == k:
                    logger.debug("Dropped anchor at line %d (%d ms)", k, time_ms)
                    continue
                renumbered[anchor - 1 if anchor > k else anchor] = time_ms
        else:
            raise ValueError(f"Unknown delta kind: {delta.kind!r}")
        self._entries = renumbered

    def set(self, anchor: int, time_ms: int) -> None:
        if anchor < 0:
            raise ValueError(f"Anchor must be non-negative, got {anchor}")
        self._entries[anchor] = max(0, int(time_ms))

    def get(self, anchor: int) -> int | None:
        return self._entries.get(anchor)

    def remove(self, anchor: int) -> None:
        self._entries.pop(anchor, None)

    def as_dict(self) -> dict[int, int]:
        return dict(sorted(self._entries.items()))

    def __contains__(self, anchor: object) -> bool:
        return anchor in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._entries))

    def items(self) -> list[tuple[int, int]]:
        return sorted(self._entries.items())
