"""Automatic anchor creation and nearest-anchor lookup.

A line is either EMPTY (blank or whitespace only) or NON_EMPTY. The only
transition that creates an anchor is EMPTY -> NON_EMPTY, and only while
the recording clock is running and the line has no anchor yet:

    previous    current     recording   has anchor   action
    EMPTY       NON_EMPTY   yes         no           create anchor
    anything    anything    no          -            none
    NON_EMPTY   anything    -           -            none
    -           -           -           yes          none
"""

from __future__ import annotations

import enum
import logging
from typing import Mapping

from stampnotes.clock import ClockNotRunning, RecordingClock
from stampnotes.timestamps import TimestampIndex

logger = logging.getLogger(__name__)

# Maximum distance (in offset units) a lookup may snap across.
SEEK_THRESHOLD = 20


class LineState(enum.Enum):
    EMPTY = "empty"
    NON_EMPTY = "non_empty"

    @classmethod
    def of(cls, content: str) -> LineState:
        return cls.NON_EMPTY if content.strip() else cls.EMPTY


class AutoAnchorTrigger:
    """Create an anchor the first time a line receives content while recording."""

    def __init__(self, index: TimestampIndex, clock: RecordingClock) -> None:
        self.index = index
        self.clock = clock

    def evaluate(self, line: int, previous: str, current: str) -> int | None:
        """Return the stored time when an anchor was created, otherwise ``None``."""
        if LineState.of(previous) is not LineState.EMPTY:
            return None
        if LineState.of(current) is not LineState.NON_EMPTY:
            return None
        if not self.clock.active or line in self.index:
            return None
        try:
            time_ms = self.clock.elapsed_adjusted()
        except ClockNotRunning:
            logger.warning("Clock not running while creating anchor for line %d", line)
            return None
        self.index.set(line, time_ms)
        logger.debug("Anchor created at line %d: %d ms", line, time_ms)
        return time_ms


def nearest_anchor(
    anchors: Mapping[int, int],
    target: int,
    threshold: int = SEEK_THRESHOLD,
) -> int | None:
    """Closest anchor to *target*, or ``None`` unless strictly within *threshold*."""
    best: int | None = None
    best_dist = threshold
    for anchor in anchors:
        dist = abs(anchor - target)
        if dist < best_dist:
            best, best_dist = anchor, dist
    return best
