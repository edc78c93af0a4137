"""Recording clock: on/off state plus lag-compensated elapsed time."""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

# Typing lags behind what was heard; anchors are pulled back by this much.
TIME_OFFSET_MS = 2000


def _now_ms() -> int:
    return int(time.time() * 1000)


class ClockNotRunning(RuntimeError):
    """Elapsed time was requested while no recording is active."""


class RecordingClock:
    def __init__(
        self,
        offset_ms: int = TIME_OFFSET_MS,
        now: Callable[[], int] | None = None,
    ) -> None:
        self.offset_ms = offset_ms
        self._now = now or _now_ms
        self.active = False
        self.started_at: int | None = None

    def now(self) -> int:
        return self._now()

    def start(self) -> None:
        """Begin a session; restarting resets the start instant."""
        self.started_at = self._now()
        self.active = True
        logger.info("Recording clock started")

    def stop(self) -> None:
        self.active = False
        logger.info("Recording clock stopped")

    def elapsed_adjusted(self, now_ms: int | None = None) -> int:
        """Milliseconds since start minus the compensation offset, never below zero."""
        if not self.active or self.started_at is None:
            raise ClockNotRunning("Recording is not active")
        if now_ms is None:
            now_ms = self._now()
        return max(0, (now_ms - self.started_at) - self.offset_ms)
