"""Seek requests sent to whatever player is attached to the notes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeekRequest:
    time: float  # seconds

    def as_payload(self) -> dict[str, float]:
        return {"time": self.time}


SeekListener = Callable[[SeekRequest], None]


class SeekDispatcher:
    """Fire-and-forget fan-out of seek requests to registered listeners."""

    def __init__(self) -> None:
        self._listeners: list[SeekListener] = []

    def subscribe(self, listener: SeekListener) -> None:
        if listener in self._listeners:
            return
        self._listeners.append(listener)

    def unsubscribe(self, listener: SeekListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, time_ms: int) -> None:
        request = SeekRequest(time=time_ms / 1000)
        logger.info("Seek to %.3fs", request.time)
        for listener in list(self._listeners):
            listener(request)
