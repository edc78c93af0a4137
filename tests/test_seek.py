"""Tests for seek dispatch."""

from stampnotes.seek import SeekDispatcher, SeekRequest


class TestSeekDispatcher:
    def test_dispatch_converts_to_seconds(self):
        seen = []
        dispatcher = SeekDispatcher()
        dispatcher.subscribe(seen.append)
        dispatcher.dispatch(3500)
        assert seen == [SeekRequest(time=3.5)]
        assert seen[0].as_payload() == {"time": 3.5}

    def test_unsubscribe(self):
        seen = []
        dispatcher = SeekDispatcher()
        dispatcher.subscribe(seen.append)
        dispatcher.unsubscribe(seen.append)
        dispatcher.dispatch(1000)
        assert seen == []

    def test_dispatch_without_listeners(self):
        SeekDispatcher().dispatch(0)
