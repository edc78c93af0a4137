from __future__ import annotations

from typing import Literal

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Resize
from textual.reactive import reactive
from textual.widgets import Static

from stampnotes.screens.base import __version__, render_brand

# Terminal height below which we show compact instead of hero
COMPACT_BELOW_LINES = 30


class TopBar(Vertical):
    """Top bar: ASCII brand on tall terminals, one status row otherwise."""

    status_text = reactive("")

    DEFAULT_CSS = """
    TopBar {
        width: 100%;
        padding: 0 1;
        background: $accent;
        color: $text;
        height: 9;
    }
    TopBar.compact {
        height: 1;
    }
    TopBar > .top-bar-hero {
        width: 100%;
    }
    TopBar > .top-bar-compact-row {
        width: 100%;
        height: 1;
        display: none;
    }
    TopBar.compact > .top-bar-hero {
        display: none;
    }
    TopBar.compact > .top-bar-compact-row {
        display: block;
    }
    TopBar .brand, TopBar #top-bar-status {
        width: auto;
    }
    TopBar .spacer-row {
        width: 1fr;
    }
    """

    def __init__(
        self,
        variant: Literal["hero", "compact"] = "compact",
        section: str = "",
        *,
        compact_below_lines: int | None = COMPACT_BELOW_LINES,
    ) -> None:
        self._variant = variant
        self._section = section
        self._compact_below_lines = compact_below_lines
        super().__init__(classes="top-bar")

    def _should_compact(self) -> bool:
        if self._variant != "hero":
            return True
        if self._compact_below_lines is None:
            return False
        return self.app.size.height < self._compact_below_lines

    def on_mount(self) -> None:
        self._update_state()

    def on_resize(self, event: Resize) -> None:
        self.app.call_after_refresh(self._update_state)

    def _update_state(self) -> None:
        compact = self._should_compact()
        self.set_class(compact, "compact")
        self.set_class(not compact, "hero")

    def watch_status_text(self, status_text: str) -> None:
        for widget in self.query(".top-bar-status"):
            if isinstance(widget, Static):
                widget.update(status_text)

    def compose(self) -> ComposeResult:
        with Vertical(classes="top-bar-hero"):
            yield Static(f"v{__version__}", classes="version-row")
            yield Static(render_brand(), classes="title-row brand")
            yield Static("", classes="top-bar-status")
        with Horizontal(classes="top-bar-compact-row"):
            yield Static("stampnotes", classes="brand")
            yield Static("  ", classes="brand")
            yield Static("", id="top-bar-status", classes="top-bar-status")
            yield Static("", classes="spacer-row")
            yield Static(self._section or "", classes="top-bar-section")
