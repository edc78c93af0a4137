"""Modal screens used by the notes editor."""

from __future__ import annotations

from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option


class ConfirmCancelScreen(ModalScreen[bool]):
    """Ask user to confirm discarding the notes."""

    BINDINGS = [
        Binding("escape", "no", "No"),
        Binding("y", "yes", "Yes"),
        Binding("n", "no", "No"),
        Binding("ctrl+c", "yes", "Yes", priority=True),
    ]

    def compose(self):
        yield Vertical(
            Label("Discard notes? Unsaved text will be lost.", id="cancel-confirm-message"),
            OptionList(
                Option("Yes, discard notes", id="yes"),
                Option("No, keep editing", id="no"),
                id="cancel-confirm-list",
            ),
            id="cancel-confirm-container",
        )

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id == "yes")

    def action_yes(self) -> None:
        self.dismiss(True)

    def action_no(self) -> None:
        self.dismiss(False)
