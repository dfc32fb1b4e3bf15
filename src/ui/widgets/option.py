"""Dropdown row: OptionRow."""

from textual import on
from textual.app import ComposeResult
from textual.widgets import Select, Static

from controller.option import OptionController
from ui.ids import cls
from ui.widgets.base import ControllerRow
import ui.ids as ids


class OptionRow(ControllerRow):
    """A Select over the option names, plus the raw value when it isn't one of them."""

    controller: OptionController

    def compose_widget(self) -> ComposeResult:
        choices = [(name, index) for index, name in enumerate(self.controller.names)]
        yield Select(choices, allow_blank=True, prompt="")
        yield Static(self.controller.display_text, classes=ids.DISPLAY, markup=False)

    @on(Select.Changed)
    def on_option_changed(self, event: Select.Changed) -> None:
        event.stop()
        # Clearing the select is not a choice
        if isinstance(event.value, int):
            self.controller.on_select(event.value)

    def refresh_widget(self) -> None:
        index = self.controller.selected_index
        select = self.query_one(Select)
        with select.prevent(Select.Changed):
            if index == -1:
                select.clear()
            elif select.value != index:
                select.value = index

        display = self.query_one(cls(ids.DISPLAY), Static)
        display.update(self.controller.display_text)
        display.set_class(index == -1, ids.UNLISTED)
