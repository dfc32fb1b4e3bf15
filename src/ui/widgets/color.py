"""Color row: a hex input next to a swatch."""

from textual import on
from textual.app import ComposeResult
from textual.widgets import Input, Static

from controller.color import ColorController
from model.colors import normalize_hex
from ui.ids import cls
from ui.widgets.base import ControllerInput, ControllerRow
import ui.ids as ids


class ColorRow(ControllerRow):
    """Edits a color as "#rrggbb". The value is applied on Enter."""

    controller: ColorController

    def compose_widget(self) -> ComposeResult:
        yield Static(" ", classes=ids.SWATCH)
        yield ControllerInput(
            self.controller.hex_value,
            on_blur=self.controller.on_input_blur,
            max_length=7,
        )

    @on(Input.Changed)
    def on_hex_typed(self, event: Input.Changed) -> None:
        # Half-typed colors are never applied
        event.stop()

    @on(Input.Submitted)
    def on_hex_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.controller.on_input_change(event.value)

    def refresh_widget(self) -> None:
        self.query_one(ControllerInput).sync(self.controller.hex_value)
        swatch_color = normalize_hex(self.controller.hex_value)
        if swatch_color is not None:
            self.query_one(cls(ids.SWATCH), Static).styles.background = swatch_color
