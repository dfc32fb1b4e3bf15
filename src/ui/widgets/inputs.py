"""Rows for simple controllers: BooleanRow, StringRow, FunctionRow."""

from textual import on
from textual.app import ComposeResult
from textual.widgets import Button, Checkbox, Input

from controller.boolean import BooleanController
from controller.function import FunctionController
from controller.string import StringController
from ui.widgets.base import ControllerInput, ControllerRow


class BooleanRow(ControllerRow):
    """A checkbox bound to a bool."""

    controller: BooleanController

    def compose_widget(self) -> ComposeResult:
        yield Checkbox("", value=self.controller.checked)

    @on(Checkbox.Changed)
    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self.controller.on_toggle(event.value)

    def refresh_widget(self) -> None:
        checkbox = self.query_one(Checkbox)
        if checkbox.value != self.controller.checked:
            with checkbox.prevent(Checkbox.Changed):
                checkbox.value = self.controller.checked


class StringRow(ControllerRow):
    """A text input bound to a str. Every keystroke is a change."""

    controller: StringController

    def compose_widget(self) -> ComposeResult:
        yield ControllerInput(
            self.controller.input_value,
            on_blur=self.controller.on_input_blur,
        )

    @on(Input.Changed)
    def on_text_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.controller.on_input(event.value)

    @on(Input.Submitted)
    def on_text_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.controller.on_input_keydown("enter")

    def refresh_widget(self) -> None:
        self.query_one(ControllerInput).sync(self.controller.input_value)


class FunctionRow(ControllerRow):
    """A button that calls the bound function."""

    controller: FunctionController

    def compose_widget(self) -> ComposeResult:
        yield Button(self.controller.button_label)

    @on(Button.Pressed)
    def on_fire_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.controller.fire()

    def refresh_widget(self) -> None:
        self.query_one(Button).label = self.controller.button_label
