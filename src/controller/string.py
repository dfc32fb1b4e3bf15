"""StringController: a single-line text field."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from controller.base import Controller, user_input

if TYPE_CHECKING:
    from controller.gui import GUI


class StringController(Controller):
    """Text input bound to a str property.

    Every keystroke writes the value (change callback only); blur or Enter
    completes the edit (finish callback).
    """

    kind = "string"

    def __init__(self, parent: GUI, obj: Any, prop: str) -> None:
        self.input_value = ""
        super().__init__(parent, obj, prop)

    @user_input
    def on_input(self, text: str) -> None:
        self.input_value = text
        self.set_value(text, False)

    def on_input_blur(self) -> None:
        self._call_on_finish_change()

    @user_input
    def on_input_keydown(self, key: str) -> None:
        if key == "enter":
            self._call_on_finish_change()

    def update_display(self) -> None:
        self.input_value = str(self.get_value())
        super().update_display()
