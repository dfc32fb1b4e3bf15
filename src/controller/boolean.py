"""BooleanController: a checkbox."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from controller.base import Controller, user_input

if TYPE_CHECKING:
    from controller.gui import GUI


class BooleanController(Controller):
    """Checkbox bound to a bool property."""

    kind = "boolean"

    def __init__(self, parent: GUI, obj: Any, prop: str) -> None:
        self.checked = False
        super().__init__(parent, obj, prop)

    @user_input
    def on_toggle(self, checked: bool) -> None:
        self.set_value(bool(checked))

    def update_display(self) -> None:
        self.checked = bool(self.get_value())
        super().update_display()
