"""FunctionController: a button that calls the bound function."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from constants import FIRE_LABEL
from controller.base import Controller, user_input

if TYPE_CHECKING:
    from controller.gui import GUI


class FunctionController(Controller):
    """Button bound to a callable property. The bound value is never written."""

    kind = "function"

    def __init__(self, parent: GUI, obj: Any, prop: str) -> None:
        self.button_label = FIRE_LABEL
        super().__init__(parent, obj, prop)

    @user_input
    def fire(self) -> Any:
        """Call the bound function with no arguments and return its result."""
        return self.get_value()()
