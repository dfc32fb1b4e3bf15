"""OptionController: a dropdown over a fixed set of values."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from controller.base import Controller, user_input

if TYPE_CHECKING:
    from controller.gui import GUI


def option_entries(options: Any) -> tuple[list[str], list[Any]]:
    """Split an option spec into parallel (names, values) lists.

    - list/tuple: each entry is both name and value
    - mapping: keys are names, values are values
    - Enum class: member names are names, members are values
    """
    if isinstance(options, Mapping):
        return [str(name) for name in options], list(options.values())
    if isinstance(options, type) and issubclass(options, Enum):
        members = list(options)
        return [member.name for member in members], members
    values = list(options)
    return [str(value) for value in values], values


class OptionController(Controller):
    """Dropdown bound to a property whose value is one of a known set.

    A bound value missing from the set is not an error: nothing is selected
    and the raw value is shown instead.
    """

    kind = "option"

    def __init__(self, parent: GUI, obj: Any, prop: str, options: Any) -> None:
        self.names, self.values = option_entries(options)
        self.selected_index = -1
        self.display_text = ""
        super().__init__(parent, obj, prop)

    @user_input
    def on_select(self, index: int) -> None:
        self.set_value(self.values[index])

    def index_of(self, value: Any) -> int:
        """Index of value among the option values, or -1.

        Booleans only match booleans, so True never selects an option of 1.
        """
        for index, option in enumerate(self.values):
            if option is value:
                return index
            if isinstance(option, bool) == isinstance(value, bool) and option == value:
                return index
        return -1

    def update_display(self) -> None:
        value = self.get_value()
        self.selected_index = self.index_of(value)
        if self.selected_index == -1:
            self.display_text = str(value)
        else:
            self.display_text = self.names[self.selected_index]
        super().update_display()
