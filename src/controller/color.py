"""ColorController: a color swatch editing a hex string."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from controller.base import Controller, user_input
from model.binding import Binding, BindingError
from model.colors import ColorFormat, detect, normalize_hex

if TYPE_CHECKING:
    from controller.gui import GUI

log = logging.getLogger(__name__)


class ColorController(Controller):
    """Swatch bound to a color in string, packed-int or r/g/b-object form.

    The format is detected once, from the initial value. Changing the type of
    the bound value afterwards is not supported.
    """

    kind = "color"

    def __init__(self, parent: GUI, obj: Any, prop: str) -> None:
        value = Binding(obj, prop).require()
        color_format = detect(value)
        if color_format is None:
            raise BindingError(f'Property "{prop}" of {obj!r} is not a color.')
        # Reject unreadable colors before the controller joins the panel
        try:
            hex_value = color_format.to_hex(value)
        except (KeyError, AttributeError, TypeError, ValueError) as e:
            raise BindingError(f'Property "{prop}" of {obj!r} is not a readable color: {e!r}') from e
        self.color_format: ColorFormat = color_format
        self.hex_value = hex_value
        super().__init__(parent, obj, prop)

    @user_input
    def on_input_change(self, text: str) -> None:
        """Apply a hex color picked or typed by the user."""
        hex_value = normalize_hex(text)
        if hex_value is None:
            log.debug(f"Ignoring invalid color {text!r} for {self!r}")
            return

        if self.color_format.is_primitive:
            self.set_value(self.color_format.from_hex(hex_value))
        else:
            # Mutate the bound object in place, keep its identity
            self.color_format.from_hex(hex_value, self.get_value())
            self._on_set_value()

    def on_input_blur(self) -> None:
        self.update_display()

    def update_display(self) -> None:
        self.hex_value = self.color_format.to_hex(self.get_value())
        super().update_display()
