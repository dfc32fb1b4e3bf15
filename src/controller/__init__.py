"""Controller layer: widgets bound to object properties, and the panels holding them.

This package contains:
- base: the Controller contract (set_value / update_display / callbacks)
- boolean, string, option, function, color, number: concrete controllers
- gui: GUI panels/folders and Header rows
- surface: the rendering/input boundary and its in-memory implementation
- events: input event payloads delivered by a surface
"""

from controller.base import Controller
from controller.boolean import BooleanController
from controller.color import ColorController
from controller.events import PointerEvent, TouchEvent, WheelEvent
from controller.function import FunctionController
from controller.gui import GUI, Header
from controller.number import NumberController, NumberState
from controller.option import OptionController
from controller.string import StringController
from controller.surface import HeadlessSurface, Surface

__all__ = [
    # Panels
    "GUI",
    "Header",
    # Controllers
    "Controller",
    "BooleanController",
    "ColorController",
    "FunctionController",
    "NumberController",
    "NumberState",
    "OptionController",
    "StringController",
    # Surface and events
    "HeadlessSurface",
    "Surface",
    "PointerEvent",
    "TouchEvent",
    "WheelEvent",
]
