"""Custom Textual widgets for knobs.

This package contains one view per panel node type.
"""

from ui.widgets.base import ControllerInput, ControllerRow
from ui.widgets.color import ColorRow
from ui.widgets.inputs import BooleanRow, FunctionRow, StringRow
from ui.widgets.number import NumberInput, NumberRow, SliderTrack
from ui.widgets.option import OptionRow
from ui.widgets.panel import HeaderRow, PanelTitle, PanelView

__all__ = [
    # Base widgets
    "ControllerInput",
    "ControllerRow",
    # Controller rows
    "BooleanRow",
    "ColorRow",
    "FunctionRow",
    "NumberInput",
    "NumberRow",
    "OptionRow",
    "SliderTrack",
    "StringRow",
    # Panel widgets
    "HeaderRow",
    "PanelTitle",
    "PanelView",
]
