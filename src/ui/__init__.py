"""UI module containing the Textual surface, widgets, and styles."""

from ui.widgets import (
    BooleanRow,
    ColorRow,
    FunctionRow,
    HeaderRow,
    NumberRow,
    OptionRow,
    PanelView,
    StringRow,
)
from ui.surface import TextualSurface
from ui.styles import load_styles
from ui import ids

__all__ = [
    # Surface
    "TextualSurface",
    # Widgets
    "BooleanRow",
    "ColorRow",
    "FunctionRow",
    "HeaderRow",
    "NumberRow",
    "OptionRow",
    "PanelView",
    "StringRow",
    # Styles
    "load_styles",
]
