"""Model layer for knobs: bindings, value shapes, numeric and color policies."""

from model.binding import Binding, BindingError, ValueShape, classify, is_options_spec
from model import colors, numeric

__all__ = [
    "Binding",
    "BindingError",
    "ValueShape",
    "classify",
    "is_options_spec",
    "colors",
    "numeric",
]
