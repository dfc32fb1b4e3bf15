"""Binding: the (object, property) pair a controller reads and writes.

A bound object is either a mapping (the property is a key) or any other
object (the property is an attribute). The binding never owns the object; it
only reads and writes one property of it.

Value shapes
------------
The shape of the initial value decides which controller is built:

    bool            -> BOOLEAN   (checked before NUMBER: bool is an int)
    str             -> STRING
    int / float     -> NUMBER
    callable        -> FUNCTION
    anything else   -> OBJECT    (e.g. {"r": 1, "g": 0, "b": 0})
    None            -> no shape

Option specs
------------
A list/tuple, a mapping, or an Enum class passed as the third argument of
GUI.add() turns any binding into an option (dropdown) binding.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from enum import Enum
from typing import Any


class BindingError(Exception):
    """Raised when a property cannot be bound to a controller."""


class ValueShape(Enum):
    """Runtime shape of a bound value."""

    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    FUNCTION = "function"
    OBJECT = "object"


def classify(value: Any) -> ValueShape | None:
    """Return the shape of value, or None if it has no recognized shape."""
    if value is None:
        return None
    if isinstance(value, bool):
        return ValueShape.BOOLEAN
    if isinstance(value, str):
        return ValueShape.STRING
    if isinstance(value, numbers.Real):
        return ValueShape.NUMBER
    if callable(value):
        return ValueShape.FUNCTION
    return ValueShape.OBJECT


def is_options_spec(value: Any) -> bool:
    """Check if value can describe the entries of an option controller."""
    if isinstance(value, (list, tuple, Mapping)):
        return True
    return isinstance(value, type) and issubclass(value, Enum)


class Binding:
    """A non-owning reference to one property of one object."""

    __slots__ = ("object", "property")

    def __init__(self, obj: Any, prop: str) -> None:
        self.object = obj
        self.property = prop

    def __repr__(self) -> str:
        return f"Binding({type(self.object).__name__}, {self.property!r})"

    @property
    def is_mapping(self) -> bool:
        return isinstance(self.object, Mapping)

    def is_defined(self) -> bool:
        """Check if the property currently exists on the object."""
        if self.is_mapping:
            return self.property in self.object
        return hasattr(self.object, self.property)

    def get(self) -> Any:
        if self.is_mapping:
            return self.object[self.property]
        return getattr(self.object, self.property)

    def set(self, value: Any) -> None:
        if self.is_mapping:
            self.object[self.property] = value
        else:
            setattr(self.object, self.property, value)

    def require(self) -> Any:
        """Return the current value, raising BindingError if it is undefined."""
        if not self.is_defined():
            raise BindingError(
                f'Property "{self.property}" of {self.object!r} is undefined.'
            )
        return self.get()
