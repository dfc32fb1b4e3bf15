"""Input event payloads delivered to controllers by a surface.

Coordinates are in the surface's own units (terminal cells for the Textual
surface, pixels for a browser-like host); controllers only compare them with
bounds reported by the same surface.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Global listener event names
MOUSE_MOVE = "mousemove"
MOUSE_UP = "mouseup"
TOUCH_MOVE = "touchmove"
TOUCH_END = "touchend"


@dataclass(frozen=True)
class PointerEvent:
    """A mouse press or move."""

    client_x: float
    client_y: float = 0.0


@dataclass(frozen=True)
class TouchEvent:
    """A touch event carrying every active touch point."""

    touches: list[PointerEvent] = field(default_factory=list)

    @classmethod
    def at(cls, client_x: float, client_y: float = 0.0) -> TouchEvent:
        """Single-finger touch at (client_x, client_y)."""
        return cls([PointerEvent(client_x, client_y)])

    @property
    def first(self) -> PointerEvent:
        return self.touches[0]


@dataclass(frozen=True)
class WheelEvent:
    """A wheel/scroll event. Positive delta_y scrolls down."""

    delta_x: float = 0.0
    delta_y: float = 0.0

    @property
    def amount(self) -> float:
        """Signed amount to add: right and up increase the value."""
        return self.delta_x - self.delta_y
