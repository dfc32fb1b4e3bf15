"""Controller: the read/write/display contract shared by every control.

Every edit a user makes, whatever the input mechanism (typing, dragging,
selecting, toggling), ends in Controller.set_value(). That single entry point
writes the bound property, then fires the change callback, then the finish
callback (only when the edit gesture is complete), then refreshes the display.
Subclasses never write the bound object any other way.

Construction order
------------------
Subclasses initialize their own display state, then call
``super().__init__()``, which appends the controller to its parent, mounts it
on the surface and projects the initial value with update_display().
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, Callable

from model.binding import Binding

if TYPE_CHECKING:
    from controller.gui import GUI
    from controller.surface import Surface

log = logging.getLogger(__name__)

ValueCallback = Callable[[Any], None]


def user_input(method: Callable) -> Callable:
    """Ignore a user-input handler while the controller is disabled."""

    @functools.wraps(method)
    def wrapper(self: Controller, *args: Any, **kwargs: Any) -> Any:
        if self.disabled:
            log.debug(f"Ignoring {method.__name__} on disabled {self!r}")
            return None
        return method(self, *args, **kwargs)

    return wrapper


class Controller:
    """Base class for a widget bound to one property of one object."""

    kind = "controller"

    def __init__(self, parent: GUI, obj: Any, prop: str) -> None:
        self.parent = parent
        self.binding = Binding(obj, prop)

        self._name = prop
        self._disabled = False
        self._on_change: ValueCallback | None = None
        self._on_finish_change: ValueCallback | None = None

        self.parent.children.append(self)
        self.surface.mount(self)
        self.update_display()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.property!r}>"

    @property
    def object(self) -> Any:
        return self.binding.object

    @property
    def surface(self) -> Surface:
        return self.parent.root.surface

    @property
    def disabled(self) -> bool:
        return self._disabled

    @property
    def label(self) -> str:
        """The display name shown next to the widget."""
        return self._name

    # Defined last: it shadows the builtin for the rest of the class body
    @property
    def property(self) -> str:
        return self.binding.property

    # =========================================================================
    # Fluent API
    # =========================================================================

    def name(self, name: str) -> Controller:
        self._name = name
        self.surface.refresh(self)
        return self

    def on_change(self, fn: ValueCallback | None) -> Controller:
        """Register the callback fired on every change (replaces any previous one)."""
        self._on_change = fn
        return self

    def on_finish_change(self, fn: ValueCallback | None) -> Controller:
        """Register the callback fired when an edit gesture completes."""
        self._on_finish_change = fn
        return self

    def enable(self, enable: bool = True) -> Controller:
        self._disabled = not enable
        self.surface.refresh(self)
        return self

    def disable(self) -> Controller:
        return self.enable(False)

    def options(self, options: Any) -> Controller:
        """Replace this controller with an option controller for the same binding."""
        controller = self.parent.add(self.object, self.property, options)
        controller.name(self._name)
        self.destroy()
        return controller

    def destroy(self) -> None:
        """Remove this controller from its parent and from the surface."""
        if self in self.parent.children:
            self.parent.children.remove(self)
        self.surface.unmount(self)

    # =========================================================================
    # Value synchronization
    # =========================================================================

    def get_value(self) -> Any:
        return self.binding.get()

    def set_value(self, value: Any, finished: bool = True) -> None:
        """Write value into the bound property and run callbacks + refresh."""
        self.binding.set(value)
        self._on_set_value(finished)

    def update_display(self) -> None:
        """Project the bound value onto the display. Safe to call at any time."""
        self.surface.refresh(self)

    def _on_set_value(self, finished: bool = True) -> None:
        self._call_on_change()
        if finished:
            self._call_on_finish_change()
        self.update_display()

    def _call_on_change(self) -> None:
        if self._on_change is not None:
            self._on_change(self.get_value())

    def _call_on_finish_change(self) -> None:
        if self._on_finish_change is not None:
            self._on_finish_change(self.get_value())
