"""GUI: a panel (root) or folder holding controllers, headers and sub-folders.

The GUI only manages membership and lifecycle. It picks a controller class
when a property is added, and it never takes part in value flow afterwards.

Controller selection in add(), first match wins:

    1. third argument is a list/tuple, mapping or Enum class -> OptionController
    2. bool                                                 -> BooleanController
    3. str                                                  -> StringController
    4. callable                                             -> FunctionController
    5. int / float                                          -> NumberController

Anything else (including None) raises BindingError, as does a property that
does not exist. Colors are never inferred; use add_color().

Tree
----
Each node keeps a non-owning ``parent`` reference and the parent owns the
ordered ``children`` list. Only the root owns the surface; folders reach it
through ``root``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from constants import DEFAULT_PANEL_NAME, DEFAULT_PANEL_WIDTH
from controller.base import Controller
from controller.boolean import BooleanController
from controller.color import ColorController
from controller.function import FunctionController
from controller.number import NumberController
from controller.option import OptionController
from controller.string import StringController
from controller.surface import HeadlessSurface, Surface
from model.binding import Binding, BindingError, ValueShape, classify, is_options_spec

log = logging.getLogger(__name__)


class Header:
    """A bold label row separating groups of controllers."""

    kind = "header"

    def __init__(self, parent: GUI, name: str) -> None:
        self.parent = parent
        self._name = name
        self.parent.children.append(self)
        self.surface.mount(self)
        self.surface.refresh(self)

    def __repr__(self) -> str:
        return f"<Header {self._name!r}>"

    @property
    def surface(self) -> Surface:
        return self.parent.root.surface

    @property
    def label(self) -> str:
        return self._name

    def name(self, name: str) -> Header:
        self._name = name
        self.surface.refresh(self)
        return self

    def destroy(self) -> None:
        if self in self.parent.children:
            self.parent.children.remove(self)
        self.surface.unmount(self)


class GUI:
    """A collapsible panel of controllers.

    The root panel (no parent) owns the surface, a width and the auto-place
    flag. An auto-placed root docks to the side of the window and tracks the
    window height so its contents can scroll.
    """

    kind = "gui"

    def __init__(
        self,
        parent: GUI | None = None,
        name: str = DEFAULT_PANEL_NAME,
        auto_place: bool = True,
        width: int | None = DEFAULT_PANEL_WIDTH,
        surface: Surface | None = None,
    ) -> None:
        self.parent = parent
        self.children: list[Controller | GUI | Header] = []
        self._name = name
        self._closed = False
        self._width: int | None = None
        self.auto_place = False
        self.window_height: int | None = None

        if self.parent is not None:
            self.root: GUI = self.parent.root
            self.parent.children.append(self)
            self.surface.mount(self)
        else:
            self.root = self
            self._surface = surface if surface is not None else HeadlessSurface()
            self._width = width
            self.auto_place = auto_place
            self.surface.mount(self)

            if self.auto_place:
                self.surface.add_resize_listener(self._on_resize)
                self._on_resize(self.surface.window_height())

        self.surface.refresh(self)

    def __repr__(self) -> str:
        return f"<GUI {self._name!r}>"

    @property
    def surface(self) -> Surface:
        return self.root._surface

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def label(self) -> str:
        return self._name

    @property
    def panel_width(self) -> int | None:
        return self._width

    @property
    def closed(self) -> bool:
        return self._closed

    # =========================================================================
    # Adding children
    # =========================================================================

    def add(
        self,
        obj: Any,
        prop: str,
        options_or_min: Any = None,
        max_value: float | None = None,
        step: float | None = None,
    ) -> Controller:
        """Add a controller for obj[prop], chosen from the value's shape.

        Args:
            obj: Mapping or object holding the property
            prop: Key or attribute name
            options_or_min: Option spec (list/tuple, mapping, Enum class) or,
                for numbers, the minimum
            max_value: Maximum, for numbers
            step: Step, for numbers

        Raises:
            BindingError: if the property is undefined or has no controller type
        """
        initial_value = Binding(obj, prop).require()

        if is_options_spec(options_or_min):
            return OptionController(self, obj, prop, options_or_min)

        shape = classify(initial_value)
        if shape is ValueShape.BOOLEAN:
            return BooleanController(self, obj, prop)
        if shape is ValueShape.STRING:
            return StringController(self, obj, prop)
        if shape is ValueShape.FUNCTION:
            return FunctionController(self, obj, prop)
        if shape is ValueShape.NUMBER:
            return NumberController(self, obj, prop, options_or_min, max_value, step)

        raise BindingError(f"No suitable controller type for {initial_value!r}")

    def add_color(self, obj: Any, prop: str) -> ColorController:
        return ColorController(self, obj, prop)

    def add_folder(self, name: str) -> GUI:
        return GUI(parent=self, name=name)

    def add_header(self, name: str) -> Header:
        return Header(self, name)

    # =========================================================================
    # Appearance
    # =========================================================================

    def name(self, name: str) -> GUI:
        self._name = name
        self.surface.refresh(self)
        return self

    def width(self, width: int | None) -> GUI:
        """Set the panel width. None sizes the panel to its content."""
        self._width = width
        self.surface.refresh(self)
        return self

    def open(self, open: bool = True) -> GUI:
        self._closed = not open
        self.surface.refresh(self)
        return self

    def close(self) -> GUI:
        return self.open(False)

    def toggle(self) -> GUI:
        """Open a closed panel or close an open one (title activation)."""
        return self.open(self._closed)

    def _on_resize(self, height: int) -> None:
        self.window_height = height
        self.surface.refresh(self)

    # =========================================================================
    # Traversal
    # =========================================================================

    def controllers(self) -> Iterator[Controller]:
        """Yield every controller in this panel and its folders, depth first."""
        for child in self.children:
            if isinstance(child, Controller):
                yield child
            elif isinstance(child, GUI):
                yield from child.controllers()

    def folders(self) -> list[GUI]:
        return [child for child in self.children if isinstance(child, GUI)]

    def update_display(self) -> None:
        """Refresh every controller, e.g. after the host changed bound values."""
        for controller in self.controllers():
            controller.update_display()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def destroy(self) -> None:
        """Destroy all children, then detach this panel."""
        for child in list(self.children):
            child.destroy()

        if self.parent is not None and self in self.parent.children:
            self.parent.children.remove(self)

        self.surface.unmount(self)

        if self.is_root:
            self.surface.remove_resize_listener(self._on_resize)
        log.debug(f"Destroyed {self!r}")
