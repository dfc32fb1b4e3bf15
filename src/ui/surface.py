"""TextualSurface: renders a GUI tree as Textual widgets.

Each node gets one view, created on first use and cached until the node is
unmounted. A node added before its parent's view is on screen is picked up by
the parent's compose(); one added later is mounted live into the parent's
children container.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from textual.css.query import NoMatches
from textual.widget import Widget

from controller.boolean import BooleanController
from controller.color import ColorController
from controller.function import FunctionController
from controller.gui import GUI, Header
from controller.number import NumberController
from controller.option import OptionController
from controller.string import StringController
from controller.surface import Surface
from ui.widgets import (
    BooleanRow,
    ColorRow,
    ControllerInput,
    FunctionRow,
    HeaderRow,
    NumberRow,
    OptionRow,
    PanelView,
    SliderTrack,
    StringRow,
)

if TYPE_CHECKING:
    from textual.app import App

    from controller.base import Controller

log = logging.getLogger(__name__)

DEFAULT_WINDOW_HEIGHT = 24

ROW_CLASSES: dict[type, type[Widget]] = {
    BooleanController: BooleanRow,
    ColorController: ColorRow,
    FunctionController: FunctionRow,
    NumberController: NumberRow,
    OptionController: OptionRow,
    StringController: StringRow,
    Header: HeaderRow,
}


class TextualSurface(Surface):
    """Surface backed by the widgets of a running Textual app."""

    def __init__(self, app: App | None = None) -> None:
        super().__init__()
        self.app = app
        self._views: dict[Any, Widget] = {}

    def view_for(self, node: Any) -> Widget:
        """Return the node's view, creating it on first use."""
        view = self._views.get(node)
        if view is None:
            view = self._create_view(node)
            self._views[node] = view
        return view

    def _create_view(self, node: Any) -> Widget:
        if isinstance(node, GUI):
            return PanelView(node, self)
        for node_type in type(node).__mro__:
            row_class = ROW_CLASSES.get(node_type)
            if row_class is not None:
                return row_class(node)
        raise TypeError(f"No view for {node!r}")

    def _mounted_view(self, node: Any) -> Widget | None:
        view = self._views.get(node)
        if view is None or not view.is_mounted:
            return None
        return view

    # =========================================================================
    # Rendering
    # =========================================================================

    def mount(self, node: Any) -> None:
        if node.parent is None:
            # The app composes the root view
            return
        parent_view = self._mounted_view(node.parent)
        if parent_view is None:
            return
        parent_view.children_container.mount(self.view_for(node))
        log.debug(f"Mounted view for {node!r}")

    def unmount(self, node: Any) -> None:
        view = self._views.pop(node, None)
        if view is not None and view.is_mounted:
            view.remove()
            log.debug(f"Removed view for {node!r}")

    def refresh(self, node: Any) -> None:
        view = self._mounted_view(node)
        if view is not None:
            view.refresh_display()

    # =========================================================================
    # Geometry and focus
    # =========================================================================

    def track_bounds(self, controller: Controller) -> tuple[float, float]:
        view = self._mounted_view(controller)
        if view is None:
            return (0.0, 0.0)
        try:
            region = view.query_one(SliderTrack).region
        except NoMatches:
            log.debug(f"No slider track for {controller!r}")
            return (0.0, 0.0)
        # Pointer positions are whole cells, so the last cell is the maximum
        return (float(region.x), float(region.x + region.width - 1))

    def is_scrollable(self, gui: GUI) -> bool:
        view = self._mounted_view(gui)
        if view is None:
            return False
        return view.children_container.max_scroll_y > 0

    def blur(self, controller: Controller) -> None:
        view = self._mounted_view(controller)
        if view is not None:
            try:
                view.query_one(ControllerInput).blur()
                return
            except NoMatches:
                log.debug(f"No input to blur for {controller!r}")
        if getattr(controller, "input_focused", False):
            controller.on_input_blur()

    def window_height(self) -> int:
        if self.app is None or not self.app.is_running:
            return DEFAULT_WINDOW_HEIGHT
        return self.app.size.height
