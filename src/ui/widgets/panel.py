"""Panel widgets: PanelTitle, PanelView and HeaderRow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Static

from controller.gui import GUI, Header
from ui.ids import cls
import ui.ids as ids

if TYPE_CHECKING:
    from ui.surface import TextualSurface

log = logging.getLogger(__name__)

OPEN_MARKER = "▾"
CLOSED_MARKER = "▸"


class PanelTitle(Static):
    """Clickable title bar. Clicking opens or closes the panel."""

    def __init__(self, gui: GUI) -> None:
        super().__init__(classes=ids.TITLE, markup=False)
        self.gui = gui

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.gui.toggle()

    def refresh_title(self) -> None:
        marker = CLOSED_MARKER if self.gui.closed else OPEN_MARKER
        self.update(f"{marker} {self.gui.label}")


class PanelView(Vertical):
    """A GUI: the title followed by the views of its children.

    The root scrolls its children when they overflow the window.
    """

    def __init__(self, gui: GUI, surface: TextualSurface) -> None:
        super().__init__(
            id=ids.PANEL_ROOT if gui.is_root else None,
            classes=ids.PANEL,
        )
        self.gui = gui
        self.surface = surface

    def compose(self) -> ComposeResult:
        yield PanelTitle(self.gui)
        container = VerticalScroll if self.gui.is_root else Vertical
        with container(classes=ids.CHILDREN):
            for child in self.gui.children:
                yield self.surface.view_for(child)

    @property
    def children_container(self) -> Widget:
        return self.query_one(cls(ids.CHILDREN))

    def on_mount(self) -> None:
        self.refresh_display()

    def refresh_display(self) -> None:
        gui = self.gui
        self.set_class(gui.is_root, ids.ROOT)
        self.set_class(gui.auto_place, ids.AUTO_PLACE)
        self.set_class(gui.closed, ids.CLOSED)
        if gui.is_root:
            self.styles.width = gui.panel_width if gui.panel_width is not None else "auto"

        try:
            self.query_one(PanelTitle).refresh_title()
            children = self.children_container
        except NoMatches:
            log.debug(f"Panel for {gui!r} is not composed yet")
            return

        children.display = not gui.closed
        if gui.auto_place and gui.window_height is not None:
            # Leave room for the title row
            children.styles.max_height = max(1, gui.window_height - 1)


class HeaderRow(Static):
    """A bold label separating groups of rows."""

    def __init__(self, header: Header) -> None:
        super().__init__(header.label, classes=ids.HEADER, markup=False)
        self.header = header

    def refresh_display(self) -> None:
        self.update(self.header.label)
