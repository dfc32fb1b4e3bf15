"""Shared row widgets: ControllerRow and ControllerInput."""

from __future__ import annotations

import logging
from typing import Callable

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Input, Label

from controller.base import Controller
from ui.ids import cls
import ui.ids as ids

log = logging.getLogger(__name__)


class ControllerInput(Input):
    """An Input that reports focus changes back to its row."""

    def __init__(
        self,
        value: str = "",
        on_focus: Callable[[], None] | None = None,
        on_blur: Callable[[], None] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(value=value, **kwargs)
        self._focus_callback = on_focus
        self._blur_callback = on_blur

    def on_focus(self, event: events.Focus) -> None:
        if self._focus_callback is not None:
            self._focus_callback()

    def on_blur(self, event: events.Blur) -> None:
        if self._blur_callback is not None:
            self._blur_callback()

    def sync(self, text: str) -> None:
        """Show text without echoing it back as an edit."""
        if self.value != text:
            with self.prevent(Input.Changed):
                self.value = text


class ControllerRow(Horizontal):
    """One controller: its name on the left, its widget on the right.

    Subclasses yield the widget from compose_widget() and copy the
    controller's display state onto it in refresh_widget().
    """

    def __init__(self, controller: Controller) -> None:
        super().__init__(classes=f"{ids.CONTROLLER} {controller.kind}")
        self.controller = controller

    def compose(self) -> ComposeResult:
        yield Label(self.controller.label, classes=ids.NAME, markup=False)
        with Horizontal(classes=ids.WIDGET):
            yield from self.compose_widget()

    def compose_widget(self) -> ComposeResult:
        yield from ()

    def on_mount(self) -> None:
        self.refresh_display()

    def refresh_display(self) -> None:
        self.set_class(self.controller.disabled, ids.DISABLED)
        try:
            self.query_one(cls(ids.NAME), Label).update(self.controller.label)
            self.query_one(cls(ids.WIDGET), Horizontal).disabled = self.controller.disabled
            self.refresh_widget()
        except NoMatches:
            log.debug(f"Row for {self.controller!r} is not composed yet")

    def refresh_widget(self) -> None:
        pass
