"""Surface: the rendering and input boundary a control panel draws through.

The core never talks to a widget toolkit directly. A root GUI owns one
Surface and every node in its tree (controllers, folders, headers) reaches it
through ``node.parent.root.surface``. The surface is responsible for:

1. **Rendering**: mount/unmount a node's view and refresh it after the node's
   display state changed.
2. **Geometry**: the on-screen extent of a number slider's track, and whether
   the root panel currently shows a scrollbar.
3. **Focus**: blurring a text input (Enter in a number box).
4. **Global input**: a listener hub for gesture events (mouse/touch move and
   release) that controllers subscribe to for the duration of a drag.
5. **Resize**: notifications of the host window height.

HeadlessSurface keeps everything in memory. It is the default surface, so a
GUI works without any display, and tests drive gestures through it.
ui.surface.TextualSurface renders into a Textual app.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import Counter, defaultdict
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from controller.base import Controller
    from controller.gui import GUI

log = logging.getLogger(__name__)

Listener = Callable[[Any], None]
ResizeListener = Callable[[int], None]


class Surface(ABC):
    """Abstract rendering/input boundary."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)
        self._resize_listeners: list[ResizeListener] = []

    # =========================================================================
    # Rendering
    # =========================================================================

    @abstractmethod
    def mount(self, node: Any) -> None:
        """Attach a newly created node below its parent's view."""

    @abstractmethod
    def unmount(self, node: Any) -> None:
        """Detach a destroyed node's view."""

    @abstractmethod
    def refresh(self, node: Any) -> None:
        """Re-project the node's display state onto its view."""

    # =========================================================================
    # Geometry and focus
    # =========================================================================

    @abstractmethod
    def track_bounds(self, controller: Controller) -> tuple[float, float]:
        """Return (left, right) of the controller's slider track."""

    @abstractmethod
    def is_scrollable(self, gui: GUI) -> bool:
        """Check if the panel's children currently overflow (scrollbar shown)."""

    @abstractmethod
    def blur(self, controller: Controller) -> None:
        """Remove focus from the controller's text input."""

    @abstractmethod
    def window_height(self) -> int:
        """Current height of the host window."""

    # =========================================================================
    # Global input listeners
    # =========================================================================

    def add_listener(self, event: str, handler: Listener) -> None:
        """Attach a listener. Attaching one that is already attached is a no-op."""
        handlers = self._listeners[event]
        if handler not in handlers:
            handlers.append(handler)

    def remove_listener(self, event: str, handler: Listener) -> None:
        """Remove a listener. Removing one that isn't attached is a no-op."""
        handlers = self._listeners.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def dispatch(self, event: str, payload: Any = None) -> None:
        """Deliver an event to every listener attached for it."""
        # Handlers may detach themselves while we iterate
        for handler in list(self._listeners.get(event, [])):
            handler(payload)

    def listener_count(self, event: str | None = None) -> int:
        """Number of attached listeners, for one event or all of them."""
        if event is not None:
            return len(self._listeners.get(event, []))
        return sum(len(handlers) for handlers in self._listeners.values())

    # =========================================================================
    # Resize notifications
    # =========================================================================

    def add_resize_listener(self, handler: ResizeListener) -> None:
        self._resize_listeners.append(handler)

    def remove_resize_listener(self, handler: ResizeListener) -> None:
        if handler in self._resize_listeners:
            self._resize_listeners.remove(handler)

    def notify_resize(self, height: int) -> None:
        for handler in list(self._resize_listeners):
            handler(height)


class HeadlessSurface(Surface):
    """In-memory surface with settable geometry.

    Example:
        surface = HeadlessSurface()
        gui = GUI(surface=surface)
        ctrl = gui.add(params, "speed", 0, 10)
        surface.set_track_bounds(ctrl, 0, 100)
        ctrl.on_slider_mouse_down(PointerEvent(25))
        surface.dispatch(MOUSE_UP)
    """

    DEFAULT_TRACK_BOUNDS = (0.0, 100.0)

    def __init__(self, height: int = 24, scrollable: bool = False) -> None:
        super().__init__()
        self.height = height
        self.scrollable = scrollable
        self.mounted: list[Any] = []
        self.refresh_counts: Counter[int] = Counter()
        self._track_bounds: dict[int, tuple[float, float]] = {}

    def mount(self, node: Any) -> None:
        self.mounted.append(node)
        log.debug(f"Mounted {node!r}")

    def unmount(self, node: Any) -> None:
        if node in self.mounted:
            self.mounted.remove(node)
            log.debug(f"Unmounted {node!r}")

    def refresh(self, node: Any) -> None:
        self.refresh_counts[id(node)] += 1

    def is_mounted(self, node: Any) -> bool:
        return node in self.mounted

    def set_track_bounds(self, controller: Controller, left: float, right: float) -> None:
        self._track_bounds[id(controller)] = (float(left), float(right))

    def track_bounds(self, controller: Controller) -> tuple[float, float]:
        return self._track_bounds.get(id(controller), self.DEFAULT_TRACK_BOUNDS)

    def is_scrollable(self, gui: GUI) -> bool:
        return self.scrollable

    def blur(self, controller: Controller) -> None:
        if getattr(controller, "input_focused", False):
            controller.on_input_blur()

    def window_height(self) -> int:
        return self.height

    def notify_resize(self, height: int) -> None:
        self.height = height
        super().notify_resize(height)
