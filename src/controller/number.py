"""NumberController: a number box with an optional slider.

Input channels and what they do to the typed/dragged value:

    channel             clamp   snap    finished
    typing              yes     no      on blur / Enter
    up/down keys        yes     yes     no
    wheel over box      yes     yes     no
    slider drag         yes     yes     on mouse-up / touch-end
    wheel over slider   yes     yes     no

Typing is the one channel that allows sub-step precision.

The slider only exists once both min and max are known. It is created the
first time both bounds are set, and if no step was given explicitly the step
becomes (max - min) / 1000 at that point.

Gesture states
--------------
    IDLE ──focus──> TEXT_FOCUSED ──blur──> IDLE
    IDLE ──mouse-down──> SLIDER_DRAGGING ──mouse-up──> IDLE
    IDLE ──touch-start, no scrollbar──> TOUCH_DRAGGING ──touch-end──> IDLE
    IDLE ──touch-start, scrollbar──> TOUCH_PENDING
    TOUCH_PENDING ──move, |dx| > |dy|──> TOUCH_DRAGGING
    TOUCH_PENDING ──move, otherwise──> IDLE (scroll, nothing written)

Move/release listeners live on the surface only for the duration of a
gesture.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from constants import COARSE_STEP_MULTIPLIER, SLIDER_RESOLUTION
from controller.base import Controller, user_input
from controller.events import (
    MOUSE_MOVE,
    MOUSE_UP,
    TOUCH_END,
    TOUCH_MOVE,
    PointerEvent,
    TouchEvent,
    WheelEvent,
)
from model.numeric import clamp, format_number, implicit_step, map_range, parse_number, snap

if TYPE_CHECKING:
    from controller.gui import GUI

log = logging.getLogger(__name__)


class NumberState(Enum):
    """Interaction state of a number controller."""

    IDLE = "idle"
    TEXT_FOCUSED = "text-focused"
    SLIDER_DRAGGING = "slider-dragging"
    TOUCH_PENDING = "touch-pending"
    TOUCH_DRAGGING = "touch-dragging"


class NumberController(Controller):
    """Number box (and slider, once bounded) bound to an int/float property."""

    kind = "number"

    def __init__(
        self,
        parent: GUI,
        obj: Any,
        prop: str,
        min_value: float | None = None,
        max_value: float | None = None,
        step: float | None = None,
    ) -> None:
        self._min: float | None = None
        self._max: float | None = None
        self._step: float = implicit_step(None, None)
        self._step_explicit = False

        self._slider_created = False
        self.slider_active = False
        self.fill_percent: float | None = None
        self.input_focused = False
        self.input_value = ""
        self.state = NumberState.IDLE
        self._touch_origin: PointerEvent | None = None

        super().__init__(parent, obj, prop)

        self.min(min_value)
        self.max(max_value)
        step_explicit = step is not None
        self.step(step if step_explicit else implicit_step(self._min, self._max), step_explicit)

        self.update_display()

    # =========================================================================
    # Fluent API
    # =========================================================================

    def min(self, value: float | None) -> NumberController:
        self._min = value
        self._on_update_min_max()
        return self

    def max(self, value: float | None) -> NumberController:
        self._max = value
        self._on_update_min_max()
        return self

    def step(self, value: float, explicit: bool = True) -> NumberController:
        self._step = value
        self._step_explicit = explicit
        return self

    @property
    def bounds(self) -> tuple[float | None, float | None]:
        return self._min, self._max

    @property
    def step_size(self) -> float:
        return self._step

    @property
    def step_explicit(self) -> bool:
        return self._step_explicit

    @property
    def has_slider(self) -> bool:
        """Whether the slider is shown: created once, hidden while a bound is unset."""
        return self._slider_created and self._min is not None and self._max is not None

    def _on_update_min_max(self) -> None:
        if not self._slider_created:
            if self._min is None or self._max is None:
                return
            # First time both bounds are known
            if not self._step_explicit:
                self.step(implicit_step(self._min, self._max), False)
            self._slider_created = True
        # Clearing a bound later hides the slider until it is set again
        self.update_display()

    # =========================================================================
    # Display
    # =========================================================================

    def update_display(self) -> None:
        value = self.get_value()

        if self.has_slider:
            span = self._max - self._min
            self.fill_percent = 0.0 if span == 0 else (value - self._min) / span * 100
        else:
            self.fill_percent = None

        # Never overwrite what the user is typing
        if not self.input_focused:
            self.input_value = format_number(value)

        super().update_display()

    def _clamp(self, value: float) -> float:
        return clamp(value, self._min, self._max)

    def _snap(self, value: float) -> float:
        return snap(value, self._step)

    # =========================================================================
    # Text input
    # =========================================================================

    def on_input_focus(self) -> None:
        self.input_focused = True
        self.state = NumberState.TEXT_FOCUSED

    @user_input
    def on_input(self, text: str) -> None:
        """Handle a keystroke: the input box now contains text."""
        self.input_value = text
        value = parse_number(text)
        if value is None:
            log.debug(f"Ignoring unparseable number {text!r} for {self!r}")
            return
        self.set_value(self._clamp(value), False)

    def on_input_blur(self) -> None:
        self.input_focused = False
        if self.state is NumberState.TEXT_FOCUSED:
            self.state = NumberState.IDLE
        self._call_on_finish_change()
        self.update_display()

    @user_input
    def on_input_keydown(self, key: str, shift: bool = False) -> None:
        multiplier = COARSE_STEP_MULTIPLIER if shift else 1
        if key == "enter":
            self.surface.blur(self)
        elif key == "up":
            self._increment_input(self._step * multiplier)
        elif key == "down":
            self._increment_input(-self._step * multiplier)

    @user_input
    def on_input_wheel(self, event: WheelEvent) -> None:
        self._increment_input(event.amount * self._step)

    def _increment_input(self, delta: float) -> None:
        value = parse_number(self.input_value)
        if value is None:
            return
        self.set_value(self._snap(self._clamp(value + delta)), False)
        # update_display() skips the text while focused, so write it here
        self.input_value = format_number(self.get_value())
        self.surface.refresh(self)

    # =========================================================================
    # Slider: mouse
    # =========================================================================

    def _set_value_from_x(self, client_x: float) -> None:
        if not self.has_slider:
            return
        # Poll the track every time rather than caching it across a drag
        left, right = self.surface.track_bounds(self)
        value = map_range(client_x, left, right, self._min, self._max)
        self.set_value(self._snap(self._clamp(value)), False)

    @user_input
    def on_slider_mouse_down(self, event: PointerEvent) -> None:
        if not self.has_slider:
            return
        self.state = NumberState.SLIDER_DRAGGING
        self.slider_active = True
        self._set_value_from_x(event.client_x)
        self.surface.add_listener(MOUSE_MOVE, self._on_mouse_move)
        self.surface.add_listener(MOUSE_UP, self._on_mouse_up)

    def _on_mouse_move(self, event: PointerEvent) -> None:
        self._set_value_from_x(event.client_x)

    def _on_mouse_up(self, event: PointerEvent | None = None) -> None:
        self._call_on_finish_change()
        self._end_gesture()

    # =========================================================================
    # Slider: touch
    # =========================================================================

    @user_input
    def on_slider_touch_start(self, event: TouchEvent) -> None:
        if not self.has_slider or len(event.touches) != 1:
            return

        if not self.surface.is_scrollable(self.parent.root):
            # Nothing to scroll, so the touch can only mean "drag"
            self.state = NumberState.TOUCH_DRAGGING
            self.slider_active = True
            self._set_value_from_x(event.first.client_x)
        else:
            # Wait for the first move to tell a drag from a scroll
            self.state = NumberState.TOUCH_PENDING
            self._touch_origin = event.first

        self.surface.add_listener(TOUCH_MOVE, self._on_touch_move)
        self.surface.add_listener(TOUCH_END, self._on_touch_end)

    def _on_touch_move(self, event: TouchEvent) -> None:
        touch = event.first

        if self.state is not NumberState.TOUCH_PENDING:
            self._set_value_from_x(touch.client_x)
            return

        dx = touch.client_x - self._touch_origin.client_x
        dy = touch.client_y - self._touch_origin.client_y
        if abs(dx) > abs(dy):
            self.state = NumberState.TOUCH_DRAGGING
            self.slider_active = True
            self._set_value_from_x(touch.client_x)
        else:
            log.debug(f"Touch on {self!r} is a scroll, abandoning drag")
            self._end_gesture()

    def _on_touch_end(self, event: TouchEvent | None = None) -> None:
        self._call_on_finish_change()
        self._end_gesture()

    # =========================================================================
    # Slider: wheel
    # =========================================================================

    @user_input
    def on_slider_wheel(self, event: WheelEvent) -> None:
        if not self.has_slider:
            return
        delta = event.amount * (self._max - self._min) / SLIDER_RESOLUTION
        self.set_value(self._snap(self._clamp(self.get_value() + delta)), False)

    # =========================================================================
    # Gesture cleanup
    # =========================================================================

    def _detach_listeners(self) -> None:
        self.surface.remove_listener(MOUSE_MOVE, self._on_mouse_move)
        self.surface.remove_listener(MOUSE_UP, self._on_mouse_up)
        self.surface.remove_listener(TOUCH_MOVE, self._on_touch_move)
        self.surface.remove_listener(TOUCH_END, self._on_touch_end)

    def _end_gesture(self) -> None:
        self._detach_listeners()
        self._touch_origin = None
        self.slider_active = False
        self.state = NumberState.TEXT_FOCUSED if self.input_focused else NumberState.IDLE
        self.surface.refresh(self)

    def destroy(self) -> None:
        self._detach_listeners()
        super().destroy()
