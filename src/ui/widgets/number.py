"""Number row: NumberInput, SliderTrack and NumberRow."""

from __future__ import annotations

from textual import events, on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Input

from controller.events import MOUSE_MOVE, MOUSE_UP, PointerEvent, WheelEvent
from controller.number import NumberController
from ui.widgets.base import ControllerInput, ControllerRow
import ui.ids as ids

FILLED = "█"
EMPTY = "░"


class NumberInput(ControllerInput):
    """Number box. Up/down step the value, shift for ten steps."""

    BINDINGS = [
        Binding("up", "nudge('up')", "Increase", show=False),
        Binding("down", "nudge('down')", "Decrease", show=False),
        Binding("shift+up", "nudge('up', True)", "Increase x10", show=False),
        Binding("shift+down", "nudge('down', True)", "Decrease x10", show=False),
    ]

    def __init__(self, controller: NumberController, **kwargs) -> None:
        super().__init__(
            controller.input_value,
            on_focus=controller.on_input_focus,
            on_blur=controller.on_input_blur,
            **kwargs,
        )
        self.controller = controller

    def action_nudge(self, key: str, shift: bool = False) -> None:
        self.controller.on_input_keydown(key, shift)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.stop()
        self.controller.on_input_wheel(WheelEvent(delta_y=-1))

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.stop()
        self.controller.on_input_wheel(WheelEvent(delta_y=1))


class SliderTrack(Widget):
    """Horizontal slider. Dragging reports pointer positions to the surface."""

    fill = reactive(0.0)

    def __init__(self, controller: NumberController) -> None:
        super().__init__(classes=ids.SLIDER)
        self.controller = controller
        self._dragging = False

    def render(self) -> str:
        width = self.size.width
        filled = round(width * max(0.0, min(100.0, self.fill)) / 100)
        return FILLED * filled + EMPTY * (width - filled)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        event.stop()
        self._dragging = True
        self.capture_mouse()
        self.controller.on_slider_mouse_down(PointerEvent(event.screen_x, event.screen_y))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self._dragging:
            self.controller.surface.dispatch(MOUSE_MOVE, PointerEvent(event.screen_x, event.screen_y))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if not self._dragging:
            return
        self._dragging = False
        self.release_mouse()
        self.controller.surface.dispatch(MOUSE_UP, PointerEvent(event.screen_x, event.screen_y))

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.stop()
        self.controller.on_slider_wheel(WheelEvent(delta_y=-1))

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.stop()
        self.controller.on_slider_wheel(WheelEvent(delta_y=1))


class NumberRow(ControllerRow):
    """Slider (once both bounds are set) and number box bound to an int/float."""

    controller: NumberController

    def compose_widget(self) -> ComposeResult:
        yield SliderTrack(self.controller)
        yield NumberInput(self.controller)

    @on(Input.Changed)
    def on_number_typed(self, event: Input.Changed) -> None:
        event.stop()
        self.controller.on_input(event.value)

    @on(Input.Submitted)
    def on_number_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.controller.on_input_keydown("enter")

    def refresh_widget(self) -> None:
        controller = self.controller
        self.set_class(controller.has_slider, ids.HAS_SLIDER)

        track = self.query_one(SliderTrack)
        track.display = controller.has_slider
        track.fill = controller.fill_percent or 0.0
        track.set_class(controller.slider_active, ids.ACTIVE)

        self.query_one(NumberInput).sync(controller.input_value)
