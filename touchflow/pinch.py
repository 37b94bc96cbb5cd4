"""Pinch gestures on a touchpad."""

from __future__ import annotations

from dataclasses import dataclass

from touchflow.handler import (
    DeviceType,
    Gesture,
    GestureControllerDelegate,
    GestureDirection,
    GestureType,
    Handler,
    InputEvent,
    elapsed_ms,
    pinch_percentage,
    timestamp_ms,
)


@dataclass
class PinchState:
    """Progress of the pinch being made."""

    started: bool = False
    start_timestamp: int = 0
    delta: float = 1.0
    direction: GestureDirection = GestureDirection.UNKNOWN
    percentage: float = 0.0
    fingers: int = 0

    def reset(self) -> None:
        """Return to the state before any pinch."""
        self.started = False
        self.start_timestamp = 0
        self.delta = 1.0
        self.direction = GestureDirection.UNKNOWN
        self.percentage = 0.0
        self.fingers = 0


class PinchHandler(Handler):
    """Turns pinch events into begin, update and end notifications.

    No threshold applies: the first update begins the gesture and fixes its
    direction.
    """

    def __init__(self, controller: GestureControllerDelegate) -> None:
        super().__init__(controller)
        self.state = PinchState()

    def _gesture(self, elapsed_time: int) -> Gesture:
        return Gesture(
            type=GestureType.PINCH,
            direction=self.state.direction,
            percentage=self.state.percentage,
            fingers=self.state.fingers,
            device_type=DeviceType.TOUCHPAD,
            elapsed_time=elapsed_time,
        )

    def handle_begin(self, event: InputEvent) -> None:
        """A pinch starts; its direction is not known yet."""
        self.state.reset()

    def handle_update(self, event: InputEvent) -> None:
        """Begin the gesture on the first update, report updates afterwards."""
        state = self.state
        state.delta = event.scale

        if not state.started:
            state.started = True
            state.start_timestamp = timestamp_ms()
            state.direction = (
                GestureDirection.OUT if state.delta > 1 else GestureDirection.IN
            )
            state.percentage = pinch_percentage(state.direction, state.delta)
            state.fingers = event.fingers
            self.controller.on_gesture_begin(self._gesture(0))
        else:
            state.percentage = pinch_percentage(state.direction, state.delta)
            elapsed = elapsed_ms(state.start_timestamp)
            self.controller.on_gesture_update(self._gesture(elapsed))

    def handle_end(self, event: InputEvent) -> None:
        """Report the end of a started pinch and reset."""
        state = self.state
        if state.started:
            state.delta = event.scale
            state.percentage = pinch_percentage(state.direction, state.delta)
            elapsed = elapsed_ms(state.start_timestamp)
            self.controller.on_gesture_end(self._gesture(elapsed))
        state.reset()