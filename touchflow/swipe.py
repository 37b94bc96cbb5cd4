"""Swipe gestures on a touchpad."""

from __future__ import annotations

from dataclasses import dataclass

from touchflow.handler import (
    DeviceInfo,
    DeviceType,
    Gesture,
    GestureControllerDelegate,
    GestureDirection,
    GestureType,
    Handler,
    InputEvent,
    elapsed_ms,
    get_device_info,
    swipe_direction,
    swipe_percentage,
    timestamp_ms,
)


@dataclass
class SwipeState:
    """Progress of the swipe being made."""

    started: bool = False
    start_timestamp: int = 0
    delta_x: float = 0.0
    delta_y: float = 0.0
    direction: GestureDirection = GestureDirection.UNKNOWN
    percentage: float = 0.0
    fingers: int = 0

    def reset(self) -> None:
        """Return to the state before any swipe."""
        self.started = False
        self.start_timestamp = 0
        self.delta_x = 0.0
        self.delta_y = 0.0
        self.direction = GestureDirection.UNKNOWN
        self.percentage = 0.0
        self.fingers = 0


class SwipeHandler(Handler):
    """Turns swipe events into begin, update and end notifications.

    A swipe is only reported once its motion passes the device's start
    threshold; the direction is fixed at that moment.
    """

    def __init__(self, controller: GestureControllerDelegate) -> None:
        super().__init__(controller)
        self.state = SwipeState()

    def _gesture(self, elapsed_time: int) -> Gesture:
        return Gesture(
            type=GestureType.SWIPE,
            direction=self.state.direction,
            percentage=self.state.percentage,
            fingers=self.state.fingers,
            device_type=DeviceType.TOUCHPAD,
            elapsed_time=elapsed_time,
        )

    def _update_percentage(self, info: DeviceInfo) -> None:
        self.state.percentage = swipe_percentage(
            info, self.state.direction, self.state.delta_x, self.state.delta_y
        )

    def handle_begin(self, event: InputEvent) -> None:
        """A swipe starts; its direction is not known yet."""
        self.state.reset()

    def handle_update(self, event: InputEvent) -> None:
        """Accumulate motion, reporting a begin once past the threshold."""
        state = self.state
        state.delta_x += event.dx
        state.delta_y += event.dy
        info = get_device_info(event)

        if not state.started:
            if (
                abs(state.delta_x) > info.start_threshold
                or abs(state.delta_y) > info.start_threshold
            ):
                state.started = True
                state.start_timestamp = timestamp_ms()
                state.direction = swipe_direction(state.delta_x, state.delta_y)
                self._update_percentage(info)
                state.fingers = event.fingers
                self.controller.on_gesture_begin(self._gesture(0))
        else:
            self._update_percentage(info)
            elapsed = elapsed_ms(state.start_timestamp)
            self.controller.on_gesture_update(self._gesture(elapsed))

    def handle_end(self, event: InputEvent) -> None:
        """Report the end of a started swipe and reset."""
        if self.state.started:
            self._update_percentage(get_device_info(event))
            elapsed = elapsed_ms(self.state.start_timestamp)
            self.controller.on_gesture_end(self._gesture(elapsed))
        self.state.reset()