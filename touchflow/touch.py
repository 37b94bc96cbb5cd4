"""Multi-finger gestures on a touchscreen, built from individual touch points."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

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
    pinch_percentage,
    swipe_direction,
    swipe_percentage,
    timestamp_ms,
)

TAP_TIME_MS = 150


@dataclass
class TouchState:
    """Touch points on the screen and the gesture they are making."""

    started: bool = False
    type: GestureType = GestureType.NOT_SUPPORTED
    direction: GestureDirection = GestureDirection.UNKNOWN
    start_timestamp: int = 0
    start_fingers: int = 0
    start_x: dict[int, float] = field(default_factory=dict)
    start_y: dict[int, float] = field(default_factory=dict)
    current_fingers: int = 0
    current_x: dict[int, float] = field(default_factory=dict)
    current_y: dict[int, float] = field(default_factory=dict)
    tap_fingers: int = 0

    def reset(self) -> None:
        """Forget the gesture but keep the touch points.

        Gestures end while one finger is still on the screen, so the
        positions and the finger count stay as they are.
        """
        self.started = False
        self.type = GestureType.NOT_SUPPORTED
        self.direction = GestureDirection.UNKNOWN
        self.start_timestamp = 0
        self.start_fingers = 0
        self.tap_fingers = 0


class TouchHandler(Handler):
    """Recognises taps, swipes and pinches made with several fingers."""

    def __init__(self, controller: GestureControllerDelegate) -> None:
        super().__init__(controller)
        self.state = TouchState()

    def _gesture(self, percentage: float, elapsed_time: int) -> Gesture:
        return Gesture(
            type=self.state.type,
            direction=self.state.direction,
            percentage=percentage,
            fingers=self.state.start_fingers,
            device_type=DeviceType.TOUCHSCREEN,
            elapsed_time=elapsed_time,
        )

    def _slot_delta(self, slot: int) -> tuple[float, float]:
        state = self.state
        return (
            state.current_x[slot] - state.start_x[slot],
            state.current_y[slot] - state.start_y[slot],
        )

    def _percentage(self, info: DeviceInfo, delta_x: float, delta_y: float) -> float:
        if self.state.type is GestureType.SWIPE:
            return swipe_percentage(info, self.state.direction, delta_x, delta_y)
        return pinch_percentage(self.state.direction, self.pinch_delta())

    def handle_down(self, event: InputEvent) -> None:
        """A finger touches the screen."""
        state = self.state
        state.current_fingers += 1

        slot = event.slot
        state.start_x[slot] = event.x
        state.start_y[slot] = event.y
        state.current_x[slot] = event.x
        state.current_y[slot] = event.y

        # Remembered in case the touch turns out to be a tap.
        state.tap_fingers = state.current_fingers
        if state.current_fingers == 1:
            state.start_timestamp = timestamp_ms()

    def handle_up(self, event: InputEvent) -> None:
        """A finger leaves the screen; may finish a tap or a started gesture."""
        state = self.state
        state.current_fingers -= 1
        slot = event.slot
        elapsed = elapsed_ms(state.start_timestamp)

        if (
            not state.started
            and state.current_fingers == 0
            and state.tap_fingers >= 2
            and elapsed < TAP_TIME_MS
        ):
            for notify in (self.controller.on_gesture_begin, self.controller.on_gesture_end):
                notify(
                    Gesture(
                        type=GestureType.TAP,
                        direction=GestureDirection.UNKNOWN,
                        percentage=100,
                        fingers=state.tap_fingers,
                        device_type=DeviceType.TOUCHSCREEN,
                        elapsed_time=elapsed,
                    )
                )
            state.reset()

        if state.started and state.current_fingers == 1:
            info = get_device_info(event)
            delta_x, delta_y = self._slot_delta(slot)
            percentage = self._percentage(info, delta_x, delta_y)
            self.controller.on_gesture_end(self._gesture(percentage, elapsed))
            state.reset()

        for positions in (state.start_x, state.start_y, state.current_x, state.current_y):
            positions.pop(slot, None)

    def handle_motion(self, event: InputEvent) -> None:
        """A finger moves; may start a gesture or update a started one."""
        state = self.state
        info = get_device_info(event)
        slot = event.slot

        state.current_x[slot] = event.x
        state.current_y[slot] = event.y
        delta_x, delta_y = self._slot_delta(slot)

        if not state.started:
            if state.current_fingers >= 2 and (
                abs(delta_x) > info.start_threshold
                or abs(delta_y) > info.start_threshold
            ):
                state.started = True
                state.start_fingers = state.current_fingers
                state.start_timestamp = timestamp_ms()
                state.type = self.gesture_type()

                if state.type is GestureType.SWIPE:
                    state.direction = swipe_direction(delta_x, delta_y)
                else:
                    state.direction = self.pinch_direction()
                percentage = self._percentage(info, delta_x, delta_y)
                self.controller.on_gesture_begin(self._gesture(percentage, 0))
        else:
            percentage = self._percentage(info, delta_x, delta_y)
            elapsed = elapsed_ms(state.start_timestamp)
            self.controller.on_gesture_update(self._gesture(percentage, elapsed))

    def gesture_type(self) -> GestureType:
        """SWIPE if every finger moved the same way on some axis, else PINCH."""
        state = self.state
        deltas = [self._slot_delta(slot) for slot in state.start_x]
        deltas_x = [dx for dx, _ in deltas]
        deltas_y = [dy for _, dy in deltas]

        is_swipe = (
            all(d >= 0 for d in deltas_x)
            or all(d <= 0 for d in deltas_x)
            or all(d >= 0 for d in deltas_y)
            or all(d <= 0 for d in deltas_y)
        )
        return GestureType.SWIPE if is_swipe else GestureType.PINCH

    def pinch_direction(self) -> GestureDirection:
        """OUT if the fingers spread apart, IN otherwise."""
        start_width, current_width = self.pinch_bbox()
        return GestureDirection.OUT if start_width < current_width else GestureDirection.IN

    def pinch_delta(self) -> float:
        """Pinch scale: 1.0 at the start, 0.0 with the fingers together."""
        start_width, current_width = self.pinch_bbox()
        if start_width == 0:
            return math.inf if current_width > 0 else math.nan
        return current_width / start_width

    def pinch_bbox(self) -> tuple[float, float]:
        """Width along X of the box around all fingers, at the start and now."""
        start = self.state.start_x.values()
        current = self.state.current_x.values()
        return (max(start) - min(start), max(current) - min(current))