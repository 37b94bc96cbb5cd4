"""Gesture model, input event model and the calculations shared by the handlers."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum, auto


class GestureDirection(Enum):
    """Direction of a gesture."""

    UNKNOWN = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    IN = auto()
    OUT = auto()


class GestureType(Enum):
    """Kind of gesture."""

    NOT_SUPPORTED = auto()
    SWIPE = auto()
    PINCH = auto()
    TAP = auto()


class DeviceType(Enum):
    """Kind of device a gesture was made on."""

    UNKNOWN = auto()
    TOUCHPAD = auto()
    TOUCHSCREEN = auto()


@dataclass(frozen=True)
class Gesture:
    """A gesture as reported to the controller."""

    type: GestureType
    direction: GestureDirection
    percentage: float
    fingers: int
    device_type: DeviceType
    elapsed_time: int


class GestureControllerDelegate(ABC):
    """Receives the gestures detected by the handlers."""

    @abstractmethod
    def on_gesture_begin(self, gesture: Gesture) -> None:
        """A gesture has started."""

    @abstractmethod
    def on_gesture_update(self, gesture: Gesture) -> None:
        """A started gesture has moved."""

    @abstractmethod
    def on_gesture_end(self, gesture: Gesture) -> None:
        """A started gesture has finished."""


@dataclass
class DeviceInfo:
    """Thresholds worked out for a device."""

    start_threshold: float = 200.0
    finish_threshold_horizontal: float = 2500.0
    finish_threshold_vertical: float = 2500.0


@dataclass
class InputDevice:
    """An input device and what is known about it."""

    name: str = ""
    gesture_capable: bool = False
    touch_capable: bool = False
    size_mm: tuple[float, float] | None = None
    info: DeviceInfo | None = None


class EventType(Enum):
    """Kinds of input events."""

    DEVICE_ADDED = auto()
    GESTURE_SWIPE_BEGIN = auto()
    GESTURE_SWIPE_UPDATE = auto()
    GESTURE_SWIPE_END = auto()
    GESTURE_PINCH_BEGIN = auto()
    GESTURE_PINCH_UPDATE = auto()
    GESTURE_PINCH_END = auto()
    TOUCH_DOWN = auto()
    TOUCH_UP = auto()
    TOUCH_CANCEL = auto()
    TOUCH_MOTION = auto()
    OTHER = auto()


@dataclass
class InputEvent:
    """One input event: gesture deltas, pinch scale or a touch point."""

    type: EventType
    device: InputDevice = field(default_factory=InputDevice)
    dx: float = 0.0
    dy: float = 0.0
    scale: float = 1.0
    fingers: int = 0
    slot: int = 0
    x: float = 0.0
    y: float = 0.0


class Handler:
    """Base class of the event handlers; holds the controller to notify."""

    def __init__(self, controller: GestureControllerDelegate) -> None:
        self.controller = controller


def get_device_info(event: InputEvent) -> DeviceInfo:
    """A copy of the thresholds of the event's device, or the defaults."""
    info = event.device.info
    return DeviceInfo() if info is None else replace(info)


def timestamp_ms() -> int:
    """The current epoch time in milliseconds."""
    return time.time_ns() // 1_000_000


def elapsed_ms(start: int) -> int:
    """Milliseconds since ``start``."""
    return timestamp_ms() - start


def swipe_direction(delta_x: float, delta_y: float) -> GestureDirection:
    """The direction of a swipe from its accumulated deltas."""
    if abs(delta_x) > abs(delta_y):
        return GestureDirection.RIGHT if delta_x > 0 else GestureDirection.LEFT
    return GestureDirection.DOWN if delta_y > 0 else GestureDirection.UP


def swipe_percentage(
    info: DeviceInfo,
    direction: GestureDirection,
    delta_x: float,
    delta_y: float,
) -> float:
    """How far, between 0 and 100, a swipe animation has progressed."""
    start = info.start_threshold
    if direction in (GestureDirection.LEFT, GestureDirection.RIGHT):
        finish = info.finish_threshold_horizontal
    else:
        finish = info.finish_threshold_vertical

    maximum = start + finish
    if direction is GestureDirection.UP:
        current = abs(min(0.0, delta_y + start))
    elif direction is GestureDirection.DOWN:
        current = max(0.0, delta_y - start)
    elif direction is GestureDirection.LEFT:
        current = abs(min(0.0, delta_x + start))
    elif direction is GestureDirection.RIGHT:
        current = max(0.0, delta_x - start)
    else:
        current = 0.0

    return min((current * 100) / maximum, 100.0)


def pinch_percentage(direction: GestureDirection, delta: float) -> float:
    """How far, between 0 and 100, a pinch animation has progressed.

    The delta starts at 1.0: pinching in reaches 100% at 0.0, pinching out
    reaches 100% at 2.0.
    """
    if direction is GestureDirection.IN:
        n_delta = min(1.0, delta)
        return min(100.0, abs(n_delta - 1.0) * 100)
    if direction is GestureDirection.OUT:
        n_delta = min(2.0, delta)
        return min(100.0, max(0.0, n_delta - 1.0) * 100)
    return 0.0