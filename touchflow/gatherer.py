"""Gathering input events and dispatching them to the gesture handlers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Callable, Iterable

from touchflow.device_handler import DeviceHandler
from touchflow.handler import EventType, GestureControllerDelegate, InputEvent
from touchflow.pinch import PinchHandler
from touchflow.swipe import SwipeHandler
from touchflow.touch import TouchHandler


class GestureGatherer(ABC):
    """Collects the gestures the user makes and sends them to a controller.

    ``start_threshold`` is the motion needed before a gesture starts and
    ``finish_threshold`` the motion that completes an animation; -1 means the
    value is worked out per device.
    """

    def __init__(
        self,
        controller: GestureControllerDelegate,
        start_threshold: float = -1,
        finish_threshold: float = -1,
    ) -> None:
        self.controller = controller
        self.start_threshold = start_threshold
        self.finish_threshold = finish_threshold

    @abstractmethod
    def run(self) -> None:
        """Run the event loop."""


class EventGatherer(GestureGatherer):
    """Reads input events from an iterable and feeds them to the handlers."""

    def __init__(
        self,
        controller: GestureControllerDelegate,
        events: Iterable[InputEvent],
        start_threshold: float = -1,
        finish_threshold: float = -1,
    ) -> None:
        super().__init__(controller, start_threshold, finish_threshold)
        self.events = events
        self.device_handler = DeviceHandler(controller, start_threshold, finish_threshold)
        self.swipe_handler = SwipeHandler(controller)
        self.pinch_handler = PinchHandler(controller)
        self.touch_handler = TouchHandler(controller)
        self._dispatch: dict[EventType, Callable[[InputEvent], object]] = {
            EventType.DEVICE_ADDED: self.device_handler.handle_device_added,
            EventType.GESTURE_SWIPE_BEGIN: self.swipe_handler.handle_begin,
            EventType.GESTURE_SWIPE_UPDATE: self.swipe_handler.handle_update,
            EventType.GESTURE_SWIPE_END: self.swipe_handler.handle_end,
            EventType.GESTURE_PINCH_BEGIN: self.pinch_handler.handle_begin,
            EventType.GESTURE_PINCH_UPDATE: self.pinch_handler.handle_update,
            EventType.GESTURE_PINCH_END: self.pinch_handler.handle_end,
            EventType.TOUCH_DOWN: self.touch_handler.handle_down,
            EventType.TOUCH_UP: self.touch_handler.handle_up,
            EventType.TOUCH_CANCEL: self.touch_handler.handle_up,
            EventType.TOUCH_MOTION: self.touch_handler.handle_motion,
        }

    def run(self) -> None:
        """Process every event until the source is exhausted."""
        for event in self.events:
            self.handle_event(event)

    def handle_event(self, event: InputEvent) -> None:
        """Pass one event to the handler for its type; others are ignored."""
        handle = self._dispatch.get(event.type)
        if handle is not None:
            handle(event)


def open_restricted(path: str | os.PathLike[str], flags: int) -> int:
    """Open an input device node, explaining how to get access on failure."""
    try:
        return os.open(path, flags)
    except OSError as exc:
        raise RuntimeError(
            "Error initialising touchflow: input device open.\n"
            "touchflow should be run in daemon mode by systemd in order to be "
            "part of the 'input' group and have access to your touchpad.\n"
            "If you prefer to run touchflow without using systemd, please "
            "execute the following command:\n"
            "$ sudo usermod -a -G input $USER\n"
            "And reboot to solve this issue"
        ) from exc