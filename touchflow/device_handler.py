"""Threshold calculation for newly detected input devices."""

from __future__ import annotations

from touchflow import logger
from touchflow.handler import (
    DeviceInfo,
    GestureControllerDelegate,
    Handler,
    InputEvent,
)

_MM_PER_INCH = 25.4

_TOUCHPAD_START_PERCENTAGE = 5
_TOUCHPAD_FINISH_PERCENTAGE = 40

_TOUCHSCREEN_START_PERCENTAGE = 5
_TOUCHSCREEN_FINISH_PERCENTAGE = 25


def mm_to_dpi(mm: float) -> float:
    """Convert millimetres to motion units normalised to 1000 dpi."""
    return (mm / _MM_PER_INCH) * 1000


def touchpad_thresholds(width_mm: float, height_mm: float) -> DeviceInfo:
    """Thresholds for a touchpad of the given physical size.

    Gesture deltas are normalised to 1000 dpi, so the start threshold is 5% of
    the smaller side and the finish thresholds are 40% of each side, all in
    those units.
    """
    min_size = min(width_mm, height_mm)
    return DeviceInfo(
        start_threshold=(mm_to_dpi(min_size) * _TOUCHPAD_START_PERCENTAGE) / 100,
        finish_threshold_horizontal=(
            mm_to_dpi(width_mm) * _TOUCHPAD_FINISH_PERCENTAGE
        )
        / 100,
        finish_threshold_vertical=(
            mm_to_dpi(height_mm) * _TOUCHPAD_FINISH_PERCENTAGE
        )
        / 100,
    )


def touchscreen_thresholds(width_mm: float, height_mm: float) -> DeviceInfo:
    """Thresholds for a touchscreen: 5% of the smaller side, 25% of each side."""
    min_size = min(width_mm, height_mm)
    return DeviceInfo(
        start_threshold=(min_size * _TOUCHSCREEN_START_PERCENTAGE) / 100,
        finish_threshold_horizontal=(width_mm * _TOUCHSCREEN_FINISH_PERCENTAGE)
        / 100,
        finish_threshold_vertical=(height_mm * _TOUCHSCREEN_FINISH_PERCENTAGE)
        / 100,
    )


class DeviceHandler(Handler):
    """Works out and stores the thresholds of every compatible device."""

    def __init__(
        self,
        controller: GestureControllerDelegate,
        start_threshold: float = -1,
        finish_threshold: float = -1,
    ) -> None:
        super().__init__(controller)
        self.start_threshold = start_threshold
        self.finish_threshold = finish_threshold

    def handle_device_added(self, event: InputEvent) -> DeviceInfo | None:
        """Attach thresholds to the event's device if it supports gestures.

        Returns the stored thresholds, or None for an incompatible device.
        """
        device = event.device
        if not (device.gesture_capable or device.touch_capable):
            return None

        logger.info("Compatible device detected:")
        logger.info(f"\tName: {device.name}")

        info = DeviceInfo()
        size = device.size_mm
        if size is not None and size[0] != 0 and size[1] != 0:
            width_mm, height_mm = size
            logger.info(f"\tSize: {width_mm}mm x {height_mm}mm")
            logger.info(
                "\tCalculating start_threshold and finish_threshold. "
                "You can tune this values in your service file"
            )
            if device.gesture_capable:
                info = touchpad_thresholds(width_mm, height_mm)
            else:
                info = touchscreen_thresholds(width_mm, height_mm)
        else:
            logger.warning(
                "\tIt wasn't possible to get your device physical size, falling "
                "back to default start_threshold and finish_threshold. You can "
                "tune this values in your service file"
            )

        # User preferences override the calculated thresholds.
        if self.start_threshold != -1:
            info.start_threshold = self.start_threshold
        if self.finish_threshold != -1:
            info.finish_threshold_horizontal = self.finish_threshold
            info.finish_threshold_vertical = self.finish_threshold

        logger.info(f"\tstart_threshold: {info.start_threshold}")
        logger.info(
            f"\tfinish_threshold_horizontal: {info.finish_threshold_horizontal}"
        )
        logger.info(f"\tfinish_threshold_vertical: {info.finish_threshold_vertical}")

        device.info = info
        return info