"""Multi-touch gesture recognition from touchpad and touchscreen input events."""

__version__ = "0.1.0"