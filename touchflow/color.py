"""Colours parsed from configuration values for drawing animations."""

from __future__ import annotations

import re
from enum import Enum

from touchflow import logger

_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_DEFAULT_COMPONENT = 0.6


class ColorType(Enum):
    """Which theme colour an ``auto`` value stands for."""

    BACKGROUND = "background"
    BORDER = "border"


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no hexadecimal number in {text!r}")
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


class Color:
    """An RGB colour with components between 0 and 1."""

    def __init__(
        self,
        hex_string: str | None = None,
        color_type: ColorType = ColorType.BACKGROUND,
    ) -> None:
        self.red = _DEFAULT_COMPONENT
        self.green = _DEFAULT_COMPONENT
        self.blue = _DEFAULT_COMPONENT
        self.color_type = color_type
        # "auto" refers to the desktop theme, which is not available here,
        # so the default colour stays in place.
        if hex_string is not None and hex_string != "auto":
            self._set_from_hex(hex_string)

    def _set_from_hex(self, hex_string: str) -> None:
        if not hex_string:
            return
        size = len(hex_string)
        if size != 6 and size != 7 and not hex_string.startswith("#"):
            return

        offset = 0 if size == 6 else 1
        try:
            self.red = _parse_hex(hex_string[offset : offset + 2]) / 255.0
            self.green = _parse_hex(hex_string[offset + 2 : offset + 4]) / 255.0
            self.blue = _parse_hex(hex_string[offset + 4 : offset + 6]) / 255.0
        except ValueError:
            logger.error("Error: Invalid animation color, using default color")

    def rgb(self) -> tuple[float, float, float]:
        """The (red, green, blue) components."""
        return (self.red, self.green, self.blue)

    def __repr__(self) -> str:
        return f"Color(red={self.red!r}, green={self.green!r}, blue={self.blue!r})"