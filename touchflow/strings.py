"""String helpers for configuration handling."""

from __future__ import annotations

import re
import string as _string

_LEADING_SPACE = re.compile(r"\A\s+")
_TRAILING_SPACE = re.compile(r"\s+\Z")
_ASCII_LOWER = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)


def split(string: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``; a single trailing empty field is dropped."""
    parts = string.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def ltrim(s: str) -> str:
    """Remove leading whitespace."""
    return _LEADING_SPACE.sub("", s)


def rtrim(s: str) -> str:
    """Remove trailing whitespace."""
    return _TRAILING_SPACE.sub("", s)


def trim(s: str) -> str:
    """Remove leading and trailing whitespace."""
    return ltrim(rtrim(s))


def to_lower(string: str) -> str:
    """Lower-case ASCII letters only, leaving other characters as they are."""
    return string.translate(_ASCII_LOWER)