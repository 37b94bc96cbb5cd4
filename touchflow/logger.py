"""Levelled logging to standard output and standard error."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class LogLevel(Enum):
    """Severity of a log message."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    DEBUG = "debug"


class Logger:
    """Writes messages of the enabled levels; errors go to the error stream."""

    def __init__(
        self,
        debug: bool = False,
        quiet: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._out = out
        self._err = err
        self._enabled = {
            LogLevel.ERROR: not quiet,
            LogLevel.WARNING: not quiet,
            LogLevel.INFO: not quiet,
            LogLevel.DEBUG: debug and not quiet,
        }

    def enabled(self, level: LogLevel) -> bool:
        """Whether messages of ``level`` are written."""
        return self._enabled.get(level, False)

    def _stream(self, level: LogLevel) -> TextIO:
        if level is LogLevel.ERROR:
            return self._err if self._err is not None else sys.stderr
        return self._out if self._out is not None else sys.stdout

    def log(self, level: LogLevel, message: object) -> None:
        """Write ``message`` as one line if ``level`` is enabled."""
        if not self.enabled(level):
            return
        stream = self._stream(level)
        stream.write(f"{message}\n")
        stream.flush()


_logger: Logger | None = None


def configure(debug: bool = False, quiet: bool = False) -> Logger:
    """Create the shared logger; the options only apply on the first call."""
    global _logger
    if _logger is None:
        _logger = Logger(debug=debug, quiet=quiet)
    return _logger


def get_logger() -> Logger:
    """Return the shared logger, creating it with defaults if needed."""
    return configure()


def error(message: object) -> None:
    """Log an error message."""
    get_logger().log(LogLevel.ERROR, message)


def warning(message: object) -> None:
    """Log a warning message."""
    get_logger().log(LogLevel.WARNING, message)


def info(message: object) -> None:
    """Log an informational message."""
    get_logger().log(LogLevel.INFO, message)


def debug(message: object) -> None:
    """Log a debug message."""
    get_logger().log(LogLevel.DEBUG, message)