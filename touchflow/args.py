"""Command line arguments."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from typing import Sequence

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE | re.ASCII,
)


def _program_version() -> str:
    try:
        return version("touchflow")
    except PackageNotFoundError:
        return "[Unknown version]"


@dataclass
class Args:
    """The options given on the command line."""

    daemon_mode: bool = False
    client_mode: bool = False
    debug: bool = False
    quiet: bool = False
    start_threshold: float = -1.0
    finish_threshold: float = -1.0
    exit: bool = False


def _parse_float(text: str) -> float:
    """Read the number at the start of ``text``, ignoring what follows it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def _daemon_thresholds(tokens: list[str]) -> tuple[float, float]:
    following = tokens[tokens.index("--daemon") + 1 :]
    if not following:
        return -1.0, -1.0
    try:
        start = _parse_float(following[0])
        if len(following) < 2:
            return -1.0, -1.0
        return start, _parse_float(following[1])
    except ValueError:
        return -1.0, -1.0


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse the arguments (without the program name); prints help or version if asked."""
    tokens = list(sys.argv[1:] if argv is None else argv)

    daemon = "--daemon" in tokens
    args = Args(
        daemon_mode=daemon,
        client_mode="--client" in tokens or not daemon,
        debug="--debug" in tokens or "-d" in tokens,
        quiet="--quiet" in tokens or "-q" in tokens,
    )

    if daemon:
        args.start_threshold, args.finish_threshold = _daemon_thresholds(tokens)

    if "--version" in tokens or "-v" in tokens:
        print_version()
        args.exit = True

    if "--help" in tokens or "-h" in tokens:
        print_help()
        args.exit = True

    return args


def version_text() -> str:
    """The version line."""
    return f"touchflow {_program_version()}."


def help_text() -> str:
    """The full help message, version line included."""
    lines = [
        version_text(),
        "Usage: touchflow [--help | -h] [--version | -v] [--debug | -d] "
        "[--quiet | -q] [--daemon [start_threshold finish_threshold]] "
        "[--client]",
        "",
        "Multi-touch gesture recognizer.",
        "touchflow is an app that runs in the background and transforms "
        "the gestures you make on your touchpad into visible actions in "
        "your desktop.",
        "",
        "Option\t\tMeaning",
        " --daemon\tRun touchflow in daemon mode. This mode starts a "
        "service that gathers gestures but executes no actions",
        " --client\tConnect to an existing touchflow daemon and "
        "execute actions in your desktop",
        " --quiet\tDo not print to the log",
        " --debug\tPrint every message to the log",
        " --version\tPrint the version number and exit",
        " --help \tPrint this message and exit",
        "Without arguments touchflow starts in client mode",
    ]
    return "\n".join(lines)


def _emit(text: str) -> str:
    stream = sys.stdout
    stream.write(text + "\n")
    stream.flush()
    return text


def print_version() -> str:
    """Write the version line to standard output and return it."""
    return _emit(version_text())


def print_help() -> str:
    """Write the help message to standard output and return it."""
    return _emit(help_text())