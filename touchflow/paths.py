"""Locations of the user's and the system's configuration files."""

from __future__ import annotations

import os
import pwd
from pathlib import Path

_APP_NAME = "touchflow"
_SYSTEM_CONFIG_FILE = Path("/usr/share") / _APP_NAME / f"{_APP_NAME}.conf"


def home_path() -> Path:
    """The user's home directory: ``$HOME`` first, then the password database."""
    home = os.environ.get("HOME")
    if home is not None:
        return Path(home)

    try:
        user_info = pwd.getpwuid(os.getuid())
    except KeyError as exc:
        raise RuntimeError(
            "Error getting your home directory path (getpwuid)."
        ) from exc

    if not user_info.pw_dir:
        raise RuntimeError("Error getting your home directory path (pw_dir).")
    return Path(user_info.pw_dir)


def user_config_dir() -> Path:
    """The user's configuration directory (``~/.config/touchflow``)."""
    return home_path() / ".config" / _APP_NAME


def user_config_file() -> Path:
    """The user's configuration file."""
    return user_config_dir() / f"{_APP_NAME}.conf"


def user_lock_file() -> Path:
    """The lock file that keeps a single client running."""
    return user_config_dir() / f".{_APP_NAME}.lock"


def system_config_file() -> Path:
    """The configuration file installed with the program."""
    return _SYSTEM_CONFIG_FILE


def create_user_config_dir() -> Path:
    """Create the user's configuration directory if it is missing and return it."""
    config_dir = user_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir