"""A lock file that keeps more than one client from running at once."""

from __future__ import annotations

import fcntl
import os
from pathlib import Path

from touchflow import paths


class AlreadyRunningError(RuntimeError):
    """Raised when another client already holds the lock."""


class ClientLock:
    """Exclusive, non-blocking lock on a file, usable as a context manager."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        if path is None:
            paths.create_user_config_dir()
            self.path = paths.user_lock_file()
        else:
            self.path = Path(path)
        self._fd: int | None = None

    @property
    def locked(self) -> bool:
        """Whether this object currently holds the lock."""
        return self._fd is not None

    def _error_message(self) -> str:
        return (
            "Another instance of touchflow is already running. If you are sure "
            "that touchflow is not already running, delete the lock file with "
            f"the following command and try again:\n$ rm {self.path}"
        )

    def acquire(self) -> None:
        """Take the lock, raising AlreadyRunningError if it is held elsewhere."""
        if self._fd is not None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            fd = os.open(self.path, os.O_CREAT | os.O_RDWR, 0o640)
        except OSError as exc:
            raise AlreadyRunningError(self._error_message()) from exc

        try:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError as exc:
            os.close(fd)
            raise AlreadyRunningError(self._error_message()) from exc
        self._fd = fd

    def release(self) -> None:
        """Give the lock up; does nothing if it is not held."""
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        try:
            fcntl.flock(fd, fcntl.LOCK_UN)
        finally:
            os.close(fd)

    def __enter__(self) -> ClientLock:
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()