import os
import sys
import threading
from pathlib import Path
from typing import Protocol

from src.core.severity_log.log_exceptions import DestinationOpenError


class LogDestination(Protocol):
    """
    Output sink that a severity routes to.

    Destinations are owned by a LogRegistry and only referenced by
    everything else. Writes are best-effort: a destination must not
    raise outward from write() or flush().
    """

    name: str

    def write(self, text: str) -> None:
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...


class FileDestination:
    """
    Append-only text file dedicated to one or more severity channels.

    Each write and flush is serialized by a per-destination lock. This
    keeps single writes intact across threads, but a header and body
    written by two records on different threads may still interleave.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._lock = threading.Lock()
        self._file = open(self._path, "a", encoding="utf-8", errors="backslashreplace")
        self.name = str(self._path)

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, text: str) -> None:
        try:
            with self._lock:
                self._file.write(text)
        except (OSError, ValueError):
            # Disk full, closed handle: logging never breaks the caller
            pass

    def flush(self) -> None:
        try:
            with self._lock:
                self._file.flush()
        except (OSError, ValueError):
            pass

    def close(self) -> None:
        try:
            with self._lock:
                self._file.close()
        except OSError:
            pass


class FallbackDestination:
    """
    Shared fallback sink: the process's standard error stream.

    sys.stderr is looked up on every call so a replaced stream (test
    capture, redirected output) is honoured. Closing is a no-op; the
    stream does not belong to the logger.
    """

    name = "<stderr>"

    def _stream(self):
        return sys.stderr if sys.stderr is not None else sys.__stderr__

    def write(self, text: str) -> None:
        stream = self._stream()
        if stream is None:
            return
        try:
            stream.write(text)
        except (OSError, ValueError):
            pass

    def flush(self) -> None:
        stream = self._stream()
        if stream is None:
            return
        try:
            stream.flush()
        except (OSError, ValueError):
            pass

    def close(self) -> None:
        pass


def truncate_if_oversized(path: Path, max_size: int) -> bool:
    """
    Empty the file at path if it exists and is larger than max_size.

    Returns True when the file was truncated.
    """
    try:
        size = path.stat().st_size
    except FileNotFoundError:
        return False
    if size <= max_size:
        return False
    os.truncate(path, 0)
    return True


def open_destination(path, max_size: int) -> FileDestination:
    """
    Open path for appending, truncating it first if it is oversized.

    The file is created if absent; its parent directory is not.
    Raises DestinationOpenError for any failure.
    """
    try:
        resolved = Path(os.fspath(path))
    except TypeError as e:
        raise DestinationOpenError(path, "invalid path", details=str(e)) from e

    try:
        truncate_if_oversized(resolved, max_size)
        return FileDestination(resolved)
    except (OSError, ValueError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise DestinationOpenError(str(resolved), reason, details=repr(e)) from e
