"""
Module: log_record.py
Location: src/core/severity_log/
Version: 0.1.0

Per-statement log record and the logging entry point.

    with log(LogSeverity.WARNING) as record:
        record.append("retrying ", name, " after ", delay, "s")

    log(LogSeverity.INFO, "cache warmed").close()

log() writes and flushes the header immediately. The body accumulates
in the record and is written, newline-terminated, in a single write
followed by a flush when the record closes. Closing a FATAL record
also dumps the Python stack to the same destination and then aborts
the process.
"""

import os
import traceback
from typing import List, Optional

from src.core.severity_log.log_exceptions import LogRecordStateError
from src.core.severity_log.log_header import write_header
from src.core.severity_log.log_registry import LogRegistry, get_default_registry
from src.core.severity_log.log_router import Selection
from src.core.severity_log.log_severity import LogSeverity
from src.core.severity_log.source_location import SourceLocation

_MODULE_FILE = os.path.normcase(os.path.abspath(__file__))


def _is_logger_frame(filename: str) -> bool:
    return os.path.normcase(os.path.abspath(filename)) == _MODULE_FILE


class LogRecord:
    """
    One log statement: constructed -> started -> body appended -> closed.
    """

    def __init__(self, severity: LogSeverity, registry: Optional[LogRegistry] = None):
        self._severity = severity
        self._registry = registry if registry is not None else get_default_registry()
        self._selection: Optional[Selection] = None
        self._parts: List[str] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self, location: SourceLocation) -> "LogRecord":
        """
        Write the header for this record. Called once, by the entry point.
        """
        if self._closed:
            raise LogRecordStateError("Cannot start a closed log record")
        if self._selection is not None:
            raise LogRecordStateError("Log record header already emitted")

        self._selection = write_header(self._registry, self._severity, location)
        return self

    def append(self, *parts) -> "LogRecord":
        if self._closed:
            raise LogRecordStateError("Cannot append to a closed log record")
        self._parts.extend(str(part) for part in parts)
        return self

    def close(self) -> None:
        """
        Write the body, flush, and abort the process if FATAL.
        """
        if self._closed:
            return
        self._closed = True

        if self._selection is None:
            # Never started: the body still goes out, without a header
            self._selection = self._registry.select(self._severity)

        destination = self._selection.destination
        destination.write("".join(self._parts) + "\n")
        destination.flush()

        if self._severity is LogSeverity.FATAL:
            self._dump_stack(destination)
            self._registry.terminate()

    def _dump_stack(self, destination) -> None:
        frames = [
            frame for frame in traceback.extract_stack()
            if not _is_logger_frame(frame.filename)
        ]
        destination.write(
            "Stack (most recent call last):\n" + "".join(traceback.format_list(frames))
        )
        destination.flush()

    def __enter__(self) -> "LogRecord":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def log(
    severity: LogSeverity,
    *parts,
    location: Optional[SourceLocation] = None,
    registry: Optional[LogRegistry] = None,
) -> LogRecord:
    """
    Start a log record for severity and return it for the body.

    The caller's file, line and function are captured unless an
    explicit location is given. The header is already flushed when
    this returns; the record must be closed to write the body.
    """
    if location is None:
        location = SourceLocation.capture(stacklevel=2)

    record = LogRecord(severity, registry=registry).start(location)
    if parts:
        record.append(*parts)
    return record


def log_message(
    severity: LogSeverity,
    *parts,
    location: Optional[SourceLocation] = None,
    registry: Optional[LogRegistry] = None,
) -> None:
    if location is None:
        location = SourceLocation.capture(stacklevel=2)

    with log(severity, *parts, location=location, registry=registry):
        pass
