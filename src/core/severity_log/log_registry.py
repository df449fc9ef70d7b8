"""
Module: log_registry.py
Location: src/core/severity_log/
Version: 0.1.0

Owns the open destinations of the severity-routed logger.

A LogRegistry starts uninitialized, in which state every severity
routes to the shared fallback sink (stderr). initialize() opens one
file per channel; a channel whose file cannot be opened silently
keeps falling back, but the failure is recorded and can be queried
through is_degraded / failures.

The registry is not synchronized. Initialize it once during startup,
before any logging, and close it once during shutdown.
"""

import os
from typing import Callable, Dict, Optional

from src.core.severity_log.log_config import DEFAULT_MAX_SIZE, LoggerConfig
from src.core.severity_log.log_destination import (
    FallbackDestination,
    FileDestination,
    LogDestination,
    open_destination,
)
from src.core.severity_log.log_exceptions import DestinationOpenError
from src.core.severity_log.log_router import Selection, select_destination
from src.core.severity_log.log_severity import LogSeverity


def _path_key(path) -> Optional[str]:
    try:
        return os.path.abspath(os.fspath(path))
    except (TypeError, ValueError):
        return None


class LogRegistry:
    """
    Process-wide configuration and destination owner.
    """

    def __init__(
        self,
        *,
        fallback: Optional[LogDestination] = None,
        terminate: Optional[Callable[[], None]] = None,
    ):
        self._fallback = fallback if fallback is not None else FallbackDestination()
        self._terminate = terminate
        self._config: Optional[LoggerConfig] = None
        self._destinations: Dict[LogSeverity, FileDestination] = {}
        self._failures: Dict[LogSeverity, DestinationOpenError] = {}

    # -------------------------------------------------
    # Initialization / release
    # -------------------------------------------------
    def initialize(self, config: LoggerConfig) -> None:
        """
        Open the destination of every channel in config.

        Handles from a previous initialize() are closed first. A path
        used by several channels is opened once and shared. Failures
        never propagate; they are recorded per channel.
        """
        self.close()
        self._config = config

        opened: Dict[str, FileDestination] = {}
        failed: Dict[str, DestinationOpenError] = {}

        for channel, path in config.paths().items():
            key = _path_key(path)

            if key is not None and key in opened:
                self._destinations[channel] = opened[key]
                continue
            if key is not None and key in failed:
                self._failures[channel] = failed[key]
                continue

            try:
                destination = open_destination(path, config.max_size)
            except DestinationOpenError as e:
                self._failures[channel] = e
                if key is not None:
                    failed[key] = e
                continue

            self._destinations[channel] = destination
            if key is not None:
                opened[key] = destination

    def close(self) -> None:
        """
        Close every owned file and return to the uninitialized state.
        """
        seen = set()
        for destination in self._destinations.values():
            if id(destination) in seen:
                continue
            seen.add(id(destination))
            destination.close()

        self._destinations = {}
        self._failures = {}
        self._config = None

    def __enter__(self) -> "LogRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------------------------------------------------
    # Routing
    # -------------------------------------------------
    def select(self, severity: LogSeverity) -> Selection:
        return select_destination(severity, self._destinations, self._fallback)

    def terminate(self) -> None:
        """
        Abort the process. Only FATAL records call this, after flushing.
        """
        if self._terminate is not None:
            self._terminate()
        else:
            os.abort()

    # -------------------------------------------------
    # Introspection
    # -------------------------------------------------
    @property
    def config(self) -> Optional[LoggerConfig]:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    @property
    def is_degraded(self) -> bool:
        return bool(self._failures)

    @property
    def failures(self) -> Dict[LogSeverity, DestinationOpenError]:
        return dict(self._failures)

    def destination_for(self, channel: LogSeverity) -> Optional[FileDestination]:
        return self._destinations.get(channel)


_default_registry = LogRegistry()


def get_default_registry() -> LogRegistry:
    return _default_registry


def initialize_logger(
    info_path,
    warn_path,
    error_path,
    max_size: int = DEFAULT_MAX_SIZE,
    registry: Optional[LogRegistry] = None,
) -> LogRegistry:
    """
    Point INFO, WARNING and ERROR/FATAL output at the given files.

    Best-effort: a file that cannot be opened leaves its severities on
    stderr. The registry is returned so callers can check is_degraded.
    Only a max_size that is not an integer raises (LoggerConfigError).
    """
    registry = registry if registry is not None else _default_registry
    registry.initialize(
        LoggerConfig(
            info_path=info_path,
            warn_path=warn_path,
            error_path=error_path,
            max_size=max_size,
        )
    )
    return registry


def shutdown_logger(registry: Optional[LogRegistry] = None) -> None:
    registry = registry if registry is not None else _default_registry
    registry.close()
