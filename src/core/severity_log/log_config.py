"""
Module: log_config.py
Location: src/core/severity_log/
Version: 0.1.0

Declarative configuration for the severity-routed logger: one
destination path per channel plus the startup truncation threshold.
"""

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Union

from src.core.severity_log.log_exceptions import LoggerConfigError
from src.core.severity_log.log_severity import LogSeverity

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_MAX_SIZE = 10 * 1024 * 1024   # 10 MiB

# Environment variable suffixes read by LoggerConfig.from_env()
ENV_INFO_PATH = "INFO_PATH"
ENV_WARN_PATH = "WARN_PATH"
ENV_ERROR_PATH = "ERROR_PATH"
ENV_MAX_SIZE = "MAX_SIZE"


@dataclass(frozen=True)
class LoggerConfig:
    """
    Destination paths for the INFO, WARNING and ERROR channels.

    FATAL has no path of its own; it is written to error_path.
    """

    info_path: PathLike
    warn_path: PathLike
    error_path: PathLike

    # Files larger than this (bytes) are emptied at initialization.
    # A negative value empties every existing file.
    max_size: int = DEFAULT_MAX_SIZE

    def __post_init__(self):
        if isinstance(self.max_size, bool) or not isinstance(self.max_size, int):
            raise LoggerConfigError(
                f"max_size must be an integer, got {type(self.max_size).__name__}"
            )

    def paths(self) -> Dict[LogSeverity, PathLike]:
        return {
            LogSeverity.INFO: self.info_path,
            LogSeverity.WARNING: self.warn_path,
            LogSeverity.ERROR: self.error_path,
        }

    @classmethod
    def from_env(
        cls,
        prefix: str = "SEVERITY_LOG_",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LoggerConfig":
        """
        Build a configuration from environment variables.

        Reads <prefix>INFO_PATH, <prefix>WARN_PATH, <prefix>ERROR_PATH
        and, optionally, <prefix>MAX_SIZE.
        """
        env = os.environ if environ is None else environ

        missing = [
            prefix + key
            for key in (ENV_INFO_PATH, ENV_WARN_PATH, ENV_ERROR_PATH)
            if not env.get(prefix + key)
        ]
        if missing:
            raise LoggerConfigError(f"Missing required environment variables: {missing}")

        max_size = DEFAULT_MAX_SIZE
        raw_max_size = env.get(prefix + ENV_MAX_SIZE)
        if raw_max_size:
            try:
                max_size = int(raw_max_size)
            except ValueError as e:
                raise LoggerConfigError(
                    f"{prefix + ENV_MAX_SIZE} is not an integer: {raw_max_size!r}"
                ) from e

        return cls(
            info_path=env[prefix + ENV_INFO_PATH],
            warn_path=env[prefix + ENV_WARN_PATH],
            error_path=env[prefix + ENV_ERROR_PATH],
            max_size=max_size,
        )
