from dataclasses import dataclass
from typing import Mapping

from src.core.severity_log.log_destination import LogDestination
from src.core.severity_log.log_severity import LogSeverity


# Severity -> channel whose destination it is written to.
# FATAL is an escalated ERROR and never gets a file of its own.
SEVERITY_CHANNELS = {
    LogSeverity.INFO: LogSeverity.INFO,
    LogSeverity.WARNING: LogSeverity.WARNING,
    LogSeverity.ERROR: LogSeverity.ERROR,
    LogSeverity.FATAL: LogSeverity.ERROR,
}


@dataclass(frozen=True)
class Selection:
    """
    Result of routing one severity.

    used_fallback is True when the severity's channel had no open
    destination and the shared fallback sink was chosen instead.
    """

    destination: LogDestination
    used_fallback: bool = False


def channel_for(severity: LogSeverity) -> LogSeverity:
    return SEVERITY_CHANNELS[severity]


def select_destination(
    severity: LogSeverity,
    destinations: Mapping[LogSeverity, LogDestination],
    fallback: LogDestination,
) -> Selection:
    """
    Map a severity to its output destination.

    Pure lookup: no I/O and no mutation of the inputs.
    """
    destination = destinations.get(channel_for(severity))
    if destination is None:
        return Selection(destination=fallback, used_fallback=True)
    return Selection(destination=destination)
