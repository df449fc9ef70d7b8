from src.core.severity_log.log_router import Selection
from src.core.severity_log.log_severity import LogSeverity
from src.core.severity_log.source_location import SourceLocation


HEADER_FORMAT = "{severity} | {file}:{line} | {function} | "


def format_header(severity: LogSeverity, location: SourceLocation) -> str:
    return HEADER_FORMAT.format(
        severity=severity.tag,
        file=location.file,
        line=location.line,
        function=location.function,
    )


def write_header(registry, severity: LogSeverity, location: SourceLocation) -> Selection:
    """
    Emit the message header for one statement and flush it.

    The flush happens before any body is written, so a crash while the
    caller builds the body loses at most that body; the header and all
    earlier messages are already on disk. The selection is returned so
    the body goes to the same destination.
    """
    selection = registry.select(severity)
    selection.destination.write(format_header(severity, location))
    selection.destination.flush()
    return selection
