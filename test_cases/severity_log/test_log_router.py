from src.core.severity_log.log_router import SEVERITY_CHANNELS, select_destination
from src.core.severity_log.log_severity import LogSeverity


class _Sink:
    def __init__(self, name: str):
        self.name = name

    def write(self, text: str) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


def test_each_severity_routes_to_its_channel() -> None:
    info, warn, error, fallback = _Sink("info"), _Sink("warn"), _Sink("error"), _Sink("stderr")
    destinations = {
        LogSeverity.INFO: info,
        LogSeverity.WARNING: warn,
        LogSeverity.ERROR: error,
    }

    assert select_destination(LogSeverity.INFO, destinations, fallback).destination is info
    assert select_destination(LogSeverity.WARNING, destinations, fallback).destination is warn
    assert select_destination(LogSeverity.ERROR, destinations, fallback).destination is error


def test_fatal_shares_error_destination() -> None:
    error, fallback = _Sink("error"), _Sink("stderr")
    destinations = {LogSeverity.ERROR: error}

    fatal = select_destination(LogSeverity.FATAL, destinations, fallback)
    assert fatal.destination is error
    assert fatal.used_fallback is False
    assert SEVERITY_CHANNELS[LogSeverity.FATAL] is LogSeverity.ERROR


def test_missing_channel_uses_fallback() -> None:
    info, fallback = _Sink("info"), _Sink("stderr")
    destinations = {LogSeverity.INFO: info}

    for severity in (LogSeverity.WARNING, LogSeverity.ERROR, LogSeverity.FATAL):
        selection = select_destination(severity, destinations, fallback)
        assert selection.destination is fallback
        assert selection.used_fallback is True

    assert select_destination(LogSeverity.INFO, destinations, fallback).used_fallback is False


def test_severity_order_is_escalation_order() -> None:
    assert LogSeverity.INFO < LogSeverity.WARNING < LogSeverity.ERROR < LogSeverity.FATAL
    assert LogSeverity.FATAL >= LogSeverity.ERROR
    assert LogSeverity.FATAL.tag == "FATAL"
