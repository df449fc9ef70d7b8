from enum import Enum, auto


class LogSeverity(Enum):
    """
    Severity of a log statement.

    Declaration order is escalation order. FATAL is an escalated
    ERROR: it shares the ERROR destination and ends the process.
    """

    INFO = auto()       # Normal operation
    WARNING = auto()    # Unexpected but recoverable condition
    ERROR = auto()      # Operation failed, process continues
    FATAL = auto()      # Unrecoverable; process is aborted after flush

    @property
    def tag(self) -> str:
        return self.name

    def __lt__(self, other):
        if not isinstance(other, LogSeverity):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, LogSeverity):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, LogSeverity):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, LogSeverity):
            return NotImplemented
        return self.value >= other.value
