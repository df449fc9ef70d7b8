class SeverityLogError(Exception):
    pass


class LoggerConfigError(SeverityLogError, ValueError):
    pass


class DestinationOpenError(SeverityLogError):
    def __init__(self, path, reason, details=None):
        self.path = path
        self.reason = reason
        self.details = details
        super().__init__(f"Cannot open log destination '{path}': {reason}")


class LogRecordStateError(SeverityLogError):
    pass
