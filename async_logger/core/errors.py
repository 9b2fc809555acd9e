"""Logger exceptions"""


class LoggerError(Exception):
    """Base class for all logger errors."""


class LoggerConfigError(LoggerError, ValueError):
    """Configuration rejected at construction time."""


class RemoteConfigError(LoggerConfigError):
    """Remote output enabled without a remote configuration."""

    def __init__(self, message: str = "remote configuration required"):
        super().__init__(message)


class RemoteEndpointError(LoggerConfigError):
    """Remote configuration present but the endpoint is empty."""

    def __init__(self, message: str = "endpoint required"):
        super().__init__(message)


class LoggerClosedError(LoggerError):
    """Entry offered to a dispatcher that has already been closed."""

    def __init__(self, message: str = "logger is closed"):
        super().__init__(message)
