"""Exception classes for callwatch."""


class CallwatchError(Exception):
    """Base class for errors raised by callwatch itself."""


class ConfigurationError(CallwatchError, FileNotFoundError):
    """Raised when configuration files cannot be located."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
