"""Domain-specific exceptions — transport-independent."""


class CompletionLogError(Exception):
    """Base class for every error raised by completion_log."""


class ConfigurationError(CompletionLogError):
    """Raised when a CompletionLogger cannot be built from its configuration."""


class ValidationError(CompletionLogError):
    """Raised when a completion record breaks one of the record rules.

    Only the first failing rule is reported.
    """


class TransmissionError(CompletionLogError):
    """Raised internally when the completion API exchange fails.

    Never escapes ``CompletionLogger.log``; it is logged and handed to the
    logger's ``on_failure`` callback instead.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"{status_code}: {message}")
