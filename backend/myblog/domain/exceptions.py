"""Domain-specific exceptions: framework-independent.

Every error carries the envelope ``code`` and the HTTP ``status_code`` it is
reported with, so the presentation layer can render it without a lookup table.
"""


class BusinessError(Exception):
    """Base class for errors that are reported to the client as an envelope."""

    code: int = 10000
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(BusinessError):
    """Raised when a required identifier or input is missing or malformed."""

    code = 10001
    status_code = 400

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Validation error on field: {field}")


class ArgumentError(BusinessError):
    """Raised when a request body cannot be deserialized into the expected shape."""

    code = 10002
    status_code = 400

    def __init__(self):
        super().__init__("argument error")


class InternalError(BusinessError):
    """Raised when the storage layer fails.

    The original ``cause`` is kept for server-side logging only; the message
    sent to the client never mentions it.
    """

    code = 10000
    status_code = 500

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("An internal error occurred. Please try again later.")
