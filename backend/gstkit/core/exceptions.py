"""
Errors raised by the GST utilities.

Each error carries a stable ``code`` so API clients can tell an invalid
input apart from a missing rate without parsing the message.
"""


class GSTError(Exception):
    """Base class for GST errors."""

    code = "GST_ERROR"

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class InvalidArgument(GSTError):
    """Negative, non-numeric or otherwise unusable input."""

    code = "INVALID_ARGUMENT"


class LookupMiss(GSTError):
    """No rate entry matches the requested HSN/SAC code or tax category."""

    code = "GST_RATE_NOT_FOUND"
