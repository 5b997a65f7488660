"""
Error Kinds - Exceptions raised by the helper functions

Part of the Ash Helpers library.

License: MIT
"""


class HelpersError(Exception):
    """Base class for all helper errors."""


class DateParseError(HelpersError, ValueError):
    """Raised when date text cannot be parsed into a point in time."""

    def __init__(self, text: str, reason: str = ""):
        self.text = text
        message = f"Unable to parse date: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RandomSourceError(HelpersError, RuntimeError):
    """Raised when no cryptographically secure random source is available."""


class RequestContextError(HelpersError, RuntimeError):
    """Raised when a request-bound helper is used outside of a request."""
