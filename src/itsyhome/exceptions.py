"""Exceptions raised by the itsyhome client."""

from __future__ import annotations


class ItsyhomeError(Exception):
    """Base class for itsyhome errors."""

    pass


class ConnectionFailed(ItsyhomeError):
    """Raised when the Itsyhome server cannot be reached."""

    def __init__(self, reason: object):
        self.reason = reason
        super().__init__(
            f"connection failed: {reason}\n"
            "Is the Itsyhome app running with the server enabled?\n"
            "Note: webhook/CLI access requires an Itsyhome Pro subscription."
        )


class AccessDenied(ItsyhomeError):
    """Raised on HTTP 403."""

    def __init__(self) -> None:
        super().__init__("Itsyhome Pro required for webhook/CLI access")


class ServerReported(ItsyhomeError):
    """Raised when an HTTP error response carries a message."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ActionFailed(ItsyhomeError):
    """Raised when a successful HTTP response reports status "error"."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ServerError(ItsyhomeError):
    """Raised on HTTP errors without a usable message."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"server error: {status_code}")


class ParseError(ItsyhomeError):
    """Raised when a response body matches none of the expected shapes."""

    pass
