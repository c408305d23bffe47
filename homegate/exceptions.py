"""Exception classes raised by the Homegate client.

Transport failures are not wrapped: they surface as ``httpx.HTTPError``.
"""
from typing import Any


class HomegateError(Exception):
    """Base exception for the client."""

    def __init__(self, message: str, detail: Any = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class SigningError(HomegateError):
    """Identity token could not be derived or is not a valid header value."""
    pass


class DecodeError(HomegateError):
    """Response body is not JSON or does not match the expected shape."""
    pass


class RequestConfigError(HomegateError):
    """Caller built a request the client refuses to send."""
    pass
