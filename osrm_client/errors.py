"""
Errors raised while talking to an OSRM backend.

Three distinct failure kinds are surfaced to callers:
- TransportError: the HTTP exchange itself failed before a body could be read.
- ProtocolError: the service answered with a status code other than "Ok".
- DecodeError: the body did not have the shape the protocol promises.
"""

from typing import Optional

from .models.common import StatusCode


class OSRMError(Exception):
    """Base class for all client errors."""
    pass


class TransportError(OSRMError):
    """The underlying HTTP call failed (network, timeout, non-2xx without envelope)."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ProtocolError(OSRMError):
    """The service replied with a non-Ok status code."""

    def __init__(self, status: StatusCode, message: Optional[str] = None):
        self.status = status
        self.message = message
        text = f"protocol error {status.value}: {status.description}"
        if message:
            text += f" ({message})"
        super().__init__(text)


class DecodeError(OSRMError):
    """The response body did not match the expected structure."""
    pass
