"""
Exception types raised by the ElevenLabs client.
"""

from __future__ import annotations

from typing import Optional


class ElevenLabsError(Exception):
    """Base class for every error raised by this package."""


class AuthenticationError(ElevenLabsError):
    """No usable API key could be resolved."""


class ElevenLabsHTTPError(ElevenLabsError):
    """The API answered with a non-2xx status code."""

    def __init__(
        self,
        status_code: int,
        method: str,
        url: str,
        body: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body or ""
        self.operation = operation
        prefix = f"{operation} failed! " if operation else ""
        super().__init__(
            f"{prefix}{method} {url} -> HTTP {status_code} | Response body: {self.body}"
        )


class DubbingError(ElevenLabsError):
    """A dubbing project finished with a failure status."""

    def __init__(self, dubbing_id: str, message: Optional[str] = None):
        self.dubbing_id = dubbing_id
        super().__init__(f"Dubbing for {dubbing_id} failed: {message}")


class OperationCancelledError(ElevenLabsError):
    """A long running operation was cancelled by its caller."""
