"""Client error types for Laundree API interactions."""

from __future__ import annotations

from typing import Any


class LaundreeClientError(Exception):
    """Base error for Laundree client failures."""


class LaundreeTimeout(LaundreeClientError):
    """Timeout while communicating with the service."""


class LaundreeJobTimeout(LaundreeTimeout):
    """No reply was observed for a job before its deadline."""

    def __init__(self, job_id: int, message: str | None = None) -> None:
        super().__init__(message or f"Job {job_id} timed out waiting for a reply")
        self.job_id = job_id


class LaundreeConnectionError(LaundreeClientError):
    """Network connection to the service failed."""


class LaundreeHandshakeError(LaundreeClientError):
    """WebSocket handshake failed."""


class LaundreeResponseError(LaundreeClientError):
    """HTTP response error from the service."""

    def __init__(self, status: int, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class LaundreeNotFoundError(LaundreeClientError):
    """A resource required by a compound operation does not exist."""
