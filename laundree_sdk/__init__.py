"""Async client for the Laundree booking API."""

__version__ = "0.1.0"

from .auth import (
    Authenticator,
    AuthResolver,
    Basic,
    Bearer,
    CredentialStrategy,
    Unauthenticated,
    render_authorization,
    unauthenticated,
)
from .errors import (
    LaundreeClientError,
    LaundreeConnectionError,
    LaundreeHandshakeError,
    LaundreeJobTimeout,
    LaundreeNotFoundError,
    LaundreeResponseError,
    LaundreeTimeout,
)
from .http import LaundreeHttpClient
from .jobs import JobChannel, JobCorrelator, JobCounter, JobRegistry, StateStore
from .protocol import JobAction, build_event_frame, build_job_message, read_job_id
from .sdk import ResourceApis, Sdk
from .ws import connect_websocket
from .ws_client import LaundreeWsClient, LaundreeWsMessage, LaundreeWsMessageType

__all__ = [
    "AuthResolver",
    "Authenticator",
    "Basic",
    "Bearer",
    "CredentialStrategy",
    "JobAction",
    "JobChannel",
    "JobCorrelator",
    "JobCounter",
    "JobRegistry",
    "LaundreeClientError",
    "LaundreeConnectionError",
    "LaundreeHandshakeError",
    "LaundreeHttpClient",
    "LaundreeJobTimeout",
    "LaundreeNotFoundError",
    "LaundreeResponseError",
    "LaundreeTimeout",
    "LaundreeWsClient",
    "LaundreeWsMessage",
    "LaundreeWsMessageType",
    "ResourceApis",
    "Sdk",
    "StateStore",
    "Unauthenticated",
    "__version__",
    "build_event_frame",
    "build_job_message",
    "connect_websocket",
    "read_job_id",
    "render_authorization",
    "unauthenticated",
]
