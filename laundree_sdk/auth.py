"""Credential strategies and Authorization header rendering.

Credentials are resolved from an async provider on every request. Nothing is
cached between calls, so providers that rotate or refresh tokens are picked
up transparently.
"""

from __future__ import annotations

import base64
from collections.abc import Awaitable, Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Unauthenticated:
    """Send requests without an Authorization header."""


@dataclass(frozen=True)
class Basic:
    """HTTP basic authentication.

    Attributes:
        username: Login name (for API clients usually a user id).
        password: Password or token secret.
    """

    username: str
    password: str


@dataclass(frozen=True)
class Bearer:
    """Bearer token authentication."""

    token: str


CredentialStrategy = Unauthenticated | Basic | Bearer

Authenticator = Callable[[], Awaitable[CredentialStrategy]]


async def unauthenticated() -> CredentialStrategy:
    """Default provider: never authenticate."""
    return Unauthenticated()


def render_authorization(strategy: CredentialStrategy) -> str | None:
    """Render a credential strategy into an Authorization header value."""
    if isinstance(strategy, Unauthenticated):
        return None
    if isinstance(strategy, Basic):
        # Logins containing ":" are encoded as-is
        credentials = f"{strategy.username}:{strategy.password}".encode()
        return f"Basic {base64.b64encode(credentials).decode()}"
    if isinstance(strategy, Bearer):
        return f"Bearer {strategy.token}"
    raise TypeError(f"Unsupported credential strategy: {type(strategy).__name__}")


class AuthResolver:
    """Resolve the Authorization header for a single request."""

    def __init__(self, authenticator: Authenticator = unauthenticated) -> None:
        self._authenticator = authenticator

    async def resolve(self) -> str | None:
        """Invoke the provider and render its strategy.

        Provider errors propagate to the caller unchanged.
        """
        strategy = await self._authenticator()
        return render_authorization(strategy)

    async def headers(self) -> dict[str, str]:
        """Return request headers carrying the resolved credentials."""
        value = await self.resolve()
        if value is None:
            return {}
        return {"Authorization": value}
