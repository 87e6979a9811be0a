"""HTTP client for Laundree REST endpoints."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from .auth import Authenticator, AuthResolver, unauthenticated
from .errors import (
    LaundreeConnectionError,
    LaundreeResponseError,
    LaundreeTimeout,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "/api"
DEFAULT_TIMEOUT = 10.0


class LaundreeHttpClient:
    """HTTP client wrapper for Laundree API endpoints.

    Every call resolves credentials through the configured authenticator
    before the request is issued, so a failing provider aborts the call
    without touching the network.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str = DEFAULT_BASE_URL,
        authenticator: Authenticator = unauthenticated,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session
        self._base_url = base_url
        self._auth = AuthResolver(authenticator)
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        """Prefix prepended to every request path."""
        return self._base_url

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            raise ValueError(f"Request path must start with '/': {path!r}")
        return f"{self._base_url}{path}"

    async def get(self, path: str) -> Any:
        """GET ``path`` and return the parsed response body."""
        return await self._request("GET", path)

    async def delete(self, path: str) -> None:
        """DELETE ``path``."""
        await self._request("DELETE", path)

    async def put(self, path: str, body: Any = None) -> Any:
        """PUT ``body`` (if any) to ``path`` and return the parsed response."""
        return await self._request("PUT", path, body)

    async def post(self, path: str, body: Any = None) -> Any:
        """POST ``body`` (if any) to ``path`` and return the parsed response."""
        return await self._request("POST", path, body)

    async def _request(self, method: str, path: str, body: Any = None) -> Any:
        url = self._url(path)
        headers = await self._auth.headers()

        kwargs: dict[str, Any] = {
            "headers": headers,
            "timeout": aiohttp.ClientTimeout(total=self._timeout),
        }
        # Some endpoints accept a POST with no payload at all
        if body is not None:
            kwargs["json"] = body

        _LOGGER.debug("%s %s", method, url)
        try:
            async with self._session.request(method, url, **kwargs) as resp:
                if not 200 <= resp.status < 300:
                    raise LaundreeResponseError(
                        resp.status,
                        f"{method} {path} failed with status {resp.status}",
                        await self._read_error_body(resp),
                    )
                return await self._read_body(resp)
        except TimeoutError as err:
            raise LaundreeTimeout(f"{method} {path} timed out") from err
        except aiohttp.ClientError as err:
            raise LaundreeConnectionError(f"{method} {path} failed") from err

    @staticmethod
    async def _read_body(resp: aiohttp.ClientResponse) -> Any:
        """Parse a response body as JSON when advertised, else as text."""
        if resp.content_type.endswith("json"):
            return await resp.json(content_type=None)
        text = await resp.text()
        return text or None

    @classmethod
    async def _read_error_body(cls, resp: aiohttp.ClientResponse) -> Any:
        """Read an error body, falling back to raw text when it does not parse."""
        try:
            return await cls._read_body(resp)
        except (ValueError, aiohttp.ContentTypeError):
            text = await resp.text()
            return text or None
