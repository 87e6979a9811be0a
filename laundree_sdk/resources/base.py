"""Shared request building for per-resource APIs."""

from __future__ import annotations

from typing import Any

from ..http import LaundreeHttpClient


class ResourceEndpoint:
    """Path prefix bound to an HTTP client.

    Per-resource APIs own one of these instead of inheriting shared
    behavior.
    """

    def __init__(self, http: LaundreeHttpClient, prefix: str) -> None:
        self._http = http
        self.prefix = prefix

    @property
    def http(self) -> LaundreeHttpClient:
        return self._http

    def path(self, *segments: str) -> str:
        """Build ``/{prefix}/{segment}/...``."""
        return "/".join(["", self.prefix, *segments])

    async def get(self, resource_id: str) -> Any:
        """GET ``/{prefix}/{id}``."""
        return await self._http.get(self.path(resource_id))

    async def delete(self, resource_id: str) -> None:
        """DELETE ``/{prefix}/{id}``."""
        await self._http.delete(self.path(resource_id))
