"""Laundry invitation endpoints."""

from __future__ import annotations

from typing import Any

from ..http import LaundreeHttpClient
from .base import ResourceEndpoint


class InviteApi:
    """Operations on ``/invites``."""

    def __init__(self, http: LaundreeHttpClient) -> None:
        self._endpoint = ResourceEndpoint(http, "invites")

    async def get(self, invite_id: str) -> Any:
        return await self._endpoint.get(invite_id)

    async def delete(self, invite_id: str) -> None:
        await self._endpoint.delete(invite_id)
