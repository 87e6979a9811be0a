"""Token endpoints."""

from __future__ import annotations

from typing import Any

from ..http import LaundreeHttpClient
from ..models import CreateTokenFromEmailPasswordBody, TokenWithSecret
from .base import ResourceEndpoint


class TokenApi:
    """Operations on ``/tokens``."""

    def __init__(self, http: LaundreeHttpClient) -> None:
        self._endpoint = ResourceEndpoint(http, "tokens")
        self._http = http

    async def get(self, token_id: str) -> Any:
        return await self._endpoint.get(token_id)

    async def delete(self, token_id: str) -> None:
        await self._endpoint.delete(token_id)

    async def create_token_from_email_password(
        self, body: CreateTokenFromEmailPasswordBody
    ) -> TokenWithSecret:
        """Exchange email and password for a new token with its secret."""
        return await self._http.post(self._endpoint.path("email-password"), body)
