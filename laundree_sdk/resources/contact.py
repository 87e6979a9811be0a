"""Contact form endpoints."""

from __future__ import annotations

from ..http import LaundreeHttpClient
from ..models import ContactBody, ContactSupportBody


class ContactApi:
    def __init__(self, http: LaundreeHttpClient) -> None:
        self._http = http

    async def send_message(self, body: ContactBody) -> None:
        await self._http.post("/contact", body)

    async def send_support_message(self, body: ContactSupportBody) -> None:
        """Send a message to support on behalf of the authenticated user."""
        await self._http.post("/contact/support", body)
