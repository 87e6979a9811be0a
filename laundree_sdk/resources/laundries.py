"""Laundry endpoints."""

from __future__ import annotations

from typing import Any

from ..http import LaundreeHttpClient
from ..models import (
    AddUserFromCodeBody,
    CreateDemoLaundryResult,
    CreateInviteCodeResult,
    CreateLaundryBody,
    CreateMachineBody,
    InviteUserByEmailBody,
    UpdateLaundryBody,
    VerifyInviteCodeBody,
)
from .base import ResourceEndpoint


class LaundryApi:
    """Operations on ``/laundries`` and their users, owners and machines."""

    def __init__(self, http: LaundreeHttpClient) -> None:
        self._endpoint = ResourceEndpoint(http, "laundries")
        self._http = http

    async def get(self, laundry_id: str) -> Any:
        return await self._endpoint.get(laundry_id)

    async def delete(self, laundry_id: str) -> None:
        await self._endpoint.delete(laundry_id)

    async def create_laundry(self, body: CreateLaundryBody) -> Any:
        return await self._http.post(self._endpoint.path(), body)

    async def create_demo_laundry(self) -> CreateDemoLaundryResult:
        """Create a demo laundry and return the demo user's credentials."""
        return await self._http.post(self._endpoint.path("demo"))

    async def update_laundry(self, laundry_id: str, body: UpdateLaundryBody) -> Any:
        return await self._http.put(self._endpoint.path(laundry_id), body)

    async def create_machine(self, laundry_id: str, body: CreateMachineBody) -> Any:
        return await self._http.post(self._endpoint.path(laundry_id, "machines"), body)

    async def invite_user_by_email(
        self, laundry_id: str, body: InviteUserByEmailBody
    ) -> None:
        await self._http.post(self._endpoint.path(laundry_id, "invite-by-email"), body)

    async def remove_user_from_laundry(self, laundry_id: str, user_id: str) -> None:
        await self._http.delete(self._endpoint.path(laundry_id, "users", user_id))

    async def create_invite_code(self, laundry_id: str) -> CreateInviteCodeResult:
        return await self._http.post(self._endpoint.path(laundry_id, "invite-code"))

    async def verify_invite_code(
        self, laundry_id: str, body: VerifyInviteCodeBody
    ) -> None:
        await self._http.post(
            self._endpoint.path(laundry_id, "verify-invite-code"), body
        )

    async def add_owner(self, laundry_id: str, user_id: str) -> None:
        await self._http.post(self._endpoint.path(laundry_id, "owners", user_id))

    async def add_user(self, laundry_id: str, user_id: str) -> None:
        await self._http.post(self._endpoint.path(laundry_id, "users", user_id))

    async def remove_owner(self, laundry_id: str, user_id: str) -> None:
        await self._http.delete(self._endpoint.path(laundry_id, "owners", user_id))

    async def add_from_code(self, laundry_id: str, body: AddUserFromCodeBody) -> None:
        await self._http.post(
            self._endpoint.path(laundry_id, "users", "add-from-code"), body
        )
