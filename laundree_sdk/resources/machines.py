"""Machine endpoints."""

from __future__ import annotations

from typing import Any

from ..http import LaundreeHttpClient
from ..models import CreateBookingBody, UpdateMachineBody
from .base import ResourceEndpoint


class MachineApi:
    """Operations on ``/machines``."""

    def __init__(self, http: LaundreeHttpClient) -> None:
        self._endpoint = ResourceEndpoint(http, "machines")
        self._http = http

    async def get(self, machine_id: str) -> Any:
        return await self._endpoint.get(machine_id)

    async def delete(self, machine_id: str) -> None:
        await self._endpoint.delete(machine_id)

    async def update_machine(self, machine_id: str, body: UpdateMachineBody) -> Any:
        return await self._http.put(self._endpoint.path(machine_id), body)

    async def create_booking(self, machine_id: str, body: CreateBookingBody) -> Any:
        return await self._http.post(self._endpoint.path(machine_id, "bookings"), body)
