"""Booking endpoints."""

from __future__ import annotations

from typing import Any

from ..http import LaundreeHttpClient
from ..models import UpdateBookingBody
from .base import ResourceEndpoint


class BookingApi:
    """Operations on ``/bookings``."""

    def __init__(self, http: LaundreeHttpClient) -> None:
        self._endpoint = ResourceEndpoint(http, "bookings")
        self._http = http

    async def get(self, booking_id: str) -> Any:
        return await self._endpoint.get(booking_id)

    async def delete(self, booking_id: str) -> None:
        await self._endpoint.delete(booking_id)

    async def update_booking(self, booking_id: str, body: UpdateBookingBody) -> Any:
        return await self._http.put(self._endpoint.path(booking_id), body)
