"""Service statistics endpoint."""

from __future__ import annotations

from ..http import LaundreeHttpClient
from ..models import Statistics


class StatisticsApi:
    def __init__(self, http: LaundreeHttpClient) -> None:
        self._http = http

    async def fetch_statistics(self) -> Statistics:
        return await self._http.get("/statistics")
