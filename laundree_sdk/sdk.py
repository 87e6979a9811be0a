"""High-level facade over the Laundree HTTP API and socket jobs.

Usage:
    async with aiohttp.ClientSession("https://laundree.io") as session:
        sdk = Sdk(session, authenticator=my_authenticator)
        sdk.setup_store(store, socket)
        laundry = await sdk.api.laundry.get("laundry-1")
        machines = await sdk.list_machines("laundry-1")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import aiohttp

from .auth import Authenticator, unauthenticated
from .http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, LaundreeHttpClient
from .jobs import JobChannel, JobCorrelator, JobCounter, StateStore
from .models import DateObject, ListOptions
from .protocol import JobAction, read_job_id
from .resources import (
    BookingApi,
    ContactApi,
    InviteApi,
    LaundryApi,
    MachineApi,
    StatisticsApi,
    TokenApi,
    UserApi,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceApis:
    """Per-resource HTTP operations."""

    user: UserApi
    machine: MachineApi
    laundry: LaundryApi
    invite: InviteApi
    booking: BookingApi
    token: TokenApi
    contact: ContactApi
    statistics: StatisticsApi


class Sdk:
    """Single entry point for HTTP calls and correlated socket jobs."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str = DEFAULT_BASE_URL,
        authenticator: Authenticator = unauthenticated,
        *,
        request_timeout: float = DEFAULT_TIMEOUT,
        job_timeout: float | None = None,
        counter: JobCounter | None = None,
        job_selector: Callable[[Any], Any] = read_job_id,
        payload_selector: Callable[[Any], Any] | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            session: aiohttp session used for every HTTP call
            base_url: Prefix prepended to request paths
            authenticator: Async provider of the credential strategy,
                invoked once per HTTP call
            request_timeout: Total HTTP request timeout (seconds)
            job_timeout: Default socket job reply deadline (seconds).
                None waits indefinitely.
            counter: Job identifier source; pass a shared counter to keep
                identifiers unique across several facades
            job_selector: Reads the current job identifier from a store
                snapshot
            payload_selector: Reads the reply payload from a store
                snapshot. None resolves jobs with the whole snapshot.
        """
        self.http = LaundreeHttpClient(
            session, base_url, authenticator, timeout=request_timeout
        )
        selectors: dict[str, Callable[[Any], Any]] = {"job_selector": job_selector}
        if payload_selector is not None:
            selectors["payload_selector"] = payload_selector
        self.jobs = JobCorrelator(counter=counter, timeout=job_timeout, **selectors)
        self.api = ResourceApis(
            user=UserApi(self.http),
            machine=MachineApi(self.http),
            laundry=LaundryApi(self.http),
            invite=InviteApi(self.http),
            booking=BookingApi(self.http),
            token=TokenApi(self.http),
            contact=ContactApi(self.http),
            statistics=StatisticsApi(self.http),
        )

    @property
    def base_url(self) -> str:
        return self.http.base_url

    def setup_store(self, store: StateStore, socket: JobChannel) -> Any:
        """Emit jobs over ``socket`` and resolve them from ``store`` updates.

        Returns the store's unsubscribe handle.
        """
        self.jobs.attach(socket)
        _LOGGER.debug("Job replies bound to store %r", store)
        return self.jobs.bind(store)

    # -------------------------------------------------------------------------
    # Socket jobs
    # -------------------------------------------------------------------------

    async def invoke(
        self, action: str | JobAction, *args: Any, timeout: float | None = None
    ) -> Any:
        """Emit a job over the socket and wait for its reply."""
        return await self.jobs.invoke(action, *args, timeout=timeout)

    emit = invoke

    async def list_bookings_in_time(
        self, laundry_id: str, start: DateObject, end: DateObject
    ) -> Any:
        return await self.invoke(
            JobAction.LIST_BOOKINGS_IN_TIME, laundry_id, start, end
        )

    async def list_bookings_for_user(
        self,
        laundry_id: str,
        user_id: str,
        booking_filter: dict[str, Any] | None = None,
    ) -> Any:
        return await self.invoke(
            JobAction.LIST_BOOKINGS_FOR_USER,
            laundry_id,
            user_id,
            booking_filter if booking_filter is not None else {},
        )

    async def list_users_and_invites(self, laundry_id: str) -> Any:
        return await self.invoke(JobAction.LIST_USERS_AND_INVITES, laundry_id)

    async def list_users(self, options: ListOptions | None = None) -> Any:
        return await self.invoke(JobAction.LIST_USERS, options)

    async def list_machines(self, laundry_id: str) -> Any:
        return await self.invoke(JobAction.LIST_MACHINES, laundry_id)

    async def list_laundries(self, options: ListOptions | None = None) -> Any:
        return await self.invoke(JobAction.LIST_LAUNDRIES, options)

    async def list_machines_and_users(self, laundry_id: str) -> Any:
        return await self.invoke(JobAction.LIST_MACHINES_AND_USERS, laundry_id)

    async def fetch_laundry(self, laundry_id: str) -> Any:
        return await self.invoke(JobAction.FETCH_LAUNDRY, laundry_id)

    async def fetch_user(self, user_id: str) -> Any:
        return await self.invoke(JobAction.FETCH_USER, user_id)

    async def update_stats(self) -> Any:
        return await self.invoke(JobAction.UPDATE_STATS)

    async def setup_initial_events(self) -> Any:
        return await self.invoke(JobAction.SETUP_INITIAL_EVENTS)

    # -------------------------------------------------------------------------
    # HTTP primitives
    # -------------------------------------------------------------------------

    async def get(self, path: str) -> Any:
        return await self.http.get(path)

    async def delete(self, path: str) -> None:
        await self.http.delete(path)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.http.put(path, body)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.http.post(path, body)
