"""Job correlation over a shared socket.

Every message sent over the socket is tagged with a fresh job identifier.
A one-shot waiter is registered under that identifier before the message is
emitted, and is resolved when the application state later reports the same
identifier as the current job. Replies may arrive in any order and any
number of jobs may be in flight at once.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from .errors import LaundreeConnectionError, LaundreeJobTimeout
from .protocol import JobAction, action_name, build_job_message, read_job_id

_LOGGER = logging.getLogger(__name__)


class JobChannel(Protocol):
    """Socket-like object able to emit named events."""

    def emit(self, event: str, /, *args: Any) -> Awaitable[None] | None: ...


class StateStore(Protocol):
    """Observable application state (redux-style store)."""

    def subscribe(self, callback: Callable[[], None]) -> Any: ...

    def get_state(self) -> Any: ...


class JobCounter:
    """Monotonic job identifier source.

    Starts at 1 and is never reset. Share one instance between correlators
    when identifiers must stay unique across several channels.
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("Job identifiers are positive integers")
        self._next = start

    def __iter__(self) -> JobCounter:
        return self

    def __next__(self) -> int:
        job_id = self._next
        self._next += 1
        return job_id

    def peek(self) -> int:
        """Return the identifier the next job will receive."""
        return self._next


class JobRegistry:
    """One-shot waiters keyed by stringified job identifier."""

    def __init__(self) -> None:
        self._waiters: dict[str, asyncio.Future[Any]] = {}

    def __len__(self) -> int:
        return len(self._waiters)

    def __contains__(self, job_id: object) -> bool:
        return str(job_id) in self._waiters

    def register(self, job_id: int) -> asyncio.Future[Any]:
        """Create the waiter for ``job_id``."""
        key = str(job_id)
        if key in self._waiters:
            raise RuntimeError(f"Job {job_id} already has a pending waiter")
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._waiters[key] = future
        return future

    def resolve(self, job_id: Any, payload: Any = None) -> bool:
        """Deliver ``payload`` to the waiter for ``job_id`` and forget it.

        Returns False when no waiter is registered, which makes repeated
        notifications for the same job a no-op.
        """
        future = self._waiters.pop(str(job_id), None)
        if future is None:
            return False
        if future.done():
            return False
        future.set_result(payload)
        return True

    def discard(self, job_id: Any) -> None:
        """Drop the waiter for ``job_id`` if it is still registered."""
        self._waiters.pop(str(job_id), None)

    def pending(self) -> list[str]:
        """Return the identifiers that are still awaiting a reply."""
        return list(self._waiters)


def _identity(state: Any) -> Any:
    return state


class JobCorrelator:
    """Turn fire-and-forget socket messages into awaitable calls.

    Usage:
        correlator = JobCorrelator(socket)
        correlator.bind(store)
        users = await correlator.invoke("listUsers", {"limit": 10})
    """

    def __init__(
        self,
        channel: JobChannel | None = None,
        *,
        counter: JobCounter | None = None,
        registry: JobRegistry | None = None,
        job_selector: Callable[[Any], Any] = read_job_id,
        payload_selector: Callable[[Any], Any] = _identity,
        timeout: float | None = None,
    ) -> None:
        """Initialize correlator.

        Args:
            channel: Socket used to emit job messages. Can be attached later.
            counter: Identifier source, shared when several correlators must
                never collide.
            registry: Waiter registry.
            job_selector: Reads the current job identifier from a state
                snapshot.
            payload_selector: Reads the reply payload from a state snapshot.
                Defaults to the snapshot itself.
            timeout: Default reply deadline in seconds. None waits forever.
        """
        self._channel = channel
        self._counter = counter if counter is not None else JobCounter()
        self._registry = registry if registry is not None else JobRegistry()
        self._job_selector = job_selector
        self._payload_selector = payload_selector
        self._timeout = timeout

    @property
    def channel(self) -> JobChannel | None:
        """Socket currently used for emission."""
        return self._channel

    @property
    def counter(self) -> JobCounter:
        return self._counter

    @property
    def pending_count(self) -> int:
        """Number of jobs still waiting for a reply."""
        return len(self._registry)

    def attach(self, channel: JobChannel) -> None:
        """Use ``channel`` for subsequent emissions."""
        self._channel = channel

    def bind(self, store: StateStore) -> Any:
        """Observe ``store`` after every state change.

        Returns whatever the store's ``subscribe`` returns, usually an
        unsubscribe callable.
        """

        def _on_change() -> None:
            self.observe(store.get_state())

        return store.subscribe(_on_change)

    async def invoke(
        self,
        action: str | JobAction,
        *args: Any,
        timeout: float | None = None,
    ) -> Any:
        """Emit ``action`` with ``args`` and wait for the correlated reply.

        Raises:
            LaundreeConnectionError: If no channel is attached
            LaundreeJobTimeout: If a timeout is configured and expires
        """
        channel = self._channel
        if channel is None:
            raise LaundreeConnectionError("No socket attached for job emission")

        job_id = next(self._counter)
        future = self._registry.register(job_id)
        event = action_name(action)
        message = build_job_message(event, job_id, args)

        try:
            _LOGGER.debug("Job %d emitted: %s", job_id, event)
            result = channel.emit(event, message)
            if inspect.isawaitable(result):
                await result
            return await self._wait(job_id, future, timeout)
        finally:
            self._registry.discard(job_id)

    async def _wait(
        self, job_id: int, future: asyncio.Future[Any], timeout: float | None
    ) -> Any:
        deadline = timeout if timeout is not None else self._timeout
        if deadline is None:
            return await future
        try:
            return await asyncio.wait_for(future, deadline)
        except TimeoutError as err:
            _LOGGER.warning("Job %d got no reply within %.1fs", job_id, deadline)
            raise LaundreeJobTimeout(job_id) from err

    def observe(self, state: Any) -> None:
        """Resolve the job named by ``state``, if any."""
        job_id = self._job_selector(state)
        if job_id is None:
            return
        self.resolve(job_id, self._payload_selector(state))

    def resolve(self, job_id: Any, payload: Any = None) -> bool:
        """Deliver a reply for ``job_id``.

        Returns True when a pending job was resolved. Replies for unknown or
        already resolved jobs are ignored.
        """
        if self._registry.resolve(job_id, payload):
            _LOGGER.debug("Job %s resolved", job_id)
            return True
        _LOGGER.debug("Ignoring reply for job %s: no pending waiter", job_id)
        return False
