"""Pytest configuration and fixtures for laundree_sdk tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    return MagicMock(spec=aiohttp.ClientSession)


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    text_data: str | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call; marks the response as JSON
        text_data: Data to return from text() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_data is not None:
        response.content_type = "application/json"
        response.json.return_value = json_data
    else:
        response.content_type = "text/plain"
        response.text.return_value = text_data or ""

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response


class FakeSocket:
    """Records emitted events."""

    def __init__(self) -> None:
        self.emitted: list[tuple[str, tuple[Any, ...]]] = []

    def emit(self, event: str, *args: Any) -> None:
        self.emitted.append((event, args))

    @property
    def messages(self) -> list[dict[str, Any]]:
        return [args[0] for _, args in self.emitted]


class FakeStore:
    """Minimal redux-style store."""

    def __init__(self, state: Any = None) -> None:
        self._state = state if state is not None else {"job": None}
        self._listeners: list[Callable[[], None]] = []

    def get_state(self) -> Any:
        return self._state

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(callback)

        def _unsubscribe() -> None:
            self._listeners.remove(callback)

        return _unsubscribe

    def dispatch(self, state: Any) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener()


@pytest.fixture
def fake_socket() -> FakeSocket:
    return FakeSocket()


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()
