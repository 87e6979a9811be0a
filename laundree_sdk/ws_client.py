"""WebSocket client wrapper usable as a job channel.

``emit`` sends job messages; ``listen`` hands decoded incoming frames to a
callback such as a store dispatch or ``JobCorrelator.observe``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from websockets.asyncio.client import ClientConnection
from websockets.exceptions import ConnectionClosed

from .errors import LaundreeClientError, LaundreeConnectionError
from .protocol import build_event_frame
from .ws import connect_websocket

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

_LOGGER = logging.getLogger(__name__)


class LaundreeWsMessageType(Enum):
    """Normalized WebSocket message types."""

    TEXT = "text"
    CLOSED = "closed"
    ERROR = "error"


@dataclass(frozen=True)
class LaundreeWsMessage:
    """Normalized WebSocket message payload."""

    type: LaundreeWsMessageType
    data: str | None = None


class LaundreeWsClient:
    """Wrapper around the websockets library.

    ``emit`` makes the client usable as the socket of a JobCorrelator.
    """

    def __init__(self) -> None:
        self._ws: ClientConnection | None = None

    @property
    def connected(self) -> bool:
        return self._ws is not None

    async def connect(
        self,
        url: str,
        *,
        ping_interval: int = 20,
        timeout: float = 15.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Connect to the service websocket."""
        self._ws = await connect_websocket(
            url,
            ping_interval=ping_interval,
            timeout=timeout,
            additional_headers=headers,
        )

    async def close(self) -> None:
        """Close the websocket connection."""
        if self._ws is not None:
            await self._ws.close()
            self._ws = None

    async def send_json(self, payload: dict[str, Any]) -> None:
        """Send a JSON payload to the websocket."""
        if self._ws is None:
            raise LaundreeConnectionError("WebSocket is not connected")
        try:
            await self._ws.send(json.dumps(payload))
        except ConnectionClosed as err:
            raise LaundreeConnectionError("WebSocket closed while sending") from err

    async def emit(self, event: str, *args: Any) -> None:
        """Send a named event with positional arguments."""
        _LOGGER.debug("Emitting %s", event)
        await self.send_json(build_event_frame(event, args))

    async def listen(self, on_state: Callable[[dict[str, Any]], Any]) -> None:
        """Decode TEXT frames and pass each to ``on_state`` until the socket ends.

        Frames that are not valid JSON are logged and skipped.
        """
        async for message in self:
            if message.type is not LaundreeWsMessageType.TEXT:
                _LOGGER.info("WebSocket %s, stopping listener", message.type.value)
                return
            try:
                state = self.decode_json(message)
            except (ValueError, LaundreeClientError) as err:
                _LOGGER.warning("Ignoring invalid frame: %s", err)
                continue
            on_state(state)

    def __aiter__(self) -> AsyncIterator[LaundreeWsMessage]:
        if self._ws is None:
            raise LaundreeConnectionError("WebSocket is not connected")
        return self._iter_messages()

    async def _iter_messages(self) -> AsyncIterator[LaundreeWsMessage]:
        if self._ws is None:
            raise LaundreeConnectionError("WebSocket is not connected")

        try:
            async for msg in self._ws:
                normalized = self._normalize_message(msg)
                if normalized is None:
                    continue
                yield normalized
        except ConnectionClosed:
            yield LaundreeWsMessage(type=LaundreeWsMessageType.CLOSED)
        except Exception as err:
            _LOGGER.warning("WebSocket receive failed: %s", err)
            yield LaundreeWsMessage(type=LaundreeWsMessageType.ERROR)
        else:
            # Normal iteration completion means the peer closed gracefully.
            yield LaundreeWsMessage(type=LaundreeWsMessageType.CLOSED)

    @staticmethod
    def _normalize_message(msg: Any) -> LaundreeWsMessage | None:
        """Normalize websocket frames into LaundreeWsMessage."""
        if isinstance(msg, bytes):
            return None
        return LaundreeWsMessage(LaundreeWsMessageType.TEXT, str(msg))

    @staticmethod
    def decode_json(message: LaundreeWsMessage) -> dict[str, Any]:
        """Decode a TEXT message payload into JSON."""
        if message.type is not LaundreeWsMessageType.TEXT:
            raise LaundreeClientError("Only TEXT messages can be decoded")
        if not isinstance(message.data, str):
            raise LaundreeClientError("Message data is not a string")
        result: dict[str, Any] = json.loads(message.data)
        return result
