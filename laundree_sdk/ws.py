"""WebSocket helpers for the Laundree socket transport."""

from __future__ import annotations

import asyncio

import websockets
from websockets.asyncio.client import ClientConnection
from websockets.exceptions import (
    InvalidHandshake,
    InvalidURI,
    WebSocketException,
)

from .errors import (
    LaundreeConnectionError,
    LaundreeHandshakeError,
    LaundreeTimeout,
)


async def connect_websocket(
    url: str,
    *,
    ping_interval: int | None = 20,
    timeout: float = 15.0,
    additional_headers: dict[str, str] | None = None,
) -> ClientConnection:
    """Connect to a Laundree WebSocket endpoint.

    Args:
        url: Full ws:// or wss:// URL
        ping_interval: Interval for ping frames
        timeout: Connection timeout
        additional_headers: Extra handshake headers, e.g. Authorization
    """
    try:
        return await asyncio.wait_for(
            websockets.connect(
                url,
                ping_interval=ping_interval,
                close_timeout=5,
                max_size=None,
                additional_headers=additional_headers,
            ),
            timeout=timeout,
        )
    except TimeoutError as err:
        raise LaundreeTimeout("WebSocket connection timed out") from err
    except (InvalidHandshake, InvalidURI) as err:
        raise LaundreeHandshakeError("WebSocket handshake failed") from err
    except (OSError, WebSocketException) as err:
        raise LaundreeConnectionError("WebSocket connection failed") from err
