"""Tests for LaundreeHttpClient."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from laundree_sdk import Basic, Bearer, LaundreeHttpClient
from laundree_sdk.errors import (
    LaundreeConnectionError,
    LaundreeResponseError,
    LaundreeTimeout,
)

from .conftest import create_mock_response


class TestRequestBuilding:
    """Tests for URL, header and body handling."""

    async def test_get_joins_base_url_and_path(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session, "https://laundree.io/api")
        mock_session.request.return_value = create_mock_response(
            json_data={"id": "u1"}
        )

        result = await client.get("/users/u1")

        assert result == {"id": "u1"}
        call_args = mock_session.request.call_args
        assert call_args.args == ("GET", "https://laundree.io/api/users/u1")

    async def test_default_base_url(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(json_data=[])

        await client.get("/statistics")

        assert mock_session.request.call_args.args[1] == "/api/statistics"

    async def test_path_must_start_with_slash(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session)

        with pytest.raises(ValueError, match="must start with '/'"):
            await client.get("users")

        mock_session.request.assert_not_called()

    async def test_post_without_body_sends_no_payload(
        self, mock_session: MagicMock
    ) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(
            json_data={"key": "k", "href": "/invites/k"}
        )

        await client.post("/laundries/l1/invite-code")

        call_kwargs = mock_session.request.call_args.kwargs
        assert "json" not in call_kwargs
        assert "data" not in call_kwargs

    async def test_post_with_body_sends_json(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(status=201)

        await client.post("/contact", {"x": 1})

        assert mock_session.request.call_args.kwargs["json"] == {"x": 1}

    async def test_empty_dict_is_still_a_body(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(status=204)

        await client.put("/users/u1", {})

        assert mock_session.request.call_args.kwargs["json"] == {}

    async def test_unauthenticated_sends_no_header(
        self, mock_session: MagicMock
    ) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(status=204)

        await client.delete("/bookings/b1")

        headers = mock_session.request.call_args.kwargs.get("headers", {})
        assert "Authorization" not in headers

    async def test_bearer_header_applied(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(
            mock_session, authenticator=AsyncMock(return_value=Bearer(token="xyz"))
        )
        mock_session.request.return_value = create_mock_response(json_data={})

        await client.get("/users/u1")

        headers = mock_session.request.call_args.kwargs["headers"]
        assert headers == {"Authorization": "Bearer xyz"}

    async def test_basic_header_applied(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(
            mock_session,
            authenticator=AsyncMock(return_value=Basic(username="a", password="b")),
        )
        mock_session.request.return_value = create_mock_response(json_data={})

        await client.get("/users/u1")

        headers = mock_session.request.call_args.kwargs["headers"]
        assert headers == {"Authorization": "Basic YTpi"}

    async def test_uses_configured_timeout(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session, timeout=3.0)
        mock_session.request.return_value = create_mock_response(json_data={})

        await client.get("/statistics")

        timeout = mock_session.request.call_args.kwargs["timeout"]
        assert timeout.total == 3.0


class TestResponseParsing:
    """Tests for response body handling."""

    async def test_text_body_returned(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(text_data="OK")

        assert await client.post("/users/u1/tokens/verify", {"token": "t"}) == "OK"

    async def test_empty_body_is_none(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(status=204)

        assert await client.put("/machines/m1", {"broken": True}) is None

    async def test_structured_json_media_type_is_decoded(
        self, mock_session: MagicMock
    ) -> None:
        client = LaundreeHttpClient(mock_session)
        response = create_mock_response(json_data={"title": "Created"})
        response.content_type = "application/problem+json"
        mock_session.request.return_value = response

        assert await client.post("/laundries", {"name": "L"}) == {"title": "Created"}
        response.json.assert_awaited_once_with(content_type=None)

    async def test_delete_returns_none(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(
            json_data={"ignored": True}
        )

        assert await client.delete("/machines/m1") is None


class TestErrors:
    """Tests for error propagation."""

    async def test_non_2xx_raises_response_error(
        self, mock_session: MagicMock
    ) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(
            status=404, json_data={"message": "Not found"}
        )

        with pytest.raises(LaundreeResponseError) as exc_info:
            await client.get("/users/missing")

        assert exc_info.value.status == 404
        assert exc_info.value.body == {"message": "Not found"}
        assert "GET /users/missing" in str(exc_info.value)

    async def test_timeout_raises_laundree_timeout(
        self, mock_session: MagicMock
    ) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.side_effect = TimeoutError("Request timed out")

        with pytest.raises(LaundreeTimeout, match="timed out"):
            await client.get("/statistics")

    async def test_client_error_raises_connection_error(
        self, mock_session: MagicMock
    ) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.side_effect = aiohttp.ClientError("Connection refused")

        with pytest.raises(LaundreeConnectionError, match="POST /contact failed"):
            await client.post("/contact", {"message": "hi"})

    async def test_provider_error_aborts_before_request(
        self, mock_session: MagicMock
    ) -> None:
        error = PermissionError("no credentials")
        client = LaundreeHttpClient(
            mock_session, authenticator=AsyncMock(side_effect=error)
        )

        with pytest.raises(PermissionError) as exc_info:
            await client.get("/users/u1")

        assert exc_info.value is error
        mock_session.request.assert_not_called()

    async def test_no_retry_on_failure(self, mock_session: MagicMock) -> None:
        client = LaundreeHttpClient(mock_session)
        mock_session.request.return_value = create_mock_response(status=503)

        with pytest.raises(LaundreeResponseError):
            await client.get("/statistics")

        assert mock_session.request.call_count == 1

    async def test_unparsable_error_body_keeps_status(
        self, mock_session: MagicMock
    ) -> None:
        """A proxy error page labelled as JSON still surfaces the status."""
        client = LaundreeHttpClient(mock_session)
        response = create_mock_response(status=502, json_data={})
        response.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
        response.text.return_value = "<html>Bad gateway</html>"
        mock_session.request.return_value = response

        with pytest.raises(LaundreeResponseError) as exc_info:
            await client.get("/users/u1")

        assert exc_info.value.status == 502
        assert exc_info.value.body == "<html>Bad gateway</html>"

    async def test_content_type_error_on_error_body_keeps_status(
        self, mock_session: MagicMock
    ) -> None:
        client = LaundreeHttpClient(mock_session)
        response = create_mock_response(status=500, json_data={})
        response.json.side_effect = aiohttp.ContentTypeError(
            MagicMock(), (), message="unexpected mimetype"
        )
        response.text.return_value = ""
        mock_session.request.return_value = response

        with pytest.raises(LaundreeResponseError) as exc_info:
            await client.post("/contact", {"message": "hi"})

        assert exc_info.value.status == 500
        assert exc_info.value.body is None
