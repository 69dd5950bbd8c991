"""Unit tests for HTTPClient.

Tests focus on session management, body decoding and error conversion.
"""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from malapi import AuthContext, is_error, wrap_paged
from malapi.core import APIError, TransportError
from malapi.runtime import HTTPClient, HTTPResponse


def mock_response(status: int = 200, body: bytes | str = b"", charset: str | None = "utf-8"):
    response = AsyncMock()
    response.status = status
    response.charset = charset
    raw = body.encode() if isinstance(body, str) else body
    response.read = AsyncMock(return_value=raw)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def attach_session(client: HTTPClient, response=None, error=None) -> MagicMock:
    session = MagicMock()
    session.closed = False  # session property checks this
    if error is not None:
        session.request = MagicMock(side_effect=error)
    else:
        session.request = MagicMock(return_value=response)
    client._session = session
    return session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client.base_url is None

    def test_base_url_trailing_slash(self):
        client = HTTPClient(base_url="https://api.myanimelist.net/v2/")
        assert client.base_url == "https://api.myanimelist.net/v2"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestResolveURL:
    def test_relative_path(self):
        client = HTTPClient(base_url="https://api.myanimelist.net/v2")
        assert client.resolve_url("/anime/1") == "https://api.myanimelist.net/v2/anime/1"
        assert client.resolve_url("anime/1") == "https://api.myanimelist.net/v2/anime/1"

    def test_absolute_url_untouched(self):
        client = HTTPClient(base_url="https://api.myanimelist.net/v2")
        url = "https://api.myanimelist.net/v2/anime?offset=10&q=one"
        assert client.resolve_url(url) == url

    def test_no_base_url(self):
        assert HTTPClient().resolve_url("/anime/1") == "/anime/1"


class TestRequest:
    """Test request dispatch and body decoding."""

    @pytest.mark.asyncio
    async def test_json_body(self):
        client = HTTPClient(base_url="https://api.myanimelist.net/v2")
        session = attach_session(
            client, mock_response(200, '{"id": 1}')
        )

        result = await client.get(
            "/anime/1", params={"fields": "mean"}, headers={"X-MAL-CLIENT-ID": "cid"}
        )

        assert result == HTTPResponse(status=200, body={"id": 1})
        session.request.assert_called_once_with(
            "GET",
            "https://api.myanimelist.net/v2/anime/1",
            params={"fields": "mean"},
            data=None,
            headers={"X-MAL-CLIENT-ID": "cid"},
        )

    @pytest.mark.asyncio
    async def test_form_body(self):
        client = HTTPClient()
        session = attach_session(client, mock_response(200, "{}"))

        await client.patch("https://example.test/x", data={"score": 8})

        _, kwargs = session.request.call_args
        assert kwargs["data"] == {"score": 8}
        assert session.request.call_args.args[0] == "PATCH"

    @pytest.mark.asyncio
    async def test_empty_body(self):
        client = HTTPClient()
        attach_session(client, mock_response(200, ""))

        result = await client.delete("https://example.test/x")

        assert result.status == 200
        assert result.body is None

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client = HTTPClient()
        attach_session(client, mock_response(502, "Bad Gateway"))

        result = await client.get("https://example.test/x")

        assert result.status == 502
        assert result.body == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_undecodable_body_keeps_status(self):
        client = HTTPClient()
        attach_session(client, mock_response(502, b"\xff\xfeBad"))

        result = await client.get("https://example.test/x")

        assert result.status == 502
        assert result.body == "\ufffd\ufffdBad"

    @pytest.mark.asyncio
    async def test_unknown_charset_falls_back_to_utf8(self):
        client = HTTPClient()
        attach_session(client, mock_response(200, b'{"id": 1}', charset="no-such-codec"))

        result = await client.get("https://example.test/x")

        assert result.body == {"id": 1}

    @pytest.mark.asyncio
    async def test_undecodable_error_page_through_continuation(self):
        client = HTTPClient()
        attach_session(client, mock_response(502, b"\xff<html>"))
        page = wrap_paged(
            {"data": [], "paging": {"next": "https://example.test/x?offset=1"}},
            lambda data: data,
            AuthContext(client_id="cid"),
        )

        result = await page.next(client)

        assert is_error(result)
        assert result.status == 502
        assert result.error == "unknown"

    @pytest.mark.asyncio
    async def test_error_status_is_returned(self):
        client = HTTPClient()
        body = {"error": "not_found", "message": ""}
        attach_session(client, mock_response(404, json.dumps(body)))

        result = await client.get("https://example.test/x")

        assert not result.ok
        assert result.body == body

    @pytest.mark.asyncio
    async def test_client_error_raises_transport_error(self):
        client = HTTPClient()
        attach_session(client, error=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://example.test/x")

        assert exc_info.value.url == "https://example.test/x"

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self):
        client = HTTPClient()
        attach_session(client, error=asyncio.TimeoutError())

        with pytest.raises(TransportError):
            await client.get("https://example.test/x")


class TestHTTPResponse:
    def test_ok_range(self):
        assert HTTPResponse(200).ok
        assert HTTPResponse(204).ok
        assert not HTTPResponse(301).ok
        assert not HTTPResponse(500).ok

    def test_raise_for_status_success(self):
        HTTPResponse(200, {"data": []}).raise_for_status()

    def test_raise_for_status_with_error_body(self):
        response = HTTPResponse(400, {"error": "invalid_parameters", "message": "bad limit"})
        with pytest.raises(APIError) as exc_info:
            response.raise_for_status()
        err = exc_info.value
        assert err.status_code == 400
        assert err.error == "invalid_parameters"
        assert err.body == {"error": "invalid_parameters", "message": "bad limit"}

    def test_raise_for_status_without_body(self):
        with pytest.raises(APIError) as exc_info:
            HTTPResponse(503).raise_for_status()
        assert exc_info.value.status_code == 503
        assert exc_info.value.error is None
