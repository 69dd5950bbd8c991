"""Unit tests for cursor pagination."""

from __future__ import annotations

import asyncio

import pytest
from helpers import FakeHTTP, ok, page_body

from malapi.auth import AuthContext
from malapi.core import Paged, TransportError, is_error, wrap_paged
from malapi.models import ErrorResponse

AUTH = AuthContext(access_token="tok")


def identity(data):
    return data


class TestWrapPaged:
    """Test wrap_paged construction."""

    def test_data_mapped(self):
        page = wrap_paged(
            page_body([{"node": 1}, {"node": 2}]), lambda d: [x["node"] for x in d], AUTH
        )
        assert page.data == [1, 2]

    def test_continuations_mirror_cursors(self):
        page = wrap_paged(page_body(["x"], next="URL2"), identity, AUTH)
        assert page.data == ["x"]
        assert page.previous is None
        assert page.next is not None
        assert page.next.url == "URL2"

    def test_both_directions(self):
        page = wrap_paged(page_body([], previous="P", next="N"), identity, AUTH)
        assert page.previous.url == "P"
        assert page.previous.direction == "previous"
        assert page.next.url == "N"

    def test_missing_paging(self):
        page = wrap_paged({"data": ["x"]}, identity, AUTH)
        assert page.previous is None
        assert page.next is None

    def test_null_paging(self):
        page = wrap_paged({"data": ["x"], "paging": None}, identity, AUTH)
        assert page.data == ["x"]
        assert page.previous is None
        assert page.next is None

    def test_single_object_payload_not_coerced(self):
        page = wrap_paged(page_body({"title": "topic"}), identity, AUTH)
        assert page.data == {"title": "topic"}

    def test_continuation_captures_map_and_auth(self):
        page = wrap_paged(page_body([], next="N"), identity, AUTH)
        assert page.next.map is identity
        assert page.next.auth is AUTH


class TestContinuation:
    """Test following next/previous cursors."""

    @pytest.mark.asyncio
    async def test_round_trip(self):
        http = FakeHTTP(ok(page_body(["y"])))
        page = wrap_paged(page_body(["x"], next="URL2"), identity, AUTH)

        result = await page.next(http)

        assert isinstance(result, Paged)
        assert result.data == ["y"]
        assert result.next is None
        assert result.previous is None
        assert len(http.calls) == 1
        assert http.calls[0].method == "GET"
        assert http.calls[0].url == "URL2"

    @pytest.mark.asyncio
    async def test_url_used_verbatim_with_auth_header(self):
        url = "https://api.myanimelist.net/v2/anime?offset=10&q=one&limit=10&fields=mean"
        http = FakeHTTP(ok(page_body([])))
        page = wrap_paged(page_body([], next=url), identity, AUTH)

        await page.next(http)

        assert http.calls[0].url == url
        assert http.calls[0].params is None
        assert http.calls[0].headers == {"Authorization": "Bearer tok"}

    @pytest.mark.asyncio
    async def test_client_id_header(self):
        http = FakeHTTP(ok(page_body([])))
        auth = AuthContext(client_id="cid")
        page = wrap_paged(page_body([], previous="P"), identity, auth)

        await page.previous(http)

        assert http.calls[0].headers == {"X-MAL-CLIENT-ID": "cid"}

    @pytest.mark.asyncio
    async def test_same_map_applied_recursively(self):
        http = FakeHTTP(
            ok(page_body([{"node": 2}], next="N3")),
            ok(page_body([{"node": 3}])),
        )
        unwrap = lambda d: [x["node"] for x in d]  # noqa: E731
        page = wrap_paged(page_body([{"node": 1}], next="N2"), unwrap, AUTH)

        second = await page.next(http)
        third = await second.next(http)

        assert second.data == [2]
        assert third.data == [3]
        assert [c.url for c in http.calls] == ["N2", "N3"]

    @pytest.mark.asyncio
    async def test_api_error_is_value(self):
        http = FakeHTTP(ok({"error": "not_found", "message": "gone"}, status=404))
        page = wrap_paged(page_body([], next="N"), identity, AUTH)

        result = await page.next(http)

        assert isinstance(result, ErrorResponse)
        assert result.status == 404
        assert result.error == "not_found"
        assert result.message == "gone"

    @pytest.mark.asyncio
    async def test_api_error_with_list_message_is_value(self):
        http = FakeHTTP(ok({"error": "bad_request", "message": ["a", "b"]}, status=400))
        page = wrap_paged(page_body([], next="N"), identity, AUTH)

        result = await page.next(http)

        assert is_error(result)
        assert result.status == 400
        assert result.error == "bad_request"
        assert result.message == "['a', 'b']"

    @pytest.mark.asyncio
    async def test_transport_failure_is_fallback_error(self):
        http = FakeHTTP(TransportError("connection reset"))
        page = wrap_paged(page_body([], next="N"), identity, AUTH)

        result = await page.next(http)

        assert is_error(result)
        assert result.status == 500
        assert result.error == "unknown"
        assert result.message == "error with no response"

    @pytest.mark.asyncio
    async def test_invalid_body_is_error(self):
        http = FakeHTTP(ok(["not", "a", "page"]))
        page = wrap_paged(page_body([], next="N"), identity, AUTH)

        result = await page.next(http)

        assert is_error(result)
        assert result.error == "invalid_response"
        assert result.status == 200

    @pytest.mark.asyncio
    async def test_repeated_invocations_fetch_again(self):
        http = FakeHTTP(ok(page_body(["y"])))
        page = wrap_paged(page_body(["x"], next="URL2"), identity, AUTH)

        first, second = await asyncio.gather(page.next(http), page.next(http))

        assert len(http.calls) == 2
        assert first.data == ["y"]
        assert second.data == ["y"]
        assert first is not second
