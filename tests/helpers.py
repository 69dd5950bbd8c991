"""Fakes shared by the unit tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from malapi.runtime.http_client import HTTPResponse


@dataclass
class RecordedCall:
    method: str
    url: str
    params: dict[str, Any] | None
    data: dict[str, Any] | None
    headers: dict[str, str] | None


class FakeHTTP:
    """Stands in for HTTPClient.

    Queued items are handed out in order; the last one is repeated once the
    queue runs down. An exception instance is raised instead of returned.
    """

    def __init__(self, *responses: HTTPResponse | BaseException) -> None:
        self.responses = list(responses)
        self.calls: list[RecordedCall] = []

    def queue(self, *responses: HTTPResponse | BaseException) -> None:
        self.responses.extend(responses)

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Any = None,
        data: Any = None,
        headers: Any = None,
    ) -> HTTPResponse:
        self.calls.append(
            RecordedCall(
                method=method,
                url=url,
                params=dict(params) if params else None,
                data=dict(data) if data is not None else None,
                headers=dict(headers) if headers else None,
            )
        )
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, BaseException):
            raise item
        return item

    async def get(self, url: str, params: Any = None, headers: Any = None) -> HTTPResponse:
        return await self.request("GET", url, params=params, headers=headers)

    async def post(self, url: str, data: Any = None, headers: Any = None) -> HTTPResponse:
        return await self.request("POST", url, data=data, headers=headers)

    async def close(self) -> None:
        pass


def ok(body: Any, status: int = 200) -> HTTPResponse:
    return HTTPResponse(status=status, body=body)


def page_body(data: Any, previous: str | None = None, next: str | None = None) -> dict:
    paging = {}
    if previous:
        paging["previous"] = previous
    if next:
        paging["next"] = next
    return {"data": data, "paging": paging}
