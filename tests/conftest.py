"""Shared fixtures: a mocked Aare.guru API built on httpx.MockTransport."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio


class FakeAareGuru:
    """Records every request and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json: object = {"temperature": 18.2}
        self.content: bytes | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no upstream request was issued"
        return self.requests[-1]


@pytest.fixture
def aareguru() -> FakeAareGuru:
    return FakeAareGuru()


@pytest_asyncio.fixture
async def http_client(aareguru: FakeAareGuru) -> AsyncIterator[httpx.AsyncClient]:
    async with aareguru.client() as client:
        yield client


@pytest.fixture
def patched_upstream(aareguru: FakeAareGuru, monkeypatch: pytest.MonkeyPatch) -> FakeAareGuru:
    """Route clients created by the upstream module to the fake API."""
    factory: Callable[[], httpx.AsyncClient] = aareguru.client
    monkeypatch.setattr("aareguru_mcp.upstream.create_client", factory)
    return aareguru
