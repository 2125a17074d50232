"""Shared fixtures: a scripted fake of the Daily API behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import pytest_asyncio

from daily_api import DailyClient

BASE_URL = "https://api.daily.co/v1/"


class FakeDaily:
    """Records every request and answers with the queued (status, body) replies."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: list[tuple[int, bytes]] = []

    def reply(self, status: int = 200, body: Any = None, *, raw: bytes | None = None) -> None:
        if raw is None:
            raw = json.dumps({} if body is None else body).encode()
        self._replies.append((status, raw))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, raw = self._replies.pop(0) if self._replies else (200, b"{}")
        return httpx.Response(status, content=raw)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def fake() -> FakeDaily:
    return FakeDaily()


@pytest_asyncio.fixture
async def client(fake: FakeDaily):
    """DailyClient wired to the fake, authenticated with a test key."""
    daily = DailyClient(
        api_key="test-key",
        base_url=BASE_URL,
        user_agent="daily-api-tests",
        transport=httpx.MockTransport(fake.handler),
    )
    yield daily
    await daily.close()
