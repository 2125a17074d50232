"""Tests for the request dispatcher."""

import asyncio
import json

import httpx
import pytest
import pytest_asyncio

from daily_api import Room
from daily_api.errors import (
    DailyApiError,
    DailyParseError,
    DailyRequestError,
    DailyTransportError,
    ErrorCategory,
)
from daily_api.requests import CreateRoomRequest, ListRoomsResponse
from daily_api.transport import Dispatcher, HttpMethod

from .conftest import BASE_URL, FakeDaily


def make_dispatcher(handler) -> Dispatcher:
    return Dispatcher(
        BASE_URL,
        httpx.MockTransport(handler),
        timeout=5.0,
        user_agent="daily-api-tests",
    )


@pytest_asyncio.fixture
async def dispatcher(fake: FakeDaily):
    d = make_dispatcher(fake.handler)
    yield d
    await d.close()


class TestRequestBuilding:
    def test_resolves_relative_paths_against_base(self) -> None:
        d = make_dispatcher(lambda request: httpx.Response(200))

        assert str(d.resolve("")) == "https://api.daily.co/v1/"
        assert str(d.resolve("rooms/standup")) == "https://api.daily.co/v1/rooms/standup"
        assert str(d.resolve("recordings?limit=2")) == "https://api.daily.co/v1/recordings?limit=2"

    @pytest.mark.asyncio
    async def test_malformed_path_is_never_sent(self, dispatcher: Dispatcher, fake: FakeDaily) -> None:
        with pytest.raises(DailyRequestError) as exc_info:
            await dispatcher.perform(HttpMethod.GET, "rooms/bad\nname")

        assert exc_info.value.category is ErrorCategory.BUILD
        assert exc_info.value.status_code is None
        assert fake.requests == []

    @pytest.mark.asyncio
    async def test_unencodable_body_is_never_sent(self, dispatcher: Dispatcher, fake: FakeDaily) -> None:
        with pytest.raises(DailyRequestError):
            await dispatcher.perform(HttpMethod.POST, "rooms", {"name": object()})

        assert fake.requests == []

    @pytest.mark.asyncio
    async def test_absent_body_sends_no_content(self, dispatcher: Dispatcher, fake: FakeDaily) -> None:
        await dispatcher.perform(HttpMethod.POST, "rooms/standup/recordings/stop")

        assert fake.last.content == b""
        assert "Content-Type" not in fake.last.headers

    @pytest.mark.asyncio
    async def test_body_is_json_without_absent_fields(self, dispatcher: Dispatcher, fake: FakeDaily) -> None:
        await dispatcher.perform(HttpMethod.POST, "rooms", CreateRoomRequest(name="standup"))

        assert fake.last.method == "POST"
        assert fake.last.headers["Content-Type"] == "application/json"
        assert fake.last.headers["User-Agent"] == "daily-api-tests"
        assert json.loads(fake.last.content) == {"name": "standup"}


class TestResponseClassification:
    @pytest.mark.parametrize(
        ("status", "category"),
        [
            (400, ErrorCategory.BAD_REQUEST),
            (401, ErrorCategory.UNAUTHORIZED),
            (429, ErrorCategory.RATE_LIMITED),
            (500, ErrorCategory.INTERNAL),
            (404, ErrorCategory.UNEXPECTED),
            (502, ErrorCategory.UNEXPECTED),
            (201, ErrorCategory.UNEXPECTED),
        ],
    )
    @pytest.mark.asyncio
    async def test_non_success_status(
        self, dispatcher: Dispatcher, fake: FakeDaily, status: int, category: ErrorCategory
    ) -> None:
        body = b'{"error": "some-error", "info": "details here"}'
        fake.reply(status, raw=body)

        with pytest.raises(DailyApiError) as exc_info:
            await dispatcher.perform(HttpMethod.GET, "rooms", None, ListRoomsResponse)

        exc = exc_info.value
        assert exc.category is category
        assert exc.status_code == status
        assert exc.raw_details == body.decode()
        assert exc.details.error == "some-error"

    @pytest.mark.asyncio
    async def test_non_json_error_body_keeps_raw_text(self, dispatcher: Dispatcher, fake: FakeDaily) -> None:
        fake.reply(502, raw=b"<html>Bad Gateway</html>")

        with pytest.raises(DailyApiError) as exc_info:
            await dispatcher.perform(HttpMethod.GET, "rooms")

        assert exc_info.value.details is None
        assert exc_info.value.raw_details == "<html>Bad Gateway</html>"

    @pytest.mark.parametrize("raw", [b"not json", b"", b"[]", b'{"total_count": "many"}'])
    @pytest.mark.asyncio
    async def test_success_with_undecodable_body(
        self, dispatcher: Dispatcher, fake: FakeDaily, raw: bytes
    ) -> None:
        fake.reply(200, raw=raw)

        with pytest.raises(DailyParseError) as exc_info:
            await dispatcher.perform(HttpMethod.GET, "rooms", None, ListRoomsResponse)

        assert exc_info.value.category is ErrorCategory.PARSE
        assert exc_info.value.status_code == 200
        assert exc_info.value.raw_details == raw.decode()

    @pytest.mark.asyncio
    async def test_empty_object_is_a_zero_valued_result(self, dispatcher: Dispatcher, fake: FakeDaily) -> None:
        fake.reply(200, {})

        room = await dispatcher.perform(HttpMethod.GET, "rooms/standup", None, Room)

        assert isinstance(room, Room)
        assert room.to_payload() == {}

    @pytest.mark.asyncio
    async def test_default_result_is_a_plain_dict(self, dispatcher: Dispatcher, fake: FakeDaily) -> None:
        fake.reply(200, {"deleted": True})

        assert await dispatcher.perform(HttpMethod.DELETE, "rooms/standup") == {"deleted": True}


class TestTransportFailures:
    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        d = make_dispatcher(handler)
        with pytest.raises(DailyTransportError) as exc_info:
            await d.perform(HttpMethod.GET, "rooms")

        assert exc_info.value.category is ErrorCategory.TRANSPORT
        assert exc_info.value.status_code is None
        assert "connection refused" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        d = make_dispatcher(handler)
        with pytest.raises(DailyTransportError):
            await d.perform(HttpMethod.GET, "rooms", timeout=0.5)

    @pytest.mark.parametrize("status", [200, 500])
    @pytest.mark.asyncio
    async def test_undecodable_content_encoding(self, status: int) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, headers={"Content-Encoding": "gzip"}, content=b"notgzip")

        d = make_dispatcher(handler)
        with pytest.raises(DailyTransportError) as exc_info:
            await d.perform(HttpMethod.GET, "rooms")

        assert exc_info.value.category is ErrorCategory.TRANSPORT
        assert "DecodingError" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_cancel_aborts_in_flight_call(self) -> None:
        started = asyncio.Event()

        async def handler(request: httpx.Request) -> httpx.Response:
            started.set()
            await asyncio.sleep(30)
            return httpx.Response(200, json={"name": "late"})

        d = make_dispatcher(handler)
        cancel = asyncio.Event()

        async def cancel_when_started() -> None:
            await started.wait()
            cancel.set()

        canceller = asyncio.create_task(cancel_when_started())
        with pytest.raises(DailyTransportError, match="cancelled"):
            await asyncio.wait_for(d.perform(HttpMethod.GET, "rooms/x", None, Room, cancel=cancel), 2)
        await canceller

    @pytest.mark.asyncio
    async def test_client_is_usable_after_failure(self, dispatcher: Dispatcher, fake: FakeDaily) -> None:
        fake.reply(500, raw=b"oops")
        fake.reply(200, {"name": "standup"})

        with pytest.raises(DailyApiError):
            await dispatcher.perform(HttpMethod.GET, "rooms/standup", None, Room)
        room = await dispatcher.perform(HttpMethod.GET, "rooms/standup", None, Room)

        assert room.name == "standup"
