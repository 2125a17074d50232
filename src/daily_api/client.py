"""Async client for the Daily REST API (https://docs.daily.co/reference/rest-api)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, TypedDict, Unpack
from urllib.parse import quote

import httpx

from .config import settings
from .models import DomainConfig, DomainSettings, MeetingToken, Room
from .requests import (
    CreateMeetingTokenRequest,
    CreateMeetingTokenResponse,
    CreateRoomRequest,
    DeletedResponse,
    ListRecordingsRequest,
    ListRecordingsResponse,
    ListRoomsRequest,
    ListRoomsResponse,
    RecordingLinkResponse,
    SetDomainConfigRequest,
    StartRecordingRequest,
    StartRecordingResponse,
    UpdateRoomRequest,
)
from .transport.auth import BearerAuthTransport
from .transport.dispatcher import Dispatcher, HttpMethod

logger = logging.getLogger(__name__)


class CallOptions(TypedDict, total=False):
    timeout: float | None
    cancel: asyncio.Event | None


def path_segment(value: str) -> str:
    """Percent-encode an id or name so it stays a single path segment."""
    return quote(value, safe="")


def with_query(path: str, params: Iterable[tuple[str, Any]]) -> str:
    """Append ``?k=v&k=v`` in the order given, skipping ``None`` values."""
    pairs = [f"{key}={quote(str(value), safe='')}" for key, value in params if value is not None]
    if not pairs:
        return path
    return f"{path}?{'&'.join(pairs)}"


class DailyClient:
    """One method per Daily endpoint; every call is a single round trip.

    Errors are raised as ``daily_api.errors.DailyError`` subclasses and leave the
    client usable.  Pass ``transport=`` to swap the HTTP layer (tests use
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        api_key = api_key or settings.api_key
        transport = transport or httpx.AsyncHTTPTransport()
        if api_key:
            transport = BearerAuthTransport(transport, api_key)
        else:
            logger.warning("No Daily API key configured, requests will be unauthenticated")
        self._dispatcher = Dispatcher(
            base_url or settings.base_url,
            transport,
            timeout=settings.timeout if timeout is None else timeout,
            user_agent=user_agent or settings.user_agent,
        )

    async def __aenter__(self) -> DailyClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._dispatcher.close()

    # ── Domain ────────────────────────────────────────────────

    async def get_domain_config(self, **options: Unpack[CallOptions]) -> DomainConfig:
        return await self._dispatcher.perform(HttpMethod.GET, "", None, DomainConfig, **options)

    async def set_domain_config(
        self, config: DomainSettings, **options: Unpack[CallOptions]
    ) -> DomainConfig:
        """Update domain settings; absent fields keep their current value."""
        payload = SetDomainConfigRequest(properties=config)
        return await self._dispatcher.perform(HttpMethod.POST, "", payload, DomainConfig, **options)

    # ── Rooms ─────────────────────────────────────────────────

    async def list_rooms(
        self, request: ListRoomsRequest | None = None, **options: Unpack[CallOptions]
    ) -> ListRoomsResponse:
        params = request.query_params() if request else ()
        return await self._dispatcher.perform(
            HttpMethod.GET, with_query("rooms", params), None, ListRoomsResponse, **options
        )

    async def create_room(self, request: CreateRoomRequest, **options: Unpack[CallOptions]) -> Room:
        return await self._dispatcher.perform(HttpMethod.POST, "rooms", request, Room, **options)

    async def get_room(self, name: str, **options: Unpack[CallOptions]) -> Room:
        return await self._dispatcher.perform(
            HttpMethod.GET, f"rooms/{path_segment(name)}", None, Room, **options
        )

    async def update_room(
        self, name: str, request: UpdateRoomRequest, **options: Unpack[CallOptions]
    ) -> Room:
        """Daily updates rooms with POST; only the fields set on ``request`` change."""
        return await self._dispatcher.perform(
            HttpMethod.POST, f"rooms/{path_segment(name)}", request, Room, **options
        )

    async def delete_room(self, name: str, **options: Unpack[CallOptions]) -> None:
        # Body is {"deleted": true, "name": ...}; nothing worth returning.
        await self._dispatcher.perform(
            HttpMethod.DELETE, f"rooms/{path_segment(name)}", None, DeletedResponse, **options
        )

    # ── Meeting tokens ────────────────────────────────────────

    async def create_meeting_token(
        self, request: CreateMeetingTokenRequest, **options: Unpack[CallOptions]
    ) -> CreateMeetingTokenResponse:
        return await self._dispatcher.perform(
            HttpMethod.POST, "meeting-tokens", request, CreateMeetingTokenResponse, **options
        )

    async def get_meeting_token(self, token: str, **options: Unpack[CallOptions]) -> MeetingToken:
        """Validate a token and return its properties."""
        return await self._dispatcher.perform(
            HttpMethod.GET, f"meeting-tokens/{path_segment(token)}", None, MeetingToken, **options
        )

    # ── Recordings ────────────────────────────────────────────

    async def list_recordings(
        self, request: ListRecordingsRequest | None = None, **options: Unpack[CallOptions]
    ) -> ListRecordingsResponse:
        params = request.query_params() if request else ()
        return await self._dispatcher.perform(
            HttpMethod.GET, with_query("recordings", params), None, ListRecordingsResponse, **options
        )

    async def start_recording(
        self,
        name: str,
        request: StartRecordingRequest | None = None,
        **options: Unpack[CallOptions],
    ) -> StartRecordingResponse:
        return await self._dispatcher.perform(
            HttpMethod.POST,
            f"rooms/{path_segment(name)}/recordings/start",
            request,
            StartRecordingResponse,
            **options,
        )

    async def stop_recording(self, name: str, **options: Unpack[CallOptions]) -> None:
        await self._dispatcher.perform(
            HttpMethod.POST,
            f"rooms/{path_segment(name)}/recordings/stop",
            None,
            dict[str, Any],
            **options,
        )

    async def delete_recording(self, recording_id: str, **options: Unpack[CallOptions]) -> None:
        await self._dispatcher.perform(
            HttpMethod.DELETE, f"recordings/{path_segment(recording_id)}", None, DeletedResponse, **options
        )

    async def get_recording_link(
        self, recording_id: str, **options: Unpack[CallOptions]
    ) -> RecordingLinkResponse:
        return await self._dispatcher.perform(
            HttpMethod.GET,
            f"recordings/{path_segment(recording_id)}/access-link",
            None,
            RecordingLinkResponse,
            **options,
        )
