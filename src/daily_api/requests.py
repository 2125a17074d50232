"""Request and response envelopes for the Daily REST endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import Field, PrivateAttr

from .models import DomainSettings, Layout, MeetingToken, Recording, Room, RoomConfig, RoomPrivacy
from .optional import DailyModel, OpenEnum, Timestamp


class QueryRequest(DailyModel):
    """Request sent as query parameters, in the order the caller passed them."""

    _order: tuple[str, ...] = PrivateAttr(default=())

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        self._order = tuple(data)

    def query_params(self) -> list[tuple[str, Any]]:
        """Set fields as (key, value) pairs: caller order first, then declaration order."""
        payload = self.to_payload()
        keys = [key for key in self._order if key in payload]
        keys += [key for key in payload if key not in keys]
        return [(key, payload[key]) for key in keys]


class ListRoomsRequest(QueryRequest):
    """Pagination cursors for ``GET /rooms``; sent as query parameters."""

    limit: int | None = None
    ending_before: str | None = None
    starting_after: str | None = None


class ListRoomsResponse(DailyModel):
    total_count: int | None = None
    data: list[Room] | None = None


class CreateRoomRequest(DailyModel):
    name: str | None = None
    privacy: OpenEnum[RoomPrivacy] | None = None
    properties: RoomConfig | None = None


class UpdateRoomRequest(DailyModel):
    privacy: OpenEnum[RoomPrivacy] | None = None
    properties: RoomConfig | None = None


class SetDomainConfigRequest(DailyModel):
    properties: DomainSettings | None = None


class CreateMeetingTokenRequest(DailyModel):
    properties: MeetingToken | None = None


class CreateMeetingTokenResponse(DailyModel):
    token: str | None = None


class ListRecordingsRequest(QueryRequest):
    """Filters for ``GET /recordings``; sent as query parameters."""

    limit: int | None = None
    ending_before: str | None = None
    starting_after: str | None = None
    room_name: str | None = None


class ListRecordingsResponse(DailyModel):
    total_count: int | None = None
    data: list[Recording] | None = None


class StartRecordingRequest(DailyModel):
    height: int | None = None
    width: int | None = None
    layout: Layout | None = None


class StartRecordingResponse(DailyModel):
    sent: bool | None = None
    recording_id: str | None = Field(default=None, alias="recordingId")


class RecordingLinkResponse(DailyModel):
    download_link: str | None = None
    expires: Timestamp | None = None


class DeletedResponse(DailyModel):
    deleted: bool | None = None
    name: str | None = None
    id: str | None = None
