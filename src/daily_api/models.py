"""Pydantic models matching Daily REST API resources.

Reference: https://docs.daily.co/reference/rest-api
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field

from .optional import DailyModel, OpenEnum, Timestamp


class RoomPrivacy(StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"
    ORG = "org"


class PermissionType(StrEnum):
    VIDEO = "video"
    AUDIO = "audio"
    SCREEN_AUDIO = "screenAudio"
    SCREEN_VIDEO = "screenVideo"


class RecordingType(StrEnum):
    CLOUD = "cloud"
    LOCAL = "local"
    RTP_TRACKS = "rtp-tracks"
    RAW_TRACKS = "raw-tracks"
    OUTPUT_BYTE_STREAM = "output-byte-stream"


class SignalingImpl(StrEnum):
    WS = "ws"


# ── Domain ────────────────────────────────────────────────────


class DomainSettings(DailyModel):
    """Domain options the user can change."""

    redirect_on_meeting_exit: str | None = None
    hide_daily_branding: bool | None = None
    hipaa: bool | None = None
    intercom_auto_record: bool | None = None
    lang: str | None = None


class DomainConfig(DailyModel):
    domain_name: str | None = None
    config: DomainSettings | None = None


# ── Rooms ─────────────────────────────────────────────────────


class RoomConfig(DailyModel):
    not_before: Timestamp | None = Field(default=None, alias="nbf")
    expires_at: Timestamp | None = Field(default=None, alias="exp")
    start_video_off: bool | None = None
    start_audio_off: bool | None = None
    max_participants: int | None = None
    autojoin: bool | None = None
    enable_knocking: bool | None = None
    enable_screenshare: bool | None = None
    enable_chat: bool | None = None
    owner_only_broadcast: bool | None = None
    enable_recording: OpenEnum[RecordingType] | None = None
    eject_at_room_exp: bool | None = None
    eject_after_elapsed: int | None = None  # seconds
    lang: str | None = None
    meeting_join_hook: str | None = None
    signaling_impl: OpenEnum[SignalingImpl] | None = None
    sfu_switchover: int | None = None
    enable_mesh_sfu: bool | None = None
    enable_terse_logging: bool | None = None
    enable_hidden_participants: bool | None = None


class Room(DailyModel):
    id: str | None = None
    name: str | None = None
    api_created: bool | None = None
    privacy: OpenEnum[RoomPrivacy] | None = None
    url: str | None = None
    created_at: Timestamp | None = None
    config: RoomConfig | None = None


# ── Meeting tokens ────────────────────────────────────────────


class Permissions(DailyModel):
    can_send: list[OpenEnum[PermissionType]] | None = Field(default=None, alias="canSend")
    has_presence: bool | None = Field(default=None, alias="hasPresence")


class MeetingToken(DailyModel):
    """Per-participant room access and session configuration."""

    not_before: Timestamp | None = Field(default=None, alias="nbf")
    expires_at: Timestamp | None = Field(default=None, alias="exp")
    room_name: str | None = None
    is_owner: bool | None = None
    user_name: str | None = None
    user_id: str | None = None
    enable_screenshare: bool | None = None
    start_video_off: bool | None = None
    start_audio_off: bool | None = None
    enable_recording: OpenEnum[RecordingType] | None = None
    start_cloud_recording: bool | None = None
    close_tab_on_exit: bool | None = None
    eject_at_room_exp: bool | None = None
    eject_after_elapsed: int | None = None
    lang: str | None = None
    permissions: Permissions | None = None


# ── Recordings ────────────────────────────────────────────────


class Layout(DailyModel):
    preset: str | None = None


class Recording(DailyModel):
    id: str | None = None
    start_ts: Timestamp | None = None
    status: str | None = None
    max_participants: int | None = None
    room_name: str | None = None
    tracks: list[dict[str, Any]] | None = None
    duration: int | None = None  # seconds
    share_token: str | None = None
