"""Typed async client for the Daily.co REST API."""

from .client import DailyClient
from .config import Settings, __version__
from .errors import (
    DailyApiError,
    DailyError,
    DailyParseError,
    DailyRequestError,
    DailyTransportError,
    ErrorCategory,
    ErrorDetails,
)
from .models import (
    DomainConfig,
    DomainSettings,
    Layout,
    MeetingToken,
    PermissionType,
    Permissions,
    RecordingType,
    Recording,
    Room,
    RoomConfig,
    RoomPrivacy,
    SignalingImpl,
)
from .optional import is_set, timestamp
from .requests import (
    CreateMeetingTokenRequest,
    CreateMeetingTokenResponse,
    CreateRoomRequest,
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

__all__ = [
    "__version__",
    "DailyClient",
    "Settings",
    # Errors
    "DailyError",
    "DailyApiError",
    "DailyParseError",
    "DailyRequestError",
    "DailyTransportError",
    "ErrorCategory",
    "ErrorDetails",
    # Resources
    "DomainConfig",
    "DomainSettings",
    "Layout",
    "MeetingToken",
    "PermissionType",
    "Permissions",
    "Recording",
    "RecordingType",
    "Room",
    "RoomConfig",
    "RoomPrivacy",
    "SignalingImpl",
    # Requests / responses
    "CreateMeetingTokenRequest",
    "CreateMeetingTokenResponse",
    "CreateRoomRequest",
    "ListRecordingsRequest",
    "ListRecordingsResponse",
    "ListRoomsRequest",
    "ListRoomsResponse",
    "RecordingLinkResponse",
    "SetDomainConfigRequest",
    "StartRecordingRequest",
    "StartRecordingResponse",
    "UpdateRoomRequest",
    # Helpers
    "is_set",
    "timestamp",
]
