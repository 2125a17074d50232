"""Optional-value model shared by every Daily resource and request type.

A field is either absent (``None``) or present with a value.  Absent fields are
left out of the encoded object entirely, so a request can say "leave this
unchanged" (absent) as well as "set this to zero" (``0``, ``False``, ``""``).
Decoding mirrors that: a key missing from the payload stays ``None``.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Annotated, Any, TypeVar, Union

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

E = TypeVar("E")


def _from_epoch(value: Any) -> Any:
    # Epoch seconds taken literally, whatever the magnitude.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, timezone.utc)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"timestamp out of range: {value}") from exc
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def timestamp(value: datetime) -> int:
    """Whole seconds since the Unix epoch; naive datetimes are taken as UTC."""
    return math.floor(_as_utc(value).timestamp())


# In memory a tz-aware datetime, on the wire integer epoch seconds.
# Decoding also accepts ISO-8601 strings (rooms report created_at that way).
Timestamp = Annotated[
    datetime,
    BeforeValidator(_from_epoch),
    AfterValidator(_as_utc),
    PlainSerializer(timestamp, return_type=int),
]

# Enum-typed field that lets unknown tokens through as plain strings.
OpenEnum = Annotated[Union[E, str], Field(union_mode="left_to_right")]


class DailyModel(BaseModel):
    """Base record: every field optional, absent fields never serialized."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def is_set(model: BaseModel, field: str) -> bool:
    """True when ``field`` carries a value (including a zero value)."""
    return getattr(model, field) is not None
