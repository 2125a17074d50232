"""Error taxonomy for Daily API calls.

Every failed call raises exactly one ``DailyError`` subclass.  Callers branch on
``category`` (or the subclass) to tell retryable conditions (transport, rate
limited) from permanent ones (bad request, unauthorized) and from contract
drift (parse).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ValidationError


class ErrorCategory(StrEnum):
    BUILD = "build"
    TRANSPORT = "transport"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    INTERNAL = "internal"
    UNEXPECTED = "unexpected"
    PARSE = "parse"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCategory.BUILD: "failed to build request",
    ErrorCategory.TRANSPORT: "request failed",
    ErrorCategory.BAD_REQUEST: "bad request",
    ErrorCategory.UNAUTHORIZED: "unauthorized",
    ErrorCategory.RATE_LIMITED: "too many requests",
    ErrorCategory.INTERNAL: "internal server error",
    ErrorCategory.UNEXPECTED: "unexpected error",
    ErrorCategory.PARSE: "failed to parse response",
}

_STATUS_CATEGORIES = {
    400: ErrorCategory.BAD_REQUEST,
    401: ErrorCategory.UNAUTHORIZED,
    429: ErrorCategory.RATE_LIMITED,
    500: ErrorCategory.INTERNAL,
}


def category_for_status(status_code: int) -> ErrorCategory:
    """Map a non-success HTTP status to its category (total)."""
    return _STATUS_CATEGORIES.get(status_code, ErrorCategory.UNEXPECTED)


class ErrorDetails(BaseModel):
    """Structured error body, e.g. ``{"error": "invalid-request-error", "info": "..."}``."""

    error: str | None = None
    info: str | None = None

    @classmethod
    def parse(cls, raw: bytes) -> ErrorDetails | None:
        """Best-effort parse; anything that is not a JSON object gives ``None``."""
        if not raw:
            return None
        try:
            return cls.model_validate_json(raw)
        except ValidationError:
            return None


class DailyError(Exception):
    """Base for every error raised by the client.

    Attributes:
        category: One member of ``ErrorCategory``.
        status_code: HTTP status observed, ``None`` when no response arrived.
        details: Parsed error body, ``None`` if absent or unparseable.
        raw_details: Raw response body text ("" when there was none).
    """

    category: ErrorCategory = ErrorCategory.UNEXPECTED

    def __init__(
        self,
        reason: str | None = None,
        *,
        category: ErrorCategory | None = None,
        status_code: int | None = None,
        details: ErrorDetails | None = None,
        raw_details: str = "",
    ) -> None:
        if category is not None:
            self.category = category
        self.status_code = status_code
        self.details = details
        self.raw_details = raw_details
        self.message = self.category.message
        if reason:
            self.message = f"{self.message}: {reason}"
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        return self.category in (ErrorCategory.TRANSPORT, ErrorCategory.RATE_LIMITED)

    def __str__(self) -> str:
        if self.status_code is None:
            return f"daily: {self.message}"
        return f"daily: {self.message} ({self.status_code})"


class DailyRequestError(DailyError):
    """Malformed path or unencodable body; nothing was sent."""

    category = ErrorCategory.BUILD


class DailyTransportError(DailyError):
    """Network failure, timeout or cancellation; the call may have reached the server."""

    category = ErrorCategory.TRANSPORT


class DailyApiError(DailyError):
    """The service answered with a non-success status."""

    @classmethod
    def from_response(cls, status_code: int, body: bytes) -> DailyApiError:
        return cls(
            category=category_for_status(status_code),
            status_code=status_code,
            details=ErrorDetails.parse(body),
            raw_details=body.decode("utf-8", errors="replace"),
        )


class DailyParseError(DailyError):
    """Success status, but the body did not match the expected shape."""

    category = ErrorCategory.PARSE
