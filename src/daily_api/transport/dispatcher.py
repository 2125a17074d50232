"""Request dispatch: one typed request in, one authenticated round trip, one typed result out."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from enum import StrEnum
from functools import lru_cache
from typing import Any, Awaitable, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from ..errors import DailyApiError, DailyParseError, DailyRequestError, DailyTransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SUCCESS = 200


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def encode_body(body: Any) -> bytes:
    """JSON-encode a request body, leaving absent (``None``) fields out."""
    try:
        return to_json(body, by_alias=True, exclude_none=True)
    except ValueError as exc:  # PydanticSerializationError, circular references
        raise DailyRequestError(f"failed to encode request data: {exc}") from exc


async def _until_cancelled(call: Awaitable[T], cancel: asyncio.Event) -> T:
    task = asyncio.ensure_future(call)
    waiter = asyncio.ensure_future(cancel.wait())
    try:
        await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        waiter.cancel()
        if not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
    if task.cancelled():
        raise DailyTransportError("request cancelled")
    return task.result()


class Dispatcher:
    """Single chokepoint between the client façade and the HTTP transport.

    Holds only immutable configuration plus the ``httpx.AsyncClient`` wrapping
    the transport, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport,
        *,
        timeout: float,
        user_agent: str,
    ) -> None:
        self._base_url = httpx.URL(base_url)
        self._client = httpx.AsyncClient(
            transport=transport,
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": user_agent},
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    async def close(self) -> None:
        if not self._client.is_closed:
            await self._client.aclose()

    def resolve(self, path: str) -> httpx.URL:
        """Resolve a relative path (and query) against the base URL, RFC 3986 style."""
        try:
            return self._base_url.join(path)
        except httpx.InvalidURL as exc:
            raise DailyRequestError(f"failed to parse request path: {exc}") from exc

    async def perform(
        self,
        method: HttpMethod,
        path: str,
        body: Any = None,
        result_type: type[T] = dict[str, Any],
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> T:
        """Send one request and decode the 200 response into ``result_type``.

        Raises:
            DailyRequestError: bad path or unencodable body; nothing was sent.
            DailyTransportError: connection failure, timeout, undecodable body or ``cancel`` fired.
            DailyApiError: any status other than 200.
            DailyParseError: status 200 but the body does not fit ``result_type``.
        """
        url = self.resolve(path)
        content = None
        headers = {}
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = "application/json"

        extra = {} if timeout is None else {"timeout": httpx.Timeout(timeout)}
        request = self._client.build_request(
            str(method), url, content=content, headers=headers, **extra
        )

        logger.debug("Daily API %s %s", method, url)
        try:
            if cancel is None:
                status, raw = await self._send(request)
            else:
                status, raw = await _until_cancelled(self._send(request), cancel)
        except httpx.RequestError as exc:  # TransportError, DecodingError, TooManyRedirects
            raise DailyTransportError(f"{type(exc).__name__}: {exc}") from exc
        logger.debug("Daily API %s %s -> %d (%d bytes)", method, url, status, len(raw))

        if status != _SUCCESS:
            raise DailyApiError.from_response(status, raw)

        try:
            return _adapter(result_type).validate_json(raw)
        except ValidationError as exc:
            raise DailyParseError(
                str(exc),
                status_code=status,
                raw_details=raw.decode("utf-8", errors="replace"),
            ) from exc

    async def _send(self, request: httpx.Request) -> tuple[int, bytes]:
        response = await self._client.send(request, stream=True)
        try:
            # Drain fully so the connection is released whatever the status.
            raw = await response.aread()
        finally:
            await response.aclose()
        return response.status_code, raw
