"""Transport decorator that attaches a static bearer credential."""

from __future__ import annotations

import httpx


class BearerAuthTransport(httpx.AsyncBaseTransport):
    """Wraps any async transport and sets ``Authorization: Bearer <token>``.

    Everything else about the request, the response and raised errors is the
    wrapped transport's; the credential never changes for the wrapper's lifetime.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport, token: str) -> None:
        self._transport = transport
        self._authorization = f"Bearer {token}"

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        request.headers["Authorization"] = self._authorization
        return await self._transport.handle_async_request(request)

    async def aclose(self) -> None:
        await self._transport.aclose()
