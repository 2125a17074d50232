"""Transport layer — bearer auth wrapper and request dispatcher."""

from .auth import BearerAuthTransport
from .dispatcher import Dispatcher, HttpMethod

__all__ = [
    "BearerAuthTransport",
    "Dispatcher",
    "HttpMethod",
]
