"""Data models for the yamnet library."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

# ---------------------------------------------------------------------------
# HTTP exchange
# ---------------------------------------------------------------------------


class ResponseLike(Protocol):
    """A completed HTTP exchange whose body can be read asynchronously.

    ``aiohttp.ClientResponse`` satisfies this protocol.
    """

    status: int

    async def read(self) -> bytes:
        """Return the full response body."""
        ...


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Immutable snapshot of a completed HTTP exchange."""

    status: int
    body: bytes = b""

    async def read(self) -> bytes:
        """Return the captured body."""
        return self.body


# ---------------------------------------------------------------------------
# Error payloads
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ErrorPayload:
    """An error object as reported by the API.

    The service wraps it as ``{"response": {"message": ..., "code": ...,
    "stat": "fail"}}``.
    """

    message: str | None = None
    code: int | None = None
    stat: str | None = None

    def is_valid(self) -> bool:
        """Return True if the payload carries a message or an error code."""
        return bool(self.message) or self.code is not None


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """Result of a body that could not be decoded into an ErrorPayload."""

    reason: str


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


class UserSort(Enum):
    """Sort order for user listings."""

    MESSAGES = "messages"
    FOLLOWERS = "followers"


@dataclass(frozen=True, slots=True)
class User:
    """A user of the network."""

    user_id: int
    name: str
    full_name: str
    email: str | None = None
    job_title: str | None = None
    state: str = "active"
    web_url: str | None = None
