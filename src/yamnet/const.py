"""Constants for the yamnet library."""

from __future__ import annotations

from enum import IntEnum

API_BASE: str = "https://www.yammer.com/api/v1"

# Seconds for the whole request, including reading the body.
DEFAULT_TIMEOUT: float = 30.0

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": "yamnet",
}

USERS_ENDPOINT: str = "/users"
GROUP_MEMBERSHIPS_ENDPOINT: str = "/group_memberships"

# Service-specific: the API answers throttled calls with 429.
# Reference: https://developer.yammer.com/restapi/#rest-ratelimits
HTTP_TOO_MANY_REQUESTS: int = 429


class ErrorCode(IntEnum):
    """Error codes reported in the ``code`` field of an error payload."""

    TOKEN_NOT_FOUND = 16
    TOKEN_EXPIRED = 17
