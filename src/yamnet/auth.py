"""Authentication providers for the yamnet library."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class AbstractAuth(Protocol):
    """Protocol for authentication providers."""

    async def get_token(self) -> str:
        """Return the bearer token to send with each request."""
        ...


class TokenAuth:
    """Authentication provider using a pre-existing token or token factory.

    The token is passed through as is; obtaining and refreshing it is left
    to the caller.
    """

    def __init__(self, token: str | Callable[[], Awaitable[str]]) -> None:
        self._token = token

    async def get_token(self) -> str:
        """Return the bearer token to send with each request."""
        if callable(self._token):
            return await self._token()
        return self._token
