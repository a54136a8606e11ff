"""Exception hierarchy for the yamnet library."""

from __future__ import annotations


class YamNetError(Exception):
    """Base exception for all yamnet errors."""


class TransportError(YamNetError):
    """Raised when a request could not be sent or no response arrived."""


class ApiError(YamNetError):
    """An error outcome of an HTTP exchange with the API.

    Instances are produced by the response classifier and raised by the
    client. Two errors are equal when their type, status, message and code
    are equal.
    """

    def __init__(self, status: int, message: str = "", code: int | None = None) -> None:
        self.status = status
        self.message = message
        self.code = code
        super().__init__(f"API error {status}: {message}")

    def _key(self) -> tuple[type, int, str, int | None]:
        return (type(self), self.status, self.message, self.code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status={self.status!r}, "
            f"message={self.message!r}, code={self.code!r})"
        )


class ServerError(ApiError):
    """The API failed internally; its error page is not machine-readable."""

    def __init__(self, status: int = 500, message: str = "Internal server error") -> None:
        super().__init__(status, message)


class RateLimitExceededError(ApiError):
    """The API rate limit was exceeded; back off before calling again."""

    def __init__(self, status: int = 429, message: str = "Rate limit exceeded") -> None:
        super().__init__(status, message)


class ConnectionFailureError(ApiError):
    """A gateway, availability or timeout failure with no useful payload."""

    def __init__(self, status: int, message: str = "Connection failure") -> None:
        super().__init__(status, message)


class UnauthorizedError(ApiError):
    """Raised for HTTP 401."""


class ForbiddenError(ApiError):
    """Raised for HTTP 403."""


class ResponseParseError(ApiError):
    """The error body could not be deserialized into a valid error payload.

    ``message`` carries the raw response text.
    """


class BadRequestError(ApiError):
    """Raised for HTTP 400."""


class NotFoundError(ApiError):
    """Raised for HTTP 404."""


class ConflictError(ApiError):
    """Raised for HTTP 409."""


class UnprocessableEntityError(ApiError):
    """Raised for HTTP 422."""


class InvalidTokenError(ApiError):
    """The API reported a missing or expired OAuth token."""
