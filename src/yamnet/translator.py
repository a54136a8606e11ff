"""Translation of API error payloads into typed exceptions."""

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus

from yamnet.const import ErrorCode
from yamnet.exceptions import (
    ApiError,
    BadRequestError,
    ConflictError,
    InvalidTokenError,
    NotFoundError,
    UnprocessableEntityError,
)
from yamnet.models import ErrorPayload

ERROR_CODE_EXCEPTIONS: Mapping[int, type[ApiError]] = {
    ErrorCode.TOKEN_NOT_FOUND: InvalidTokenError,
    ErrorCode.TOKEN_EXPIRED: InvalidTokenError,
}

STATUS_EXCEPTIONS: Mapping[int, type[ApiError]] = {
    HTTPStatus.BAD_REQUEST: BadRequestError,
    HTTPStatus.NOT_FOUND: NotFoundError,
    HTTPStatus.CONFLICT: ConflictError,
    HTTPStatus.UNPROCESSABLE_ENTITY: UnprocessableEntityError,
}


class ErrorTranslator:
    """Map a status code and a valid ErrorPayload to an ApiError.

    The service error code wins over the status code; anything unknown to
    both tables becomes a plain ApiError.

    Args:
        code_exceptions: Error code to exception class table.
        status_exceptions: Status code to exception class table.
    """

    def __init__(
        self,
        code_exceptions: Mapping[int, type[ApiError]] | None = None,
        status_exceptions: Mapping[int, type[ApiError]] | None = None,
    ) -> None:
        self._code_exceptions = dict(
            ERROR_CODE_EXCEPTIONS if code_exceptions is None else code_exceptions
        )
        self._status_exceptions = dict(
            STATUS_EXCEPTIONS if status_exceptions is None else status_exceptions
        )

    def translate(self, status: int, payload: ErrorPayload) -> ApiError:
        """Return the exception for *status* and *payload*."""
        exc_type: type[ApiError] = ApiError
        if payload.code is not None and payload.code in self._code_exceptions:
            exc_type = self._code_exceptions[payload.code]
        elif status in self._status_exceptions:
            exc_type = self._status_exceptions[status]
        return exc_type(status, payload.message or "", payload.code)
