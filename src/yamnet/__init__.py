"""Async Python client for the Yammer REST API."""

from __future__ import annotations

__version__ = "0.1.0"

from yamnet.auth import AbstractAuth, TokenAuth
from yamnet.client import YamNetClient
from yamnet.exceptions import (
    ApiError,
    BadRequestError,
    ConflictError,
    ConnectionFailureError,
    ForbiddenError,
    InvalidTokenError,
    NotFoundError,
    RateLimitExceededError,
    ResponseParseError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
    YamNetError,
)
from yamnet.models import (
    DecodeFailure,
    ErrorPayload,
    HttpResponse,
    ResponseLike,
    User,
    UserSort,
)
from yamnet.payload import decode_error_payload
from yamnet.response_handler import (
    STATUS_RULES,
    ResponseErrorHandler,
    StatusRule,
    match_status_rule,
)
from yamnet.translator import ErrorTranslator

__all__ = [
    "__version__",
    # Auth
    "AbstractAuth",
    "TokenAuth",
    # Client
    "YamNetClient",
    # Error handling
    "ErrorTranslator",
    "ResponseErrorHandler",
    "STATUS_RULES",
    "StatusRule",
    "decode_error_payload",
    "match_status_rule",
    # Exceptions
    "ApiError",
    "BadRequestError",
    "ConflictError",
    "ConnectionFailureError",
    "ForbiddenError",
    "InvalidTokenError",
    "NotFoundError",
    "RateLimitExceededError",
    "ResponseParseError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "YamNetError",
    # Dataclasses
    "DecodeFailure",
    "ErrorPayload",
    "HttpResponse",
    "User",
    # Enums
    "UserSort",
    # Protocols
    "ResponseLike",
]
