"""Classification of HTTP responses into typed API errors."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from http import HTTPStatus

import aiohttp

from yamnet.const import HTTP_TOO_MANY_REQUESTS
from yamnet.exceptions import (
    ApiError,
    ConnectionFailureError,
    ForbiddenError,
    RateLimitExceededError,
    ResponseParseError,
    ServerError,
    UnauthorizedError,
)
from yamnet.models import DecodeFailure, ResponseLike
from yamnet.payload import decode_error_payload
from yamnet.translator import ErrorTranslator

_LOGGER = logging.getLogger(__name__)


def _strip_braces(text: str) -> str:
    """Remove JSON object braces the API leaves in 401 bodies."""
    if "{" in text:
        text = text.replace("{", "").replace("}", "")
    return text


@dataclass(frozen=True, slots=True)
class StatusRule:
    """Resolve a response from its status code alone.

    ``build`` receives the status code and the body text; the body is only
    read when ``reads_body`` is set.
    """

    name: str
    statuses: frozenset[int]
    build: Callable[[int, str], ApiError]
    reads_body: bool = False

    def matches(self, status: int) -> bool:
        """Return True if this rule applies to *status*."""
        return status in self.statuses


# First match wins.
STATUS_RULES: tuple[StatusRule, ...] = (
    # The API returns an HTML page here, nothing to parse.
    StatusRule(
        name="server_error",
        statuses=frozenset({HTTPStatus.INTERNAL_SERVER_ERROR}),
        build=lambda status, _text: ServerError(status),
    ),
    StatusRule(
        name="rate_limit",
        statuses=frozenset({HTTP_TOO_MANY_REQUESTS}),
        build=lambda status, _text: RateLimitExceededError(status),
    ),
    StatusRule(
        name="connection_failure",
        statuses=frozenset(
            {
                HTTPStatus.GATEWAY_TIMEOUT,
                HTTPStatus.SERVICE_UNAVAILABLE,
                HTTPStatus.REQUEST_TIMEOUT,
            }
        ),
        build=lambda status, _text: ConnectionFailureError(status),
    ),
    StatusRule(
        name="unauthorized",
        statuses=frozenset({HTTPStatus.UNAUTHORIZED}),
        build=lambda status, text: UnauthorizedError(status, _strip_braces(text)),
        reads_body=True,
    ),
    StatusRule(
        name="forbidden",
        statuses=frozenset({HTTPStatus.FORBIDDEN}),
        build=lambda status, text: ForbiddenError(status, text),
        reads_body=True,
    ),
)


def match_status_rule(
    status: int, rules: tuple[StatusRule, ...] = STATUS_RULES
) -> StatusRule | None:
    """Return the first rule in *rules* matching *status*, if any."""
    for rule in rules:
        if rule.matches(status):
            return rule
    return None


class ResponseErrorHandler:
    """Turn a completed HTTP exchange into an ApiError, or None.

    Errors are returned, never raised. Status rules are tried in order;
    otherwise the body is decoded and translated::

        error = await ResponseErrorHandler().classify(response)
        if error is not None:
            raise error

    Args:
        translator: Maps valid error payloads to exceptions.
        rules: Ordered status rules; defaults to ``STATUS_RULES``.
    """

    def __init__(
        self,
        translator: ErrorTranslator | None = None,
        rules: tuple[StatusRule, ...] = STATUS_RULES,
    ) -> None:
        self._translator = translator or ErrorTranslator()
        self._rules = rules

    async def classify(self, response: ResponseLike) -> ApiError | None:
        """Classify *response*.

        Returns:
            The error describing the failure, or None if the response is
            not an error worth reporting.
        """
        status = int(response.status)
        rule = match_status_rule(status, self._rules)

        if rule is not None and not rule.reads_body:
            _LOGGER.debug("Status %d resolved by rule %s", status, rule.name)
            return rule.build(status, "")

        try:
            body = await response.read()
        except (asyncio.TimeoutError, aiohttp.ClientError) as exc:
            _LOGGER.debug("Reading body of %d response failed: %s", status, exc)
            return ConnectionFailureError(status, f"Failed to read response body: {exc}")

        body = body or b""
        text = body.decode("utf-8", errors="replace")

        if rule is not None:
            _LOGGER.debug("Status %d resolved by rule %s", status, rule.name)
            return rule.build(status, text)

        if not body:
            _LOGGER.debug("Status %d with empty body, no error", status)
            return None

        decoded = decode_error_payload(body)
        if isinstance(decoded, DecodeFailure):
            _LOGGER.warning(
                "Could not decode error body for status %d: %s", status, decoded.reason
            )
            return ResponseParseError(status, text)
        if decoded is None:
            return None
        if not decoded.is_valid():
            _LOGGER.warning("Error body for status %d has no message or code", status)
            return ResponseParseError(status, text)

        error = self._translator.translate(status, decoded)
        _LOGGER.debug("Status %d translated to %r", status, error)
        return error
