"""Decoding of error bodies returned by the API."""

from __future__ import annotations

import json
import logging
from typing import Any

from yamnet.models import DecodeFailure, ErrorPayload

_LOGGER = logging.getLogger(__name__)


def _coerce_code(value: Any) -> int | None:
    """Return *value* as an int error code, or None if it is not integral."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _coerce_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def decode_error_payload(body: bytes) -> ErrorPayload | DecodeFailure | None:
    """Decode a raw error body into an ErrorPayload.

    Never raises. Returns None for a JSON ``null`` document and a
    DecodeFailure when the body is not UTF-8 JSON or is neither an object
    nor ``null``.
    """
    try:
        data: Any = json.loads(body.decode("utf-8"))
    except UnicodeDecodeError as exc:
        return DecodeFailure(f"Body is not valid UTF-8: {exc}")
    except json.JSONDecodeError as exc:
        return DecodeFailure(f"Body is not valid JSON: {exc.msg}")
    except (ValueError, RecursionError) as exc:
        return DecodeFailure(f"Body is not valid JSON: {type(exc).__name__}")

    if data is None:
        return None
    if not isinstance(data, dict):
        return DecodeFailure(f"Expected a JSON object, got {type(data).__name__}")

    inner = data.get("response")
    fields: dict[str, Any] = inner if isinstance(inner, dict) else data

    payload = ErrorPayload(
        message=_coerce_str(fields.get("message")),
        code=_coerce_code(fields.get("code")),
        stat=_coerce_str(fields.get("stat")),
    )
    _LOGGER.debug("Decoded error payload: %s", payload)
    return payload
