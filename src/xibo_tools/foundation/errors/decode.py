"""Normalisation of upstream error bodies and caught exceptions.

The CMS reports errors in a few shapes: ``{"message": "..."}`` (often
percent-encoded), ``{"error": {"message": "..."}}``, ``{"error": "..."}``, or
plain text from a proxy. ``decode_error_message`` turns any of them into one
readable line; ``process_error`` does the same for anything that was raised.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import unquote

import orjson
from pydantic import BaseModel, ConfigDict


class ErrorInfo(BaseModel):
    """Name and message of a caught exception (or non-exception value)."""

    model_config = ConfigDict(frozen=True)

    name: str
    message: str


def parse_body(raw: str | bytes) -> Any:
    """Parse a JSON body, returning the raw text when it is not JSON."""
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    if not text.strip():
        return text
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError:
        return text


def _message_from(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    if isinstance(message, str) and message:
        return unquote(message)
    error = payload.get("error")
    if isinstance(error, dict):
        nested = error.get("message")
        if isinstance(nested, str) and nested:
            return unquote(nested)
    if isinstance(error, str) and error:
        return unquote(error)
    return None


def decode_error_message(raw: str | bytes) -> str:
    """Human-readable message for an error response body.

    Example:
        >>> decode_error_message('{"message": "Name%20already%20in%20use"}')
        'Name already in use'
        >>> decode_error_message('{"error": {"message": "Bad token"}}')
        'Bad token'
        >>> decode_error_message("502 Bad Gateway")
        '502 Bad Gateway'
    """
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    payload = parse_body(text)
    return _message_from(payload) or text.strip()


def process_error(exc: object) -> ErrorInfo:
    """Name/message pair for anything that was raised or rejected."""
    if isinstance(exc, BaseException):
        return ErrorInfo(name=type(exc).__name__, message=str(exc) or repr(exc))
    if isinstance(exc, str):
        return ErrorInfo(name="UnknownError", message=exc)
    try:
        message = orjson.dumps(exc).decode()
    except TypeError:
        message = repr(exc)
    return ErrorInfo(name="UnknownError", message=message)
