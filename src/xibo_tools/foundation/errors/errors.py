"""Error codes and exception classification for CMS calls.

Codes are machine-readable tags attached to transport failures so an agent
can tell a timeout from a rejected credential without parsing prose.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

import httpx


class ErrorCode(StrEnum):
    """Standard error codes for tool failures."""
    AUTH_FAILED = "AUTH_FAILED"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    INVALID_PARAMS = "INVALID_PARAMS"
    PARSE_ERROR = "PARSE_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    UNKNOWN = "UNKNOWN"


# Checked in insertion order; first substring hit wins
_PATTERN_CODES: dict[str, ErrorCode] = {
    "timeout": ErrorCode.TIMEOUT,
    "connect": ErrorCode.NETWORK_ERROR,
    "network": ErrorCode.NETWORK_ERROR,
    "auth": ErrorCode.AUTH_FAILED,
    "token": ErrorCode.AUTH_FAILED,
    "permission": ErrorCode.PERMISSION_DENIED,
    "forbidden": ErrorCode.PERMISSION_DENIED,
    "json": ErrorCode.PARSE_ERROR,
    "decode": ErrorCode.PARSE_ERROR,
    "validation": ErrorCode.INVALID_PARAMS,
    "notfound": ErrorCode.NOT_FOUND,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES)


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.EXTERNAL_SERVICE_ERROR


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map exception to error code, by type for known httpx errors, else by name/message."""
    if isinstance(exc, AuthError):
        return ErrorCode.AUTH_FAILED
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.NetworkError):
        return ErrorCode.NETWORK_ERROR
    return _classify_cached(f"{type(exc).__name__} {exc}")


class AuthError(Exception):
    """Raised when an access token cannot be obtained from the CMS."""

    __slots__ = ("status_code", "body")

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)
