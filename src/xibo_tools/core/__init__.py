"""Tool base class and the success/failure envelope."""

from .base import BaseTool, EmptyParams, ToolMetadata
from .envelope import (
    CMS_URL_MISSING,
    AuthFailure,
    ConfigError,
    Envelope,
    ErrorDetail,
    Failure,
    HttpError,
    NotFoundError,
    PreconditionError,
    Success,
    TransportError,
    UnexpectedError,
    ValidationFailure,
    ValidationIssue,
    to_dict,
)

__all__ = [
    "CMS_URL_MISSING",
    "AuthFailure",
    "BaseTool",
    "ConfigError",
    "EmptyParams",
    "Envelope",
    "ErrorDetail",
    "Failure",
    "HttpError",
    "NotFoundError",
    "PreconditionError",
    "Success",
    "ToolMetadata",
    "TransportError",
    "UnexpectedError",
    "ValidationFailure",
    "ValidationIssue",
    "to_dict",
]
