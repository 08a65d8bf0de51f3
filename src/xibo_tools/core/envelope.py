"""Uniform success/failure envelope returned by every tool.

Every tool invocation ends in exactly one of:

    {"success": true,  "data": ..., "message": "..."}   # data absent on 204
    {"success": false, "message": "...", "error": {...}, "errorData": ...}

``error`` is a tagged union keyed by ``kind`` so callers can branch on the
failure class (config, auth, transport, http, validation, precondition,
not_found, unexpected) without inspecting message text.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..foundation.errors import ErrorCode, classify_exception, process_error

CMS_URL_MISSING = "CMS URL is not configured."

_JSON_SCALARS = (str, int, float, bool, type(None))


# ─────────────────────────────────────────────────────────────────────────────
# Error Details
# ─────────────────────────────────────────────────────────────────────────────


class _Detail(BaseModel):
    model_config = ConfigDict(frozen=True)


class ConfigError(_Detail):
    kind: Literal["config"] = "config"
    setting: str


class AuthFailure(_Detail):
    kind: Literal["auth"] = "auth"
    name: str
    message: str
    status_code: int | None = None


class TransportError(_Detail):
    kind: Literal["transport"] = "transport"
    name: str
    message: str
    code: ErrorCode = ErrorCode.UNKNOWN


class HttpError(_Detail):
    kind: Literal["http"] = "http"
    status_code: int
    detail: str


class ValidationIssue(_Detail):
    """One schema mismatch: where it is, what was expected, what arrived."""

    loc: str
    message: str
    type: str
    actual: Any = None


class ValidationFailure(_Detail):
    kind: Literal["validation"] = "validation"
    issues: list[ValidationIssue] = Field(default_factory=list)


class PreconditionError(_Detail):
    kind: Literal["precondition"] = "precondition"
    field: str | None = None


class NotFoundError(_Detail):
    kind: Literal["not_found"] = "not_found"
    resource: str


class UnexpectedError(_Detail):
    kind: Literal["unexpected"] = "unexpected"
    name: str
    message: str


ErrorDetail = Annotated[
    Union[
        ConfigError,
        AuthFailure,
        TransportError,
        HttpError,
        ValidationFailure,
        PreconditionError,
        NotFoundError,
        UnexpectedError,
    ],
    Field(discriminator="kind"),
]


def _json_safe(value: Any) -> Any:
    if isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    return repr(value)


def issues_from(exc: ValidationError) -> list[ValidationIssue]:
    """Flatten a pydantic ValidationError into path/expected/actual issues."""
    return [
        ValidationIssue(
            loc=".".join(str(part) for part in err["loc"]) or "<root>",
            message=err["msg"],
            type=err["type"],
            actual=_json_safe(err.get("input")),
        )
        for err in exc.errors(include_url=False)
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Envelopes
# ─────────────────────────────────────────────────────────────────────────────


class Success(BaseModel):
    """Successful call. ``data`` is left unset for 204 responses."""

    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    data: Any = None
    message: str | None = None

    @property
    def has_data(self) -> bool:
        return "data" in self.model_fields_set

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"success": True}
        if self.has_data:
            out["data"] = self.data
        if self.message:
            out["message"] = self.message
        return out


class Failure(BaseModel):
    """Failed call with a readable message and a typed error detail."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: Literal[False] = False
    message: str
    error: ErrorDetail | None = None
    error_data: Any = Field(default=None, alias="errorData")

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"success": False, "message": self.message}
        if self.error is not None:
            out["error"] = self.error.model_dump(mode="json")
        if "error_data" in self.model_fields_set:
            out["errorData"] = _json_safe(self.error_data)
        return out

    # ─── Constructors ───────────────────────────────────────────────────

    @classmethod
    def config_missing(cls, setting: str = "cms_url") -> Failure:
        return cls(message=CMS_URL_MISSING, error=ConfigError(setting=setting))

    @classmethod
    def precondition(cls, message: str, field: str | None = None) -> Failure:
        return cls(message=message, error=PreconditionError(field=field))

    @classmethod
    def not_found(cls, message: str, resource: str) -> Failure:
        return cls(message=message, error=NotFoundError(resource=resource))

    @classmethod
    def invalid_params(cls, exc: ValidationError, operation: str) -> Failure:
        issues = issues_from(exc)
        fields = ", ".join(issue.loc for issue in issues)
        return cls(
            message=f"Invalid parameters for {operation}: {fields}",
            error=ValidationFailure(issues=issues),
        )

    @classmethod
    def validation(cls, exc: ValidationError, operation: str, body: Any) -> Failure:
        """Response arrived but does not match the expected schema."""
        return cls(
            message=f"{operation}: response validation failed",
            error=ValidationFailure(issues=issues_from(exc)),
            error_data=body,
        )

    @classmethod
    def http(cls, status_code: int, detail: str, operation: str, body: Any) -> Failure:
        text = detail or f"HTTP {status_code}"
        return cls(
            message=f"{operation} failed ({status_code}): {text}",
            error=HttpError(status_code=status_code, detail=text),
            error_data=body,
        )

    @classmethod
    def transport(cls, exc: BaseException, operation: str) -> Failure:
        info = process_error(exc)
        return cls(
            message=f"{operation} request failed: {info.message}",
            error=TransportError(name=info.name, message=info.message, code=classify_exception(exc)),
        )

    @classmethod
    def auth(cls, exc: BaseException, status_code: int | None = None) -> Failure:
        info = process_error(exc)
        return cls(
            message=f"Authentication failed: {info.message}",
            error=AuthFailure(name=info.name, message=info.message, status_code=status_code),
        )

    @classmethod
    def unexpected(cls, exc: object, operation: str) -> Failure:
        info = process_error(exc)
        return cls(
            message=f"Unexpected error in {operation}: {info.message}",
            error=UnexpectedError(name=info.name, message=info.message),
        )


Envelope = Union[Success, Failure]


def to_dict(envelope: Envelope) -> dict[str, Any]:
    """JSON-ready mapping for either envelope variant."""
    return envelope.to_dict()
