"""Generic request dispatch: one HTTP call in, one envelope out.

Steps, each short-circuiting into a ``Failure``:

    1. acquire auth headers           -> auth / transport failure
    2. send exactly one request       -> transport failure
    3. non-2xx status                 -> http failure (decoded message, raw body)
    4. 204 / empty body               -> success without data
    5. parse + strict schema check    -> validation failure (issues, raw body)
    6. success with the validated payload in wire shape

The CMS-URL check happens before this module is reached (see ``CmsTool``),
so a missing URL never opens a client.
"""

from __future__ import annotations

from typing import Any

import httpx
import orjson
from pydantic import TypeAdapter, ValidationError

from ..core.envelope import Envelope, Failure, Success, ValidationFailure, ValidationIssue
from ..foundation.context import CmsContext
from ..foundation.errors import AuthError, Err, Ok, Result, decode_error_message, parse_body
from ..observability import BoundLogger, get_logger
from .request import RequestDescriptor

_log = get_logger("xibo_tools.dispatch")


async def dispatch(
    ctx: CmsContext,
    request: RequestDescriptor,
    *,
    schema: TypeAdapter[Any] | None,
    operation: str,
    authenticated: bool = True,
    log: BoundLogger | None = None,
) -> Envelope:
    """Send ``request`` and interpret the response against ``schema``."""
    log = (log or _log).bind(operation=operation, method=request.method)
    async with ctx.client() as client:
        try:
            auth_headers = await ctx.auth.headers(client) if authenticated else {}
        except AuthError as e:
            log.error("auth failed", status=e.status_code, error=str(e))
            return Failure.auth(e, e.status_code)
        except httpx.HTTPError as e:
            log.error("auth request failed", error=type(e).__name__)
            return Failure.transport(e, operation)

        kwargs = request.to_httpx()
        kwargs["headers"] = {**kwargs.get("headers", {}), **auth_headers}
        log.info("request", url=request.url)
        try:
            response = await client.request(**kwargs)
        except httpx.HTTPError as e:
            log.error("request failed", error=type(e).__name__, detail=str(e))
            return Failure.transport(e, operation)

    return interpret_response(response.status_code, response.content, schema=schema, operation=operation, log=log)


def interpret_response(
    status_code: int,
    content: bytes,
    *,
    schema: TypeAdapter[Any] | None,
    operation: str,
    log: BoundLogger | None = None,
) -> Envelope:
    """Map a status code and body onto an envelope."""
    log = log or _log.bind(operation=operation)

    if not 200 <= status_code < 300:
        detail = decode_error_message(content)
        log.error("http error", status=status_code, detail=detail)
        return Failure.http(status_code, detail, operation, parse_body(content))

    if status_code == 204 or (not content.strip() and schema is None):
        log.info("response", status=status_code, empty=True)
        return Success()

    result = _validate(content, schema, operation)
    if result.is_err():
        log.warning("response rejected", status=status_code, issues=len(_issues(result.unwrap_err())))
    else:
        log.info("response", status=status_code)
    return result.match(ok=lambda data: Success(data=data), err=lambda failure: failure)


def _validate(content: bytes, schema: TypeAdapter[Any] | None, operation: str) -> Result[Any, Failure]:
    if schema is None:
        return _parse(content, operation)
    return _check(content, schema, operation).map(
        lambda value: schema.dump_python(value, mode="json", by_alias=True, exclude_unset=True)
    )


def _check(content: bytes, schema: TypeAdapter[Any], operation: str) -> Result[Any, Failure]:
    try:
        return Ok(schema.validate_json(content, strict=True))
    except ValidationError as e:
        return Err(Failure.validation(e, operation, parse_body(content)))


def _parse(content: bytes, operation: str) -> Result[Any, Failure]:
    try:
        return Ok(orjson.loads(content))
    except orjson.JSONDecodeError as e:
        issue = ValidationIssue(loc="<root>", message=f"Invalid JSON: {e}", type="json_invalid")
        return Err(Failure(
            message=f"{operation}: response is not valid JSON",
            error=ValidationFailure(issues=[issue]),
            error_data=content.decode("utf-8", errors="replace"),
        ))


def _issues(failure: Failure) -> list[ValidationIssue]:
    return failure.error.issues if isinstance(failure.error, ValidationFailure) else []
