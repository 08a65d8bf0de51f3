"""Tests for error decoding, exception classification and the envelope."""

from __future__ import annotations

import httpx
from pydantic import BaseModel, ValidationError

from xibo_tools.core import Failure, Success, to_dict
from xibo_tools.foundation.errors import (
    AuthError,
    ErrorCode,
    classify_exception,
    decode_error_message,
    parse_body,
    process_error,
)


# ═════════════════════════════════════════════════════════════════════════════
# decode_error_message
# ═════════════════════════════════════════════════════════════════════════════


def test_decode_percent_encoded_message() -> None:
    assert decode_error_message(b'{"message": "Name%20already%20in%20use"}') == "Name already in use"


def test_decode_nested_error_message() -> None:
    assert decode_error_message('{"error": {"message": "Bad token", "code": 401}}') == "Bad token"


def test_decode_error_string() -> None:
    assert decode_error_message('{"error": "invalid_client"}') == "invalid_client"


def test_decode_plain_text() -> None:
    assert decode_error_message("  502 Bad Gateway\n") == "502 Bad Gateway"


def test_decode_json_without_message_returns_text() -> None:
    assert decode_error_message('{"status": 500}') == '{"status": 500}'


def test_parse_body() -> None:
    assert parse_body(b'{"a": [1, 2]}') == {"a": [1, 2]}
    assert parse_body(b"not json") == "not json"
    assert parse_body(b"") == ""


# ═════════════════════════════════════════════════════════════════════════════
# process_error / classify_exception
# ═════════════════════════════════════════════════════════════════════════════


def test_process_error_exception() -> None:
    info = process_error(ValueError("bad value"))

    assert info.name == "ValueError"
    assert info.message == "bad value"


def test_process_error_exception_without_message_uses_repr() -> None:
    assert process_error(RuntimeError()).message == "RuntimeError()"


def test_process_error_string() -> None:
    info = process_error("boom")

    assert info.name == "UnknownError"
    assert info.message == "boom"


def test_process_error_json_value() -> None:
    assert process_error({"code": 3}).message == '{"code":3}'


def test_process_error_unserializable_value() -> None:
    marker = object()

    assert process_error(marker).message == repr(marker)


def test_classify_exception() -> None:
    request = httpx.Request("GET", "https://cms.test")

    assert classify_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCode.TIMEOUT
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.NETWORK_ERROR
    assert classify_exception(AuthError("nope", status_code=401)) is ErrorCode.AUTH_FAILED
    assert classify_exception(PermissionError("permission denied")) is ErrorCode.PERMISSION_DENIED
    assert classify_exception(ValueError("bad json payload")) is ErrorCode.PARSE_ERROR
    assert classify_exception(ValueError("validation failed")) is ErrorCode.INVALID_PARAMS
    assert classify_exception(FileNotFoundError("missing")) is ErrorCode.NOT_FOUND
    assert classify_exception(RuntimeError("boom")) is ErrorCode.EXTERNAL_SERVICE_ERROR


# ═════════════════════════════════════════════════════════════════════════════
# Envelope
# ═════════════════════════════════════════════════════════════════════════════


def test_success_to_dict() -> None:
    assert Success(data=[1], message="ok").to_dict() == {"success": True, "data": [1], "message": "ok"}
    assert Success(data=None).to_dict() == {"success": True, "data": None}
    assert Success().to_dict() == {"success": True}


def test_failure_to_dict() -> None:
    failure = Failure.http(404, "Not found", "get_tags", {"message": "Not found"})

    assert to_dict(failure) == {
        "success": False,
        "message": "get_tags failed (404): Not found",
        "error": {"kind": "http", "status_code": 404, "detail": "Not found"},
        "errorData": {"message": "Not found"},
    }


def test_failure_without_error_data_omits_key() -> None:
    assert "errorData" not in Failure.precondition("rssId is required", field="rssId").to_dict()


def test_invalid_params_lists_fields() -> None:
    class Params(BaseModel):
        width: int
        height: int

    try:
        Params.model_validate({"width": "wide"})
    except ValidationError as e:
        failure = Failure.invalid_params(e, "add_resolution")

    assert failure.message == "Invalid parameters for add_resolution: width, height"
    assert [issue.type for issue in failure.error.issues] == ["int_parsing", "missing"]


def test_unexpected_failure() -> None:
    failure = Failure.unexpected(KeyError("columns"), "get_datasets")

    assert failure.error is not None and failure.error.kind == "unexpected"
    assert failure.error.name == "KeyError"
    assert failure.message.startswith("Unexpected error in get_datasets")
