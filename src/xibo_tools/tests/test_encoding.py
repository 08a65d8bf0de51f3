"""Tests for request encoding: wire pairs, path templates, body encodings."""

from __future__ import annotations

import base64

import httpx
import orjson
import pytest

from xibo_tools.core import Failure, Success
from xibo_tools.foundation import CmsContext
from xibo_tools.http import Encoding, Endpoint, build_request, encode_pairs, substitute_path
from xibo_tools.tools.font import UploadFontTool
from xibo_tools.tools.notification import AddNotificationTool

from .conftest import CMS_URL, FakeCms, form_of


def test_encode_pairs_flattens_lists_in_order() -> None:
    pairs = encode_pairs({"subject": "Hi", "displayGroupIds": [3, 1, 2], "userGroupIds": []})

    assert pairs == (
        ("subject", "Hi"),
        ("displayGroupIds[]", "3"),
        ("displayGroupIds[]", "1"),
        ("displayGroupIds[]", "2"),
    )


def test_encode_pairs_booleans_and_none() -> None:
    pairs = encode_pairs({"isInterrupt": True, "enabled": False, "body": None, "width": 1920})

    assert pairs == (("isInterrupt", "1"), ("enabled", "0"), ("width", "1920"))


def test_encode_pairs_serializes_mappings_as_json() -> None:
    (pair,) = encode_pairs({"filter": {"a": 1}})

    assert pair[0] == "filter"
    assert orjson.loads(pair[1]) == {"a": 1}


def test_substitute_path_quotes_values() -> None:
    assert substitute_path("/api/resolution/{resolutionId}", {"resolutionId": 7}) == "/api/resolution/7"
    assert substitute_path("/api/x/{name}", {"name": "a/b c"}) == "/api/x/a%2Fb%20c"


def test_substitute_path_missing_value_raises() -> None:
    with pytest.raises(KeyError):
        substitute_path("/api/dataset/{dataSetId}/rss/{rssId}", {"dataSetId": 1})


def test_default_encoding_by_method() -> None:
    assert Endpoint("GET", "/api/tag").body_encoding is Encoding.QUERY
    assert Endpoint("DELETE", "/api/tag/{tagId}").body_encoding is Encoding.QUERY
    assert Endpoint("POST", "/api/tag").body_encoding is Encoding.FORM
    assert Endpoint("PUT", "/api/tag/{tagId}").body_encoding is Encoding.FORM
    assert Endpoint("POST", "/api/x", Encoding.JSON).body_encoding is Encoding.JSON


def test_build_request_consumes_path_fields() -> None:
    endpoint = Endpoint("PUT", "/api/resolution/{resolutionId}")

    request = build_request(endpoint, CMS_URL, {"resolutionId": 4, "resolution": "HD", "width": 1280})

    assert request.url == f"{CMS_URL}/api/resolution/4"
    assert request.form == (("resolution", "HD"), ("width", "1280"))
    assert request.query == ()


def test_build_request_json_body_override() -> None:
    endpoint = Endpoint("POST", "/api/dataset/importjson/{dataSetId}", Encoding.JSON)

    request = build_request(endpoint, CMS_URL, {"dataSetId": 2, "ignored": 1}, json_body={"rows": []})

    assert request.json == {"rows": []}
    kwargs = request.to_httpx()
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert orjson.loads(kwargs["content"]) == {"rows": []}


@pytest.mark.asyncio
async def test_notification_group_ids_are_repeated_form_keys(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", "/api/notification", json={
        "notificationId": 5, "subject": "Maintenance", "body": "Tonight",
        "isInterrupt": 1, "isSystem": 0, "userId": 1,
    })

    result = await AddNotificationTool(ctx).acall(
        subject="Maintenance", body="Tonight", is_interrupt=True, display_group_ids=[4, 9], user_group_ids=[2],
    )

    assert isinstance(result, Success)
    assert fake.last.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert form_of(fake.last) == [
        ("subject", "Maintenance"),
        ("body", "Tonight"),
        ("isInterrupt", "1"),
        ("displayGroupIds[]", "4"),
        ("displayGroupIds[]", "9"),
        ("userGroupIds[]", "2"),
    ]


@pytest.mark.asyncio
async def test_font_upload_is_multipart(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", "/api/fonts", json={"files": [{"name": "Inter.ttf", "mediaId": 12}]})
    content = base64.b64encode(b"\x00\x01font-bytes").decode()

    result = await UploadFontTool(ctx).acall(file_name="Inter.ttf", file_content=content)

    assert isinstance(result, Success)
    assert fake.last.headers["Content-Type"].startswith("multipart/form-data")
    body = fake.last.content
    assert b'name="files"; filename="Inter.ttf"' in body
    assert b"font-bytes" in body
    assert b'name="name"' in body


@pytest.mark.asyncio
async def test_upload_without_content_is_rejected_locally(ctx: CmsContext, fake: FakeCms) -> None:
    result = await UploadFontTool(ctx).acall(file_name="Inter.ttf")

    assert isinstance(result, Failure)
    assert result.error is not None and result.error.kind == "precondition"
    assert fake.calls == []


@pytest.mark.asyncio
async def test_upload_reads_from_upload_dir(ctx: CmsContext, fake: FakeCms, tmp_path) -> None:
    (tmp_path / "Inter.ttf").write_bytes(b"on-disk-font")
    settings = ctx.settings.model_copy(update={"paths": ctx.settings.paths.model_copy(update={"upload_dir": tmp_path})})
    fake.add("POST", "/api/fonts", json={"files": [{"name": "Inter.ttf"}]})

    tool = UploadFontTool(CmsContext(settings, auth=ctx.auth, transport=httpx.MockTransport(fake.handler)))
    result = await tool.acall(file_name="Inter.ttf", file_path="Inter.ttf")

    assert isinstance(result, Success)
    assert b"on-disk-font" in fake.last.content


@pytest.mark.asyncio
@pytest.mark.parametrize("escape", ["absolute", "../outside.txt"])
async def test_upload_path_cannot_leave_upload_dir(ctx: CmsContext, fake: FakeCms, tmp_path, escape: str) -> None:
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()
    outside = tmp_path / "outside.txt"
    outside.write_bytes(b"TOP-SECRET")
    settings = ctx.settings.model_copy(update={"paths": ctx.settings.paths.model_copy(update={"upload_dir": upload_dir})})
    file_path = str(outside) if escape == "absolute" else escape

    tool = UploadFontTool(CmsContext(settings, auth=ctx.auth, transport=httpx.MockTransport(fake.handler)))
    result = await tool.acall(file_name="x.ttf", file_path=file_path)

    assert isinstance(result, Failure)
    assert result.error is not None and result.error.kind == "precondition"
    assert result.error.field == "filePath"
    assert result.message == "filePath must stay inside the upload directory"
    assert fake.calls == []
