"""Tests for the client-credentials token exchange."""

from __future__ import annotations

import httpx
import pytest

from xibo_tools.core import Failure, Success
from xibo_tools.foundation import BearerAuth, ClientCredentialsAuth, CmsContext, XiboSettings
from xibo_tools.tools.misc import GetCmsTimeTool

from .conftest import CMS_URL, FakeCms, form_of

TOKEN_PATH = "/api/authorize/access_token"


@pytest.fixture
def credentials_ctx(fake: FakeCms) -> CmsContext:
    settings = XiboSettings(_env_file=None, cms_url=CMS_URL, client_id="abc", client_secret="s3cret")
    return CmsContext.from_settings(settings, transport=httpx.MockTransport(fake.handler))


@pytest.mark.asyncio
async def test_token_is_fetched_then_used(credentials_ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", TOKEN_PATH, json={"access_token": "issued-token", "token_type": "Bearer", "expires_in": 3600})
    fake.add("GET", "/api/clock", json={"time": "12:00 UTC"})

    result = await GetCmsTimeTool(credentials_ctx).acall()

    assert isinstance(result, Success)
    token_request, call = fake.calls
    assert token_request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert form_of(token_request) == [
        ("grant_type", "client_credentials"),
        ("client_id", "abc"),
        ("client_secret", "s3cret"),
    ]
    assert call.headers["Authorization"] == "Bearer issued-token"


@pytest.mark.asyncio
async def test_token_is_fetched_per_call(credentials_ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", TOKEN_PATH, json={"access_token": "issued-token"})
    fake.add("GET", "/api/clock", json={"time": "12:00 UTC"})
    tool = GetCmsTimeTool(credentials_ctx)

    await tool.acall()
    await tool.acall()

    assert [r.url.path for r in fake.calls] == [TOKEN_PATH, "/api/clock", TOKEN_PATH, "/api/clock"]


@pytest.mark.asyncio
async def test_rejected_credentials_are_auth_failure(credentials_ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", TOKEN_PATH, status=401, json={"error": "invalid_client"})

    result = await GetCmsTimeTool(credentials_ctx).acall()

    assert isinstance(result, Failure)
    assert result.error is not None and result.error.kind == "auth"
    assert result.error.status_code == 401
    assert "invalid_client" in result.message
    assert [r.url.path for r in fake.calls] == [TOKEN_PATH]


@pytest.mark.asyncio
async def test_token_response_without_access_token(credentials_ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", TOKEN_PATH, json={"token_type": "Bearer"})

    result = await GetCmsTimeTool(credentials_ctx).acall()

    assert isinstance(result, Failure)
    assert result.error is not None and result.error.kind == "auth"
    assert len(fake.calls) == 1


@pytest.mark.asyncio
async def test_bearer_auth_headers() -> None:
    async with httpx.AsyncClient() as client:
        assert await BearerAuth(token="abc").headers(client) == {"Authorization": "Bearer abc"}


def test_secrets_masked_in_json() -> None:
    auth = ClientCredentialsAuth(token_url=f"{CMS_URL}{TOKEN_PATH}", client_id="abc", client_secret="s3cret")

    assert "s3cret" not in auth.model_dump_json()
    assert "0123456789abcdef" not in BearerAuth(token="0123456789abcdef").model_dump_json()
