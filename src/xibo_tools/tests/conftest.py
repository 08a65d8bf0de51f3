"""Shared fixtures: an in-process fake CMS that records every request."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import httpx
import orjson
import pytest

from xibo_tools.foundation import BearerAuth, CmsContext, XiboSettings, clear_settings_cache
from xibo_tools.observability import CollectingRenderer, configure_logging, set_renderer

CMS_URL = "https://cms.test"


class FakeCms:
    """Routes keyed by (method, path); unknown routes answer 404.

    Example:
        >>> fake.add("GET", "/api/about", json={"version": "4.0.0"})
        >>> fake.calls  # every request the tools sent, in order
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response | Exception] = {}
        self.calls: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: Any = None,
        content: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if json is not None:
            body = orjson.dumps(json)
            headers = {"Content-Type": "application/json", **(headers or {})}
        else:
            body = content.encode() if isinstance(content, str) else (content or b"")
        self.routes[(method, path)] = httpx.Response(status, content=body, headers=headers)

    def fail(self, method: str, path: str, exc: Exception) -> None:
        self.routes[(method, path)] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get((request.method, request.url.path))
        if isinstance(route, Exception):
            raise route
        if route is None:
            return httpx.Response(404, json={"message": f"No route for {request.method} {request.url.path}"})
        return httpx.Response(route.status_code, content=route.content, headers=route.headers)

    @property
    def last(self) -> httpx.Request:
        return self.calls[-1]


def form_of(request: httpx.Request) -> list[tuple[str, str]]:
    """Decoded urlencoded body pairs, order preserved."""
    return httpx.QueryParams(request.content.decode()).multi_items()


@pytest.fixture(autouse=True)
def collected_logs() -> Iterator[CollectingRenderer]:
    renderer = CollectingRenderer()
    configure_logging(format="none", level="INFO")
    set_renderer(renderer)
    clear_settings_cache()
    yield renderer
    configure_logging(format="none", level="INFO")
    set_renderer(None)
    clear_settings_cache()


@pytest.fixture
def settings() -> XiboSettings:
    return XiboSettings(_env_file=None, cms_url=CMS_URL)


@pytest.fixture
def fake() -> FakeCms:
    return FakeCms()


@pytest.fixture
def ctx(settings: XiboSettings, fake: FakeCms) -> CmsContext:
    return CmsContext(settings, auth=BearerAuth(token="test-token"), transport=httpx.MockTransport(fake.handler))


@pytest.fixture
def unconfigured_ctx(fake: FakeCms) -> CmsContext:
    settings = XiboSettings(_env_file=None, cms_url="")
    return CmsContext(settings, auth=BearerAuth(token="test-token"), transport=httpx.MockTransport(fake.handler))
