"""Tests for the tool registry and the catalogue it is built from."""

from __future__ import annotations

import httpx
import orjson
import pytest

from xibo_tools.foundation import BearerAuth, CmsContext, XiboSettings
from xibo_tools.observability import CollectingRenderer
from xibo_tools.registry import ToolRegistry, build_registry
from xibo_tools.tools import ALL_TOOLS
from xibo_tools.tools.tag import GetTagsTool

from .conftest import CMS_URL, FakeCms


def test_catalogue_names_are_unique() -> None:
    names = [tool.metadata.name for tool in ALL_TOOLS]

    assert len(names) == len(set(names))


def test_build_registry_holds_every_tool(ctx: CmsContext) -> None:
    registry = build_registry(ctx)

    assert len(registry) == len(ALL_TOOLS)
    assert "manage_dataset_rss" in registry
    assert "get_current_weather" in registry
    assert all(tool.context is ctx for tool in registry)


def test_register_duplicate_raises(ctx: CmsContext) -> None:
    registry = ToolRegistry()
    registry.register(GetTagsTool(ctx))

    with pytest.raises(ValueError, match="already registered"):
        registry.register(GetTagsTool(ctx))

    assert registry.unregister("get_tags")
    assert not registry.unregister("get_tags")


def test_list_tools_by_category(ctx: CmsContext) -> None:
    registry = build_registry(ctx)

    names = {m.name for m in registry.list_tools("resolution")}

    assert names == {"get_resolutions", "add_resolution", "edit_resolution", "delete_resolution"}
    assert "weather" in registry.categories()


def test_schemas_use_wire_names(ctx: CmsContext) -> None:
    registry = build_registry(ctx, tools=[GetTagsTool])

    (schema,) = registry.schemas()

    assert schema["name"] == "get_tags"
    properties = schema["parameters"]["properties"]
    assert "tagId" in properties
    assert "tag_id" not in properties


def test_tree_flags_are_in_input_schema(ctx: CmsContext) -> None:
    registry = build_registry(ctx)

    properties = registry["get_folders"].params_schema.model_json_schema(by_alias=True)["properties"]

    assert "treeView" in properties


def test_describe_lists_tools(ctx: CmsContext) -> None:
    text = build_registry(ctx, tools=[GetTagsTool]).describe()

    assert text.startswith("- **get_tags** (tag): List tags")


@pytest.mark.asyncio
async def test_execute_returns_envelope_mapping(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("GET", "/api/tag", json=[{"tagId": 1, "tag": "lobby", "isSystem": 0, "isRequired": 0}])
    registry = build_registry(ctx)

    result = await registry.execute("get_tags", {"tag": "lobby"})

    assert result == {"success": True, "data": [{"tagId": 1, "tag": "lobby", "isSystem": 0, "isRequired": 0}]}
    assert fake.last.url.params["tag"] == "lobby"


@pytest.mark.asyncio
async def test_execute_unknown_tool(ctx: CmsContext) -> None:
    result = await build_registry(ctx).execute("launch_rockets", {})

    assert result["success"] is False
    assert result["error"]["kind"] == "not_found"


@pytest.mark.asyncio
async def test_execute_invalid_params(ctx: CmsContext, fake: FakeCms) -> None:
    result = await build_registry(ctx).execute("delete_tag", {"tagId": "abc"})

    assert result["success"] is False
    assert result["error"]["kind"] == "validation"
    assert fake.calls == []


@pytest.mark.asyncio
async def test_build_registry_applies_logging_settings(
    fake: FakeCms, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    collected_logs: CollectingRenderer,
) -> None:
    monkeypatch.setenv("XIBO_LOG_FORMAT", "json")
    monkeypatch.setenv("XIBO_LOG_LEVEL", "warning")
    settings = XiboSettings(_env_file=None, cms_url=CMS_URL)
    fake.add("GET", "/api/about", status=204)
    fake.add("GET", "/api/clock", status=500, json={"message": "boom"})
    ctx = CmsContext(settings, auth=BearerAuth(token="test-token"), transport=httpx.MockTransport(fake.handler))
    registry = build_registry(ctx)

    await registry.execute("get_about")
    await registry.execute("get_cms_time")

    records = [orjson.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [r["event"] for r in records] == ["http error"]
    assert records[0]["status"] == 500
    assert collected_logs.entries == []
