"""Tests for dataset tools: RSS management, row writes, imports and the column tree."""

from __future__ import annotations

import orjson
import pytest

from xibo_tools.core import Failure, Success
from xibo_tools.foundation import CmsContext
from xibo_tools.tools.dataset import (
    AddDataSetDataTool,
    DeleteDataSetDataTool,
    GetDataSetsTool,
    ImportDataSetDataJsonTool,
    ManageDataSetRssTool,
)

from .conftest import FakeCms, form_of

FEED = {"id": 3, "title": "Menu", "url": "https://cms.test/rss/abc", "psk": "abc"}


# ═════════════════════════════════════════════════════════════════════════════
# manage_dataset_rss
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ["edit", "delete"])
async def test_manage_rss_requires_rss_id(ctx: CmsContext, fake: FakeCms, action: str) -> None:
    result = await ManageDataSetRssTool(ctx).acall(data_set_id=1, action=action, data={"title": "Menu"})

    assert isinstance(result, Failure)
    assert "required" in result.message
    assert result.error is not None and result.error.kind == "precondition"
    assert result.error.field == "rssId"
    assert fake.calls == []


@pytest.mark.asyncio
async def test_manage_rss_add_requires_data(ctx: CmsContext, fake: FakeCms) -> None:
    result = await ManageDataSetRssTool(ctx).acall(data_set_id=1, action="add")

    assert isinstance(result, Failure)
    assert "required" in result.message
    assert fake.calls == []


@pytest.mark.asyncio
async def test_manage_rss_add_sends_json(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", "/api/dataset/1/rss", json=FEED)

    result = await ManageDataSetRssTool(ctx).acall(
        dataSetId=1, action="add", data={"title": "Menu", "summaryColumnId": 7},
    )

    assert isinstance(result, Success)
    assert result.data == FEED
    assert fake.last.headers["Content-Type"] == "application/json"
    assert orjson.loads(fake.last.content) == {"title": "Menu", "summaryColumnId": 7}


@pytest.mark.asyncio
async def test_manage_rss_get_lists_feeds(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("GET", "/api/dataset/1/rss", json=[FEED])

    result = await ManageDataSetRssTool(ctx).acall(data_set_id=1, action="get")

    assert isinstance(result, Success)
    assert result.data == [FEED]
    assert "action" not in fake.last.url.params


@pytest.mark.asyncio
async def test_manage_rss_delete_hits_feed_path(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("DELETE", "/api/dataset/1/rss/3", status=204)

    result = await ManageDataSetRssTool(ctx).acall(data_set_id=1, action="delete", rss_id=3)

    assert isinstance(result, Success)
    assert not result.has_data


# ═════════════════════════════════════════════════════════════════════════════
# Rows and imports
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_add_row_flattens_row_data(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", "/api/dataset/data/4", json={"id": 11})

    result = await AddDataSetDataTool(ctx).acall(
        data_set_id=4, row_data={"dataSetColumnId_1": "Coffee", "dataSetColumnId_2": 3.5},
    )

    assert isinstance(result, Success)
    assert result.message == "Row added"
    assert form_of(fake.last) == [("dataSetColumnId_1", "Coffee"), ("dataSetColumnId_2", "3.5")]


@pytest.mark.asyncio
async def test_delete_row_path(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("DELETE", "/api/dataset/data/4/11", status=204)

    result = await DeleteDataSetDataTool(ctx).acall(data_set_id=4, row_id=11)

    assert isinstance(result, Success)
    assert fake.last.url.path == "/api/dataset/data/4/11"


@pytest.mark.asyncio
async def test_import_json_body(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("POST", "/api/dataset/importjson/4", status=204)

    result = await ImportDataSetDataJsonTool(ctx).acall(
        data_set_id=4, unique_keys=["Name"], rows=[{"Name": "Tea", "Price": 2}],
    )

    assert isinstance(result, Success)
    assert orjson.loads(fake.last.content) == {
        "uniqueKeys": ["Name"],
        "truncate": False,
        "rows": [{"Name": "Tea", "Price": 2}],
    }


# ═════════════════════════════════════════════════════════════════════════════
# Tree view
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_get_datasets_tree_view(ctx: CmsContext, fake: FakeCms) -> None:
    datasets = [{
        "dataSetId": 4,
        "dataSet": "Menu",
        "columns": [
            {"dataSetColumnId": 1, "dataSetId": 4, "heading": "Name", "dataTypeId": 1,
             "dataSetColumnTypeId": 1, "dataType": "String"},
            {"dataSetColumnId": 2, "dataSetId": 4, "heading": "Price", "dataTypeId": 2,
             "dataSetColumnTypeId": 1, "dataType": "Number"},
        ],
    }]
    fake.add("GET", "/api/dataset", json=datasets)

    result = await GetDataSetsTool(ctx).acall(tree_view=True)

    assert isinstance(result, Success)
    assert fake.last.url.params["embed"] == "columns"
    assert "treeView" not in fake.last.url.params
    assert result.data["items"] == datasets
    assert [row["path"] for row in result.data["tree"]] == ["Menu", "Menu > Name", "Menu > Price"]
    assert result.data["treeViewText"] == (
        "```text\n"
        "└─ dataset: Menu\n"
        "   ├─ column: Name [String]\n"
        "   └─ column: Price [Number]\n"
        "```"
    )


@pytest.mark.asyncio
async def test_get_datasets_without_tree_is_plain_list(ctx: CmsContext, fake: FakeCms) -> None:
    fake.add("GET", "/api/dataset", json=[{"dataSetId": 4, "dataSet": "Menu"}])

    result = await GetDataSetsTool(ctx).acall()

    assert isinstance(result, Success)
    assert result.data == [{"dataSetId": 4, "dataSet": "Menu"}]
    assert "embed" not in fake.last.url.params
