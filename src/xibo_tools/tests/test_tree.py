"""Tests for the tree-view utility and the folder tree tool."""

from __future__ import annotations

import pytest

from xibo_tools.core import Success
from xibo_tools.foundation import CmsContext
from xibo_tools.tools.folder import GetFoldersTool
from xibo_tools.utils import build_tree, create_tree_view_payload, flatten_tree, generate_tree_view

from .conftest import FakeCms


def _ids(nodes: list[dict]) -> list:
    return [n["id"] for n in nodes]


# ═════════════════════════════════════════════════════════════════════════════
# build_tree
# ═════════════════════════════════════════════════════════════════════════════


def test_build_tree_nests_and_keeps_order() -> None:
    flat = [
        {"id": 1, "parentId": None},
        {"id": 3, "parentId": 1},
        {"id": 2, "parentId": 1},
        {"id": 4, "parentId": 2},
    ]

    tree = build_tree(flat)

    assert _ids(tree) == [1]
    assert _ids(tree[0]["children"]) == [3, 2]
    assert _ids(tree[0]["children"][1]["children"]) == [4]


def test_build_tree_orphans_and_self_parents_are_roots() -> None:
    flat = [{"id": 1, "parentId": 99}, {"id": 2, "parentId": 2}, {"id": 3}]

    assert _ids(build_tree(flat)) == [1, 2, 3]


def test_build_tree_matches_string_and_int_ids() -> None:
    tree = build_tree([{"id": 1, "parentId": None}, {"id": 2, "parentId": "1"}])

    assert _ids(tree[0]["children"]) == [2]


def test_build_tree_custom_fields() -> None:
    flat = [{"key": "a", "up": None}, {"key": "b", "up": "a"}]

    tree = build_tree(flat, "key", "up")

    assert tree[0]["children"][0]["key"] == "b"


def test_build_tree_cycle_keeps_every_node() -> None:
    flat = [{"id": 1, "parentId": 2}, {"id": 2, "parentId": 1}, {"id": 3, "parentId": None}]

    tree = build_tree(flat)

    assert _ids(tree) == [3, 1]
    assert _ids(tree[1]["children"]) == [2]
    assert len(flatten_tree(tree)) == 3


def test_build_tree_does_not_mutate_input() -> None:
    flat = [{"id": 1, "parentId": None}, {"id": 2, "parentId": 1}]

    build_tree(flat)

    assert flat == [{"id": 1, "parentId": None}, {"id": 2, "parentId": 1}]


# ═════════════════════════════════════════════════════════════════════════════
# Rendering
# ═════════════════════════════════════════════════════════════════════════════


def test_generate_tree_view_box_drawing() -> None:
    tree = build_tree([
        {"id": 1, "name": "Main", "type": "layout", "parentId": None},
        {"id": 2, "name": "Header", "type": "region", "parentId": 1},
        {"id": 3, "name": "Clock", "type": "widget", "duration": 10, "parentId": 2},
        {"id": 4, "name": "Body", "type": "region", "parentId": 1},
        {"id": 5, "name": "Spare", "type": "layout", "parentId": None},
    ])

    assert generate_tree_view(tree) == (
        "├─ layout: Main\n"
        "│  ├─ region: Header\n"
        "│  │  └─ widget: Clock (10s)\n"
        "│  └─ region: Body\n"
        "└─ layout: Spare\n"
    )


def test_flatten_tree_rows() -> None:
    tree = build_tree([
        {"id": 1, "name": "Root", "type": "folder", "parentId": None},
        {"id": 2, "name": "Child", "type": "folder", "parentId": 1},
    ])

    assert flatten_tree(tree) == [
        {"id": 1, "name": "Root", "type": "folder", "depth": 0, "isLast": True, "path": "Root"},
        {"id": 2, "name": "Child", "type": "folder", "depth": 1, "isLast": True, "path": "Root > Child"},
    ]


def test_payload_fences_text() -> None:
    tree = build_tree([{"id": 1, "name": "A", "type": "folder"}])

    payload = create_tree_view_payload(["raw"], tree)

    assert payload["items"] == ["raw"]
    assert payload["treeViewText"] == "```text\n└─ folder: A\n```"


# ═════════════════════════════════════════════════════════════════════════════
# get_folders
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_get_folders_tree_view_from_nested_children(ctx: CmsContext, fake: FakeCms) -> None:
    folders = [{
        "id": 1,
        "text": "Root Folder",
        "isRoot": 1,
        "children": [
            {"id": 2, "text": "Campaigns", "parentId": 1, "children": []},
            {"id": 3, "text": "Fonts", "parentId": "1", "children": [
                {"id": 4, "text": "Serif", "parentId": 3},
            ]},
        ],
    }]
    fake.add("GET", "/api/folders", json=folders)

    result = await GetFoldersTool(ctx).acall(tree_view=True)

    assert isinstance(result, Success)
    assert result.data["items"] == folders
    assert result.data["treeViewText"] == (
        "```text\n"
        "└─ folder: Root Folder\n"
        "   ├─ folder: Campaigns\n"
        "   └─ folder: Fonts\n"
        "      └─ folder: Serif\n"
        "```"
    )
