"""Folder tools."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..core import Envelope, Success, ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import Folder
from ..utils import build_tree, create_tree_view_payload


class FolderFilter(CmsParams):
    folder_id: int | None = Field(default=None, description="Show only this folder")
    grid_view: bool | None = Field(default=None, description="Return a flat list instead of the nested tree")
    folder_name: str | None = Field(default=None, description="Filter by name (partial match)")
    exact_folder_name: bool | None = Field(default=None, description="Match folderName exactly")
    tree_view: bool = Field(default=False, exclude=True, description="Also return a text tree of the folders")


class FolderInput(CmsParams):
    text: str = Field(..., min_length=1, description="Folder name")
    parent_id: int | None = Field(default=None, description="Parent folder ID; omit for a top-level folder")


class FolderUpdate(CmsParams):
    folder_id: int = Field(..., description="ID of the folder to rename")
    text: str = Field(..., min_length=1, description="New folder name")


class FolderRef(CmsParams):
    folder_id: int = Field(..., description="ID of the folder")


def _flatten_folders(folders: list[dict[str, Any]], parent_id: Any = None) -> list[dict[str, Any]]:
    """Nodes for ``build_tree``; nested ``children`` become parent links."""
    nodes: list[dict[str, Any]] = []
    for folder in folders:
        nodes.append({
            "id": folder["id"],
            "name": folder["text"],
            "type": "folder",
            "parentId": parent_id if parent_id is not None else folder.get("parentId"),
        })
        children = folder.get("children")
        if isinstance(children, list):
            nodes.extend(_flatten_folders(children, folder["id"]))
    return nodes


class GetFoldersTool(CmsTool[FolderFilter]):
    metadata = ToolMetadata(
        name="get_folders",
        description="List folders; with treeView, also render the folder hierarchy as text",
        category="folder",
    )
    params_schema = FolderFilter
    endpoint = Endpoint("GET", "/api/folders")
    response = list[Folder]

    def _postprocess(self, envelope: Success, params: FolderFilter) -> Envelope:
        if not params.tree_view:
            return envelope
        tree = build_tree(_flatten_folders(envelope.data))
        return Success(data=create_tree_view_payload(envelope.data, tree))


class AddFolderTool(CmsTool[FolderInput]):
    metadata = ToolMetadata(
        name="add_folder",
        description="Create a folder, optionally inside a parent folder",
        category="folder",
        mutates=True,
    )
    params_schema = FolderInput
    endpoint = Endpoint("POST", "/api/folders")
    response = Folder
    success_message = "Folder added"


class EditFolderTool(CmsTool[FolderUpdate]):
    metadata = ToolMetadata(
        name="edit_folder",
        description="Rename an existing folder",
        category="folder",
        mutates=True,
    )
    params_schema = FolderUpdate
    endpoint = Endpoint("PUT", "/api/folders/{folderId}")
    response = Folder
    success_message = "Folder updated"


class DeleteFolderTool(CmsTool[FolderRef]):
    metadata = ToolMetadata(
        name="delete_folder",
        description="Delete an empty folder",
        category="folder",
        mutates=True,
    )
    params_schema = FolderRef
    endpoint = Endpoint("DELETE", "/api/folders/{folderId}")
    success_message = "Folder deleted"


TOOLS = (GetFoldersTool, AddFolderTool, EditFolderTool, DeleteFolderTool)
