"""Tag tools."""

from __future__ import annotations

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import Tag


class TagFilter(CmsParams):
    tag_id: int | None = Field(default=None, description="Filter by tag ID")
    tag: str | None = Field(default=None, description="Filter by tag name")
    exact_tags: bool | None = Field(default=None, description="Match the tag name exactly")
    is_system: bool | None = None
    is_required: bool | None = None
    have_options: bool | None = Field(default=None, description="Only tags that define options")


class TagInput(CmsParams):
    name: str = Field(..., min_length=1, description="Tag name")
    is_required: bool | None = Field(default=None, description="A value must be chosen when tagging")
    options: str | None = Field(default=None, description="Comma separated allowed values")


class TagUpdate(TagInput):
    tag_id: int = Field(..., description="ID of the tag to edit")


class TagRef(CmsParams):
    tag_id: int = Field(..., description="ID of the tag")


class GetTagsTool(CmsTool[TagFilter]):
    metadata = ToolMetadata(
        name="get_tags",
        description="List tags and their allowed values",
        category="tag",
    )
    params_schema = TagFilter
    endpoint = Endpoint("GET", "/api/tag")
    response = list[Tag]


class AddTagTool(CmsTool[TagInput]):
    metadata = ToolMetadata(
        name="add_tag",
        description="Create a tag, optionally with a list of allowed values",
        category="tag",
        mutates=True,
    )
    params_schema = TagInput
    endpoint = Endpoint("POST", "/api/tag")
    response = Tag
    success_message = "Tag added"


class EditTagTool(CmsTool[TagUpdate]):
    metadata = ToolMetadata(
        name="edit_tag",
        description="Rename a tag or change its allowed values",
        category="tag",
        mutates=True,
    )
    params_schema = TagUpdate
    endpoint = Endpoint("PUT", "/api/tag/{tagId}")
    response = Tag
    success_message = "Tag updated"


class DeleteTagTool(CmsTool[TagRef]):
    metadata = ToolMetadata(
        name="delete_tag",
        description="Delete a tag and untag everything that uses it",
        category="tag",
        mutates=True,
    )
    params_schema = TagRef
    endpoint = Endpoint("DELETE", "/api/tag/{tagId}")
    success_message = "Tag deleted"


TOOLS = (GetTagsTool, AddTagTool, EditTagTool, DeleteTagTool)
