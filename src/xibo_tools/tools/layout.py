"""Layout tools: listing, CRUD and the draft/publish lifecycle.

Edits happen on a draft. ``checkout_layout`` creates the draft,
``publish_layout`` replaces the live layout with it and ``discard_layout``
throws it away.
"""

from __future__ import annotations

from pydantic import Field

from ..core import Failure, ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import Layout


class LayoutFilter(CmsParams):
    layout_id: int | None = Field(default=None, description="Filter by layout ID")
    parent_id: int | None = Field(default=None, description="Drafts of this layout")
    show_drafts: bool | None = None
    layout: str | None = Field(default=None, description="Filter by name (partial match)")
    user_id: int | None = Field(default=None, description="Filter by owner")
    retired: bool | None = None
    tags: str | None = Field(default=None, description="Comma separated tags to match")
    exact_tags: bool | None = None
    owner_user_group_id: int | None = None
    published_status_id: int | None = Field(default=None, description="1 published, 2 draft")
    campaign_id: int | None = Field(default=None, description="Layouts assigned to this campaign")
    folder_id: int | None = None
    embed: str | None = Field(default=None, description="Embed regions, playlists, widgets, tags or campaigns")


class LayoutInput(CmsParams):
    name: str = Field(..., min_length=1, description="Layout name")
    description: str | None = None
    layout_id: int | None = Field(default=None, description="Template layout to start from")
    resolution_id: int | None = Field(default=None, description="Resolution when not using a template")
    code: str | None = Field(default=None, description="Identification code for interactive actions")
    folder_id: int | None = None


class LayoutRef(CmsParams):
    layout_id: int = Field(..., description="ID of the layout")


class LayoutUpdate(LayoutRef):
    name: str = Field(..., min_length=1, description="Layout name")
    description: str | None = None
    tags: str | None = Field(default=None, description="Comma separated tags")
    retired: bool | None = None
    enable_stat: bool | None = Field(default=None, description="Record proof of play statistics")
    code: str | None = None
    folder_id: int | None = None


class LayoutCopy(LayoutRef):
    name: str = Field(..., min_length=1, description="Name of the copy")
    description: str | None = None
    folder_id: int | None = None
    copy_media_files: bool = Field(default=False, description="Duplicate the media files as well")


class PublishInput(LayoutRef):
    publish_now: bool | None = Field(default=None, description="Publish immediately")
    publish_date: str | None = Field(default=None, description="Publish at (Y-m-d H:i:s) instead")


class GetLayoutsTool(CmsTool[LayoutFilter]):
    metadata = ToolMetadata(
        name="get_layouts",
        description="List layouts and drafts, optionally with regions and widgets",
        category="layout",
    )
    params_schema = LayoutFilter
    endpoint = Endpoint("GET", "/api/layout")
    response = list[Layout]


class AddLayoutTool(CmsTool[LayoutInput]):
    metadata = ToolMetadata(
        name="add_layout",
        description="Create a layout from a template or a resolution",
        category="layout",
        mutates=True,
    )
    params_schema = LayoutInput
    endpoint = Endpoint("POST", "/api/layout")
    response = Layout
    success_message = "Layout added"

    def _precheck(self, params: LayoutInput) -> Failure | None:
        if params.layout_id is None and params.resolution_id is None:
            return Failure.precondition("layoutId or resolutionId is required", field="resolutionId")
        return None


class EditLayoutTool(CmsTool[LayoutUpdate]):
    metadata = ToolMetadata(
        name="edit_layout",
        description="Edit a layout's name, description, tags or statistics setting",
        category="layout",
        mutates=True,
    )
    params_schema = LayoutUpdate
    endpoint = Endpoint("PUT", "/api/layout/{layoutId}")
    response = Layout
    success_message = "Layout updated"


class CopyLayoutTool(CmsTool[LayoutCopy]):
    metadata = ToolMetadata(
        name="copy_layout",
        description="Copy a layout under a new name",
        category="layout",
        mutates=True,
    )
    params_schema = LayoutCopy
    endpoint = Endpoint("POST", "/api/layout/copy/{layoutId}")
    response = Layout
    success_message = "Layout copied"


class DeleteLayoutTool(CmsTool[LayoutRef]):
    metadata = ToolMetadata(
        name="delete_layout",
        description="Delete a layout and its drafts",
        category="layout",
        mutates=True,
    )
    params_schema = LayoutRef
    endpoint = Endpoint("DELETE", "/api/layout/{layoutId}")
    success_message = "Layout deleted"


class CheckoutLayoutTool(CmsTool[LayoutRef]):
    metadata = ToolMetadata(
        name="checkout_layout",
        description="Create an editable draft of a published layout",
        category="layout",
        mutates=True,
    )
    params_schema = LayoutRef
    endpoint = Endpoint("PUT", "/api/layout/checkout/{layoutId}")
    response = Layout
    success_message = "Layout checked out"


class PublishLayoutTool(CmsTool[PublishInput]):
    metadata = ToolMetadata(
        name="publish_layout",
        description="Publish a layout's draft, now or at a given date",
        category="layout",
        mutates=True,
    )
    params_schema = PublishInput
    endpoint = Endpoint("PUT", "/api/layout/publish/{layoutId}")
    response = Layout
    success_message = "Layout published"


class DiscardLayoutTool(CmsTool[LayoutRef]):
    metadata = ToolMetadata(
        name="discard_layout",
        description="Throw away a layout's draft, keeping the published version",
        category="layout",
        mutates=True,
    )
    params_schema = LayoutRef
    endpoint = Endpoint("PUT", "/api/layout/discard/{layoutId}")
    response = Layout
    success_message = "Draft discarded"


class RetireLayoutTool(CmsTool[LayoutRef]):
    metadata = ToolMetadata(
        name="retire_layout",
        description="Retire a layout so it can no longer be scheduled",
        category="layout",
        mutates=True,
    )
    params_schema = LayoutRef
    endpoint = Endpoint("PUT", "/api/layout/retire/{layoutId}")
    success_message = "Layout retired"


class UnretireLayoutTool(CmsTool[LayoutRef]):
    metadata = ToolMetadata(
        name="unretire_layout",
        description="Make a retired layout schedulable again",
        category="layout",
        mutates=True,
    )
    params_schema = LayoutRef
    endpoint = Endpoint("PUT", "/api/layout/unretire/{layoutId}")
    success_message = "Layout unretired"


class GetLayoutStatusTool(CmsTool[LayoutRef]):
    metadata = ToolMetadata(
        name="get_layout_status",
        description="Get the build status and any validation messages of a layout",
        category="layout",
    )
    params_schema = LayoutRef
    endpoint = Endpoint("GET", "/api/layout/status/{layoutId}")


TOOLS = (
    GetLayoutsTool,
    AddLayoutTool,
    EditLayoutTool,
    CopyLayoutTool,
    DeleteLayoutTool,
    CheckoutLayoutTool,
    PublishLayoutTool,
    DiscardLayoutTool,
    RetireLayoutTool,
    UnretireLayoutTool,
    GetLayoutStatusTool,
)
