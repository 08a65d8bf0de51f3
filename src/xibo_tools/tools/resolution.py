"""Display resolution tools."""

from __future__ import annotations

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import Resolution


class ResolutionFilter(CmsParams):
    resolution_id: int | None = Field(default=None, description="Filter by resolution ID")
    resolution: str | None = Field(default=None, description="Filter by exact resolution name")
    partial_resolution: str | None = Field(default=None, description="Filter by partial resolution name")
    enabled: bool | None = Field(default=None, description="Filter by enabled flag")
    width: int | None = Field(default=None, description="Filter by width in pixels")
    height: int | None = Field(default=None, description="Filter by height in pixels")


class ResolutionInput(CmsParams):
    resolution: str = Field(..., min_length=1, description="Resolution name, e.g. 1080p")
    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")


class ResolutionUpdate(ResolutionInput):
    resolution_id: int = Field(..., description="ID of the resolution to edit")


class ResolutionRef(CmsParams):
    resolution_id: int = Field(..., description="ID of the resolution")


class GetResolutionsTool(CmsTool[ResolutionFilter]):
    metadata = ToolMetadata(
        name="get_resolutions",
        description="List display resolutions, optionally filtered by name, size or enabled flag",
        category="resolution",
    )
    params_schema = ResolutionFilter
    endpoint = Endpoint("GET", "/api/resolution")
    response = list[Resolution]


class AddResolutionTool(CmsTool[ResolutionInput]):
    metadata = ToolMetadata(
        name="add_resolution",
        description="Create a new display resolution",
        category="resolution",
        mutates=True,
    )
    params_schema = ResolutionInput
    endpoint = Endpoint("POST", "/api/resolution")
    response = Resolution
    success_message = "Resolution added"


class EditResolutionTool(CmsTool[ResolutionUpdate]):
    metadata = ToolMetadata(
        name="edit_resolution",
        description="Change the name or size of an existing resolution",
        category="resolution",
        mutates=True,
    )
    params_schema = ResolutionUpdate
    endpoint = Endpoint("PUT", "/api/resolution/{resolutionId}")
    response = Resolution
    success_message = "Resolution updated"


class DeleteResolutionTool(CmsTool[ResolutionRef]):
    metadata = ToolMetadata(
        name="delete_resolution",
        description="Delete a display resolution by ID",
        category="resolution",
        mutates=True,
    )
    params_schema = ResolutionRef
    endpoint = Endpoint("DELETE", "/api/resolution/{resolutionId}")
    success_message = "Resolution deleted"


TOOLS = (GetResolutionsTool, AddResolutionTool, EditResolutionTool, DeleteResolutionTool)
