"""Display tools: listing, authorisation and remote player actions."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import Display, DisplayStatus


class DisplayFilter(CmsParams):
    display_id: int | None = Field(default=None, description="Filter by display ID")
    display_group_id: int | None = Field(default=None, description="Filter by display group ID")
    display: str | None = Field(default=None, description="Filter by display name")
    tags: str | None = Field(default=None, description="Comma separated tags to match")
    exact_tags: bool | None = Field(default=None, description="Match tags exactly")
    logical_operator: Literal["AND", "OR"] | None = Field(default=None, description="How multiple tags combine")
    mac_address: str | None = None
    has_layouts: bool | None = None
    client_version: str | None = None
    client_type: str | None = Field(default=None, description="windows, android, lg, sssp or linux")
    authorised: bool | None = None
    display_profile_id: int | None = None
    media_inventory_status: int | None = Field(default=None, description="1 up to date, 2 downloading, 3 out of date")
    logged_in: bool | None = None
    last_accessed: str | None = None
    folder_id: int | None = None
    embed: str | None = Field(default=None, description="Embed displayGroups, tags or overrideConfig")


class DisplayRef(CmsParams):
    display_id: int = Field(..., description="ID of the display")


class DefaultLayoutInput(DisplayRef):
    layout_id: int = Field(..., description="Layout shown when nothing is scheduled")


class GetDisplaysTool(CmsTool[DisplayFilter]):
    metadata = ToolMetadata(
        name="get_displays",
        description="List displays with their status, licence and player details",
        category="display",
    )
    params_schema = DisplayFilter
    endpoint = Endpoint("GET", "/api/display")
    response = list[Display]


class AuthoriseDisplayTool(CmsTool[DisplayRef]):
    metadata = ToolMetadata(
        name="authorise_display",
        description="Toggle the authorised state of a display",
        category="display",
        mutates=True,
    )
    params_schema = DisplayRef
    endpoint = Endpoint("PUT", "/api/display/authorise/{displayId}")
    success_message = "Display authorisation toggled"


class WakeOnLanTool(CmsTool[DisplayRef]):
    metadata = ToolMetadata(
        name="wake_on_lan",
        description="Send a Wake On LAN packet to a display",
        category="display",
        mutates=True,
    )
    params_schema = DisplayRef
    endpoint = Endpoint("POST", "/api/display/wol/{displayId}")
    success_message = "Wake On LAN sent"


class RequestDisplayScreenshotTool(CmsTool[DisplayRef]):
    metadata = ToolMetadata(
        name="request_display_screenshot",
        description="Ask a display to upload a screenshot on its next collection",
        category="display",
        mutates=True,
    )
    params_schema = DisplayRef
    endpoint = Endpoint("PUT", "/api/display/requestscreenshot/{displayId}")
    response = Display
    success_message = "Screenshot requested"


class CheckDisplayLicenceTool(CmsTool[DisplayRef]):
    metadata = ToolMetadata(
        name="check_display_licence",
        description="Ask a display to re-check its player licence",
        category="display",
        mutates=True,
    )
    params_schema = DisplayRef
    endpoint = Endpoint("PUT", "/api/display/licenceCheck/{displayId}")
    success_message = "Licence check requested"


class PurgeDisplayTool(CmsTool[DisplayRef]):
    metadata = ToolMetadata(
        name="purge_display",
        description="Ask a display to delete all cached content and download it again",
        category="display",
        mutates=True,
    )
    params_schema = DisplayRef
    endpoint = Endpoint("PUT", "/api/display/purgeAll/{displayId}")
    success_message = "Purge requested"


class SetDisplayDefaultLayoutTool(CmsTool[DefaultLayoutInput]):
    metadata = ToolMetadata(
        name="set_display_default_layout",
        description="Set the layout a display shows when nothing is scheduled",
        category="display",
        mutates=True,
    )
    params_schema = DefaultLayoutInput
    endpoint = Endpoint("PUT", "/api/display/defaultlayout/{displayId}")
    response = Display
    success_message = "Default layout set"


class GetDisplayStatusTool(CmsTool[DisplayRef]):
    metadata = ToolMetadata(
        name="get_display_status",
        description="Get the last status document reported by a display",
        category="display",
    )
    params_schema = DisplayRef
    endpoint = Endpoint("GET", "/api/display/status/{displayId}")
    response = DisplayStatus


class DeleteDisplayTool(CmsTool[DisplayRef]):
    metadata = ToolMetadata(
        name="delete_display",
        description="Delete a display and its display-specific group",
        category="display",
        mutates=True,
    )
    params_schema = DisplayRef
    endpoint = Endpoint("DELETE", "/api/display/{displayId}")
    success_message = "Display deleted"


TOOLS = (
    GetDisplaysTool,
    AuthoriseDisplayTool,
    WakeOnLanTool,
    RequestDisplayScreenshotTool,
    CheckDisplayLicenceTool,
    PurgeDisplayTool,
    SetDisplayDefaultLayoutTool,
    GetDisplayStatusTool,
    DeleteDisplayTool,
)
