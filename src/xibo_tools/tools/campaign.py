"""Campaign tools. A campaign is an ordered list of layouts scheduled as one."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import Campaign


class CampaignFilter(CmsParams):
    campaign_id: int | None = Field(default=None, description="Filter by campaign ID")
    name: str | None = Field(default=None, description="Filter by name (partial match)")
    tags: str | None = Field(default=None, description="Comma separated tags to match")
    exact_tags: bool | None = None
    logical_operator: Literal["AND", "OR"] | None = Field(default=None, description="How multiple tags combine")
    has_layouts: bool | None = None
    is_layout_specific: bool | None = Field(default=None, description="Include the per-layout campaigns")
    retired: bool | None = None
    total_duration: bool | None = Field(default=None, description="Include the total duration")
    embed: str | None = Field(default=None, description="Embed layouts, permissions, tags or events")
    folder_id: int | None = None


class _CampaignSettings(CmsParams):
    folder_id: int | None = None
    layout_ids: list[int] | None = Field(default=None, description="Layouts to assign, in play order")
    cycle_playback_enabled: bool | None = Field(default=None, description="Play one layout per schedule loop")
    play_count: int | None = Field(default=None, ge=1, description="Plays of each layout before moving on")
    list_play_order: Literal["round", "block"] | None = None
    target_type: Literal["plays", "budget", "imp"] | None = Field(default=None, description="Ad campaign target")
    target: int | None = None
    start_dt: str | None = Field(default=None, description="Ad campaign start (Y-m-d H:i:s)")
    end_dt: str | None = Field(default=None, description="Ad campaign end (Y-m-d H:i:s)")
    display_group_ids: list[int] | None = Field(default=None, description="Ad campaign display groups")


class CampaignInput(_CampaignSettings):
    type: Literal["list", "ad"] = Field(default="list", description="Layout list or ad campaign")
    name: str = Field(..., min_length=1, description="Campaign name")


class CampaignRef(CmsParams):
    campaign_id: int = Field(..., description="ID of the campaign")


class CampaignUpdate(CampaignRef, _CampaignSettings):
    name: str = Field(..., min_length=1, description="Campaign name")
    manage_layouts: bool | None = Field(default=None, description="Replace the layout list with layoutIds")


class CampaignLayout(CampaignRef):
    layout_id: int = Field(..., description="Layout to add or remove")
    display_order: int | None = Field(default=None, description="Position in the campaign")


class GetCampaignsTool(CmsTool[CampaignFilter]):
    metadata = ToolMetadata(
        name="get_campaigns",
        description="List campaigns and their layout counts",
        category="campaign",
    )
    params_schema = CampaignFilter
    endpoint = Endpoint("GET", "/api/campaign")
    response = list[Campaign]


class AddCampaignTool(CmsTool[CampaignInput]):
    metadata = ToolMetadata(
        name="add_campaign",
        description="Create a layout list or ad campaign",
        category="campaign",
        mutates=True,
    )
    params_schema = CampaignInput
    endpoint = Endpoint("POST", "/api/campaign")
    response = Campaign
    success_message = "Campaign added"


class EditCampaignTool(CmsTool[CampaignUpdate]):
    metadata = ToolMetadata(
        name="edit_campaign",
        description="Edit a campaign's name, playback settings or layouts",
        category="campaign",
        mutates=True,
    )
    params_schema = CampaignUpdate
    endpoint = Endpoint("PUT", "/api/campaign/{campaignId}")
    response = Campaign
    success_message = "Campaign updated"


class DeleteCampaignTool(CmsTool[CampaignRef]):
    metadata = ToolMetadata(
        name="delete_campaign",
        description="Delete a campaign; its layouts are kept",
        category="campaign",
        mutates=True,
    )
    params_schema = CampaignRef
    endpoint = Endpoint("DELETE", "/api/campaign/{campaignId}")
    success_message = "Campaign deleted"


class AssignLayoutTool(CmsTool[CampaignLayout]):
    metadata = ToolMetadata(
        name="assign_layout_to_campaign",
        description="Add a layout to a campaign at an optional position",
        category="campaign",
        mutates=True,
    )
    params_schema = CampaignLayout
    endpoint = Endpoint("POST", "/api/campaign/layout/assign/{campaignId}")
    success_message = "Layout assigned"


class RemoveLayoutTool(CmsTool[CampaignLayout]):
    metadata = ToolMetadata(
        name="remove_layout_from_campaign",
        description="Remove a layout from a campaign",
        category="campaign",
        mutates=True,
    )
    params_schema = CampaignLayout
    endpoint = Endpoint("DELETE", "/api/campaign/layout/remove/{campaignId}")
    success_message = "Layout removed"


TOOLS = (
    GetCampaignsTool,
    AddCampaignTool,
    EditCampaignTool,
    DeleteCampaignTool,
    AssignLayoutTool,
    RemoveLayoutTool,
)
