"""Display group tools: group CRUD, membership and group-wide player actions.

Actions sent to a group reach every display in it on the players' next
collection, unless the group is collected immediately with
``collect_now_for_display_group``.
"""

from __future__ import annotations

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import DisplayGroup


class DisplayGroupFilter(CmsParams):
    display_group_id: int | None = Field(default=None, description="Filter by display group ID")
    display_group: str | None = Field(default=None, description="Filter by group name")
    display_id: int | None = Field(default=None, description="Groups containing this display")
    nested_display_id: int | None = Field(default=None, description="Groups containing this display at any depth")
    dynamic_criteria: str | None = Field(default=None, description="Filter by dynamic criteria")
    is_display_specific: bool | None = Field(default=None, description="Include the per-display groups")
    folder_id: int | None = None
    embed: str | None = Field(default=None, description="Embed displays or tags")


class DisplayGroupInput(CmsParams):
    display_group: str = Field(..., min_length=1, description="Group name")
    description: str | None = None
    tags: str | None = Field(default=None, description="Comma separated tags")
    is_dynamic: bool | None = Field(default=None, description="Members are chosen by dynamic criteria")
    dynamic_criteria: str | None = Field(default=None, description="Display name filter for dynamic groups")
    dynamic_criteria_tags: str | None = Field(default=None, description="Display tag filter for dynamic groups")
    folder_id: int | None = None


class DisplayGroupRef(CmsParams):
    display_group_id: int = Field(..., description="ID of the display group")


class DisplayGroupUpdate(DisplayGroupRef, DisplayGroupInput):
    pass


class DisplayGroupCopy(DisplayGroupRef):
    display_group: str = Field(..., min_length=1, description="Name of the new group")
    description: str | None = None
    folder_id: int | None = None


class DisplayGroupMembers(DisplayGroupRef):
    display_id: list[int] = Field(..., min_length=1, description="Displays to add or remove, in order")


class DisplayGroupFolder(DisplayGroupRef):
    folder_id: int = Field(..., description="Destination folder")


class DisplayGroupCommand(DisplayGroupRef):
    command_id: int = Field(..., description="Command to send to every display in the group")


class GetDisplayGroupsTool(CmsTool[DisplayGroupFilter]):
    metadata = ToolMetadata(
        name="get_display_groups",
        description="List display groups, optionally with their member displays",
        category="display_group",
    )
    params_schema = DisplayGroupFilter
    endpoint = Endpoint("GET", "/api/displaygroup")
    response = list[DisplayGroup]


class AddDisplayGroupTool(CmsTool[DisplayGroupInput]):
    metadata = ToolMetadata(
        name="add_display_group",
        description="Create a static or dynamic display group",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupInput
    endpoint = Endpoint("POST", "/api/displaygroup")
    response = DisplayGroup
    success_message = "Display group added"


class EditDisplayGroupTool(CmsTool[DisplayGroupUpdate]):
    metadata = ToolMetadata(
        name="edit_display_group",
        description="Edit a display group's name, description, tags or dynamic criteria",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupUpdate
    endpoint = Endpoint("PUT", "/api/displaygroup/{displayGroupId}")
    response = DisplayGroup
    success_message = "Display group updated"


class DeleteDisplayGroupTool(CmsTool[DisplayGroupRef]):
    metadata = ToolMetadata(
        name="delete_display_group",
        description="Delete a display group; its displays are kept",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupRef
    endpoint = Endpoint("DELETE", "/api/displaygroup/{displayGroupId}")
    success_message = "Display group deleted"


class CopyDisplayGroupTool(CmsTool[DisplayGroupCopy]):
    metadata = ToolMetadata(
        name="copy_display_group",
        description="Copy a display group under a new name",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupCopy
    endpoint = Endpoint("POST", "/api/displaygroup/{displayGroupId}/copy")
    response = DisplayGroup
    success_message = "Display group copied"


class AssignDisplaysTool(CmsTool[DisplayGroupMembers]):
    metadata = ToolMetadata(
        name="assign_displays_to_display_group",
        description="Add displays to a static display group",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupMembers
    endpoint = Endpoint("POST", "/api/displaygroup/{displayGroupId}/display/assign")
    success_message = "Displays assigned"


class UnassignDisplaysTool(CmsTool[DisplayGroupMembers]):
    metadata = ToolMetadata(
        name="unassign_displays_from_display_group",
        description="Remove displays from a static display group",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupMembers
    endpoint = Endpoint("POST", "/api/displaygroup/{displayGroupId}/display/unassign")
    success_message = "Displays unassigned"


class SelectDisplayGroupFolderTool(CmsTool[DisplayGroupFolder]):
    metadata = ToolMetadata(
        name="select_display_group_folder",
        description="Move a display group to another folder",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupFolder
    endpoint = Endpoint("PUT", "/api/displaygroup/{displayGroupId}/selectfolder")
    success_message = "Display group moved"


class CollectNowTool(CmsTool[DisplayGroupRef]):
    metadata = ToolMetadata(
        name="collect_now_for_display_group",
        description="Ask every display in a group to collect from the CMS now",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupRef
    endpoint = Endpoint("POST", "/api/displaygroup/{displayGroupId}/action/collectNow")
    success_message = "Collect now requested"


class RevertToScheduleTool(CmsTool[DisplayGroupRef]):
    metadata = ToolMetadata(
        name="revert_display_group_to_schedule",
        description="Drop any layout change or overlay and return the group to its schedule",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupRef
    endpoint = Endpoint("POST", "/api/displaygroup/{displayGroupId}/action/revertToSchedule")
    success_message = "Display group reverted to schedule"


class SendGroupCommandTool(CmsTool[DisplayGroupCommand]):
    metadata = ToolMetadata(
        name="send_command_to_display_group",
        description="Send a player command to every display in a group",
        category="display_group",
        mutates=True,
    )
    params_schema = DisplayGroupCommand
    endpoint = Endpoint("POST", "/api/displaygroup/{displayGroupId}/action/command")
    success_message = "Command sent"


TOOLS = (
    GetDisplayGroupsTool,
    AddDisplayGroupTool,
    EditDisplayGroupTool,
    DeleteDisplayGroupTool,
    CopyDisplayGroupTool,
    AssignDisplaysTool,
    UnassignDisplaysTool,
    SelectDisplayGroupFolderTool,
    CollectNowTool,
    RevertToScheduleTool,
    SendGroupCommandTool,
)
