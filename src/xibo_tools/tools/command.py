"""Player command tools."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import Command


class CommandFilter(CmsParams):
    command_id: int | None = Field(default=None, description="Filter by command ID")
    command: str | None = Field(default=None, description="Filter by command name")
    code: str | None = Field(default=None, description="Filter by command code")


class CommandInput(CmsParams):
    command: str = Field(..., min_length=1, description="Command name")
    code: str = Field(..., min_length=1, description="Code players use to reference the command")
    description: str | None = None
    command_string: str | None = Field(default=None, description="Default command string sent to players")
    validation_string: str | None = Field(default=None, description="Expected output for validation")
    available_on: str | None = Field(default=None, description="Comma separated player types")
    create_alert_on: Literal["success", "failure", "always", "never"] | None = None


class CommandUpdate(CmsParams):
    command_id: int = Field(..., description="ID of the command to edit")
    command: str = Field(..., min_length=1, description="Command name")
    description: str | None = None
    command_string: str | None = Field(default=None, description="Default command string sent to players")
    validation_string: str | None = Field(default=None, description="Expected output for validation")
    available_on: str | None = Field(default=None, description="Comma separated player types")
    create_alert_on: Literal["success", "failure", "always", "never"] | None = None


class CommandRef(CmsParams):
    command_id: int = Field(..., description="ID of the command")


class GetCommandsTool(CmsTool[CommandFilter]):
    metadata = ToolMetadata(
        name="get_commands",
        description="List commands that can be sent to players",
        category="command",
    )
    params_schema = CommandFilter
    endpoint = Endpoint("GET", "/api/command")
    response = list[Command]


class AddCommandTool(CmsTool[CommandInput]):
    metadata = ToolMetadata(
        name="add_command",
        description="Create a player command",
        category="command",
        mutates=True,
    )
    params_schema = CommandInput
    endpoint = Endpoint("POST", "/api/command")
    response = Command
    success_message = "Command added"


class EditCommandTool(CmsTool[CommandUpdate]):
    metadata = ToolMetadata(
        name="edit_command",
        description="Edit a player command; its code cannot be changed",
        category="command",
        mutates=True,
    )
    params_schema = CommandUpdate
    endpoint = Endpoint("PUT", "/api/command/{commandId}")
    response = Command
    success_message = "Command updated"


class DeleteCommandTool(CmsTool[CommandRef]):
    metadata = ToolMetadata(
        name="delete_command",
        description="Delete a player command",
        category="command",
        mutates=True,
    )
    params_schema = CommandRef
    endpoint = Endpoint("DELETE", "/api/command/{commandId}")
    success_message = "Command deleted"


TOOLS = (GetCommandsTool, AddCommandTool, EditCommandTool, DeleteCommandTool)
