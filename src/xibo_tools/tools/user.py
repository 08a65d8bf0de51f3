"""User tools."""

from __future__ import annotations

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import User


class CurrentUserParams(CmsParams):
    embed: str | None = Field(default=None, description="Embed related data, e.g. groups")


class UserFilter(CmsParams):
    user_id: int | None = Field(default=None, description="Filter by user ID")
    user_name: str | None = Field(default=None, description="Filter by user name")
    user_type_id: int | None = Field(default=None, description="Filter by user type ID")
    retired: bool | None = Field(default=None, description="Filter by retired flag")
    first_name: str | None = None
    last_name: str | None = None


class GetCurrentUserTool(CmsTool[CurrentUserParams]):
    metadata = ToolMetadata(
        name="get_current_user",
        description="Get the user the API client is acting as",
        category="user",
    )
    params_schema = CurrentUserParams
    endpoint = Endpoint("GET", "/api/user/me")
    response = User


class GetUsersTool(CmsTool[UserFilter]):
    metadata = ToolMetadata(
        name="get_users",
        description="Search CMS users by name, type or retired state",
        category="user",
    )
    params_schema = UserFilter
    endpoint = Endpoint("GET", "/api/user")
    response = list[User]


TOOLS = (GetCurrentUserTool, GetUsersTool)
