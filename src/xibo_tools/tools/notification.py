"""Notification tools.

Target display groups and user groups travel as repeated ``displayGroupIds[]``
and ``userGroupIds[]`` form entries.
"""

from __future__ import annotations

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import Notification


class NotificationFilter(CmsParams):
    notification_id: int | None = Field(default=None, description="Filter by notification ID")
    subject: str | None = Field(default=None, description="Filter by subject")
    embed: str | None = Field(default=None, description="Embed userGroups and/or displayGroups")


class NotificationInput(CmsParams):
    subject: str = Field(..., min_length=1, description="Notification subject")
    body: str | None = Field(default=None, description="Notification body (HTML allowed)")
    release_dt: str | None = Field(default=None, description="Release date, Y-m-d H:i:s")
    is_interrupt: bool | None = Field(default=None, description="Interrupt the web portal navigation")
    display_group_ids: list[int] = Field(default_factory=list, description="Display groups to notify")
    user_group_ids: list[int] = Field(default_factory=list, description="User groups to notify")


class NotificationUpdate(NotificationInput):
    notification_id: int = Field(..., description="ID of the notification to edit")


class NotificationRef(CmsParams):
    notification_id: int = Field(..., description="ID of the notification")


class GetNotificationsTool(CmsTool[NotificationFilter]):
    metadata = ToolMetadata(
        name="get_notifications",
        description="List notifications visible to the current user",
        category="notification",
    )
    params_schema = NotificationFilter
    endpoint = Endpoint("GET", "/api/notification")
    response = list[Notification]


class AddNotificationTool(CmsTool[NotificationInput]):
    metadata = ToolMetadata(
        name="add_notification",
        description="Send a notification to display groups and user groups",
        category="notification",
        mutates=True,
    )
    params_schema = NotificationInput
    endpoint = Endpoint("POST", "/api/notification")
    response = Notification
    success_message = "Notification added"


class EditNotificationTool(CmsTool[NotificationUpdate]):
    metadata = ToolMetadata(
        name="edit_notification",
        description="Edit the subject, body or recipients of a notification",
        category="notification",
        mutates=True,
    )
    params_schema = NotificationUpdate
    endpoint = Endpoint("PUT", "/api/notification/{notificationId}")
    response = Notification
    success_message = "Notification updated"


class DeleteNotificationTool(CmsTool[NotificationRef]):
    metadata = ToolMetadata(
        name="delete_notification",
        description="Delete a notification",
        category="notification",
        mutates=True,
    )
    params_schema = NotificationRef
    endpoint = Endpoint("DELETE", "/api/notification/{notificationId}")
    success_message = "Notification deleted"


TOOLS = (GetNotificationsTool, AddNotificationTool, EditNotificationTool, DeleteNotificationTool)
