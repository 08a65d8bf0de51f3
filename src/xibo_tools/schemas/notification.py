from __future__ import annotations

from .base import CmsModel, Flag


class NotificationUserGroup(CmsModel):
    group_id: int
    group: str


class NotificationDisplayGroup(CmsModel):
    display_group_id: int
    display_group: str


class Notification(CmsModel):
    notification_id: int
    subject: str
    body: str
    create_dt: str | int | None = None
    release_dt: str | int | None = None
    is_email: Flag | None = None
    is_interrupt: Flag
    is_system: Flag
    user_id: int
    filename: str | None = None
    original_file_name: str | None = None
    nonusers: str | None = None
    user_groups: list[NotificationUserGroup] | None = None
    display_groups: list[NotificationDisplayGroup] | None = None
