from __future__ import annotations

from .base import CmsModel, Flag


class UserGroup(CmsModel):
    group_id: int
    group: str


class User(CmsModel):
    user_id: int
    user_name: str
    user_type_id: int
    user_group_id: int | None = None
    logged_in: Flag | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    last_accessed: str | None = None
    home_page_id: str | int | None = None
    home_folder_id: int | None = None
    retired: Flag | None = None
    is_locked: Flag | None = None
    groups: list[UserGroup] | None = None
