from __future__ import annotations

from .base import CmsModel, Flag, TagLink


class GroupMember(CmsModel):
    """Display embedded in a group (``embed=displays``)."""

    display_id: int
    display: str


class DisplayGroup(CmsModel):
    display_group_id: int
    display_group: str
    description: str | None = None
    is_display_specific: Flag
    is_dynamic: Flag
    dynamic_criteria: str | None = None
    dynamic_criteria_tags: str | None = None
    dynamic_criteria_exact_tags: Flag | None = None
    user_id: int | None = None
    tags: list[TagLink] | None = None
    bandwidth_limit: int | None = None
    created_dt: str | None = None
    modified_dt: str | None = None
    folder_id: int | None = None
    permissions_folder_id: int | None = None
    ref1: str | None = None
    ref2: str | None = None
    ref3: str | None = None
    ref4: str | None = None
    ref5: str | None = None
    displays: list[GroupMember] | None = None
