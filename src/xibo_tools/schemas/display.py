from __future__ import annotations

from .base import CmsModel, Flag, TagLink


class Display(CmsModel):
    display_id: int
    display: str
    description: str | None = None
    display_group_id: int | None = None
    default_layout_id: int | None = None
    license: str | None = None
    licensed: Flag | None = None
    logged_in: Flag | None = None
    last_accessed: int | str | None = None
    client_address: str | None = None
    client_type: str | None = None
    client_version: str | None = None
    mac_address: str | None = None
    media_inventory_status: int | None = None
    wake_on_lan_enabled: Flag | None = None
    is_mobile: Flag | None = None
    is_outdoor: Flag | None = None
    folder_id: int | None = None
    tags: list[TagLink] | None = None


class DisplayStatus(CmsModel):
    """Status document reported by the player; shape varies by player type."""
