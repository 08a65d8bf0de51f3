from __future__ import annotations

from .base import CmsModel, Flag, LooseId, TagLink


class Layout(CmsModel):
    """Layout or draft. Older CMS builds send numeric fields as strings."""

    layout_id: LooseId
    layout: str | None = None
    description: str | None = None
    campaign_id: LooseId | None = None
    parent_id: LooseId | None = None
    owner_id: LooseId | None = None
    published_status_id: LooseId | None = None
    published_status: str | None = None
    published_date: str | None = None
    status: LooseId | None = None
    retired: LooseId | None = None
    width: int | float | str | None = None
    height: int | float | str | None = None
    orientation: str | None = None
    duration: LooseId | None = None
    enable_stat: LooseId | None = None
    code: str | None = None
    folder_id: int | None = None
    created_dt: str | None = None
    modified_dt: str | None = None
    tags: list[TagLink] | None = None


class Campaign(CmsModel):
    campaign_id: int
    campaign: str
    type: str | None = None
    owner_id: int | None = None
    is_layout_specific: Flag | None = None
    number_layouts: int | None = None
    total_duration: int | None = None
    tags: list[TagLink] | None = None
    folder_id: int | None = None
    cycle_playback_enabled: Flag | None = None
    play_count: int | None = None
    list_play_order: str | None = None
    target_type: str | None = None
    target: int | None = None
    start_dt: int | None = None
    end_dt: int | None = None
    created_dt: str | None = None
    modified_dt: str | None = None
    layouts: list[Layout] | None = None
