from __future__ import annotations

from .base import CmsModel, Flag


class ScheduleDisplayGroup(CmsModel):
    display_group_id: int
    display_group: str


class ScheduleReminder(CmsModel):
    schedule_reminder_id: int
    event_id: int
    value: int
    type: int
    option: int
    is_email: Flag


class ScheduleEvent(CmsModel):
    """One scheduled event. ``fromDt``/``toDt`` are unix timestamps."""

    event_id: int
    event_type_id: int
    campaign_id: int | None = None
    command_id: int | None = None
    display_groups: list[ScheduleDisplayGroup] | None = None
    schedule_reminders: list[ScheduleReminder] | None = None
    user_id: int | None = None
    from_dt: int | None = None
    to_dt: int | None = None
    is_priority: int | None = None
    display_order: int | None = None
    recurrence_type: str | None = None
    recurrence_detail: int | str | None = None
    recurrence_range: int | None = None
    recurrence_repeats_on: str | None = None
    campaign: str | None = None
    command: str | None = None
    day_part_id: int | None = None
    is_always: Flag | None = None
    is_custom: Flag | None = None
    sync_event: Flag | None = None
    share_of_voice: int | None = None
    max_plays_per_hour: int | None = None
    is_geo_aware: Flag | None = None
    name: str | None = None
