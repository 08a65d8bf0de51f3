"""Schedule tools.

Dates go to the CMS as ``Y-m-d H:i:s`` strings and come back as unix
timestamps. Event types: 1 layout, 2 command, 3 overlay, 4 interrupt,
5 campaign, 6 action, 7 media, 8 playlist.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..core import Failure, ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint
from ..schemas import ScheduleEvent

Recurrence = Literal["Minute", "Hour", "Day", "Week", "Month", "Year"]


class ScheduleFilter(CmsParams):
    event_type_id: int | None = Field(default=None, description="Filter by event type")
    display_group_ids: list[int] | None = Field(default=None, description="Events on any of these display groups")
    from_dt: str | None = Field(default=None, description="Events starting from (Y-m-d H:i:s)")
    to_dt: str | None = Field(default=None, description="Events ending by (Y-m-d H:i:s)")
    geo_aware: bool | None = None
    recurring: bool | None = Field(default=None, description="Only recurring events")
    campaign_id: int | None = None


class ScheduleInput(CmsParams):
    event_type_id: int = Field(default=1, ge=1, le=8, description="Event type, 1 for a layout")
    campaign_id: int | None = Field(default=None, description="Layout or campaign to show")
    command_id: int | None = Field(default=None, description="Command to run, for command events")
    display_group_ids: list[int] = Field(..., min_length=1, description="Display groups to schedule on")
    from_dt: str = Field(..., description="Start (Y-m-d H:i:s)")
    to_dt: str | None = Field(default=None, description="End (Y-m-d H:i:s); not used by command events")
    day_part_id: int | None = Field(default=None, description="Daypart instead of explicit times")
    is_priority: int | None = Field(default=None, ge=0, description="Higher priority events hide lower ones")
    display_order: int | None = None
    recurrence_type: Recurrence | None = None
    recurrence_detail: int | None = Field(default=None, description="Repeat every N recurrence units")
    recurrence_range: str | None = Field(default=None, description="Last repeat (Y-m-d H:i:s)")
    recurrence_repeats_on: str | None = Field(default=None, description="Weekly: comma separated ISO weekdays 1-7")
    sync_event: bool | None = None
    name: str | None = Field(default=None, description="Optional event name")


class ScheduleRef(CmsParams):
    event_id: int = Field(..., description="ID of the scheduled event")


class ScheduleUpdate(ScheduleRef, ScheduleInput):
    pass


class DisplayGroupEventsRef(CmsParams):
    display_group_id: int = Field(..., description="Display group whose events are listed")


class GetScheduleTool(CmsTool[ScheduleFilter]):
    metadata = ToolMetadata(
        name="get_schedule",
        description="List scheduled events, filtered by type, display group or date range",
        category="schedule",
    )
    params_schema = ScheduleFilter
    endpoint = Endpoint("GET", "/api/schedule")
    response = list[ScheduleEvent]


class _ScheduleWriteTool(CmsTool[ScheduleInput]):
    response = ScheduleEvent

    def _precheck(self, params: ScheduleInput) -> Failure | None:
        if params.event_type_id == 2:
            if params.command_id is None:
                return Failure.precondition("commandId is required for command events", field="commandId")
        elif params.campaign_id is None:
            return Failure.precondition("campaignId is required for this event type", field="campaignId")
        return None


class AddScheduleTool(_ScheduleWriteTool):
    metadata = ToolMetadata(
        name="add_schedule",
        description="Schedule a layout, campaign or command on display groups",
        category="schedule",
        mutates=True,
    )
    params_schema = ScheduleInput
    endpoint = Endpoint("POST", "/api/schedule")
    success_message = "Event scheduled"


class EditScheduleTool(_ScheduleWriteTool):
    metadata = ToolMetadata(
        name="edit_schedule",
        description="Replace the settings of a scheduled event",
        category="schedule",
        mutates=True,
    )
    params_schema = ScheduleUpdate
    endpoint = Endpoint("PUT", "/api/schedule/{eventId}")
    success_message = "Event updated"


class DeleteScheduleTool(CmsTool[ScheduleRef]):
    metadata = ToolMetadata(
        name="delete_schedule",
        description="Delete a scheduled event and all its recurrences",
        category="schedule",
        mutates=True,
    )
    params_schema = ScheduleRef
    endpoint = Endpoint("DELETE", "/api/schedule/{eventId}")
    success_message = "Event deleted"


class DeleteScheduleRecurrenceTool(CmsTool[ScheduleRef]):
    metadata = ToolMetadata(
        name="delete_schedule_recurrence",
        description="Delete the recurrences of an event, keeping the first occurrence",
        category="schedule",
        mutates=True,
    )
    params_schema = ScheduleRef
    endpoint = Endpoint("DELETE", "/api/schedule/{eventId}/recurrence")
    success_message = "Recurrence deleted"


class GetDisplayGroupScheduleTool(CmsTool[DisplayGroupEventsRef]):
    metadata = ToolMetadata(
        name="get_display_group_schedule",
        description="List the events scheduled on one display group",
        category="schedule",
    )
    params_schema = DisplayGroupEventsRef
    endpoint = Endpoint("GET", "/api/schedule/displaygroup/{displayGroupId}")


TOOLS = (
    GetScheduleTool,
    AddScheduleTool,
    EditScheduleTool,
    DeleteScheduleTool,
    DeleteScheduleRecurrenceTool,
    GetDisplayGroupScheduleTool,
)
