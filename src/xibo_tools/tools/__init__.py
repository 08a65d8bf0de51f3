"""Tool catalogue, grouped by CMS resource family."""

from . import (
    campaign,
    command,
    dataset,
    display,
    display_group,
    folder,
    font,
    layout,
    library,
    misc,
    notification,
    resolution,
    schedule,
    tag,
    user,
    weather,
)

ALL_TOOLS = (
    *misc.TOOLS,
    *resolution.TOOLS,
    *dataset.TOOLS,
    *folder.TOOLS,
    *font.TOOLS,
    *library.TOOLS,
    *layout.TOOLS,
    *campaign.TOOLS,
    *schedule.TOOLS,
    *notification.TOOLS,
    *display.TOOLS,
    *display_group.TOOLS,
    *user.TOOLS,
    *tag.TOOLS,
    *command.TOOLS,
    *weather.TOOLS,
)

__all__ = [
    "ALL_TOOLS",
    "campaign",
    "command",
    "dataset",
    "display",
    "display_group",
    "folder",
    "font",
    "layout",
    "library",
    "misc",
    "notification",
    "resolution",
    "schedule",
    "tag",
    "user",
    "weather",
]
