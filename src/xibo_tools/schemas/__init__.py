"""Resource schemas for CMS and Open-Meteo payloads."""

from .base import CmsModel, Flag, LooseId, TagLink
from .command import Command
from .dataset import DataSet, DataSetColumn, DataSetRow, DataSetRss
from .display import Display, DisplayStatus
from .display_group import DisplayGroup, GroupMember
from .folder import Folder
from .font import Font, UploadedFile, UploadResult
from .layout import Campaign, Layout
from .library import Media
from .misc import About, Clock
from .notification import Notification, NotificationDisplayGroup, NotificationUserGroup
from .resolution import Resolution
from .schedule import ScheduleDisplayGroup, ScheduleEvent, ScheduleReminder
from .tag import Tag
from .user import User, UserGroup
from .weather import (
    CurrentConditions,
    CurrentForecast,
    DailySeries,
    GeocodingPlace,
    GeocodingResponse,
    WeeklyForecast,
)

__all__ = [
    "About",
    "Campaign",
    "Clock",
    "CmsModel",
    "Command",
    "CurrentConditions",
    "CurrentForecast",
    "DailySeries",
    "DataSet",
    "DataSetColumn",
    "DataSetRow",
    "DataSetRss",
    "Display",
    "DisplayGroup",
    "DisplayStatus",
    "Flag",
    "Folder",
    "Font",
    "GeocodingPlace",
    "GeocodingResponse",
    "GroupMember",
    "Layout",
    "LooseId",
    "Media",
    "Notification",
    "NotificationDisplayGroup",
    "NotificationUserGroup",
    "Resolution",
    "ScheduleDisplayGroup",
    "ScheduleEvent",
    "ScheduleReminder",
    "Tag",
    "TagLink",
    "UploadResult",
    "UploadedFile",
    "User",
    "UserGroup",
    "WeeklyForecast",
]
