from __future__ import annotations

from .base import CmsModel


class Command(CmsModel):
    command_id: int
    command: str
    code: str
    description: str | None = None
    user_id: int | None = None
    command_string: str | None = None
    validation_string: str | None = None
    display_profile_id: int | None = None
    available_on: str | None = None
    create_alert_on: str | None = None
