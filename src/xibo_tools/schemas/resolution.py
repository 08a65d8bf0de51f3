from __future__ import annotations

from .base import CmsModel, Flag


class Resolution(CmsModel):
    resolution_id: int
    resolution: str
    width: int
    height: int
    enabled: Flag | None = None
    designer_width: int | None = None
    designer_height: int | None = None
    version: int | None = None
    user_id: int | None = None
