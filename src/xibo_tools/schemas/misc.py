from __future__ import annotations

from .base import CmsModel


class About(CmsModel):
    version: str
    source_url: str | None = None


class Clock(CmsModel):
    time: str
