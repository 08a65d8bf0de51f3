from __future__ import annotations

from .base import CmsModel, Flag


class Tag(CmsModel):
    tag_id: int
    tag: str
    is_system: Flag
    is_required: Flag
    options: list[str] | str | None = None
