from __future__ import annotations

from .base import CmsModel, Flag, TagLink


class Media(CmsModel):
    """Library item. ``storedAs`` is the file name on the CMS."""

    media_id: int
    name: str
    media_type: str
    owner_id: int | None = None
    parent_id: int | None = None
    stored_as: str | None = None
    file_name: str | None = None
    tags: list[TagLink] | None = None
    file_size: int | None = None
    duration: int | float | None = None
    valid: Flag | None = None
    expires: int | None = None
    retired: Flag | None = None
    is_edited: Flag | None = None
    md5: str | None = None
    owner: str | None = None
    released: int | None = None
    created_dt: str | None = None
    modified_dt: str | None = None
    enable_stat: str | None = None
    orientation: str | None = None
    width: int | None = None
    height: int | None = None
    folder_id: int | None = None
