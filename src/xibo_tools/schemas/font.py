from __future__ import annotations

from .base import CmsModel


class Font(CmsModel):
    id: int
    name: str
    file_name: str | None = None
    family_name: str | None = None
    size: int | None = None
    md5: str | None = None
    created_at: str | None = None
    modified_at: str | None = None
    modified_by: str | None = None


class UploadedFile(CmsModel):
    """One entry of the upload handler's ``files`` list."""

    name: str
    media_id: int | None = None
    file_name: str | None = None
    media_type: str | None = None
    size: int | None = None
    md5: str | None = None
    error: str | None = None


class UploadResult(CmsModel):
    files: list[UploadedFile]
