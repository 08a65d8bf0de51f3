from __future__ import annotations

from .base import CmsModel, Flag, LooseId


class Folder(CmsModel):
    """Folder node; ``children`` nests further folders when the CMS sends a tree."""

    id: int
    text: str
    type: str | None = None
    parent_id: LooseId | None = None
    is_root: Flag | None = None
    children: list[Folder] | str | None = None
    permissions_folder_id: int | None = None
    folder_id: int | None = None
    folder_name: str | None = None
