"""Media library tools."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Encoding, Endpoint, UploadParams
from ..schemas import Media, UploadResult


class LibraryFilter(CmsParams):
    media_id: int | None = Field(default=None, description="Filter by media ID")
    media: str | None = Field(default=None, description="Filter by name (partial match)")
    type: str | None = Field(default=None, description="Filter by module type, e.g. image or video")
    owner_id: int | None = None
    retired: bool | None = None
    tags: str | None = Field(default=None, description="Comma separated tags to match")
    exact_tags: bool | None = None
    folder_id: int | None = None


class MediaUploadInput(UploadParams):
    name: str | None = Field(default=None, description="Media name; defaults to the file name")
    old_media_id: int | None = Field(default=None, description="Media item this upload replaces")
    update_in_layouts: bool | None = Field(default=None, description="Swap the replaced item in every layout")
    delete_old_revisions: bool | None = None
    tags: str | None = Field(default=None, description="Comma separated tags")
    expires: str | None = Field(default=None, description="Expiry (Y-m-d H:i:s)")
    playlist_id: int | None = Field(default=None, description="Also add the media to this playlist")
    folder_id: int | None = None


class MediaRef(CmsParams):
    media_id: int = Field(..., description="ID of the media item")


class MediaUpdate(MediaRef):
    name: str = Field(..., min_length=1, description="Media name")
    duration: int = Field(..., ge=0, description="Default duration in seconds")
    retired: bool = Field(default=False)
    tags: str | None = Field(default=None, description="Comma separated tags")
    update_in_layouts: bool | None = Field(default=None, description="Apply the new duration in every layout")
    expires: str | None = Field(default=None, description="Expiry (Y-m-d H:i:s)")
    folder_id: int | None = None


class MediaCopy(MediaRef):
    name: str = Field(..., min_length=1, description="Name of the copy")
    tags: str | None = None


class MediaDelete(MediaRef):
    force_delete: bool | None = Field(default=None, description="Delete even when used in layouts")


class TidyInput(CmsParams):
    tidy_generic_files: bool | None = Field(default=None, description="Also remove unused generic files")


class GetLibraryTool(CmsTool[LibraryFilter]):
    metadata = ToolMetadata(
        name="get_library",
        description="List media in the library",
        category="library",
    )
    params_schema = LibraryFilter
    endpoint = Endpoint("GET", "/api/library")
    response = list[Media]


class AddMediaTool(CmsTool[MediaUploadInput]):
    """Upload an image, video or other file from base64 content or the upload directory."""

    metadata = ToolMetadata(
        name="add_media",
        description="Upload a file to the media library",
        category="library",
        mutates=True,
    )
    params_schema = MediaUploadInput
    endpoint = Endpoint("POST", "/api/library", Encoding.MULTIPART)
    response = UploadResult
    success_message = "Media uploaded"

    def _values(self, params: MediaUploadInput) -> dict[str, Any]:
        values = params.wire()
        values.setdefault("name", params.file_name)
        return values


class EditMediaTool(CmsTool[MediaUpdate]):
    metadata = ToolMetadata(
        name="edit_media",
        description="Edit a media item's name, duration, tags or expiry",
        category="library",
        mutates=True,
    )
    params_schema = MediaUpdate
    endpoint = Endpoint("PUT", "/api/library/{mediaId}")
    response = Media
    success_message = "Media updated"


class CopyMediaTool(CmsTool[MediaCopy]):
    metadata = ToolMetadata(
        name="copy_media",
        description="Copy a media item under a new name",
        category="library",
        mutates=True,
    )
    params_schema = MediaCopy
    endpoint = Endpoint("POST", "/api/library/copy/{mediaId}")
    response = Media
    success_message = "Media copied"


class IsMediaUsedTool(CmsTool[MediaRef]):
    metadata = ToolMetadata(
        name="is_media_used",
        description="Check whether a media item is used in layouts, playlists or schedules",
        category="library",
    )
    params_schema = MediaRef
    endpoint = Endpoint("GET", "/api/library/{mediaId}/isused")


class DeleteMediaTool(CmsTool[MediaDelete]):
    metadata = ToolMetadata(
        name="delete_media",
        description="Delete a media item from the library",
        category="library",
        mutates=True,
    )
    params_schema = MediaDelete
    endpoint = Endpoint("DELETE", "/api/library/{mediaId}")
    success_message = "Media deleted"


class TidyLibraryTool(CmsTool[TidyInput]):
    metadata = ToolMetadata(
        name="tidy_library",
        description="Remove unused media revisions from the library",
        category="library",
        mutates=True,
    )
    params_schema = TidyInput
    endpoint = Endpoint("DELETE", "/api/library/tidy")
    success_message = "Library tidied"


TOOLS = (
    GetLibraryTool,
    AddMediaTool,
    EditMediaTool,
    CopyMediaTool,
    IsMediaUsedTool,
    DeleteMediaTool,
    TidyLibraryTool,
)
