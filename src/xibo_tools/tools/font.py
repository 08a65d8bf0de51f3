"""Font library tools."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..core import ToolMetadata
from ..http import CmsParams, CmsTool, Encoding, Endpoint, UploadParams
from ..schemas import Font, UploadResult


class FontFilter(CmsParams):
    id: int | None = Field(default=None, description="Filter by font ID")
    name: str | None = Field(default=None, description="Filter by font name")


class FontRef(CmsParams):
    id: int = Field(..., description="ID of the font")


class FontUploadInput(UploadParams):
    name: str | None = Field(default=None, description="Display name; defaults to the file name")
    old_media_id: int | None = Field(default=None, description="Font being replaced")


class GetFontsTool(CmsTool[FontFilter]):
    metadata = ToolMetadata(
        name="get_fonts",
        description="List fonts installed in the CMS library",
        category="font",
    )
    params_schema = FontFilter
    endpoint = Endpoint("GET", "/api/fonts")
    response = list[Font]


class GetFontDetailsTool(CmsTool[FontRef]):
    metadata = ToolMetadata(
        name="get_font_details",
        description="Get family and file details of one font",
        category="font",
    )
    params_schema = FontRef
    endpoint = Endpoint("GET", "/api/fonts/details/{id}")


class UploadFontTool(CmsTool[FontUploadInput]):
    """Upload a font file (ttf, otf, woff) from base64 content or the upload directory."""

    metadata = ToolMetadata(
        name="upload_font",
        description="Upload a font file to the CMS library",
        category="font",
        mutates=True,
    )
    params_schema = FontUploadInput
    endpoint = Endpoint("POST", "/api/fonts", Encoding.MULTIPART)
    response = UploadResult
    success_message = "Font uploaded"

    def _values(self, params: FontUploadInput) -> dict[str, Any]:
        values = params.wire()
        values.setdefault("name", params.file_name)
        return values


class DeleteFontTool(CmsTool[FontRef]):
    metadata = ToolMetadata(
        name="delete_font",
        description="Delete a font from the CMS library",
        category="font",
        mutates=True,
    )
    params_schema = FontRef
    endpoint = Endpoint("DELETE", "/api/fonts/{id}/delete")
    success_message = "Font deleted"


TOOLS = (GetFontsTool, GetFontDetailsTool, UploadFontTool, DeleteFontTool)
