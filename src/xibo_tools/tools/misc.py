"""CMS information tools."""

from __future__ import annotations

from ..core import EmptyParams, ToolMetadata
from ..http import CmsTool, Endpoint
from ..schemas import About, Clock


class GetAboutTool(CmsTool[EmptyParams]):
    metadata = ToolMetadata(
        name="get_about",
        description="Get the CMS version and source URL",
        category="misc",
    )
    params_schema = EmptyParams
    endpoint = Endpoint("GET", "/api/about")
    response = About


class GetCmsTimeTool(CmsTool[EmptyParams]):
    metadata = ToolMetadata(
        name="get_cms_time",
        description="Get the current date and time according to the CMS clock",
        category="misc",
    )
    params_schema = EmptyParams
    endpoint = Endpoint("GET", "/api/clock")
    response = Clock


TOOLS = (GetAboutTool, GetCmsTimeTool)
