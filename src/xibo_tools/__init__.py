"""xibo-tools - Typed Xibo CMS REST API tools for AI agents.

Every tool validates its input, issues one table-driven request (weather
lookups issue two), checks the response against a strict schema and answers
with a uniform envelope. Nothing raises across the tool boundary.

Quick Start:
    >>> from xibo_tools import CmsContext, build_registry
    >>>
    >>> registry = build_registry(CmsContext.from_settings())
    >>> await registry.execute("get_resolutions", {"enabled": True})
    {'success': True, 'data': [{'resolutionId': 1, 'resolution': 'HD', ...}]}

Single tool, synchronous:
    >>> from xibo_tools.tools.resolution import AddResolutionTool
    >>> AddResolutionTool()(resolution="Portrait", width=1080, height=1920)
    Success(success=True, data={...}, message='Resolution added')

Configuration comes from the environment (``CMS_URL``, ``XIBO_CLIENT_ID``,
``XIBO_CLIENT_SECRET``, ``XIBO_UPLOAD_DIR``, ``XIBO_LOG_LEVEL``...), see
``xibo_tools.foundation.config``.
"""

from .core import BaseTool, Envelope, Failure, Success, ToolMetadata, to_dict
from .foundation import BearerAuth, ClientCredentialsAuth, CmsContext, NoAuth, XiboSettings, get_settings
from .http import CmsParams, CmsTool, Endpoint
from .observability import configure_logging, get_logger
from .registry import ToolRegistry, build_registry
from .tools import ALL_TOOLS
from .utils import build_tree, create_tree_view_payload, generate_tree_view

__version__ = "0.1.0"

__all__ = [
    "ALL_TOOLS",
    "BaseTool",
    "BearerAuth",
    "ClientCredentialsAuth",
    "CmsContext",
    "CmsParams",
    "CmsTool",
    "Endpoint",
    "Envelope",
    "Failure",
    "NoAuth",
    "Success",
    "ToolMetadata",
    "ToolRegistry",
    "XiboSettings",
    "build_registry",
    "build_tree",
    "configure_logging",
    "create_tree_view_payload",
    "generate_tree_view",
    "get_logger",
    "get_settings",
    "to_dict",
]
