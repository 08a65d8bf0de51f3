"""Central registry for tool discovery and execution.

The registry provides:
- Tool registration and lookup by name
- Category-based filtering
- Input JSON schemas and prompt descriptions for an LLM agent
- ``execute``, which always answers with an envelope mapping
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel

from .core import BaseTool, Failure, ToolMetadata
from .foundation import CmsContext
from .observability import configure_from_settings, get_logger

log = get_logger("xibo_tools.registry")


class ToolRegistry:
    """Name-indexed set of tool instances.

    Example:
        >>> registry = build_registry(CmsContext.from_settings())
        >>> envelope = await registry.execute("get_resolutions", {"enabled": True})
        >>> envelope["success"]
        True
    """

    __slots__ = ("_tools",)

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool[BaseModel]] = {}

    def register(self, tool: BaseTool[BaseModel]) -> None:
        name = tool.metadata.name
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered. Use unregister() first.")
        self._tools[name] = tool

    def register_all(self, *tools: BaseTool[BaseModel]) -> None:
        for tool in tools:
            self.register(tool)

    def unregister(self, name: str) -> bool:
        """Remove a tool by name. Returns True if found."""
        return self._tools.pop(name, None) is not None

    def get(self, name: str) -> BaseTool[BaseModel] | None:
        return self._tools.get(name)

    def __getitem__(self, name: str) -> BaseTool[BaseModel]:
        return self._tools[name]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[BaseTool[BaseModel]]:
        return iter(self._tools.values())

    # ─────────────────────────────────────────────────────────────────
    # Discovery
    # ─────────────────────────────────────────────────────────────────

    def list_tools(self, category: str | None = None) -> list[ToolMetadata]:
        return [t.metadata for t in self._tools.values() if category is None or t.metadata.category == category]

    def categories(self) -> set[str]:
        return {t.metadata.category for t in self._tools.values()}

    def schemas(self) -> list[dict[str, Any]]:
        """Function-calling definitions: name, description and camelCase input schema."""
        return [
            {
                "name": t.metadata.name,
                "description": t.metadata.description,
                "parameters": t.params_schema.model_json_schema(by_alias=True),
            }
            for t in self._tools.values()
        ]

    def describe(self) -> str:
        """Formatted descriptions of all tools for prompts."""
        lines = []
        for tool in self._tools.values():
            m = tool.metadata
            flag = " ✎" if m.mutates else ""
            lines.append(f"- **{m.name}** ({m.category}){flag}: {m.description}")
        return "\n".join(lines + (["\n_✎ = changes CMS state_"] if lines else []))

    # ─────────────────────────────────────────────────────────────────
    # Execution
    # ─────────────────────────────────────────────────────────────────

    async def execute(self, name: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Validate ``params`` and run tool ``name``; the result is always an envelope mapping."""
        tool = self._tools.get(name)
        if tool is None:
            log.warning("unknown tool", tool=name)
            return Failure.not_found(f"Tool '{name}' not found", resource="tool").to_dict()
        validated = tool.validate(params or {})
        if isinstance(validated, Failure):
            return validated.to_dict()
        envelope = await tool.arun(validated)
        return envelope.to_dict()

    def clear(self) -> None:
        self._tools.clear()


def build_registry(context: CmsContext | None = None, tools: Iterable[type[Any]] | None = None) -> ToolRegistry:
    """Registry holding one instance of every catalogued tool, all bound to ``context``.

    Logging is configured from ``context.settings.logging`` (``XIBO_LOG_*``).
    """
    from .tools import ALL_TOOLS

    context = context or CmsContext.from_settings()
    configure_from_settings(context.settings.logging)
    registry = ToolRegistry()
    registry.register_all(*(tool_cls(context) for tool_cls in (tools if tools is not None else ALL_TOOLS)))
    return registry
