"""Core tool abstractions: BaseTool and ToolMetadata.

A tool is a class with a typed parameter schema and an async ``_execute``
that returns an envelope. BaseTool owns input validation and the outermost
error boundary, so nothing raised inside a tool ever reaches the agent.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..observability import BoundLogger, get_logger
from .envelope import Envelope, Failure

if TYPE_CHECKING:
    from collections.abc import Coroutine


class ToolMetadata(BaseModel):
    """Metadata describing a tool for discovery and LLM tool selection.

    Attributes:
        name: Unique identifier (snake_case, e.g., "get_resolutions")
        description: What the tool does (shown to the LLM)
        category: CMS resource family (e.g., "resolution", "dataset")
        mutates: Whether the tool changes server state
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    description: str = Field(..., min_length=10)
    category: str = Field(default="general")
    mutates: bool = Field(default=False)


class EmptyParams(BaseModel):
    """Parameter schema for tools with no inputs."""

    model_config = ConfigDict(extra="forbid")


TParams = TypeVar("TParams", bound=BaseModel)


class BaseTool(ABC, Generic[TParams]):
    """Abstract base class for all tools.

    Subclasses must:
    - Define `metadata` class variable with ToolMetadata
    - Define `params_schema` class variable with the Pydantic model type
    - Implement `async _execute(params)` returning an envelope

    Example:
        >>> class PingTool(BaseTool[EmptyParams]):
        ...     metadata = ToolMetadata(name="ping", description="Answer with a success envelope")
        ...     params_schema = EmptyParams
        ...
        ...     async def _execute(self, params: EmptyParams) -> Envelope:
        ...         return Success(data="pong")
    """

    metadata: ClassVar[ToolMetadata]
    params_schema: ClassVar[type[BaseModel]] = EmptyParams

    @property
    def log(self) -> BoundLogger:
        return get_logger("xibo_tools.tool").bind_tool(self.metadata.name, self.metadata.category)

    @abstractmethod
    async def _execute(self, params: TParams) -> Envelope:
        """Perform the call. May return a Failure; raising is caught by arun."""
        ...

    # ─────────────────────────────────────────────────────────────────
    # Execution
    # ─────────────────────────────────────────────────────────────────

    async def arun(self, params: TParams) -> Envelope:
        """Run with validated params. Unanticipated exceptions become Failures."""
        try:
            return await self._execute(params)
        except Exception as e:
            self.log.exception("unexpected tool error", error=type(e).__name__)
            return Failure.unexpected(e, self.metadata.name)

    def validate(self, raw: dict[str, Any] | BaseModel) -> TParams | Failure:
        """Coerce raw input into ``params_schema`` or describe why it does not fit."""
        if isinstance(raw, self.params_schema):
            return raw  # type: ignore[return-value]
        data = raw.model_dump(by_alias=True) if isinstance(raw, BaseModel) else raw
        try:
            return self.params_schema.model_validate(data)  # type: ignore[return-value]
        except ValidationError as e:
            return Failure.invalid_params(e, self.metadata.name)

    async def acall(self, **kwargs: Any) -> Envelope:
        """Validate keyword input, then run."""
        params = self.validate(kwargs)
        if isinstance(params, Failure):
            return params
        return await self.arun(params)

    def run(self, params: TParams) -> Envelope:
        """Synchronous entry point."""
        return self._run_async_sync(self.arun(params))

    def __call__(self, **kwargs: Any) -> Envelope:
        return self._run_async_sync(self.acall(**kwargs))

    def _run_async_sync(self, coro: Coroutine[None, None, Envelope]) -> Envelope:
        """Run a coroutine from sync code, inside or outside a running loop."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(coro)
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, coro).result()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.metadata.name!r})"
