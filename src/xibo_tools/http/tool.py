"""Table-driven CMS tool.

A concrete tool is a declaration: metadata, a params model, an ``Endpoint``
and a response type. Hooks cover the few tools that need more:

    _precheck      input rules checked before any network activity
    _json_body     document body for JSON endpoints
    _postprocess   reshape a successful envelope (tree views, summaries)

Example:
    >>> class GetResolutionsTool(CmsTool[ResolutionFilter]):
    ...     metadata = ToolMetadata(name="get_resolutions", description="List display resolutions", category="resolution")
    ...     params_schema = ResolutionFilter
    ...     endpoint = Endpoint("GET", "/api/resolution")
    ...     response = list[Resolution]
"""

from __future__ import annotations

import base64
import binascii
import mimetypes
from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from ..core import BaseTool, Envelope, Failure, Success
from ..core.base import TParams
from ..foundation.context import CmsContext
from ..foundation.errors import Err, Ok, Result
from .dispatch import dispatch
from .request import Encoding, Endpoint, FilePart, RequestDescriptor, build_request


class CmsParams(BaseModel):
    """Tool input. Accepts camelCase (wire) or snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def wire(self) -> dict[str, Any]:
        """Wire-named values, dropping unset optionals and local-only fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class UploadParams(CmsParams):
    """Input for multipart uploads: inline base64 content or a path under the upload dir."""

    file_name: str = Field(..., exclude=True, min_length=1, description="File name sent to the CMS")
    file_content: str | None = Field(default=None, exclude=True, description="Base64-encoded file content")
    file_path: str | None = Field(default=None, exclude=True, description="Path relative to the upload directory")

    def load(self, upload_dir: Path) -> Result[bytes, Failure]:
        if self.file_content is not None:
            try:
                return Ok(base64.b64decode(self.file_content, validate=True))
            except (binascii.Error, ValueError):
                return Err(Failure.precondition("fileContent is not valid base64", field="fileContent"))
        if self.file_path is not None:
            root = upload_dir.resolve()
            path = (root / self.file_path).resolve()
            if not path.is_relative_to(root):
                return Err(Failure.precondition("filePath must stay inside the upload directory", field="filePath"))
            try:
                return Ok(path.read_bytes())
            except OSError as e:
                return Err(Failure.precondition(f"Cannot read {path}: {e.strerror or e}", field="filePath"))
        return Err(Failure.precondition("Either fileContent or filePath is required", field="fileContent"))

    @property
    def content_type(self) -> str:
        return mimetypes.guess_type(self.file_name)[0] or "application/octet-stream"


class CmsTool(BaseTool[TParams]):
    """BaseTool bound to one CMS endpoint and one response schema."""

    endpoint: ClassVar[Endpoint]
    response: ClassVar[Any] = None
    success_message: ClassVar[str | None] = None
    _adapter: ClassVar[TypeAdapter[Any] | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "response" in cls.__dict__:
            cls._adapter = TypeAdapter(cls.response) if cls.response is not None else None

    def __init__(self, context: CmsContext | None = None) -> None:
        self.context = context or CmsContext.from_settings()

    # ─────────────────────────────────────────────────────────────────
    # Hooks
    # ─────────────────────────────────────────────────────────────────

    def base_url(self) -> str:
        return self.context.cms_url

    def _endpoint_for(self, params: TParams) -> Endpoint:
        return self.endpoint

    def _schema_for(self, params: TParams) -> TypeAdapter[Any] | None:
        return self._adapter

    def _values(self, params: TParams) -> dict[str, Any]:
        """Wire-named parameter values for path, query and body."""
        if isinstance(params, CmsParams):
            return params.wire()
        return params.model_dump(by_alias=True, exclude_none=True, mode="json")

    def _precheck(self, params: TParams) -> Failure | None:
        return None

    def _json_body(self, params: TParams) -> Any:
        return None

    def _postprocess(self, envelope: Success, params: TParams) -> Envelope:
        return envelope

    # ─────────────────────────────────────────────────────────────────
    # Execution
    # ─────────────────────────────────────────────────────────────────

    def build(self, params: TParams, endpoint: Endpoint | None = None) -> RequestDescriptor | Failure:
        """Request for ``params``, or the precondition that blocks it."""
        endpoint = endpoint or self._endpoint_for(params)
        files: tuple[FilePart, ...] = ()
        if isinstance(params, UploadParams):
            loaded = params.load(self.context.settings.paths.upload_dir).map(
                lambda data: ((endpoint.file_field, (params.file_name, data, params.content_type)),)
            )
            if loaded.is_err():
                return loaded.unwrap_err()
            files = loaded.unwrap()
        values = self._values(params)
        json_body = self._json_body(params) if endpoint.body_encoding is Encoding.JSON else None
        try:
            return build_request(endpoint, self.base_url(), values, json_body=json_body, files=files)
        except KeyError as e:
            return Failure.precondition(f"{e.args[0]} is required", field=str(e.args[0]))

    async def _execute(self, params: TParams) -> Envelope:
        if not self.context.cms_url:
            self.log.warning("cms url not configured")
            return Failure.config_missing()
        endpoint = self._endpoint_for(params)
        if (blocked := self._precheck(params)) is not None:
            return blocked
        request = self.build(params, endpoint)
        if isinstance(request, Failure):
            return request
        envelope = await dispatch(
            self.context,
            request,
            schema=self._schema_for(params),
            operation=self.metadata.name,
            authenticated=endpoint.authenticated,
            log=self.log,
        )
        if isinstance(envelope, Failure):
            return envelope
        envelope = self._postprocess(envelope, params)
        if isinstance(envelope, Success) and self.success_message and not envelope.message:
            return with_message(envelope, self.success_message)
        return envelope


def with_message(envelope: Success, message: str) -> Success:
    """Copy of ``envelope`` carrying ``message``, keeping data presence."""
    if envelope.has_data:
        return Success(data=envelope.data, message=message)
    return Success(message=message)
