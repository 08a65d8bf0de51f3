"""Base model and shared field types for CMS payloads.

Upstream payloads are camelCase JSON. Models declare the fields an agent
relies on and keep everything else as extras, so a validated payload dumps
back to exactly the body the CMS sent.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _bool_to_int(v: Any) -> Any:
    return int(v) if isinstance(v, bool) else v


# 0/1 flag; CMS versions disagree on bool vs int, int is canonical
Flag = Annotated[int, BeforeValidator(_bool_to_int)]

# Identifier that older CMS builds return as a numeric string
LooseId = int | str


class CmsModel(BaseModel):
    """Strict camelCase model that keeps unknown upstream fields."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        strict=True,
    )


class TagLink(CmsModel):
    """Tag attached to another resource."""

    tag: str
    tag_id: int
    value: str | None = None
