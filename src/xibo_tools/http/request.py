"""Endpoint descriptors and request encoding.

An ``Endpoint`` is the static half of a call (method, path template, body
encoding); ``build_request`` combines it with one set of parameters into a
``RequestDescriptor``, a frozen value constructed fresh for each invocation.

Wire conventions of the CMS:
    - field names are camelCase
    - flags are sent as ``1``/``0``
    - arrays are repeated ``key[]`` entries, in order
    - ``None`` means "leave unset" and is never sent
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Literal
from urllib.parse import quote, urlencode

import orjson

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Encoding(StrEnum):
    """How non-path parameters travel."""
    NONE = "none"
    QUERY = "query"
    FORM = "form"
    MULTIPART = "multipart"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Static description of one upstream operation.

    Example:
        >>> Endpoint("PUT", "/api/resolution/{resolutionId}", Encoding.FORM)
    """

    method: HttpMethod
    path: str
    encoding: Encoding | None = None
    file_field: str = "files"
    authenticated: bool = True

    @property
    def body_encoding(self) -> Encoding:
        """Explicit encoding, else query for reads/deletes and form for writes."""
        if self.encoding is not None:
            return self.encoding
        return Encoding.QUERY if self.method in ("GET", "DELETE") else Encoding.FORM

    @property
    def path_fields(self) -> tuple[str, ...]:
        return tuple(name for _, name, _, _ in string.Formatter().parse(self.path) if name)


FilePart = tuple[str, tuple[str, bytes, str]]


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Everything needed to issue one HTTP request."""

    method: HttpMethod
    url: str
    query: tuple[tuple[str, str], ...] = ()
    form: tuple[tuple[str, str], ...] | None = None
    json: Any = None
    files: tuple[FilePart, ...] = ()
    encoding: Encoding = Encoding.NONE
    headers: dict[str, str] = field(default_factory=dict)

    def to_httpx(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.AsyncClient.request``."""
        kwargs: dict[str, Any] = {"method": self.method, "url": self.url}
        headers = dict(self.headers)
        if self.query:
            kwargs["params"] = list(self.query)
        match self.encoding:
            case Encoding.FORM:
                kwargs["content"] = urlencode(self.form or ())
                headers["Content-Type"] = FORM_CONTENT_TYPE
            case Encoding.MULTIPART:
                data: dict[str, list[str]] = {}
                for key, value in self.form or ():
                    data.setdefault(key, []).append(value)
                kwargs["data"] = {k: v[0] if len(v) == 1 else v for k, v in data.items()}
                kwargs["files"] = list(self.files)
            case Encoding.JSON:
                kwargs["content"] = orjson.dumps(self.json)
                headers["Content-Type"] = "application/json"
            case _:
                pass
        if headers:
            kwargs["headers"] = headers
        return kwargs


# ─────────────────────────────────────────────────────────────────────────────
# Encoders
# ─────────────────────────────────────────────────────────────────────────────


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (dict, list)):
        return orjson.dumps(value).decode()
    return str(value)


def encode_pairs(values: dict[str, Any]) -> tuple[tuple[str, str], ...]:
    """Flatten a mapping into ordered wire pairs.

    Example:
        >>> encode_pairs({"subject": "Hi", "displayGroupIds": [3, 1], "isInterrupt": True, "body": None})
        (('subject', 'Hi'), ('displayGroupIds[]', '3'), ('displayGroupIds[]', '1'), ('isInterrupt', '1'))
    """
    pairs: list[tuple[str, str]] = []
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", _scalar(item)) for item in value if item is not None)
        else:
            pairs.append((key, _scalar(value)))
    return tuple(pairs)


def substitute_path(template: str, values: dict[str, Any]) -> str:
    """Fill ``{name}`` placeholders, percent-encoding each value.

    Raises:
        KeyError: a placeholder has no value
    """
    filled: dict[str, str] = {}
    for _, name, _, _ in string.Formatter().parse(template):
        if not name:
            continue
        value = values.get(name)
        if value is None:
            raise KeyError(name)
        filled[name] = quote(_scalar(value), safe="")
    return template.format(**filled)


def build_request(
    endpoint: Endpoint,
    base_url: str,
    values: dict[str, Any],
    *,
    json_body: Any = None,
    files: tuple[FilePart, ...] = (),
) -> RequestDescriptor:
    """Combine an endpoint with wire-named parameter values.

    Path fields are consumed by the template; the remainder goes where the
    endpoint's encoding says. ``json_body`` overrides the remainder for JSON
    endpoints that send a document rather than the parameter mapping.
    """
    path = substitute_path(endpoint.path, values)
    rest = {k: v for k, v in values.items() if k not in endpoint.path_fields}
    url = f"{base_url}{path}"
    encoding = endpoint.body_encoding

    match encoding:
        case Encoding.QUERY:
            return RequestDescriptor(endpoint.method, url, query=encode_pairs(rest), encoding=encoding)
        case Encoding.FORM:
            return RequestDescriptor(endpoint.method, url, form=encode_pairs(rest), encoding=encoding)
        case Encoding.MULTIPART:
            return RequestDescriptor(endpoint.method, url, form=encode_pairs(rest), files=files, encoding=encoding)
        case Encoding.JSON:
            body = json_body if json_body is not None else {k: v for k, v in rest.items() if v is not None}
            return RequestDescriptor(endpoint.method, url, json=body, encoding=encoding)
        case _:
            return RequestDescriptor(endpoint.method, url, encoding=Encoding.NONE)
