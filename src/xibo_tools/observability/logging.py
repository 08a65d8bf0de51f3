"""Structured logging for CMS tool calls.

Every log line is an event name plus key/value context. Loggers are
immutable: ``bind`` returns a new logger with merged context, so a tool can
hand a request-scoped logger down to the dispatcher without shared state.

Quick Start:
    >>> from xibo_tools.observability import configure_logging, get_logger
    >>> configure_logging(format="console", level="DEBUG")
    >>> log = get_logger("xibo_tools.dispatch").bind_tool("get_resolutions", "resolution")
    >>> log.info("request", method="GET", path="/api/resolution")
"""

from __future__ import annotations

import logging
import sys
import time
import traceback
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol, TextIO, runtime_checkable

import orjson

if TYPE_CHECKING:
    from ..foundation.config import LoggingSettings

_log_context: ContextVar[dict[str, Any]] = ContextVar("xibo_log_context", default={})

# Context keys whose values never reach a renderer
_REDACTED_KEYS = frozenset({"authorization", "client_secret", "access_token", "password", "token"})


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context.

    Example:
        >>> log = BoundLogger(context={"tool": "add_resolution"})
        >>> log.bind(status=201).info("response")
        # => 10:30:45.120 [info] response status=201 tool="add_resolution"
    """

    context: dict[str, Any] = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int = logging.DEBUG

    def bind(self, **kw: Any) -> BoundLogger:
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer, _level=self._level)

    def bind_tool(self, name: str, category: str, **kw: Any) -> BoundLogger:
        """Bind tool execution context."""
        return self.bind(tool=name, category=category, **kw)

    def _log(self, level: int, event: str, **kw: Any) -> None:
        if level < max(self._level, _default_level):
            return
        merged = {**_log_context.get(), **self.context, **kw}
        for key in merged:
            if key.lower() in _REDACTED_KEYS:
                merged[key] = "***"
        entry = LogEntry(timestamp=time.time(), level=logging.getLevelName(level).lower(), event=event, context=merged)
        (self._renderer or _get_renderer()).render(entry)

    def debug(self, event: str, **kw: Any) -> None:
        self._log(logging.DEBUG, event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._log(logging.INFO, event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._log(logging.WARNING, event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: Any) -> None:
        """Log at error level with the active traceback attached."""
        kw["exc_info"] = traceback.format_exc()
        self._log(logging.ERROR, event, **kw)


@dataclass(slots=True)
class LogEntry:
    timestamp: float
    level: str
    event: str
    context: dict[str, Any]

    @property
    def ts_iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


class log_context:
    """Scope extra key/value pairs onto every entry logged inside the block.

    Example:
        >>> with log_context(request_id="abc123"):
        ...     log.info("processing")  # includes request_id
    """

    __slots__ = ("_ctx", "_token")

    def __init__(self, **kw: Any) -> None:
        self._ctx = dict(kw)
        self._token: object | None = None

    def __enter__(self) -> log_context:
        self._token = _log_context.set({**_log_context.get(), **self._ctx})
        return self

    def __exit__(self, *_: object) -> None:
        if self._token is not None:
            _log_context.reset(self._token)  # type: ignore[arg-type]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable output: ``time [level] event key=value ...``."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    show_timestamp: bool = True

    def render(self, entry: LogEntry) -> None:
        parts = [entry.ts_human] if self.show_timestamp else []
        parts += [f"[{entry.level}]", entry.event]
        parts += [f"{k}={_format_value(v)}" for k, v in sorted(entry.context.items()) if k != "exc_info"]
        print(" ".join(parts), file=self.output)
        if "exc_info" in entry.context:
            print(entry.context["exc_info"], file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        payload = {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event, **entry.context}
        print(orjson.dumps(payload, option=orjson.OPT_NON_STR_KEYS, default=str).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


@dataclass(slots=True)
class CollectingRenderer:
    """Keeps entries in memory so tests can assert on what was logged."""

    entries: list[LogEntry] = field(default_factory=list)

    def render(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    def events(self) -> list[str]:
        return [e.event for e in self.entries]


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────

_renderer: LogRenderer | None = None
_default_level: int = logging.INFO


def configure_logging(
    format: str = "console",  # noqa: A002
    level: str = "INFO",
    *,
    output: TextIO | None = None,
) -> LogRenderer:
    """Configure process-wide structured logging.

    Args:
        format: "console" (human), "json" (machine) or "none"
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR)
        output: Stream override (default stderr for console, stdout for json)
    """
    global _renderer, _default_level
    _default_level = getattr(logging, level.upper(), logging.INFO)
    match format:
        case "console":
            renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr)
        case "json":
            renderer = JsonRenderer(output=output or sys.stdout)
        case "none":
            renderer = NoOpRenderer()
        case _:
            raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _renderer = renderer
    return renderer


def configure_from_settings(settings: LoggingSettings) -> LogRenderer:
    return configure_logging(format=settings.format, level=settings.level)


def set_renderer(renderer: LogRenderer | None) -> None:
    """Install a renderer directly (tests use CollectingRenderer)."""
    global _renderer
    _renderer = renderer


def get_logger(name: str | None = None, **initial_context: Any) -> BoundLogger:
    ctx = dict(initial_context)
    if name:
        ctx["logger"] = name
    return BoundLogger(context=ctx)


def _get_renderer() -> LogRenderer:
    global _renderer
    if _renderer is None:
        _renderer = ConsoleRenderer()
    return _renderer


def _format_value(v: object) -> str:
    if isinstance(v, str):
        return f'"{v}"'
    if isinstance(v, bool):
        return str(v).lower()
    if isinstance(v, dict):
        return f"{{{len(v)} items}}"
    if isinstance(v, (list, tuple)):
        return f"[{len(v)} items]"
    return str(v)
