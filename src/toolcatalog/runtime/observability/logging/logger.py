"""Structured logging for catalog loading, resolution and batch generation.

Context-aware key/value logging with human-readable console output for
development and JSON lines for production pipelines.

Quick Start:
    >>> from toolcatalog.runtime.observability import configure_logging, get_logger
    >>> configure_logging(format="console")  # or "json"
    >>> log = get_logger("resolver")
    >>> log.info("content resolved", tool="crop-pdf", locale="de")

    >>> log = log.bind_request("sign-pdf", "de")
    >>> log.debug("falling back", content_locale="en")
"""

from __future__ import annotations

import logging
import sys
import time
import traceback
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from functools import wraps
from typing import TYPE_CHECKING, Callable, ParamSpec, Protocol, TextIO, TypeVar, runtime_checkable

import orjson

from toolcatalog.foundation.core import JsonDict, JsonMapping, JsonValue

if TYPE_CHECKING:
    from types import TracebackType

    from toolcatalog.foundation.config import LoggingSettings

P = ParamSpec("P")
T = TypeVar("T")

# Scoped context shared by every logger in the current context (thread/task)
_log_context: ContextVar[JsonDict] = ContextVar("log_context", default={})


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context. bind() returns a new logger.

    Example:
        >>> log = BoundLogger(context={"component": "registry"})
        >>> log.info("catalog loaded", tools=16)
        # => 10:30:45.120 [info] catalog loaded component="registry" tools=16
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int | None = None  # None = follow configure_logging()

    def bind(self, **kw: JsonValue) -> BoundLogger:
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer, _level=self._level)

    def bind_request(self, tool_id: str, locale: str, **kw: JsonValue) -> BoundLogger:
        """Bind the (tool, locale) pair a page request is about."""
        return self.bind(tool=tool_id, locale=locale, **kw)

    def unbind(self, *keys: str) -> BoundLogger:
        return BoundLogger(context={k: v for k, v in self.context.items() if k not in keys},
                           _renderer=self._renderer, _level=self._level)

    def _log(self, level: int, event: str, **kw: JsonValue) -> None:
        if level < (self._level if self._level is not None else _state["level"]):  # type: ignore[operator]
            return
        merged = {**_log_context.get(), **self.context, **kw}
        (self._renderer or _get_renderer()).render(LogEntry(time.time(), _level_name(level), event, merged))

    def debug(self, event: str, **kw: JsonValue) -> None: self._log(logging.DEBUG, event, **kw)
    def info(self, event: str, **kw: JsonValue) -> None: self._log(logging.INFO, event, **kw)
    def warning(self, event: str, **kw: JsonValue) -> None: self._log(logging.WARNING, event, **kw)
    def error(self, event: str, **kw: JsonValue) -> None: self._log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """Log error with the active exception's traceback."""
        self._log(logging.ERROR, event, exc_info=traceback.format_exc(), **kw)


@dataclass(slots=True)
class LogEntry:
    """One rendered log record."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """HH:MM:SS.mmm"""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable console output: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect
    show_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        c = _COLORS if self.colors else _NO_COLORS
        parts = [f"{c['dim']}{entry.ts_human}{c['reset']}"] if self.show_timestamp else []
        parts += [f"{_LEVEL_COLORS.get(entry.level, c['dim']) if self.colors else ''}[{entry.level}]{c['reset']}",
                  f"{c['bold']}{entry.event}{c['reset']}"]
        parts += [f"{c['cyan']}{k}{c['reset']}={_format_value(v, c)}"
                  for k, v in sorted(entry.context.items()) if k != "exc_info"]
        print(" ".join(parts), file=self.output)
        if "exc_info" in entry.context:
            print(f"{c['red']}{entry.context['exc_info']}{c['reset']}", file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        payload = {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event, **entry.context}
        print(orjson.dumps(payload, option=orjson.OPT_NON_STR_KEYS, default=str).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for tests."""

    def render(self, entry: LogEntry) -> None:
        pass


@dataclass(slots=True)
class CaptureRenderer:
    """Keeps entries in memory so tests can assert on what was logged."""

    entries: list[LogEntry] = field(default_factory=list)

    def render(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    def events(self, level: str | None = None) -> list[str]:
        return [e.event for e in self.entries if level is None or e.level == level]


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────

# Process-wide so worker threads in batch generation share one renderer
_state: dict[str, object] = {"renderer": None, "level": logging.INFO}


def configure_logging(
    format: str = "console",  # noqa: A002 - mirrors LoggingSettings.format
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
    renderer: LogRenderer | None = None,
) -> LogRenderer:
    """Configure logging. Format: "console" (human), "json" (machine), "none"."""
    _state["level"] = getattr(logging, level.upper(), logging.INFO)
    if renderer is None:
        match format:
            case "console": renderer = ConsoleRenderer(output=output or sys.stderr, colors=colors)
            case "json": renderer = JsonRenderer(output=output or sys.stdout)
            case "none": renderer = NoOpRenderer()
            case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _state["renderer"] = renderer
    return renderer


def configure_from_settings(settings: LoggingSettings) -> LogRenderer:
    """Apply LoggingSettings (TOOLCATALOG_LOG_*)."""
    return configure_logging(format=settings.format, level=settings.level)


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Get a logger; `name` is added to context as 'logger'.

    The level follows configure_logging(), including for module-level loggers
    created before it was called.
    """
    ctx = {**initial_context, **({"logger": name} if name else {})}
    return BoundLogger(context=ctx)


def _get_renderer() -> LogRenderer:
    if (renderer := _state["renderer"]) is None:
        _state["renderer"] = renderer = ConsoleRenderer()
    return renderer  # type: ignore[return-value]


# ─────────────────────────────────────────────────────────────────────────────
# Decorators & Utilities
# ─────────────────────────────────────────────────────────────────────────────


def timed(
    log: BoundLogger | None = None,
    *,
    level: str = "info",
    event: str = "operation completed",
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Log a function's duration; failures are logged at error level and re-raised."""

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            _log, start = log or get_logger(), time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _log.error(f"{event} failed", function=func.__name__, duration_ms=_elapsed(start), error=str(e))
                raise
            getattr(_log, level)(event, function=func.__name__, duration_ms=_elapsed(start))
            return result

        return wrapper

    return decorator


class log_context:
    """Context manager adding key-value pairs to every log entry within the scope."""

    __slots__ = ("_ctx", "_token")

    def __init__(self, **kw: JsonValue) -> None:
        self._ctx: JsonDict = dict(kw)
        self._token: object | None = None

    def __enter__(self) -> log_context:
        self._token = _log_context.set({**_log_context.get(), **self._ctx})
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _log_context.reset(self._token)  # type: ignore[arg-type]


def current_context() -> JsonMapping:
    return dict(_log_context.get())


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


_COLORS = {"reset": "\033[0m", "bold": "\033[1m", "dim": "\033[2m", "red": "\033[31m",
           "green": "\033[32m", "yellow": "\033[33m", "blue": "\033[34m", "cyan": "\033[36m", "white": "\033[37m"}
_NO_COLORS = {k: "" for k in _COLORS}
_LEVEL_COLORS = {"debug": _COLORS["dim"], "info": _COLORS["green"], "warning": _COLORS["yellow"], "error": _COLORS["red"]}


def _elapsed(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def _level_name(level: int) -> str:
    return logging.getLevelName(level).lower()


def _format_value(v: object, c: dict[str, str]) -> str:
    match v:
        case str(): return f'{c["yellow"]}"{v}"{c["reset"]}'
        case bool(): return f'{c["blue"]}{str(v).lower()}{c["reset"]}'
        case int() | float(): return f'{c["blue"]}{v}{c["reset"]}'
        case dict(): return f'{c["dim"]}{{{len(v)} items}}{c["reset"]}'
        case list() | tuple(): return f'{c["dim"]}[{len(v)} items]{c["reset"]}'
        case _: return f'{c["white"]}{v!r}{c["reset"]}'
