"""Structured logging: bound key/value loggers with console and JSON renderers."""

from .logger import (
    BoundLogger,
    CaptureRenderer,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    current_context,
    get_logger,
    log_context,
    timed,
)

__all__ = [
    "BoundLogger",
    "CaptureRenderer",
    "ConsoleRenderer",
    "JsonRenderer",
    "LogEntry",
    "LogRenderer",
    "NoOpRenderer",
    "configure_from_settings",
    "configure_logging",
    "current_context",
    "get_logger",
    "log_context",
    "timed",
]
