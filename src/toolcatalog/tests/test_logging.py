"""Tests for structured logging."""

from __future__ import annotations

import io

import orjson
import pytest

from toolcatalog.foundation.config import LoggingSettings
from toolcatalog.runtime.observability import (
    BoundLogger,
    CaptureRenderer,
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    current_context,
    get_logger,
    log_context,
    timed,
)


def test_bind_returns_new_logger(captured_logs: CaptureRenderer) -> None:
    base = get_logger("resolver")
    bound = base.bind(tool="crop-pdf")
    assert base.context == {"logger": "resolver"}
    assert bound.context == {"logger": "resolver", "tool": "crop-pdf"}
    assert bound.unbind("tool").context == base.context


def test_bind_request(captured_logs: CaptureRenderer) -> None:
    get_logger("pages").bind_request("sign-pdf", "de").info("page rendered")
    entry = captured_logs.entries[-1]
    assert entry.event == "page rendered"
    assert entry.context == {"logger": "pages", "tool": "sign-pdf", "locale": "de"}


def test_level_filtering() -> None:
    capture = configure_logging(level="WARNING", renderer=CaptureRenderer())
    log = get_logger("x")
    log.info("dropped")
    log.warning("kept")
    assert capture.events() == ["kept"]  # type: ignore[attr-defined]


def test_module_loggers_follow_later_configuration() -> None:
    log = get_logger("early")
    capture = configure_logging(level="DEBUG", renderer=CaptureRenderer())
    log.debug("visible")
    assert capture.events("debug") == ["visible"]  # type: ignore[attr-defined]


def test_explicit_renderer_and_level() -> None:
    capture = CaptureRenderer()
    log = BoundLogger(context={"component": "registry"}, _renderer=capture)
    log.info("catalog loaded", tools=16)
    assert capture.entries[0].context == {"component": "registry", "tools": 16}


def test_log_context_scopes_fields(captured_logs: CaptureRenderer) -> None:
    log = get_logger()
    with log_context(batch="nightly"):
        log.info("inside")
    log.info("outside")
    assert captured_logs.entries[0].context == {"batch": "nightly"}
    assert captured_logs.entries[1].context == {}


def test_json_renderer_writes_lines() -> None:
    out = io.StringIO()
    configure_logging(format="json", output=out)
    get_logger("batch").info("batch generation finished", pages=128)
    record = orjson.loads(out.getvalue().splitlines()[0])
    assert record["event"] == "batch generation finished"
    assert record["level"] == "info"
    assert record["pages"] == 128
    assert record["logger"] == "batch"
    assert "timestamp" in record


def test_console_renderer_plain_text() -> None:
    out = io.StringIO()
    configure_logging(renderer=ConsoleRenderer(output=out, colors=False, show_timestamp=False))
    get_logger().warning("catalog integrity issue", tool="crop-pdf")
    assert out.getvalue() == '[warning] catalog integrity issue tool="crop-pdf"\n'


def test_exception_includes_traceback(captured_logs: CaptureRenderer) -> None:
    try:
        raise ValueError("bad")
    except ValueError:
        get_logger().exception("failed")
    assert "ValueError: bad" in captured_logs.entries[0].context["exc_info"]


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")


def test_configure_from_settings() -> None:
    assert isinstance(configure_from_settings(LoggingSettings(format="none")), NoOpRenderer)
    assert isinstance(configure_from_settings(LoggingSettings(format="json")), JsonRenderer)


def test_timed_logs_duration(captured_logs: CaptureRenderer) -> None:
    @timed(get_logger("t"), event="built")
    def build() -> int:
        return 3

    assert build() == 3
    entry = captured_logs.entries[-1]
    assert entry.event == "built"
    assert entry.context["function"] == "build"
    assert entry.context["duration_ms"] >= 0


def test_timed_logs_and_reraises_failures(captured_logs: CaptureRenderer) -> None:
    @timed(get_logger("t"))
    def broken() -> None:
        raise RuntimeError("nope")

    with pytest.raises(RuntimeError):
        broken()
    assert captured_logs.events("error") == ["operation completed failed"]


def test_current_context_reflects_scope() -> None:
    assert current_context() == {}
    with log_context(locale="de"), log_context(tool="crop-pdf"):
        assert current_context() == {"locale": "de", "tool": "crop-pdf"}
    assert current_context() == {}
