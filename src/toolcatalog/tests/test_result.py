"""Tests for the Result type as used by page resolution."""

from __future__ import annotations

import pytest

from toolcatalog.foundation.errors import CatalogError, Err, ErrorCode, Ok, Result, collect_results, from_optional


def test_map_only_touches_ok() -> None:
    assert Ok(2).map(lambda n: n * 3) == Ok(6)
    assert Err("e").map(lambda n: n * 3) == Err("e")
    assert Err("e").map_err(str.upper) == Err("E")


def test_flat_map_chains_failures() -> None:
    def half(n: int) -> Result[int, str]:
        return Ok(n // 2) if n % 2 == 0 else Err(f"{n} is odd")

    assert Ok(8).flat_map(half).flat_map(half) == Ok(2)
    assert Ok(6).flat_map(half).and_then(half) == Err("3 is odd")


def test_extraction() -> None:
    assert Ok(1).unwrap() == 1
    assert Err("e").unwrap_or(0) == 0
    assert Ok(1).ok() == 1 and Ok(1).err() is None
    assert Err("e").err() == "e" and Err("e").ok() is None
    with pytest.raises(RuntimeError, match="unwrap"):
        Err("e").unwrap()
    with pytest.raises(RuntimeError, match="boom"):
        Err("e").expect("boom")
    with pytest.raises(RuntimeError):
        Ok(1).unwrap_err()


def test_match_and_truthiness() -> None:
    assert Ok(3).match(ok=lambda v: f"ok {v}", err=lambda e: f"err {e}") == "ok 3"
    assert Err("x").match(ok=lambda v: f"ok {v}", err=lambda e: f"err {e}") == "err x"
    assert Ok(0) and not Err("x")
    assert list(Ok(5)) == [5] and list(Err("x")) == []


def test_or_else_recovers() -> None:
    assert Err("missing").or_else(lambda _: Ok("fallback")) == Ok("fallback")
    assert Ok("value").or_else(lambda _: Ok("fallback")) == Ok("value")


def test_inspect_hooks() -> None:
    seen: list[object] = []
    Ok(1).inspect(seen.append).inspect_err(seen.append)
    Err(2).inspect(seen.append).inspect_err(seen.append)
    assert seen == [1, 2]


def test_from_optional_builds_error_lazily() -> None:
    calls: list[int] = []

    def not_found() -> CatalogError:
        calls.append(1)
        return CatalogError.tool_not_found("ghost-tool")

    assert from_optional("tool", not_found) == Ok("tool")
    assert calls == []
    assert from_optional(None, not_found).unwrap_err().code == ErrorCode.TOOL_NOT_FOUND


def test_collect_results() -> None:
    assert collect_results([Ok(1), Ok(2)]) == Ok([1, 2])
    assert collect_results([Ok(1), Err("a"), Err("b")]) == Err(["a", "b"])
    assert collect_results([]) == Ok([])


def test_catalog_error_from_exception() -> None:
    try:
        raise ValueError("bad data")
    except ValueError as e:
        error = CatalogError.from_exception(e, "render", tool_id="crop-pdf", locale="en")
    assert error.code == ErrorCode.UNKNOWN
    assert error.message == "render: bad data"
    assert not error.is_not_found
    assert "ValueError" in (error.details or "")
    assert str(error) == "[UNKNOWN] render: bad data (en/crop-pdf)"
