"""Result type for resolution outcomes.

Page resolution returns `Result[ResolvedToolView, CatalogError]` so that
"tool not found" and "content not found" are ordinary values the page layer
branches on, statically distinct from a real record.

    >>> Ok(3).map(lambda n: n + 1).unwrap()
    4
    >>> Err("missing").unwrap_or(0)
    0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Success (Ok) or failure (Err) carrying a value either way."""

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Variant checks ──────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─── Extraction ──────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Ok value, or RuntimeError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap() on Err: {self._value}")

    def unwrap_err(self) -> E:
        """Err value, or RuntimeError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_err() on Ok: {self._value}")

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def expect(self, msg: str) -> T:
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"{msg}: {self._value}")

    def ok(self) -> T | None:
        """Ok value or None."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Err value or None."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    # ─── Transformations ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        return Result(f(self._value), _ERR) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a step that can itself fail.

        Example:
            >>> registry_lookup(tool_id).flat_map(lambda tool: content_lookup(tool, locale))
        """
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    and_then = flat_map

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """On Err, try to recover via f."""
        return f(self._value) if not self._is_ok else Result(self._value, _OK)  # type: ignore[arg-type]

    def inspect(self, f: Callable[[T], None]) -> Result[T, E]:
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[E], None]) -> Result[T, E]:
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Dunder ──────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __iter__(self) -> Iterator[T]:
        """Yields the value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    return Result(error, _ERR)


def from_optional(value: T | None, error: Callable[[], E]) -> Result[T, E]:
    """Lift an optional lookup into a Result, building the error lazily."""
    return Result(value, _OK) if value is not None else Result(error(), _ERR)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Accumulate every Result; Err with all errors if any failed."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        (values if r._is_ok else errors).append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK) if not errors else Result(errors, _ERR)
