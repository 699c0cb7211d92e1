"""
Free-function constructors and boundaries.

    from functional.prelude import some, none, ok, error

    some(5)          # Some(5)
    some(None)       # Nothing
    ok("done")       # Ok('done')
    error("nope")    # Error('nope')
"""

from __future__ import annotations

from typing import TypeVar

from functional.attempt import attempt, attempt_async
from functional.option import Option
from functional.result import Result, bind_all

T = TypeVar("T")
E = TypeVar("E")


def some(value: T | None) -> Option[T]:
    """Some(value), collapsing a None input to Nothing."""
    return Option.some(value)


def none() -> Option[T]:
    return Option.none()


def optional(value: T | None) -> Option[T]:
    """Lift a nullable value into an Option."""
    return Option.from_nullable(value)


def ok(value: T) -> Result[T, E]:
    return Result.ok(value)


def error(payload: E) -> Result[T, E]:
    return Result.error(payload)


__all__ = [
    "some",
    "none",
    "optional",
    "ok",
    "error",
    "bind_all",
    "attempt",
    "attempt_async",
]
