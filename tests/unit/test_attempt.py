"""
Tests for the Result-returning exception boundary (attempt, try_map, try_bind).
"""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from functional import (
    Option,
    Result,
    ResultAssertions,
    attempt,
    attempt_async,
    inner_exception_message,
    try_bind,
    try_bind_async,
    try_map,
    try_map_async,
)
from functional.aio import lift


def divide(a: int, b: int) -> float:
    return a / b


class TestAttempt:
    def test_success_is_ok(self):
        assert attempt(divide, 6, 3) == Result.ok(2.0)

    def test_fault_becomes_error(self):
        ResultAssertions.assert_error_type(attempt(divide, 1, 0), ZeroDivisionError)

    def test_fault_is_logged_at_debug(self):
        with capture_logs() as logs:
            attempt(divide, 1, 0)

        assert logs == [
            {"event": "attempt.fault_captured", "log_level": "debug", "exc_type": "ZeroDivisionError"}
        ]

    def test_base_exceptions_propagate(self):
        def leave():
            raise SystemExit(1)

        with pytest.raises(SystemExit):
            attempt(leave)


class TestAttemptAsync:
    @pytest.mark.asyncio
    async def test_async_operation(self):
        async def fetch(x):
            return x + 1

        assert await attempt_async(fetch, 1) == Result.ok(2)

    @pytest.mark.asyncio
    async def test_fault_in_deferred_argument_is_captured(self):
        async def broken():
            raise LookupError("no input")

        outcome = await attempt_async(divide, broken(), 1)

        ResultAssertions.assert_error_type(outcome, LookupError)

    @pytest.mark.asyncio
    async def test_fault_in_async_operation_is_captured(self):
        async def explode():
            raise ValueError("bad")

        assert isinstance((await attempt_async(explode)).unwrap_error(), ValueError)


class TestTryMapAndBind:
    def test_try_map_on_option(self):
        assert try_map(Option.some(2), lambda x: x * 3) == Result.ok(Option.some(6))

    def test_try_map_captures_mapper_fault(self):
        ResultAssertions.assert_error_type(try_map(Option.some(0), lambda x: 1 / x), ZeroDivisionError)

    def test_try_map_on_result(self):
        assert try_map(Result.ok(2), str) == Result.ok(Result.ok("2"))

    def test_try_bind_on_result(self):
        outcome = try_bind(Result.ok("x"), lambda raw: Result.ok(int(raw)))
        ResultAssertions.assert_error_type(outcome, ValueError)

    def test_try_bind_skips_binder_on_none(self):
        assert try_bind(Option.none(), lambda x: 1 / 0) == Result.ok(Option.none())

    @pytest.mark.asyncio
    async def test_try_map_async(self):
        async def invert(x):
            return 1 / x

        assert await try_map_async(lift(Option.some(4)), invert) == Result.ok(Option.some(0.25))
        ResultAssertions.assert_error_type(await try_map_async(Option.some(0), invert), ZeroDivisionError)

    @pytest.mark.asyncio
    async def test_try_bind_async(self):
        async def checked(x):
            if x < 0:
                raise ValueError("negative")
            return Result.ok(x)

        assert await try_bind_async(Result.ok(1), checked) == Result.ok(Result.ok(1))
        ResultAssertions.assert_error_type(await try_bind_async(lift(Result.ok(-1)), checked), ValueError)


class TestInnerExceptionMessage:
    def test_explicit_cause(self):
        try:
            try:
                raise KeyError("inner")
            except KeyError as exc:
                raise RuntimeError("outer") from exc
        except RuntimeError as outer:
            assert inner_exception_message(outer) == Option.some("'inner'")

    def test_no_inner_exception(self):
        assert inner_exception_message(ValueError("alone")).is_none()
