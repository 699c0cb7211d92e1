"""
Test assertions for Option and Result values.

Expressive assert helpers that produce clear failure messages instead of a
bare unwrap error.

Usage in tests:
    from functional import ResultAssertions

    def test_create_user():
        result = create_user(valid_command)
        user = ResultAssertions.assert_ok(result)
        assert user.name == "Alice"

    def test_invalid_email():
        result = create_user(bad_command)
        ResultAssertions.assert_error_value(result, "email is invalid")
"""

from __future__ import annotations

from typing import Any, TypeVar

from functional.option import Option
from functional.result import Result

T = TypeVar("T")
E = TypeVar("E")


def _context(message: str) -> str:
    return f" — {message}" if message else ""


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_ok(result: Result[T, E], message: str = "") -> T:
        """
        Assert the Result is Ok and return the value.

            value = ResultAssertions.assert_ok(result)
        """
        assert result.is_ok(), (
            f"Expected Ok but got Error({result.unwrap_error()!r}){_context(message)}"
        )
        return result.unwrap()

    @staticmethod
    def assert_error(result: Result[T, E], message: str = "") -> E:
        """Assert the Result is an Error and return its payload."""
        assert result.is_error(), (
            f"Expected Error but got Ok({result.unwrap()!r}){_context(message)}"
        )
        return result.unwrap_error()

    @staticmethod
    def assert_ok_value(result: Result[T, E], expected_value: Any) -> None:
        value = ResultAssertions.assert_ok(result)
        assert value == expected_value, (
            f"Expected Ok value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_error_value(result: Result[T, E], expected_error: Any) -> None:
        error = ResultAssertions.assert_error(result)
        assert error == expected_error, (
            f"Expected Error payload {expected_error!r} but got {error!r}"
        )

    @staticmethod
    def assert_error_type(result: Result[T, E], expected_type: type[BaseException]) -> BaseException:
        """Assert the Result is an Error carrying an exception of ``expected_type``."""
        error = ResultAssertions.assert_error(result)
        assert isinstance(error, expected_type), (
            f"Expected Error of type {expected_type.__name__} but got {type(error).__name__}: {error!r}"
        )
        return error


class OptionAssertions:
    """Expressive test assertions for Option values."""

    @staticmethod
    def assert_some(option: Option[T], message: str = "") -> T:
        assert option.is_some(), f"Expected Some but got Nothing{_context(message)}"
        return option.unwrap()

    @staticmethod
    def assert_none(option: Option[T], message: str = "") -> None:
        assert option.is_none(), f"Expected Nothing but got {option!r}{_context(message)}"

    @staticmethod
    def assert_some_value(option: Option[T], expected_value: Any) -> None:
        value = OptionAssertions.assert_some(option)
        assert value == expected_value, (
            f"Expected Some value {expected_value!r} but got {value!r}"
        )
