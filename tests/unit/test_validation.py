"""
Tests for accumulating validation.
"""

from __future__ import annotations

import pytest

from functional import Result, ValidationResult


def require_name(name: str) -> ValidationResult[str]:
    return ValidationResult.success(name) if name else ValidationResult.failure("name is required")


def require_email(email: str) -> ValidationResult[str]:
    return ValidationResult.success(email) if "@" in email else ValidationResult.failure("email is invalid")


def require_adult(age: int) -> ValidationResult[int]:
    if age < 0:
        return ValidationResult.failure("age is negative", "age is not adult")
    return ValidationResult.success(age) if age >= 18 else ValidationResult.failure("age is not adult")


class TestValidate:
    def test_all_validators_pass(self):
        checked = (
            ValidationResult.success({})
            .validate("Alice", require_name)
            .validate("alice@example.org", require_email)
        )
        assert checked.is_success()
        assert checked.to_result() == Result.ok("alice@example.org")

    def test_every_failure_is_accumulated_in_order(self):
        """
        GIVEN a form with an empty name, a bad email and a negative age
        WHEN every field is validated in a chain
        THEN all four messages are reported in order
        """
        checked = (
            ValidationResult.success({})
            .validate("", require_name)
            .validate("nope", require_email)
            .validate(-1, require_adult)
        )

        assert checked.is_failure()
        assert checked.messages() == (
            "name is required",
            "email is invalid",
            "age is negative",
            "age is not adult",
        )

    def test_later_success_keeps_earlier_failures(self):
        checked = ValidationResult.success({}).validate("", require_name).validate("a@b", require_email)
        assert checked.messages() == ("name is required",)

    def test_validators_run_after_a_failure(self):
        calls: list[str] = []

        def spy(value):
            calls.append(value)
            return ValidationResult.success(value)

        ValidationResult.failure("already broken").validate("x", spy)

        assert calls == ["x"]


class TestVariants:
    def test_failure_requires_a_message(self):
        with pytest.raises(ValueError):
            ValidationResult.failure()

    def test_success_has_no_messages(self):
        assert ValidationResult.success(1).messages() == ()

    def test_match(self):
        assert ValidationResult.failure("a", "b").match(lambda v: "ok", lambda msgs: ", ".join(msgs)) == "a, b"

    def test_to_result_on_failure(self):
        assert ValidationResult.failure("a").to_result() == Result.error(("a",))

    def test_repr(self):
        assert repr(ValidationResult.success(1)) == "Valid(1)"
        assert repr(ValidationResult.failure("a")) == "Invalid(('a',))"
