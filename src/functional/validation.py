"""
Accumulating validation.

Where ``Result.bind`` stops at the first Error, a chain of ``validate`` calls
runs every validator and keeps every failure message, so a caller gets the
full list of problems at once:

    checked = (
        ValidationResult.success(form)
        .validate(form.name, require_name)
        .validate(form.email, require_email)
        .validate(form, build_user)
    )
    checked.to_result()   # Ok(user) or Error(("name is required", "email is invalid"))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from functional._callables import invoke
from functional.result import Result
from functional.union import Union2

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

type Messages = tuple[str, ...]

_SUCCESS = 1
_FAILURE = 2


@dataclass(frozen=True, slots=True)
class ValidationResult(Generic[T]):
    """Valid(value) or Invalid(messages)."""

    _state: Union2[T, Messages]

    @staticmethod
    def success(value: T) -> ValidationResult[T]:
        return ValidationResult(Union2.first(value))

    @staticmethod
    def failure(*messages: str) -> ValidationResult[T]:
        if not messages:
            raise ValueError("A validation failure needs at least one message")
        return ValidationResult(Union2.second(tuple(messages)))

    def is_success(self) -> bool:
        return self._state.slot == _SUCCESS

    def is_failure(self) -> bool:
        return self._state.slot == _FAILURE

    def messages(self) -> Messages:
        """Failure messages collected so far; empty on success."""
        return self._state.value if self.is_failure() else ()

    def match(self, on_success: Callable[..., R], on_failure: Callable[..., R]) -> R:
        return self._state.match(
            lambda value: invoke(on_success, value),
            lambda messages: invoke(on_failure, messages),
        )

    def validate(self, value: Any, validator: Callable[[Any], ValidationResult[U]]) -> ValidationResult[U]:
        """
        Run ``validator(value)`` whatever the current state and combine:

            success + success → the new value
            failure + success → the earlier messages
            success + failure → the new messages
            failure + failure → earlier messages followed by the new ones
        """
        current = validator(value)
        if current.is_success():
            return current if self.is_success() else ValidationResult.failure(*self.messages())
        return ValidationResult.failure(*self.messages(), *current.messages())

    def to_result(self) -> Result[T, Messages]:
        return self.match(Result.ok, Result.error)

    def __repr__(self) -> str:
        if self.is_success():
            return f"Valid({self._state.value!r})"
        return f"Invalid({self._state.value!r})"
