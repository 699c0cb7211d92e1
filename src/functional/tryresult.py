"""
TryResult — the immediate exception boundary.

Marks the place where a host exception was caught and turned into a value.
Unlike ``Result``, the failure side is always the caught exception.

    outcome = TryResult.capture(int, raw)        # runs now
    port = outcome.catch(lambda exc: 8080)       # value, or recovery from the fault
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from functional._callables import invoke
from functional.aio import resolve
from functional.logs import get_logger
from functional.result import Result
from functional.union import Union2

T = TypeVar("T")
R = TypeVar("R")

log = get_logger(__name__)

_SUCCESS = 1
_FAILURE = 2


@dataclass(frozen=True, slots=True)
class TryResult(Generic[T]):
    """Success(value) or Failure(exception)."""

    _state: Union2[T, Exception]

    @staticmethod
    def success(value: T) -> TryResult[T]:
        return TryResult(Union2.first(value))

    @staticmethod
    def failure(exception: Exception) -> TryResult[T]:
        return TryResult(Union2.second(exception))

    @staticmethod
    def capture(operation: Callable[..., T], *args: Any) -> TryResult[T]:
        """Run ``operation(*args)`` now; an Exception becomes a Failure."""
        try:
            return TryResult.success(operation(*args))
        except Exception as exc:
            log.debug("try_result.fault_captured", exc_type=type(exc).__name__)
            return TryResult.failure(exc)

    @staticmethod
    async def capture_async(operation: Callable[..., T | Awaitable[T]], *args: Any) -> TryResult[T]:
        """Async ``capture``: awaits the operation's result inside the boundary."""
        try:
            return TryResult.success(await resolve(operation(*args)))
        except Exception as exc:
            log.debug("try_result.fault_captured", exc_type=type(exc).__name__)
            return TryResult.failure(exc)

    def is_success(self) -> bool:
        return self._state.slot == _SUCCESS

    def is_failure(self) -> bool:
        return self._state.slot == _FAILURE

    def match(self, on_success: Callable[..., R], on_failure: Callable[..., R]) -> R:
        return self._state.match(
            lambda value: invoke(on_success, value),
            lambda exc: invoke(on_failure, exc),
        )

    def catch(self, handler: Callable[[Exception], T] | Callable[[], T]) -> T:
        """The successful value, or ``handler(exception)`` on Failure."""
        return self.match(lambda value: value, handler)

    def to_result(self) -> Result[T, Exception]:
        return self.match(Result.ok, Result.error)

    def __repr__(self) -> str:
        if self.is_success():
            return f"Success({self._state.value!r})"
        return f"Failure({self._state.value!r})"
