"""
Result monad — the success/failure track of Railway-Oriented Programming.

A Result[T, E] is either Ok(value: T) or Error(error: E). The error type is
chosen by the caller: an exception, an enum, a message, anything. Every
operation returns a new Result and never raises for an expected failure;
errors propagate through ``bind`` short-circuiting.

    ┌───────────┐    bind      ┌───────────┐    bind      ┌──────────┐
    │ validate  │──Ok─────────▶│  enrich   │──Ok─────────▶│ persist  │──▶ Result[T, E]
    └─────┬─────┘              └─────┬─────┘              └─────┬────┘
          │ Error                    │ Error                    │ Error
          └──────────────────────────┴──────────────────────────┴──▶ Result[T, E]

``bind`` stops at the first Error. ``collect_all`` / ``bind_all`` is the
deliberate exception: it runs every entry and reports every Error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Iterable, TypeVar

from functional._callables import invoke
from functional.errors import ResultErrorUnwrapError, ResultUnwrapError
from functional.union import Union2
from functional.unit import UNIT, Unit

if TYPE_CHECKING:
    from functional.option import Option

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")

_OK = 1
_ERROR = 2


@dataclass(frozen=True, slots=True)
class Result(Generic[T, E]):
    """
    Success/failure container.

    Usage:
        >>> Result.ok(42).map(lambda x: x * 2).unwrap()
        84

        >>> Result.error("bad input").map(lambda x: x * 2).is_error()
        True
    """

    _state: Union2[T, E]

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def ok(value: T) -> Result[T, E]:
        """Create a successful Result wrapping ``value``."""
        return Result(Union2.first(value))

    @staticmethod
    def error(error: E) -> Result[T, E]:
        """Create a failed Result carrying ``error``."""
        return Result(Union2.second(error))

    @staticmethod
    def from_nullable(value: T | None, error: E) -> Result[T, E]:
        """
        Ok unless ``value`` is None.

            Result.from_nullable(user, "User is required")
        """
        if value is not None:
            return Result.ok(value)
        return Result.error(error)

    @staticmethod
    def from_option(option: Option[T], error: E) -> Result[T, E]:
        """Some → Ok, None → Error(error)."""
        return option.match(Result.ok, lambda: Result.error(error))

    @staticmethod
    def collect_all(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
        """
        Run every Result and aggregate.

        Returns Ok with all values when no entry failed, otherwise Error with
        every failure payload in input order. Unlike ``bind``, nothing
        short-circuits.

            Result.collect_all([Result.ok(1), Result.error("a"), Result.error("b")])
            # → Error(['a', 'b'])
        """
        successes: list[T] = []
        failures: list[E] = []
        for result in results:
            result.effect(successes.append, failures.append)
        if failures:
            return Result.error(failures)
        return Result.ok(successes)

    # ──────────────────────── Introspection ────────────────────────

    def is_ok(self) -> bool:
        return self._state.slot == _OK

    def is_error(self) -> bool:
        return self._state.slot == _ERROR

    def unwrap(self) -> T:
        """
        Extract the Ok value. Raises ResultUnwrapError on Error.

        Prefer ``match`` or ``reduce`` for safe access.
        """
        if self.is_ok():
            return self._state.value
        raise ResultUnwrapError()

    def unwrap_error(self) -> E:
        """Extract the Error payload. Raises ResultErrorUnwrapError on Ok."""
        if self.is_error():
            return self._state.value
        raise ResultErrorUnwrapError()

    # ──────────────────────── Core Transformations ────────────────────────

    def match(self, on_ok: Callable[..., R], on_error: Callable[..., R]) -> R:
        """
        Apply one of two functions depending on the state.

            result.match(
                lambda user: f"Hello {user.name}",
                lambda err: f"Error: {err}",
            )
        """
        return self._state.match(
            lambda value: invoke(on_ok, value),
            lambda error: invoke(on_error, error),
        )

    def map(self, mapper: Callable[..., U]) -> Result[U, E]:
        """
        Transform the Ok value. Error passes through untouched.

            Result.ok(5).map(lambda x: x * 2)       # → Ok(10)
            Result.error("x").map(lambda x: x * 2)  # → same Error
        """
        return self.match(
            lambda value: Result.ok(invoke(mapper, value)),
            Result.error,
        )

    def map_error(self, mapper: Callable[..., F]) -> Result[T, F]:
        """Transform the Error payload. Ok passes through untouched."""
        return self.match(
            Result.ok,
            lambda error: Result.error(invoke(mapper, error)),
        )

    def bind(self, binder: Callable[..., Result[U, E]]) -> Result[U, E]:
        """
        Chain a Result-returning function. The first Error wins and the
        binder is not invoked.
        """
        return self.match(
            lambda value: invoke(binder, value),
            Result.error,
        )

    def reduce(self, alternate: T) -> T:
        """Extract the Ok value or return ``alternate``."""
        return self.match(lambda value: value, lambda: alternate)

    def reduce_with(self, alternate: Callable[[E], T] | Callable[[], T]) -> T:
        """Extract the Ok value or compute an alternate, optionally from the error."""
        return self.match(lambda value: value, alternate)

    def to_option(self) -> Option[T]:
        """Ok → Some, Error → None (the error payload is discarded)."""
        from functional.option import Option

        return self.match(Option.some, Option.none)

    # ──────────────────────── Side Effects ────────────────────────

    def effect(self, on_ok: Callable[..., Any], on_error: Callable[..., Any]) -> Unit:
        self.match(on_ok, on_error)
        return UNIT

    def effect_ok(self, *actions: Callable[..., Any]) -> Unit:
        """Run every action with the Ok value, in order. Nothing runs on Error."""
        if self.is_ok():
            value = self.unwrap()
            for action in actions:
                invoke(action, value)
        return UNIT

    def effect_error(self, *actions: Callable[..., Any]) -> Unit:
        """Run every action with the Error payload, in order. Nothing runs on Ok."""
        if self.is_error():
            error = self.unwrap_error()
            for action in actions:
                invoke(action, error)
        return UNIT

    def tap(self, on_ok: Callable[..., Any], on_error: Callable[..., Any]) -> Result[T, E]:
        """
        Execute a side effect without altering the Result.

            result.tap(lambda user: log.info("user.created", id=user.id), report)
        """
        self.effect(on_ok, on_error)
        return self

    def tap_ok(self, *actions: Callable[..., Any]) -> Result[T, E]:
        self.effect_ok(*actions)
        return self

    def tap_error(self, *actions: Callable[..., Any]) -> Result[T, E]:
        self.effect_error(*actions)
        return self

    # ──────────────────────── Async Support ────────────────────────

    async def map_async(self, mapper: Callable[..., U | Awaitable[U]]) -> Result[U, E]:
        """
        Map with a sync or async function.

            result = await Result.ok(user_id).map_async(fetch_user_from_api)
        """
        from functional import result_async

        return await result_async.map_async(self, mapper)

    async def bind_async(self, binder: Callable[..., Result[U, E] | Awaitable[Result[U, E]]]) -> Result[U, E]:
        """
        Chain an async Result-returning function.

            result = await Result.ok(order).bind_async(persist_order)
        """
        from functional import result_async

        return await result_async.bind_async(self, binder)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: ``if result: ...`` holds only on Ok."""
        return self.is_ok()

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Ok({self._state.value!r})"
        return f"Error({self._state.value!r})"


def bind_all(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect every Ok and every Error; see ``Result.collect_all``."""
    return Result.collect_all(results)
