"""
Option — a value that may be absent.

An Option[T] is either Some(value: T) or None. It is a two-slot tagged union
(slot 1 holds the value, slot 2 holds UNIT) with a combinator set that never
touches the absent case:

    ┌──────────┐   map    ┌──────────┐   bind   ┌──────────┐
    │ Some(3)  │─────────▶│ Some(6)  │─────────▶│ Some(..) │──▶ reduce / match
    └──────────┘          └──────────┘          └──────────┘
         None ───────────────── None ──────────────── None ──▶ alternate

Construction collapses null: ``Option.some(None)`` is the None variant, never
Some(None). Every callback may take the payload or nothing at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Iterable, TypeVar

from functional._callables import invoke
from functional.errors import OptionUnwrapError
from functional.union import Union2
from functional.unit import UNIT, Unit

if TYPE_CHECKING:
    from functional.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")

_SOME = 1
_NONE = 2


@dataclass(frozen=True, slots=True)
class Option(Generic[T]):
    """
    Presence/absence container.

    Usage:
        >>> Option.some(5).map(lambda x: x * 2).reduce(0)
        10
        >>> Option.none().map(lambda x: x * 2).reduce(0)
        0
    """

    _state: Union2[T, Unit]

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def some(value: T | None) -> Option[T]:
        """Wrap ``value``; a None input yields the None variant."""
        if value is None:
            return Option(Union2.second(UNIT))
        return Option(Union2.first(value))

    @staticmethod
    def none() -> Option[T]:
        return Option(Union2.second(UNIT))

    @staticmethod
    def from_nullable(value: T | None) -> Option[T]:
        """Lift a nullable value."""
        return Option.some(value)

    # ──────────────────────── Introspection ────────────────────────

    def is_some(self) -> bool:
        return self._state.slot == _SOME

    def is_none(self) -> bool:
        return self._state.slot == _NONE

    def unwrap(self) -> T:
        """
        Extract the value. Raises OptionUnwrapError on None.

        Check with ``is_some()`` first, or prefer ``match``/``reduce``.
        """
        if self.is_some():
            return self._state.value
        raise OptionUnwrapError()

    # ──────────────────────── Core Transformations ────────────────────────

    def match(self, when_some: Callable[[T], R] | Callable[[], R], when_none: Callable[[], R]) -> R:
        """Exhaustive extraction: one handler per variant, same result type."""
        return self._state.match(
            lambda value: invoke(when_some, value),
            lambda _: when_none(),
        )

    def map(self, mapper: Callable[[T], U] | Callable[[], U]) -> Option[U]:
        """
        Transform the value. None passes through and ``mapper`` is not called.

            Option.some(5).map(lambda x: x * 2)   # → Some(10)
            Option.some(5).map(lambda x: None)    # → None
        """
        return self.match(
            lambda value: Option.some(invoke(mapper, value)),
            Option.none,
        )

    def bind(self, binder: Callable[[T], Option[U]] | Callable[[], Option[U]]) -> Option[U]:
        """Chain an Option-returning function without nesting. Short-circuits on None."""
        return self.match(
            lambda value: invoke(binder, value),
            Option.none,
        )

    def filter(self, predicate: Callable[[T], bool] | Callable[[], bool]) -> Option[T]:
        """Keep the value only when ``predicate`` holds."""
        if self.is_none():
            return self
        return self if invoke(predicate, self.unwrap()) else Option.none()

    def reduce(self, alternate: T) -> T:
        """Extract the value or return ``alternate``."""
        return self.match(lambda value: value, lambda: alternate)

    def reduce_with(self, alternate: Callable[[], T]) -> T:
        """Extract the value or compute the alternate lazily."""
        return self.match(lambda value: value, alternate)

    def to_result(self, error: E) -> Result[T, E]:
        """Some → Ok, None → Error(error)."""
        from functional.result import Result

        return self.match(Result.ok, lambda: Result.error(error))

    # ──────────────────────── Side Effects ────────────────────────

    def effect(self, when_some: Callable[..., Any], when_none: Callable[[], Any]) -> Unit:
        """Run the handler of the active variant for its side effect."""
        self.match(when_some, when_none)
        return UNIT

    def effect_some(self, *actions: Callable[..., Any]) -> Unit:
        """Run every action with the value, in order. Nothing runs on None."""
        if self.is_some():
            value = self.unwrap()
            for action in actions:
                invoke(action, value)
        return UNIT

    def effect_none(self, *actions: Callable[[], Any]) -> Unit:
        """Run every action, in order, only on None."""
        if self.is_none():
            for action in actions:
                action()
        return UNIT

    def tap(self, when_some: Callable[..., Any], when_none: Callable[[], Any]) -> Option[T]:
        """Like ``effect`` but returns this Option for further chaining."""
        self.effect(when_some, when_none)
        return self

    def tap_some(self, *actions: Callable[..., Any]) -> Option[T]:
        self.effect_some(*actions)
        return self

    def tap_none(self, *actions: Callable[[], Any]) -> Option[T]:
        self.effect_none(*actions)
        return self

    # ──────────────────────── Async Support ────────────────────────

    async def map_async(self, mapper: Callable[..., U | Awaitable[U]]) -> Option[U]:
        """
        Map with a sync or async function.

            option = await Option.some(user_id).map_async(fetch_user)
        """
        from functional import option_async

        return await option_async.map_async(self, mapper)

    async def bind_async(self, binder: Callable[..., Option[U] | Awaitable[Option[U]]]) -> Option[U]:
        from functional import option_async

        return await option_async.bind_async(self, binder)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: ``if option: ...`` holds only on Some."""
        return self.is_some()

    def __repr__(self) -> str:
        return f"Some({self._state.value!r})" if self.is_some() else "Nothing"


# ──────────────────────── Collections ────────────────────────


def filter_each(options: Iterable[Option[T]], predicate: Callable[..., bool]) -> list[Option[T]]:
    """Filter every Option in ``options``, keeping positions."""
    return [option.filter(predicate) for option in options]


def collect_some(options: Iterable[Option[T]]) -> list[T]:
    """Values of the Some entries, in order."""
    return [option.unwrap() for option in options if option.is_some()]
