"""
Closed tagged unions of two to nine slots.

A union holds exactly one value out of N declared slots. The active slot is an
integer discriminant in [1, N]; the value is stored once, next to it. All
arities share one representation (``TaggedUnion``); ``Union2`` … ``Union9``
only fix the arity and the generic parameters.

    shape = Union3[int, str, float].second("circle")
    shape.match(
        lambda n: f"int {n}",
        lambda s: f"str {s}",
        lambda f: f"float {f}",
    )  # → "str circle"

Dispatch is exhaustive by construction: ``match`` and ``effect`` require one
handler per slot and there is no default case. A handler count that differs
from the arity raises UnionArityError before any handler runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Self, TypeVar

from functional.errors import UnionArityError, UnionStateError
from functional.unit import UNIT, Unit

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class TaggedUnion:
    """
    Indexed-slot union shared by every arity.

    Do not instantiate directly; use ``UnionN.at(slot, value)`` or one of the
    named slot constructors (``first`` … ``ninth``).
    """

    ARITY: ClassVar[int] = 0

    slot: int
    value: Any

    # ──────────────────────── Construction ────────────────────────

    @classmethod
    def at(cls, slot: int, value: Any) -> Self:
        """Construct the union with ``value`` in the 1-based ``slot``."""
        if not 1 <= slot <= cls.ARITY:
            raise UnionArityError(cls.__name__, cls.ARITY, slot, what="slot")
        return cls(slot, value)

    @classmethod
    def first(cls, value: Any) -> Self:
        return cls.at(1, value)

    @classmethod
    def second(cls, value: Any) -> Self:
        return cls.at(2, value)

    @classmethod
    def third(cls, value: Any) -> Self:
        return cls.at(3, value)

    @classmethod
    def fourth(cls, value: Any) -> Self:
        return cls.at(4, value)

    @classmethod
    def fifth(cls, value: Any) -> Self:
        return cls.at(5, value)

    @classmethod
    def sixth(cls, value: Any) -> Self:
        return cls.at(6, value)

    @classmethod
    def seventh(cls, value: Any) -> Self:
        return cls.at(7, value)

    @classmethod
    def eighth(cls, value: Any) -> Self:
        return cls.at(8, value)

    @classmethod
    def ninth(cls, value: Any) -> Self:
        return cls.at(9, value)

    # ──────────────────────── Dispatch ────────────────────────

    def match(self, *cases: Callable[[Any], R]) -> R:
        """
        Call the handler for the active slot with its value and return the result.

        Exactly ``ARITY`` handlers must be given, in slot order.
        """
        handler = self._select(cases)
        return handler(self.value)

    def effect(self, *cases: Callable[[Any], Any]) -> Unit:
        """Like ``match`` but for side effects; the handler's return value is discarded."""
        handler = self._select(cases)
        handler(self.value)
        return UNIT

    def _select(self, cases: tuple[Callable[[Any], Any], ...]) -> Callable[[Any], Any]:
        arity = type(self).ARITY
        if len(cases) != arity:
            raise UnionArityError(type(self).__name__, arity, len(cases))
        if not 1 <= self.slot <= arity:
            raise UnionStateError(type(self).__name__, self.slot, arity)
        return cases[self.slot - 1]

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self.slot}]({self.value!r})"


class Union2(TaggedUnion, Generic[A, B]):
    __slots__ = ()
    ARITY = 2


class Union3(TaggedUnion, Generic[A, B, C]):
    __slots__ = ()
    ARITY = 3


class Union4(TaggedUnion, Generic[A, B, C, D]):
    __slots__ = ()
    ARITY = 4


class Union5(TaggedUnion, Generic[A, B, C, D, E]):
    __slots__ = ()
    ARITY = 5


class Union6(TaggedUnion, Generic[A, B, C, D, E, F]):
    __slots__ = ()
    ARITY = 6


class Union7(TaggedUnion, Generic[A, B, C, D, E, F, G]):
    __slots__ = ()
    ARITY = 7


class Union8(TaggedUnion, Generic[A, B, C, D, E, F, G, H]):
    __slots__ = ()
    ARITY = 8


class Union9(TaggedUnion, Generic[A, B, C, D, E, F, G, H, I]):
    __slots__ = ()
    ARITY = 9
