"""
Unit — the single "no value" value.

Effect combinators return UNIT instead of None so that "ran for its side
effects" stays distinguishable from "produced nothing".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Unit:
    """The only inhabitant of the unit type. Compare with ``==`` or ``is UNIT``."""

    def __repr__(self) -> str:
        return "Unit"


UNIT = Unit()
