"""
Library faults — the host-exception channel.

Expected absence and failure travel as values (Option.none, Result.error).
The exceptions below are reserved for programmer errors: unwrapping the wrong
variant, dispatching a union with the wrong number of handlers, or a union in
an impossible state. They fail loudly so that a wrong value can never be
observed silently.

    FunctionalError
    ├── InvalidOperationError (ValueError)
    │   ├── OptionUnwrapError
    │   ├── ResultUnwrapError
    │   └── ResultErrorUnwrapError
    ├── UnionArityError (TypeError)
    └── UnionStateError (AssertionError)
"""

from __future__ import annotations


class FunctionalError(Exception):
    """Root of every fault raised by this library."""


class InvalidOperationError(FunctionalError, ValueError):
    """An operation was called on a variant that does not support it."""


class OptionUnwrapError(InvalidOperationError):
    def __init__(self) -> None:
        super().__init__(
            "An option was unwrapped when the value was None. "
            "Be sure to check the option first with 'is_some()'."
        )


class ResultUnwrapError(InvalidOperationError):
    def __init__(self) -> None:
        super().__init__(
            "A result was unwrapped when the value was an Error. "
            "Be sure to check the result first with 'is_ok()'."
        )


class ResultErrorUnwrapError(InvalidOperationError):
    def __init__(self) -> None:
        super().__init__(
            "A result was unwrapped as an error when the value was Ok. "
            "Be sure to check the result first with 'is_error()'."
        )


class UnionArityError(FunctionalError, TypeError):
    """
    A union was dispatched with the wrong number of handlers, or a slot the
    union does not declare was constructed.
    """

    def __init__(self, union_name: str, arity: int, received: int, what: str = "handlers") -> None:
        self.union_name = union_name
        self.arity = arity
        self.received = received
        if what == "slot":
            message = f"{union_name} declares slots 1..{arity}, cannot construct slot {received}"
        else:
            message = f"{union_name} requires exactly {arity} {what}, got {received}"
        super().__init__(message)


class UnionStateError(FunctionalError, AssertionError):
    """The discriminant of a union is outside its declared range. Always a defect."""

    def __init__(self, union_name: str, slot: int, arity: int) -> None:
        super().__init__(
            f"{union_name} is in an invalid state: slot {slot} is outside 1..{arity}"
        )
