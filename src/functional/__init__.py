"""
Sum types and Railway-Oriented Programming for Python.

Explicit, composable error handling: absence and failure are values, faults
are crossed only at an explicit boundary, and every combinator has an async
counterpart that never produces a deferred value of a deferred value.

    from functional import Result, some

    def validate_age(age: int) -> Result[int, str]:
        if age < 0:
            return Result.error("Age must be non-negative")
        return Result.ok(age)

    result = (
        Result.ok({"name": "Alice", "age": 30})
        .bind(lambda d: validate_age(d["age"]))
        .map(lambda age: f"Valid user, age {age}")
    )

    name = some(user).map(lambda u: u.name).reduce("anonymous")
"""

from functional import option_async, result_async
from functional.assertions import OptionAssertions, ResultAssertions
from functional.attempt import (
    attempt,
    attempt_async,
    inner_exception_message,
    try_bind,
    try_bind_async,
    try_map,
    try_map_async,
)
from functional.config import FunctionalSettings, get_settings, reset_settings
from functional.errors import (
    FunctionalError,
    InvalidOperationError,
    OptionUnwrapError,
    ResultErrorUnwrapError,
    ResultUnwrapError,
    UnionArityError,
    UnionStateError,
)
from functional.logs import configure_logging
from functional.option import Option, collect_some, filter_each
from functional.ordering import CancellationToken, ProcessingOrder
from functional.prelude import error, none, ok, optional, some
from functional.result import Result, bind_all
from functional.scheduling import run_effects, run_parallel, run_sequential
from functional.trycatch import Catch, Finally, Try
from functional.tryresult import TryResult
from functional.union import (
    TaggedUnion,
    Union2,
    Union3,
    Union4,
    Union5,
    Union6,
    Union7,
    Union8,
    Union9,
)
from functional.unit import UNIT, Unit
from functional.validation import ValidationResult

__all__ = [
    "Option",
    "Result",
    "TryResult",
    "ValidationResult",
    "Try",
    "Catch",
    "Finally",
    "TaggedUnion",
    "Union2",
    "Union3",
    "Union4",
    "Union5",
    "Union6",
    "Union7",
    "Union8",
    "Union9",
    "Unit",
    "UNIT",
    "some",
    "none",
    "optional",
    "ok",
    "error",
    "bind_all",
    "collect_some",
    "filter_each",
    "attempt",
    "attempt_async",
    "try_map",
    "try_bind",
    "try_map_async",
    "try_bind_async",
    "inner_exception_message",
    "option_async",
    "result_async",
    "ProcessingOrder",
    "CancellationToken",
    "run_effects",
    "run_sequential",
    "run_parallel",
    "FunctionalSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "FunctionalError",
    "InvalidOperationError",
    "OptionUnwrapError",
    "ResultUnwrapError",
    "ResultErrorUnwrapError",
    "UnionArityError",
    "UnionStateError",
    "OptionAssertions",
    "ResultAssertions",
]

__version__ = "1.0.0"
