"""
Arity adaptation for user callbacks.

Combinators accept either a callback that takes the payload or one that takes
nothing (``lambda v: v + 1`` and ``lambda: 0`` are both valid ``map``
arguments). ``invoke`` inspects the callable once per call and passes the
payload only when the callable can receive a positional argument.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def positional_capacity(fn: Callable[..., Any]) -> int | None:
    """
    Number of positional arguments ``fn`` can take, or None when unbounded
    (``*args``) or when the signature cannot be inspected (some builtins).
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL:
            count += 1
    return count


def invoke(fn: Callable[..., Any], *args: Any) -> Any:
    """Call ``fn`` with as many of ``args`` as it accepts, in order."""
    if not args:
        return fn()
    capacity = positional_capacity(fn)
    if capacity is None:
        return fn(*args)
    return fn(*args[:capacity])
