"""
Suspension-aware composition helpers.

Every async combinator in ``option_async`` and ``result_async`` is written in
terms of the two functions below, which is what guarantees that a chain never
produces a deferred value of a deferred value:

  1. ``resolve`` the incoming container (plain or awaitable)
  2. ``apply`` the user callback (sync or async, with or without an argument)
  3. re-wrap the plain outcome; the ``async def`` itself adds the one layer

    option = await map_async(fetch_user(), lambda user: user.name)
    option = await map_async(Option.some(3), fetch_profile)   # async mapper
    option = await bind_async(map_async(fetch_user(), lookup), validate)
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, TypeVar

from functional._callables import invoke

T = TypeVar("T")


async def resolve(value: T | Awaitable[T]) -> T:
    """Await ``value`` for as long as it is awaitable and return the plain result."""
    while inspect.isawaitable(value):
        value = await value
    return value  # type: ignore[return-value]


async def apply(fn: Callable[..., Any], *args: Any) -> Any:
    """Invoke an arity-adaptive callback and resolve whatever it returns."""
    return await resolve(invoke(fn, *args))


async def lift(value: T) -> T:
    """Wrap an already-known value as a deferred one."""
    return value
