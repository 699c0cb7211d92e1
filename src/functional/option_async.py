"""
Async mirror of the Option combinators.

Every function takes the Option first, either as a plain Option or as an
awaitable producing one, and is itself a coroutine, so the outcome is always
exactly one awaitable layer:

    name = await reduce_async(map_async(find_user(user_id), fetch_name), "anonymous")

Callbacks may be sync or async and may take the payload or nothing. A
deferred payload (``Option.some(coroutine)``) is awaited once, before any
callback sees it, and every returned Option holds the plain value.
Multi-callback effects accept ``order`` (SEQUENTIAL / PARALLEL) and a
cooperative ``cancellation`` token; see ``functional.scheduling``.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from functional.aio import apply, resolve
from functional.option import Option, collect_some
from functional.ordering import CancellationToken, ProcessingOrder
from functional.scheduling import run_effects
from functional.unit import UNIT, Unit

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

type OptionSource[T] = Option[T] | Awaitable[Option[T]]


async def _settled(source: OptionSource[T]) -> Option[T]:
    """Resolve the container and, on Some, its payload."""
    option = await resolve(source)
    if option.is_some() and inspect.isawaitable(option.unwrap()):
        return Option.some(await resolve(option.unwrap()))
    return option


# ──────────────────────── Construction & Introspection ────────────────────────


async def from_nullable_async(value: T | None | Awaitable[T | None]) -> Option[T]:
    """Lift a (possibly deferred) nullable value."""
    return Option.from_nullable(await resolve(value))


async def is_some_async(source: OptionSource[T]) -> bool:
    return (await _settled(source)).is_some()


async def is_none_async(source: OptionSource[T]) -> bool:
    return (await _settled(source)).is_none()


async def unwrap_async(source: OptionSource[T]) -> T:
    """Raises OptionUnwrapError on None, like ``Option.unwrap``."""
    return (await _settled(source)).unwrap()


# ──────────────────────── Core Transformations ────────────────────────


async def match_async(
    source: OptionSource[T],
    when_some: Callable[..., R | Awaitable[R]],
    when_none: Callable[[], R | Awaitable[R]],
) -> R:
    option = await _settled(source)
    if option.is_some():
        return await apply(when_some, option.unwrap())
    return await apply(when_none)


async def map_async(source: OptionSource[T], mapper: Callable[..., U | Awaitable[U]]) -> Option[U]:
    """
    Map the value of a plain or deferred Option with a sync or async function.

    A deferred payload (``Option.some(coroutine)``) is awaited before mapping.
    """
    option = await _settled(source)
    if option.is_none():
        return Option.none()
    return Option.some(await apply(mapper, option.unwrap()))


async def bind_async(
    source: OptionSource[T],
    binder: Callable[..., Option[U] | Awaitable[Option[U]]],
) -> Option[U]:
    option = await _settled(source)
    if option.is_none():
        return Option.none()
    return await apply(binder, option.unwrap())


async def filter_async(source: OptionSource[T], predicate: Callable[..., bool | Awaitable[bool]]) -> Option[T]:
    option = await _settled(source)
    if option.is_none():
        return option
    if await apply(predicate, option.unwrap()):
        return option
    return Option.none()


async def reduce_async(source: OptionSource[T], alternate: T) -> T:
    return (await _settled(source)).reduce(alternate)


async def reduce_with_async(source: OptionSource[T], alternate: Callable[[], T | Awaitable[T]]) -> T:
    option = await _settled(source)
    if option.is_some():
        return option.unwrap()
    return await apply(alternate)


# ──────────────────────── Side Effects ────────────────────────


async def effect_async(
    source: OptionSource[T],
    when_some: Callable[..., Any],
    when_none: Callable[[], Any],
) -> Unit:
    await match_async(source, when_some, when_none)
    return UNIT


async def effect_some_async(
    source: OptionSource[T],
    *actions: Callable[..., Any],
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Unit:
    """
    Run every action with the value. Nothing runs on None.

    With a cancelled token the call still completes, returning UNIT without
    running any action.
    """
    option = await _settled(source)
    if option.is_none():
        return UNIT
    return await run_effects(actions, option.unwrap(), order=order, cancellation=cancellation)


async def effect_none_async(
    source: OptionSource[T],
    *actions: Callable[[], Any],
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Unit:
    option = await _settled(source)
    if option.is_some():
        return UNIT
    return await run_effects(actions, order=order, cancellation=cancellation)


async def tap_async(
    source: OptionSource[T],
    when_some: Callable[..., Any],
    when_none: Callable[[], Any],
) -> Option[T]:
    option = await _settled(source)
    await effect_async(option, when_some, when_none)
    return option


async def tap_some_async(
    source: OptionSource[T],
    *actions: Callable[..., Any],
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Option[T]:
    option = await _settled(source)
    await effect_some_async(option, *actions, order=order, cancellation=cancellation)
    return option


async def tap_none_async(
    source: OptionSource[T],
    *actions: Callable[[], Any],
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Option[T]:
    option = await _settled(source)
    await effect_none_async(option, *actions, order=order, cancellation=cancellation)
    return option


# ──────────────────────── Collections ────────────────────────


async def filter_each_async(
    options: Iterable[OptionSource[T]] | Awaitable[Iterable[OptionSource[T]]],
    predicate: Callable[..., bool | Awaitable[bool]],
) -> list[Option[T]]:
    """Filter every Option with a sync or async predicate, one at a time, keeping positions."""
    return [await filter_async(option, predicate) for option in await resolve(options)]


async def collect_some_async(
    options: Iterable[OptionSource[T]] | Awaitable[Iterable[OptionSource[T]]],
) -> list[T]:
    return collect_some([await _settled(option) for option in await resolve(options)])
