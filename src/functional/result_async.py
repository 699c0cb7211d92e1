"""
Async mirror of the Result combinators.

Same contract as ``option_async``: the Result comes first, plain or deferred;
callbacks are sync or async; a deferred payload on either side is awaited
once, before any callback sees it; every call is one coroutine and never
yields a deferred value of a deferred value.

    total = await reduce_async(
        bind_async(map_async(load_order(order_id), price), charge),
        0,
    )
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from functional.aio import apply, resolve
from functional.ordering import CancellationToken, ProcessingOrder
from functional.result import Result
from functional.scheduling import run_effects
from functional.unit import UNIT, Unit

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")

type ResultSource[T, E] = Result[T, E] | Awaitable[Result[T, E]]


async def _settled(source: ResultSource[T, E]) -> Result[T, E]:
    """Resolve the container and its payload, on either side."""
    result = await resolve(source)
    if result.is_ok():
        value = result.unwrap()
        return Result.ok(await resolve(value)) if inspect.isawaitable(value) else result
    error = result.unwrap_error()
    return Result.error(await resolve(error)) if inspect.isawaitable(error) else result


# ──────────────────────── Introspection ────────────────────────


async def is_ok_async(source: ResultSource[T, E]) -> bool:
    return (await _settled(source)).is_ok()


async def is_error_async(source: ResultSource[T, E]) -> bool:
    return (await _settled(source)).is_error()


async def unwrap_async(source: ResultSource[T, E]) -> T:
    """Raises ResultUnwrapError on Error."""
    return (await _settled(source)).unwrap()


async def unwrap_error_async(source: ResultSource[T, E]) -> E:
    """Raises ResultErrorUnwrapError on Ok."""
    return (await _settled(source)).unwrap_error()


# ──────────────────────── Core Transformations ────────────────────────


async def match_async(
    source: ResultSource[T, E],
    on_ok: Callable[..., R | Awaitable[R]],
    on_error: Callable[..., R | Awaitable[R]],
) -> R:
    result = await _settled(source)
    if result.is_ok():
        return await apply(on_ok, result.unwrap())
    return await apply(on_error, result.unwrap_error())


async def map_async(source: ResultSource[T, E], mapper: Callable[..., U | Awaitable[U]]) -> Result[U, E]:
    """
    Map the Ok value of a plain or deferred Result with a sync or async function.

    A deferred Ok payload is awaited before mapping. Faults raised by the
    mapper propagate; use ``attempt`` to turn them into values.
    """
    result = await _settled(source)
    if result.is_error():
        return Result.error(result.unwrap_error())
    return Result.ok(await apply(mapper, result.unwrap()))


async def map_error_async(source: ResultSource[T, E], mapper: Callable[..., F | Awaitable[F]]) -> Result[T, F]:
    result = await _settled(source)
    if result.is_ok():
        return Result.ok(result.unwrap())
    return Result.error(await apply(mapper, result.unwrap_error()))


async def bind_async(
    source: ResultSource[T, E],
    binder: Callable[..., Result[U, E] | Awaitable[Result[U, E]]],
) -> Result[U, E]:
    """Chain a sync or async Result-returning function; the first Error wins."""
    result = await _settled(source)
    if result.is_error():
        return Result.error(result.unwrap_error())
    return await apply(binder, result.unwrap())


async def reduce_async(source: ResultSource[T, E], alternate: T) -> T:
    return (await _settled(source)).reduce(alternate)


async def reduce_with_async(source: ResultSource[T, E], alternate: Callable[..., T | Awaitable[T]]) -> T:
    """Extract Ok, or compute the alternate (from the error payload, if it takes one)."""
    result = await _settled(source)
    if result.is_ok():
        return result.unwrap()
    return await apply(alternate, result.unwrap_error())


async def bind_all_async(
    sources: Iterable[ResultSource[T, E]] | Awaitable[Iterable[ResultSource[T, E]]],
) -> Result[list[T], list[E]]:
    """Await every entry in order, then aggregate like ``Result.collect_all``."""
    return Result.collect_all([await _settled(source) for source in await resolve(sources)])


# ──────────────────────── Side Effects ────────────────────────


async def effect_async(
    source: ResultSource[T, E],
    on_ok: Callable[..., Any],
    on_error: Callable[..., Any],
) -> Unit:
    await match_async(source, on_ok, on_error)
    return UNIT


async def effect_ok_async(
    source: ResultSource[T, E],
    *actions: Callable[..., Any],
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Unit:
    """Run every action with the Ok value. Cancellation completes silently with UNIT."""
    result = await _settled(source)
    if result.is_error():
        return UNIT
    return await run_effects(actions, result.unwrap(), order=order, cancellation=cancellation)


async def effect_error_async(
    source: ResultSource[T, E],
    *actions: Callable[..., Any],
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Unit:
    result = await _settled(source)
    if result.is_ok():
        return UNIT
    return await run_effects(actions, result.unwrap_error(), order=order, cancellation=cancellation)


async def tap_async(
    source: ResultSource[T, E],
    on_ok: Callable[..., Any],
    on_error: Callable[..., Any],
) -> Result[T, E]:
    result = await _settled(source)
    await effect_async(result, on_ok, on_error)
    return result


async def tap_ok_async(
    source: ResultSource[T, E],
    *actions: Callable[..., Any],
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Result[T, E]:
    result = await _settled(source)
    await effect_ok_async(result, *actions, order=order, cancellation=cancellation)
    return result


async def tap_error_async(
    source: ResultSource[T, E],
    *actions: Callable[..., Any],
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Result[T, E]:
    result = await _settled(source)
    await effect_error_async(result, *actions, order=order, cancellation=cancellation)
    return result
