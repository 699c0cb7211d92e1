"""
Effect scheduling — run a group of independent callbacks in order or fanned out.

    SEQUENTIAL   a ─▶ b ─▶ c          token checked before a, before b, before c
    PARALLEL     ┌▶ a ┐
                 ├▶ b ┼─▶ join        token checked once, before launch
                 └▶ c ┘

Both runners:
  - accept sync callbacks, coroutine functions, and callbacks returning
    awaitables; each receives ``*args`` when it can take them
  - return UNIT, including when cancelled: cancellation is a successful,
    side-effect-free completion, never a fault
  - let callback faults propagate to the caller

PARALLEL joins every launched callback before returning, even when some of
them raise; the first fault in declaration order is then re-raised. Plain
callables run in worker threads (``asyncio.to_thread``) so they can overlap;
the number running at once is bounded by ``max_parallelism``.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Iterable

from functional._callables import invoke
from functional.aio import apply, resolve
from functional.config import get_settings
from functional.logs import get_logger
from functional.ordering import CancellationToken, ProcessingOrder
from functional.unit import UNIT, Unit

log = get_logger(__name__)


def _is_cancelled(cancellation: CancellationToken | None) -> bool:
    return cancellation is not None and cancellation.is_cancelled()


async def run_sequential(
    actions: Iterable[Callable[..., Any]],
    *args: Any,
    cancellation: CancellationToken | None = None,
) -> Unit:
    """Run ``actions`` one at a time in declaration order."""
    pending = list(actions)
    for position, action in enumerate(pending):
        if _is_cancelled(cancellation):
            log.debug("effects.cancelled", order="sequential", skipped=len(pending) - position)
            return UNIT
        await apply(action, *args)
    return UNIT


async def run_parallel(
    actions: Iterable[Callable[..., Any]],
    *args: Any,
    cancellation: CancellationToken | None = None,
    max_parallelism: int | None = None,
) -> Unit:
    """Launch every action together and wait for all of them to finish."""
    limit = get_settings().max_parallelism if max_parallelism is None else max_parallelism
    if limit < 1:
        raise ValueError(f"max_parallelism must be at least 1, got {limit}")
    pending = list(actions)
    if _is_cancelled(cancellation):
        log.debug("effects.cancelled", order="parallel", skipped=len(pending))
        return UNIT
    if not pending:
        return UNIT

    semaphore = asyncio.Semaphore(limit)

    async def launch(action: Callable[..., Any]) -> None:
        async with semaphore:
            if inspect.iscoroutinefunction(action):
                await apply(action, *args)
            else:
                await resolve(await asyncio.to_thread(invoke, action, *args))

    outcomes = await asyncio.gather(*(launch(action) for action in pending), return_exceptions=True)
    faults = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
    if faults:
        log.debug("effects.parallel_fault", faults=len(faults), launched=len(pending))
        raise faults[0]
    return UNIT


async def run_effects(
    actions: Iterable[Callable[..., Any]],
    *args: Any,
    order: ProcessingOrder | None = None,
    cancellation: CancellationToken | None = None,
) -> Unit:
    """Dispatch to ``run_sequential`` or ``run_parallel``; order defaults to settings."""
    effective = order or get_settings().processing_order
    if effective is ProcessingOrder.PARALLEL:
        return await run_parallel(actions, *args, cancellation=cancellation)
    return await run_sequential(actions, *args, cancellation=cancellation)
