"""
Result-returning exception boundary.

Wraps exceptions into ``Result.error`` and eliminates try/except boilerplate.

Before:
    try:
        user = repo.find(user_id)
        return Result.ok(user)
    except Exception as e:
        return Result.error(e)

After:
    return attempt(repo.find, user_id)

Only ``Exception`` is caught; ``KeyboardInterrupt``, ``SystemExit`` and
``asyncio.CancelledError`` keep propagating.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from functional.aio import resolve
from functional.logs import get_logger
from functional.option import Option
from functional.result import Result

T = TypeVar("T")
type Container = Option[Any] | Result[Any, Any]

log = get_logger(__name__)


def attempt(operation: Callable[..., T], *args: Any) -> Result[T, Exception]:
    """Run ``operation(*args)`` now; Ok with its value, or Error with the exception."""
    try:
        return Result.ok(operation(*args))
    except Exception as exc:
        log.debug("attempt.fault_captured", exc_type=type(exc).__name__)
        return Result.error(exc)


async def attempt_async(operation: Callable[..., T | Awaitable[T]], *args: Any) -> Result[T, Exception]:
    """
    Async ``attempt``. Arguments may themselves be deferred; they are awaited
    inside the boundary, so a fault while producing them is captured too.
    """
    try:
        resolved = [await resolve(arg) for arg in args]
        return Result.ok(await resolve(operation(*resolved)))
    except Exception as exc:
        log.debug("attempt.fault_captured", exc_type=type(exc).__name__)
        return Result.error(exc)


def try_map(container: Container, mapper: Callable[..., Any]) -> Result[Container, Exception]:
    """``container.map(mapper)`` with any fault from ``mapper`` captured."""
    return attempt(container.map, mapper)


def try_bind(container: Container, binder: Callable[..., Any]) -> Result[Container, Exception]:
    """``container.bind(binder)`` with any fault from ``binder`` captured."""
    return attempt(container.bind, binder)


async def try_map_async(
    container: Container | Awaitable[Container],
    mapper: Callable[..., Any],
) -> Result[Container, Exception]:
    return await attempt_async(_map_async, container, mapper)


async def try_bind_async(
    container: Container | Awaitable[Container],
    binder: Callable[..., Any],
) -> Result[Container, Exception]:
    return await attempt_async(_bind_async, container, binder)


async def _map_async(container: Container, mapper: Callable[..., Any]) -> Any:
    return await container.map_async(mapper)


async def _bind_async(container: Container, binder: Callable[..., Any]) -> Any:
    return await container.bind_async(binder)


def inner_exception_message(exception: BaseException) -> Option[str]:
    """Message of the exception that caused ``exception`` (explicit cause first), if any."""
    inner = exception.__cause__ or exception.__context__
    return Option.from_nullable(inner).map(str)
