"""
Deferred try/catch/finally — an exception boundary built as a recipe.

    result = (
        Try(lambda: load(path))
        .catch(lambda exc: default_config)
        .finally_(lambda: handle.close())
        .invoke()
    )

Each step is an immutable record wrapping the previous one. Nothing runs
until ``invoke()`` / ``invoke_async()``. Invoking runs the whole recipe again
every time (operation included); results are never memoised.

On ``invoke``:
  1. run the operation (with its input, when built with ``Try.with_input``)
  2. on an Exception, run the handler with it and use the handler's value
  3. run the cleanup exactly once, whatever happened in 1 and 2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

from functional._callables import invoke
from functional.aio import apply, resolve
from functional.logs import get_logger

T = TypeVar("T")

log = get_logger(__name__)


class _NoInput:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<no input>"


_NO_INPUT: Any = _NoInput()


@dataclass(frozen=True, slots=True)
class Try(Generic[T]):
    """A possibly-throwing operation, not yet executed."""

    operation: Callable[..., T | Awaitable[T]]
    value: Any = _NO_INPUT

    @staticmethod
    def with_input(value: Any, operation: Callable[[Any], T | Awaitable[T]]) -> Try[T]:
        """Wrap a one-argument operation together with its (possibly deferred) input."""
        return Try(operation, value)

    def catch(self, handler: Callable[[Exception], T | Awaitable[T]] | Callable[[], T | Awaitable[T]]) -> Catch[T]:
        return Catch(self, handler)

    def _run(self) -> Any:
        if self.value is _NO_INPUT:
            return self.operation()
        return self.operation(self.value)

    async def _run_async(self) -> T:
        if self.value is _NO_INPUT:
            return await resolve(self.operation())
        return await resolve(self.operation(await resolve(self.value)))


@dataclass(frozen=True, slots=True)
class Catch(Generic[T]):
    """A Try with a fault handler attached."""

    tried: Try[T]
    handler: Callable[..., T | Awaitable[T]]

    def finally_(self, cleanup: Callable[[], Any]) -> Finally[T]:
        return Finally(self, cleanup)

    def invoke(self) -> T:
        try:
            return self.tried._run()
        except Exception as exc:
            log.debug("try_catch.fault_caught", exc_type=type(exc).__name__)
            return invoke(self.handler, exc)

    async def invoke_async(self) -> T:
        try:
            return await self.tried._run_async()
        except Exception as exc:
            log.debug("try_catch.fault_caught", exc_type=type(exc).__name__)
            return await apply(self.handler, exc)


@dataclass(frozen=True, slots=True)
class Finally(Generic[T]):
    """A Catch with an unconditional cleanup step."""

    caught: Catch[T]
    cleanup: Callable[[], Any]

    def invoke(self) -> T:
        try:
            return self.caught.invoke()
        finally:
            self.cleanup()

    async def invoke_async(self) -> T:
        try:
            return await self.caught.invoke_async()
        finally:
            await resolve(self.cleanup())
