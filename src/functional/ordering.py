"""
Execution-order policy and cooperative cancellation for multi-callback effects.

Both types are plain values passed into effect combinators; neither schedules
anything by itself. Cancellation is cooperative: the scheduler asks
``is_cancelled()`` at its check-points and a callback that has started is
never interrupted.
"""

from __future__ import annotations

import threading
from enum import Enum, unique


@unique
class ProcessingOrder(Enum):
    """How a group of independent callbacks is run."""

    SEQUENTIAL = "sequential"
    """One at a time, in declaration order; cancellation is checked before each."""

    PARALLEL = "parallel"
    """All launched together; cancellation is checked once, before launch."""


class CancellationToken:
    """
    Shared cancellation flag.

    Safe to set from another thread or task. Once cancelled it stays cancelled.

        token = CancellationToken()
        task = asyncio.create_task(effect_some_async(option, a, b, cancellation=token))
        token.cancel()
    """

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    @classmethod
    def cancelled(cls) -> CancellationToken:
        """A token that is already cancelled."""
        token = cls()
        token.cancel()
        return token

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled()})"
