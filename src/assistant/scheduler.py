# src/assistant/scheduler.py — v1
"""Cancelable delayed delivery of assistant replies.

The delay models the assistant "typing". Each scheduled reply runs as an
asyncio task on the running loop and can be cancelled until it is
delivered, so a dismissed conversation never receives a late reply.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFn = Callable[[float], Awaitable[Any]]


class PendingReply(Generic[T]):
    """Handle on a scheduled reply. Await it to get the delivered value."""

    def __init__(self, task: asyncio.Task[T]) -> None:
        self._task = task

    def cancel(self) -> bool:
        """Cancel delivery. Returns False if the reply was already delivered."""
        return self._task.cancel()

    @property
    def done(self) -> bool:
        return self._task.done()

    @property
    def cancelled(self) -> bool:
        return self._task.cancelled()

    async def wait(self) -> T | None:
        """Wait for delivery. Returns None if the reply was cancelled."""
        # asyncio.wait leaves the task alone if the waiter itself is cancelled
        await asyncio.wait({self._task})
        if self._task.cancelled():
            return None
        return self._task.result()

    def __await__(self) -> Generator[Any, None, T | None]:
        return self.wait().__await__()


class ReplyScheduler:
    """Schedules reply production after a fixed, caller-controlled delay."""

    def __init__(self, delay_s: float = 1.0, sleep: SleepFn | None = None) -> None:
        if delay_s < 0:
            raise ValueError("delay_s must be >= 0")
        self._delay_s = delay_s
        self._sleep = sleep or asyncio.sleep
        self._pending: set[asyncio.Task[Any]] = set()

    @property
    def delay_s(self) -> float:
        return self._delay_s

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def schedule(
        self,
        produce: Callable[[], T],
        deliver: Callable[[T], None] | None = None,
    ) -> PendingReply[T]:
        """Run `produce` after the delay and pass its result to `deliver`.

        Must be called with a running event loop.
        """
        task = asyncio.get_running_loop().create_task(self._run(produce, deliver))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return PendingReply(task)

    def cancel_all(self) -> int:
        """Cancel every reply not yet delivered. Returns how many were cancelled."""
        cancelled = 0
        for task in list(self._pending):
            if task.cancel():
                cancelled += 1
        if cancelled:
            logger.debug("Cancelled %d pending repl%s", cancelled, "y" if cancelled == 1 else "ies")
        return cancelled

    async def _run(
        self,
        produce: Callable[[], T],
        deliver: Callable[[T], None] | None,
    ) -> T:
        if self._delay_s > 0:
            await self._sleep(self._delay_s)
        value = produce()
        if deliver is not None:
            deliver(value)
        return value
