"""Scheduler backed by the running asyncio event loop."""

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

import structlog

from vocab_trainer.application.protocols.scheduler import TimerCallback

logger = structlog.get_logger(__name__)


class AsyncioTimerHandle:
    """Cancelable handle for a callback scheduled on the loop."""

    def __init__(
        self,
        handle: asyncio.TimerHandle,
        on_cancel: Callable[["AsyncioTimerHandle"], None],
    ) -> None:
        self._handle = handle
        self._on_cancel = on_cancel

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()

    def cancel(self) -> None:
        self._handle.cancel()
        self._on_cancel(self)


class AsyncioScheduler:
    """
    Runs timer callbacks on the running event loop.

    Pending timers and the tasks of coroutine callbacks are tracked until
    they finish, so tasks are not garbage collected mid-flight and
    `cancel_all` can stop everything still outstanding.
    """

    def __init__(self) -> None:
        self._timers: set[AsyncioTimerHandle] = set()
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> int:
        """Number of timers that have neither fired nor been cancelled."""
        return len(self._timers)

    def call_later(self, delay_ms: int, callback: TimerCallback) -> AsyncioTimerHandle:
        loop = asyncio.get_running_loop()

        def fire() -> None:
            self._timers.discard(timer)
            self._run(callback)

        timer = AsyncioTimerHandle(loop.call_later(delay_ms / 1000, fire), self._timers.discard)
        self._timers.add(timer)
        return timer

    def _run(self, callback: TimerCallback) -> None:
        result = callback()
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("timer_task_failed", exc_info=task.exception())

    async def drain(self) -> None:
        """Wait for callback tasks that are still running."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def cancel_all(self) -> None:
        """Cancel pending timers and running callback tasks, then wait for the tasks to unwind."""
        timers, tasks = list(self._timers), list(self._tasks)
        for timer in timers:
            timer.cancel()
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.debug("scheduler_cancelled", timers=len(timers), tasks=len(tasks))
