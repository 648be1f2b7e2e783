"""Protocol for deferred, cancelable work."""

from collections.abc import Awaitable, Callable
from typing import Protocol

TimerCallback = Callable[[], Awaitable[None] | None]


class TimerHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback. Cancelling a fired or cancelled timer is a no-op."""
        ...


class Scheduler(Protocol):
    """Runs callbacks after a delay on the event loop."""

    def call_later(self, delay_ms: int, callback: TimerCallback) -> TimerHandle:
        """
        Schedule a callback.

        Args:
            delay_ms: Delay in milliseconds
            callback: Plain function or coroutine function; a returned
                awaitable is driven to completion by the scheduler

        Returns:
            Handle that cancels the pending callback
        """
        ...
