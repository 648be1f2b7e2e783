"""
Debounced actions.

Each call to trigger() cancels the pending timer and schedules a new one,
so the action runs once after input has been quiet for the full delay.

Example:
    debouncer = Debouncer(scheduler, 300, self._run_search)
    debouncer.trigger()  # keystroke
    debouncer.trigger()  # keystroke, first timer cancelled
    ...                  # 300 ms later: _run_search() runs once
"""

from vocab_trainer.application.protocols.scheduler import Scheduler, TimerCallback, TimerHandle


class Debouncer:
    """Owns one cancelable timer for one logical input."""

    def __init__(self, scheduler: Scheduler, delay_ms: int, action: TimerCallback) -> None:
        if delay_ms < 0:
            raise ValueError("Debounce delay cannot be negative")
        self._scheduler = scheduler
        self._delay_ms = delay_ms
        self._action = action
        self._handle: TimerHandle | None = None

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self) -> None:
        """Restart the quiet period."""
        self.cancel()
        self._handle = self._scheduler.call_later(self._delay_ms, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> object:
        self._handle = None
        return self._action()
