"""
Transient user-visible notifications.

One NotificationQueue is created per process by the composition root and
shared by every view. Notifications are never dismissed by hand; each one
removes itself after the configured lifetime.
"""

from dataclasses import dataclass

import structlog

from vocab_trainer.application.protocols.scheduler import Scheduler
from vocab_trainer.constants import NOTIFICATION_LIFETIME_MS

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Notification:
    """A status message shown to the user."""

    id: int
    text: str


class NotificationQueue:
    """Keyed store of live notifications with a monotonic id counter."""

    def __init__(
        self, scheduler: Scheduler, lifetime_ms: int = NOTIFICATION_LIFETIME_MS
    ) -> None:
        self._scheduler = scheduler
        self._lifetime_ms = lifetime_ms
        self._notifications: dict[int, Notification] = {}
        self._next_id = 1

    @property
    def notifications(self) -> list[Notification]:
        """Live notifications, most recent first."""
        return sorted(self._notifications.values(), key=lambda n: n.id, reverse=True)

    def __len__(self) -> int:
        return len(self._notifications)

    def __contains__(self, notification_id: object) -> bool:
        return notification_id in self._notifications

    def dispatch(self, text: str) -> Notification:
        """
        Show a notification and schedule its removal.

        Identical texts are not merged: every call gets its own id and timer.

        Args:
            text: Message to show

        Returns:
            The created notification
        """
        notification = Notification(id=self._next_id, text=text)
        self._next_id += 1
        self._notifications[notification.id] = notification
        self._scheduler.call_later(self._lifetime_ms, lambda: self._expire(notification.id))
        logger.debug("notification_dispatched", notification_id=notification.id, text=text)
        return notification

    def _expire(self, notification_id: int) -> None:
        self._notifications.pop(notification_id, None)
