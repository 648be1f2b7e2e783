"""Tests for the shared notification queue."""

import pytest

from tests.conftest import FakeScheduler
from vocab_trainer.application.notifications.notification_queue import (
    Notification,
    NotificationQueue,
)


class TestNotificationQueue:
    def test_dispatch_is_visible_immediately(self, notifications: NotificationQueue) -> None:
        notification = notifications.dispatch("added: cat -> gato")

        assert notification == Notification(id=1, text="added: cat -> gato")
        assert notifications.notifications == [notification]
        assert 1 in notifications

    @pytest.mark.asyncio
    async def test_expires_after_3000_ms(
        self, scheduler: FakeScheduler, notifications: NotificationQueue
    ) -> None:
        notifications.dispatch("nothing to practice")

        await scheduler.advance(2999)
        assert len(notifications) == 1
        await scheduler.advance(1)
        assert len(notifications) == 0

    def test_ids_increase_monotonically(self, notifications: NotificationQueue) -> None:
        ids = [notifications.dispatch(f"n{i}").id for i in range(3)]
        assert ids == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_ids_are_never_reused(
        self, scheduler: FakeScheduler, notifications: NotificationQueue
    ) -> None:
        notifications.dispatch("first")
        await scheduler.advance(3000)
        assert len(notifications) == 0

        assert notifications.dispatch("second").id == 2

    @pytest.mark.asyncio
    async def test_identical_texts_are_independent(
        self, scheduler: FakeScheduler, notifications: NotificationQueue
    ) -> None:
        notifications.dispatch("same")
        await scheduler.advance(1000)
        notifications.dispatch("same")

        assert [n.id for n in notifications.notifications] == [2, 1]
        await scheduler.advance(2000)
        assert [n.id for n in notifications.notifications] == [2]
        await scheduler.advance(1000)
        assert notifications.notifications == []

    def test_newest_first(self, notifications: NotificationQueue) -> None:
        for text in ["a", "b", "c"]:
            notifications.dispatch(text)
        assert [n.text for n in notifications.notifications] == ["c", "b", "a"]

    def test_instances_are_isolated(self, scheduler: FakeScheduler) -> None:
        first = NotificationQueue(scheduler)
        second = NotificationQueue(scheduler)
        first.dispatch("a")

        assert second.dispatch("b").id == 1
        assert len(first) == 1
