"""Pytest configuration and fixtures."""

import inspect
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from vocab_trainer.application.notifications.notification_queue import NotificationQueue
from vocab_trainer.application.protocols.scheduler import TimerCallback
from vocab_trainer.application.vocabulary.queries import VocabPage
from vocab_trainer.domain.vocabulary.entities import VocabId, VocabularyItem

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


def make_item(
    id: int,
    term: str = "cat",
    translation: str = "gato",
    knowledge_level: int = 0,
    practice_in_days: float = 0,
) -> VocabularyItem:
    """Create a vocab item as the store would return it."""
    return VocabularyItem(
        id=VocabId(id),
        term=term,
        translation=translation,
        knowledge_level=knowledge_level,
        practice_at=NOW + timedelta(days=practice_in_days),
    )


def make_page(count: int, *ids: int) -> VocabPage:
    return VocabPage(items=[make_item(i, term=f"term{i}") for i in ids], count=count)


@dataclass
class FakeTimer:
    due_ms: int
    seq: int
    callback: TimerCallback
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Scheduler driven by a manual clock; callbacks only run in advance()."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay_ms: int, callback: TimerCallback) -> FakeTimer:
        timer = FakeTimer(due_ms=self.now_ms + delay_ms, seq=len(self.timers), callback=callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    async def advance(self, ms: int) -> None:
        """Move the clock forward, running every timer that falls due."""
        target = self.now_ms + ms
        while True:
            due = sorted(
                (t for t in self.pending if t.due_ms <= target),
                key=lambda t: (t.due_ms, t.seq),
            )
            if not due:
                break
            timer = due[0]
            self.now_ms = timer.due_ms
            timer.fired = True
            result = timer.callback()
            if inspect.isawaitable(result):
                await result
        self.now_ms = target


@dataclass
class FakeNavigator:
    paths: list[str] = field(default_factory=list)

    def navigate(self, path: str) -> None:
        self.paths.append(path)


@dataclass
class FakeConfirmer:
    answer: bool = True
    messages: list[str] = field(default_factory=list)

    def confirm(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def navigator() -> FakeNavigator:
    return FakeNavigator()


@pytest.fixture
def confirmer() -> FakeConfirmer:
    return FakeConfirmer()


@pytest.fixture
def notifications(scheduler: FakeScheduler) -> NotificationQueue:
    return NotificationQueue(scheduler)


@pytest.fixture
def store() -> AsyncMock:
    """Vocab store double with empty defaults for every endpoint."""
    mock = AsyncMock()
    mock.list_vocab.return_value = VocabPage(items=[], count=0)
    mock.get_practice_batch.return_value = []
    mock.get_practice_count.return_value = 0
    mock.delete_vocab.return_value = None
    mock.submit_practice_results.return_value = None
    return mock
