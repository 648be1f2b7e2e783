"""
Composition root.

Creates the process-wide collaborators once (store client, scheduler and
the shared notification queue) and builds one component per screen.

Usage:
    async with create_app(navigator=router, confirmer=dialogs) as app:
        practice = app.practice_session()
        await practice.start()
"""

from types import TracebackType
from typing import Self
from weakref import WeakSet

import httpx
import structlog

from vocab_trainer.application.notifications.notification_queue import NotificationQueue
from vocab_trainer.application.practice.session_engine import (
    PracticeSessionEngine,
    SubmissionFailureHandler,
)
from vocab_trainer.application.protocols.navigation import Confirmer, Navigator
from vocab_trainer.application.protocols.vocab_store import VocabStoreProtocol
from vocab_trainer.application.vocabulary.add_form import VocabAddForm
from vocab_trainer.application.vocabulary.list_query import VocabListQuery
from vocab_trainer.config import Settings, configure_logging, get_settings
from vocab_trainer.infrastructure.scheduling.asyncio_scheduler import AsyncioScheduler
from vocab_trainer.infrastructure.store.client import VocabClient

logger = structlog.get_logger(__name__)


class VocabApp:
    """
    Owns shared state and hands out screen components.

    Closing the app closes every component still alive, cancels timers and
    timer tasks still pending on the scheduler, then closes the client.
    """

    def __init__(
        self,
        store: VocabStoreProtocol,
        scheduler: AsyncioScheduler,
        navigator: Navigator,
        confirmer: Confirmer,
        client: VocabClient | None = None,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self.navigator = navigator
        self.confirmer = confirmer
        self.notifications = NotificationQueue(scheduler)
        self._client = client
        self._components: WeakSet[PracticeSessionEngine | VocabListQuery | VocabAddForm] = (
            WeakSet()
        )

    def practice_session(
        self, on_submission_failure: SubmissionFailureHandler | None = None
    ) -> PracticeSessionEngine:
        engine = PracticeSessionEngine(
            self.store,
            self.notifications,
            self.navigator,
            on_submission_failure=on_submission_failure,
        )
        self._components.add(engine)
        return engine

    def vocab_list(self) -> VocabListQuery:
        vocab_list = VocabListQuery(self.store, self.scheduler, self.confirmer)
        self._components.add(vocab_list)
        return vocab_list

    def add_form(self) -> VocabAddForm:
        form = VocabAddForm(self.store, self.scheduler, self.notifications, self.confirmer)
        self._components.add(form)
        return form

    async def close(self) -> None:
        for component in list(self._components):
            component.close()
        await self.scheduler.cancel_all()
        if self._client is not None:
            await self._client.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


def create_app(
    navigator: Navigator,
    confirmer: Confirmer,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> VocabApp:
    """Create and configure the application against the configured store."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    client = VocabClient(
        settings.VOCAB_API_URL, timeout=settings.REQUEST_TIMEOUT, transport=transport
    )
    logger.info("vocab_app_created", store_url=settings.VOCAB_API_URL)
    return VocabApp(
        store=client,
        scheduler=AsyncioScheduler(),
        navigator=navigator,
        confirmer=confirmer,
        client=client,
    )
