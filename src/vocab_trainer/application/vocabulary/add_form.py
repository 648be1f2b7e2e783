"""
Add-vocab screen.

While the user types a term or translation, existing vocab matching either
field is looked up so duplicates are noticed before they are added. Both
fields share one debounce timer: the last keystroke in either wins.
"""

import structlog

from vocab_trainer.application.common.debounce import Debouncer
from vocab_trainer.application.common.sequencing import RequestSequencer
from vocab_trainer.application.notifications.notification_queue import NotificationQueue
from vocab_trainer.application.protocols.navigation import Confirmer
from vocab_trainer.application.protocols.scheduler import Scheduler
from vocab_trainer.application.protocols.vocab_store import VocabStoreProtocol
from vocab_trainer.application.vocabulary.deletion import confirm_and_delete
from vocab_trainer.application.vocabulary.queries import VocabQuery
from vocab_trainer.constants import SIMILAR_VOCAB_DEBOUNCE_MS, SIMILAR_VOCAB_TAKE
from vocab_trainer.domain.common.text import trim
from vocab_trainer.domain.vocabulary.entities import VocabularyItem
from vocab_trainer.exceptions import VocabStoreError

logger = structlog.get_logger(__name__)


class VocabAddForm:
    """State of the add-vocab screen."""

    def __init__(
        self,
        store: VocabStoreProtocol,
        scheduler: Scheduler,
        notifications: NotificationQueue,
        confirmer: Confirmer,
        similar_debounce_ms: int = SIMILAR_VOCAB_DEBOUNCE_MS,
    ) -> None:
        self._store = store
        self._notifications = notifications
        self._confirmer = confirmer
        self._similar_debouncer = Debouncer(
            scheduler, similar_debounce_ms, self.fetch_similar_vocab
        )
        self._similar_requests = RequestSequencer()
        self._closed = False

        self.term = ""
        self.translation = ""
        self.similar_items: list[VocabularyItem] = []

    @property
    def can_submit(self) -> bool:
        return bool(trim(self.term)) and bool(trim(self.translation))

    @property
    def lookup_pending(self) -> bool:
        return self._similar_debouncer.pending

    async def load(self) -> None:
        await self.fetch_similar_vocab()

    def set_term(self, term: str) -> None:
        if self._closed:
            return
        self.term = term
        self._similar_debouncer.trigger()

    def set_translation(self, translation: str) -> None:
        if self._closed:
            return
        self.translation = translation
        self._similar_debouncer.trigger()

    def build_similar_query(self) -> VocabQuery:
        return VocabQuery(
            skip=0,
            take=SIMILAR_VOCAB_TAKE,
            term=self.term,
            translation=self.translation,
            mode="or",
        )

    async def fetch_similar_vocab(self) -> None:
        ticket = self._similar_requests.next()
        try:
            page = await self._store.list_vocab(self.build_similar_query())
        except VocabStoreError as e:
            logger.error("similar_vocab_query_failed", error=str(e), exc_info=True)
            return

        if self._closed:
            return
        if not self._similar_requests.is_current(ticket):
            logger.debug("stale_similar_response_discarded", ticket=ticket)
            return
        self.similar_items = page.items

    async def submit(self) -> VocabularyItem | None:
        """
        Add the typed pair to the store.

        Returns:
            The created item, or None if nothing was added
        """
        if not self.can_submit:
            return None

        term = trim(self.term)
        translation = trim(self.translation)
        try:
            created = await self._store.create_vocab(term, translation)
        except VocabStoreError as e:
            logger.error("vocab_create_failed", term=term, error=str(e), exc_info=True)
            return None

        self._notifications.dispatch(f"added: {term} -> {translation}")
        logger.info("created_vocab", vocab_id=created.id.value)
        self.term = ""
        self.translation = ""
        self.similar_items = []
        # The cleared fields must not be overwritten by an in-flight lookup.
        self._similar_requests.next()
        return created

    async def delete_item(self, item: VocabularyItem) -> bool:
        """Delete a similar item after confirmation and refresh the lookup."""
        if not await confirm_and_delete(self._store, self._confirmer, item):
            return False
        await self.fetch_similar_vocab()
        return True

    def close(self) -> None:
        self._closed = True
        self._similar_debouncer.cancel()
