"""
Filtered, sorted and paginated view over the vocab collection.

Search text changes are debounced; order changes and page navigation
query the store immediately. Filter and order changes go back to page 1,
and a response only applies if no newer query was issued since.
"""

import structlog

from vocab_trainer.application.common.debounce import Debouncer
from vocab_trainer.application.common.pagination import Pagination
from vocab_trainer.application.common.sequencing import RequestSequencer
from vocab_trainer.application.protocols.navigation import Confirmer
from vocab_trainer.application.protocols.scheduler import Scheduler
from vocab_trainer.application.protocols.vocab_store import VocabStoreProtocol
from vocab_trainer.application.vocabulary.deletion import confirm_and_delete
from vocab_trainer.application.vocabulary.queries import OrderKey, VocabQuery
from vocab_trainer.constants import SEARCH_DEBOUNCE_MS, VOCAB_PAGE_SIZE
from vocab_trainer.domain.vocabulary.entities import VocabularyItem
from vocab_trainer.exceptions import VocabStoreError

logger = structlog.get_logger(__name__)


class VocabListQuery:
    """State of the vocab list screen."""

    def __init__(
        self,
        store: VocabStoreProtocol,
        scheduler: Scheduler,
        confirmer: Confirmer,
        page_size: int = VOCAB_PAGE_SIZE,
        search_debounce_ms: int = SEARCH_DEBOUNCE_MS,
    ) -> None:
        self._store = store
        self._confirmer = confirmer
        self._search_debouncer = Debouncer(scheduler, search_debounce_ms, self._run_search)
        self._vocab_requests = RequestSequencer()
        self._count_requests = RequestSequencer()
        self._pagination = Pagination(page_size=page_size)
        self._closed = False

        self.items: list[VocabularyItem] = []
        self.search_text = ""
        self.order_key = OrderKey.TERM
        self.practice_count = 0

    @property
    def page(self) -> int:
        return self._pagination.page

    @property
    def total_pages(self) -> int:
        return self._pagination.total_pages

    @property
    def page_size(self) -> int:
        return self._pagination.page_size

    @property
    def search_pending(self) -> bool:
        return self._search_debouncer.pending

    def build_query(
        self, pagination: Pagination | None = None, order_key: OrderKey | None = None
    ) -> VocabQuery:
        """Store request for a page and order, defaulting to the ones shown."""
        if pagination is None:
            pagination = self._pagination
        return VocabQuery(
            skip=pagination.offset,
            take=pagination.limit,
            term=self.search_text,
            translation=self.search_text,
            mode="or",
            order_by=self.order_key if order_key is None else order_key,
        )

    async def load(self) -> None:
        """Initial load when the screen is shown."""
        await self.fetch_vocab()
        await self.fetch_practice_count()

    async def fetch_vocab(
        self, pagination: Pagination | None = None, order_key: OrderKey | None = None
    ) -> bool:
        """
        Query a page and show it.

        The requested page and order only replace the shown ones once the
        store answers; failed or superseded requests leave the list as it was.

        Args:
            pagination: Page to show instead of the current one
            order_key: Order to show instead of the current one

        Returns:
            True if the response was applied
        """
        if pagination is None:
            pagination = self._pagination
        if order_key is None:
            order_key = self.order_key
        ticket = self._vocab_requests.next()
        query = self.build_query(pagination, order_key)
        try:
            page = await self._store.list_vocab(query)
        except VocabStoreError as e:
            logger.error("vocab_query_failed", page=pagination.page, error=str(e), exc_info=True)
            return False

        if self._closed:
            return False
        if not self._vocab_requests.is_current(ticket):
            logger.debug("stale_vocab_response_discarded", ticket=ticket)
            return False

        self.items = page.items
        self.order_key = order_key
        self._pagination = pagination.with_count(page.count)
        return True

    async def fetch_practice_count(self) -> None:
        ticket = self._count_requests.next()
        try:
            count = await self._store.get_practice_count()
        except VocabStoreError as e:
            logger.error("practice_count_failed", error=str(e), exc_info=True)
            return

        if self._closed or not self._count_requests.is_current(ticket):
            return
        self.practice_count = count

    def set_search_text(self, text: str) -> None:
        """Update the filter; the query runs once typing pauses."""
        if self._closed:
            return
        self.search_text = text
        self._search_debouncer.trigger()

    async def _run_search(self) -> None:
        await self.fetch_vocab(self._pagination.first())

    async def set_order_key(self, order_key: OrderKey) -> None:
        """Change the sort order and query the first page right away."""
        await self.fetch_vocab(self._pagination.first(), order_key)

    async def fetch_next_page(self) -> None:
        if not self._pagination.has_next:
            return
        await self.fetch_vocab(self._pagination.go_to(self.page + 1))

    async def fetch_previous_page(self) -> None:
        if not self._pagination.has_previous:
            return
        await self.fetch_vocab(self._pagination.go_to(self.page - 1))

    async def delete_item(self, item: VocabularyItem) -> bool:
        """
        Delete an item after confirmation and refresh the list.

        When the deleted item was the last one on a page past the first,
        the previous page is shown instead of an empty one.

        Returns:
            False if the user declined the confirmation
        """
        if not await confirm_and_delete(self._store, self._confirmer, item):
            return False

        pagination = self._pagination
        if len(self.items) == 1 and pagination.has_previous:
            pagination = pagination.go_to(self.page - 1)
        await self.fetch_vocab(pagination)
        await self.fetch_practice_count()
        return True

    def close(self) -> None:
        """Stop reacting once the screen is gone."""
        self._closed = True
        self._search_debouncer.cancel()
