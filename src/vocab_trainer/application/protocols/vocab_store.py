"""Protocol for the vocab store service."""

from collections.abc import Sequence
from typing import Protocol

from vocab_trainer.application.vocabulary.queries import VocabPage, VocabQuery
from vocab_trainer.domain.practice.value_objects import PracticeResult
from vocab_trainer.domain.vocabulary.entities import VocabId, VocabularyItem


class VocabStoreProtocol(Protocol):
    """
    Protocol for vocab store operations.

    Implementations raise VocabStoreError for every failure.
    """

    async def list_vocab(self, query: VocabQuery) -> VocabPage:
        """
        Query one page of vocab.

        Args:
            query: Filter, order and window of the page

        Returns:
            Items of the page and the total number of matches
        """
        ...

    async def create_vocab(self, term: str, translation: str) -> VocabularyItem:
        """Create a vocab item and return it as stored."""
        ...

    async def delete_vocab(self, vocab_id: VocabId) -> None:
        """Delete a vocab item."""
        ...

    async def get_practice_batch(self) -> list[VocabularyItem]:
        """Get the items due for practice. An empty list means nothing is due."""
        ...

    async def submit_practice_results(self, results: Sequence[PracticeResult]) -> None:
        """Submit the ordered outcomes of a practice session."""
        ...

    async def get_practice_count(self) -> int:
        """Count the items due for practice."""
        ...
