"""Mapper for store schema ↔ domain conversion."""

from collections.abc import Sequence
from datetime import UTC, datetime

from vocab_trainer.domain.practice.value_objects import PracticeResult
from vocab_trainer.domain.vocabulary.entities import VocabId, VocabularyItem
from vocab_trainer.infrastructure.store.schemas import (
    PracticeResultSchema,
    VocabCreateResponse,
    VocabSchema,
)


class VocabMapper:
    """Mapper for store schema ↔ domain conversion."""

    def to_domain(self, schema: VocabSchema) -> VocabularyItem:
        """Convert a store response item to a domain entity."""
        return VocabularyItem(
            id=VocabId(schema.id),
            term=schema.term,
            translation=schema.translation,
            knowledge_level=schema.knowledge_level,
            practice_at=schema.practice_at,
        )

    def created_to_domain(
        self,
        schema: VocabCreateResponse,
        term: str,
        translation: str,
        now: datetime | None = None,
    ) -> VocabularyItem:
        """Convert a create response, filling fields the store left out."""
        return VocabularyItem(
            id=VocabId(schema.id),
            term=schema.term or term,
            translation=schema.translation or translation,
            knowledge_level=schema.knowledge_level or 0,
            # New vocab is due right away
            practice_at=schema.practice_at or now or datetime.now(UTC),
        )

    def results_to_schema(
        self, results: Sequence[PracticeResult]
    ) -> list[PracticeResultSchema]:
        """Convert practice results to the request body, keeping round order."""
        return [PracticeResultSchema(id=r.id.value, passed=r.passed) for r in results]
