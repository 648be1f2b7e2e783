"""Query and result types for vocab list requests."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from vocab_trainer.domain.vocabulary.entities import VocabularyItem


class OrderKey(Enum):
    """Sort orders understood by the store. TERM is the store default."""

    TERM = ""
    KNOWLEDGE_ASC = "knowledge_level"
    KNOWLEDGE_DESC = "knowledge_level_desc"
    PRACTICE_AT_ASC = "practice_at"
    PRACTICE_AT_DESC = "practice_at_desc"


@dataclass(frozen=True)
class VocabQuery:
    """
    Filter, order and window of a vocab list request.

    term and translation are combined with `mode`; the store owns the
    matching itself.
    """

    skip: int
    take: int
    term: str = ""
    translation: str = ""
    mode: Literal["or", "and"] = "or"
    order_by: OrderKey | None = None

    def __post_init__(self) -> None:
        if self.skip < 0:
            raise ValueError("Skip cannot be negative")
        if self.take < 1:
            raise ValueError("Take must be at least 1")

    def to_params(self) -> dict[str, str | int]:
        """Query string parameters of GET /api/vocab."""
        params: dict[str, str | int] = {
            "skip": self.skip,
            "take": self.take,
            "term": self.term,
            "translation": self.translation,
            "mode": self.mode,
        }
        if self.order_by is not None:
            params["order_by"] = self.order_by.value
        return params


@dataclass(frozen=True)
class VocabPage:
    """One page of a vocab list response."""

    items: list[VocabularyItem] = field(default_factory=list)
    count: int = 0
