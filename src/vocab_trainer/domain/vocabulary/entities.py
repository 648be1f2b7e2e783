"""
Vocabulary entity as read from the vocab store.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from vocab_trainer.domain.common.entity import Entity, EntityId
from vocab_trainer.domain.common.exceptions import DomainError
from vocab_trainer.domain.common.text import trim

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class VocabId(EntityId):
    """Strongly-typed vocab identifier."""

    value: int


@dataclass(frozen=True, eq=False)
class VocabularyItem(Entity[VocabId]):
    """
    A term/translation pair owned by the vocab store.

    Business Rules:
    - Term and translation cannot be empty
    - knowledge_level and practice_at are derived by the store; the client
      never changes them
    """

    id: VocabId
    term: str
    translation: str
    knowledge_level: int
    practice_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.term or not trim(self.term):
            raise DomainError("Term cannot be empty")
        if not self.translation or not trim(self.translation):
            raise DomainError("Translation cannot be empty")
        if self.knowledge_level < 0:
            raise DomainError("Knowledge level cannot be negative")

    def days_until_practice(self, now: datetime) -> int:
        """Whole days until the next scheduled practice, rounded up."""
        return math.ceil((self.practice_at - now) / ONE_DAY)
