"""Value objects produced by practice rounds."""

from dataclasses import dataclass

from vocab_trainer.domain.common.text import trim
from vocab_trainer.domain.vocabulary.entities import VocabId


def grade_guess(guess: str, translation: str) -> bool:
    """Exact, case-sensitive match after trimming the guess at the edges."""
    return trim(guess) == translation


@dataclass(frozen=True)
class PracticeResult:
    """Outcome of a single round, submitted to the store in round order."""

    id: VocabId
    passed: bool

    def to_primitive(self) -> dict[str, object]:
        return {"id": self.id.value, "passed": self.passed}
