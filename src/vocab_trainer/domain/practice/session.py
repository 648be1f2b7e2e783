"""
Practice session state machine.

A session runs one round per vocab item of a fixed batch, in batch order:

    INPUT --submit_guess--> RESULT --advance--> INPUT | SUBMITTING
    SUBMITTING --mark_submitted--> DONE

INIT, LOADING and EMPTY belong to the engine that fetches the batch; a
PracticeSession only exists once a non-empty batch has been received.
"""

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from vocab_trainer.domain.common.exceptions import DomainError, InvalidTransitionError
from vocab_trainer.domain.practice.value_objects import PracticeResult, grade_guess
from vocab_trainer.domain.vocabulary.entities import VocabularyItem


class PracticeState(Enum):
    INIT = "init"
    LOADING = "loading"
    EMPTY = "empty"
    INPUT = "practice.input"
    RESULT = "practice.result"
    SUBMITTING = "sending-results"
    DONE = "done"


TRANSITIONS: dict[PracticeState, frozenset[PracticeState]] = {
    PracticeState.INIT: frozenset({PracticeState.LOADING}),
    PracticeState.LOADING: frozenset({PracticeState.EMPTY, PracticeState.INPUT}),
    PracticeState.EMPTY: frozenset(),
    PracticeState.INPUT: frozenset({PracticeState.RESULT}),
    PracticeState.RESULT: frozenset({PracticeState.INPUT, PracticeState.SUBMITTING}),
    PracticeState.SUBMITTING: frozenset({PracticeState.DONE}),
    PracticeState.DONE: frozenset(),
}


def check_transition(source: PracticeState, target: PracticeState) -> None:
    """Raise InvalidTransitionError unless source -> target is allowed."""
    if target not in TRANSITIONS[source]:
        raise InvalidTransitionError("PracticeSession", source.value, target.value)


@dataclass(frozen=True)
class PracticeProgress:
    """Round counter shown while practicing, e.g. '2 of 5'."""

    current: int
    total: int

    def __str__(self) -> str:
        return f"{self.current} of {self.total}"


@dataclass(frozen=True)
class PracticeSummary:
    """Final score of a finished session."""

    passed: int
    total: int

    def __str__(self) -> str:
        return f"you got {self.passed} out of {self.total} correct!"


class PracticeSession:
    """
    Rounds over a fixed batch of vocab items.

    Invariants:
    - remaining + len(results) == batch size at every instant
    - results[i].id == batch[i].id
    - exactly one result is recorded per round, when leaving RESULT
    """

    def __init__(self, batch: Sequence[VocabularyItem]) -> None:
        if not batch:
            raise DomainError("A practice session needs at least one vocab item")
        self._queue: deque[VocabularyItem] = deque(batch)
        self._results: list[PracticeResult] = []
        self._guess = ""
        self._grade: PracticeResult | None = None
        self._state = PracticeState.INPUT
        self.size = len(batch)

    @property
    def state(self) -> PracticeState:
        return self._state

    @property
    def current(self) -> VocabularyItem:
        """Item of the current round."""
        if not self._queue:
            raise DomainError("No round in progress")
        return self._queue[0]

    @property
    def guess(self) -> str:
        return self._guess

    @property
    def remaining(self) -> int:
        return len(self._queue)

    @property
    def results(self) -> tuple[PracticeResult, ...]:
        return tuple(self._results)

    @property
    def can_submit_guess(self) -> bool:
        return self._state is PracticeState.INPUT and len(self._guess) > 0

    @property
    def grade(self) -> PracticeResult:
        """Grade of the current round; only available while showing the result."""
        if self._state is not PracticeState.RESULT or self._grade is None:
            raise InvalidTransitionError(
                "PracticeSession",
                self._state.value,
                PracticeState.RESULT.value,
                reason="No graded round to show",
            )
        return self._grade

    @property
    def progress(self) -> PracticeProgress:
        return PracticeProgress(
            current=len(self._results) + 1,
            total=self.remaining + len(self._results),
        )

    @property
    def summary(self) -> PracticeSummary:
        return PracticeSummary(
            passed=sum(1 for result in self._results if result.passed),
            total=len(self._results),
        )

    def update_guess(self, text: str) -> None:
        if self._state is not PracticeState.INPUT:
            raise InvalidTransitionError(
                "PracticeSession",
                self._state.value,
                PracticeState.INPUT.value,
                reason="Guesses can only be typed while a round awaits input",
            )
        self._guess = text

    def submit_guess(self) -> PracticeResult:
        """Grade the typed guess and show the result."""
        check_transition(self._state, PracticeState.RESULT)
        if not self._guess:
            raise InvalidTransitionError(
                "PracticeSession",
                self._state.value,
                PracticeState.RESULT.value,
                reason="Cannot grade an empty guess",
            )
        item = self.current
        self._grade = PracticeResult(id=item.id, passed=grade_guess(self._guess, item.translation))
        self._state = PracticeState.RESULT
        return self._grade

    def advance(self) -> PracticeState:
        """Record the round, drop it from the queue and move on."""
        grade = self.grade
        target = PracticeState.INPUT if self.remaining > 1 else PracticeState.SUBMITTING
        check_transition(self._state, target)

        self._results.append(grade)
        self._queue.popleft()
        self._guess = ""
        self._grade = None
        self._state = target
        return target

    def mark_submitted(self) -> None:
        check_transition(self._state, PracticeState.DONE)
        self._state = PracticeState.DONE
