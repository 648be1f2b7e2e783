"""
Practice screen.

Fetches a batch of due vocab, drives a PracticeSession through its rounds
and submits all results in one request once the last round is done.
"""

from collections.abc import Callable

import structlog

from vocab_trainer.application.notifications.notification_queue import NotificationQueue
from vocab_trainer.application.protocols.navigation import Navigator
from vocab_trainer.application.protocols.vocab_store import VocabStoreProtocol
from vocab_trainer.constants import HOME_PATH, NOTHING_TO_PRACTICE
from vocab_trainer.domain.common.exceptions import DomainError
from vocab_trainer.domain.practice.session import (
    PracticeProgress,
    PracticeSession,
    PracticeState,
    PracticeSummary,
    check_transition,
)
from vocab_trainer.domain.practice.value_objects import PracticeResult
from vocab_trainer.domain.vocabulary.entities import VocabularyItem
from vocab_trainer.exceptions import VocabStoreError

logger = structlog.get_logger(__name__)

SubmissionFailureHandler = Callable[["PracticeSessionEngine", VocabStoreError], None]


class PracticeSessionEngine:
    """
    Runs one practice session against the vocab store.

    A failed submission keeps the engine in SUBMITTING. The failure is
    logged and passed to `on_submission_failure`, which a host view can use
    to offer `retry_submission()`.
    """

    def __init__(
        self,
        store: VocabStoreProtocol,
        notifications: NotificationQueue,
        navigator: Navigator,
        on_submission_failure: SubmissionFailureHandler | None = None,
    ) -> None:
        self._store = store
        self._notifications = notifications
        self._navigator = navigator
        self._on_submission_failure = on_submission_failure
        self._state = PracticeState.INIT
        self._session: PracticeSession | None = None
        self._closed = False

    @property
    def state(self) -> PracticeState:
        if self._session is not None:
            return self._session.state
        return self._state

    @property
    def session(self) -> PracticeSession:
        if self._session is None:
            raise DomainError("No practice batch loaded", {"state": self._state.value})
        return self._session

    @property
    def current(self) -> VocabularyItem:
        return self.session.current

    @property
    def guess(self) -> str:
        return self.session.guess

    @property
    def can_submit_guess(self) -> bool:
        return self._session is not None and self._session.can_submit_guess

    @property
    def grade(self) -> PracticeResult:
        return self.session.grade

    @property
    def results(self) -> tuple[PracticeResult, ...]:
        if self._session is None:
            return ()
        return self._session.results

    @property
    def progress(self) -> PracticeProgress | None:
        """Round counter; None when there is no round to count."""
        if self._session is None or self._session.remaining == 0:
            return None
        return self._session.progress

    @property
    def summary(self) -> PracticeSummary:
        return self.session.summary

    async def start(self) -> None:
        """Fetch the batch; an empty batch sends the user back home."""
        check_transition(self._state, PracticeState.LOADING)
        self._state = PracticeState.LOADING
        try:
            batch = await self._store.get_practice_batch()
        except VocabStoreError as e:
            logger.error("practice_batch_failed", error=str(e), exc_info=True)
            return

        if self._closed:
            return

        if not batch:
            check_transition(self._state, PracticeState.EMPTY)
            self._state = PracticeState.EMPTY
            self._notifications.dispatch(NOTHING_TO_PRACTICE)
            self._navigator.navigate(HOME_PATH)
            return

        check_transition(self._state, PracticeState.INPUT)
        self._session = PracticeSession(batch)
        logger.info("practice_started", batch_size=len(batch))

    def set_guess(self, text: str) -> None:
        self.session.update_guess(text)

    def make_guess(self) -> PracticeResult:
        """Grade the current guess and show the correct translation."""
        return self.session.submit_guess()

    async def go_to_next(self) -> PracticeState:
        """Leave the result of this round; submits after the last round."""
        state = self.session.advance()
        if state is PracticeState.SUBMITTING:
            await self._submit()
        return self.state

    async def retry_submission(self) -> PracticeState:
        """Send the results again after a failed submission."""
        if self.state is not PracticeState.SUBMITTING:
            raise DomainError("Nothing to resubmit", {"state": self.state.value})
        await self._submit()
        return self.state

    async def _submit(self) -> None:
        session = self.session
        try:
            await self._store.submit_practice_results(session.results)
        except VocabStoreError as e:
            logger.error(
                "practice_results_submit_failed",
                result_count=len(session.results),
                error=str(e),
                exc_info=True,
            )
            if self._on_submission_failure is not None:
                self._on_submission_failure(self, e)
            return

        session.mark_submitted()
        logger.info(
            "practice_finished",
            passed=session.summary.passed,
            total=session.summary.total,
        )

    def close(self) -> None:
        self._closed = True
