"""End-to-end tests of the composed app against a mocked store."""

import asyncio
import json

import httpx
import pytest

from tests.conftest import FakeConfirmer, FakeNavigator
from vocab_trainer.app import VocabApp, create_app
from vocab_trainer.config import Settings
from vocab_trainer.domain.practice.session import PracticeState

BATCH = [
    {
        "id": 1,
        "term": "cat",
        "translation": "gato",
        "knowledgeLevel": 0,
        "practiceAt": "2024-01-15T12:00:00Z",
    },
    {
        "id": 2,
        "term": "dog",
        "translation": "perro",
        "knowledgeLevel": 3,
        "practiceAt": "2024-01-14T12:00:00Z",
    },
]


class FakeVocabStore:
    """In-memory stand-in for the store's HTTP API."""

    def __init__(self, batch: list[dict]) -> None:
        self.batch = batch
        self.submitted: list[object] = []
        self.requests: list[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/api/practice" and request.method == "GET":
            return httpx.Response(200, json=self.batch)
        if path == "/api/practice" and request.method == "POST":
            self.submitted.append(json.loads(request.content))
            return httpx.Response(200)
        if path == "/api/practice/count":
            return httpx.Response(200, json={"count": len(self.batch)})
        if path == "/api/vocab" and request.method == "GET":
            return httpx.Response(200, json={"items": self.batch, "count": len(self.batch)})
        return httpx.Response(404, text="404 page not found")


def _app(store: FakeVocabStore, navigator: FakeNavigator) -> VocabApp:
    settings = Settings(VOCAB_API_URL="http://vocab.test/", ENVIRONMENT="test")
    return create_app(
        navigator=navigator,
        confirmer=FakeConfirmer(),
        settings=settings,
        transport=httpx.MockTransport(store.handle),
    )


class TestVocabApp:
    @pytest.mark.asyncio
    async def test_practice_session_round_trip(self) -> None:
        store = FakeVocabStore(BATCH)
        async with _app(store, FakeNavigator()) as app:
            engine = app.practice_session()
            await engine.start()
            for guess in ["Gato", " perro "]:
                engine.set_guess(guess)
                engine.make_guess()
                await engine.go_to_next()

        assert engine.state is PracticeState.DONE
        assert store.submitted == [[{"id": 1, "passed": False}, {"id": 2, "passed": True}]]

    @pytest.mark.asyncio
    async def test_empty_practice_goes_home(self) -> None:
        navigator = FakeNavigator()
        async with _app(FakeVocabStore([]), navigator) as app:
            engine = app.practice_session()
            await engine.start()

            assert navigator.paths == ["/"]
            assert [n.text for n in app.notifications.notifications] == ["nothing to practice"]

    @pytest.mark.asyncio
    async def test_screens_share_one_notification_queue(self) -> None:
        async with _app(FakeVocabStore([]), FakeNavigator()) as app:
            await app.practice_session().start()
            await app.practice_session().start()

            assert [n.id for n in app.notifications.notifications] == [2, 1]

    @pytest.mark.asyncio
    async def test_search_debounce_with_real_timers(self) -> None:
        store = FakeVocabStore(BATCH)
        async with _app(store, FakeNavigator()) as app:
            vocab_list = app.vocab_list()
            vocab_list.set_search_text("g")
            vocab_list.set_search_text("ga")
            await asyncio.sleep(0.4)
            await app.scheduler.drain()
            vocab_list.close()

        searches = [r for r in store.requests if r.url.path == "/api/vocab"]
        assert len(searches) == 1
        assert searches[0].url.params["term"] == "ga"
        assert len(vocab_list.items) == 2

    @pytest.mark.asyncio
    async def test_close_stops_pending_timers(self) -> None:
        store = FakeVocabStore(BATCH)
        app = _app(store, FakeNavigator())
        vocab_list = app.vocab_list()
        form = app.add_form()
        vocab_list.set_search_text("cat")
        form.set_term("ca")
        app.notifications.dispatch("saved")
        assert app.scheduler.pending == 3

        await app.close()
        await asyncio.sleep(0.6)

        assert app.scheduler.pending == 0
        assert store.requests == []
        assert not vocab_list.search_pending
        assert [n.text for n in app.notifications.notifications] == ["saved"]

    @pytest.mark.asyncio
    async def test_components_ignore_input_after_close(self) -> None:
        store = FakeVocabStore(BATCH)
        app = _app(store, FakeNavigator())
        vocab_list = app.vocab_list()
        await app.close()

        vocab_list.set_search_text("cat")
        await asyncio.sleep(0.4)

        assert app.scheduler.pending == 0
        assert store.requests == []
