"""Vocab store REST API client."""

import logging
from collections.abc import Sequence
from types import TracebackType
from typing import Any, Self

import httpx
from pydantic import ValidationError

from vocab_trainer.application.vocabulary.queries import VocabPage, VocabQuery
from vocab_trainer.domain.common.exceptions import DomainError
from vocab_trainer.domain.practice.value_objects import PracticeResult
from vocab_trainer.domain.vocabulary.entities import VocabId, VocabularyItem
from vocab_trainer.exceptions import VocabStoreError
from vocab_trainer.infrastructure.store.mapper import VocabMapper
from vocab_trainer.infrastructure.store.schemas import (
    PracticeBatch,
    PracticeCountResponse,
    PracticeResults,
    VocabCreateRequest,
    VocabCreateResponse,
    VocabListResponse,
)

logger = logging.getLogger(__name__)


class VocabClient:
    """HTTP client for the vocab store API.

    Every failure, whether transport, HTTP status or an unexpected response
    body, is raised as VocabStoreError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._mapper = VocabMapper()
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an API request, translating httpx errors."""
        if self._client.is_closed:
            raise VocabStoreError(operation, "client is closed")
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise VocabStoreError(
                operation,
                f"HTTP {e.response.status_code}: {e.response.text.strip()}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise VocabStoreError(operation, str(e) or type(e).__name__) from e
        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    def _decode(self, operation: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise VocabStoreError(operation, f"invalid JSON: {e!s}") from e

    # --- Vocab endpoints ---

    async def list_vocab(self, query: VocabQuery) -> VocabPage:
        """Query a page of vocab."""
        response = await self._request(
            "list_vocab", "GET", "/api/vocab", params=query.to_params()
        )
        try:
            data = VocabListResponse.model_validate(self._decode("list_vocab", response))
            items = [self._mapper.to_domain(item) for item in data.items]
        except (ValidationError, DomainError) as e:
            raise VocabStoreError("list_vocab", f"unexpected response: {e!s}") from e
        return VocabPage(items=items, count=data.count)

    async def create_vocab(self, term: str, translation: str) -> VocabularyItem:
        """Create a vocab item."""
        try:
            body = VocabCreateRequest(term=term, translation=translation)
        except ValidationError as e:
            raise VocabStoreError("create_vocab", f"invalid vocab: {e!s}") from e
        response = await self._request(
            "create_vocab", "POST", "/api/vocab", json=body.model_dump()
        )
        try:
            data = VocabCreateResponse.model_validate(self._decode("create_vocab", response))
            created = self._mapper.created_to_domain(data, body.term, body.translation)
        except (ValidationError, DomainError) as e:
            raise VocabStoreError("create_vocab", f"unexpected response: {e!s}") from e
        logger.info(f"Created vocab {created.id}")
        return created

    async def delete_vocab(self, vocab_id: VocabId) -> None:
        """Delete a vocab item."""
        await self._request("delete_vocab", "DELETE", f"/api/vocab/{vocab_id.value}")
        logger.info(f"Deleted vocab {vocab_id}")

    # --- Practice endpoints ---

    async def get_practice_batch(self) -> list[VocabularyItem]:
        """Get the vocab due for practice."""
        response = await self._request("get_practice_batch", "GET", "/api/practice")
        try:
            batch = PracticeBatch.validate_python(
                self._decode("get_practice_batch", response)
            )
            return [self._mapper.to_domain(item) for item in batch or []]
        except (ValidationError, DomainError) as e:
            raise VocabStoreError("get_practice_batch", f"unexpected response: {e!s}") from e

    async def submit_practice_results(self, results: Sequence[PracticeResult]) -> None:
        """Submit the ordered outcomes of a practice session."""
        body = PracticeResults.dump_python(self._mapper.results_to_schema(results))
        await self._request("submit_practice_results", "POST", "/api/practice", json=body)
        logger.info(f"Submitted {len(body)} practice results")

    async def get_practice_count(self) -> int:
        """Count the vocab due for practice."""
        response = await self._request("get_practice_count", "GET", "/api/practice/count")
        try:
            data = PracticeCountResponse.model_validate(
                self._decode("get_practice_count", response)
            )
        except ValidationError as e:
            raise VocabStoreError("get_practice_count", f"unexpected response: {e!s}") from e
        return data.count
