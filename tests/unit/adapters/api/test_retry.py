"""
Tests unitaires pour le mecanisme de retry avec backoff exponentiel.

Ces tests verifient:
- is_transient_error distingue les erreurs transitoires (429, 5xx, transport)
- with_retry relance uniquement les erreurs transitoires
- Les echecs permanents remontent apres epuisement des tentatives
- Le delai Retry-After du fournisseur remplace le backoff, borne par max_wait
- RetryingCatalogClient consomme un jeton par tentative
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapters.api.rate_limiter import TokenBucket
from src.adapters.api.retry import (
    RetryingCatalogClient,
    is_transient_error,
    wait_retry_after,
    with_retry,
)
from src.core.entities.catalog import TitleKind
from src.core.errors import ProviderMalformedResponse, ProviderUnavailable
from src.core.ports.api_clients import ICatalogClient


class TestIsTransientError:
    """Tests pour la classification des erreurs."""

    @pytest.mark.parametrize("status", [429, 500, 502, 503, None])
    def test_transient_statuses(self, status) -> None:
        assert is_transient_error(ProviderUnavailable(status)) is True

    @pytest.mark.parametrize("status", [400, 401, 404])
    def test_permanent_statuses(self, status) -> None:
        assert is_transient_error(ProviderUnavailable(status)) is False

    def test_malformed_response_is_not_transient(self) -> None:
        assert is_transient_error(ProviderMalformedResponse("movie/1", "bad")) is False

    def test_other_exceptions_are_not_transient(self) -> None:
        assert is_transient_error(ValueError("boom")) is False


class TestWaitRetryAfter:
    """Tests pour le delai dicte par Retry-After."""

    @staticmethod
    def _state(error: BaseException) -> MagicMock:
        state = MagicMock()
        state.outcome.exception.return_value = error
        return state

    def test_uses_retry_after(self) -> None:
        fallback = MagicMock(return_value=1.5)
        wait = wait_retry_after(fallback, max_wait=30)

        assert wait(self._state(ProviderUnavailable(429, "movie/popular", retry_after=3))) == 3.0
        fallback.assert_not_called()

    def test_retry_after_is_capped(self) -> None:
        wait = wait_retry_after(MagicMock(return_value=1.5), max_wait=10)

        assert wait(self._state(ProviderUnavailable(429, "movie/popular", retry_after=120))) == 10

    def test_falls_back_without_header(self) -> None:
        fallback = MagicMock(return_value=1.5)
        wait = wait_retry_after(fallback, max_wait=30)

        assert wait(self._state(ProviderUnavailable(503))) == 1.5
        fallback.assert_called_once()

    @pytest.mark.asyncio
    async def test_decorator_honours_retry_after(self) -> None:
        """Avec Retry-After a 0, la relance est immediate meme si min_wait est eleve."""
        call_count = 0

        @with_retry(max_attempts=2, max_wait=0.01, min_wait=60)
        async def rate_limited() -> str:
            nonlocal call_count
            call_count += 1
            if call_count == 1:
                raise ProviderUnavailable(429, retry_after=0)
            return "success"

        assert await rate_limited() == "success"
        assert call_count == 2


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_with_retry_retries_on_transient_error(self) -> None:
        """with_retry relance quand une erreur 503 est levee."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=0.01, min_wait=0)
        async def flaky_function() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise ProviderUnavailable(503)
            return "success"

        result = await flaky_function()
        assert result == "success"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_with_retry_stops_after_max_attempts(self) -> None:
        """with_retry abandonne apres max_attempts tentatives et propage l'erreur."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=0.01, min_wait=0)
        async def always_fails() -> str:
            nonlocal call_count
            call_count += 1
            raise ProviderUnavailable(429)

        with pytest.raises(ProviderUnavailable):
            await always_fails()
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_with_retry_does_not_retry_permanent_errors(self) -> None:
        """Un 404 remonte des la premiere tentative."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=0.01, min_wait=0)
        async def not_found() -> str:
            nonlocal call_count
            call_count += 1
            raise ProviderUnavailable(404)

        with pytest.raises(ProviderUnavailable):
            await not_found()
        assert call_count == 1


class TestRetryingCatalogClient:
    """Tests pour le client enveloppe."""

    @pytest.fixture
    def inner(self) -> MagicMock:
        inner = MagicMock(spec=ICatalogClient)
        inner.fetch = AsyncMock()
        inner.close = AsyncMock()
        return inner

    @pytest.fixture
    def limiter(self) -> AsyncMock:
        return AsyncMock(spec=TokenBucket)

    @pytest.mark.asyncio
    async def test_retries_then_succeeds(self, inner, limiter) -> None:
        inner.fetch.side_effect = [ProviderUnavailable(503), {"results": [{"id": 1}]}]
        client = RetryingCatalogClient(inner, rate_limiter=limiter, max_attempts=3, max_wait=0.01, min_wait=0)

        results = await client.popular(TitleKind.MOVIE)

        assert results == [{"id": 1}]
        assert inner.fetch.await_count == 2
        assert limiter.acquire.await_count == 2

    @pytest.mark.asyncio
    async def test_permanent_error_is_not_retried(self, inner, limiter) -> None:
        inner.fetch.side_effect = ProviderUnavailable(404)
        client = RetryingCatalogClient(inner, rate_limiter=limiter, max_attempts=3, max_wait=0.01, min_wait=0)

        with pytest.raises(ProviderUnavailable):
            await client.details(TitleKind.MOVIE, 1)
        assert inner.fetch.await_count == 1

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, inner) -> None:
        inner.fetch.side_effect = ProviderUnavailable(500)
        client = RetryingCatalogClient(inner, max_attempts=2, max_wait=0.01, min_wait=0)

        with pytest.raises(ProviderUnavailable) as exc_info:
            await client.fetch("movie/popular")
        assert exc_info.value.status_code == 500
        assert inner.fetch.await_count == 2

    @pytest.mark.asyncio
    async def test_close_closes_inner_client(self, inner) -> None:
        client = RetryingCatalogClient(inner)
        await client.close()
        inner.close.assert_awaited_once()
