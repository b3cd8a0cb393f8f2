"""
Tests for TMDBCatalogClient - TMDB catalog client implementation.

Uses respx to mock httpx calls and verifies:
- Requests carry api_key and language from the active configuration
- Convenience methods build the provider paths
- Non-2xx statuses raise ProviderUnavailable with the status code
- Unparseable or unexpected bodies raise ProviderMalformedResponse
"""

import httpx
import pytest
import respx

from src.adapters.api.catalog_client import TMDBCatalogClient
from src.core.entities.catalog import CatalogConfig, TitleKind
from src.core.errors import ProviderMalformedResponse, ProviderUnavailable
from src.core.ports.api_clients import ICatalogClient
from tests.fixtures.tmdb_responses import (
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_MOVIE_VIDEOS_RESPONSE,
    TMDB_POPULAR_MOVIES_RESPONSE,
    TMDB_SEASON_1_RESPONSE,
    TMDB_SEARCH_MOVIE_RESPONSE,
)

BASE = "https://api.themoviedb.org/3"


@pytest.fixture
def client(catalog_config: CatalogConfig) -> TMDBCatalogClient:
    """TMDBCatalogClient built from the test configuration."""
    return TMDBCatalogClient(catalog_config, timeout=5.0)


class TestTMDBCatalogClientInterface:
    """TMDBCatalogClient implements ICatalogClient."""

    def test_implements_interface(self, client: TMDBCatalogClient):
        assert isinstance(client, ICatalogClient)


class TestFetch:
    """Tests for the raw fetch() call."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_adds_credentials_and_language(self, client: TMDBCatalogClient):
        """fetch() should send api_key and language as query parameters."""
        route = respx.get(f"{BASE}/movie/popular").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_MOVIES_RESPONSE)
        )

        data = await client.fetch("movie/popular", {"page": 1})

        assert data["page"] == 1
        params = route.calls.last.request.url.params
        assert params["api_key"] == "test_api_key"
        assert params["language"] == "fr-FR"
        assert params["page"] == "1"
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_accepts_leading_slash(self, client: TMDBCatalogClient):
        """A leading slash in the path should not drop the /3 API prefix."""
        route = respx.get(f"{BASE}/movie/27205").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
        )

        await client.fetch("/movie/27205")

        assert route.called
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_2xx_raises_provider_unavailable(self, client: TMDBCatalogClient):
        """A 404 should raise ProviderUnavailable keeping the status code."""
        respx.get(f"{BASE}/movie/999999").mock(
            return_value=httpx.Response(404, json={"status_code": 34})
        )

        with pytest.raises(ProviderUnavailable) as exc_info:
            await client.fetch("movie/999999")

        assert exc_info.value.status_code == 404
        assert exc_info.value.is_transient is False
        assert "404" in str(exc_info.value)
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_429_keeps_retry_after(self, client: TMDBCatalogClient):
        """A 429 response should expose the Retry-After header."""
        respx.get(f"{BASE}/movie/popular").mock(
            return_value=httpx.Response(429, headers={"Retry-After": "3"})
        )

        with pytest.raises(ProviderUnavailable) as exc_info:
            await client.fetch("movie/popular")

        assert exc_info.value.status_code == 429
        assert exc_info.value.retry_after == 3
        assert exc_info.value.is_transient is True
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error_raises_provider_unavailable(self, client: TMDBCatalogClient):
        """A connection error should raise ProviderUnavailable without status."""
        respx.get(f"{BASE}/movie/popular").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(ProviderUnavailable) as exc_info:
            await client.fetch("movie/popular")

        assert exc_info.value.status_code is None
        assert exc_info.value.is_transient is True
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_json_raises_malformed(self, client: TMDBCatalogClient):
        respx.get(f"{BASE}/movie/popular").mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )

        with pytest.raises(ProviderMalformedResponse):
            await client.fetch("movie/popular")
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_object_json_raises_malformed(self, client: TMDBCatalogClient):
        respx.get(f"{BASE}/movie/popular").mock(return_value=httpx.Response(200, json=[1, 2]))

        with pytest.raises(ProviderMalformedResponse):
            await client.fetch("movie/popular")
        await client.close()


class TestConvenienceMethods:
    """Tests for the path-building helpers inherited from ICatalogClient."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_popular_returns_results(self, client: TMDBCatalogClient):
        respx.get(f"{BASE}/tv/popular").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_MOVIES_RESPONSE)
        )

        results = await client.popular(TitleKind.TV)

        assert [item["id"] for item in results] == [19995, 27205, 550]
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_popular_without_results_is_malformed(self, client: TMDBCatalogClient):
        respx.get(f"{BASE}/movie/popular").mock(
            return_value=httpx.Response(200, json={"page": 1})
        )

        with pytest.raises(ProviderMalformedResponse):
            await client.popular(TitleKind.MOVIE)
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_details_requests_genres(self, client: TMDBCatalogClient):
        route = respx.get(f"{BASE}/movie/27205").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
        )

        detail = await client.details(TitleKind.MOVIE, 27205)

        assert detail["runtime"] == 148
        assert route.calls.last.request.url.params["append_to_response"] == "genres"
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_videos_returns_candidates(self, client: TMDBCatalogClient):
        respx.get(f"{BASE}/movie/27205/videos").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_VIDEOS_RESPONSE)
        )

        videos = await client.videos(TitleKind.MOVIE, 27205)

        assert len(videos) == 3
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_season_returns_episodes(self, client: TMDBCatalogClient):
        respx.get(f"{BASE}/tv/1396/season/1").mock(
            return_value=httpx.Response(200, json=TMDB_SEASON_1_RESPONSE)
        )

        season = await client.season(1396, 1)

        assert season["season_number"] == 1
        assert len(season["episodes"]) == 2
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_passes_query(self, client: TMDBCatalogClient):
        route = respx.get(f"{BASE}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_MOVIE_RESPONSE)
        )

        data = await client.search(TitleKind.MOVIE, "Inception", page=2)

        assert data["total_results"] == 2
        params = route.calls.last.request.url.params
        assert params["query"] == "Inception"
        assert params["page"] == "2"
        await client.close()


class TestClose:
    """Tests for client lifecycle."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_client_reopens_after_close(self, client: TMDBCatalogClient):
        respx.get(f"{BASE}/movie/popular").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_MOVIES_RESPONSE)
        )

        await client.fetch("movie/popular")
        await client.close()
        data = await client.fetch("movie/popular")

        assert data["page"] == 1
        await client.close()

    @pytest.mark.asyncio
    async def test_close_without_requests_is_noop(self, client: TMDBCatalogClient):
        await client.close()
