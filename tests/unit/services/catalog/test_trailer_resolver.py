"""
Tests pour TrailerResolver - choix de la bande-annonce.
"""

import pytest

from src.services.catalog import TrailerResolver
from tests.fixtures.tmdb_responses import TMDB_MOVIE_VIDEOS_RESPONSE


def _video(key: str, language: str, type_: str = "Trailer", site: str = "YouTube") -> dict:
    return {"key": key, "iso_639_1": language, "type": type_, "site": site}


@pytest.fixture
def resolver() -> TrailerResolver:
    return TrailerResolver()


class TestTrailerResolver:
    def test_preferred_language_wins(self, resolver):
        candidates = [_video("A", "en"), _video("B", "fr")]
        assert resolver.resolve(candidates, "fr") == "B"

    def test_falls_back_to_first_trailer(self, resolver):
        candidates = [_video("A", "en"), _video("B", "de")]
        assert resolver.resolve(candidates, "fr") == "A"

    def test_teaser_only_gives_none(self, resolver):
        assert resolver.resolve([_video("T", "fr", type_="Teaser")], "fr") is None

    def test_other_sites_ignored(self, resolver):
        candidates = [_video("V", "fr", site="Vimeo"), _video("Y", "en")]
        assert resolver.resolve(candidates, "fr") == "Y"

    def test_empty_key_ignored(self, resolver):
        candidates = [_video("", "fr"), _video("A", "en")]
        assert resolver.resolve(candidates, "fr") == "A"

    def test_no_candidates(self, resolver):
        assert resolver.resolve([], "fr") is None

    def test_provider_payload(self, resolver):
        """La bande-annonce VF est preferee au teaser VF et au trailer anglais."""
        assert resolver.resolve(TMDB_MOVIE_VIDEOS_RESPONSE["results"], "fr") == "FrTrailer27205"

    def test_deterministic(self, resolver):
        candidates = [_video("B1", "fr"), _video("B2", "fr")]
        assert {resolver.resolve(candidates, "fr") for _ in range(5)} == {"B1"}
