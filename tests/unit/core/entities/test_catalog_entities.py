"""
Tests pour les entites de configuration et d'audit (CatalogConfig, TitleKind).
"""

import dataclasses

import pytest

from src.core.entities.catalog import CatalogConfig, TitleKind


class TestTitleKind:
    """Tests pour la conversion des types de lot et de titre."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("movies", TitleKind.MOVIE),
            ("movie", TitleKind.MOVIE),
            ("series", TitleKind.TV),
            ("tv", TitleKind.TV),
            (" Series ", TitleKind.TV),
        ],
    )
    def test_from_batch_kind(self, value, expected):
        assert TitleKind.from_batch_kind(value) is expected

    def test_from_batch_kind_rejects_unknown(self):
        with pytest.raises(ValueError):
            TitleKind.from_batch_kind("documentaries")

    def test_labels(self):
        assert TitleKind.MOVIE.label == "Film"
        assert TitleKind.TV.label == "Série"


class TestCatalogConfig:
    """Tests pour CatalogConfig."""

    def test_preferred_trailer_language_is_primary_subtag(self, catalog_config):
        assert catalog_config.preferred_trailer_language == "fr"

    def test_preferred_language_without_region(self):
        config = CatalogConfig(base_url="b", api_key="k", image_base_url="i", language="EN")
        assert config.preferred_trailer_language == "en"

    def test_image_url(self, catalog_config):
        assert (
            catalog_config.image_url("w500", "/poster.jpg")
            == "https://image.tmdb.org/t/p/w500/poster.jpg"
        )

    def test_image_url_trailing_slash(self):
        config = CatalogConfig(base_url="b", api_key="k", image_base_url="https://img/t/p/")
        assert config.image_url("original", "/a.jpg") == "https://img/t/p/original/a.jpg"

    @pytest.mark.parametrize("path", [None, ""])
    def test_image_url_without_path(self, catalog_config, path):
        assert catalog_config.image_url("w500", path) is None

    def test_config_is_immutable(self, catalog_config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            catalog_config.api_key = "other"
