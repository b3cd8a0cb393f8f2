"""
Fixtures des services de synchronisation du catalogue.

Les services sont branches sur les repositories SQLModel de la base en
memoire ; seul le fournisseur est simule (FakeCatalogClient).
"""

import pytest

from src.core.entities.catalog import CatalogConfig
from src.services.catalog import (
    GenreReconciler,
    ItemReconciler,
    SeasonEpisodeSynchronizer,
    SyncAuditLog,
    SyncContext,
    TrailerResolver,
)
from tests.fixtures.fake_catalog import FakeCatalogClient


@pytest.fixture
def fake_client() -> FakeCatalogClient:
    return FakeCatalogClient()


@pytest.fixture
def ctx(catalog_config: CatalogConfig, fake_client: FakeCatalogClient) -> SyncContext:
    return SyncContext(config=catalog_config, client=fake_client)


@pytest.fixture
def genre_reconciler(genre_repo, movie_repo, series_repo) -> GenreReconciler:
    return GenreReconciler(genre_repo, movie_repo, series_repo)


@pytest.fixture
def season_synchronizer(season_repo) -> SeasonEpisodeSynchronizer:
    return SeasonEpisodeSynchronizer(season_repo)


@pytest.fixture
def audit_log(record_repo) -> SyncAuditLog:
    return SyncAuditLog(record_repo)


@pytest.fixture
def item_reconciler(
    movie_repo, series_repo, genre_reconciler, season_synchronizer, audit_log
) -> ItemReconciler:
    return ItemReconciler(
        movie_repo=movie_repo,
        series_repo=series_repo,
        genre_reconciler=genre_reconciler,
        trailer_resolver=TrailerResolver(),
        season_synchronizer=season_synchronizer,
        audit_log=audit_log,
    )
