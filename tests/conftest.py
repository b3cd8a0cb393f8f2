"""
Fixtures pytest partagees pour les tests CineSync.

Ce module contient les fixtures communes utilisees dans les tests:
- Base SQLite en memoire et session SQLModel
- Repositories SQLModel branches sur cette session
- Configuration fournisseur et settings de test
"""

from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from src.config import Settings
from src.core.entities.catalog import CatalogConfig
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.repositories import (
    SQLModelCatalogConfigRepository,
    SQLModelGenreRepository,
    SQLModelMovieRepository,
    SQLModelSeasonRepository,
    SQLModelSeriesRepository,
    SQLModelSyncRecordRepository,
)

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"


@pytest.fixture
def engine() -> Engine:
    """Engine SQLite en memoire avec toutes les tables creees."""
    engine = create_db_engine("sqlite:///:memory:")
    init_db(engine)
    return engine


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def catalog_config() -> CatalogConfig:
    """Configuration fournisseur active de test (langue fr-FR)."""
    return CatalogConfig(
        id=1,
        base_url=TMDB_BASE_URL,
        api_key="test_api_key",
        image_base_url=TMDB_IMAGE_BASE_URL,
        language="fr-FR",
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test.

    Base en memoire, pas de fichier de log, relances et limitation de
    debit reduites au minimum pour des tests rapides.
    """
    return Settings(
        database_url="sqlite:///:memory:",
        tmdb_api_key="test_api_key",
        tmdb_base_url=TMDB_BASE_URL,
        tmdb_image_base_url=TMDB_IMAGE_BASE_URL,
        tmdb_language="fr-FR",
        retry_max_attempts=2,
        retry_max_wait=1,
        rate_limit_per_second=1000.0,
        rate_limit_burst=100,
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def movie_repo(session: Session) -> SQLModelMovieRepository:
    return SQLModelMovieRepository(session)


@pytest.fixture
def series_repo(session: Session) -> SQLModelSeriesRepository:
    return SQLModelSeriesRepository(session)


@pytest.fixture
def genre_repo(session: Session) -> SQLModelGenreRepository:
    return SQLModelGenreRepository(session)


@pytest.fixture
def season_repo(session: Session) -> SQLModelSeasonRepository:
    return SQLModelSeasonRepository(session)


@pytest.fixture
def record_repo(session: Session) -> SQLModelSyncRecordRepository:
    return SQLModelSyncRecordRepository(session)


@pytest.fixture
def config_repo(session: Session) -> SQLModelCatalogConfigRepository:
    return SQLModelCatalogConfigRepository(session)
