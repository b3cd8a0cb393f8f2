"""
Tests pour les modeles SQLModel de persistance.

Verifie les valeurs par defaut et les contraintes d'unicite et de cles
etrangeres sur une base SQLite en memoire.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from src.infrastructure.persistence.models import (
    EpisodeModel,
    GenreModel,
    MovieGenreModel,
    MovieModel,
    SeriesModel,
    SyncRecordModel,
)


class TestMovieModel:
    """Tests pour MovieModel."""

    def test_movie_model_defaults(self):
        model = MovieModel(title="Inception")
        assert model.external_id is None
        assert model.is_active is True
        assert model.is_featured is False
        assert model.created_at is not None
        assert model.created_at.tzinfo is not None

    def test_external_id_is_unique(self, session):
        session.add(MovieModel(title="Inception", external_id=27205))
        session.commit()
        session.add(MovieModel(title="Inception (doublon)", external_id=27205))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_several_movies_without_external_id(self, session):
        """external_id est nullable : plusieurs films saisis a la main coexistent."""
        session.add(MovieModel(title="Film maison 1"))
        session.add(MovieModel(title="Film maison 2"))
        session.commit()


class TestJoinModels:
    """Tests pour les tables de jointure."""

    def test_duplicate_movie_genre_pair_rejected(self, session):
        movie = MovieModel(title="Inception", external_id=27205)
        genre = GenreModel(external_id=28, name="Action", slug="action")
        session.add(movie)
        session.add(genre)
        session.commit()
        movie_id, genre_id = movie.id, genre.id

        session.add(MovieGenreModel(movie_id=movie_id, genre_id=genre_id))
        session.commit()
        session.expunge_all()
        session.add(MovieGenreModel(movie_id=movie_id, genre_id=genre_id))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_episode_requires_existing_season(self, session):
        """Les cles etrangeres sont controlees (PRAGMA foreign_keys)."""
        session.add(EpisodeModel(season_id=999, number=1, title="Orphelin"))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()


class TestSyncRecordModel:
    def test_defaults(self):
        record = SyncRecordModel(type="movie", external_id=27205, status="success")
        assert record.last_sync is not None
        assert record.last_sync.tzinfo is not None
        assert record.error_message is None

    def test_default_timestamp_is_persisted(self, session):
        record = SyncRecordModel(type="tv", external_id=1396, status="error", error_message="404")
        session.add(record)
        session.commit()
        session.refresh(record)

        assert record.id is not None
        assert record.last_sync is not None


class TestSeriesModel:
    def test_series_model_broadcast_fields(self):
        model = SeriesModel(title="Breaking Bad", number_of_seasons=5, status="Ended")
        assert model.number_of_seasons == 5
        assert model.status == "Ended"
