"""
Implementation SQLModel du repository Series.

Implemente l'interface ISeriesRepository pour la persistance des series TV
et de leurs liens de genre via SQLModel.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.media import Genre, Series
from src.core.ports.repositories import ISeriesRepository
from src.infrastructure.persistence.models import GenreModel, SeriesGenreModel, SeriesModel
from src.infrastructure.persistence.repositories.genre_repository import genre_to_entity
from src.infrastructure.persistence.repositories.session_utils import commit_or_rollback
from src.utils.helpers import utc_now

_SCALAR_FIELDS = (
    "external_id",
    "title",
    "original_title",
    "description",
    "year",
    "rating",
    "vote_count",
    "popularity",
    "poster",
    "backdrop",
    "trailer",
    "adult",
    "original_language",
    "number_of_seasons",
    "number_of_episodes",
    "status",
    "first_air_date",
    "last_air_date",
    "is_active",
    "is_featured",
)


class SQLModelSeriesRepository(ISeriesRepository):
    """
    Repository SQLModel pour les series TV.

    Implemente ISeriesRepository avec conversion bidirectionnelle
    entre l'entite Series (domaine) et SeriesModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: SeriesModel) -> Series:
        return Series(id=model.id, **{name: getattr(model, name) for name in _SCALAR_FIELDS})

    def _find_existing(self, series: Series) -> Optional[SeriesModel]:
        """Retrouve la ligne a mettre a jour (par ID interne, sinon par ID fournisseur)."""
        if series.id:
            return self._session.get(SeriesModel, series.id)
        if series.external_id is not None:
            statement = select(SeriesModel).where(SeriesModel.external_id == series.external_id)
            return self._session.exec(statement).first()
        return None

    def get_by_id(self, series_id: int) -> Optional[Series]:
        """Recupere une serie par son ID interne."""
        model = self._session.get(SeriesModel, series_id)
        return self._to_entity(model) if model else None

    def get_by_external_id(self, external_id: int) -> Optional[Series]:
        """Recupere une serie par son ID fournisseur."""
        statement = select(SeriesModel).where(SeriesModel.external_id == external_id)
        model = self._session.exec(statement).first()
        return self._to_entity(model) if model else None

    def list_with_external_id(self) -> list[Series]:
        """Liste les series ayant un ID fournisseur, par ID interne croissant."""
        statement = (
            select(SeriesModel)
            .where(SeriesModel.external_id.isnot(None))  # type: ignore[union-attr]
            .order_by(SeriesModel.id)
        )
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def existing_external_ids(self, external_ids: list[int]) -> set[int]:
        if not external_ids:
            return set()
        statement = select(SeriesModel.external_id).where(
            SeriesModel.external_id.in_(external_ids)  # type: ignore[union-attr]
        )
        return {value for value in self._session.exec(statement).all() if value is not None}

    def save(self, series: Series) -> Series:
        """Sauvegarde une serie (insertion ou mise a jour de tous les champs scalaires)."""
        existing = self._find_existing(series)
        if existing:
            model = existing
            model.updated_at = utc_now()
        else:
            model = SeriesModel(title=series.title)

        for name in _SCALAR_FIELDS:
            setattr(model, name, getattr(series, name))

        self._session.add(model)
        commit_or_rollback(self._session)
        self._session.refresh(model)
        return self._to_entity(model)

    def replace_genres(self, series_id: int, genre_ids: list[int]) -> None:
        """Remplace les liens de genre de la serie (un seul commit, annule en cas d'echec)."""
        try:
            statement = select(SeriesGenreModel).where(SeriesGenreModel.series_id == series_id)
            for link in self._session.exec(statement).all():
                self._session.delete(link)
            self._session.flush()
            for genre_id in dict.fromkeys(genre_ids):
                self._session.add(SeriesGenreModel(series_id=series_id, genre_id=genre_id))
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise

    def link_genre(self, series_id: int, genre_id: int) -> None:
        if self._session.get(SeriesGenreModel, (series_id, genre_id)) is not None:
            return
        self._session.add(SeriesGenreModel(series_id=series_id, genre_id=genre_id))
        commit_or_rollback(self._session)

    def list_genres(self, series_id: int) -> list[Genre]:
        statement = (
            select(GenreModel)
            .join(SeriesGenreModel, SeriesGenreModel.genre_id == GenreModel.id)
            .where(SeriesGenreModel.series_id == series_id)
            .order_by(GenreModel.name)
        )
        return [genre_to_entity(model) for model in self._session.exec(statement).all()]
