"""
Implementation SQLModel du repository Genre.

Les genres sont partages entre films et series et identifies par leur
ID fournisseur.
"""

from typing import Optional

from sqlmodel import Session, select

from src.core.entities.media import Genre
from src.core.ports.repositories import IGenreRepository
from src.infrastructure.persistence.models import GenreModel
from src.infrastructure.persistence.repositories.session_utils import commit_or_rollback


def genre_to_entity(model: GenreModel) -> Genre:
    """Convertit un GenreModel en entite Genre."""
    return Genre(
        id=model.id,
        external_id=model.external_id,
        name=model.name,
        slug=model.slug,
        is_active=model.is_active,
    )


class SQLModelGenreRepository(IGenreRepository):
    """Repository SQLModel pour les genres."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_external_id(self, external_id: int) -> Optional[Genre]:
        """Recupere un genre par son ID fournisseur."""
        statement = select(GenreModel).where(GenreModel.external_id == external_id)
        model = self._session.exec(statement).first()
        return genre_to_entity(model) if model else None

    def save(self, genre: Genre) -> Genre:
        """Cree le genre, ou met a jour son nom et son slug s'il existe."""
        model = self._session.get(GenreModel, genre.id) if genre.id else None
        if model is None:
            model = GenreModel(
                external_id=genre.external_id,
                name=genre.name,
                slug=genre.slug,
                is_active=genre.is_active,
            )
        else:
            model.name = genre.name
            model.slug = genre.slug
            model.is_active = genre.is_active

        self._session.add(model)
        commit_or_rollback(self._session)
        self._session.refresh(model)
        return genre_to_entity(model)
