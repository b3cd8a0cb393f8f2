"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
et de leurs liens de genre via SQLModel.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.media import Genre, Movie
from src.core.ports.repositories import IMovieRepository
from src.infrastructure.persistence.models import GenreModel, MovieGenreModel, MovieModel
from src.infrastructure.persistence.repositories.genre_repository import genre_to_entity
from src.infrastructure.persistence.repositories.session_utils import commit_or_rollback
from src.utils.helpers import utc_now

# Champs scalaires ecrases a chaque sauvegarde
_SCALAR_FIELDS = (
    "external_id",
    "title",
    "original_title",
    "description",
    "year",
    "duration",
    "rating",
    "vote_count",
    "popularity",
    "poster",
    "backdrop",
    "trailer",
    "adult",
    "original_language",
    "release_date",
    "is_active",
    "is_featured",
)


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """Convertit un modele DB en entite domaine."""
        return Movie(id=model.id, **{name: getattr(model, name) for name in _SCALAR_FIELDS})

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID interne."""
        model = self._session.get(MovieModel, movie_id)
        return self._to_entity(model) if model else None

    def get_by_external_id(self, external_id: int) -> Optional[Movie]:
        """Recupere un film par son ID fournisseur."""
        statement = select(MovieModel).where(MovieModel.external_id == external_id)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def list_with_external_id(self) -> list[Movie]:
        """Liste les films ayant un ID fournisseur, par ID interne croissant."""
        statement = (
            select(MovieModel)
            .where(MovieModel.external_id.isnot(None))  # type: ignore[union-attr]
            .order_by(MovieModel.id)
        )
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def existing_external_ids(self, external_ids: list[int]) -> set[int]:
        """Retourne les IDs fournisseur deja presents parmi ceux donnes."""
        if not external_ids:
            return set()
        statement = select(MovieModel.external_id).where(
            MovieModel.external_id.in_(external_ids)  # type: ignore[union-attr]
        )
        return {value for value in self._session.exec(statement).all() if value is not None}

    def save(self, movie: Movie) -> Movie:
        """Sauvegarde un film (insertion ou mise a jour de tous les champs scalaires)."""
        existing = None
        if movie.id:
            existing = self._session.get(MovieModel, movie.id)
        elif movie.external_id is not None:
            statement = select(MovieModel).where(MovieModel.external_id == movie.external_id)
            existing = self._session.exec(statement).first()

        model = existing or MovieModel(title=movie.title)
        for name in _SCALAR_FIELDS:
            setattr(model, name, getattr(movie, name))
        if existing:
            model.updated_at = utc_now()

        self._session.add(model)
        commit_or_rollback(self._session)
        self._session.refresh(model)
        return self._to_entity(model)

    def replace_genres(self, movie_id: int, genre_ids: list[int]) -> None:
        """
        Remplace les liens de genre du film.

        Suppression et insertions partagent un seul commit : en cas d'echec
        l'ancien ensemble reste en place.

        Lève :
            SQLAlchemyError : apres annulation de la transaction
        """
        try:
            statement = select(MovieGenreModel).where(MovieGenreModel.movie_id == movie_id)
            for link in self._session.exec(statement).all():
                self._session.delete(link)
            self._session.flush()
            for genre_id in dict.fromkeys(genre_ids):
                self._session.add(MovieGenreModel(movie_id=movie_id, genre_id=genre_id))
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise

    def link_genre(self, movie_id: int, genre_id: int) -> None:
        """Lie le film au genre, sans effet si le lien existe deja."""
        if self._session.get(MovieGenreModel, (movie_id, genre_id)) is not None:
            return
        self._session.add(MovieGenreModel(movie_id=movie_id, genre_id=genre_id))
        commit_or_rollback(self._session)

    def list_genres(self, movie_id: int) -> list[Genre]:
        """Liste les genres lies au film, par nom."""
        statement = (
            select(GenreModel)
            .join(MovieGenreModel, MovieGenreModel.genre_id == GenreModel.id)
            .where(MovieGenreModel.movie_id == movie_id)
            .order_by(GenreModel.name)
        )
        return [genre_to_entity(model) for model in self._session.exec(statement).all()]
