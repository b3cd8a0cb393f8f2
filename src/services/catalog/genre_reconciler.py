"""
Rapprochement des genres du fournisseur avec les genres locaux.
"""

from typing import Any

from loguru import logger

from src.core.entities.catalog import TitleKind
from src.core.entities.media import Genre
from src.core.ports.repositories import IGenreRepository, IMovieRepository, ISeriesRepository
from src.utils.helpers import slugify


class GenreReconciler:
    """
    Associe les genres externes a un film ou une serie.

    Purement additif : chaque genre est cree a la premiere rencontre puis
    lie au titre. Le remplacement complet lors d'une resync passe par
    resolve() puis replace_genres() du repository, a la charge de l'appelant.
    """

    def __init__(
        self,
        genre_repo: IGenreRepository,
        movie_repo: IMovieRepository,
        series_repo: ISeriesRepository,
    ) -> None:
        self._genre_repo = genre_repo
        self._movie_repo = movie_repo
        self._series_repo = series_repo

    def get_or_create(self, external_id: int, name: str) -> Genre:
        """Retourne le genre local correspondant, en le creant si absent."""
        genre = self._genre_repo.get_by_external_id(external_id)
        if genre is not None:
            return genre
        genre = self._genre_repo.save(
            Genre(external_id=external_id, name=name, slug=slugify(name), is_active=True)
        )
        logger.debug("Genre cree", external_id=external_id, name=name, slug=genre.slug)
        return genre

    def resolve(self, external_genres: list[dict[str, Any]]) -> list[Genre]:
        """
        Genres locaux correspondant aux genres externes, crees si absents.

        Args:
            external_genres: Genres du detail fournisseur ({id, name})

        Returns:
            Genres dans l'ordre du fournisseur (entrees invalides ignorees)
        """
        genres: list[Genre] = []
        for item in external_genres:
            external_id = item.get("id")
            name = item.get("name")
            if not isinstance(external_id, int) or not name:
                logger.warning("Genre ignore (id ou nom absent)", genre=item)
                continue
            genres.append(self.get_or_create(external_id, name))
        return genres

    def link(self, kind: TitleKind, title_id: int, external_genres: list[dict[str, Any]]) -> list[Genre]:
        """
        Lie le titre a chacun des genres externes.

        Args:
            kind: Type du titre (film ou serie)
            title_id: ID interne du titre
            external_genres: Genres du detail fournisseur ({id, name})

        Returns:
            Genres lies, dans l'ordre du fournisseur
        """
        genres = self.resolve(external_genres)
        for genre in genres:
            if kind is TitleKind.MOVIE:
                self._movie_repo.link_genre(title_id, genre.id)
            else:
                self._series_repo.link_genre(title_id, genre.id)
        return genres
