"""
Recherche de titres chez le fournisseur pour l'administration.

Chaque resultat est marque isImported selon la presence de son ID
fournisseur dans le catalogue local.
"""

from typing import Any

from src.core.entities.catalog import TitleKind
from src.core.ports.repositories import IMovieRepository, ISeriesRepository
from src.services.catalog.config_store import CatalogConfigStore
from src.services.catalog.sync_runner import ClientFactory
from src.utils.constants import SEARCH_BACKDROP_SIZE, SEARCH_POSTER_SIZE


class CatalogSearchService:
    """Recherche fournisseur enrichie des informations locales."""

    def __init__(
        self,
        config_store: CatalogConfigStore,
        movie_repo: IMovieRepository,
        series_repo: ISeriesRepository,
        client_factory: ClientFactory,
    ) -> None:
        self._config_store = config_store
        self._movie_repo = movie_repo
        self._series_repo = series_repo
        self._client_factory = client_factory

    async def search(self, kind: TitleKind, query: str, page: int = 1) -> dict[str, Any]:
        """
        Recherche des titres par nom.

        Returns:
            {"results": [...], "pagination": {page, totalPages, totalResults},
            "config": {"imageBaseUrl": ...}}

        Raises:
            CatalogConfigurationError: Aucune configuration active
            CatalogProviderError: Echec de l'appel au fournisseur
        """
        config = self._config_store.load_active()
        client = self._client_factory(config)
        try:
            data = await client.search(kind, query, page)
        finally:
            await client.close()

        items = data["results"]
        external_ids = [item["id"] for item in items if isinstance(item.get("id"), int)]
        repo = self._movie_repo if kind is TitleKind.MOVIE else self._series_repo
        imported = repo.existing_external_ids(external_ids)

        is_movie = kind is TitleKind.MOVIE
        results = [
            {
                **item,
                "isImported": item.get("id") in imported,
                "posterUrl": config.image_url(SEARCH_POSTER_SIZE, item.get("poster_path")),
                "backdropUrl": config.image_url(SEARCH_BACKDROP_SIZE, item.get("backdrop_path")),
                "releaseDate": item.get("release_date") if is_movie else item.get("first_air_date"),
                "title": item.get("title") if is_movie else item.get("name"),
                "originalTitle": item.get("original_title") if is_movie else item.get("original_name"),
            }
            for item in items
        ]
        return {
            "results": results,
            "pagination": {
                "page": data.get("page", page),
                "totalPages": data.get("total_pages", 0),
                "totalResults": data.get("total_results", 0),
            },
            "config": {"imageBaseUrl": config.image_base_url},
        }
