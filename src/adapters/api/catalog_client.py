"""
Client TMDB pour le moteur de synchronisation du catalogue.

Implemente l'interface ICatalogClient : un GET authentifie par appel, sans
cache ni relance (la relance est assuree par RetryingCatalogClient).
Les credentials viennent exclusivement de la CatalogConfig active, passee
explicitement a la construction.

Usage:
    client = TMDBCatalogClient(config)
    movies = await client.popular(TitleKind.MOVIE)
    details = await client.details(TitleKind.MOVIE, 27205)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.core.entities.catalog import CatalogConfig
from src.core.errors import ProviderMalformedResponse, ProviderUnavailable
from src.core.ports.api_clients import ICatalogClient


class TMDBCatalogClient(ICatalogClient):
    """
    Client HTTP du fournisseur de catalogue.

    Chaque requete porte les parametres api_key et language de la
    configuration, completes par ceux de l'appelant.

    Example:
        client = TMDBCatalogClient(config, timeout=30.0)
        data = await client.fetch("movie/popular", {"page": 1})
        await client.close()
    """

    def __init__(
        self,
        config: CatalogConfig,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            config: Configuration active du fournisseur
            timeout: Timeout HTTP en secondes
            http_client: Client httpx a reutiliser (tests), cree a la demande sinon
        """
        self._config = config
        self._timeout = timeout
        self._client = http_client

    @property
    def config(self) -> CatalogConfig:
        return self._config

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url.rstrip("/") + "/",
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    async def fetch(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Execute un GET sur le fournisseur et retourne le JSON decode.

        Raises:
            ProviderUnavailable: Statut hors 2xx ou erreur de transport
            ProviderMalformedResponse: Corps non JSON ou non objet
        """
        query: dict[str, Any] = {
            "api_key": self._config.api_key,
            "language": self._config.language,
        }
        if params:
            query.update(params)

        relative_path = path.lstrip("/")
        logger.debug("Appel TMDB", path=relative_path)

        try:
            response = await self._get_client().get(relative_path, params=query)
        except httpx.TransportError as e:
            logger.warning("Fournisseur injoignable", path=relative_path, error=str(e))
            raise ProviderUnavailable(None, relative_path) from e

        if not response.is_success:
            retry_after_header = response.headers.get("Retry-After")
            retry_after = (
                int(retry_after_header)
                if retry_after_header and retry_after_header.isdigit()
                else None
            )
            raise ProviderUnavailable(response.status_code, relative_path, retry_after)

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderMalformedResponse(relative_path, "corps JSON illisible") from e

        if not isinstance(data, dict):
            raise ProviderMalformedResponse(relative_path, "objet JSON attendu")
        return data

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin du lot pour liberer les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
