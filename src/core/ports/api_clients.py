"""
Interfaces ports pour les clients API.

Interface abstraite (port) définissant le contrat d'accès au fournisseur de
catalogue. L'implémentation (adaptateur) fournit le client HTTP concret pour
TMDB, avec ou sans politique de relance.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from src.core.entities.catalog import TitleKind
from src.core.errors import ProviderMalformedResponse


def require_list(payload: dict[str, Any], key: str, path: str) -> list[dict[str, Any]]:
    """
    Vérifie que payload[key] est une liste d'objets.

    Lève :
        ProviderMalformedResponse : clé absente ou de mauvais type
    """
    value = payload.get(key)
    if not isinstance(value, list):
        raise ProviderMalformedResponse(path, f"champ '{key}' absent ou invalide")
    return [item for item in value if isinstance(item, dict)]


class ICatalogClient(ABC):
    """
    Interface d'accès en lecture au fournisseur de catalogue.

    Toutes les méthodes retournent le JSON décodé (dictionnaire) et lèvent
    une CatalogProviderError en cas d'échec. Les méthodes de commodité
    construisent les chemins de l'API à partir du type de titre et
    vérifient la forme des réponses qu'elles exploitent.
    """

    @abstractmethod
    async def fetch(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Exécute un GET authentifié sur le fournisseur.

        Args :
            path : Chemin relatif à l'URL de base (ex: "movie/popular")
            params : Paramètres de requête additionnels

        Retourne :
            Le corps JSON décodé

        Lève :
            ProviderUnavailable : statut HTTP hors 2xx
            ProviderMalformedResponse : corps illisible
        """
        ...

    async def popular(self, kind: TitleKind, page: int = 1) -> list[dict[str, Any]]:
        """Résumés des titres populaires (une page)."""
        path = f"{kind.value}/popular"
        data = await self.fetch(path, {"page": page})
        return require_list(data, "results", path)

    async def details(self, kind: TitleKind, external_id: int) -> dict[str, Any]:
        """Détails complets d'un titre, genres inclus."""
        path = f"{kind.value}/{external_id}"
        data = await self.fetch(path, {"append_to_response": "genres"})
        if "id" not in data:
            raise ProviderMalformedResponse(path, "champ 'id' absent")
        return data

    async def videos(self, kind: TitleKind, external_id: int) -> list[dict[str, Any]]:
        """Vidéos candidates (bandes-annonces, teasers...) d'un titre."""
        path = f"{kind.value}/{external_id}/videos"
        data = await self.fetch(path)
        return require_list(data, "results", path)

    async def season(self, external_series_id: int, season_number: int) -> dict[str, Any]:
        """Détails d'une saison ; la liste 'episodes' est garantie."""
        path = f"tv/{external_series_id}/season/{season_number}"
        data = await self.fetch(path)
        data["episodes"] = require_list(data, "episodes", path)
        return data

    async def search(self, kind: TitleKind, query: str, page: int = 1) -> dict[str, Any]:
        """Recherche de titres par nom (page de résultats avec pagination)."""
        path = f"search/{kind.value}"
        data = await self.fetch(path, {"query": query, "page": page})
        data["results"] = require_list(data, "results", path)
        return data

    async def close(self) -> None:
        """Libère les ressources réseau (aucune par défaut)."""
        return None
