"""
Entites de configuration et d'audit de la synchronisation du catalogue.

- CatalogConfig : configuration du fournisseur, objet valeur immuable
  charge une fois par lot puis passe explicitement a chaque composant
- SyncRecord : trace d'audit d'un resultat par element
- TitleKind / SyncStatus : enumerations partagees
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class TitleKind(str, Enum):
    """Type de titre du catalogue, valeurs alignees sur les chemins du fournisseur."""

    MOVIE = "movie"
    TV = "tv"

    @classmethod
    def from_batch_kind(cls, value: str) -> "TitleKind":
        """
        Convertit le type d'un lot ("movies" / "series") ou d'un titre ("movie" / "tv").

        Raises:
            ValueError: Si la valeur n'est pas reconnue
        """
        normalized = value.strip().lower()
        if normalized in ("movie", "movies"):
            return cls.MOVIE
        if normalized in ("tv", "series"):
            return cls.TV
        raise ValueError(f"Type de titre inconnu: {value!r}")

    @property
    def label(self) -> str:
        """Libelle francais du type."""
        return "Film" if self is TitleKind.MOVIE else "Série"


class SyncStatus(str, Enum):
    """Statut d'un enregistrement d'audit."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration active du fournisseur de catalogue.

    Attributes:
        base_url: URL de base de l'API (ex: https://api.themoviedb.org/3)
        api_key: Cle API v3 passee en parametre de requete
        image_base_url: URL de base des images (ex: https://image.tmdb.org/t/p)
        language: Langue des metadonnees (ex: fr-FR)
    """

    base_url: str
    api_key: str
    image_base_url: str
    language: str = "fr-FR"
    is_active: bool = True
    id: Optional[int] = None

    @property
    def preferred_trailer_language(self) -> str:
        """Sous-etiquette principale de la langue (fr-FR -> fr)."""
        return self.language.split("-")[0].lower()

    def image_url(self, size: str, path: Optional[str]) -> Optional[str]:
        """
        Construit l'URL absolue d'une image du fournisseur.

        Args:
            size: Taille demandee (w500, w780, w1280, original)
            path: Chemin relatif renvoye par l'API (commence par /)

        Returns:
            URL absolue, ou None si le chemin est absent
        """
        if not path:
            return None
        return f"{self.image_base_url.rstrip('/')}/{size}{path}"


@dataclass
class SyncRecord:
    """Trace d'audit d'un resultat de synchronisation pour un element."""

    type: TitleKind
    external_id: int
    status: SyncStatus
    last_sync: datetime
    error_message: Optional[str] = None
    id: Optional[int] = None
