"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance du
catalogue. Les implémentations (adaptateurs) fournissent le stockage concret
(SQLite via SQLModel).
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.catalog import CatalogConfig, SyncRecord, SyncStatus, TitleKind
from src.core.entities.media import Genre, Movie, Season, Series


class ICatalogConfigRepository(ABC):
    """Stockage de la configuration du fournisseur."""

    @abstractmethod
    def get_active(self) -> Optional[CatalogConfig]:
        """Récupère la configuration active, ou None."""
        ...

    @abstractmethod
    def activate(self, config: CatalogConfig) -> CatalogConfig:
        """Désactive toutes les configurations puis active celle-ci (upsert par clé API)."""
        ...


class IMovieRepository(ABC):
    """
    Interface de stockage des films.

    Définit les opérations pour persister et récupérer les entités Movie.
    """

    @abstractmethod
    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Récupère un film par son ID interne."""
        ...

    @abstractmethod
    def get_by_external_id(self, external_id: int) -> Optional[Movie]:
        """Récupère un film par son ID fournisseur."""
        ...

    @abstractmethod
    def list_with_external_id(self) -> list[Movie]:
        """Liste tous les films possédant un ID fournisseur."""
        ...

    @abstractmethod
    def existing_external_ids(self, external_ids: list[int]) -> set[int]:
        """Retourne le sous-ensemble des IDs fournisseur déjà importés."""
        ...

    @abstractmethod
    def save(self, movie: Movie) -> Movie:
        """Sauvegarde un film (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def replace_genres(self, movie_id: int, genre_ids: list[int]) -> None:
        """Remplace l'ensemble des liens de genre du film en une seule transaction."""
        ...

    @abstractmethod
    def link_genre(self, movie_id: int, genre_id: int) -> None:
        """Lie le film au genre (sans effet si le lien existe)."""
        ...

    @abstractmethod
    def list_genres(self, movie_id: int) -> list[Genre]:
        """Liste les genres liés au film."""
        ...


class ISeriesRepository(ABC):
    """
    Interface de stockage des séries.

    Mêmes opérations que IMovieRepository pour les séries.
    """

    @abstractmethod
    def get_by_id(self, series_id: int) -> Optional[Series]:
        """Récupère une série par son ID interne."""
        ...

    @abstractmethod
    def get_by_external_id(self, external_id: int) -> Optional[Series]:
        """Récupère une série par son ID fournisseur."""
        ...

    @abstractmethod
    def list_with_external_id(self) -> list[Series]:
        """Liste toutes les séries possédant un ID fournisseur."""
        ...

    @abstractmethod
    def existing_external_ids(self, external_ids: list[int]) -> set[int]:
        """Retourne le sous-ensemble des IDs fournisseur déjà importés."""
        ...

    @abstractmethod
    def save(self, series: Series) -> Series:
        """Sauvegarde une série (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def replace_genres(self, series_id: int, genre_ids: list[int]) -> None:
        """Remplace l'ensemble des liens de genre de la série."""
        ...

    @abstractmethod
    def link_genre(self, series_id: int, genre_id: int) -> None:
        """Lie la série au genre (sans effet si le lien existe)."""
        ...

    @abstractmethod
    def list_genres(self, series_id: int) -> list[Genre]:
        """Liste les genres liés à la série."""
        ...


class IGenreRepository(ABC):
    """Stockage des genres partagés entre films et séries."""

    @abstractmethod
    def get_by_external_id(self, external_id: int) -> Optional[Genre]:
        """Récupère un genre par son ID fournisseur."""
        ...

    @abstractmethod
    def save(self, genre: Genre) -> Genre:
        """Crée ou met à jour un genre."""
        ...


class ISeasonRepository(ABC):
    """Stockage de l'arborescence saisons / épisodes d'une série."""

    @abstractmethod
    def list_by_series(self, series_id: int) -> list[Season]:
        """Liste les saisons d'une série, épisodes inclus, par numéro croissant."""
        ...

    @abstractmethod
    def replace_tree(self, series_id: int, seasons: list[Season]) -> list[Season]:
        """
        Remplace toutes les saisons et tous les épisodes d'une série.

        La suppression de l'ancienne arborescence et la création de la nouvelle
        s'exécutent dans une seule transaction : en cas d'échec, l'ancienne
        arborescence est conservée.
        """
        ...


class ISyncRecordRepository(ABC):
    """Journal d'audit append-only des synchronisations."""

    @abstractmethod
    def append(self, record: SyncRecord) -> SyncRecord:
        """Ajoute un enregistrement d'audit."""
        ...

    @abstractmethod
    def list_recent(
        self,
        kind: Optional[TitleKind] = None,
        status: Optional[SyncStatus] = None,
        limit: int = 50,
    ) -> list[SyncRecord]:
        """Liste les derniers enregistrements, du plus récent au plus ancien."""
        ...
