"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- ICatalogConfigRepository : Configuration du fournisseur
- IMovieRepository / ISeriesRepository : Titres et liens de genre
- IGenreRepository : Genres partagés
- ISeasonRepository : Arborescence saisons / épisodes
- ISyncRecordRepository : Journal d'audit

Port client API :
- ICatalogClient : Accès en lecture au fournisseur de catalogue
"""

from src.core.ports.api_clients import ICatalogClient
from src.core.ports.repositories import (
    ICatalogConfigRepository,
    IGenreRepository,
    IMovieRepository,
    ISeasonRepository,
    ISeriesRepository,
    ISyncRecordRepository,
)

__all__ = [
    # Repositories
    "ICatalogConfigRepository",
    "IMovieRepository",
    "ISeriesRepository",
    "IGenreRepository",
    "ISeasonRepository",
    "ISyncRecordRepository",
    # Client API
    "ICatalogClient",
]
