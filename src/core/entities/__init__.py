"""
Business entities representing core domain concepts.

Exports:
- Movie, Series: Catalog titles keyed by their provider ID
- Season, Episode: Season tree owned by a series
- Genre: Genre shared by movies and series
- CatalogConfig: Active provider configuration (value object)
- SyncRecord: Audit trail entry
- TitleKind, SyncStatus: Shared enumerations
"""

from src.core.entities.catalog import CatalogConfig, SyncRecord, SyncStatus, TitleKind
from src.core.entities.media import Episode, Genre, Movie, Season, Series

__all__ = [
    "CatalogConfig",
    "SyncRecord",
    "SyncStatus",
    "TitleKind",
    "Movie",
    "Series",
    "Season",
    "Episode",
    "Genre",
]
