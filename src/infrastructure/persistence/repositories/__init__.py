"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.catalog_config_repository import (
    SQLModelCatalogConfigRepository,
)
from src.infrastructure.persistence.repositories.genre_repository import (
    SQLModelGenreRepository,
)
from src.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)
from src.infrastructure.persistence.repositories.season_repository import (
    SQLModelSeasonRepository,
)
from src.infrastructure.persistence.repositories.series_repository import (
    SQLModelSeriesRepository,
)
from src.infrastructure.persistence.repositories.sync_record_repository import (
    SQLModelSyncRecordRepository,
)

__all__ = [
    "SQLModelCatalogConfigRepository",
    "SQLModelGenreRepository",
    "SQLModelMovieRepository",
    "SQLModelSeasonRepository",
    "SQLModelSeriesRepository",
    "SQLModelSyncRecordRepository",
]
