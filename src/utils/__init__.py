"""
Utilitaires et constantes pour CineSync.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import (
    DEFAULT_BULK_LIMIT,
    TRAILER_SITE,
    TRAILER_TYPE,
)
from src.utils.helpers import (
    clean_title,
    parse_date,
    round_rating,
    slugify,
    utc_now,
    year_from_date,
)

__all__ = [
    "DEFAULT_BULK_LIMIT",
    "TRAILER_SITE",
    "TRAILER_TYPE",
    "clean_title",
    "parse_date",
    "round_rating",
    "slugify",
    "utc_now",
    "year_from_date",
]
