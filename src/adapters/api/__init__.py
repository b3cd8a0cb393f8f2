"""
Client API du fournisseur de catalogue.

Ce module fournit les adaptateurs pour communiquer avec TMDB:
- TMDBCatalogClient: GET authentifie, erreurs typees, sans relance
- RetryingCatalogClient: relance bornee avec backoff exponentiel (tenacity)
- TokenBucket: limitation de debit partagee par un lot
- build_catalog_client: assemblage du client d'un lot depuis les settings

Les clients implementent ICatalogClient defini dans core/ports/api_clients.py.
"""

from src.adapters.api.catalog_client import TMDBCatalogClient
from src.adapters.api.factory import build_catalog_client
from src.adapters.api.rate_limiter import TokenBucket
from src.adapters.api.retry import RetryingCatalogClient, is_transient_error, with_retry

__all__ = [
    "TMDBCatalogClient",
    "RetryingCatalogClient",
    "TokenBucket",
    "build_catalog_client",
    "is_transient_error",
    "with_retry",
]
