"""
Construction du client fournisseur utilise par un lot.

Chaque lot recoit un client neuf : client HTTP, relance bornee et seau de
jetons propre au lot.
"""

from src.adapters.api.catalog_client import TMDBCatalogClient
from src.adapters.api.rate_limiter import TokenBucket
from src.adapters.api.retry import RetryingCatalogClient
from src.config import Settings
from src.core.entities.catalog import CatalogConfig
from src.core.ports.api_clients import ICatalogClient


def build_catalog_client(config: CatalogConfig, settings: Settings) -> ICatalogClient:
    """
    Cree le client de catalogue d'un lot.

    Args:
        config: Configuration fournisseur active
        settings: Parametres HTTP, de relance et de limitation de debit

    Returns:
        RetryingCatalogClient enveloppant un TMDBCatalogClient
    """
    return RetryingCatalogClient(
        TMDBCatalogClient(config, timeout=settings.http_timeout_seconds),
        rate_limiter=TokenBucket(
            rate=settings.rate_limit_per_second,
            capacity=settings.rate_limit_burst,
        ),
        max_attempts=settings.retry_max_attempts,
        max_wait=settings.retry_max_wait,
    )
