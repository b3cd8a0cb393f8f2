"""
Mecanisme de retry avec backoff exponentiel pour le fournisseur de catalogue.

Relance automatiquement les erreurs transitoires (429 rate limiting, 5xx,
erreurs de transport) avec un delai croissant et du jitter aleatoire, ou le
delai Retry-After indique par le fournisseur.
Les autres erreurs (404, reponse malformee) remontent immediatement.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=4, max_wait=30)
    async def my_api_call():
        ...

    # Avec le client enveloppe
    client = RetryingCatalogClient(TMDBCatalogClient(config), rate_limiter=bucket)
"""

from typing import Any, Optional

from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_random_exponential,
)
from tenacity.wait import wait_base

from src.adapters.api.rate_limiter import TokenBucket
from src.core.errors import ProviderUnavailable
from src.core.ports.api_clients import ICatalogClient


def is_transient_error(error: BaseException) -> bool:
    """Vrai si l'erreur justifie une nouvelle tentative."""
    return isinstance(error, ProviderUnavailable) and error.is_transient


def _log_retry(retry_state: RetryCallState) -> None:
    """Trace chaque nouvelle tentative en WARNING."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Erreur transitoire du fournisseur, nouvelle tentative",
        attempt=retry_state.attempt_number,
        error=str(error),
    )


class wait_retry_after(wait_base):
    """
    Attente dictee par le header Retry-After quand le fournisseur le renvoie.

    La valeur est bornee par max_wait ; sans Retry-After, le delai vient
    de la strategie de repli (backoff exponentiel).
    """

    def __init__(self, fallback: wait_base, max_wait: float) -> None:
        self.fallback = fallback
        self.max_wait = max_wait

    def __call__(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        retry_after = getattr(error, "retry_after", None)
        if retry_after is not None:
            return min(float(retry_after), self.max_wait)
        return self.fallback(retry_state)


def with_retry(max_attempts: int = 4, max_wait: float = 30, min_wait: float = 1):
    """
    Decorateur pour relancer sur erreur transitoire avec backoff exponentiel.

    Utilise wait_random_exponential pour ajouter du jitter et eviter
    que plusieurs lots relancent au meme instant. Un Retry-After renvoye
    par le fournisseur (429) remplace ce delai, dans la limite de max_wait.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 4)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 30)
        min_wait: Delai minimum entre les tentatives en secondes (defaut: 1)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception(is_transient_error),
        wait=wait_retry_after(
            wait_random_exponential(multiplier=1, min=min_wait, max=max_wait), max_wait
        ),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


class RetryingCatalogClient(ICatalogClient):
    """
    Client de catalogue avec relance bornee et limitation de debit.

    Enveloppe un ICatalogClient : chaque tentative consomme d'abord un jeton
    du TokenBucket partage par le lot, puis delegue au client interne.

    Example:
        bucket = TokenBucket(rate=4, capacity=8)
        client = RetryingCatalogClient(TMDBCatalogClient(config), rate_limiter=bucket)
        data = await client.popular(TitleKind.MOVIE)
    """

    def __init__(
        self,
        inner: ICatalogClient,
        rate_limiter: Optional[TokenBucket] = None,
        max_attempts: int = 4,
        max_wait: float = 30,
        min_wait: float = 1,
    ) -> None:
        self._inner = inner
        self._rate_limiter = rate_limiter
        self._max_attempts = max_attempts
        self._max_wait = max_wait
        self._min_wait = min_wait

    async def fetch(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Execute fetch() sur le client interne avec retry et rate limiting."""

        @with_retry(
            max_attempts=self._max_attempts,
            max_wait=self._max_wait,
            min_wait=self._min_wait,
        )
        async def _do_fetch() -> dict[str, Any]:
            if self._rate_limiter is not None:
                await self._rate_limiter.acquire()
            return await self._inner.fetch(path, params)

        return await _do_fetch()

    async def close(self) -> None:
        await self._inner.close()
