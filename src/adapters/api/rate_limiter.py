"""
Limiteur de debit a seau de jetons pour les appels au fournisseur.

Un seul seau est partage par tous les appels d'un lot : le debit moyen est
borne par ``rate`` requetes par seconde, avec des rafales jusqu'a ``capacity``.
"""

import asyncio
import time
from typing import Awaitable, Callable


class TokenBucket:
    """
    Seau de jetons asynchrone.

    Attributes:
        rate: Jetons regeneres par seconde
        capacity: Nombre maximal de jetons (taille des rafales)

    Example:
        bucket = TokenBucket(rate=4, capacity=8)
        await bucket.acquire()  # attend si le seau est vide
    """

    def __init__(
        self,
        rate: float,
        capacity: int,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if rate <= 0:
            raise ValueError("rate doit etre strictement positif")
        if capacity < 1:
            raise ValueError("capacity doit etre >= 1")
        self.rate = rate
        self.capacity = capacity
        self._clock = clock
        self._sleep = sleep
        self._tokens = float(capacity)
        self._updated_at = clock()
        self._lock = asyncio.Lock()

    @property
    def available(self) -> float:
        """Jetons disponibles (sans consommer)."""
        self._refill()
        return self._tokens

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._updated_at)
        self._tokens = min(float(self.capacity), self._tokens + elapsed * self.rate)
        self._updated_at = now

    async def acquire(self) -> None:
        """Consomme un jeton, en attendant sa regeneration si besoin."""
        async with self._lock:
            self._refill()
            while self._tokens < 1:
                await self._sleep((1 - self._tokens) / self.rate)
                self._refill()
            self._tokens -= 1
