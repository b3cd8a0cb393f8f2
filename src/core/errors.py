"""
Erreurs typees du moteur de synchronisation.

Hierarchie :
- CatalogSyncError : racine
  - CatalogConfigurationError : aucune configuration active (fatal au lot)
  - CatalogProviderError : erreur du fournisseur (limitee a un element)
    - ProviderUnavailable : statut HTTP hors 2xx ou erreur de transport
    - ProviderMalformedResponse : corps illisible ou de forme inattendue
"""

from typing import Optional


class CatalogSyncError(Exception):
    """Erreur de base du moteur de synchronisation."""


class CatalogConfigurationError(CatalogSyncError):
    """Levee quand aucune configuration fournisseur active n'existe."""

    def __init__(self, message: str = "Configuration TMDB non trouvée") -> None:
        super().__init__(message)


class CatalogProviderError(CatalogSyncError):
    """Erreur survenue lors d'un appel au fournisseur de catalogue."""


class ProviderUnavailable(CatalogProviderError):
    """
    Le fournisseur a repondu avec un statut hors 2xx (ou n'a pas repondu).

    Attributes:
        status_code: Statut HTTP recu, None pour une erreur de transport
        url: URL appelee (sans la cle API)
        retry_after: Valeur du header Retry-After (429), si fournie
    """

    def __init__(
        self,
        status_code: Optional[int],
        url: str = "",
        retry_after: Optional[int] = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        self.retry_after = retry_after
        if status_code is None:
            message = f"Erreur TMDB API: fournisseur injoignable ({url})"
        else:
            message = f"Erreur TMDB API: {status_code}"
        super().__init__(message)

    @property
    def is_transient(self) -> bool:
        """Vrai pour les erreurs pouvant disparaitre en relancant (429, 5xx, transport)."""
        return self.status_code is None or self.status_code == 429 or self.status_code >= 500


class ProviderMalformedResponse(CatalogProviderError):
    """Le corps de la reponse n'est pas du JSON ou n'a pas la forme attendue."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Réponse TMDB invalide pour {url}: {reason}")
