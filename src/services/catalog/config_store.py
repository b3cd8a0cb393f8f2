"""
Acces a la configuration active du fournisseur de catalogue.

La configuration est chargee une fois au debut d'un lot et transmise
ensuite explicitement a chaque composant (voir SyncContext).
"""

from loguru import logger

from src.config import Settings
from src.core.entities.catalog import CatalogConfig
from src.core.errors import CatalogConfigurationError
from src.core.ports.repositories import ICatalogConfigRepository


class CatalogConfigStore:
    """
    Lecture et initialisation de la configuration fournisseur.

    Au plus une configuration est active ; c'est la seule source des
    credentials utilises par le moteur.
    """

    def __init__(self, config_repo: ICatalogConfigRepository) -> None:
        self._config_repo = config_repo

    def load_active(self) -> CatalogConfig:
        """
        Charge la configuration active.

        Raises:
            CatalogConfigurationError: Si aucune configuration n'est active
        """
        config = self._config_repo.get_active()
        if config is None:
            logger.error("Aucune configuration TMDB active")
            raise CatalogConfigurationError()
        return config

    def init_from_settings(self, settings: Settings) -> CatalogConfig:
        """
        Cree ou reactive la configuration a partir des settings.

        Toutes les configurations actives sont desactivees, puis celle
        correspondant a la cle API des settings est creee ou mise a jour.

        Raises:
            CatalogConfigurationError: Si aucune cle API n'est configuree
        """
        if not settings.tmdb_enabled:
            raise CatalogConfigurationError("Clé API TMDB non configurée (CINESYNC_TMDB_API_KEY)")

        config = self._config_repo.activate(
            CatalogConfig(
                base_url=settings.tmdb_base_url,
                api_key=settings.tmdb_api_key or "",
                image_base_url=settings.tmdb_image_base_url,
                language=settings.tmdb_language,
            )
        )
        logger.info("Configuration TMDB initialisee", config_id=config.id, language=config.language)
        return config
