"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINESYNC_,
et peut optionnellement être fournie via un fichier .env.

Les valeurs TMDB ne servent qu'à initialiser la configuration fournisseur active
stockée en base (commande init-config / POST /admin/catalog/init). Le moteur de
synchronisation lit ensuite exclusivement la configuration active de la base.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINESYNC_.
    Exemple : CINESYNC_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="CINESYNC_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///cinesync.db")

    # Fournisseur (valeurs d'initialisation de la configuration active)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p")
    tmdb_language: str = Field(default="fr-FR")

    # Synchronisation
    bulk_import_limit: int = Field(default=20, ge=1)
    http_timeout_seconds: float = Field(default=30.0, gt=0)
    retry_max_attempts: int = Field(default=4, ge=1)
    retry_max_wait: int = Field(default=30, ge=1)
    rate_limit_per_second: float = Field(default=4.0, gt=0)
    rate_limit_burst: int = Field(default=8, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinesync.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si une clé TMDB est disponible pour initialiser la configuration."""
        return bool(self.tmdb_api_key)
