"""
Journalisation de CineSync (loguru).

Deux sorties :
- stderr, coloree, pour suivre un lot d'import ou de resynchronisation en direct
  (niveau reglable par -v / -q sur la CLI ou CINESYNC_LOG_LEVEL)
- fichier JSON rotatif (CINESYNC_LOG_FILE) qui conserve pour chaque element
  traite le type, l'ID TMDB et l'erreur eventuelle (log_file=None le coupe)

Les modules du moteur passent ce contexte en arguments nommes
(``logger.info("...", kind=..., external_id=...)``) ; le message reste une
chaine constante et les champs se retrouvent dans la sortie JSON.
"""

import sys
from pathlib import Path

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = Path("logs/cinesync.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les sorties loguru par defaut par celles de CineSync.

    Args :
        log_level : Seuil de la sortie stderr (TRACE a ERROR)
        log_file : Journal JSON des lots, None pour ne garder que stderr
        rotation_size : Taille declenchant la rotation du journal ("10 MB")
        retention_count : Archives zip conservees apres rotation
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=_CONSOLE_FORMAT,
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Les appels fournisseur sont tracés en DEBUG
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
