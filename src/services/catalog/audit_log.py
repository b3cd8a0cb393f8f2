"""
Journal d'audit des synchronisations (append-only).
"""

from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from src.core.entities.catalog import SyncRecord, SyncStatus, TitleKind
from src.core.ports.repositories import ISyncRecordRepository
from src.utils.constants import DEFAULT_HISTORY_LIMIT
from src.utils.helpers import utc_now


class SyncAuditLog:
    """Enregistre un SyncRecord par resultat d'element (succes ou erreur)."""

    def __init__(self, record_repo: ISyncRecordRepository) -> None:
        self._record_repo = record_repo

    def _append(
        self,
        kind: TitleKind,
        external_id: int,
        status: SyncStatus,
        error_message: Optional[str] = None,
    ) -> Optional[SyncRecord]:
        try:
            return self._record_repo.append(
                SyncRecord(
                    type=kind,
                    external_id=external_id,
                    status=status,
                    last_sync=utc_now(),
                    error_message=error_message,
                )
            )
        except SQLAlchemyError as e:
            # Un echec d'audit ne doit pas faire echouer l'element
            logger.error(
                "Echec d'ecriture de l'audit",
                kind=kind.value,
                external_id=external_id,
                error=str(e),
            )
            return None

    def record_success(self, kind: TitleKind, external_id: int) -> Optional[SyncRecord]:
        return self._append(kind, external_id, SyncStatus.SUCCESS)

    def record_error(self, kind: TitleKind, external_id: int, message: str) -> Optional[SyncRecord]:
        return self._append(kind, external_id, SyncStatus.ERROR, message)

    def history(
        self,
        kind: Optional[TitleKind] = None,
        status: Optional[SyncStatus] = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> list[SyncRecord]:
        """Derniers enregistrements, du plus recent au plus ancien."""
        return self._record_repo.list_recent(kind=kind, status=status, limit=limit)
