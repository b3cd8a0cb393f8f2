"""
Implementation SQLModel du journal d'audit des synchronisations.

Append-only : aucune methode de mise a jour ni de suppression.
"""

from typing import Optional

from sqlmodel import Session, select

from src.core.entities.catalog import SyncRecord, SyncStatus, TitleKind
from src.core.ports.repositories import ISyncRecordRepository
from src.infrastructure.persistence.models import SyncRecordModel
from src.infrastructure.persistence.repositories.session_utils import commit_or_rollback


class SQLModelSyncRecordRepository(ISyncRecordRepository):
    """Repository SQLModel pour les enregistrements d'audit."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: SyncRecordModel) -> SyncRecord:
        return SyncRecord(
            id=model.id,
            type=TitleKind(model.type),
            external_id=model.external_id,
            status=SyncStatus(model.status),
            last_sync=model.last_sync,
            error_message=model.error_message,
        )

    def append(self, record: SyncRecord) -> SyncRecord:
        """Ajoute un enregistrement."""
        model = SyncRecordModel(
            type=record.type.value,
            external_id=record.external_id,
            status=record.status.value,
            last_sync=record.last_sync,
            error_message=record.error_message,
        )
        self._session.add(model)
        commit_or_rollback(self._session)
        self._session.refresh(model)
        return self._to_entity(model)

    def list_recent(
        self,
        kind: Optional[TitleKind] = None,
        status: Optional[SyncStatus] = None,
        limit: int = 50,
    ) -> list[SyncRecord]:
        """Liste les derniers enregistrements, filtres par type et statut."""
        statement = select(SyncRecordModel)
        if kind is not None:
            statement = statement.where(SyncRecordModel.type == kind.value)
        if status is not None:
            statement = statement.where(SyncRecordModel.status == status.value)
        statement = statement.order_by(
            SyncRecordModel.last_sync.desc(),  # type: ignore[attr-defined]
            SyncRecordModel.id.desc(),  # type: ignore[union-attr]
        ).limit(limit)
        return [self._to_entity(model) for model in self._session.exec(statement).all()]
