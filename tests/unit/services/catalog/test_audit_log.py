"""
Tests pour SyncAuditLog - journal d'audit des synchronisations.
"""

from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from src.core.entities.catalog import SyncStatus, TitleKind
from src.services.catalog import SyncAuditLog


class TestSyncAuditLog:
    def test_record_success(self, audit_log):
        record = audit_log.record_success(TitleKind.MOVIE, 27205)

        assert record.id is not None
        assert record.status is SyncStatus.SUCCESS
        assert record.error_message is None

    def test_record_error_keeps_message(self, audit_log):
        audit_log.record_error(TitleKind.TV, 1396, "Erreur TMDB API: 500")

        records = audit_log.history(status=SyncStatus.ERROR)

        assert len(records) == 1
        assert records[0].type is TitleKind.TV
        assert records[0].error_message == "Erreur TMDB API: 500"

    def test_history_filters_by_kind(self, audit_log):
        audit_log.record_success(TitleKind.MOVIE, 1)
        audit_log.record_success(TitleKind.TV, 2)

        assert [r.external_id for r in audit_log.history(kind=TitleKind.TV)] == [2]

    def test_write_failure_is_not_raised(self):
        repo = MagicMock()
        repo.append.side_effect = OperationalError("INSERT", {}, Exception("database is locked"))

        assert SyncAuditLog(repo).record_success(TitleKind.MOVIE, 1) is None
