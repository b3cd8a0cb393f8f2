"""
Tests unitaires pour les commandes CLI du catalogue.

Tests couvrant:
- bulk-import / sync : appel du runner et affichage du rapport
- import : code de sortie selon le resultat
- init-config, search, history
- erreurs de configuration : message et code de sortie 1
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from src.core.entities.catalog import CatalogConfig, SyncRecord, SyncStatus, TitleKind
from src.core.errors import CatalogConfigurationError
from src.main import app
from src.services.catalog import BatchReport, ItemResult, ItemStatus

runner = CliRunner()


@pytest.fixture
def mock_container():
    """Mock le Container instancie par le decorateur @with_container()."""
    with patch("src.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        sync_runner = container_instance.sync_runner.return_value
        sync_runner.run_discovery_import = AsyncMock()
        sync_runner.run_resync = AsyncMock()
        sync_runner.import_one = AsyncMock()
        container_instance.search_service.return_value.search = AsyncMock()
        yield container_instance


def _report(message: str) -> BatchReport:
    return BatchReport(
        results=[
            ItemResult(ItemStatus.SUCCESS, 27205, "Inception", "Film importé"),
            ItemResult(ItemStatus.ERROR, 550, "Fight Club", "Erreur", "Erreur TMDB API: 500"),
        ],
        message=message,
    )


class TestBulkImportCommand:
    def test_runs_discovery_import(self, mock_container):
        sync_runner = mock_container.sync_runner.return_value
        sync_runner.run_discovery_import.return_value = _report("Import en lot terminé: 1 succès, 1 erreurs")

        result = runner.invoke(app, ["bulk-import", "movies", "--limit", "5"])

        assert result.exit_code == 0
        assert "Import en lot terminé: 1 succès, 1 erreurs" in result.output
        sync_runner.run_discovery_import.assert_awaited_once_with(TitleKind.MOVIE, 5)

    def test_invalid_kind(self, mock_container):
        result = runner.invoke(app, ["bulk-import", "films"])

        assert result.exit_code != 0
        mock_container.sync_runner.return_value.run_discovery_import.assert_not_called()

    def test_missing_config(self, mock_container):
        mock_container.sync_runner.return_value.run_discovery_import.side_effect = CatalogConfigurationError()

        result = runner.invoke(app, ["bulk-import", "series"])

        assert result.exit_code == 1
        assert "Configuration TMDB non trouvée" in result.output


class TestSyncCommand:
    def test_runs_resync(self, mock_container):
        sync_runner = mock_container.sync_runner.return_value
        sync_runner.run_resync.return_value = _report("Synchronisation terminée: 1 succès, 1 erreurs")

        result = runner.invoke(app, ["sync", "series"])

        assert result.exit_code == 0
        assert "Synchronisation terminée" in result.output
        sync_runner.run_resync.assert_awaited_once_with(TitleKind.TV)


class TestImportCommand:
    def test_success(self, mock_container):
        mock_container.sync_runner.return_value.import_one.return_value = ItemResult(
            ItemStatus.SUCCESS, 27205, "Inception", "Film importé avec succès"
        )

        result = runner.invoke(app, ["import", "movie", "27205"])

        assert result.exit_code == 0
        assert "Film importé avec succès" in result.output

    def test_already_imported_exits_with_error(self, mock_container):
        mock_container.sync_runner.return_value.import_one.return_value = ItemResult(
            ItemStatus.SKIPPED, 27205, "Inception", "Film déjà importé"
        )

        result = runner.invoke(app, ["import", "movie", "27205"])

        assert result.exit_code == 1


class TestInitConfigCommand:
    def test_init(self, mock_container):
        mock_container.config_store.return_value.init_from_settings.return_value = CatalogConfig(
            base_url="https://api.themoviedb.org/3",
            api_key="key",
            image_base_url="https://image.tmdb.org/t/p",
        )

        result = runner.invoke(app, ["init-config"])

        assert result.exit_code == 0
        assert "Configuration TMDB initialisée" in result.output
        assert "fr-FR" in result.output

    def test_missing_key(self, mock_container):
        mock_container.config_store.return_value.init_from_settings.side_effect = CatalogConfigurationError(
            "Clé API absente"
        )

        result = runner.invoke(app, ["init-config"])

        assert result.exit_code == 1
        assert "Clé API absente" in result.output


class TestSearchCommand:
    def test_no_results(self, mock_container):
        mock_container.search_service.return_value.search.return_value = {
            "results": [],
            "pagination": {"page": 1, "totalPages": 0, "totalResults": 0},
        }

        result = runner.invoke(app, ["search", "zzz", "--type", "tv"])

        assert result.exit_code == 0
        assert "Aucun résultat" in result.output
        mock_container.search_service.return_value.search.assert_awaited_once_with(TitleKind.TV, "zzz", 1)

    def test_results_table(self, mock_container):
        mock_container.search_service.return_value.search.return_value = {
            "results": [{"id": 27205, "title": "Inception", "releaseDate": "2010-07-15", "isImported": True}],
            "pagination": {"page": 1, "totalPages": 1, "totalResults": 1},
        }

        result = runner.invoke(app, ["search", "Inception"])

        assert result.exit_code == 0
        assert "27205" in result.output
        assert "Page 1/1" in result.output


class TestHistoryCommand:
    def test_empty(self, mock_container):
        mock_container.audit_log.return_value.history.return_value = []

        result = runner.invoke(app, ["history"])

        assert result.exit_code == 0
        assert "Aucune synchronisation" in result.output

    def test_filters(self, mock_container):
        audit = mock_container.audit_log.return_value
        audit.history.return_value = [
            SyncRecord(TitleKind.MOVIE, 27205, SyncStatus.ERROR, datetime(2026, 1, 2, 3, 4, 5), "404")
        ]

        result = runner.invoke(app, ["history", "--type", "movie", "--status", "error", "--limit", "3"])

        assert result.exit_code == 0
        assert "27205" in result.output
        audit.history.assert_called_once_with(kind=TitleKind.MOVIE, status=SyncStatus.ERROR, limit=3)
