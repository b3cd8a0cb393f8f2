"""
Moteur de synchronisation du catalogue.

Composants, des feuilles vers l'orchestration :
- CatalogConfigStore : configuration fournisseur active
- GenreReconciler : genres externes -> genres locaux et liens
- TrailerResolver : choix de la bande-annonce
- SeasonEpisodeSynchronizer : reconstruction des saisons / episodes
- ItemReconciler : traitement unitaire d'un film ou d'une serie
- SyncRunner : lots d'import de decouverte et de resynchronisation
- SyncAuditLog : journal d'audit des resultats
"""

from src.services.catalog.audit_log import SyncAuditLog
from src.services.catalog.config_store import CatalogConfigStore
from src.services.catalog.dataclasses import (
    BatchReport,
    BatchSummary,
    ItemResult,
    ItemStatus,
    SeasonRebuildResult,
    SyncContext,
)
from src.services.catalog.genre_reconciler import GenreReconciler
from src.services.catalog.item_reconciler import ItemReconciler
from src.services.catalog.search import CatalogSearchService
from src.services.catalog.season_synchronizer import SeasonEpisodeSynchronizer
from src.services.catalog.sync_runner import BatchLocks, ClientFactory, SyncRunner
from src.services.catalog.trailer_resolver import TrailerResolver

__all__ = [
    "BatchLocks",
    "BatchReport",
    "BatchSummary",
    "CatalogConfigStore",
    "CatalogSearchService",
    "ClientFactory",
    "GenreReconciler",
    "ItemReconciler",
    "ItemResult",
    "ItemStatus",
    "SeasonEpisodeSynchronizer",
    "SeasonRebuildResult",
    "SyncAuditLog",
    "SyncContext",
    "SyncRunner",
    "TrailerResolver",
]
