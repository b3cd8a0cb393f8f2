"""
Orchestration des lots de synchronisation du catalogue.

Un lot traite ses elements sequentiellement : chaque element est recupere
puis applique avant de passer au suivant. Les lots d'un meme type de titre
sont serialises par un verrou en memoire.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional

from loguru import logger

from src.core.entities.catalog import CatalogConfig, TitleKind
from src.core.ports.api_clients import ICatalogClient
from src.core.ports.repositories import IMovieRepository, ISeriesRepository
from src.services.catalog.config_store import CatalogConfigStore
from src.services.catalog.dataclasses import BatchReport, ItemResult, ItemStatus, SyncContext
from src.services.catalog.item_reconciler import ItemReconciler
from src.utils.constants import DEFAULT_BULK_LIMIT

ClientFactory = Callable[[CatalogConfig], ICatalogClient]


class BatchLocks:
    """Un asyncio.Lock par type de titre, partage par tous les lots du processus."""

    def __init__(self) -> None:
        self._locks: dict[TitleKind, asyncio.Lock] = {}

    def for_kind(self, kind: TitleKind) -> asyncio.Lock:
        lock = self._locks.get(kind)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[kind] = lock
        return lock

    def is_running(self, kind: TitleKind) -> bool:
        """Vrai si un lot de ce type est en cours."""
        return self.for_kind(kind).locked()


class SyncRunner:
    """
    Execute les lots d'import de decouverte et de resynchronisation.

    La configuration active est chargee une fois par lot ; son absence
    interrompt le lot avant tout traitement (CatalogConfigurationError).
    Un client fournisseur neuf est cree par lot via client_factory et
    ferme a la fin du lot.
    """

    def __init__(
        self,
        config_store: CatalogConfigStore,
        item_reconciler: ItemReconciler,
        movie_repo: IMovieRepository,
        series_repo: ISeriesRepository,
        client_factory: ClientFactory,
        locks: Optional[BatchLocks] = None,
        default_limit: int = DEFAULT_BULK_LIMIT,
    ) -> None:
        self._config_store = config_store
        self._item_reconciler = item_reconciler
        self._movie_repo = movie_repo
        self._series_repo = series_repo
        self._client_factory = client_factory
        self._locks = locks or BatchLocks()
        self._default_limit = default_limit

    @asynccontextmanager
    async def _batch(self, kind: TitleKind) -> AsyncIterator[SyncContext]:
        """Charge la configuration, prend le verrou du type et ouvre le client."""
        config = self._config_store.load_active()
        lock = self._locks.for_kind(kind)
        if lock.locked():
            logger.info("Lot en attente (un lot du meme type est en cours)", kind=kind.value)

        async with lock:
            client = self._client_factory(config)
            try:
                yield SyncContext(config=config, client=client)
            finally:
                await client.close()

    @staticmethod
    def _guard(kind: TitleKind, external_id: Optional[int], title: Optional[str], error: Exception) -> ItemResult:
        logger.exception("Erreur inattendue sur un element", kind=kind.value, external_id=external_id)
        return ItemResult(
            status=ItemStatus.ERROR,
            external_id=external_id,
            title=title,
            message="Erreur inattendue",
            error=str(error) or type(error).__name__,
        )

    @staticmethod
    def _log_report(operation: str, kind: TitleKind, report: BatchReport) -> None:
        summary = report.summary
        logger.info(
            f"{operation} terminé",
            kind=kind.value,
            total=summary.total,
            success=summary.success,
            errors=summary.errors,
            skipped=summary.skipped,
        )

    async def run_discovery_import(self, kind: TitleKind, limit: Optional[int] = None) -> BatchReport:
        """
        Importe les titres populaires absents du catalogue local.

        Args:
            kind: Type de titre
            limit: Nombre maximal de titres (premiere page du fournisseur)

        Returns:
            BatchReport, un resultat par titre de la page retenu

        Raises:
            CatalogConfigurationError: Aucune configuration active
            CatalogProviderError: La page populaire n'a pas pu etre recuperee
        """
        limit = limit if limit is not None else self._default_limit
        report = BatchReport()

        async with self._batch(kind) as ctx:
            summaries = (await ctx.client.popular(kind, page=1))[: max(limit, 0)]
            logger.info("Import en lot", kind=kind.value, items=len(summaries), limit=limit)

            for item in summaries:
                try:
                    result = await self._item_reconciler.import_item(ctx, kind, item)
                except Exception as e:
                    raw_id = item.get("id")
                    result = self._guard(
                        kind,
                        raw_id if isinstance(raw_id, int) else None,
                        item.get("title") or item.get("name"),
                        e,
                    )
                report.results.append(result)

        summary = report.summary
        report.message = f"Import en lot terminé: {summary.success} succès, {summary.errors} erreurs"
        self._log_report("Import en lot", kind, report)
        return report

    async def run_resync(self, kind: TitleKind) -> BatchReport:
        """
        Resynchronise tous les titres locaux du type ayant un ID fournisseur.

        Raises:
            CatalogConfigurationError: Aucune configuration active
        """
        report = BatchReport()

        async with self._batch(kind) as ctx:
            if kind is TitleKind.MOVIE:
                titles = self._movie_repo.list_with_external_id()
            else:
                titles = self._series_repo.list_with_external_id()
            logger.info("Synchronisation", kind=kind.value, items=len(titles))

            for title in titles:
                try:
                    result = await self._item_reconciler.resync_item(ctx, kind, title)
                except Exception as e:
                    result = self._guard(kind, title.external_id, title.title, e)
                report.results.append(result)

        summary = report.summary
        report.message = f"Synchronisation terminée: {summary.success} succès, {summary.errors} erreurs"
        self._log_report("Synchronisation", kind, report)
        return report

    async def import_one(self, kind: TitleKind, external_id: int) -> ItemResult:
        """
        Importe un titre precis avec son detail complet.

        Raises:
            CatalogConfigurationError: Aucune configuration active
        """
        async with self._batch(kind) as ctx:
            try:
                return await self._item_reconciler.import_single(ctx, kind, external_id)
            except Exception as e:
                return self._guard(kind, external_id, None, e)
