"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Inclut les repositories SQLModel et les services du moteur de synchronisation.
"""

import functools

from dependency_injector import containers, providers

from .adapters.api.factory import build_catalog_client
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelCatalogConfigRepository,
    SQLModelGenreRepository,
    SQLModelMovieRepository,
    SQLModelSeasonRepository,
    SQLModelSeriesRepository,
    SQLModelSyncRecordRepository,
)
from .services.catalog import (
    BatchLocks,
    CatalogConfigStore,
    CatalogSearchService,
    GenreReconciler,
    ItemReconciler,
    SeasonEpisodeSynchronizer,
    SyncAuditLog,
    SyncRunner,
    TrailerResolver,
)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Fournit l'injection de dependances pour les interfaces CLI et Web.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        runner = container.sync_runner()
        report = await runner.run_resync(TitleKind.MOVIE)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance
    catalog_config_repository = providers.Factory(
        SQLModelCatalogConfigRepository,
        session=session,
    )
    movie_repository = providers.Factory(
        SQLModelMovieRepository,
        session=session,
    )
    series_repository = providers.Factory(
        SQLModelSeriesRepository,
        session=session,
    )
    genre_repository = providers.Factory(
        SQLModelGenreRepository,
        session=session,
    )
    season_repository = providers.Factory(
        SQLModelSeasonRepository,
        session=session,
    )
    sync_record_repository = providers.Factory(
        SQLModelSyncRecordRepository,
        session=session,
    )

    # Client fournisseur - une fabrique appelee avec la configuration active de chaque lot
    catalog_client_factory = providers.Callable(
        functools.partial,
        build_catalog_client,
        settings=config,
    )

    # Verrous des lots - Singleton partage par tout le processus
    batch_locks = providers.Singleton(BatchLocks)

    # Composants stateless
    trailer_resolver = providers.Singleton(TrailerResolver)

    config_store = providers.Factory(
        CatalogConfigStore,
        config_repo=catalog_config_repository,
    )
    audit_log = providers.Factory(
        SyncAuditLog,
        record_repo=sync_record_repository,
    )
    genre_reconciler = providers.Factory(
        GenreReconciler,
        genre_repo=genre_repository,
        movie_repo=movie_repository,
        series_repo=series_repository,
    )
    season_synchronizer = providers.Factory(
        SeasonEpisodeSynchronizer,
        season_repo=season_repository,
    )
    item_reconciler = providers.Factory(
        ItemReconciler,
        movie_repo=movie_repository,
        series_repo=series_repository,
        genre_reconciler=genre_reconciler,
        trailer_resolver=trailer_resolver,
        season_synchronizer=season_synchronizer,
        audit_log=audit_log,
    )

    # Orchestration des lots - Factory car depend de repositories
    sync_runner = providers.Factory(
        SyncRunner,
        config_store=config_store,
        item_reconciler=item_reconciler,
        movie_repo=movie_repository,
        series_repo=series_repository,
        client_factory=catalog_client_factory,
        locks=batch_locks,
        default_limit=config.provided.bulk_import_limit,
    )

    search_service = providers.Factory(
        CatalogSearchService,
        config_store=config_store,
        movie_repo=movie_repository,
        series_repo=series_repository,
        client_factory=catalog_client_factory,
    )
