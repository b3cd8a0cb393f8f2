"""
Tests du Container DI : assemblage des services du moteur.
"""

from dependency_injector import providers

from src.adapters.api import RetryingCatalogClient
from src.container import Container
from src.services.catalog import CatalogSearchService, SyncRunner


def _container(session, test_settings) -> Container:
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.session.override(providers.Object(session))
    return container


class TestContainer:
    def test_sync_runner_is_wired(self, session, test_settings):
        container = _container(session, test_settings)

        runner = container.sync_runner()

        assert isinstance(runner, SyncRunner)
        assert isinstance(container.search_service(), CatalogSearchService)

    def test_batch_locks_are_shared(self, session, test_settings):
        container = _container(session, test_settings)

        assert container.batch_locks() is container.batch_locks()

    def test_client_factory_builds_retrying_client(self, session, test_settings, catalog_config):
        container = _container(session, test_settings)

        client = container.catalog_client_factory()(catalog_config)

        assert isinstance(client, RetryingCatalogClient)
