"""
Reconstruction complete de l'arborescence saisons / episodes d'une serie.

Le fournisseur n'expose pas de date de modification par episode : plutot
qu'un diff, l'arborescence est entierement remplacee a chaque resync.
"""

from loguru import logger

from src.core.entities.media import Season
from src.core.errors import CatalogProviderError
from src.core.ports.repositories import ISeasonRepository
from src.services.catalog.dataclasses import SeasonRebuildResult, SyncContext
from src.services.catalog.payloads import season_from_payload


class SeasonEpisodeSynchronizer:
    """
    Remplace les saisons et episodes d'une serie par ceux du fournisseur.

    Les saisons 1..N sont d'abord toutes recuperees ; la suppression de
    l'ancienne arborescence et l'ecriture de la nouvelle se font ensuite
    dans une seule transaction. Une saison dont la recuperation echoue est
    absente de la nouvelle arborescence, sans faire echouer la serie.
    """

    def __init__(self, season_repo: ISeasonRepository) -> None:
        self._season_repo = season_repo

    async def fetch_seasons(
        self,
        ctx: SyncContext,
        external_series_id: int,
        season_count: int,
        result: SeasonRebuildResult,
    ) -> list[Season]:
        """
        Recupere le detail des saisons 1..season_count (la saison 0 est ignoree).

        Les numeros de saison en echec sont ajoutes a result.failed_seasons.
        """
        seasons: list[Season] = []
        for number in range(1, season_count + 1):
            try:
                data = await ctx.client.season(external_series_id, number)
            except CatalogProviderError as e:
                logger.warning(
                    "Saison ignoree (erreur fournisseur)",
                    external_series_id=external_series_id,
                    season=number,
                    error=str(e),
                )
                result.failed_seasons.append(number)
                continue

            season = season_from_payload(data, ctx.config, fallback_number=number)
            logger.debug(
                "Saison recuperee",
                external_series_id=external_series_id,
                season=season.number,
                episodes=len(season.episodes),
            )
            seasons.append(season)
        return seasons

    async def rebuild(
        self,
        ctx: SyncContext,
        series_id: int,
        external_series_id: int,
        season_count: int,
    ) -> SeasonRebuildResult:
        """
        Reconstruit l'arborescence de la serie.

        Args:
            ctx: Contexte du lot (configuration et client)
            series_id: ID interne de la serie
            external_series_id: ID fournisseur de la serie
            season_count: Nombre de saisons annonce par le detail de la serie

        Returns:
            Bilan (saisons et episodes crees, saisons en echec)

        Raises:
            SQLAlchemyError: Si l'ecriture echoue (l'ancienne arborescence est conservee)
        """
        result = SeasonRebuildResult()
        seasons = await self.fetch_seasons(ctx, external_series_id, max(season_count, 0), result)

        created = self._season_repo.replace_tree(series_id, seasons)
        result.seasons_created = len(created)
        result.episodes_created = sum(len(season.episodes) for season in created)

        logger.info(
            "Saisons synchronisees",
            series_id=series_id,
            seasons=result.seasons_created,
            episodes=result.episodes_created,
            failed=result.failed_seasons,
        )
        return result
