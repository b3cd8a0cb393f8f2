"""
Traitement unitaire d'un film ou d'une serie.

Trois chemins d'ecriture :
- import_item : decouverte (resume popular), creation si absent
- resync_item : detail complet, ecrasement des champs, remplacement des
  genres et, pour une serie, de l'arborescence saisons / episodes
- import_single : import d'un titre precis avec son detail complet

Toute exception levee pendant le traitement d'un element est convertie en
ItemResult(status=ERROR) : aucune exception ne remonte jusqu'a la boucle du lot.
"""

from typing import Any, Optional, Union

from loguru import logger

from src.core.entities.catalog import TitleKind
from src.core.entities.media import Movie, Series
from src.core.errors import CatalogProviderError, ProviderMalformedResponse
from src.core.ports.repositories import IMovieRepository, ISeriesRepository
from src.services.catalog.audit_log import SyncAuditLog
from src.services.catalog.dataclasses import ItemResult, ItemStatus, SyncContext
from src.services.catalog.genre_reconciler import GenreReconciler
from src.services.catalog.payloads import movie_from_payload, series_from_payload
from src.services.catalog.season_synchronizer import SeasonEpisodeSynchronizer
from src.services.catalog.trailer_resolver import TrailerResolver

Title = Union[Movie, Series]

# Messages affiches dans les rapports, par type de titre
_MESSAGES = {
    TitleKind.MOVIE: {
        "imported": "Film importé",
        "imported_full": "Film importé avec succès",
        "already": "Film déjà importé",
        "synced": 'Film "{title}" synchronisé avec succès',
        "sync_failed": 'Erreur lors de la synchronisation du film "{title}"',
        "no_external_id": 'Film "{title}" sans ID TMDB',
    },
    TitleKind.TV: {
        "imported": "Série importée",
        "imported_full": "Série importée avec succès",
        "already": "Série déjà importée",
        "synced": 'Série "{title}" synchronisée avec succès',
        "sync_failed": 'Erreur lors de la synchronisation de la série "{title}"',
        "no_external_id": 'Série "{title}" sans ID TMDB',
    },
}
_IMPORT_FAILED = "Erreur lors de l'importation"


def _payload_title(data: dict[str, Any]) -> Optional[str]:
    return data.get("title") or data.get("name")


class ItemReconciler:
    """
    Upsert d'un titre a partir des donnees du fournisseur.

    Chaque resultat (hors element ignore) est trace dans le journal d'audit.
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        series_repo: ISeriesRepository,
        genre_reconciler: GenreReconciler,
        trailer_resolver: TrailerResolver,
        season_synchronizer: SeasonEpisodeSynchronizer,
        audit_log: SyncAuditLog,
    ) -> None:
        self._movie_repo = movie_repo
        self._series_repo = series_repo
        self._genre_reconciler = genre_reconciler
        self._trailer_resolver = trailer_resolver
        self._season_synchronizer = season_synchronizer
        self._audit_log = audit_log

    def _repo(self, kind: TitleKind) -> Union[IMovieRepository, ISeriesRepository]:
        return self._movie_repo if kind is TitleKind.MOVIE else self._series_repo

    def _from_payload(self, kind: TitleKind, data: dict[str, Any], ctx: SyncContext, detailed: bool) -> Title:
        if kind is TitleKind.MOVIE:
            return movie_from_payload(data, ctx.config, detailed=detailed)
        return series_from_payload(data, ctx.config, detailed=detailed)

    def _failure(
        self,
        kind: TitleKind,
        external_id: Optional[int],
        title: Optional[str],
        message: str,
        error: Exception,
    ) -> ItemResult:
        """Journalise l'echec, trace l'audit et construit le resultat."""
        logger.error(
            "Echec du traitement d'un element",
            kind=kind.value,
            title=title,
            detail=message,
            external_id=external_id,
            error_type=type(error).__name__,
            error=str(error),
        )
        if external_id is not None:
            self._audit_log.record_error(kind, external_id, str(error) or type(error).__name__)
        return ItemResult(
            status=ItemStatus.ERROR,
            external_id=external_id,
            title=title,
            message=message,
            error=str(error) or type(error).__name__,
        )

    async def _resolve_trailer(self, ctx: SyncContext, kind: TitleKind, external_id: int) -> Optional[str]:
        """Bande-annonce du titre ; un echec de recuperation des videos n'est qu'un avertissement."""
        try:
            candidates = await ctx.client.videos(kind, external_id)
        except CatalogProviderError as e:
            logger.warning(
                "Videos indisponibles, bande-annonce non renseignee",
                kind=kind.value,
                external_id=external_id,
                error=str(e),
            )
            return None

        trailer = self._trailer_resolver.resolve(candidates, ctx.config.preferred_trailer_language)
        if trailer is None:
            logger.debug("Aucune bande-annonce retenue", kind=kind.value, external_id=external_id)
        return trailer

    def _replace_genres(self, kind: TitleKind, title_id: int, detail: dict[str, Any]) -> None:
        """
        Remplace l'ensemble des liens de genre si le detail en fournit.

        Les genres manquants sont crees d'abord ; suppression et nouveaux
        liens sont ensuite ecrits dans une seule transaction.
        """
        genres = detail.get("genres")
        if not isinstance(genres, list) or not genres:
            return
        resolved = self._genre_reconciler.resolve([g for g in genres if isinstance(g, dict)])
        self._repo(kind).replace_genres(title_id, [genre.id for genre in resolved])

    async def _apply_seasons(self, ctx: SyncContext, series: Series) -> None:
        if series.id is None or series.external_id is None:
            return
        await self._season_synchronizer.rebuild(
            ctx,
            series_id=series.id,
            external_series_id=series.external_id,
            season_count=series.number_of_seasons or 0,
        )

    async def import_item(self, ctx: SyncContext, kind: TitleKind, summary: dict[str, Any]) -> ItemResult:
        """
        Import de decouverte a partir d'un resume du fournisseur.

        Args:
            ctx: Contexte du lot
            kind: Type de titre
            summary: Resume issu de l'endpoint popular

        Returns:
            SKIPPED si l'ID fournisseur existe deja localement, SUCCESS si le
            titre a ete cree (sans genres, saisons ni bande-annonce), ERROR sinon
        """
        messages = _MESSAGES[kind]
        raw_id = summary.get("id")
        external_id = raw_id if isinstance(raw_id, int) else None
        title = _payload_title(summary)

        try:
            if external_id is None:
                raise ProviderMalformedResponse(f"{kind.value}/popular", "champ 'id' absent")

            repo = self._repo(kind)
            if repo.get_by_external_id(external_id) is not None:
                logger.debug("Titre deja importe", kind=kind.value, external_id=external_id)
                return ItemResult(
                    status=ItemStatus.SKIPPED,
                    external_id=external_id,
                    title=title,
                    message=messages["already"],
                )

            saved = repo.save(self._from_payload(kind, summary, ctx, detailed=False))
        except Exception as e:
            return self._failure(kind, external_id, title, _IMPORT_FAILED, e)

        logger.info("Titre importe", kind=kind.value, external_id=external_id, title=saved.title)
        self._audit_log.record_success(kind, external_id)
        return ItemResult(
            status=ItemStatus.SUCCESS,
            external_id=external_id,
            title=saved.title,
            message=messages["imported"],
            local_id=saved.id,
        )

    async def resync_item(self, ctx: SyncContext, kind: TitleKind, title: Title) -> ItemResult:
        """
        Resynchronisation complete d'un titre deja importe.

        Tous les champs issus du fournisseur sont ecrases ; is_active et
        is_featured restent ceux du titre local.
        """
        messages = _MESSAGES[kind]
        if title.external_id is None:
            logger.warning("Titre sans ID fournisseur", kind=kind.value, title_id=title.id)
            return ItemResult(
                status=ItemStatus.ERROR,
                title=title.title,
                message=messages["no_external_id"].format(title=title.title),
                error="ID TMDB absent",
                local_id=title.id,
            )

        external_id = title.external_id
        try:
            detail = await ctx.client.details(kind, external_id)
            trailer = await self._resolve_trailer(ctx, kind, external_id)

            updated = self._from_payload(kind, detail, ctx, detailed=True)
            updated.id = title.id
            updated.external_id = external_id
            updated.trailer = trailer
            updated.is_active = title.is_active
            updated.is_featured = title.is_featured
            saved = self._repo(kind).save(updated)

            self._replace_genres(kind, saved.id, detail)
            if isinstance(saved, Series):
                await self._apply_seasons(ctx, saved)
        except Exception as e:
            return self._failure(
                kind, external_id, title.title, messages["sync_failed"].format(title=title.title), e
            )

        logger.info("Titre synchronise", kind=kind.value, external_id=external_id, title=saved.title)
        self._audit_log.record_success(kind, external_id)
        return ItemResult(
            status=ItemStatus.SUCCESS,
            external_id=external_id,
            title=saved.title,
            message=messages["synced"].format(title=saved.title),
            local_id=saved.id,
        )

    async def import_single(self, ctx: SyncContext, kind: TitleKind, external_id: int) -> ItemResult:
        """
        Import d'un titre precis avec son detail complet.

        Contrairement a l'import de decouverte, le titre est cree avec ses
        genres, sa bande-annonce et, pour une serie, ses saisons.
        """
        messages = _MESSAGES[kind]
        repo = self._repo(kind)

        existing = repo.get_by_external_id(external_id)
        if existing is not None:
            return ItemResult(
                status=ItemStatus.SKIPPED,
                external_id=external_id,
                title=existing.title,
                message=messages["already"],
                local_id=existing.id,
            )

        title: Optional[str] = None
        try:
            detail = await ctx.client.details(kind, external_id)
            title = _payload_title(detail)
            entity = self._from_payload(kind, detail, ctx, detailed=True)
            entity.external_id = external_id
            entity.trailer = await self._resolve_trailer(ctx, kind, external_id)
            saved = repo.save(entity)

            self._genre_reconciler.link(
                kind, saved.id, [g for g in detail.get("genres") or [] if isinstance(g, dict)]
            )
            if isinstance(saved, Series):
                await self._apply_seasons(ctx, saved)
        except Exception as e:
            return self._failure(kind, external_id, title, _IMPORT_FAILED, e)

        logger.info("Titre importe (detail complet)", kind=kind.value, external_id=external_id)
        self._audit_log.record_success(kind, external_id)
        return ItemResult(
            status=ItemStatus.SUCCESS,
            external_id=external_id,
            title=saved.title,
            message=messages["imported_full"],
            local_id=saved.id,
        )
