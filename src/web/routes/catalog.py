"""
Routes d'administration du moteur de synchronisation du catalogue.

- POST /admin/catalog/bulk-import : import de decouverte des titres populaires
- POST /admin/catalog/sync : resynchronisation des titres deja importes
- POST /admin/catalog/import : import d'un titre precis
- POST /admin/catalog/init : activation de la configuration depuis les settings
- GET /admin/catalog/search : recherche fournisseur
- GET /admin/catalog/history : journal d'audit

L'authentification est assuree en amont. Les erreurs de configuration
renvoient 500 avant tout traitement ; les erreurs par element sont dans
le tableau results.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from ...container import Container
from ...core.entities.catalog import SyncStatus, TitleKind
from ...core.errors import CatalogConfigurationError, CatalogProviderError
from ...utils.constants import DEFAULT_HISTORY_LIMIT
from ..deps import (
    TITLE_KIND_INVALID,
    InvalidKind,
    get_container,
    parse_batch_kind,
    parse_title_kind,
)

router = APIRouter(prefix="/admin/catalog", tags=["catalog"])

LIMIT_INVALID = "limit doit être un entier positif"
BULK_IMPORT_FAILED = "Erreur lors de l'import en lot TMDB"
SYNC_FAILED = "Erreur lors de la synchronisation TMDB"
IMPORT_FAILED = "Erreur lors de l'import TMDB"


class BatchRequest(BaseModel):
    """
    Corps des routes bulk-import et sync (``type`` accepte comme alias de ``kind``).

    Les champs ne sont pas types : une valeur invalide doit produire une
    reponse 400 ``{error}`` et non la 422 de validation FastAPI.
    """

    model_config = ConfigDict(extra="ignore")

    kind: Any = None
    type: Any = None
    limit: Any = None

    @property
    def batch_kind(self) -> Any:
        return self.kind or self.type


class ImportRequest(BaseModel):
    """Corps de la route d'import unitaire."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: Any = None
    kind: Any = None
    tmdb_id: Any = Field(default=None, alias="tmdbId")


def _error(message: str, status_code: int, **extra) -> JSONResponse:
    return JSONResponse({"error": message, **extra}, status_code=status_code)


def _positive_int(value: Any) -> Optional[int]:
    """Entier strictement positif (int ou chaine de chiffres), None sinon."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, int) and value >= 1:
        return value
    return None


@router.post("/bulk-import")
async def bulk_import(
    body: Optional[BatchRequest] = None,
    container: Container = Depends(get_container),
):
    """Importe les titres populaires du fournisseur absents du catalogue."""
    body = body or BatchRequest()
    try:
        kind = parse_batch_kind(body.batch_kind)
    except InvalidKind as e:
        return _error(str(e), 400)
    limit = None
    if body.limit is not None:
        limit = _positive_int(body.limit)
        if limit is None:
            return _error(LIMIT_INVALID, 400)

    runner = container.sync_runner()
    try:
        report = await runner.run_discovery_import(kind, limit)
    except CatalogConfigurationError as e:
        return _error(str(e), 500)
    except CatalogProviderError as e:
        logger.error("Import en lot interrompu", kind=kind.value, error=str(e))
        return _error(BULK_IMPORT_FAILED, 500, detail=str(e))
    except Exception:
        logger.exception("Import en lot en echec", kind=kind.value)
        return _error(BULK_IMPORT_FAILED, 500)

    return report.to_dict()


@router.post("/sync")
async def sync(
    body: Optional[BatchRequest] = None,
    container: Container = Depends(get_container),
):
    """Resynchronise tous les titres du type ayant un ID fournisseur."""
    body = body or BatchRequest()
    try:
        kind = parse_batch_kind(body.batch_kind)
    except InvalidKind as e:
        return _error(str(e), 400)

    runner = container.sync_runner()
    try:
        report = await runner.run_resync(kind)
    except CatalogConfigurationError as e:
        return _error(str(e), 500)
    except Exception:
        logger.exception("Synchronisation en echec", kind=kind.value)
        return _error(SYNC_FAILED, 500)

    return {"success": True, **report.to_dict()}


@router.post("/import")
async def import_title(
    body: Optional[ImportRequest] = None,
    container: Container = Depends(get_container),
):
    """Importe un titre precis avec genres, bande-annonce et saisons."""
    body = body or ImportRequest()
    raw_kind = body.type or body.kind
    tmdb_id = _positive_int(body.tmdb_id)
    if not raw_kind or tmdb_id is None:
        return _error("Type et ID TMDB requis", 400)
    try:
        kind = parse_title_kind(raw_kind)
    except InvalidKind as e:
        return _error(str(e), 400)

    runner = container.sync_runner()
    try:
        result = await runner.import_one(kind, tmdb_id)
    except CatalogConfigurationError as e:
        return _error(str(e), 500)
    except Exception:
        logger.exception("Import unitaire en echec", kind=kind.value, external_id=tmdb_id)
        return _error(IMPORT_FAILED, 500)

    return JSONResponse(result.to_dict(), status_code=200 if result.success else 400)


@router.post("/init", status_code=201)
async def init_config(container: Container = Depends(get_container)):
    """Active la configuration fournisseur definie par les settings."""
    store = container.config_store()
    try:
        config = store.init_from_settings(container.config())
    except CatalogConfigurationError as e:
        return _error(str(e), 400)

    return {
        "config": {
            "id": config.id,
            "baseUrl": config.base_url,
            "imageBaseUrl": config.image_base_url,
            "language": config.language,
            "isActive": config.is_active,
            "apiKey": f"{config.api_key[:4]}…" if config.api_key else "",
        },
        "message": "Configuration TMDB initialisée avec succès depuis les variables d'environnement",
    }


@router.get("/search")
async def search(
    query: Optional[str] = None,
    type: Optional[str] = None,
    page: int = 1,
    container: Container = Depends(get_container),
):
    """Recherche des titres chez le fournisseur, marques isImported."""
    if not query:
        return _error("Paramètre de recherche requis", 400)
    try:
        kind = parse_title_kind(type, default=TitleKind.MOVIE)
    except InvalidKind as e:
        return _error(str(e), 400)

    service = container.search_service()
    try:
        return await service.search(kind, query, max(page, 1))
    except CatalogConfigurationError as e:
        return _error(str(e), 500)
    except CatalogProviderError as e:
        logger.error("Recherche TMDB en echec", query=query, error=str(e))
        return _error("Erreur lors de la recherche TMDB", 500, detail=str(e))


@router.get("/history")
async def history(
    type: Optional[str] = None,
    status: Optional[str] = None,
    limit: int = DEFAULT_HISTORY_LIMIT,
    container: Container = Depends(get_container),
):
    """Dernieres entrees du journal d'audit, de la plus recente a la plus ancienne."""
    try:
        kind = TitleKind.from_batch_kind(type) if type else None
    except ValueError:
        return _error(TITLE_KIND_INVALID, 400)
    try:
        sync_status = SyncStatus(status) if status else None
    except ValueError:
        return _error('Statut doit être "success" ou "error"', 400)

    records = container.audit_log().history(
        kind=kind, status=sync_status, limit=min(max(limit, 1), 500)
    )
    return {
        "records": [
            {
                "id": record.id,
                "type": record.type.value,
                "tmdbId": record.external_id,
                "lastSync": record.last_sync.isoformat(),
                "status": record.status.value,
                "errorMessage": record.error_message,
            }
            for record in records
        ]
    }
