"""
Dataclasses et enums du moteur de synchronisation du catalogue.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from src.core.entities.catalog import CatalogConfig
from src.core.ports.api_clients import ICatalogClient


class ItemStatus(str, Enum):
    """États terminaux d'un élément de lot."""

    SUCCESS = "success"
    ERROR = "error"
    SKIPPED = "skipped"


@dataclass
class ItemResult:
    """
    Résultat du traitement d'un élément (film ou série).

    Attributes:
        status: État terminal de l'élément
        external_id: ID fournisseur, None pour un titre local sans ID TMDB
        title: Titre affiché dans le rapport
        message: Message lisible (succès, déjà importé, échec)
        error: Message d'erreur technique si status == ERROR
        local_id: ID interne du titre créé ou mis à jour
    """

    status: ItemStatus
    external_id: Optional[int] = None
    title: Optional[str] = None
    message: str = ""
    error: Optional[str] = None
    local_id: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.status == ItemStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Représentation JSON (clés camelCase de l'API d'administration)."""
        data: dict[str, Any] = {
            "success": self.success,
            "status": self.status.value,
            "message": self.message,
            "tmdbId": self.external_id,
            "title": self.title,
        }
        if self.error is not None:
            data["error"] = self.error
        if self.local_id is not None:
            data["id"] = self.local_id
        return data


@dataclass
class BatchSummary:
    """Compteurs agrégés d'un lot."""

    total: int = 0
    success: int = 0
    errors: int = 0
    skipped: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "success": self.success,
            "errors": self.errors,
            "skipped": self.skipped,
        }


@dataclass
class BatchReport:
    """
    Rapport final d'un lot : résultats par élément et compteurs.

    Les compteurs sont toujours recalculés à partir de ``results`` ; un
    élément ignoré (déjà importé) n'est compté ni en succès ni en erreur.
    """

    results: list[ItemResult] = field(default_factory=list)
    message: str = ""

    @property
    def summary(self) -> BatchSummary:
        return BatchSummary(
            total=len(self.results),
            success=sum(1 for r in self.results if r.status == ItemStatus.SUCCESS),
            errors=sum(1 for r in self.results if r.status == ItemStatus.ERROR),
            skipped=sum(1 for r in self.results if r.status == ItemStatus.SKIPPED),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "results": [result.to_dict() for result in self.results],
            "summary": self.summary.to_dict(),
        }


@dataclass
class SeasonRebuildResult:
    """Bilan de la reconstruction de l'arborescence d'une série."""

    seasons_created: int = 0
    episodes_created: int = 0
    failed_seasons: list[int] = field(default_factory=list)

    @property
    def is_degraded(self) -> bool:
        """Vrai si au moins une saison n'a pas pu être récupérée."""
        return bool(self.failed_seasons)


@dataclass
class SyncContext:
    """
    Contexte d'un lot : configuration active et client du fournisseur.

    Construit une fois par lot et transmis explicitement à chaque composant.
    """

    config: CatalogConfig
    client: ICatalogClient
