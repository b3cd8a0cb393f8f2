"""
Commandes CLI du moteur de synchronisation du catalogue.

- init-config : active la configuration fournisseur depuis les settings
- bulk-import : import de decouverte des titres populaires
- sync : resynchronisation complete des titres deja importes
- import : import d'un titre precis par ID TMDB
- search : recherche de titres chez le fournisseur
- history : dernieres entrees du journal d'audit
"""

import asyncio
from enum import Enum
from typing import Annotated, NoReturn, Optional

import typer
from rich.status import Status
from rich.table import Table

from src.adapters.cli.helpers import (
    console,
    print_item_result,
    print_report,
    suppress_loguru,
    with_container,
)
from src.core.entities.catalog import SyncStatus, TitleKind
from src.core.errors import CatalogConfigurationError, CatalogProviderError
from src.utils.constants import DEFAULT_HISTORY_LIMIT


class BatchKind(str, Enum):
    """Type de lot accepte par bulk-import et sync."""

    MOVIES = "movies"
    SERIES = "series"


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Erreur:[/red] {message}")
    raise typer.Exit(code=1)


def init_config() -> None:
    """Active la configuration TMDB a partir des variables CINESYNC_TMDB_*."""
    asyncio.run(_init_config_async())


@with_container()
async def _init_config_async(container) -> None:
    store = container.config_store()
    try:
        config = store.init_from_settings(container.config())
    except CatalogConfigurationError as e:
        _fail(str(e))

    console.print("[green]Configuration TMDB initialisée[/green]")
    console.print(f"  URL API : {config.base_url}")
    console.print(f"  URL images : {config.image_base_url}")
    console.print(f"  Langue : {config.language}")


def bulk_import(
    kind: Annotated[BatchKind, typer.Argument(help="Type de titres: movies ou series")],
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", min=1, help="Nombre maximum de titres populaires"),
    ] = None,
) -> None:
    """Importe les titres populaires absents du catalogue."""
    asyncio.run(_bulk_import_async(kind, limit))


@with_container()
async def _bulk_import_async(container, kind: BatchKind, limit: Optional[int]) -> None:
    runner = container.sync_runner()
    title_kind = TitleKind.from_batch_kind(kind.value)
    try:
        with suppress_loguru(), Status("[cyan]Import en lot...", console=console):
            report = await runner.run_discovery_import(title_kind, limit)
    except (CatalogConfigurationError, CatalogProviderError) as e:
        _fail(str(e))
    print_report(report)


def sync(
    kind: Annotated[BatchKind, typer.Argument(help="Type de titres: movies ou series")],
) -> None:
    """Resynchronise tous les titres deja importes (details, genres, saisons)."""
    asyncio.run(_sync_async(kind))


@with_container()
async def _sync_async(container, kind: BatchKind) -> None:
    runner = container.sync_runner()
    title_kind = TitleKind.from_batch_kind(kind.value)
    try:
        with suppress_loguru(), Status("[cyan]Synchronisation...", console=console):
            report = await runner.run_resync(title_kind)
    except CatalogConfigurationError as e:
        _fail(str(e))
    print_report(report)


def import_title(
    kind: Annotated[TitleKind, typer.Argument(help="Type de titre: movie ou tv")],
    tmdb_id: Annotated[int, typer.Argument(help="ID TMDB du titre")],
) -> None:
    """Importe un titre precis avec son detail complet."""
    asyncio.run(_import_title_async(kind, tmdb_id))


@with_container()
async def _import_title_async(container, kind: TitleKind, tmdb_id: int) -> None:
    runner = container.sync_runner()
    try:
        with suppress_loguru():
            result = await runner.import_one(kind, tmdb_id)
    except CatalogConfigurationError as e:
        _fail(str(e))

    print_item_result(result)
    if not result.success:
        raise typer.Exit(code=1)


def search(
    query: Annotated[str, typer.Argument(help="Titre recherche")],
    kind: Annotated[TitleKind, typer.Option("--type", "-t", help="movie ou tv")] = TitleKind.MOVIE,
    page: Annotated[int, typer.Option("--page", "-p", min=1)] = 1,
) -> None:
    """Recherche des titres chez TMDB et indique ceux deja importes."""
    asyncio.run(_search_async(query, kind, page))


@with_container()
async def _search_async(container, query: str, kind: TitleKind, page: int) -> None:
    service = container.search_service()
    try:
        with suppress_loguru():
            data = await service.search(kind, query, page)
    except (CatalogConfigurationError, CatalogProviderError) as e:
        _fail(str(e))

    if not data["results"]:
        console.print("[yellow]Aucun résultat.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("TMDB", justify="right")
    table.add_column("Titre")
    table.add_column("Date")
    table.add_column("Importé")
    for item in data["results"]:
        table.add_row(
            str(item.get("id", "")),
            item.get("title") or "",
            item.get("releaseDate") or "",
            "[green]oui[/green]" if item["isImported"] else "non",
        )
    console.print(table)
    pagination = data["pagination"]
    console.print(
        f"[dim]Page {pagination['page']}/{pagination['totalPages']} "
        f"({pagination['totalResults']} résultats)[/dim]"
    )


def history(
    kind: Annotated[Optional[TitleKind], typer.Option("--type", "-t", help="movie ou tv")] = None,
    status: Annotated[
        Optional[SyncStatus], typer.Option("--status", "-s", help="success ou error")
    ] = None,
    limit: Annotated[int, typer.Option("--limit", "-l", min=1)] = DEFAULT_HISTORY_LIMIT,
) -> None:
    """Affiche les dernieres synchronisations enregistrees."""
    asyncio.run(_history_async(kind, status, limit))


@with_container()
async def _history_async(
    container, kind: Optional[TitleKind], status: Optional[SyncStatus], limit: int
) -> None:
    records = container.audit_log().history(kind=kind, status=status, limit=limit)
    if not records:
        console.print("[yellow]Aucune synchronisation enregistrée.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Date")
    table.add_column("Type")
    table.add_column("TMDB", justify="right")
    table.add_column("Statut")
    table.add_column("Erreur")
    for record in records:
        color = "green" if record.status is SyncStatus.SUCCESS else "red"
        table.add_row(
            record.last_sync.strftime("%Y-%m-%d %H:%M:%S"),
            record.type.label,
            str(record.external_id),
            f"[{color}]{record.status.value}[/{color}]",
            record.error_message or "",
        )
    console.print(table)
