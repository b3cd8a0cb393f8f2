"""
Utilitaires partages pour les commandes CLI de CineSync.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- print_report / print_item_result : affichage Rich des resultats de lot
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from src.container import Container
from src.services.catalog import BatchReport, ItemResult, ItemStatus

console = Console()

# Style Rich par statut d'element
_STATUS_STYLES = {
    ItemStatus.SUCCESS: ("green", "✓"),
    ItemStatus.ERROR: ("red", "✗"),
    ItemStatus.SKIPPED: ("yellow", "-"),
}


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def print_item_result(result: ItemResult) -> None:
    """Affiche une ligne par element traite."""
    color, mark = _STATUS_STYLES[result.status]
    label = result.title or "?"
    if result.external_id is not None:
        label = f"{label} [dim](TMDB {result.external_id})[/dim]"
    line = f"  [{color}]{mark}[/{color}] {label} - {result.message}"
    if result.error:
        line += f" [dim]({result.error})[/dim]"
    console.print(line)


def print_report(report: BatchReport, show_items: bool = True) -> None:
    """Affiche le detail d'un lot puis son resume."""
    if show_items and report.results:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Statut")
        table.add_column("TMDB", justify="right")
        table.add_column("Titre")
        table.add_column("Message")
        for result in report.results:
            color, mark = _STATUS_STYLES[result.status]
            table.add_row(
                f"[{color}]{mark} {result.status.value}[/{color}]",
                str(result.external_id) if result.external_id is not None else "-",
                result.title or "",
                result.error or result.message,
            )
        console.print(table)

    summary = report.summary
    console.print(f"\n[bold]{report.message}[/bold]")
    console.print(f"  Total: {summary.total}")
    console.print(f"  [green]{summary.success}[/green] succès")
    if summary.errors:
        console.print(f"  [red]{summary.errors}[/red] erreur(s)")
    if summary.skipped:
        console.print(f"  [yellow]{summary.skipped}[/yellow] déjà importé(s)")
