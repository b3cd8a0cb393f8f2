"""
Point d'entrée CLI de CineSync.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    bulk_import,
    history,
    import_title,
    init_config,
    search,
    sync,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="cinesync",
    help="Synchronisation du catalogue films et séries depuis TMDB",
)
container = Container()

# Niveau de log console par nombre de -v
_VERBOSE_LEVELS = ("INFO", "DEBUG", "TRACE")


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CineSync - Synchronisation du catalogue."""
    if not quiet and not verbose:
        return
    settings = container.config()
    level = "ERROR" if quiet else _VERBOSE_LEVELS[min(verbose, len(_VERBOSE_LEVELS) - 1)]
    configure_logging(
        log_level=level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Monter les commandes du moteur de synchronisation
app.command(name="init-config")(init_config)
app.command(name="bulk-import")(bulk_import)
app.command()(sync)
# Note: "import" est un mot reserve Python, donc on utilise name= explicitement
app.command(name="import")(import_title)
app.command()(search)
app.command()(history)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineSync")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"API TMDB : {config.tmdb_base_url}")
    typer.echo(f"Clé TMDB (init) : {'définie' if config.tmdb_enabled else 'absente'}")
    typer.echo(f"Langue : {config.tmdb_language}")
    typer.echo(f"Import en lot : {config.bulk_import_limit} titres")
    typer.echo(
        f"Relances : {config.retry_max_attempts} tentatives, "
        f"{config.rate_limit_per_second} req/s (rafale {config.rate_limit_burst})"
    )
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineSync v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web CineSync."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de CineSync", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
