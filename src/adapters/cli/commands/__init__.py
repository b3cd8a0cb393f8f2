"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.catalog_commands import (
    BatchKind,
    bulk_import,
    history,
    import_title,
    init_config,
    search,
    sync,
)

__all__ = [
    "BatchKind",
    "bulk_import",
    "history",
    "import_title",
    "init_config",
    "search",
    "sync",
]
