"""
Dépendances partagées de l'application web.

Fournit l'accès au Container DI et la lecture des types de titres reçus
par les routes d'administration.
"""

from typing import Any, Optional

from fastapi import Request

from ..container import Container
from ..core.entities.catalog import TitleKind

# Messages d'erreur des routes d'administration
KIND_REQUIRED = "Type requis (movies ou series)"
KIND_INVALID = 'Type doit être "movies" ou "series"'
TITLE_KIND_INVALID = 'Type doit être "movie" ou "tv"'


class InvalidKind(ValueError):
    """Type de lot ou de titre absent ou non reconnu."""


def get_container(request: Request) -> Container:
    """Container DI initialisé au démarrage de l'application."""
    return request.app.state.container


def parse_batch_kind(value: Any) -> TitleKind:
    """
    Convertit le type d'un lot ("movies" / "series").

    Raises:
        InvalidKind: Type absent ou différent de movies / series
    """
    if not value:
        raise InvalidKind(KIND_REQUIRED)
    if value not in ("movies", "series"):
        raise InvalidKind(KIND_INVALID)
    return TitleKind.from_batch_kind(value)


def parse_title_kind(value: Any, default: Optional[TitleKind] = None) -> TitleKind:
    """
    Convertit le type d'un titre ("movie" / "tv").

    Raises:
        InvalidKind: Type absent (sans défaut) ou non reconnu
    """
    if not value:
        if default is None:
            raise InvalidKind(TITLE_KIND_INVALID)
        return default
    try:
        return TitleKind(value)
    except ValueError as e:
        raise InvalidKind(TITLE_KIND_INVALID) from e
