"""
Fonctions utilitaires partagees dans le projet CineSync.

Ce module centralise les fonctions reutilisees a travers le codebase :
- clean_title : nettoyage des titres recus du fournisseur
- slugify : identifiant URL d'un genre
- parse_date / year_from_date : dates ISO partielles du fournisseur
- round_rating : arrondi des notes au dixieme
- utc_now : horodatage UTC avec fuseau
"""

import re
import unicodedata
from datetime import date, datetime, timezone
from typing import Any, Optional

_SLUG_SEPARATOR = re.compile(r"[^a-z0-9]+")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    result = []
    for char in text:
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def clean_title(title: Optional[str]) -> Optional[str]:
    """Nettoie un titre : retire les caractères invisibles et les espaces superflus."""
    if not title:
        return title
    return strip_invisible_chars(title).strip()


def slugify(name: str) -> str:
    """
    Slug d'un nom de genre.

    Minuscules, chaque suite de caractères hors [a-z0-9] devient un tiret.
    Les lettres accentuées sont donc remplacées (comme côté site public).

    Exemples :
        "Science-Fiction" -> "science-fiction"
        "Action & Adventure" -> "action-adventure"
        "Comédie" -> "com-die"
    """
    return _SLUG_SEPARATOR.sub("-", name.lower())


def parse_date(value: Any) -> Optional[date]:
    """Date ISO (YYYY-MM-DD) ou None si absente/invalide."""
    if not value or not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def year_from_date(value: Any) -> Optional[int]:
    """
    Année extraite d'une date fournisseur.

    Tolère les dates partielles ("2010" ou "2010-07") que date.fromisoformat
    refuse.
    """
    if not value or not isinstance(value, str):
        return None
    head = value[:4]
    return int(head) if len(head) == 4 and head.isdigit() else None


def round_rating(value: Any) -> Optional[float]:
    """Note arrondie au dixième, None si absente ou nulle."""
    if not value:
        return None
    try:
        return round(float(value) * 10) / 10
    except (TypeError, ValueError):
        return None


def utc_now() -> datetime:
    """Instant courant en UTC, avec fuseau (les colonnes DateTime refusent les dates naives)."""
    return datetime.now(timezone.utc)
