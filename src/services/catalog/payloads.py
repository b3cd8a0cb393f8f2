"""
Conversion des réponses du fournisseur en entités du catalogue.

Les images sont des URLs absolues construites à partir de la configuration
active ; la taille dépend du chemin d'écriture (import en lot ou resync).
"""

from typing import Any, Optional

from src.core.entities.catalog import CatalogConfig
from src.core.entities.media import Episode, Movie, Season, Series
from src.utils.constants import (
    BACKDROP_SIZE_IMPORT,
    BACKDROP_SIZE_SYNC,
    EPISODE_STILL_SIZE,
    POSTER_SIZE_IMPORT,
    POSTER_SIZE_SYNC,
    SEASON_POSTER_SIZE,
)
from src.utils.helpers import clean_title, parse_date, round_rating, year_from_date


def _int_or_none(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    return None


def _float_or_none(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _image_sizes(detailed: bool) -> tuple[str, str]:
    if detailed:
        return POSTER_SIZE_SYNC, BACKDROP_SIZE_SYNC
    return POSTER_SIZE_IMPORT, BACKDROP_SIZE_IMPORT


def movie_from_payload(data: dict[str, Any], config: CatalogConfig, detailed: bool = False) -> Movie:
    """
    Construit un Movie à partir d'un résumé (popular) ou d'un détail.

    Args:
        data: Objet film du fournisseur
        config: Configuration active (URL des images)
        detailed: True pour un détail complet (resync, import unitaire)

    Returns:
        Movie non persisté (id=None), actif et non mis en avant
    """
    poster_size, backdrop_size = _image_sizes(detailed)
    release_date = data.get("release_date")
    return Movie(
        external_id=_int_or_none(data.get("id")),
        title=clean_title(data.get("title")) or "",
        original_title=clean_title(data.get("original_title")),
        description=data.get("overview") or None,
        year=year_from_date(release_date),
        duration=_int_or_none(data.get("runtime")),
        rating=round_rating(data.get("vote_average")),
        vote_count=_int_or_none(data.get("vote_count")),
        popularity=_float_or_none(data.get("popularity")),
        poster=config.image_url(poster_size, data.get("poster_path")),
        backdrop=config.image_url(backdrop_size, data.get("backdrop_path")),
        adult=bool(data.get("adult", False)),
        original_language=data.get("original_language"),
        release_date=parse_date(release_date),
        is_active=True,
        is_featured=False,
    )


def series_from_payload(data: dict[str, Any], config: CatalogConfig, detailed: bool = False) -> Series:
    """Construit une Series à partir d'un résumé ou d'un détail (voir movie_from_payload)."""
    poster_size, backdrop_size = _image_sizes(detailed)
    first_air_date = data.get("first_air_date")
    return Series(
        external_id=_int_or_none(data.get("id")),
        title=clean_title(data.get("name")) or "",
        original_title=clean_title(data.get("original_name")),
        description=data.get("overview") or None,
        year=year_from_date(first_air_date),
        rating=round_rating(data.get("vote_average")),
        vote_count=_int_or_none(data.get("vote_count")),
        popularity=_float_or_none(data.get("popularity")),
        poster=config.image_url(poster_size, data.get("poster_path")),
        backdrop=config.image_url(backdrop_size, data.get("backdrop_path")),
        adult=bool(data.get("adult", False)),
        original_language=data.get("original_language"),
        number_of_seasons=_int_or_none(data.get("number_of_seasons")),
        number_of_episodes=_int_or_none(data.get("number_of_episodes")),
        status=data.get("status"),
        first_air_date=parse_date(first_air_date),
        last_air_date=parse_date(data.get("last_air_date")),
        is_active=True,
        is_featured=False,
    )


def episode_from_payload(data: dict[str, Any], config: CatalogConfig) -> Optional[Episode]:
    """Construit un Episode ; None si le numéro d'épisode est absent."""
    number = _int_or_none(data.get("episode_number"))
    if number is None:
        return None
    return Episode(
        external_id=_int_or_none(data.get("id")),
        number=number,
        title=clean_title(data.get("name")) or f"Épisode {number}",
        description=data.get("overview") or None,
        duration=_int_or_none(data.get("runtime")),
        air_date=parse_date(data.get("air_date")),
        rating=round_rating(data.get("vote_average")),
        vote_count=_int_or_none(data.get("vote_count")) or 0,
        still_path=config.image_url(EPISODE_STILL_SIZE, data.get("still_path")),
        is_active=True,
    )


def season_from_payload(data: dict[str, Any], config: CatalogConfig, fallback_number: int) -> Season:
    """
    Construit une Season et ses épisodes à partir du détail de saison.

    Args:
        data: Détail de saison (liste 'episodes' déjà validée)
        config: Configuration active
        fallback_number: Numéro demandé, utilisé si season_number est absent

    Returns:
        Season non persistée, episode_count égal au nombre d'épisodes reçus
    """
    number = _int_or_none(data.get("season_number"))
    if number is None:
        number = fallback_number
    raw_episodes = data.get("episodes") or []
    episodes = [
        episode
        for episode in (episode_from_payload(item, config) for item in raw_episodes)
        if episode is not None
    ]
    return Season(
        external_id=_int_or_none(data.get("id")),
        number=number,
        title=clean_title(data.get("name")) or f"Saison {number}",
        description=data.get("overview") or None,
        poster=config.image_url(SEASON_POSTER_SIZE, data.get("poster_path")),
        air_date=parse_date(data.get("air_date")),
        episode_count=len(raw_episodes),
        is_active=True,
        episodes=episodes,
    )
