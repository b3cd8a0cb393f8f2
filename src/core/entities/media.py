"""
Media metadata entities.

Entities representing the local catalog: movies, series, their seasons and
episodes, and the genres shared by movies and series. Metadata comes from
the external catalog provider (TMDB).
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class Genre:
    """
    Genre shared by movies and series.

    Attributes:
        id: Internal database ID
        external_id: Provider genre ID (unique)
        name: Localized genre name
        slug: URL-friendly name derived from the name
        is_active: Whether the genre is displayed on the site
    """

    id: Optional[int] = None
    external_id: Optional[int] = None
    name: str = ""
    slug: str = ""
    is_active: bool = True


@dataclass
class Movie:
    """
    Movie metadata from the catalog provider.

    Attributes:
        id: Internal database ID
        external_id: Provider ID, the idempotence key of imports
        title: Localized title
        original_title: Original language title
        description: Plot summary
        year: Release year
        duration: Runtime in minutes
        rating: Average rating (0-10, one decimal)
        vote_count: Number of votes
        popularity: Provider popularity score
        poster: Absolute poster URL
        backdrop: Absolute backdrop URL
        trailer: External video key of the selected trailer
        release_date: Release date
    """

    id: Optional[int] = None
    external_id: Optional[int] = None
    title: str = ""
    original_title: Optional[str] = None
    description: Optional[str] = None
    year: Optional[int] = None
    duration: Optional[int] = None
    rating: Optional[float] = None
    vote_count: Optional[int] = None
    popularity: Optional[float] = None
    poster: Optional[str] = None
    backdrop: Optional[str] = None
    trailer: Optional[str] = None
    adult: bool = False
    original_language: Optional[str] = None
    release_date: Optional[date] = None
    is_active: bool = True
    is_featured: bool = False


@dataclass
class Series:
    """
    TV series metadata from the catalog provider.

    Same attributes as Movie for the shared part, plus the broadcast
    information used to rebuild the season tree.
    """

    id: Optional[int] = None
    external_id: Optional[int] = None
    title: str = ""
    original_title: Optional[str] = None
    description: Optional[str] = None
    year: Optional[int] = None
    rating: Optional[float] = None
    vote_count: Optional[int] = None
    popularity: Optional[float] = None
    poster: Optional[str] = None
    backdrop: Optional[str] = None
    trailer: Optional[str] = None
    adult: bool = False
    original_language: Optional[str] = None
    number_of_seasons: Optional[int] = None
    number_of_episodes: Optional[int] = None
    status: Optional[str] = None
    first_air_date: Optional[date] = None
    last_air_date: Optional[date] = None
    is_active: bool = True
    is_featured: bool = False


@dataclass
class Episode:
    """
    Individual episode of a season.

    Attributes:
        id: Internal database ID
        season_id: Reference to parent Season
        number: Episode number within season (1-indexed)
        duration: Runtime in minutes
        still_path: Absolute URL of the episode still
    """

    id: Optional[int] = None
    external_id: Optional[int] = None
    season_id: Optional[int] = None
    number: int = 0
    title: str = ""
    description: Optional[str] = None
    duration: Optional[int] = None
    air_date: Optional[date] = None
    rating: Optional[float] = None
    vote_count: int = 0
    still_path: Optional[str] = None
    is_active: bool = True


@dataclass
class Season:
    """
    Season of a series, owning its episodes.

    Seasons are rebuilt as a whole on every resync of their series, the
    episodes travel with the season so the tree can be written at once.
    """

    id: Optional[int] = None
    external_id: Optional[int] = None
    series_id: Optional[int] = None
    number: int = 0
    title: str = ""
    description: Optional[str] = None
    poster: Optional[str] = None
    air_date: Optional[date] = None
    episode_count: int = 0
    is_active: bool = True
    episodes: list[Episode] = field(default_factory=list)
