"""
Modeles SQLModel pour la base de donnees CineSync.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- tmdb_configs: Configurations du fournisseur (une seule active)
- movies / series: Titres, cles par external_id (ID TMDB, unique)
- genres: Genres partages, cles par external_id
- movie_genres / series_genres: Tables de jointure (cle primaire composite)
- seasons / episodes: Arborescence d'une serie, reconstruite a chaque resync
- tmdb_syncs: Journal d'audit append-only
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Index, SQLModel

from src.utils.helpers import utc_now


class CatalogConfigModel(SQLModel, table=True):
    """
    Configuration du fournisseur de catalogue.

    Creee et modifiee par l'administration, lue seule par le moteur.
    """

    __tablename__ = "tmdb_configs"

    id: int | None = Field(default=None, primary_key=True)
    api_key: str = Field(unique=True)
    base_url: str
    image_base_url: str
    language: str = "fr-FR"
    is_active: bool = Field(default=False, index=True)
    created_at: datetime | None = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime | None = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class GenreModel(SQLModel, table=True):
    """Genre partage entre films et series, cree au premier import qui le reference."""

    __tablename__ = "genres"

    id: int | None = Field(default=None, primary_key=True)
    external_id: int | None = Field(default=None, unique=True, index=True)
    name: str
    slug: str = Field(index=True)
    is_active: bool = True


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    external_id est la cle d'idempotence des imports : nullable
    (films ajoutes a la main) mais unique.
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    external_id: int | None = Field(default=None, unique=True, index=True)
    title: str = Field(index=True)
    original_title: str | None = None
    description: str | None = None
    year: int | None = None
    duration: int | None = None  # Minutes
    rating: float | None = None  # Note moyenne (0-10, une decimale)
    vote_count: int | None = None
    popularity: float | None = None
    poster: str | None = None  # URL absolue
    backdrop: str | None = None  # URL absolue
    trailer: str | None = None  # Cle de la video YouTube
    adult: bool = False
    original_language: str | None = None
    release_date: date | None = None
    is_active: bool = Field(default=True, index=True)
    is_featured: bool = Field(default=False, index=True)
    created_at: datetime | None = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime | None = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class SeriesModel(SQLModel, table=True):
    """
    Modele representant une serie TV dans la base de donnees.

    Meme structure que MovieModel pour la partie commune, plus les
    informations de diffusion.
    """

    __tablename__ = "series"

    id: int | None = Field(default=None, primary_key=True)
    external_id: int | None = Field(default=None, unique=True, index=True)
    title: str = Field(index=True)
    original_title: str | None = None
    description: str | None = None
    year: int | None = None
    rating: float | None = None
    vote_count: int | None = None
    popularity: float | None = None
    poster: str | None = None
    backdrop: str | None = None
    trailer: str | None = None
    adult: bool = False
    original_language: str | None = None
    number_of_seasons: int | None = None
    number_of_episodes: int | None = None
    status: str | None = None  # ex: "Returning Series", "Ended"
    first_air_date: date | None = None
    last_air_date: date | None = None
    is_active: bool = Field(default=True, index=True)
    is_featured: bool = Field(default=False, index=True)
    created_at: datetime | None = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime | None = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class MovieGenreModel(SQLModel, table=True):
    """Lien film <-> genre. La cle composite interdit les doublons."""

    __tablename__ = "movie_genres"

    movie_id: int = Field(foreign_key="movies.id", primary_key=True)
    genre_id: int = Field(foreign_key="genres.id", primary_key=True)


class SeriesGenreModel(SQLModel, table=True):
    """Lien serie <-> genre. La cle composite interdit les doublons."""

    __tablename__ = "series_genres"

    series_id: int = Field(foreign_key="series.id", primary_key=True)
    genre_id: int = Field(foreign_key="genres.id", primary_key=True)


class SeasonModel(SQLModel, table=True):
    """
    Saison d'une serie.

    Possedee par une seule serie ; supprimee et recreee a chaque resync.
    """

    __tablename__ = "seasons"
    __table_args__ = (Index("ix_seasons_series_number", "series_id", "number"),)

    id: int | None = Field(default=None, primary_key=True)
    external_id: int | None = Field(default=None, index=True)
    series_id: int = Field(foreign_key="series.id", index=True)
    number: int
    title: str
    description: str | None = None
    poster: str | None = None
    air_date: date | None = None
    episode_count: int = 0
    is_active: bool = True
    created_at: datetime | None = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class EpisodeModel(SQLModel, table=True):
    """
    Episode d'une saison.

    Lie a une saison via season_id (foreign key), meme cycle de vie que la saison.
    """

    __tablename__ = "episodes"
    __table_args__ = (Index("ix_episodes_season_number", "season_id", "number"),)

    id: int | None = Field(default=None, primary_key=True)
    external_id: int | None = Field(default=None, index=True)
    season_id: int = Field(foreign_key="seasons.id", index=True)
    number: int
    title: str
    description: str | None = None
    duration: int | None = None  # Minutes
    air_date: date | None = None
    rating: float | None = None
    vote_count: int = 0
    still_path: str | None = None  # URL absolue
    is_active: bool = True
    created_at: datetime | None = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class SyncRecordModel(SQLModel, table=True):
    """
    Enregistrement d'audit d'une synchronisation.

    Une ligne par resultat d'element, succes ou erreur. Jamais modifie.
    """

    __tablename__ = "tmdb_syncs"

    id: int | None = Field(default=None, primary_key=True)
    type: str = Field(index=True)  # movie, tv
    external_id: int = Field(index=True)
    last_sync: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    status: str = Field(index=True)  # success, error
    error_message: Optional[str] = None
