"""
Tests pour les entites media (Movie, Series, Season, Episode).

Verifie les valeurs par defaut utilisees par les imports.
"""

from src.core.entities.media import Episode, Genre, Movie, Season, Series


class TestMovieEntity:
    """Tests pour l'entite Movie."""

    def test_movie_defaults(self):
        """Un film est actif, non mis en avant et sans bande-annonce par defaut."""
        movie = Movie(title="Inception", external_id=27205)
        assert movie.id is None
        assert movie.is_active is True
        assert movie.is_featured is False
        assert movie.trailer is None
        assert movie.adult is False


class TestSeriesEntity:
    """Tests pour l'entite Series."""

    def test_series_broadcast_fields_default_none(self):
        series = Series(title="Breaking Bad")
        assert series.number_of_seasons is None
        assert series.first_air_date is None
        assert series.is_featured is False


class TestSeasonEntity:
    """Tests pour l'entite Season."""

    def test_episodes_list_is_not_shared(self):
        """Chaque saison possede sa propre liste d'episodes."""
        first = Season(number=1)
        second = Season(number=2)
        first.episodes.append(Episode(number=1, title="Pilote"))
        assert second.episodes == []


class TestGenreEntity:
    def test_genre_defaults(self):
        genre = Genre(external_id=28, name="Action", slug="action")
        assert genre.is_active is True
