"""
Implementation SQLModel du repository Season.

Gere l'arborescence saisons / episodes d'une serie. Le remplacement complet
de l'arborescence s'execute dans une seule transaction.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.media import Episode, Season
from src.core.ports.repositories import ISeasonRepository
from src.infrastructure.persistence.models import EpisodeModel, SeasonModel


class SQLModelSeasonRepository(ISeasonRepository):
    """
    Repository SQLModel pour les saisons et leurs episodes.

    Les episodes n'ont pas de repository propre : ils n'existent qu'a
    travers leur saison et sont toujours ecrits avec elle.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _episode_to_entity(self, model: EpisodeModel) -> Episode:
        return Episode(
            id=model.id,
            external_id=model.external_id,
            season_id=model.season_id,
            number=model.number,
            title=model.title,
            description=model.description,
            duration=model.duration,
            air_date=model.air_date,
            rating=model.rating,
            vote_count=model.vote_count,
            still_path=model.still_path,
            is_active=model.is_active,
        )

    def _to_entity(self, model: SeasonModel, episodes: list[EpisodeModel]) -> Season:
        return Season(
            id=model.id,
            external_id=model.external_id,
            series_id=model.series_id,
            number=model.number,
            title=model.title,
            description=model.description,
            poster=model.poster,
            air_date=model.air_date,
            episode_count=model.episode_count,
            is_active=model.is_active,
            episodes=[self._episode_to_entity(episode) for episode in episodes],
        )

    def list_by_series(self, series_id: int) -> list[Season]:
        """Liste les saisons d'une serie par numero, episodes tries par numero."""
        statement = (
            select(SeasonModel)
            .where(SeasonModel.series_id == series_id)
            .order_by(SeasonModel.number)
        )
        seasons = []
        for model in self._session.exec(statement).all():
            episodes = self._session.exec(
                select(EpisodeModel)
                .where(EpisodeModel.season_id == model.id)
                .order_by(EpisodeModel.number)
            ).all()
            seasons.append(self._to_entity(model, list(episodes)))
        return seasons

    def replace_tree(self, series_id: int, seasons: list[Season]) -> list[Season]:
        """
        Supprime l'arborescence existante de la serie et ecrit la nouvelle.

        Les flush intermediaires imposent l'ordre episodes -> saisons pour la
        suppression (cles etrangeres) et fournissent l'ID de chaque saison
        avant l'insertion de ses episodes. Un seul commit final.

        Args :
            series_id : ID interne de la serie
            seasons : Nouvelles saisons, episodes inclus

        Retourne :
            Les saisons creees, relues depuis la base

        Lève :
            SQLAlchemyError : apres annulation complete (l'ancienne arborescence reste en place)
        """
        try:
            existing = self._session.exec(
                select(SeasonModel).where(SeasonModel.series_id == series_id)
            ).all()
            season_ids = [season.id for season in existing]
            if season_ids:
                old_episodes = self._session.exec(
                    select(EpisodeModel).where(
                        EpisodeModel.season_id.in_(season_ids)  # type: ignore[union-attr]
                    )
                ).all()
                for episode in old_episodes:
                    self._session.delete(episode)
                self._session.flush()
                for season in existing:
                    self._session.delete(season)
                self._session.flush()

            for season in seasons:
                season_model = SeasonModel(
                    external_id=season.external_id,
                    series_id=series_id,
                    number=season.number,
                    title=season.title,
                    description=season.description,
                    poster=season.poster,
                    air_date=season.air_date,
                    episode_count=season.episode_count,
                    is_active=season.is_active,
                )
                self._session.add(season_model)
                self._session.flush()

                for episode in season.episodes:
                    self._session.add(
                        EpisodeModel(
                            external_id=episode.external_id,
                            season_id=season_model.id,
                            number=episode.number,
                            title=episode.title,
                            description=episode.description,
                            duration=episode.duration,
                            air_date=episode.air_date,
                            rating=episode.rating,
                            vote_count=episode.vote_count,
                            still_path=episode.still_path,
                            is_active=episode.is_active,
                        )
                    )
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise

        return self.list_by_series(series_id)
