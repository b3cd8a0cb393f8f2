"""
Implementation SQLModel du repository de configuration fournisseur.
"""

from typing import Optional

from sqlmodel import Session, select

from src.core.entities.catalog import CatalogConfig
from src.core.ports.repositories import ICatalogConfigRepository
from src.infrastructure.persistence.models import CatalogConfigModel
from src.infrastructure.persistence.repositories.session_utils import commit_or_rollback
from src.utils.helpers import utc_now


class SQLModelCatalogConfigRepository(ICatalogConfigRepository):
    """
    Repository SQLModel pour la configuration du fournisseur.

    Au plus une ligne porte is_active=True ; activate() garantit cet
    invariant en desactivant les autres dans la meme transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: CatalogConfigModel) -> CatalogConfig:
        return CatalogConfig(
            id=model.id,
            base_url=model.base_url,
            api_key=model.api_key,
            image_base_url=model.image_base_url,
            language=model.language,
            is_active=model.is_active,
        )

    def get_active(self) -> Optional[CatalogConfig]:
        """Recupere la configuration active la plus recente."""
        statement = (
            select(CatalogConfigModel)
            .where(CatalogConfigModel.is_active == True)  # noqa: E712
            .order_by(CatalogConfigModel.id.desc())  # type: ignore[union-attr]
        )
        model = self._session.exec(statement).first()
        return self._to_entity(model) if model else None

    def activate(self, config: CatalogConfig) -> CatalogConfig:
        """Desactive les configurations actives puis cree ou met a jour celle-ci (par cle API)."""
        for active in self._session.exec(
            select(CatalogConfigModel).where(CatalogConfigModel.is_active == True)  # noqa: E712
        ).all():
            active.is_active = False
            self._session.add(active)

        model = self._session.exec(
            select(CatalogConfigModel).where(CatalogConfigModel.api_key == config.api_key)
        ).first()
        if model is None:
            model = CatalogConfigModel(
                api_key=config.api_key,
                base_url=config.base_url,
                image_base_url=config.image_base_url,
            )
        model.base_url = config.base_url
        model.image_base_url = config.image_base_url
        model.language = config.language
        model.is_active = True
        model.updated_at = utc_now()

        self._session.add(model)
        commit_or_rollback(self._session)
        self._session.refresh(model)
        return self._to_entity(model)
