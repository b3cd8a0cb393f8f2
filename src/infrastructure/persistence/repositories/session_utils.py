"""
Outils de session partages par les repositories.

Un echec de commit laisse la session dans un etat inutilisable : elle est
annulee avant de propager l'erreur, pour que l'element suivant d'un lot
puisse reutiliser la meme session.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session


def commit_or_rollback(session: Session) -> None:
    """Valide la transaction courante, l'annule puis propage l'erreur en cas d'echec."""
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
