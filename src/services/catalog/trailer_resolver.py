"""
Selection de la bande-annonce a conserver parmi les videos d'un titre.
"""

from typing import Any, Optional

from src.utils.constants import TRAILER_SITE, TRAILER_TYPE


class TrailerResolver:
    """
    Choix deterministe d'une bande-annonce.

    Premier candidat Trailer/YouTube dans la langue preferee, sinon premier
    Trailer/YouTube toutes langues confondues, sinon None. L'ordre de la
    liste du fournisseur departage les ex aequo.
    """

    @staticmethod
    def _is_youtube_trailer(video: dict[str, Any]) -> bool:
        return (
            video.get("type") == TRAILER_TYPE
            and video.get("site") == TRAILER_SITE
            and bool(video.get("key"))
        )

    def resolve(self, candidates: list[dict[str, Any]], preferred_language: str) -> Optional[str]:
        """
        Retourne la cle de la video retenue.

        Args:
            candidates: Videos du fournisseur ({type, site, iso_639_1, key})
            preferred_language: Code langue ISO 639-1 (ex: "fr")

        Returns:
            Cle de la video (ex: identifiant YouTube), ou None
        """
        trailers = [video for video in candidates if self._is_youtube_trailer(video)]
        for video in trailers:
            if video.get("iso_639_1") == preferred_language:
                return video["key"]
        if trailers:
            return trailers[0]["key"]
        return None
