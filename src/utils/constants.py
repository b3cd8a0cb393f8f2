"""
Constantes globales pour CineSync.

Ce module contient les constantes utilisees par le moteur de synchronisation:
- Tailles d'images TMDB selon le chemin d'ecriture (import en lot, resync)
- Criteres de selection des bandes-annonces
- Limites par defaut des lots
"""

# Tailles d'images pour l'import en lot (decouverte des titres populaires)
POSTER_SIZE_IMPORT = "w500"
BACKDROP_SIZE_IMPORT = "w1280"

# Tailles d'images pour la resynchronisation et l'import unitaire
POSTER_SIZE_SYNC = "w780"
BACKDROP_SIZE_SYNC = "original"

# Affiches de saison et vignettes d'episode
SEASON_POSTER_SIZE = "w500"
EPISODE_STILL_SIZE = "w500"

# Tailles utilisees par la recherche d'administration
SEARCH_POSTER_SIZE = "w500"
SEARCH_BACKDROP_SIZE = "w1280"

# Selection des bandes-annonces
TRAILER_TYPE = "Trailer"
TRAILER_SITE = "YouTube"

# Nombre de titres populaires importes par defaut
DEFAULT_BULK_LIMIT = 20

# Nombre d'entrees d'historique retournees par defaut
DEFAULT_HISTORY_LIMIT = 50
