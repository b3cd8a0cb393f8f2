"""
CineSync - Moteur de synchronisation du catalogue d'un site de streaming.

Ce package importe et resynchronise les films, series, saisons, episodes et
genres depuis un fournisseur de metadonnees externe (API de type TMDB) vers
la base locale.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, erreurs)
- services/ : Couche application (reconciliation, orchestration des lots)
- adapters/ : Couche infrastructure (CLI, client API)
- infrastructure/ : Persistance SQLModel
- web/ : Endpoints d'administration FastAPI
"""
