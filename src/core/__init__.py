"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et la
hiérarchie d'erreurs du moteur de synchronisation.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Movie, Series, Season, Episode, Genre, CatalogConfig)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors.py : Erreurs typées (configuration, fournisseur)
"""
