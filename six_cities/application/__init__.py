"""
Couche Application - Orchestration des cas d'usage.

Les services applicatifs combinent les ports du domaine
pour realiser les operations exposees par l'API.
"""
