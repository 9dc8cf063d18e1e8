"""Authentification: tokens JWT, login, statut, logout."""
