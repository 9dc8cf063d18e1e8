"""Offres favorites de l'utilisateur authentifie."""
