"""Commentaires des offres."""
