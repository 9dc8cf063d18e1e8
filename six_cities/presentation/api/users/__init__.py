"""Utilisateurs: inscription, profil, avatar."""
