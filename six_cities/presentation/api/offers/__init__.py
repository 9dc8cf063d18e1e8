"""Offres de location: liste, detail, publication, modification."""
