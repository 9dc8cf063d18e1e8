"""Couche Presentation - Interfaces exposees (API REST)."""
