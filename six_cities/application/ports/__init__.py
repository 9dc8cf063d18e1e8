"""Ports de la couche application."""

from six_cities.application.ports.document_lookup import DocumentLookup

__all__ = ["DocumentLookup"]
