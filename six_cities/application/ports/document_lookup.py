"""
Port DocumentLookup - Capacite de verification d'existence.

Responsabilite unique:
----------------------
Decrire ce dont l'intercepteur d'existence a besoin: savoir si
un document identifie existe. Tout service qui expose
``exists(id)`` satisfait ce protocole.

Usage:
------
    def check(lookup: DocumentLookup, document_id: UUID) -> bool:
        return lookup.exists(document_id)
"""

from typing import Protocol, runtime_checkable
from uuid import UUID


@runtime_checkable
class DocumentLookup(Protocol):
    """Service capable de verifier l'existence d'un document."""

    def exists(self, document_id: UUID) -> bool:
        """True si un document avec cet ID existe."""
        ...
