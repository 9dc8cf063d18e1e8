"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir le Container de l'application aux endpoints.

Usage:
------
    @router.get("/{offer_id}")
    def get_offer(offer_id: str, container: Container = Depends(get_container)):
        ...
"""

from fastapi import Request

from six_cities.infrastructure.container import Container


def get_container(request: Request) -> Container:
    """Retourne le Container attache a l'application."""
    return request.app.state.container
