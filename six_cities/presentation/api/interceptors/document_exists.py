"""
DocumentExistsInterceptor - Verification d'existence generique.

Configure par route avec un service (tout objet exposant
``exists(id)``) et le nom du parametre a verifier. Echoue en 404
si le parametre est absent ou si le document n'existe pas.

Usage:
------
    DocumentExistsInterceptor(offer_service, "offer_id", "Offer")
"""

from typing import Any

from six_cities.application.ports.document_lookup import DocumentLookup
from six_cities.presentation.api.errors import NotFoundError
from six_cities.presentation.api.pipeline import Handler, Interceptor, RequestContext


class DocumentExistsInterceptor(Interceptor):
    """
    Verifie qu'un document reference par la route existe.

    Args:
        lookup: Service capable de repondre a exists(id).
        param: Nom du parametre de route portant l'ID.
        entity_name: Nom affiche dans le message d'erreur.
    """

    def __init__(self, lookup: DocumentLookup, param: str, entity_name: str = "Document"):
        self.lookup = lookup
        self.param = param
        self.entity_name = entity_name

    def handle(self, context: RequestContext, call_next: Handler) -> Any:
        raw = context.path_params.get(self.param)
        if not raw:
            raise NotFoundError(f"{self.entity_name} not found")

        try:
            document_id = context.id_of(self.param)
        except ValueError:
            raise NotFoundError(f"{self.entity_name} with id {raw} not found") from None

        if not self.lookup.exists(document_id):
            raise NotFoundError(f"{self.entity_name} with id {raw} not found")

        context.ids[self.param] = document_id
        return call_next(context)
