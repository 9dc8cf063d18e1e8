"""
Pipeline - Chaine d'intercepteurs de requete.

Responsabilite unique:
----------------------
Executer, dans un ordre fixe par route, une liste d'intercepteurs
puis le handler terminal. Chaque intercepteur recoit le contexte de
la requete et la suite de la chaine (call_next):

- il appelle call_next(context), eventuellement apres avoir enrichi
  le contexte (utilisateur authentifie, DTO valide, fichier stocke);
- ou il leve une HttpException, ce qui interrompt la chaine: aucun
  intercepteur suivant ni le handler ne sont executes.

L'ordre est significatif: existence avant authentification (404
avant 401), authentification avant toute etape qui modifie ou
accepte un fichier.

Usage:
------
    pipeline = Pipeline(
        ValidateIdInterceptor("offer_id"),
        DocumentExistsInterceptor(offer_service, "offer_id", "Offer"),
        authenticate,
    )
    return pipeline.run(RequestContext.from_request(request), handler)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Optional
from uuid import UUID

from fastapi import Request, UploadFile

from six_cities.domain.entities.user import User
from six_cities.domain.ports.file_storage import StoredFile
from six_cities.presentation.api.errors import UnauthorizedError


@dataclass
class RequestContext:
    """
    Etat d'une requete, propage le long de la chaine.

    Attributes:
        request: Requete Starlette d'origine (headers, url).
        path_params: Parametres de route bruts.
        body: Corps JSON brut (tout type JSON) ou None.
        files: Fichiers multipart par nom de champ.
        user: Utilisateur authentifie (rempli par l'authentification).
        dto: Corps valide (rempli par la validation de DTO).
        stored_file: Fichier persiste (rempli par l'upload).
        ids: Parametres de route convertis en UUID.
    """

    request: Optional[Request] = None
    path_params: dict[str, str] = field(default_factory=dict)
    body: Any = None
    files: dict[str, Optional[UploadFile]] = field(default_factory=dict)
    user: Optional[User] = None
    dto: Any = None
    stored_file: Optional[StoredFile] = None
    ids: dict[str, UUID] = field(default_factory=dict)

    @classmethod
    def from_request(
        cls,
        request: Request,
        body: Any = None,
        files: Optional[dict[str, Optional[UploadFile]]] = None,
    ) -> "RequestContext":
        """Construit le contexte depuis la requete FastAPI."""
        return cls(
            request=request,
            path_params=dict(request.path_params),
            body=body,
            files=files or {},
        )

    @property
    def headers(self) -> dict[str, str]:
        """Headers de la requete (vide hors requete HTTP)."""
        if self.request is None:
            return {}
        return dict(self.request.headers)

    def require_user(self) -> User:
        """
        Retourne l'utilisateur authentifie.

        Raises:
            UnauthorizedError: Si aucun utilisateur n'est attache.
        """
        if self.user is None:
            raise UnauthorizedError()
        return self.user

    def id_of(self, param: str) -> UUID:
        """UUID d'un parametre de route valide par ValidateIdInterceptor."""
        if param in self.ids:
            return self.ids[param]
        return UUID(self.path_params[param])


Handler = Callable[[RequestContext], Any]


class Interceptor(ABC):
    """
    Etape d'une chaine de requete.

    Une implementation appelle call_next(context) pour continuer,
    ou leve une HttpException pour interrompre la chaine.
    """

    @abstractmethod
    def handle(self, context: RequestContext, call_next: Handler) -> Any:
        """Traite le contexte puis delegue (ou interrompt)."""
        ...


class Pipeline:
    """
    Liste ordonnee d'intercepteurs suivie d'un handler terminal.

    La composition est explicite: le handler est enveloppe par le
    dernier intercepteur, lui-meme enveloppe par l'avant-dernier,
    etc. Le premier intercepteur s'execute donc en premier.

    Example:
        >>> Pipeline(first, second).run(context, handler)
        # first.handle -> second.handle -> handler
    """

    def __init__(self, *interceptors: Interceptor):
        self.interceptors = list(interceptors)

    def run(self, context: RequestContext, handler: Handler) -> Any:
        """
        Execute la chaine pour un contexte.

        Args:
            context: Contexte de la requete.
            handler: Handler terminal, appele si tous les intercepteurs passent.

        Returns:
            Valeur retournee par le handler.
        """
        chain: Handler = handler
        for interceptor in reversed(self.interceptors):
            chain = partial(interceptor.handle, call_next=chain)
        return chain(context)
