"""
Auth Schemas - Modeles Pydantic pour l'authentification.
"""

from pydantic import Field

from six_cities.presentation.api.schemas import CamelModel
from six_cities.presentation.api.users.schemas import EMAIL_PATTERN, UserResponse


class LoginRequest(CamelModel):
    """
    Requete de login.

    Example:
        {"email": "keks@mail.com", "password": "secret1"}
    """

    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    """
    Reponse de login: token bearer et profil.

    Example:
        {"token": "eyJ...", "user": {"id": "...", "name": "Keks", ...}}
    """

    token: str
    user: UserResponse
