# chat_server/api/deps.py

import base64
import binascii
from fastapi import Depends, Request
from fastapi.security.utils import get_authorization_scheme_param

from chat_server.config import AuthType
from chat_server.core.errors import UnauthorizedError
from chat_server.services import Services


def get_services(request: Request) -> Services:
    return request.app.state.services


def _basic_credentials(param: str) -> tuple[str, str]:
    try:
        decoded = base64.b64decode(param, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise UnauthorizedError("invalid authorization header") from e

    username, separator, password = decoded.partition(":")
    if not separator:
        raise UnauthorizedError("invalid authorization header")
    if not username or not password:
        raise UnauthorizedError("login and password cannot be empty")
    return username, password


def get_current_user(request: Request, services: Services = Depends(get_services)) -> str:
    """
    Resolves the caller from the Authorization header using whichever
    identity strategy the app was started with.
    """
    header = request.headers.get("Authorization")
    if not header:
        raise UnauthorizedError("authorization header is missing")

    scheme, param = get_authorization_scheme_param(header)
    identity = services.auth.identity

    if identity.kind is AuthType.BASIC:
        if scheme != "Basic" or not param:
            raise UnauthorizedError("invalid authorization header")
        return services.auth.user_identity(_basic_credentials(param))

    if scheme != "Bearer" or not param:
        raise UnauthorizedError("invalid authorization header")
    return services.auth.user_identity(param)
