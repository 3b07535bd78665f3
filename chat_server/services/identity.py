# chat_server/services/identity.py

"""
Identity strategies.

Both strategies implement IdentityResolver: `verify(raw)` returns the verified
username or raises UnauthorizedError, and `issue(username)` returns the handle a
freshly registered user authenticates with. Exactly one strategy is built at
startup and injected into AuthService and the HTTP dependency.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Protocol

from jose import JWTError, jwt
from passlib.context import CryptContext

from chat_server.config import AuthType
from chat_server.core.errors import NotFoundError, UnauthorizedError
from chat_server.repository import AuthRepository


logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ACCESS_TOKEN_TTL = timedelta(hours=12)


class IdentityResolver(Protocol):
    kind: AuthType

    def verify(self, raw) -> str: ...

    def issue(self, username: str) -> str: ...


def build_password_context(schemes: list[str] | None = None) -> CryptContext:
    # plaintext keeps stored credentials comparable verbatim
    return CryptContext(schemes=schemes or ["plaintext"], deprecated="auto")


class PasswordStrategy:
    kind = AuthType.BASIC

    def __init__(self, users: AuthRepository, pwd_context: CryptContext | None = None):
        self._users = users
        self._pwd_context = pwd_context or build_password_context()

    def verify(self, raw: tuple[str, str]) -> str:
        username, password = raw
        try:
            user = self._users.get_user(username)
        except NotFoundError as e:
            raise UnauthorizedError("unregistered user") from e

        if not self._pwd_context.verify(password, user.password):
            raise UnauthorizedError("incorrect password")
        return username

    def issue(self, username: str) -> str:
        return username


class TokenStrategy:
    kind = AuthType.BEARER

    def __init__(self, secret_key: str, ttl: timedelta = ACCESS_TOKEN_TTL):
        if not secret_key:
            raise ValueError("TokenStrategy requires a non-empty secret key")
        self._secret_key = secret_key
        self._ttl = ttl

    def mint(self, username: str, issued_at: datetime | None = None) -> str:
        issued_at = issued_at or datetime.now(timezone.utc)
        claims = {
            "sub": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)

    def verify(self, raw: str) -> str:
        try:
            payload = jwt.decode(
                raw,
                self._secret_key,
                algorithms=[ALGORITHM],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            logger.debug("Rejected token: %s", e)
            raise UnauthorizedError("invalid jwt token") from e

        username = payload.get("sub")
        if not username:
            raise UnauthorizedError("invalid jwt token")
        return username

    def issue(self, username: str) -> str:
        return self.mint(username)
