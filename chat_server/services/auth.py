# chat_server/services/auth.py

import logging
from passlib.context import CryptContext

from chat_server.repository import AuthRepository
from chat_server.services.identity import IdentityResolver, build_password_context


logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        repository: AuthRepository,
        identity: IdentityResolver,
        pwd_context: CryptContext | None = None,
    ):
        self._repository = repository
        self._identity = identity
        self._pwd_context = pwd_context or build_password_context()

    @property
    def identity(self) -> IdentityResolver:
        return self._identity

    def create_user(self, username: str, password: str) -> str:
        """
        Registers the user and returns the handle they authenticate with:
        a signed token under bearer auth, the username under basic auth.
        """
        self._repository.insert_user(username, self._pwd_context.hash(password))
        logger.info("Registered user %s", username)
        return self._identity.issue(username)

    def user_identity(self, raw) -> str:
        return self._identity.verify(raw)
