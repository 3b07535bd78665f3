# chat_server/services/__init__.py

import logging
from dataclasses import dataclass
from datetime import timedelta

from chat_server.config import AuthType, DBType, Settings
from chat_server.core.state import DataStore
from chat_server.database import create_db_engine, create_session_factory, init_db
from chat_server.repository.memory import MemoryAuthRepository, MemoryPrivateRepository, MemoryPublicRepository
from chat_server.repository.sql import SqlAuthRepository, SqlPrivateRepository, SqlPublicRepository
from chat_server.services.auth import AuthService
from chat_server.services.identity import PasswordStrategy, TokenStrategy, build_password_context
from chat_server.services.private import PrivateService
from chat_server.services.public import PublicService


logger = logging.getLogger(__name__)


@dataclass
class Services:
    auth: AuthService
    public: PublicService
    private: PrivateService


def build_services(settings: Settings) -> Services:
    if settings.db_type is DBType.IN_MEMORY:
        store = DataStore()
        auth_repo = MemoryAuthRepository(store)
        public_repo = MemoryPublicRepository(store)
        private_repo = MemoryPrivateRepository(store)
    elif settings.db_type is DBType.SQL:
        engine = create_db_engine(settings.database_url)
        init_db(engine)
        session_factory = create_session_factory(engine)
        auth_repo = SqlAuthRepository(session_factory)
        public_repo = SqlPublicRepository(session_factory)
        private_repo = SqlPrivateRepository(session_factory)
    else:
        raise ValueError(f"Unsupported db type: {settings.db_type!r}")

    pwd_context = build_password_context(settings.password_schemes)

    if settings.auth_type is AuthType.BASIC:
        identity = PasswordStrategy(auth_repo, pwd_context)
    elif settings.auth_type is AuthType.BEARER:
        if not settings.jwt_secret_key:
            raise ValueError("JWT_SECRET_KEY must be set for bearer_jwt auth")
        identity = TokenStrategy(settings.jwt_secret_key, timedelta(hours=settings.jwt_ttl_hours))
    else:
        raise ValueError(f"Unsupported auth type: {settings.auth_type!r}")

    logger.info("Using %s storage with %s", settings.db_type.value, settings.auth_type.value)

    return Services(
        auth=AuthService(auth_repo, identity, pwd_context),
        public=PublicService(public_repo),
        private=PrivateService(private_repo),
    )
