# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from chat_server.config import AuthType, DBType, Settings
from chat_server.core.state import DataStore
from chat_server.database import create_db_engine, create_session_factory, init_db
from chat_server.main import create_app
from chat_server.repository.memory import MemoryAuthRepository, MemoryPrivateRepository, MemoryPublicRepository
from chat_server.repository.sql import SqlAuthRepository, SqlPrivateRepository, SqlPublicRepository


SECRET = "test-secret"


@pytest.fixture
def store():
    return DataStore()


@pytest.fixture
def session_factory():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def repos(request, store, session_factory):
    """(auth, public, private) repositories for each backend."""
    if request.param == "memory":
        return (
            MemoryAuthRepository(store),
            MemoryPublicRepository(store),
            MemoryPrivateRepository(store),
        )
    return (
        SqlAuthRepository(session_factory),
        SqlPublicRepository(session_factory),
        SqlPrivateRepository(session_factory),
    )


@pytest.fixture
def basic_client():
    app = create_app(Settings(db_type=DBType.IN_MEMORY, auth_type=AuthType.BASIC))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def bearer_client():
    app = create_app(Settings(db_type=DBType.SQL, database_url="sqlite://", auth_type=AuthType.BEARER, jwt_secret_key=SECRET))
    with TestClient(app) as client:
        yield client
