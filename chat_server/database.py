# chat_server/database.py

import os
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from chat_server.models import Base


def create_db_engine(url: str) -> Engine:
    db_url = make_url(url)
    if db_url.get_backend_name() != "sqlite":
        return create_engine(url)

    if not db_url.database or db_url.database == ":memory:":
        # one shared connection, otherwise every session sees its own empty database
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    os.makedirs(os.path.dirname(os.path.abspath(db_url.database)), exist_ok=True)
    return create_engine(url, connect_args={"check_same_thread": False})


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )


def init_db(engine: Engine):
    Base.metadata.create_all(bind=engine)
