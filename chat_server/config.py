# chat_server/config.py

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from dotenv import load_dotenv


load_dotenv()


class DBType(str, Enum):
    IN_MEMORY = "in_memory_db"
    SQL = "sql"


class AuthType(str, Enum):
    BASIC = "basic_auth"
    BEARER = "bearer_jwt"


@dataclass(frozen=True)
class Settings:
    db_type: DBType = DBType.IN_MEMORY
    database_url: str = "sqlite:///./data/chat.db"
    auth_type: AuthType = AuthType.BASIC
    jwt_secret_key: str | None = None
    jwt_ttl_hours: int = 12
    password_schemes: list[str] = field(default_factory=lambda: ["plaintext"])
    log_level: str = "INFO"
    base_path: str = ""
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        db_type = os.getenv("DB_TYPE", DBType.IN_MEMORY.value)
        auth_type = os.getenv("AUTH_TYPE", AuthType.BASIC.value)
        try:
            db_type = DBType(db_type)
        except ValueError:
            raise ValueError(f"Unknown DB_TYPE: {db_type!r}") from None
        try:
            auth_type = AuthType(auth_type)
        except ValueError:
            raise ValueError(f"Unknown AUTH_TYPE: {auth_type!r}") from None

        schemes = os.getenv("PASSWORD_SCHEMES", "plaintext")

        return cls(
            db_type=db_type,
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            auth_type=auth_type,
            jwt_secret_key=os.getenv("JWT_SECRET_KEY"),
            jwt_ttl_hours=int(os.getenv("JWT_TTL_HOURS", "12")),
            password_schemes=[s.strip() for s in schemes.split(",") if s.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            base_path=os.getenv("BASE_PATH", "").rstrip("/"),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", "8000")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
