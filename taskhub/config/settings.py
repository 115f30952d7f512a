# taskhub/config/settings.py
# Runtime configuration for the API, database and token signing

import os
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Mapping, Optional, Set, Tuple

from dotenv import load_dotenv

DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Immutable application settings, built once and handed to create_app()"""

    database_url: str
    db_statement_timeout_ms: int = 30000
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    reload: bool = False
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_expire_hours: int = 24
    cors_origins: Tuple[str, ...] = field(default=("http://localhost:3000",))
    log_level: str = "INFO"
    run_migrations: bool = True
    # None keeps the default table where every status may move to every status
    status_transitions: Optional[Mapping[str, Set[str]]] = None

    @property
    def token_ttl(self) -> timedelta:
        return timedelta(hours=self.token_expire_hours)

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET

    @staticmethod
    def database_url_from_env() -> str:
        """DATABASE_URL wins; otherwise assemble a PostgreSQL URL from the DB_* variables"""
        url = os.getenv("DATABASE_URL")
        if url:
            return url

        user = os.getenv("DB_USER", "postgres")
        password = os.getenv("DB_PASSWORD", "password")
        host = os.getenv("DB_HOST", "localhost")
        port = os.getenv("DB_PORT", "5432")
        name = os.getenv("DB_NAME", "team_task_hub")
        sslmode = os.getenv("DB_SSLMODE", "disable")
        return f"postgresql://{user}:{password}@{host}:{port}/{name}?sslmode={sslmode}"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
        return cls(
            database_url=cls.database_url_from_env(),
            db_statement_timeout_ms=int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "30000")),
            server_host=os.getenv("SERVER_HOST", "0.0.0.0"),
            server_port=int(os.getenv("SERVER_PORT", "8080")),
            reload=_env_bool("RELOAD", "false"),
            jwt_secret=os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            token_expire_hours=int(os.getenv("TOKEN_EXPIRE_HOURS", "24")),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            run_migrations=_env_bool("RUN_MIGRATIONS", "true"),
        )
