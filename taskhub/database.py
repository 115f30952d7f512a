# taskhub/database.py
import logging

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine (and its connection pool) plus the session factory"""

    def __init__(self, url: str, statement_timeout_ms: int = 0):
        self.url = url
        self.engine = create_engine(url, **self._engine_options(url, statement_timeout_ms))
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @staticmethod
    def _engine_options(url: str, statement_timeout_ms: int) -> dict:
        if url.startswith("sqlite"):
            options = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
                # one shared connection, otherwise every session sees an empty database
                options["poolclass"] = StaticPool
            return options

        options = {"pool_pre_ping": True}
        if url.startswith("postgresql") and statement_timeout_ms > 0:
            options["connect_args"] = {"options": f"-c statement_timeout={statement_timeout_ms}"}
        return options

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        # model modules register their tables on Base.metadata when imported
        import taskhub.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        import taskhub.models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def run_migrations(database: Database) -> bool:
    """Best-effort schema bootstrap; failures are logged, never raised"""
    try:
        database.create_all()
    except Exception as e:
        logger.warning(f"Migration skipped: {e}")
        return False
    logger.info("Database schema is up to date")
    return True


# Required wherever a DB session is needed
def get_db(request: Request):
    db: Session = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
