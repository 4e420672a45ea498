import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from kcssc.core.config import get_cached_settings
from kcssc.core.exceptions import DatabaseDisabledError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./kcssc.db"

engine: Optional[Engine] = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False, future=True)

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # a single shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, future=True, **kwargs)

    return create_engine(
        database_url,
        future=True,
        pool_pre_ping=True,
        pool_size=20,
        pool_recycle=1800,
    )


def configure_engine(database_url: str) -> Engine:
    """(Re)binds the module engine and the session factory to a database URL."""
    global engine
    if engine is not None:
        engine.dispose()
    engine = create_db_engine(database_url)
    SessionLocal.configure(bind=engine)
    return engine


def is_database_enabled() -> bool:
    return engine is not None


def get_db():
    if engine is None:
        raise DatabaseDisabledError()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Creates the tables if they don't exist."""
    if engine is None:
        logger.info("Database is disabled. Server will run without database connection.")
        return

    import kcssc.models  # noqa: F401  registers the tables on Base.metadata

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables verified")


def check_connection() -> None:
    """Runs a trivial query; raises when the database is unreachable."""
    if engine is None:
        raise DatabaseDisabledError()
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


_settings = get_cached_settings()
if _settings.db_enabled:
    configure_engine(_settings.database_url or DEFAULT_DATABASE_URL)
else:
    logger.info("DB_ENABLED=false - API endpoints that need the database will answer 503")
