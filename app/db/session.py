# app/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings
from app.core.logging import get_logger
from app.db.models import Base

logger = get_logger(__name__)


def build_engine(database_url: str):
    """
    Creates the SQLAlchemy engine for the given URL.

    SQLite needs cross-thread access because FastAPI runs sync endpoints in a
    threadpool; an in-memory SQLite database must also share one connection or
    every new connection would see an empty database.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


# Get database URL from settings
engine = build_engine(get_settings().DATABASE_URL)

# Create a configured "Session" class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Creates the Customers table if it does not exist yet."""
    bind = bind or engine
    logger.info(f"Ensuring tables exist on {bind.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=bind)


# Dependency to get a DB session
def get_db():
    """
    FastAPI dependency that provides a SQLAlchemy database session.
    It ensures the session is always closed after the request is finished;
    anything not committed by then is discarded.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
