"""Database engine, session factory and the FastAPI session dependency."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from around.config import get_settings

settings = get_settings()


def engine_options(database_url: str) -> dict[str, Any]:
    """Return create_engine keyword arguments suited to the database backend."""
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across the threadpool used by sync endpoints
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


engine = create_engine(settings.database_url, **engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables. Used by scripts; deployments run the Alembic migrations."""
    from around import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
