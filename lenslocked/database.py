"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from lenslocked.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from lenslocked import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def reset_db(bind=None) -> None:
    """Drop every table and rebuild the schema. Destroys all data."""
    from lenslocked import models  # noqa: F401

    bind = bind or engine
    logger.warning(f"Dropping all tables on {bind.url!r}")
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
