"""Database engine, session factory, dependency injection, and error mapping."""

import logging
from contextlib import contextmanager
from typing import Generator, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from teamboard.core.config import settings
from teamboard.core.exceptions import (
    ConflictError, InfrastructureError, ValidationError,
)

logger = logging.getLogger("teamboard")


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # One shared connection so in-memory databases survive across threads
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_size": 20,
        "max_overflow": 40,
        "pool_timeout": 30,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }


engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    **_engine_options(settings.DATABASE_URL),
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency that provides a DB session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def translate_errors(
    db: Session,
    conflict_message: str = "Record already exists",
    failure_message: str = "Database operation failed",
) -> Iterator[None]:
    """Run a unit of work, mapping persistence failures to tagged errors.

    The session is rolled back on any failure so nothing from the block is
    left half-written.

    Raises:
        ValidationError: A model ``@validates`` hook rejected a value.
        ConflictError: A unique constraint was violated.
        InfrastructureError: Any other SQLAlchemy failure.
    """
    try:
        yield
    except ValueError as e:
        db.rollback()
        raise ValidationError(str(e)) from e
    except IntegrityError as e:
        db.rollback()
        logger.info("Integrity error: %s", e.orig)
        raise ConflictError(conflict_message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database error")
        raise InfrastructureError(failure_message) from e


def init_db(bind: Optional[object] = None) -> None:
    """Create all tables that don't exist yet."""
    from teamboard.db.base import Base
    import teamboard.models  # noqa: F401  (register models on the metadata)

    Base.metadata.create_all(bind=bind or engine)


def drop_db(bind: Optional[object] = None) -> None:
    """Drop all tables."""
    from teamboard.db.base import Base
    import teamboard.models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)
