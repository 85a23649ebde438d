"""
Database connection and session management for the draft service
"""
from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator, TypeVar
import logging

from .config import settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "echo": settings.DB_ECHO}
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_pre_ping": True,
        "echo": settings.DB_ECHO,
    }


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()

T = TypeVar("T")


class DuplicateKeyError(Exception):
    """Raised when an insert violates a uniqueness constraint of the store."""


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Create the users and players tables if they do not exist yet.
    Called on application startup.
    """
    # Import models to ensure they are registered with Base
    from .models import User, Player  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Connected to database: %s", engine.url.render_as_string(hide_password=True))
    except SQLAlchemyError as e:
        logger.error("Error connecting to database: %s", e)
        raise


def close_db() -> None:
    """Release every pooled connection. Called on application shutdown."""
    engine.dispose()
    logger.info("Database connections closed")


def check_db_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection is successful, False otherwise
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error("Database connection check failed: %s", e)
        return False


def save(db: Session, record: T) -> T:
    """
    Insert a record and return it refreshed from the store.

    Raises:
        DuplicateKeyError: a unique column already holds the record's value
        SQLAlchemyError: any other store failure
    """
    db.add(record)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateKeyError(str(e.orig)) from e
    db.refresh(record)
    return record
