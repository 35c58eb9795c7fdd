"""Database infrastructure setup."""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from proposal_pricing.infrastructure.config.settings import settings

# Engine creation is deferred until needed so in-memory mode works without DATABASE_URL
_engine = None
_SessionLocal = None


def _get_engine():
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for database operations")
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,
            echo=settings.debug_mode,  # Log SQL queries in debug mode
        )
    return _engine


def get_db_session() -> Session:
    """
    Get a database session.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine())
    return _SessionLocal()
