"""
Database Session Management
Creates and manages SQLAlchemy database engine and session factory.

This module sets up the database connection using SQLAlchemy 2.0 style
and provides a session factory for creating database sessions in endpoints.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from app.core.config import settings


# Create SQLAlchemy engine
# The engine maintains a pool of database connections.
#
# Configuration:
# - echo=settings.DEBUG: Log all SQL queries when debug mode is enabled
# - pool_pre_ping=True: Verify connections before using them (prevents stale connections)
# - pool_recycle=3600: Recycle connections after 1 hour (prevents timeout issues)
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    pool_pre_ping=True,  # Check connection health before using
    pool_recycle=3600,  # Recycle connections every hour
)

# Session factory
# One session per request; each session is one unit of work.
#
# Configuration:
# - autocommit=False: Require explicit commit() calls
# - autoflush=False: Require explicit flush() calls
# - bind=engine: Connect sessions to our database engine
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that provides database sessions to FastAPI endpoints.

    Yields:
        Database session object

    Usage in FastAPI endpoint:
        @app.get("/users")
        def list_users(db: Session = Depends(get_db)):
            return db.query(User).all()

    The session is closed after the endpoint returns, even if an
    exception occurs. Closing a session with an open transaction rolls
    it back, so a failed request never leaves partial writes behind.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
