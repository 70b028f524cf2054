# app/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings, Settings


def build_engine(settings: Settings) -> Engine:
    """
    Creates the SQLAlchemy engine for the configured DATABASE_URL.

    SQLite (used for local runs and the test-suite) gets a single shared
    connection so an in-memory database survives across sessions.
    """
    if settings.is_sqlite:
        return create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW
    )


# Create the SQLAlchemy engine.
engine = build_engine(get_settings())

# Create a configured "Session" class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    FastAPI dependency that provides a SQLAlchemy database session.
    The transaction is committed when the request succeeds, rolled back on
    any error, and the session is always closed afterwards.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
