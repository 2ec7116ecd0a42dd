"""
SQLAlchemy base configuration and session management.

Uses SQLAlchemy 2.0 style with type hints and declarative base.
Designed to be portable between SQLite (dev) and PostgreSQL (prod).
"""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from fleetboard.config import config


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def _is_memory_url(url: str) -> bool:
    return url in ('sqlite://', 'sqlite:///:memory:')


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine with settings appropriate for the database type.

    In-memory SQLite gets a single shared connection, otherwise every
    pooled connection would see its own empty database.
    """
    engine_kwargs = {
        'echo': echo,  # Log SQL in debug mode
    }

    is_sqlite = url.startswith('sqlite')
    if is_sqlite:
        engine_kwargs['connect_args'] = {'check_same_thread': False}
        if _is_memory_url(url):
            engine_kwargs['poolclass'] = StaticPool

    new_engine = create_engine(url, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(new_engine, 'connect')
        def set_sqlite_pragma(dbapi_connection, connection_record):
            """
            Configure SQLite on every new connection.

            Foreign keys are off by default in SQLite; route cascades
            on aircraft deletion depend on them.
            """
            cursor = dbapi_connection.cursor()
            cursor.execute('PRAGMA foreign_keys=ON')
            if not _is_memory_url(url):
                # Write-Ahead Logging for concurrent access
                cursor.execute('PRAGMA journal_mode=WAL')
                cursor.execute('PRAGMA synchronous=NORMAL')
            cursor.close()

    return new_engine


engine = build_engine(config.database.url, echo=config.debug)


# Session factory
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,  # Avoid lazy loading issues
)


def init_engine(url: str, echo: bool = False) -> Engine:
    """
    Rebind the session factory to a different database.

    Used by the application factory when it is given an explicit URL
    (tests run against in-memory SQLite).
    """
    global engine
    engine.dispose()
    engine = build_engine(url, echo=echo)
    SessionLocal.configure(bind=engine)
    return engine


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Usage:
        with get_session() as session:
            session.scalars(...)

    Automatically handles commit/rollback and session cleanup.
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Creates all tables if they don't exist. For production,
    use Alembic migrations instead.
    """
    Base.metadata.create_all(bind=bind or engine)

