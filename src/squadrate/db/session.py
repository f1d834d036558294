"""
Database session management for the roster store.

The engine is created on first use from settings.database_url, so
importing this module never opens a connection.

Usage:
    from squadrate.db import get_session

    with get_session() as session:
        players = session.scalars(select(RosterPlayer)).all()
"""

from contextlib import contextmanager
from typing import Callable, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from squadrate.config import settings

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """
    Get or create the engine.

    Pre-ping verifies pooled connections before use; SQL is echoed only
    when the log level is DEBUG.
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,
            echo=settings.log_level == "DEBUG",
        )
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
        )
    return _session_factory



@contextmanager
def get_session(
    factory: Optional[Callable[[], Session]] = None,
) -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Commits on successful exit, rolls back on exception and always closes.

    Args:
        factory: Session factory (default: get_session_factory())

    Raises:
        Any exception from the database operation (after rollback)
    """
    session = (factory or get_session_factory())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
