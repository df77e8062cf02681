# authserver/adapters/outbound/persistence/database.py

import logging
from typing import Generator
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

# Configure logger
logger = logging.getLogger(__name__)

# ─── Base definition ───────────────────────────────────────────────────────────
# Parent class of all ORM models, holds the metadata
Base = declarative_base()
# ────────────────────────────────────────────────────────────────────────────────


def build_engine(database_url: str, **engine_options) -> Engine:
    """
    Create the engine for the client directory database.

    Args:
        database_url: SQLAlchemy database URL
        **engine_options: Extra options passed to create_engine

    Raises:
        SQLAlchemyError: If the engine cannot be configured
    """
    logger.info(f"Connecting to database: {database_url.split('@')[-1]}")
    try:
        engine = create_engine(database_url, echo=False, future=True, pool_pre_ping=True, **engine_options)
    except SQLAlchemyError as e:
        logger.error(f"Error connecting to database: {str(e)}")
        raise
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    """Session factory used by the read-only client directory."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )


@contextmanager
def get_db_context(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Provides a context for database operations,
    ensuring the session is closed at the end.

    Yields:
        Session: SQLAlchemy session

    Example:
        ```python
        with get_db_context(session_factory) as db:
            client = db.execute(select(RegisteredClientModel)).scalars().first()
        ```
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
