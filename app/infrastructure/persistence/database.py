"""
SQLAlchemy engine and session factory.

One engine (and its connection pool) is built per process by the
application lifespan and handed to adapters explicitly.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.domain.shared.errors import InternalError
from app.infrastructure.persistence.models import Base

logger = logging.getLogger(__name__)


def build_engine(dsn: str, echo: bool = False, pool_size: int = 5) -> Engine:
    """Build a pooled SQLAlchemy engine for the given DSN.

    SQLite URLs (used by tests and local demos) get a single shared
    connection so that in-memory databases survive across sessions.

    Args:
        dsn: SQLAlchemy database URL.
        echo: Log every SQL statement.
        pool_size: Persistent connections kept by the pool.

    Returns:
        A configured Engine.
    """
    if dsn.startswith("sqlite"):
        engine = create_engine(
            dsn,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(
            dsn,
            echo=echo,
            pool_size=pool_size,
            pool_pre_ping=True,
        )
    logger.info("Database engine created for dialect=%s", engine.dialect.name)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to the engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create all mapped tables that do not exist yet."""
    Base.metadata.create_all(engine)
    logger.info("Database schema ensured (%d tables).", len(Base.metadata.tables))


@contextmanager
def read_session(engine: Engine, operation: str) -> Iterator[Session]:
    """Open a short-lived read session.

    Store failures are logged with their traceback and re-raised as
    InternalError so callers only ever see domain errors.

    Args:
        engine: Engine to connect through.
        operation: Short label used in the log line.
    """
    try:
        with Session(engine) as session:
            yield session
    except SQLAlchemyError as exc:
        logger.exception("Store failure during %s", operation)
        raise InternalError("Store unavailable") from exc
