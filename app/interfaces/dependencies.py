"""
Shared FastAPI dependencies.

The engine and session factory are built once by the application
lifespan and stored on ``app.state``; routers receive them from here.
"""

from datetime import datetime
from typing import Callable

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.domain.shared.clock import utc_now


def get_engine(request: Request) -> Engine:
    """Return the process-wide engine."""
    return request.app.state.engine


def get_session_factory(request: Request) -> sessionmaker[Session]:
    return request.app.state.session_factory


def get_clock() -> Callable[[], datetime]:
    """Return the time source handed to use cases."""
    return utc_now
