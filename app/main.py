"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database engine and the background maturity scheduler

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from sqlalchemy.engine import Engine

from app.application.investments.mature_investments import MatureInvestmentsUseCase
from app.core.config import settings
from app.infrastructure.investments.unit_of_work import SqlAlchemyInvestmentUnitOfWork
from app.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from app.infrastructure.scheduling.maturity_scheduler import MaturityScheduler
from app.interfaces.health import router as health_router
from app.interfaces.investments.router import router as investments_router
from app.interfaces.markets.router import router as markets_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


def _bind_database(app: FastAPI, engine: Engine) -> None:
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)


def _build_scheduler(app: FastAPI) -> MaturityScheduler:
    session_factory = app.state.session_factory
    return MaturityScheduler(
        use_case_factory=lambda: MatureInvestmentsUseCase(
            uow_factory=lambda: SqlAlchemyInvestmentUnitOfWork(session_factory)
        ),
        interval_seconds=settings.maturity_interval_seconds,
    )


def create_app(engine: Optional[Engine] = None, start_scheduler: bool = True) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        engine: Pre-built engine to serve from. When omitted, the lifespan
            builds one from the configured DSN.
        start_scheduler: Run the periodic maturity job while the app is up.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, sql_echo=settings.db_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: open the database, start/stop the scheduler."""
        if getattr(app.state, "engine", None) is None:
            _bind_database(
                app,
                build_engine(
                    settings.get_database_dsn(),
                    echo=settings.db_echo,
                    pool_size=settings.db_pool_size,
                ),
            )
        create_schema(app.state.engine)

        scheduler = _build_scheduler(app) if start_scheduler else None
        if scheduler is not None:
            scheduler.start()

        yield

        if scheduler is not None:
            scheduler.stop()
        if engine is None:
            app.state.engine.dispose()
            logger.info("Database engine disposed.")

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.engine = None
    if engine is not None:
        _bind_database(app, engine)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(investments_router, prefix="/api/v1")
    app.include_router(markets_router, prefix="/api/v1")

    return app


app = create_app()
