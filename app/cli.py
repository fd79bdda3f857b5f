"""
Command-line entry point.

Usage:
    # Serve the API
    python -m app.cli serve --port 8000

    # Create missing tables
    python -m app.cli init-db

    # Run one maturity pass (for an external cron)
    python -m app.cli mature
"""

import argparse
import logging

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def _engine():
    from app.infrastructure.persistence.database import build_engine

    return build_engine(
        settings.get_database_dsn(), echo=settings.db_echo, pool_size=settings.db_pool_size
    )


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=False)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create every mapped table that does not exist yet."""
    from app.infrastructure.persistence.database import create_schema

    engine = _engine()
    try:
        create_schema(engine)
    finally:
        engine.dispose()


def cmd_mature(args: argparse.Namespace) -> None:
    """Run one maturity pass and log the outcome."""
    from app.application.investments.dtos import MatureInvestmentsCommand
    from app.application.investments.mature_investments import MatureInvestmentsUseCase
    from app.infrastructure.investments.unit_of_work import SqlAlchemyInvestmentUnitOfWork
    from app.infrastructure.persistence.database import build_session_factory

    engine = _engine()
    try:
        session_factory = build_session_factory(engine)
        use_case = MatureInvestmentsUseCase(
            uow_factory=lambda: SqlAlchemyInvestmentUnitOfWork(session_factory)
        )
        report = use_case.execute(MatureInvestmentsCommand())
    finally:
        engine.dispose()

    logger.info("Maturity pass done: %d updated, %d failed.", report.updated, len(report.failed))
    if report.failed:
        raise SystemExit(1)


def main() -> None:
    parser = argparse.ArgumentParser(description=f"{settings.project_name} CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.set_defaults(func=cmd_init_db)

    mature_parser = subparsers.add_parser(
        "mature", help="Complete due investments and credit wallets"
    )
    mature_parser.set_defaults(func=cmd_mature)

    args = parser.parse_args()
    configure_logging(level=settings.log_level, sql_echo=settings.db_echo)
    args.func(args)


if __name__ == "__main__":
    main()
