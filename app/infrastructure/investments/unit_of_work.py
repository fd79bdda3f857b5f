"""
Adapter: SQLAlchemy unit of work for the investments context.

One instance is one database transaction. Repositories share its
session, so every write made inside the ``with`` block commits or rolls
back together.
"""

import logging

from sqlalchemy.orm import Session, sessionmaker

from app.domain.investments.ports import InvestmentUnitOfWork
from app.infrastructure.investments.investment_repository import (
    InvestmentRepositoryAdapter,
)
from app.infrastructure.investments.ledger_repository import LedgerRepositoryAdapter
from app.infrastructure.investments.plan_repository import (
    InvestmentPlanRepositoryAdapter,
)
from app.infrastructure.investments.wallet_repository import WalletRepositoryAdapter

logger = logging.getLogger(__name__)


class SqlAlchemyInvestmentUnitOfWork(InvestmentUnitOfWork):
    """Transaction scope backed by a SQLAlchemy session."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> "SqlAlchemyInvestmentUnitOfWork":
        self._session = self._session_factory()
        self.plans = InvestmentPlanRepositoryAdapter(self._session)
        self.investments = InvestmentRepositoryAdapter(self._session)
        self.wallets = WalletRepositoryAdapter(self._session)
        self.ledger = LedgerRepositoryAdapter(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            if self._session is not None:
                self._session.close()
                self._session = None

    def commit(self) -> None:
        if self._session is None:
            raise RuntimeError("Unit of work used outside its 'with' block")
        self._session.commit()

    def rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()
