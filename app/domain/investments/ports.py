"""
Port interfaces (ABCs) for the investments bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.domain.investments.entities import (
    ActiveInvestmentSummary,
    Investment,
    InvestmentPlan,
    InvestmentStatus,
    LedgerTransaction,
    Wallet,
)


class InvestmentPlanRepository(ABC):
    """Port for the investment plan catalog."""

    @abstractmethod
    def get(self, plan_id: str) -> Optional[InvestmentPlan]:
        """Return a plan by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def list_active(self) -> list[InvestmentPlan]:
        """Return active plans ordered by minimum investment ascending."""
        raise NotImplementedError

    @abstractmethod
    def add(self, plan: InvestmentPlan) -> InvestmentPlan:
        """Persist a new plan and return it with generated fields."""
        raise NotImplementedError

    @abstractmethod
    def update(self, plan: InvestmentPlan) -> InvestmentPlan:
        """Overwrite an existing plan's terms."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, plan_id: str) -> None:
        raise NotImplementedError


class InvestmentRepository(ABC):
    """Port for persisting and querying investments."""

    @abstractmethod
    def add(self, investment: Investment) -> Investment:
        """Persist a new investment and return it with generated fields."""
        raise NotImplementedError

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Investment]:
        """Return a user's investments, newest first, with plan summaries."""
        raise NotImplementedError

    @abstractmethod
    def list_due(self, now: datetime) -> list[Investment]:
        """Return ACTIVE investments whose end date is at or before ``now``."""
        raise NotImplementedError

    @abstractmethod
    def get_for_update(self, investment_id: str) -> Optional[Investment]:
        """Return an investment and lock its row until the unit of work ends."""
        raise NotImplementedError

    @abstractmethod
    def mark_completed(self, investment_id: str, actual_return: Decimal) -> None:
        """Move an investment to COMPLETED and record its actual return."""
        raise NotImplementedError

    @abstractmethod
    def list_active_for_plan(self, plan_id: str) -> list[ActiveInvestmentSummary]:
        raise NotImplementedError

    @abstractmethod
    def count_for_plan(
        self, plan_id: str, status: Optional[InvestmentStatus] = None
    ) -> int:
        """Count a plan's investments, optionally restricted to one status."""
        raise NotImplementedError


class WalletRepository(ABC):
    """Port for wallet balances.

    Mutations must only follow a ``get_for_update`` call within the same
    unit of work so concurrent debits and credits serialize on the row.
    """

    @abstractmethod
    def get_for_update(self, user_id: str) -> Optional[Wallet]:
        """Return the user's wallet and lock its row, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def set_balance(self, wallet_id: str, balance: Decimal) -> None:
        """Persist a new fiat balance for the wallet."""
        raise NotImplementedError


class LedgerRepository(ABC):
    """Port for the append-only transaction ledger."""

    @abstractmethod
    def append(self, entry: LedgerTransaction) -> LedgerTransaction:
        """Append a ledger entry. Entries are never updated."""
        raise NotImplementedError


class InvestmentUnitOfWork(ABC):
    """Transaction boundary grouping the investments repositories.

    Usage:
        with uow:
            wallet = uow.wallets.get_for_update(user_id)
            ...
            uow.commit()

    Leaving the block without ``commit`` rolls every write back.
    """

    plans: InvestmentPlanRepository
    investments: InvestmentRepository
    wallets: WalletRepository
    ledger: LedgerRepository

    def __enter__(self) -> "InvestmentUnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError
