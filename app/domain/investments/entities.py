"""
Domain entities for the investments bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class InvestmentStatus(Enum):
    """Lifecycle state of an investment. ACTIVE -> COMPLETED only."""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


class TransactionType(Enum):
    """Ledger entry category."""

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    INVESTMENT = "INVESTMENT"
    INVESTMENT_RETURN = "INVESTMENT_RETURN"
    BUY = "BUY"
    SELL = "SELL"


class TransactionStatus(Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class InvestmentPlan:
    """Administrator-defined investment product template.

    Attributes:
        id: Opaque identifier.
        plan_name: Display name.
        minimum_investment: Smallest accepted principal (inclusive).
        maximum_investment: Largest accepted principal (inclusive).
        profit_percentage: Profit paid at maturity, in percent of principal.
        duration: Lock-up period in days.
        is_active: Whether new investments are accepted.
        description: Optional marketing text.
    """

    id: str
    plan_name: str
    minimum_investment: Decimal
    maximum_investment: Decimal
    profit_percentage: Decimal
    duration: int
    is_active: bool = True
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def accepts(self, amount: Decimal) -> bool:
        """Return True when ``amount`` lies within the plan bounds."""
        return self.minimum_investment <= amount <= self.maximum_investment


@dataclass(frozen=True)
class PlanSummary:
    """The plan fields echoed alongside an investment."""

    plan_name: str
    profit_percentage: Decimal
    duration: int


@dataclass(frozen=True)
class Investment:
    """One user's commitment to a plan."""

    id: str
    user_id: str
    plan_id: str
    invested_amount: Decimal
    expected_return: Decimal
    start_date: datetime
    end_date: datetime
    status: InvestmentStatus = InvestmentStatus.ACTIVE
    actual_return: Optional[Decimal] = None
    plan: Optional[PlanSummary] = None
    created_at: Optional[datetime] = None

    def is_due(self, now: datetime) -> bool:
        return self.status is InvestmentStatus.ACTIVE and self.end_date <= now

    def completed(self, actual_return: Decimal) -> "Investment":
        """Return a copy of this investment in COMPLETED state."""
        return replace(
            self, status=InvestmentStatus.COMPLETED, actual_return=actual_return
        )


@dataclass
class Wallet:
    """Per-user balances. Mutated only under a row lock."""

    id: str
    user_id: str
    balance: Decimal
    token_balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class LedgerTransaction:
    """Append-only record of a balance-affecting event."""

    user_id: str
    type: TransactionType
    amount: Decimal
    status: TransactionStatus = TransactionStatus.COMPLETED
    description: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ActiveInvestmentSummary:
    """Short view of an ACTIVE investment listed under its plan."""

    id: str
    invested_amount: Decimal
    start_date: datetime
    status: InvestmentStatus


@dataclass(frozen=True)
class PlanDetail:
    """A plan together with its currently active investments."""

    plan: InvestmentPlan
    active_investments: list[ActiveInvestmentSummary] = field(default_factory=list)
