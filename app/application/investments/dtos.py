"""
Data Transfer Objects for the investments application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses; the only behavior is construction
from domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.domain.investments.entities import Investment, InvestmentPlan


@dataclass(frozen=True)
class CreateInvestmentCommand:
    """Input DTO for investing in a plan.

    Attributes:
        user_id: Investor identifier.
        plan_id: Plan to invest in.
        invested_amount: Principal debited from the wallet.
    """

    user_id: str
    plan_id: str
    invested_amount: Decimal


@dataclass(frozen=True)
class ListInvestmentsQuery:
    user_id: str


@dataclass(frozen=True)
class MatureInvestmentsCommand:
    """Input DTO for a maturity run.

    Attributes:
        now: Cut-off time. Defaults to the use case clock.
    """

    now: Optional[datetime] = None


@dataclass(frozen=True)
class PlanSummaryResult:
    plan_name: str
    profit_percentage: Decimal
    duration: int


@dataclass(frozen=True)
class InvestmentResult:
    """Output DTO for an investment with its plan summary."""

    id: str
    user_id: str
    plan_id: str
    invested_amount: Decimal
    expected_return: Decimal
    actual_return: Optional[Decimal]
    start_date: datetime
    end_date: datetime
    status: str
    plan: Optional[PlanSummaryResult] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, investment: Investment) -> "InvestmentResult":
        plan = None
        if investment.plan is not None:
            plan = PlanSummaryResult(
                plan_name=investment.plan.plan_name,
                profit_percentage=investment.plan.profit_percentage,
                duration=investment.plan.duration,
            )
        return cls(
            id=investment.id,
            user_id=investment.user_id,
            plan_id=investment.plan_id,
            invested_amount=investment.invested_amount,
            expected_return=investment.expected_return,
            actual_return=investment.actual_return,
            start_date=investment.start_date,
            end_date=investment.end_date,
            status=investment.status.value,
            plan=plan,
            created_at=investment.created_at,
        )


@dataclass(frozen=True)
class MaturedInvestmentResult:
    """One investment completed by a maturity run."""

    id: str
    plan_name: str
    amount: Decimal
    return_amount: Decimal


@dataclass(frozen=True)
class MaturityReport:
    """Output DTO for a maturity run.

    Attributes:
        updated: Number of investments moved to COMPLETED.
        investments: Summary of each completed investment.
        failed: Ids of due investments whose unit of work rolled back.
    """

    updated: int
    investments: list[MaturedInvestmentResult] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class GetPlanQuery:
    plan_id: str


@dataclass(frozen=True)
class CreatePlanCommand:
    """Input DTO for a new investment plan."""

    plan_name: str
    minimum_investment: Decimal
    maximum_investment: Decimal
    profit_percentage: Decimal
    duration: int
    description: Optional[str] = None


@dataclass(frozen=True)
class UpdatePlanCommand:
    """Input DTO replacing a plan's terms."""

    plan_id: str
    plan_name: str
    minimum_investment: Decimal
    maximum_investment: Decimal
    profit_percentage: Decimal
    duration: int
    description: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class DeletePlanCommand:
    plan_id: str


@dataclass(frozen=True)
class PlanResult:
    """Output DTO for an investment plan."""

    id: str
    plan_name: str
    description: Optional[str]
    minimum_investment: Decimal
    maximum_investment: Decimal
    profit_percentage: Decimal
    duration: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, plan: InvestmentPlan) -> "PlanResult":
        return cls(
            id=plan.id,
            plan_name=plan.plan_name,
            description=plan.description,
            minimum_investment=plan.minimum_investment,
            maximum_investment=plan.maximum_investment,
            profit_percentage=plan.profit_percentage,
            duration=plan.duration,
            is_active=plan.is_active,
            created_at=plan.created_at,
            updated_at=plan.updated_at,
        )


@dataclass(frozen=True)
class ActiveInvestmentResult:
    id: str
    invested_amount: Decimal
    start_date: datetime
    status: str


@dataclass(frozen=True)
class PlanDetailResult:
    """A plan plus the active investments it currently backs."""

    plan: PlanResult
    investments: list[ActiveInvestmentResult] = field(default_factory=list)
