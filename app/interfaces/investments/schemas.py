"""
Pydantic schemas for investments API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from app.interfaces.schemas import CamelModel

ID_MAX_LEN = 64


class CreateInvestmentRequest(CamelModel):
    """Request schema for investing in a plan.

    Attributes:
        user_id: Investor identifier.
        plan_id: Plan identifier.
        invested_amount: Principal, strictly positive.
    """

    user_id: str = Field(..., min_length=1, max_length=ID_MAX_LEN)
    plan_id: str = Field(..., min_length=1, max_length=ID_MAX_LEN)
    invested_amount: Decimal = Field(..., gt=0, max_digits=20, decimal_places=8)


class PlanSummaryItem(CamelModel):
    plan_name: str
    profit_percentage: Decimal
    duration: int


class InvestmentItem(CamelModel):
    """A single investment in the response."""

    id: str
    user_id: str
    plan_id: str
    invested_amount: Decimal
    expected_return: Decimal
    actual_return: Optional[Decimal] = None
    start_date: datetime
    end_date: datetime
    status: str
    plan: Optional[PlanSummaryItem] = None
    created_at: Optional[datetime] = None


class InvestmentResponse(CamelModel):
    success: bool = True
    data: InvestmentItem
    message: Optional[str] = None


class InvestmentListResponse(CamelModel):
    success: bool = True
    data: list[InvestmentItem]


class MaturedInvestmentItem(CamelModel):
    id: str
    plan_name: str
    amount: Decimal
    return_amount: Decimal


class MaturityResponse(CamelModel):
    """Response schema for a maturity run."""

    success: bool = True
    message: str
    updated: int
    investments: list[MaturedInvestmentItem] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)


class PlanRequest(CamelModel):
    """Request schema for creating or replacing an investment plan."""

    plan_name: str = Field(..., min_length=1, max_length=120)
    minimum_investment: Decimal = Field(..., gt=0, max_digits=20, decimal_places=8)
    maximum_investment: Decimal = Field(..., gt=0, max_digits=20, decimal_places=8)
    profit_percentage: Decimal = Field(..., max_digits=10, decimal_places=4)
    duration: int = Field(..., description="Lock-up period in days")
    description: Optional[str] = Field(default=None, max_length=2000)


class UpdatePlanRequest(PlanRequest):
    is_active: bool = True


class PlanItem(CamelModel):
    id: str
    plan_name: str
    description: Optional[str] = None
    minimum_investment: Decimal
    maximum_investment: Decimal
    profit_percentage: Decimal
    duration: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ActiveInvestmentItem(CamelModel):
    id: str
    invested_amount: Decimal
    start_date: datetime
    status: str


class PlanDetailItem(PlanItem):
    investments: list[ActiveInvestmentItem] = Field(default_factory=list)


class PlanResponse(CamelModel):
    success: bool = True
    data: PlanItem
    message: Optional[str] = None


class PlanDetailResponse(CamelModel):
    success: bool = True
    data: PlanDetailItem


class PlanListResponse(CamelModel):
    success: bool = True
    data: list[PlanItem]
