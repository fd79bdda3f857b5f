"""
Adapter: Investment plan repository.

Implements InvestmentPlanRepository port over the investment_plans table.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.domain.investments.entities import InvestmentPlan
from app.domain.investments.ports import InvestmentPlanRepository
from app.infrastructure.persistence.models import InvestmentPlanModel

logger = logging.getLogger(__name__)


def plan_from_row(row: InvestmentPlanModel) -> InvestmentPlan:
    return InvestmentPlan(
        id=row.id,
        plan_name=row.plan_name,
        description=row.description,
        minimum_investment=row.minimum_investment,
        maximum_investment=row.maximum_investment,
        profit_percentage=row.profit_percentage,
        duration=row.duration,
        is_active=row.is_active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class InvestmentPlanRepositoryAdapter(InvestmentPlanRepository):
    """SQLAlchemy implementation of the plan catalog."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, plan_id: str) -> Optional[InvestmentPlan]:
        row = self._session.get(InvestmentPlanModel, plan_id)
        return plan_from_row(row) if row is not None else None

    def list_active(self) -> list[InvestmentPlan]:
        rows = self._session.scalars(
            select(InvestmentPlanModel)
            .where(InvestmentPlanModel.is_active.is_(True))
            .order_by(InvestmentPlanModel.minimum_investment.asc())
        ).all()
        return [plan_from_row(row) for row in rows]

    def add(self, plan: InvestmentPlan) -> InvestmentPlan:
        row = InvestmentPlanModel(
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
        self._session.add(row)
        self._session.flush()
        return plan_from_row(row)

    def update(self, plan: InvestmentPlan) -> InvestmentPlan:
        row = self._session.get(InvestmentPlanModel, plan.id, with_for_update=True)
        if row is None:
            raise LookupError(f"Investment plan {plan.id} vanished during update")
        row.plan_name = plan.plan_name
        row.description = plan.description
        row.minimum_investment = plan.minimum_investment
        row.maximum_investment = plan.maximum_investment
        row.profit_percentage = plan.profit_percentage
        row.duration = plan.duration
        row.is_active = plan.is_active
        row.updated_at = plan.updated_at
        self._session.flush()
        return plan_from_row(row)

    def delete(self, plan_id: str) -> None:
        self._session.execute(
            delete(InvestmentPlanModel).where(InvestmentPlanModel.id == plan_id)
        )
        logger.debug("Deleted investment plan %s.", plan_id)
