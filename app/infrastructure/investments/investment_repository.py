"""
Adapter: Investment repository.

Implements InvestmentRepository port over the investments table.
Row locks use SELECT ... FOR UPDATE; dialects without row locking
(SQLite) ignore the clause.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session, joinedload

from app.domain.investments.entities import (
    ActiveInvestmentSummary,
    Investment,
    InvestmentStatus,
    PlanSummary,
)
from app.domain.investments.ports import InvestmentRepository
from app.domain.shared.clock import utc_now
from app.infrastructure.persistence.models import InvestmentModel

logger = logging.getLogger(__name__)


def investment_from_row(row: InvestmentModel, with_plan: bool = True) -> Investment:
    plan = None
    if with_plan and row.plan is not None:
        plan = PlanSummary(
            plan_name=row.plan.plan_name,
            profit_percentage=row.plan.profit_percentage,
            duration=row.plan.duration,
        )
    return Investment(
        id=row.id,
        user_id=row.user_id,
        plan_id=row.plan_id,
        invested_amount=row.invested_amount,
        expected_return=row.expected_return,
        actual_return=row.actual_return,
        start_date=row.start_date,
        end_date=row.end_date,
        status=InvestmentStatus(row.status),
        plan=plan,
        created_at=row.created_at,
    )


class InvestmentRepositoryAdapter(InvestmentRepository):
    """SQLAlchemy implementation of investment persistence."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, investment: Investment) -> Investment:
        row = InvestmentModel(
            id=investment.id,
            user_id=investment.user_id,
            plan_id=investment.plan_id,
            invested_amount=investment.invested_amount,
            expected_return=investment.expected_return,
            actual_return=investment.actual_return,
            start_date=investment.start_date,
            end_date=investment.end_date,
            status=investment.status.value,
            created_at=investment.created_at,
        )
        self._session.add(row)
        self._session.flush()
        return investment_from_row(row)

    def list_for_user(self, user_id: str) -> list[Investment]:
        rows = self._session.scalars(
            select(InvestmentModel)
            .options(joinedload(InvestmentModel.plan))
            .where(InvestmentModel.user_id == user_id)
            .order_by(InvestmentModel.created_at.desc())
        ).all()
        return [investment_from_row(row) for row in rows]

    def list_due(self, now: datetime) -> list[Investment]:
        rows = self._session.scalars(
            select(InvestmentModel)
            .options(joinedload(InvestmentModel.plan))
            .where(
                InvestmentModel.status == InvestmentStatus.ACTIVE.value,
                InvestmentModel.end_date <= now,
            )
            .order_by(InvestmentModel.end_date.asc())
        ).all()
        logger.debug("Found %d due investments.", len(rows))
        return [investment_from_row(row) for row in rows]

    def get_for_update(self, investment_id: str) -> Optional[Investment]:
        row = self._session.scalars(
            select(InvestmentModel)
            .where(InvestmentModel.id == investment_id)
            .with_for_update()
        ).first()
        return investment_from_row(row, with_plan=False) if row is not None else None

    def mark_completed(self, investment_id: str, actual_return: Decimal) -> None:
        self._session.execute(
            update(InvestmentModel)
            .where(InvestmentModel.id == investment_id)
            .values(
                status=InvestmentStatus.COMPLETED.value,
                actual_return=actual_return,
                updated_at=utc_now(),
            )
        )

    def list_active_for_plan(self, plan_id: str) -> list[ActiveInvestmentSummary]:
        rows = self._session.scalars(
            select(InvestmentModel).where(
                InvestmentModel.plan_id == plan_id,
                InvestmentModel.status == InvestmentStatus.ACTIVE.value,
            )
        ).all()
        return [
            ActiveInvestmentSummary(
                id=row.id,
                invested_amount=row.invested_amount,
                start_date=row.start_date,
                status=InvestmentStatus(row.status),
            )
            for row in rows
        ]

    def count_for_plan(
        self, plan_id: str, status: Optional[InvestmentStatus] = None
    ) -> int:
        query = select(func.count(InvestmentModel.id)).where(
            InvestmentModel.plan_id == plan_id
        )
        if status is not None:
            query = query.where(InvestmentModel.status == status.value)
        return self._session.scalar(query) or 0
