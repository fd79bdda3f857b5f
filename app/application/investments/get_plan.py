"""
Use case: Get one investment plan with its active investments.

Input: GetPlanQuery (plan_id)
Output: PlanDetailResult
Side effects: None (read-only query).
Failure cases: PlanNotFoundError.
"""

from typing import Callable

from app.application.investments.dtos import (
    ActiveInvestmentResult,
    GetPlanQuery,
    PlanDetailResult,
    PlanResult,
)
from app.domain.investments.errors import PlanNotFoundError
from app.domain.investments.ports import InvestmentUnitOfWork


class GetPlanUseCase:
    def __init__(self, uow_factory: Callable[[], InvestmentUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def execute(self, query: GetPlanQuery) -> PlanDetailResult:
        with self._uow_factory() as uow:
            plan = uow.plans.get(query.plan_id)
            if plan is None:
                raise PlanNotFoundError(query.plan_id)
            active = uow.investments.list_active_for_plan(plan.id)

        return PlanDetailResult(
            plan=PlanResult.from_entity(plan),
            investments=[
                ActiveInvestmentResult(
                    id=inv.id,
                    invested_amount=inv.invested_amount,
                    start_date=inv.start_date,
                    status=inv.status.value,
                )
                for inv in active
            ],
        )
