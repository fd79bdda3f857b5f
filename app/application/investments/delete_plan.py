"""
Use case: Delete an investment plan (administrator).

Input: DeletePlanCommand (plan_id)
Output: None
Side effects: Removes the plan row.
Failure cases: PlanNotFoundError, PlanHasActiveInvestmentsError,
    PlanHasInvestmentHistoryError (completed investments still point at it).
"""

import logging
from typing import Callable

from app.application.investments.dtos import DeletePlanCommand
from app.domain.investments.entities import InvestmentStatus
from app.domain.investments.errors import (
    PlanHasActiveInvestmentsError,
    PlanHasInvestmentHistoryError,
    PlanNotFoundError,
)
from app.domain.investments.ports import InvestmentUnitOfWork

logger = logging.getLogger(__name__)


class DeletePlanUseCase:
    def __init__(self, uow_factory: Callable[[], InvestmentUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def execute(self, command: DeletePlanCommand) -> None:
        with self._uow_factory() as uow:
            if uow.plans.get(command.plan_id) is None:
                raise PlanNotFoundError(command.plan_id)
            active = uow.investments.count_for_plan(
                command.plan_id, InvestmentStatus.ACTIVE
            )
            if active > 0:
                raise PlanHasActiveInvestmentsError(command.plan_id, active)
            if uow.investments.count_for_plan(command.plan_id) > 0:
                raise PlanHasInvestmentHistoryError(command.plan_id)
            uow.plans.delete(command.plan_id)
            uow.commit()

        logger.info("Investment plan %s deleted", command.plan_id)
