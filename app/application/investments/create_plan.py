"""
Use case: Create an investment plan (administrator).

Input: CreatePlanCommand
Output: PlanResult
Side effects: Inserts an active plan.
Failure cases: InvalidPlanTermsError.
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import uuid4

from app.application.investments.dtos import CreatePlanCommand, PlanResult
from app.domain.investments.entities import InvestmentPlan
from app.domain.investments.errors import InvalidPlanTermsError
from app.domain.investments.lifecycle import validate_plan_terms
from app.domain.investments.ports import InvestmentUnitOfWork
from app.domain.shared.clock import utc_now
from app.domain.shared.money import to_money

logger = logging.getLogger(__name__)


class CreatePlanUseCase:
    def __init__(
        self,
        uow_factory: Callable[[], InvestmentUnitOfWork],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    def execute(self, command: CreatePlanCommand) -> PlanResult:
        """Validate the terms and persist a new plan.

        Raises:
            InvalidPlanTermsError: Empty name or inconsistent terms.
        """
        if not command.plan_name or not command.plan_name.strip():
            raise InvalidPlanTermsError("Missing required fields")
        validate_plan_terms(
            command.minimum_investment,
            command.maximum_investment,
            command.profit_percentage,
            command.duration,
        )

        now = self._clock()
        with self._uow_factory() as uow:
            plan = uow.plans.add(
                InvestmentPlan(
                    id=str(uuid4()),
                    plan_name=command.plan_name.strip(),
                    description=command.description or None,
                    minimum_investment=to_money(command.minimum_investment),
                    maximum_investment=to_money(command.maximum_investment),
                    profit_percentage=command.profit_percentage,
                    duration=command.duration,
                    is_active=True,
                    created_at=now,
                    updated_at=now,
                )
            )
            uow.commit()

        logger.info("Investment plan %s (%s) created", plan.id, plan.plan_name)
        return PlanResult.from_entity(plan)
