"""
Use case: Replace an investment plan's terms (administrator).

Input: UpdatePlanCommand
Output: PlanResult
Side effects: Overwrites the plan row. Issued investments keep the
    expected return frozen at their creation.
Failure cases: InvalidPlanTermsError, PlanNotFoundError.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable

from app.application.investments.dtos import PlanResult, UpdatePlanCommand
from app.domain.investments.errors import InvalidPlanTermsError, PlanNotFoundError
from app.domain.investments.lifecycle import validate_plan_terms
from app.domain.investments.ports import InvestmentUnitOfWork
from app.domain.shared.clock import utc_now
from app.domain.shared.money import to_money

logger = logging.getLogger(__name__)


class UpdatePlanUseCase:
    def __init__(
        self,
        uow_factory: Callable[[], InvestmentUnitOfWork],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    def execute(self, command: UpdatePlanCommand) -> PlanResult:
        if not command.plan_name or not command.plan_name.strip():
            raise InvalidPlanTermsError("Missing required fields")
        validate_plan_terms(
            command.minimum_investment,
            command.maximum_investment,
            command.profit_percentage,
            command.duration,
        )

        with self._uow_factory() as uow:
            existing = uow.plans.get(command.plan_id)
            if existing is None:
                raise PlanNotFoundError(command.plan_id)
            plan = uow.plans.update(
                replace(
                    existing,
                    plan_name=command.plan_name.strip(),
                    description=command.description or None,
                    minimum_investment=to_money(command.minimum_investment),
                    maximum_investment=to_money(command.maximum_investment),
                    profit_percentage=command.profit_percentage,
                    duration=command.duration,
                    is_active=command.is_active,
                    updated_at=self._clock(),
                )
            )
            uow.commit()

        logger.info("Investment plan %s updated (active=%s)", plan.id, plan.is_active)
        return PlanResult.from_entity(plan)
