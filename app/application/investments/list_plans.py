"""
Use case: List the investment plans open to new investments.

Output: list[PlanResult] ordered by minimum investment ascending
Side effects: None (read-only query).
"""

import logging
from typing import Callable

from app.application.investments.dtos import PlanResult
from app.domain.investments.ports import InvestmentUnitOfWork

logger = logging.getLogger(__name__)


class ListPlansUseCase:
    def __init__(self, uow_factory: Callable[[], InvestmentUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def execute(self) -> list[PlanResult]:
        with self._uow_factory() as uow:
            plans = uow.plans.list_active()
        logger.debug("Fetched %d active plans.", len(plans))
        return [PlanResult.from_entity(plan) for plan in plans]
