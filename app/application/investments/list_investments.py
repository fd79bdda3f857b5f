"""
Use case: List a user's investments.

Input: ListInvestmentsQuery (user_id)
Output: list[InvestmentResult], newest first
Side effects: None (read-only query).
Failure cases: ValidationError when user_id is missing.
"""

import logging
from typing import Callable

from app.application.investments.dtos import InvestmentResult, ListInvestmentsQuery
from app.domain.investments.ports import InvestmentUnitOfWork
from app.domain.shared.errors import ValidationError

logger = logging.getLogger(__name__)


class ListInvestmentsUseCase:
    """Read-only query over a user's investments."""

    def __init__(self, uow_factory: Callable[[], InvestmentUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def execute(self, query: ListInvestmentsQuery) -> list[InvestmentResult]:
        if not query.user_id:
            raise ValidationError("User ID is required")

        logger.info("Listing investments for user=%s", query.user_id)
        with self._uow_factory() as uow:
            investments = uow.investments.list_for_user(query.user_id)
        return [InvestmentResult.from_entity(inv) for inv in investments]
