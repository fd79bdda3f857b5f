"""
Use case: Mature every investment whose end date has passed.

Input: MatureInvestmentsCommand (optional cut-off time)
Output: MaturityReport
Side effects: For each due investment, in its own unit of work: status
    COMPLETED with actual return, wallet credit, INVESTMENT_RETURN entry.
Failure cases: None raised. A failing investment is rolled back, logged
    and listed in ``MaturityReport.failed``; the run carries on.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from app.application.investments.dtos import (
    MaturedInvestmentResult,
    MaturityReport,
    MatureInvestmentsCommand,
)
from app.domain.investments.entities import (
    Investment,
    LedgerTransaction,
    TransactionType,
)
from app.domain.investments.errors import WalletNotFoundError
from app.domain.investments.lifecycle import maturity_return
from app.domain.investments.ports import InvestmentUnitOfWork
from app.domain.shared.clock import utc_now
from app.domain.shared.money import to_money

logger = logging.getLogger(__name__)


class MatureInvestmentsUseCase:
    """Drives the ACTIVE -> COMPLETED transition.

    Runs are idempotent: each investment is re-read under a row lock and
    skipped unless it is still ACTIVE, so overlapping or repeated runs
    never credit the same investment twice.
    """

    def __init__(
        self,
        uow_factory: Callable[[], InvestmentUnitOfWork],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    def execute(self, command: MatureInvestmentsCommand) -> MaturityReport:
        """Run the maturity use case.

        Args:
            command: Optional cut-off time; defaults to now.

        Returns:
            Count and summaries of completed investments, plus failures.
        """
        now = command.now or self._clock()
        with self._uow_factory() as uow:
            due = uow.investments.list_due(now)

        if not due:
            logger.info("No investments to update")
            return MaturityReport(updated=0)

        logger.info("Maturing %d due investments (cut-off %s)", len(due), now.isoformat())
        matured: list[MaturedInvestmentResult] = []
        failed: list[str] = []
        for investment in due:
            try:
                result = self._mature_one(investment, now)
            except Exception:
                logger.exception("Failed to mature investment %s", investment.id)
                failed.append(investment.id)
                continue
            if result is not None:
                matured.append(result)

        logger.info(
            "Updated %d investments to completed status (%d failed)",
            len(matured),
            len(failed),
        )
        return MaturityReport(updated=len(matured), investments=matured, failed=failed)

    def _mature_one(
        self, candidate: Investment, now: datetime
    ) -> Optional[MaturedInvestmentResult]:
        with self._uow_factory() as uow:
            investment = uow.investments.get_for_update(candidate.id)
            if investment is None or not investment.is_due(now):
                logger.debug("Investment %s already settled; skipping.", candidate.id)
                return None

            return_amount = maturity_return(investment)
            wallet = uow.wallets.get_for_update(investment.user_id)
            if wallet is None:
                raise WalletNotFoundError(investment.user_id)

            plan_name = candidate.plan.plan_name if candidate.plan else investment.plan_id
            uow.investments.mark_completed(investment.id, return_amount)
            uow.wallets.set_balance(wallet.id, to_money(wallet.balance + return_amount))
            uow.ledger.append(
                LedgerTransaction(
                    user_id=investment.user_id,
                    type=TransactionType.INVESTMENT_RETURN,
                    amount=return_amount,
                    description=f"Investment return from {plan_name} plan",
                )
            )
            uow.commit()

        return MaturedInvestmentResult(
            id=investment.id,
            plan_name=plan_name,
            amount=investment.invested_amount,
            return_amount=return_amount,
        )
