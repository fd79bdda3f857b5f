"""
Use case: Invest in a plan.

Input: CreateInvestmentCommand (user_id, plan_id, invested_amount)
Output: InvestmentResult
Side effects: Inserts an ACTIVE investment, debits the wallet and appends
    an INVESTMENT ledger entry, all in one unit of work.
Failure cases: ValidationError, PlanNotFoundError, PlanInactiveError,
    AmountOutOfRangeError, InsufficientFundsError.
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import uuid4

from app.application.investments.dtos import CreateInvestmentCommand, InvestmentResult
from app.domain.investments.entities import (
    Investment,
    InvestmentStatus,
    LedgerTransaction,
    PlanSummary,
    TransactionType,
)
from app.domain.investments.errors import PlanNotFoundError
from app.domain.investments.lifecycle import (
    compute_end_date,
    compute_expected_return,
    ensure_can_debit,
    ensure_plan_accepts,
)
from app.domain.investments.ports import InvestmentUnitOfWork
from app.domain.shared.clock import utc_now
from app.domain.shared.errors import ValidationError
from app.domain.shared.money import ZERO, to_money

logger = logging.getLogger(__name__)


class CreateInvestmentUseCase:
    """Orchestrates a new investment.

    The wallet row is locked before the balance check, so the check and
    the debit cannot interleave with another debit or credit on the
    same wallet. Nothing is written unless every rule passes.
    """

    def __init__(
        self,
        uow_factory: Callable[[], InvestmentUnitOfWork],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    def execute(self, command: CreateInvestmentCommand) -> InvestmentResult:
        """Run the create investment use case.

        Args:
            command: Investor, plan and principal.

        Returns:
            The persisted investment with its plan summary.

        Raises:
            ValidationError: Missing identifiers or non-positive amount.
            PlanNotFoundError: The plan does not exist.
            PlanInactiveError: The plan no longer accepts investments.
            AmountOutOfRangeError: The amount is outside the plan bounds.
            InsufficientFundsError: The wallet cannot cover the amount.
        """
        if not command.user_id or not command.plan_id:
            raise ValidationError("Missing required fields")
        if command.invested_amount <= ZERO:
            raise ValidationError("Investment amount must be greater than 0")

        amount = to_money(command.invested_amount)
        logger.info(
            "Creating investment: user=%s, plan=%s", command.user_id, command.plan_id
        )

        with self._uow_factory() as uow:
            plan = uow.plans.get(command.plan_id)
            if plan is None:
                raise PlanNotFoundError(command.plan_id)
            ensure_plan_accepts(plan, amount)

            wallet = ensure_can_debit(uow.wallets.get_for_update(command.user_id), amount)

            now = self._clock()
            investment = uow.investments.add(
                Investment(
                    id=str(uuid4()),
                    user_id=command.user_id,
                    plan_id=plan.id,
                    invested_amount=amount,
                    expected_return=compute_expected_return(amount, plan.profit_percentage),
                    start_date=now,
                    end_date=compute_end_date(now, plan.duration),
                    status=InvestmentStatus.ACTIVE,
                    plan=PlanSummary(
                        plan_name=plan.plan_name,
                        profit_percentage=plan.profit_percentage,
                        duration=plan.duration,
                    ),
                    created_at=now,
                )
            )
            uow.wallets.set_balance(wallet.id, to_money(wallet.balance - amount))
            uow.ledger.append(
                LedgerTransaction(
                    user_id=command.user_id,
                    type=TransactionType.INVESTMENT,
                    amount=amount,
                    description=f"Investment in {plan.plan_name} plan",
                )
            )
            uow.commit()

        logger.info("Investment %s created for user=%s", investment.id, command.user_id)
        return InvestmentResult.from_entity(investment)
