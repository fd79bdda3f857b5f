"""
Investment lifecycle rules.

Pure functions: bounds checks, return computation, maturity dates and
plan term validation. No IO; the application layer feeds them entities
read under a unit of work.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from app.domain.investments.entities import Investment, InvestmentPlan, Wallet
from app.domain.investments.errors import (
    AmountOutOfRangeError,
    InsufficientFundsError,
    InvalidPlanTermsError,
    PlanInactiveError,
)
from app.domain.shared.money import ZERO, percentage_of, to_money


def compute_expected_return(invested_amount: Decimal, profit_percentage: Decimal) -> Decimal:
    """Return principal plus profit, quantized to storage scale.

    >>> compute_expected_return(Decimal("500"), Decimal("10"))
    Decimal('550.00000000')
    """
    principal = to_money(invested_amount)
    return to_money(principal + percentage_of(principal, profit_percentage))


def compute_end_date(start: datetime, duration_days: int) -> datetime:
    return start + timedelta(days=duration_days)


def ensure_plan_accepts(plan: InvestmentPlan, amount: Decimal) -> None:
    """Check that ``plan`` can take a new investment of ``amount``.

    Raises:
        PlanInactiveError: The plan is switched off.
        AmountOutOfRangeError: The amount is outside the plan bounds.
    """
    if not plan.is_active:
        raise PlanInactiveError(plan.id)
    if not plan.accepts(amount):
        raise AmountOutOfRangeError(
            amount, plan.minimum_investment, plan.maximum_investment
        )


def ensure_can_debit(wallet: Wallet | None, amount: Decimal) -> Wallet:
    """Return the wallet if it can cover ``amount``.

    A missing wallet is treated as an empty one.

    Raises:
        InsufficientFundsError: The balance is below ``amount``.
    """
    available = wallet.balance if wallet is not None else ZERO
    if wallet is None or available < amount:
        raise InsufficientFundsError(required=str(amount), available=str(available))
    return wallet


def maturity_return(investment: Investment) -> Decimal:
    """Amount credited when ``investment`` matures.

    The value frozen at creation is authoritative, so later edits to the
    plan never change what an issued investment pays out.
    """
    return to_money(investment.expected_return)


def validate_plan_terms(
    minimum_investment: Decimal,
    maximum_investment: Decimal,
    profit_percentage: Decimal,
    duration: int,
) -> None:
    """Validate administrator-supplied plan terms.

    Raises:
        InvalidPlanTermsError: On any inconsistent term.
    """
    if minimum_investment <= ZERO:
        raise InvalidPlanTermsError("Minimum investment must be greater than 0")
    if minimum_investment >= maximum_investment:
        raise InvalidPlanTermsError(
            "Minimum investment must be less than maximum investment"
        )
    if profit_percentage <= ZERO:
        raise InvalidPlanTermsError("Profit percentage must be greater than 0")
    if duration < 1:
        raise InvalidPlanTermsError("Duration must be at least 1 day")
