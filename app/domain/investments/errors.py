"""
Domain-specific errors for the investments bounded context.

All errors raised from the investments domain layer are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from decimal import Decimal

from app.domain.shared.errors import (
    InsufficientFundsError,
    InvalidStateError,
    NotFoundError,
    OutOfRangeError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "AmountOutOfRangeError",
    "InsufficientFundsError",
    "InvalidPlanTermsError",
    "PlanHasActiveInvestmentsError",
    "PlanHasInvestmentHistoryError",
    "PlanInactiveError",
    "PlanNotFoundError",
    "TriggerUnauthorizedError",
    "WalletNotFoundError",
]


class PlanNotFoundError(NotFoundError):
    """Raised when an investment plan does not exist."""

    def __init__(self, plan_id: str) -> None:
        super().__init__("Investment plan not found")
        self.plan_id = plan_id


class PlanInactiveError(InvalidStateError):
    """Raised when investing in a plan that no longer accepts investments."""

    def __init__(self, plan_id: str) -> None:
        super().__init__("Investment plan is not active")
        self.plan_id = plan_id


class AmountOutOfRangeError(OutOfRangeError):
    """Raised when the principal lies outside the plan bounds."""

    def __init__(self, amount: Decimal, minimum: Decimal, maximum: Decimal) -> None:
        super().__init__(
            f"Investment amount must be between ${minimum.normalize():f} "
            f"and ${maximum.normalize():f}"
        )
        self.amount = amount
        self.minimum = minimum
        self.maximum = maximum


class InvalidPlanTermsError(ValidationError):
    """Raised when plan bounds, profit or duration are inconsistent."""


class PlanHasActiveInvestmentsError(InvalidStateError):
    """Raised when deleting a plan that still backs active investments."""

    def __init__(self, plan_id: str, active_count: int) -> None:
        super().__init__("Cannot delete plan with active investments")
        self.plan_id = plan_id
        self.active_count = active_count


class WalletNotFoundError(NotFoundError):
    """Raised when crediting a user who has no wallet."""

    def __init__(self, user_id: str) -> None:
        super().__init__("Wallet not found")
        self.user_id = user_id


class TriggerUnauthorizedError(UnauthorizedError):
    """Raised when the maturity trigger is called with a bad bearer token."""

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class PlanHasInvestmentHistoryError(InvalidStateError):
    """Raised when deleting a plan that completed investments still reference."""

    def __init__(self, plan_id: str) -> None:
        super().__init__(
            "Cannot delete plan with investment history; deactivate it instead"
        )
        self.plan_id = plan_id
