"""
Tests for the investments domain layer.

Tests lifecycle rules, entities and error classes in isolation.
No external dependencies or IO required.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from app.domain.investments.entities import (
    Investment,
    InvestmentPlan,
    InvestmentStatus,
    Wallet,
)
from app.domain.investments.errors import (
    AmountOutOfRangeError,
    InvalidPlanTermsError,
    PlanInactiveError,
)
from app.domain.investments.lifecycle import (
    compute_end_date,
    compute_expected_return,
    ensure_can_debit,
    ensure_plan_accepts,
    maturity_return,
    validate_plan_terms,
)
from app.domain.shared.errors import InsufficientFundsError, OutOfRangeError
from app.domain.shared.money import to_money


def make_plan(**overrides) -> InvestmentPlan:
    fields = dict(
        id="plan-1",
        plan_name="Starter",
        minimum_investment=Decimal("100"),
        maximum_investment=Decimal("1000"),
        profit_percentage=Decimal("10"),
        duration=30,
    )
    fields.update(overrides)
    return InvestmentPlan(**fields)


def make_investment(**overrides) -> Investment:
    fields = dict(
        id="inv-1",
        user_id="user-1",
        plan_id="plan-1",
        invested_amount=Decimal("500"),
        expected_return=Decimal("550"),
        start_date=datetime(2026, 1, 1),
        end_date=datetime(2026, 1, 31),
    )
    fields.update(overrides)
    return Investment(**fields)


class TestExpectedReturn:
    """Tests for the principal-plus-profit computation."""

    def test_ten_percent_of_five_hundred(self) -> None:
        assert compute_expected_return(Decimal("500"), Decimal("10")) == Decimal("550")

    def test_fractional_percentage_rounds_to_storage_scale(self) -> None:
        result = compute_expected_return(Decimal("333.33"), Decimal("7.5"))
        assert result == Decimal("358.32975000")
        assert result.as_tuple().exponent == -8

    def test_float_input_does_not_leak_binary_noise(self) -> None:
        assert to_money(0.1 + 0.2) == Decimal("0.30000000")


class TestEndDate:
    def test_duration_in_days(self) -> None:
        start = datetime(2026, 1, 1, 12, 0)
        assert compute_end_date(start, 30) == datetime(2026, 1, 31, 12, 0)

    def test_crosses_month_and_leap_day(self) -> None:
        start = datetime(2028, 2, 28)
        assert compute_end_date(start, 2) == datetime(2028, 3, 1)


class TestPlanBounds:
    """Tests for plan acceptance rules."""

    def test_bounds_are_inclusive(self) -> None:
        plan = make_plan()
        ensure_plan_accepts(plan, Decimal("100"))
        ensure_plan_accepts(plan, Decimal("1000"))

    def test_below_minimum_rejected(self) -> None:
        with pytest.raises(AmountOutOfRangeError) as exc_info:
            ensure_plan_accepts(make_plan(), Decimal("50"))
        assert exc_info.value.message == "Investment amount must be between $100 and $1000"
        assert isinstance(exc_info.value, OutOfRangeError)

    def test_above_maximum_rejected(self) -> None:
        with pytest.raises(AmountOutOfRangeError):
            ensure_plan_accepts(make_plan(), Decimal("1000.01"))

    def test_inactive_plan_checked_before_range(self) -> None:
        """An inactive plan reports inactivity even for out-of-range amounts."""
        with pytest.raises(PlanInactiveError):
            ensure_plan_accepts(make_plan(is_active=False), Decimal("5"))


class TestWalletDebit:
    def test_exact_balance_is_enough(self) -> None:
        wallet = Wallet(id="w-1", user_id="user-1", balance=Decimal("500"))
        assert ensure_can_debit(wallet, Decimal("500")) is wallet

    def test_short_balance_rejected(self) -> None:
        wallet = Wallet(id="w-1", user_id="user-1", balance=Decimal("100"))
        with pytest.raises(InsufficientFundsError) as exc_info:
            ensure_can_debit(wallet, Decimal("500"))
        assert exc_info.value.message == "Insufficient balance"
        assert exc_info.value.available == "100"

    def test_missing_wallet_counts_as_empty(self) -> None:
        with pytest.raises(InsufficientFundsError) as exc_info:
            ensure_can_debit(None, Decimal("1"))
        assert exc_info.value.available == "0"


class TestInvestmentEntity:
    """Tests for the Investment entity state rules."""

    def test_due_when_end_date_reached(self) -> None:
        investment = make_investment()
        assert investment.is_due(datetime(2026, 1, 31))
        assert not investment.is_due(datetime(2026, 1, 30, 23, 59))

    def test_completed_investment_is_never_due(self) -> None:
        investment = make_investment().completed(Decimal("550"))
        assert investment.status is InvestmentStatus.COMPLETED
        assert investment.actual_return == Decimal("550")
        assert not investment.is_due(datetime(2027, 1, 1))

    def test_maturity_pays_frozen_expected_return(self) -> None:
        investment = make_investment(expected_return=Decimal("550"))
        assert maturity_return(investment) == Decimal("550")


class TestPlanTerms:
    """Tests for administrator-supplied plan validation."""

    def test_valid_terms_pass(self) -> None:
        validate_plan_terms(Decimal("100"), Decimal("1000"), Decimal("10"), 30)

    @pytest.mark.parametrize(
        "minimum, maximum, profit, duration, message",
        [
            ("0", "1000", "10", 30, "Minimum investment must be greater than 0"),
            ("1000", "1000", "10", 30, "Minimum investment must be less than maximum investment"),
            ("100", "1000", "0", 30, "Profit percentage must be greater than 0"),
            ("100", "1000", "10", 0, "Duration must be at least 1 day"),
        ],
    )
    def test_inconsistent_terms_rejected(self, minimum, maximum, profit, duration, message) -> None:
        with pytest.raises(InvalidPlanTermsError) as exc_info:
            validate_plan_terms(Decimal(minimum), Decimal(maximum), Decimal(profit), duration)
        assert exc_info.value.message == message
