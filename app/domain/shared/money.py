"""
Decimal helpers for currency amounts.

All balances and amounts are stored with eight decimal places; every
computed amount is quantized to that scale before it is persisted.
"""

from decimal import ROUND_HALF_UP, Decimal

MONEY_SCALE = 8
MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_SCALE)
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Convert a value to a Decimal quantized to the storage scale.

    Floats are routed through ``str`` so that binary artefacts
    (``0.1 + 0.2``) do not leak into the ledger.
    """
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def percentage_of(amount: Decimal, percentage: Decimal) -> Decimal:
    """Return ``amount * percentage / 100`` at storage scale."""
    return to_money(amount * percentage / HUNDRED)
