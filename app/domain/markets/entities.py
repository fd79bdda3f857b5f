"""
Domain entities for the markets bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class OrderSide(Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    MARKET = "MARKET"
    LIMIT = "LIMIT"


class OrderStatus(Enum):
    PENDING = "PENDING"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    FILLED = "FILLED"
    CANCELLED = "CANCELLED"


RESTING_STATUSES = (OrderStatus.PENDING, OrderStatus.PARTIALLY_FILLED)


@dataclass(frozen=True)
class TradingPair:
    """A tradable market, e.g. BNX/USDT."""

    id: str
    symbol: str
    base_asset: str
    quote_asset: str
    is_active: bool = True
    min_order_size: Decimal = Decimal("0.001")
    max_order_size: Decimal = Decimal("1000000")
    price_precision: int = 8
    amount_precision: int = 8
    maker_fee: Decimal = Decimal("0.001")
    taker_fee: Decimal = Decimal("0.001")
    order_count: int = 0
    trade_count: int = 0
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Order:
    """A resting or historical order.

    The remaining amount is always derived from amount and filled amount.
    """

    id: str
    user_id: str
    trading_pair_id: str
    side: OrderSide
    amount: Decimal
    filled_amount: Decimal
    status: OrderStatus
    created_at: datetime
    price: Optional[Decimal] = None
    type: OrderType = OrderType.LIMIT
    updated_at: Optional[datetime] = None
    filled_at: Optional[datetime] = None

    @property
    def remaining_amount(self) -> Decimal:
        return self.amount - self.filled_amount

    @property
    def is_resting(self) -> bool:
        return self.status in RESTING_STATUSES


@dataclass(frozen=True)
class Trader:
    """Public identity of a trade counterparty."""

    id: str
    name: Optional[str]
    email: str


@dataclass(frozen=True)
class Trade:
    """An executed match between a buyer and a seller. Immutable."""

    id: str
    trading_pair_id: str
    amount: Decimal
    price: Decimal
    total_value: Decimal
    created_at: datetime
    buyer: Trader
    seller: Trader


@dataclass(frozen=True)
class OrderBookEntry:
    id: str
    price: Decimal
    amount: Decimal
    filled_amount: Decimal
    remaining_amount: Decimal
    status: OrderStatus
    created_at: datetime


@dataclass(frozen=True)
class OrderBook:
    """Two price-ordered sides of resting orders for one pair."""

    buy_orders: list[OrderBookEntry] = field(default_factory=list)
    sell_orders: list[OrderBookEntry] = field(default_factory=list)

    @property
    def best_bid(self) -> Optional[Decimal]:
        return self.buy_orders[0].price if self.buy_orders else None

    @property
    def best_ask(self) -> Optional[Decimal]:
        return self.sell_orders[0].price if self.sell_orders else None

    @property
    def spread(self) -> Optional[Decimal]:
        if self.best_bid is None or self.best_ask is None:
            return None
        return self.best_ask - self.best_bid


@dataclass(frozen=True)
class OrderStatistics:
    total_filled_value: Decimal
    average_price: Decimal
    fill_percentage: Decimal


@dataclass(frozen=True)
class OrderDetail:
    order: Order
    trades: list[Trade]
    statistics: OrderStatistics
