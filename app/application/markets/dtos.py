"""
Data Transfer Objects for the markets application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class GetOrderBookQuery:
    """Input DTO for an order book view.

    Attributes:
        trading_pair: Pair symbol, e.g. "BNX/USDT".
        limit: Maximum entries per side. None means the configured default.
    """

    trading_pair: str
    limit: Optional[int] = None


@dataclass(frozen=True)
class OrderBookEntryResult:
    id: str
    price: Decimal
    amount: Decimal
    filled_amount: Decimal
    remaining_amount: Decimal
    status: str
    created_at: datetime


@dataclass(frozen=True)
class OrderBookResult:
    """Output DTO for an order book.

    Attributes:
        trading_pair: The requested symbol.
        buy_orders: Bids, best (highest) price first.
        sell_orders: Asks, best (lowest) price first.
        best_bid: Highest bid price, None when there are no bids.
        best_ask: Lowest ask price, None when there are no asks.
        spread: best_ask - best_bid when both sides are present.
        timestamp: When the view was assembled.
    """

    trading_pair: str
    buy_orders: list[OrderBookEntryResult]
    sell_orders: list[OrderBookEntryResult]
    best_bid: Optional[Decimal]
    best_ask: Optional[Decimal]
    spread: Optional[Decimal]
    timestamp: datetime


@dataclass(frozen=True)
class GetRecentTradesQuery:
    """Input DTO for the recent trades view.

    Attributes:
        trading_pair: Pair symbol.
        limit: Maximum trades returned. None means the configured default.
        viewer_id: User the BUY/SELL label is relative to, if any.
    """

    trading_pair: str
    limit: Optional[int] = None
    viewer_id: Optional[str] = None


@dataclass(frozen=True)
class TraderResult:
    id: str
    name: Optional[str]
    email: str


@dataclass(frozen=True)
class TradeResult:
    id: str
    price: Decimal
    amount: Decimal
    total_value: Decimal
    side: Optional[str]
    created_at: datetime
    buyer: TraderResult
    seller: TraderResult


@dataclass(frozen=True)
class RecentTradesResult:
    trading_pair: str
    trades: list[TradeResult]
    timestamp: datetime


@dataclass(frozen=True)
class TradingPairResult:
    id: str
    symbol: str
    base_asset: str
    quote_asset: str
    is_active: bool
    min_order_size: Decimal
    max_order_size: Decimal
    price_precision: int
    amount_precision: int
    maker_fee: Decimal
    taker_fee: Decimal
    order_count: int
    trade_count: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class GetOrderDetailQuery:
    order_id: str
    user_id: str


@dataclass(frozen=True)
class OrderStatisticsResult:
    total_filled_value: Decimal
    average_price: Decimal
    fill_percentage: Decimal


@dataclass(frozen=True)
class OrderDetailResult:
    """Output DTO for one order with the trades that filled it."""

    id: str
    type: str
    side: str
    amount: Decimal
    price: Optional[Decimal]
    filled_amount: Decimal
    remaining_amount: Decimal
    status: str
    created_at: datetime
    updated_at: Optional[datetime]
    filled_at: Optional[datetime]
    statistics: OrderStatisticsResult
    trades: list[TradeResult] = field(default_factory=list)
