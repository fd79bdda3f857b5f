"""
Pydantic schemas for market view responses.

All market routes are read-only; request parameters arrive in the query
string and are validated in the route signatures.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from app.interfaces.schemas import CamelModel


class OrderBookEntryItem(CamelModel):
    """One resting order in a side of the book."""

    id: str
    price: Decimal
    amount: Decimal
    filled_amount: Decimal
    remaining_amount: Decimal
    status: str
    created_at: datetime


class OrderBookItem(CamelModel):
    buy_orders: list[OrderBookEntryItem] = Field(default_factory=list)
    sell_orders: list[OrderBookEntryItem] = Field(default_factory=list)
    best_bid: Optional[Decimal] = None
    best_ask: Optional[Decimal] = None
    spread: Optional[Decimal] = None


class OrderBookResponse(CamelModel):
    success: bool = True
    order_book: OrderBookItem
    trading_pair: str
    timestamp: datetime


class TraderItem(CamelModel):
    id: str
    name: Optional[str] = None
    email: str


class TradeItem(CamelModel):
    """An executed trade. ``side`` is relative to the viewer, if any."""

    id: str
    price: Decimal
    amount: Decimal
    total_value: Decimal
    side: Optional[str] = None
    timestamp: datetime
    buyer: TraderItem
    seller: TraderItem


class RecentTradesResponse(CamelModel):
    success: bool = True
    trades: list[TradeItem]
    trading_pair: str
    timestamp: datetime


class TradingPairItem(CamelModel):
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


class TradingPairListResponse(CamelModel):
    success: bool = True
    trading_pairs: list[TradingPairItem]


class OrderStatisticsItem(CamelModel):
    total_filled_value: Decimal
    average_price: Decimal
    fill_percentage: Decimal


class OrderDetailItem(CamelModel):
    id: str
    type: str
    side: str
    amount: Decimal
    price: Optional[Decimal] = None
    filled_amount: Decimal
    remaining_amount: Decimal
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    filled_at: Optional[datetime] = None
    statistics: OrderStatisticsItem
    trades: list[TradeItem] = Field(default_factory=list)


class OrderDetailResponse(CamelModel):
    success: bool = True
    order: OrderDetailItem
