"""Conversions from markets domain entities to output DTOs."""

from typing import Optional

from app.application.markets.dtos import OrderBookEntryResult, TradeResult, TraderResult
from app.domain.markets.entities import OrderBookEntry, OrderSide, Trade, Trader


def trader_result(trader: Trader) -> TraderResult:
    return TraderResult(id=trader.id, name=trader.name, email=trader.email)


def trade_result(trade: Trade, side: Optional[OrderSide] = None) -> TradeResult:
    return TradeResult(
        id=trade.id,
        price=trade.price,
        amount=trade.amount,
        total_value=trade.total_value,
        side=side.value if side is not None else None,
        created_at=trade.created_at,
        buyer=trader_result(trade.buyer),
        seller=trader_result(trade.seller),
    )


def entry_result(entry: OrderBookEntry) -> OrderBookEntryResult:
    return OrderBookEntryResult(
        id=entry.id,
        price=entry.price,
        amount=entry.amount,
        filled_amount=entry.filled_amount,
        remaining_amount=entry.remaining_amount,
        status=entry.status.value,
        created_at=entry.created_at,
    )
