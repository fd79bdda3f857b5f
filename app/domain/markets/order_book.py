"""
Order book and trade aggregation rules.

Turns persisted orders and trades into the market views served to
clients. Pure functions; no IO.
"""

import logging
from typing import Callable, Iterable, Optional

from app.domain.markets.entities import (
    Order,
    OrderBook,
    OrderBookEntry,
    OrderDetail,
    OrderSide,
    OrderStatistics,
    Trade,
)
from app.domain.shared.money import HUNDRED, ZERO, to_money

logger = logging.getLogger(__name__)


def price_time_key(side: OrderSide) -> Callable[[Order], tuple]:
    """Sort key giving price-time priority for one side of the book.

    Bids rank highest price first, asks lowest price first. Ties go to
    the older order. Only priced orders can be ranked.
    """
    if side is OrderSide.BUY:
        return lambda order: (-order.price, order.created_at)
    return lambda order: (order.price, order.created_at)


def to_entry(order: Order) -> Optional[OrderBookEntry]:
    """Project an order onto a book entry.

    Returns None when the order has nothing left to fill; such rows are
    not resting liquidity even if their status says otherwise.
    """
    remaining = order.remaining_amount
    if remaining <= ZERO:
        if remaining < ZERO:
            logger.warning(
                "Order %s has filled_amount above amount; left out of the book.",
                order.id,
            )
        return None
    return OrderBookEntry(
        id=order.id,
        price=order.price,
        amount=order.amount,
        filled_amount=order.filled_amount,
        remaining_amount=remaining,
        status=order.status,
        created_at=order.created_at,
    )


def assemble_side(orders: Iterable[Order], side: OrderSide, limit: int) -> list[OrderBookEntry]:
    """Rank resting orders of one side and cap the result at ``limit``.

    Orders without a limit price (market orders) have no place in a
    price-ordered book and are left out.
    """
    ranked = sorted(
        (o for o in orders if o.side is side and o.is_resting and o.price is not None),
        key=price_time_key(side),
    )
    entries = []
    for order in ranked:
        entry = to_entry(order)
        if entry is not None:
            entries.append(entry)
        if len(entries) == limit:
            break
    return entries


def assemble_order_book(
    bids: Iterable[Order], asks: Iterable[Order], limit: int
) -> OrderBook:
    return OrderBook(
        buy_orders=assemble_side(bids, OrderSide.BUY, limit),
        sell_orders=assemble_side(asks, OrderSide.SELL, limit),
    )


def side_for_viewer(trade: Trade, viewer_id: Optional[str]) -> Optional[OrderSide]:
    """Label a trade from the viewer's perspective.

    BUY when the viewer bought, SELL when the viewer sold, None for
    anonymous viewers and third parties. A self-trade counts as BUY.
    """
    if viewer_id is None:
        return None
    if trade.buyer.id == viewer_id:
        return OrderSide.BUY
    if trade.seller.id == viewer_id:
        return OrderSide.SELL
    return None


def compute_statistics(order: Order, trades: Iterable[Trade]) -> OrderStatistics:
    """Fill statistics for an order from the trades that filled it."""
    total_value = sum((t.total_value for t in trades), ZERO)
    filled = order.filled_amount
    average_price = total_value / filled if filled > ZERO else ZERO
    fill_percentage = filled / order.amount * HUNDRED if order.amount > ZERO else ZERO
    return OrderStatistics(
        total_filled_value=to_money(total_value),
        average_price=to_money(average_price),
        fill_percentage=to_money(fill_percentage),
    )


def build_order_detail(order: Order, trades: list[Trade]) -> OrderDetail:
    return OrderDetail(order=order, trades=trades, statistics=compute_statistics(order, trades))


def coerce_limit(limit: Optional[int], default: int, maximum: int) -> int:
    """Clamp a requested view size into ``[1, maximum]``."""
    if limit is None or limit < 1:
        return default
    return min(limit, maximum)
