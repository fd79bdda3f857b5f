"""
Adapter: Order repository.

Implements OrderRepository port over the orders table. Ordering and
capping of book sides happen in SQL so only ``limit`` rows per side
leave the database.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine

from app.domain.markets.entities import (
    RESTING_STATUSES,
    Order,
    OrderSide,
    OrderStatus,
    OrderType,
)
from app.domain.markets.ports import OrderRepository
from app.infrastructure.persistence.database import read_session
from app.infrastructure.persistence.models import OrderModel

logger = logging.getLogger(__name__)


def order_from_row(row: OrderModel) -> Order:
    return Order(
        id=row.id,
        user_id=row.user_id,
        trading_pair_id=row.trading_pair_id,
        type=OrderType(row.type),
        side=OrderSide(row.side),
        price=row.price,
        amount=row.amount,
        filled_amount=row.filled_amount,
        status=OrderStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
        filled_at=row.filled_at,
    )


class OrderRepositoryAdapter(OrderRepository):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_resting(self, trading_pair_id: str, side: OrderSide, limit: int) -> list[Order]:
        """Return one side of the book in price-time priority.

        Args:
            trading_pair_id: Pair the orders rest on.
            side: BUY for bids (price descending), SELL for asks (ascending).
            limit: Maximum rows returned.

        Returns:
            Resting limit orders with a positive remaining amount. Market
            orders carry no price and never rest in the book.
        """
        price_order = OrderModel.price.desc() if side is OrderSide.BUY else OrderModel.price.asc()
        query = (
            select(OrderModel)
            .where(
                OrderModel.trading_pair_id == trading_pair_id,
                OrderModel.side == side.value,
                OrderModel.price.is_not(None),
                OrderModel.status.in_([s.value for s in RESTING_STATUSES]),
                OrderModel.amount > OrderModel.filled_amount,
            )
            .order_by(price_order, OrderModel.created_at.asc())
            .limit(limit)
        )
        with read_session(self._engine, "order book") as session:
            orders = [order_from_row(row) for row in session.scalars(query).all()]

        logger.debug("Fetched %d %s orders for pair=%s.", len(orders), side.value, trading_pair_id)
        return orders

    def get_for_user(self, order_id: str, user_id: str) -> Optional[Order]:
        with read_session(self._engine, "order lookup") as session:
            row = session.scalars(
                select(OrderModel).where(
                    OrderModel.id == order_id, OrderModel.user_id == user_id
                )
            ).first()
            return order_from_row(row) if row is not None else None
