"""
Adapter: Trading pair repository.

Implements TradingPairRepository port over the trading_pairs table.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from app.domain.markets.entities import TradingPair
from app.domain.markets.ports import TradingPairRepository
from app.infrastructure.persistence.database import read_session
from app.infrastructure.persistence.models import OrderModel, TradeModel, TradingPairModel

logger = logging.getLogger(__name__)


def pair_from_row(row: TradingPairModel, order_count: int = 0, trade_count: int = 0) -> TradingPair:
    return TradingPair(
        id=row.id,
        symbol=row.symbol,
        base_asset=row.base_asset,
        quote_asset=row.quote_asset,
        is_active=row.is_active,
        min_order_size=row.min_order_size,
        max_order_size=row.max_order_size,
        price_precision=row.price_precision,
        amount_precision=row.amount_precision,
        maker_fee=row.maker_fee,
        taker_fee=row.taker_fee,
        order_count=order_count,
        trade_count=trade_count,
        created_at=row.created_at,
    )


class TradingPairRepositoryAdapter(TradingPairRepository):
    """Reads trading pairs from the relational store."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_symbol(self, symbol: str) -> Optional[TradingPair]:
        with read_session(self._engine, "pair lookup") as session:
            row = session.scalars(
                select(TradingPairModel).where(TradingPairModel.symbol == symbol)
            ).first()
            return pair_from_row(row) if row is not None else None

    def list_active(self) -> list[TradingPair]:
        """Return active pairs with their order and trade counts.

        Counts come from correlated subqueries so a single round trip
        serves the whole catalog.
        """
        order_count = (
            select(func.count(OrderModel.id))
            .where(OrderModel.trading_pair_id == TradingPairModel.id)
            .correlate(TradingPairModel)
            .scalar_subquery()
        )
        trade_count = (
            select(func.count(TradeModel.id))
            .where(TradeModel.trading_pair_id == TradingPairModel.id)
            .correlate(TradingPairModel)
            .scalar_subquery()
        )
        query = (
            select(TradingPairModel, order_count, trade_count)
            .where(TradingPairModel.is_active.is_(True))
            .order_by(TradingPairModel.symbol.asc())
        )
        with read_session(self._engine, "pair catalog") as session:
            rows = session.execute(query).all()
            pairs = [pair_from_row(row[0], row[1] or 0, row[2] or 0) for row in rows]

        logger.info("Fetched %d active trading pairs.", len(pairs))
        return pairs
