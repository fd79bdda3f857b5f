"""
Adapter: Trade repository.

Implements TradeRepository port over the trades table, loading buyer
and seller identities alongside each trade.
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import joinedload

from app.domain.markets.entities import Trade, Trader
from app.domain.markets.ports import TradeRepository
from app.infrastructure.persistence.database import read_session
from app.infrastructure.persistence.models import TradeModel, UserModel

logger = logging.getLogger(__name__)


def trader_from_row(row: UserModel) -> Trader:
    return Trader(id=row.id, name=row.name, email=row.email)


def trade_from_row(row: TradeModel) -> Trade:
    return Trade(
        id=row.id,
        trading_pair_id=row.trading_pair_id,
        amount=row.amount,
        price=row.price,
        total_value=row.total_value,
        created_at=row.created_at,
        buyer=trader_from_row(row.buyer),
        seller=trader_from_row(row.seller),
    )


class TradeRepositoryAdapter(TradeRepository):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _fetch(self, *criteria, limit: int | None = None) -> list[Trade]:
        query = (
            select(TradeModel)
            .options(joinedload(TradeModel.buyer), joinedload(TradeModel.seller))
            .where(*criteria)
            .order_by(TradeModel.created_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        with read_session(self._engine, "trade query") as session:
            return [trade_from_row(row) for row in session.scalars(query).all()]

    def list_recent(self, trading_pair_id: str, limit: int) -> list[Trade]:
        trades = self._fetch(TradeModel.trading_pair_id == trading_pair_id, limit=limit)
        logger.debug("Fetched %d trades for pair=%s.", len(trades), trading_pair_id)
        return trades

    def list_for_order(self, order_id: str) -> list[Trade]:
        return self._fetch(
            or_(TradeModel.buy_order_id == order_id, TradeModel.sell_order_id == order_id)
        )
