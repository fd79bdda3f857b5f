"""
Use case: Build the order book for a trading pair.

Input: GetOrderBookQuery (trading_pair, limit)
Output: OrderBookResult
Side effects: None (read-only query).
Failure cases: None. An unknown pair yields an empty book.
"""

import logging
from datetime import datetime
from typing import Callable

from app.application.markets.dtos import GetOrderBookQuery, OrderBookResult
from app.application.markets.mappers import entry_result
from app.domain.markets.entities import OrderBook, OrderSide
from app.domain.markets.order_book import assemble_order_book, coerce_limit
from app.domain.markets.ports import OrderRepository, TradingPairRepository
from app.domain.shared.clock import utc_now

logger = logging.getLogger(__name__)


class GetOrderBookUseCase:
    """Assembles the two-sided view of resting orders.

    Each side is fetched in price-time priority and capped at the limit;
    entries carry their derived remaining amount.
    """

    def __init__(
        self,
        pair_repo: TradingPairRepository,
        order_repo: OrderRepository,
        default_limit: int = 20,
        max_limit: int = 100,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._pair_repo = pair_repo
        self._order_repo = order_repo
        self._default_limit = default_limit
        self._max_limit = max_limit
        self._clock = clock

    def execute(self, query: GetOrderBookQuery) -> OrderBookResult:
        """Run the order book query.

        Args:
            query: Pair symbol and optional per-side limit.

        Returns:
            Both sides of the book; empty sides when the pair is unknown.
        """
        limit = coerce_limit(query.limit, self._default_limit, self._max_limit)
        logger.info("Order book requested: pair=%s, limit=%d", query.trading_pair, limit)

        pair = self._pair_repo.get_by_symbol(query.trading_pair)
        if pair is None:
            logger.info("Trading pair %s not initialized; empty book.", query.trading_pair)
            book = OrderBook()
        else:
            book = assemble_order_book(
                bids=self._order_repo.list_resting(pair.id, OrderSide.BUY, limit),
                asks=self._order_repo.list_resting(pair.id, OrderSide.SELL, limit),
                limit=limit,
            )

        return OrderBookResult(
            trading_pair=query.trading_pair,
            buy_orders=[entry_result(e) for e in book.buy_orders],
            sell_orders=[entry_result(e) for e in book.sell_orders],
            best_bid=book.best_bid,
            best_ask=book.best_ask,
            spread=book.spread,
            timestamp=self._clock(),
        )
