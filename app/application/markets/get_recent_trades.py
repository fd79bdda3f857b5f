"""
Use case: List the most recent trades for a trading pair.

Input: GetRecentTradesQuery (trading_pair, limit, optional viewer_id)
Output: RecentTradesResult, newest trade first
Side effects: None (read-only query).
Failure cases: None. An unknown pair yields an empty list.
"""

import logging
from datetime import datetime
from typing import Callable

from app.application.markets.dtos import GetRecentTradesQuery, RecentTradesResult
from app.application.markets.mappers import trade_result
from app.domain.markets.order_book import coerce_limit, side_for_viewer
from app.domain.markets.ports import TradeRepository, TradingPairRepository
from app.domain.shared.clock import utc_now

logger = logging.getLogger(__name__)


class GetRecentTradesUseCase:
    def __init__(
        self,
        pair_repo: TradingPairRepository,
        trade_repo: TradeRepository,
        default_limit: int = 20,
        max_limit: int = 100,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._pair_repo = pair_repo
        self._trade_repo = trade_repo
        self._default_limit = default_limit
        self._max_limit = max_limit
        self._clock = clock

    def execute(self, query: GetRecentTradesQuery) -> RecentTradesResult:
        limit = coerce_limit(query.limit, self._default_limit, self._max_limit)
        logger.info("Recent trades requested: pair=%s, limit=%d", query.trading_pair, limit)

        pair = self._pair_repo.get_by_symbol(query.trading_pair)
        trades = [] if pair is None else self._trade_repo.list_recent(pair.id, limit)

        return RecentTradesResult(
            trading_pair=query.trading_pair,
            trades=[trade_result(t, side_for_viewer(t, query.viewer_id)) for t in trades],
            timestamp=self._clock(),
        )
