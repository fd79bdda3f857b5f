"""
Use case: List active trading pairs.

Output: list[TradingPairResult] ordered by symbol
Side effects: None (read-only query).
"""

from app.application.markets.dtos import TradingPairResult
from app.domain.markets.ports import TradingPairRepository


class ListTradingPairsUseCase:
    def __init__(self, pair_repo: TradingPairRepository) -> None:
        self._pair_repo = pair_repo

    def execute(self) -> list[TradingPairResult]:
        return [
            TradingPairResult(
                id=p.id,
                symbol=p.symbol,
                base_asset=p.base_asset,
                quote_asset=p.quote_asset,
                is_active=p.is_active,
                min_order_size=p.min_order_size,
                max_order_size=p.max_order_size,
                price_precision=p.price_precision,
                amount_precision=p.amount_precision,
                maker_fee=p.maker_fee,
                taker_fee=p.taker_fee,
                order_count=p.order_count,
                trade_count=p.trade_count,
                created_at=p.created_at,
            )
            for p in self._pair_repo.list_active()
        ]
