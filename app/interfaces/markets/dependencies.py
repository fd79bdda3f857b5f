"""
Dependency injection for the markets bounded context.

Provides FastAPI dependency functions that wire the read-only
adapters into use cases via constructor injection.
"""

from datetime import datetime
from typing import Callable

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.markets.get_order_book import GetOrderBookUseCase
from app.application.markets.get_order_detail import GetOrderDetailUseCase
from app.application.markets.get_recent_trades import GetRecentTradesUseCase
from app.application.markets.list_trading_pairs import ListTradingPairsUseCase
from app.core.config import settings
from app.infrastructure.markets.order_repository import OrderRepositoryAdapter
from app.infrastructure.markets.trade_repository import TradeRepositoryAdapter
from app.infrastructure.markets.trading_pair_repository import (
    TradingPairRepositoryAdapter,
)
from app.interfaces.dependencies import get_clock, get_engine


def get_order_book_use_case(
    engine: Engine = Depends(get_engine),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> GetOrderBookUseCase:
    """Build GetOrderBookUseCase with its infrastructure dependencies."""
    return GetOrderBookUseCase(
        pair_repo=TradingPairRepositoryAdapter(engine),
        order_repo=OrderRepositoryAdapter(engine),
        default_limit=settings.order_book_default_limit,
        max_limit=settings.order_book_max_limit,
        clock=clock,
    )


def get_recent_trades_use_case(
    engine: Engine = Depends(get_engine),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> GetRecentTradesUseCase:
    """Build GetRecentTradesUseCase with its infrastructure dependencies."""
    return GetRecentTradesUseCase(
        pair_repo=TradingPairRepositoryAdapter(engine),
        trade_repo=TradeRepositoryAdapter(engine),
        default_limit=settings.order_book_default_limit,
        max_limit=settings.order_book_max_limit,
        clock=clock,
    )


def get_list_trading_pairs_use_case(
    engine: Engine = Depends(get_engine),
) -> ListTradingPairsUseCase:
    return ListTradingPairsUseCase(pair_repo=TradingPairRepositoryAdapter(engine))


def get_order_detail_use_case(
    engine: Engine = Depends(get_engine),
) -> GetOrderDetailUseCase:
    return GetOrderDetailUseCase(
        order_repo=OrderRepositoryAdapter(engine),
        trade_repo=TradeRepositoryAdapter(engine),
    )
