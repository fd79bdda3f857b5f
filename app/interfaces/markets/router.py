"""
FastAPI router for the markets bounded context.

All routes delegate to use cases. No business logic here.
Every route is read-only; unknown trading pairs produce empty views.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.application.markets.dtos import (
    GetOrderBookQuery,
    GetOrderDetailQuery,
    GetRecentTradesQuery,
    OrderBookEntryResult,
    TradeResult,
)
from app.application.markets.get_order_book import GetOrderBookUseCase
from app.application.markets.get_order_detail import GetOrderDetailUseCase
from app.application.markets.get_recent_trades import GetRecentTradesUseCase
from app.application.markets.list_trading_pairs import ListTradingPairsUseCase
from app.core.config import settings
from app.interfaces.markets.dependencies import (
    get_list_trading_pairs_use_case,
    get_order_book_use_case,
    get_order_detail_use_case,
    get_recent_trades_use_case,
)
from app.interfaces.markets.schemas import (
    OrderBookEntryItem,
    OrderBookItem,
    OrderBookResponse,
    OrderDetailItem,
    OrderDetailResponse,
    OrderStatisticsItem,
    RecentTradesResponse,
    TradeItem,
    TraderItem,
    TradingPairItem,
    TradingPairListResponse,
)
from app.interfaces.schemas import ErrorResponse

router = APIRouter(tags=["markets"])


def _parse_limit(raw: Optional[str]) -> Optional[int]:
    """Read a view size from the query string; anything non-numeric means default."""
    try:
        return int(raw) if raw is not None else None
    except ValueError:
        return None


def _entry_item(entry: OrderBookEntryResult) -> OrderBookEntryItem:
    return OrderBookEntryItem(
        id=entry.id,
        price=entry.price,
        amount=entry.amount,
        filled_amount=entry.filled_amount,
        remaining_amount=entry.remaining_amount,
        status=entry.status,
        created_at=entry.created_at,
    )


def _trade_item(trade: TradeResult) -> TradeItem:
    return TradeItem(
        id=trade.id,
        price=trade.price,
        amount=trade.amount,
        total_value=trade.total_value,
        side=trade.side,
        timestamp=trade.created_at,
        buyer=TraderItem(id=trade.buyer.id, name=trade.buyer.name, email=trade.buyer.email),
        seller=TraderItem(
            id=trade.seller.id, name=trade.seller.name, email=trade.seller.email
        ),
    )


@router.get(
    "/orders/orderbook",
    response_model=OrderBookResponse,
    summary="Get the order book",
    description="Resting bids and asks for a trading pair in price-time priority.",
)
def get_order_book(
    trading_pair: str = Query(default=settings.default_trading_pair, alias="tradingPair"),
    limit: Optional[str] = Query(default=None),
    use_case: GetOrderBookUseCase = Depends(get_order_book_use_case),
) -> OrderBookResponse:
    """Return both sides of the book for a pair."""
    result = use_case.execute(
        GetOrderBookQuery(trading_pair=trading_pair, limit=_parse_limit(limit))
    )
    return OrderBookResponse(
        order_book=OrderBookItem(
            buy_orders=[_entry_item(e) for e in result.buy_orders],
            sell_orders=[_entry_item(e) for e in result.sell_orders],
            best_bid=result.best_bid,
            best_ask=result.best_ask,
            spread=result.spread,
        ),
        trading_pair=result.trading_pair,
        timestamp=result.timestamp,
    )


@router.get(
    "/orders/trades",
    response_model=RecentTradesResponse,
    summary="Get recent trades",
    description="Most recent executed trades for a trading pair, newest first.",
)
def get_recent_trades(
    trading_pair: str = Query(default=settings.default_trading_pair, alias="tradingPair"),
    limit: Optional[str] = Query(default=None),
    viewer_id: Optional[str] = Query(default=None, alias="viewerId"),
    use_case: GetRecentTradesUseCase = Depends(get_recent_trades_use_case),
) -> RecentTradesResponse:
    """Return recent trades; ``side`` is labelled for ``viewerId`` when given."""
    result = use_case.execute(
        GetRecentTradesQuery(
            trading_pair=trading_pair, limit=_parse_limit(limit), viewer_id=viewer_id
        )
    )
    return RecentTradesResponse(
        trades=[_trade_item(t) for t in result.trades],
        trading_pair=result.trading_pair,
        timestamp=result.timestamp,
    )


@router.get(
    "/orders/{order_id}",
    response_model=OrderDetailResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get order details",
    description="One of the user's orders with its trades and fill statistics.",
)
def get_order_detail(
    order_id: str,
    user_id: str = Query(..., alias="userId", min_length=1),
    use_case: GetOrderDetailUseCase = Depends(get_order_detail_use_case),
) -> OrderDetailResponse:
    result = use_case.execute(GetOrderDetailQuery(order_id=order_id, user_id=user_id))
    return OrderDetailResponse(
        order=OrderDetailItem(
            id=result.id,
            type=result.type,
            side=result.side,
            amount=result.amount,
            price=result.price,
            filled_amount=result.filled_amount,
            remaining_amount=result.remaining_amount,
            status=result.status,
            created_at=result.created_at,
            updated_at=result.updated_at,
            filled_at=result.filled_at,
            statistics=OrderStatisticsItem(
                total_filled_value=result.statistics.total_filled_value,
                average_price=result.statistics.average_price,
                fill_percentage=result.statistics.fill_percentage,
            ),
            trades=[_trade_item(t) for t in result.trades],
        )
    )


@router.get(
    "/trading-pairs",
    response_model=TradingPairListResponse,
    summary="List trading pairs",
    description="Active trading pairs ordered by symbol, with order and trade counts.",
)
def list_trading_pairs(
    use_case: ListTradingPairsUseCase = Depends(get_list_trading_pairs_use_case),
) -> TradingPairListResponse:
    return TradingPairListResponse(
        trading_pairs=[
            TradingPairItem(
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
            for p in use_case.execute()
        ]
    )
