"""
Use case: Get one of a user's orders with its fills.

Input: GetOrderDetailQuery (order_id, user_id)
Output: OrderDetailResult
Side effects: None (read-only query).
Failure cases: OrderNotFoundError when the order is missing or not owned
    by the user.
"""

import logging

from app.application.markets.dtos import (
    GetOrderDetailQuery,
    OrderDetailResult,
    OrderStatisticsResult,
)
from app.application.markets.mappers import trade_result
from app.domain.markets.errors import OrderNotFoundError
from app.domain.markets.order_book import build_order_detail, side_for_viewer
from app.domain.markets.ports import OrderRepository, TradeRepository

logger = logging.getLogger(__name__)


class GetOrderDetailUseCase:
    def __init__(self, order_repo: OrderRepository, trade_repo: TradeRepository) -> None:
        self._order_repo = order_repo
        self._trade_repo = trade_repo

    def execute(self, query: GetOrderDetailQuery) -> OrderDetailResult:
        """Run the order detail query.

        Raises:
            OrderNotFoundError: Missing order or another user's order.
        """
        order = self._order_repo.get_for_user(query.order_id, query.user_id)
        if order is None:
            logger.warning("Order %s not found for user=%s", query.order_id, query.user_id)
            raise OrderNotFoundError(query.order_id)

        detail = build_order_detail(order, self._trade_repo.list_for_order(order.id))
        stats = detail.statistics
        return OrderDetailResult(
            id=order.id,
            type=order.type.value,
            side=order.side.value,
            amount=order.amount,
            price=order.price,
            filled_amount=order.filled_amount,
            remaining_amount=order.remaining_amount,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            filled_at=order.filled_at,
            statistics=OrderStatisticsResult(
                total_filled_value=stats.total_filled_value,
                average_price=stats.average_price,
                fill_percentage=stats.fill_percentage,
            ),
            trades=[trade_result(t, side_for_viewer(t, query.user_id)) for t in detail.trades],
        )
