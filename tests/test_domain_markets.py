"""
Tests for the markets domain layer.

Covers price-time ordering, remaining amounts, viewer-relative trade
sides and order fill statistics. No IO required.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from app.domain.markets.entities import (
    Order,
    OrderBook,
    OrderSide,
    OrderStatus,
    OrderType,
    Trade,
    Trader,
)
from app.domain.markets.order_book import (
    assemble_order_book,
    assemble_side,
    coerce_limit,
    compute_statistics,
    side_for_viewer,
)

T0 = datetime(2026, 1, 1, 9, 0)

ALICE = Trader(id="alice", name="Alice", email="alice@example.com")
BOB = Trader(id="bob", name="Bob", email="bob@example.com")


def make_order(
    order_id: str,
    side: OrderSide,
    price: str,
    amount: str = "1",
    filled: str = "0",
    status: OrderStatus = OrderStatus.PENDING,
    minutes: int = 0,
) -> Order:
    return Order(
        id=order_id,
        user_id="user-1",
        trading_pair_id="pair-1",
        side=side,
        price=Decimal(price),
        amount=Decimal(amount),
        filled_amount=Decimal(filled),
        status=status,
        created_at=T0 + timedelta(minutes=minutes),
    )


def make_trade(price: str, amount: str, buyer: Trader = ALICE, seller: Trader = BOB) -> Trade:
    return Trade(
        id=f"trade-{price}-{amount}",
        trading_pair_id="pair-1",
        price=Decimal(price),
        amount=Decimal(amount),
        total_value=Decimal(price) * Decimal(amount),
        created_at=T0,
        buyer=buyer,
        seller=seller,
    )


class TestPriceTimePriority:
    """Tests for book side ordering."""

    def test_bids_highest_price_first(self) -> None:
        orders = [
            make_order("a", OrderSide.BUY, "10"),
            make_order("b", OrderSide.BUY, "12"),
            make_order("c", OrderSide.BUY, "11"),
        ]
        entries = assemble_side(orders, OrderSide.BUY, limit=20)
        assert [e.price for e in entries] == [Decimal("12"), Decimal("11"), Decimal("10")]

    def test_asks_lowest_price_first(self) -> None:
        orders = [
            make_order("a", OrderSide.SELL, "10"),
            make_order("b", OrderSide.SELL, "12"),
            make_order("c", OrderSide.SELL, "11"),
        ]
        entries = assemble_side(orders, OrderSide.SELL, limit=20)
        assert [e.price for e in entries] == [Decimal("10"), Decimal("11"), Decimal("12")]

    def test_equal_prices_favor_older_order(self) -> None:
        orders = [
            make_order("late", OrderSide.BUY, "10", minutes=5),
            make_order("early", OrderSide.BUY, "10", minutes=1),
        ]
        entries = assemble_side(orders, OrderSide.BUY, limit=20)
        assert [e.id for e in entries] == ["early", "late"]

    def test_limit_caps_each_side(self) -> None:
        orders = [make_order(str(i), OrderSide.SELL, str(10 + i)) for i in range(5)]
        entries = assemble_side(orders, OrderSide.SELL, limit=2)
        assert [e.id for e in entries] == ["0", "1"]


class TestRestingOrders:
    """Only open orders with something left to fill appear in the book."""

    def test_remaining_amount_is_derived(self) -> None:
        orders = [make_order("a", OrderSide.BUY, "10", amount="5", filled="2",
                             status=OrderStatus.PARTIALLY_FILLED)]
        [entry] = assemble_side(orders, OrderSide.BUY, limit=20)
        assert entry.remaining_amount == Decimal("3")

    def test_filled_and_cancelled_orders_excluded(self) -> None:
        orders = [
            make_order("open", OrderSide.BUY, "10"),
            make_order("filled", OrderSide.BUY, "11", filled="1", status=OrderStatus.FILLED),
            make_order("cancelled", OrderSide.BUY, "12", status=OrderStatus.CANCELLED),
        ]
        entries = assemble_side(orders, OrderSide.BUY, limit=20)
        assert [e.id for e in entries] == ["open"]

    def test_exhausted_or_overfilled_orders_excluded(self) -> None:
        orders = [
            make_order("exhausted", OrderSide.SELL, "10", amount="1", filled="1"),
            make_order("overfilled", OrderSide.SELL, "11", amount="1", filled="2"),
            make_order("ok", OrderSide.SELL, "12"),
        ]
        entries = assemble_side(orders, OrderSide.SELL, limit=20)
        assert [e.id for e in entries] == ["ok"]
        assert all(e.remaining_amount > 0 for e in entries)

    def test_other_side_ignored(self) -> None:
        orders = [make_order("ask", OrderSide.SELL, "10")]
        assert assemble_side(orders, OrderSide.BUY, limit=20) == []

    def test_market_orders_without_price_excluded(self) -> None:
        market = Order(
            id="market",
            user_id="user-1",
            trading_pair_id="pair-1",
            side=OrderSide.SELL,
            type=OrderType.MARKET,
            price=None,
            amount=Decimal("1"),
            filled_amount=Decimal("0"),
            status=OrderStatus.PENDING,
            created_at=T0,
        )
        orders = [market, make_order("a", OrderSide.SELL, "13"), make_order("b", OrderSide.SELL, "14")]

        book = assemble_order_book([], orders, limit=2)

        assert [e.id for e in book.sell_orders] == ["a", "b"]
        assert book.best_ask == Decimal("13")


class TestOrderBookSummary:
    def test_best_prices_and_spread(self) -> None:
        book = assemble_order_book(
            bids=[make_order("b1", OrderSide.BUY, "99"), make_order("b2", OrderSide.BUY, "98")],
            asks=[make_order("a1", OrderSide.SELL, "101")],
            limit=20,
        )
        assert book.best_bid == Decimal("99")
        assert book.best_ask == Decimal("101")
        assert book.spread == Decimal("2")

    def test_empty_book_has_no_spread(self) -> None:
        book = OrderBook()
        assert book.best_bid is None
        assert book.best_ask is None
        assert book.spread is None


class TestViewerSide:
    """Trade sides are labelled relative to the viewing user."""

    def test_buyer_sees_buy(self) -> None:
        assert side_for_viewer(make_trade("10", "1"), "alice") is OrderSide.BUY

    def test_seller_sees_sell(self) -> None:
        assert side_for_viewer(make_trade("10", "1"), "bob") is OrderSide.SELL

    def test_third_party_and_anonymous_see_nothing(self) -> None:
        trade = make_trade("10", "1")
        assert side_for_viewer(trade, "carol") is None
        assert side_for_viewer(trade, None) is None


class TestOrderStatistics:
    def test_partial_fill(self) -> None:
        order = make_order("o", OrderSide.BUY, "110", amount="10", filled="4",
                           status=OrderStatus.PARTIALLY_FILLED)
        stats = compute_statistics(order, [make_trade("100", "2"), make_trade("110", "2")])
        assert stats.total_filled_value == Decimal("420")
        assert stats.average_price == Decimal("105")
        assert stats.fill_percentage == Decimal("40")

    def test_unfilled_order(self) -> None:
        order = make_order("o", OrderSide.SELL, "10", amount="3")
        stats = compute_statistics(order, [])
        assert stats.total_filled_value == 0
        assert stats.average_price == 0
        assert stats.fill_percentage == 0


class TestCoerceLimit:
    def test_missing_or_non_positive_uses_default(self) -> None:
        assert coerce_limit(None, 20, 100) == 20
        assert coerce_limit(0, 20, 100) == 20
        assert coerce_limit(-5, 20, 100) == 20

    def test_clamped_to_maximum(self) -> None:
        assert coerce_limit(500, 20, 100) == 100
        assert coerce_limit(7, 20, 100) == 7
