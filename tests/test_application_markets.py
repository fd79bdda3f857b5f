"""
Tests for the markets application layer (use cases).

Use cases run against in-memory read ports.
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from fakes import FakeOrderRepository, FakePairRepository, FakeTradeRepository

from app.application.markets.dtos import (
    GetOrderBookQuery,
    GetOrderDetailQuery,
    GetRecentTradesQuery,
)
from app.application.markets.get_order_book import GetOrderBookUseCase
from app.application.markets.get_order_detail import GetOrderDetailUseCase
from app.application.markets.get_recent_trades import GetRecentTradesUseCase
from app.application.markets.list_trading_pairs import ListTradingPairsUseCase
from app.domain.markets.entities import (
    Order,
    OrderSide,
    OrderStatus,
    Trade,
    Trader,
    TradingPair,
)
from app.domain.markets.errors import OrderNotFoundError

T0 = datetime(2026, 1, 1, 9, 0)
PAIR = TradingPair(id="pair-1", symbol="BNX/USDT", base_asset="BNX", quote_asset="USDT")
ALICE = Trader(id="alice", name="Alice", email="alice@example.com")
BOB = Trader(id="bob", name=None, email="bob@example.com")


def order(order_id, side, price, amount="1", filled="0", status=OrderStatus.PENDING, user="alice"):
    return Order(
        id=order_id,
        user_id=user,
        trading_pair_id=PAIR.id,
        side=side,
        price=Decimal(price),
        amount=Decimal(amount),
        filled_amount=Decimal(filled),
        status=status,
        created_at=T0,
    )


def trade(trade_id, price, amount, minutes=0):
    return Trade(
        id=trade_id,
        trading_pair_id=PAIR.id,
        price=Decimal(price),
        amount=Decimal(amount),
        total_value=Decimal(price) * Decimal(amount),
        created_at=T0 + timedelta(minutes=minutes),
        buyer=ALICE,
        seller=BOB,
    )


class TestGetOrderBookUseCase:
    def make(self, orders):
        return GetOrderBookUseCase(
            pair_repo=FakePairRepository([PAIR]),
            order_repo=FakeOrderRepository(orders),
            clock=lambda: T0,
        )

    def test_sides_ranked_and_summarised(self) -> None:
        use_case = self.make([
            order("b1", OrderSide.BUY, "10"),
            order("b2", OrderSide.BUY, "12"),
            order("b3", OrderSide.BUY, "11"),
            order("a1", OrderSide.SELL, "14"),
            order("a2", OrderSide.SELL, "13"),
        ])
        result = use_case.execute(GetOrderBookQuery(trading_pair="BNX/USDT"))

        assert [e.id for e in result.buy_orders] == ["b2", "b3", "b1"]
        assert [e.id for e in result.sell_orders] == ["a2", "a1"]
        assert result.best_bid == Decimal("12")
        assert result.best_ask == Decimal("13")
        assert result.spread == Decimal("1")
        assert result.timestamp == T0

    def test_limit_applies_per_side(self) -> None:
        orders = [order(f"b{i}", OrderSide.BUY, str(10 + i)) for i in range(5)]
        result = self.make(orders).execute(GetOrderBookQuery(trading_pair="BNX/USDT", limit=2))
        assert [e.id for e in result.buy_orders] == ["b4", "b3"]

    def test_unknown_pair_gives_empty_book(self) -> None:
        result = self.make([order("b1", OrderSide.BUY, "10")]).execute(
            GetOrderBookQuery(trading_pair="NOPE/USDT")
        )
        assert result.trading_pair == "NOPE/USDT"
        assert result.buy_orders == []
        assert result.sell_orders == []
        assert result.spread is None


class TestGetRecentTradesUseCase:
    def make(self, trades):
        return GetRecentTradesUseCase(
            pair_repo=FakePairRepository([PAIR]),
            trade_repo=FakeTradeRepository(trades),
            clock=lambda: T0,
        )

    def test_newest_first_and_capped(self) -> None:
        trades = [trade(f"t{i}", "10", "1", minutes=i) for i in range(3)]
        result = self.make(trades).execute(GetRecentTradesQuery(trading_pair="BNX/USDT", limit=2))
        assert [t.id for t in result.trades] == ["t2", "t1"]

    def test_side_relative_to_viewer(self) -> None:
        use_case = self.make([trade("t1", "10", "1")])
        as_buyer = use_case.execute(GetRecentTradesQuery("BNX/USDT", viewer_id="alice"))
        as_seller = use_case.execute(GetRecentTradesQuery("BNX/USDT", viewer_id="bob"))
        anonymous = use_case.execute(GetRecentTradesQuery("BNX/USDT"))
        assert as_buyer.trades[0].side == "BUY"
        assert as_seller.trades[0].side == "SELL"
        assert anonymous.trades[0].side is None

    def test_unknown_pair_gives_no_trades(self) -> None:
        result = self.make([trade("t1", "10", "1")]).execute(GetRecentTradesQuery("NOPE/USDT"))
        assert result.trades == []


class TestGetOrderDetailUseCase:
    def make(self):
        o = order("o1", OrderSide.BUY, "110", amount="10", filled="4",
                  status=OrderStatus.PARTIALLY_FILLED)
        trades = [trade("t1", "100", "2"), trade("t2", "110", "2", minutes=1)]
        return GetOrderDetailUseCase(
            order_repo=FakeOrderRepository([o]),
            trade_repo=FakeTradeRepository(trades, fills={"o1": ["t1", "t2"]}),
        )

    def test_statistics_and_trades(self) -> None:
        result = self.make().execute(GetOrderDetailQuery(order_id="o1", user_id="alice"))
        assert result.remaining_amount == Decimal("6")
        assert result.statistics.total_filled_value == Decimal("420")
        assert result.statistics.average_price == Decimal("105")
        assert result.statistics.fill_percentage == Decimal("40")
        assert {t.side for t in result.trades} == {"BUY"}

    def test_other_users_order_is_not_found(self) -> None:
        with pytest.raises(OrderNotFoundError):
            self.make().execute(GetOrderDetailQuery(order_id="o1", user_id="bob"))


class TestListTradingPairsUseCase:
    def test_only_active_pairs(self) -> None:
        pairs = [PAIR, TradingPair(id="p2", symbol="OLD/USDT", base_asset="OLD",
                                   quote_asset="USDT", is_active=False)]
        results = ListTradingPairsUseCase(FakePairRepository(pairs)).execute()
        assert [p.symbol for p in results] == ["BNX/USDT"]
