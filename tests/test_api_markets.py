"""
Tests for the market data API endpoints.

Exercises the read-only routes against an in-memory database.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from fastapi.testclient import TestClient

from app.infrastructure.persistence.database import build_engine
from app.main import create_app

BASE = "/api/v1"
START = datetime(2026, 1, 1, 12, 0, 0)


def prices(entries):
    return [Decimal(e["price"]) for e in entries]


class TestOrderBookEndpoint:
    """Tests for GET /api/v1/orders/orderbook."""

    def test_book_sides_in_price_time_priority(self, client, seed) -> None:
        maker = seed.user("maker@example.com")
        pair_id = seed.pair("BNX/USDT")
        for price in ("10", "12", "11"):
            seed.order(maker, pair_id, "BUY", price, "1")
        for price in ("14", "13", "15"):
            seed.order(maker, pair_id, "SELL", price, "2", filled="0.5",
                       status="PARTIALLY_FILLED")

        response = client.get(f"{BASE}/orders/orderbook", params={"tradingPair": "BNX/USDT"})

        assert response.status_code == 200
        body = response.json()
        book = body["orderBook"]
        assert body["tradingPair"] == "BNX/USDT"
        assert prices(book["buyOrders"]) == [Decimal("12"), Decimal("11"), Decimal("10")]
        assert prices(book["sellOrders"]) == [Decimal("13"), Decimal("14"), Decimal("15")]
        assert Decimal(book["sellOrders"][0]["remainingAmount"]) == Decimal("1.5")
        assert Decimal(book["bestBid"]) == Decimal("12")
        assert Decimal(book["bestAsk"]) == Decimal("13")
        assert Decimal(book["spread"]) == Decimal("1")

    def test_default_pair_and_limit(self, client, seed) -> None:
        maker = seed.user("maker@example.com")
        pair_id = seed.pair("BNX/USDT")
        for i in range(25):
            seed.order(maker, pair_id, "SELL", str(100 + i), "1")

        default = client.get(f"{BASE}/orders/orderbook").json()
        limited = client.get(f"{BASE}/orders/orderbook", params={"limit": 3}).json()

        assert default["tradingPair"] == "BNX/USDT"
        assert len(default["orderBook"]["sellOrders"]) == 20
        assert prices(limited["orderBook"]["sellOrders"]) == [
            Decimal("100"), Decimal("101"), Decimal("102"),
        ]

    def test_closed_orders_not_in_book(self, client, seed) -> None:
        maker = seed.user("maker@example.com")
        pair_id = seed.pair("BNX/USDT")
        seed.order(maker, pair_id, "BUY", "10", "1", filled="1", status="FILLED")
        seed.order(maker, pair_id, "BUY", "11", "1", status="CANCELLED")

        book = client.get(f"{BASE}/orders/orderbook").json()["orderBook"]

        assert book["buyOrders"] == []
        assert book["bestBid"] is None

    def test_market_orders_without_price_left_out(self, client, seed) -> None:
        maker = seed.user("maker@example.com")
        pair_id = seed.pair("BNX/USDT")
        seed.order(maker, pair_id, "SELL", None, "1", order_type="MARKET")
        seed.order(maker, pair_id, "BUY", None, "1", order_type="MARKET")
        seed.order(maker, pair_id, "SELL", "13", "1")
        seed.order(maker, pair_id, "SELL", "14", "1")
        seed.order(maker, pair_id, "BUY", "12", "1")

        book = client.get(f"{BASE}/orders/orderbook", params={"limit": 2}).json()["orderBook"]

        assert prices(book["sellOrders"]) == [Decimal("13"), Decimal("14")]
        assert prices(book["buyOrders"]) == [Decimal("12")]
        assert Decimal(book["bestAsk"]) == Decimal("13")
        assert Decimal(book["spread"]) == Decimal("1")

    def test_non_numeric_limit_uses_default(self, client, seed) -> None:
        maker = seed.user("maker@example.com")
        pair_id = seed.pair("BNX/USDT")
        for i in range(25):
            seed.order(maker, pair_id, "BUY", str(100 + i), "1")

        response = client.get(f"{BASE}/orders/orderbook", params={"limit": "abc"})

        assert response.status_code == 200
        assert len(response.json()["orderBook"]["buyOrders"]) == 20

    def test_unknown_pair_returns_empty_book(self, client) -> None:
        response = client.get(f"{BASE}/orders/orderbook", params={"tradingPair": "NOPE/USDT"})
        assert response.status_code == 200
        book = response.json()["orderBook"]
        assert book["buyOrders"] == []
        assert book["sellOrders"] == []
        assert book["spread"] is None


class TestRecentTradesEndpoint:
    """Tests for GET /api/v1/orders/trades."""

    def test_newest_first_with_viewer_side(self, client, seed) -> None:
        alice = seed.user("alice@example.com", name="Alice")
        bob = seed.user("bob@example.com", name="Bob")
        pair_id = seed.pair("BNX/USDT")
        seed.trade(pair_id, alice, bob, "10", "1", created_at=START)
        seed.trade(pair_id, bob, alice, "11", "2", created_at=START + timedelta(minutes=1))

        body = client.get(
            f"{BASE}/orders/trades",
            params={"tradingPair": "BNX/USDT", "viewerId": alice},
        ).json()

        assert [Decimal(t["price"]) for t in body["trades"]] == [Decimal("11"), Decimal("10")]
        assert [t["side"] for t in body["trades"]] == ["SELL", "BUY"]
        assert Decimal(body["trades"][0]["totalValue"]) == Decimal("22")
        assert body["trades"][0]["buyer"]["email"] == "bob@example.com"

    def test_anonymous_viewer_gets_no_side(self, client, seed) -> None:
        alice = seed.user("alice@example.com")
        bob = seed.user("bob@example.com")
        pair_id = seed.pair("BNX/USDT")
        seed.trade(pair_id, alice, bob, "10", "1")

        [trade] = client.get(f"{BASE}/orders/trades").json()["trades"]

        assert trade["side"] is None

    def test_limit(self, client, seed) -> None:
        alice = seed.user("alice@example.com")
        bob = seed.user("bob@example.com")
        pair_id = seed.pair("BNX/USDT")
        for i in range(5):
            seed.trade(pair_id, alice, bob, "10", "1", created_at=START + timedelta(minutes=i))

        trades = client.get(f"{BASE}/orders/trades", params={"limit": 2}).json()["trades"]

        assert len(trades) == 2

    def test_non_numeric_limit_uses_default(self, client, seed) -> None:
        alice = seed.user("alice@example.com")
        bob = seed.user("bob@example.com")
        pair_id = seed.pair("BNX/USDT")
        seed.trade(pair_id, alice, bob, "10", "1")

        response = client.get(f"{BASE}/orders/trades", params={"limit": "many"})

        assert response.status_code == 200
        assert len(response.json()["trades"]) == 1

    def test_unknown_pair_returns_no_trades(self, client) -> None:
        body = client.get(f"{BASE}/orders/trades", params={"tradingPair": "NOPE/USDT"}).json()
        assert body["trades"] == []


class TestOrderDetailEndpoint:
    """Tests for GET /api/v1/orders/{order_id}."""

    def test_detail_with_statistics(self, client, seed) -> None:
        buyer = seed.user("buyer@example.com")
        seller = seed.user("seller@example.com")
        pair_id = seed.pair("BNX/USDT")
        order_id = seed.order(buyer, pair_id, "BUY", "110", "10", filled="4",
                              status="PARTIALLY_FILLED")
        seed.trade(pair_id, buyer, seller, "100", "2", buy_order_id=order_id)
        seed.trade(pair_id, buyer, seller, "110", "2", buy_order_id=order_id,
                   created_at=START + timedelta(minutes=1))

        response = client.get(f"{BASE}/orders/{order_id}", params={"userId": buyer})

        assert response.status_code == 200
        order = response.json()["order"]
        assert order["side"] == "BUY"
        assert Decimal(order["remainingAmount"]) == Decimal("6")
        assert Decimal(order["statistics"]["totalFilledValue"]) == Decimal("420")
        assert Decimal(order["statistics"]["averagePrice"]) == Decimal("105")
        assert Decimal(order["statistics"]["fillPercentage"]) == Decimal("40")
        assert len(order["trades"]) == 2
        assert {t["side"] for t in order["trades"]} == {"BUY"}

    def test_other_users_order_not_found(self, client, seed) -> None:
        owner = seed.user("owner@example.com")
        other = seed.user("other@example.com")
        pair_id = seed.pair("BNX/USDT")
        order_id = seed.order(owner, pair_id, "BUY", "10", "1")

        response = client.get(f"{BASE}/orders/{order_id}", params={"userId": other})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Order not found"}

    def test_user_id_required(self, client) -> None:
        response = client.get(f"{BASE}/orders/some-order")
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields"


class TestTradingPairsEndpoint:
    def test_active_pairs_with_counts(self, client, seed) -> None:
        maker = seed.user("maker@example.com")
        bnx = seed.pair("BNX/USDT")
        seed.pair("ADA/USDT")
        seed.pair("OLD/USDT", is_active=False)
        seed.order(maker, bnx, "BUY", "10", "1")

        pairs = client.get(f"{BASE}/trading-pairs").json()["tradingPairs"]

        assert [p["symbol"] for p in pairs] == ["ADA/USDT", "BNX/USDT"]
        assert pairs[1]["orderCount"] == 1
        assert pairs[1]["baseAsset"] == "BNX"


class TestStoreFailure:
    """Store failures reach clients as a generic internal error."""

    def test_missing_schema_returns_internal_error(self) -> None:
        engine = build_engine("sqlite://")
        client = TestClient(create_app(engine=engine, start_scheduler=False))

        response = client.get(f"{BASE}/trading-pairs")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}
        engine.dispose()
