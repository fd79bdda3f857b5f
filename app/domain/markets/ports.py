"""
Port interfaces (ABCs) for the markets bounded context.

Every port here is read-only; order placement and matching live outside
this service.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.markets.entities import Order, OrderSide, Trade, TradingPair


class TradingPairRepository(ABC):
    """Port for the trading pair catalog."""

    @abstractmethod
    def get_by_symbol(self, symbol: str) -> Optional[TradingPair]:
        """Return the pair with this symbol, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def list_active(self) -> list[TradingPair]:
        """Return active pairs ordered by symbol, with order/trade counts."""
        raise NotImplementedError


class OrderRepository(ABC):
    """Port for reading persisted orders."""

    @abstractmethod
    def list_resting(self, trading_pair_id: str, side: OrderSide, limit: int) -> list[Order]:
        """Return up to ``limit`` resting orders of one side in price-time priority.

        Bids come back highest price first, asks lowest price first; equal
        prices keep creation order.
        """
        raise NotImplementedError

    @abstractmethod
    def get_for_user(self, order_id: str, user_id: str) -> Optional[Order]:
        """Return the order if it exists and belongs to ``user_id``."""
        raise NotImplementedError


class TradeRepository(ABC):
    """Port for reading executed trades."""

    @abstractmethod
    def list_recent(self, trading_pair_id: str, limit: int) -> list[Trade]:
        """Return the ``limit`` most recent trades for a pair, newest first."""
        raise NotImplementedError

    @abstractmethod
    def list_for_order(self, order_id: str) -> list[Trade]:
        """Return trades that filled an order (either side), newest first."""
        raise NotImplementedError
