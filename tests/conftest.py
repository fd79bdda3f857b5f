"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database with the full schema,
an application wired to it, and a controllable clock.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from app.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from app.infrastructure.persistence.models import (
    InvestmentPlanModel,
    OrderModel,
    TradeModel,
    TradingPairModel,
    TransactionModel,
    UserModel,
    WalletModel,
)
from app.interfaces.dependencies import get_clock
from app.main import create_app
from app.shared.security.rate_limiting import limiter

START = datetime(2026, 1, 1, 12, 0, 0)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class Seeder:
    """Inserts fixture rows directly through the ORM."""

    def __init__(self, session_factory) -> None:
        self._session_factory = session_factory

    def _add(self, row):
        with self._session_factory() as session:
            session.add(row)
            session.commit()
            return row.id

    def user(self, email: str, balance: Optional[str] = "0", name: str = "Trader") -> str:
        user_id = self._add(UserModel(email=email, name=name))
        if balance is not None:
            self._add(WalletModel(user_id=user_id, balance=Decimal(balance)))
        return user_id

    def plan(
        self,
        plan_name: str = "Starter",
        minimum: str = "100",
        maximum: str = "1000",
        profit: str = "10",
        duration: int = 30,
        is_active: bool = True,
    ) -> str:
        return self._add(
            InvestmentPlanModel(
                plan_name=plan_name,
                minimum_investment=Decimal(minimum),
                maximum_investment=Decimal(maximum),
                profit_percentage=Decimal(profit),
                duration=duration,
                is_active=is_active,
            )
        )

    def pair(self, symbol: str = "BNX/USDT", is_active: bool = True) -> str:
        base, quote = symbol.split("/")
        return self._add(
            TradingPairModel(
                symbol=symbol, base_asset=base, quote_asset=quote, is_active=is_active
            )
        )

    def order(
        self,
        user_id: str,
        pair_id: str,
        side: str,
        price: Optional[str],
        amount: str,
        filled: str = "0",
        status: str = "PENDING",
        created_at: datetime = START,
        order_type: str = "LIMIT",
    ) -> str:
        return self._add(
            OrderModel(
                user_id=user_id,
                trading_pair_id=pair_id,
                type=order_type,
                side=side,
                price=Decimal(price) if price is not None else None,
                amount=Decimal(amount),
                filled_amount=Decimal(filled),
                status=status,
                created_at=created_at,
            )
        )

    def trade(
        self,
        pair_id: str,
        buyer_id: str,
        seller_id: str,
        price: str,
        amount: str,
        created_at: datetime = START,
        buy_order_id: Optional[str] = None,
        sell_order_id: Optional[str] = None,
    ) -> str:
        return self._add(
            TradeModel(
                trading_pair_id=pair_id,
                buyer_id=buyer_id,
                seller_id=seller_id,
                buy_order_id=buy_order_id,
                sell_order_id=sell_order_id,
                price=Decimal(price),
                amount=Decimal(amount),
                total_value=Decimal(price) * Decimal(amount),
                created_at=created_at,
            )
        )

    def balance(self, user_id: str) -> Decimal:
        with self._session_factory() as session:
            return session.scalar(
                select(WalletModel.balance).where(WalletModel.user_id == user_id)
            )

    def transactions(self, user_id: str) -> list[TransactionModel]:
        with self._session_factory() as session:
            return list(
                session.scalars(
                    select(TransactionModel)
                    .where(TransactionModel.user_id == user_id)
                    .order_by(TransactionModel.created_at)
                ).all()
            )


@pytest.fixture(autouse=True)
def _disable_rate_limits():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def client(engine, clock):
    app = create_app(engine=engine, start_scheduler=False)
    app.dependency_overrides[get_clock] = lambda: clock
    return TestClient(app)
