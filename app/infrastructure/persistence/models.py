"""
SQLAlchemy ORM table mappings.

Tables mirror the platform's relational layout: users, wallets, the
transaction ledger, investment plans and investments, trading pairs,
orders and trades. Primary keys are opaque string identifiers.

Rows are converted to domain entities inside the repository adapters;
nothing outside the infrastructure layer imports these classes.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from app.domain.shared.clock import utc_now

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

MONEY = Numeric(20, 8)


def generate_id() -> str:
    """Generate a new opaque primary key."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all ORM models with naming convention."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[Optional[str]] = mapped_column(String(120))
    email: Mapped[str] = mapped_column(String(255), unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    wallet: Mapped[Optional["WalletModel"]] = relationship(back_populates="user")


class WalletModel(Base):
    """One wallet per user. Fiat balance plus the platform token balance."""

    __tablename__ = "wallets"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="balance_non_negative"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True
    )
    balance: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("0"))
    token_balance: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("0"))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, onupdate=utc_now
    )

    user: Mapped[UserModel] = relationship(back_populates="wallet")


class TransactionModel(Base):
    """Append-only ledger row."""

    __tablename__ = "transactions"
    __table_args__ = (Index("ix_transactions_user_created", "user_id", "created_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    type: Mapped[str] = mapped_column(String(32))
    amount: Mapped[Decimal] = mapped_column(MONEY)
    status: Mapped[str] = mapped_column(String(16), default="COMPLETED")
    description: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)


class InvestmentPlanModel(Base):
    __tablename__ = "investment_plans"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    plan_name: Mapped[str] = mapped_column(String(120))
    description: Mapped[Optional[str]] = mapped_column(Text)
    minimum_investment: Mapped[Decimal] = mapped_column(MONEY)
    maximum_investment: Mapped[Decimal] = mapped_column(MONEY)
    profit_percentage: Mapped[Decimal] = mapped_column(Numeric(10, 4))
    duration: Mapped[int] = mapped_column(Integer)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, onupdate=utc_now
    )

    investments: Mapped[list["InvestmentModel"]] = relationship(back_populates="plan")


class InvestmentModel(Base):
    __tablename__ = "investments"
    __table_args__ = (
        Index("ix_investments_status_end_date", "status", "end_date"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    plan_id: Mapped[str] = mapped_column(ForeignKey("investment_plans.id"))
    invested_amount: Mapped[Decimal] = mapped_column(MONEY)
    expected_return: Mapped[Decimal] = mapped_column(MONEY)
    actual_return: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    start_date: Mapped[datetime] = mapped_column(DateTime)
    end_date: Mapped[datetime] = mapped_column(DateTime)
    status: Mapped[str] = mapped_column(String(16), default="ACTIVE")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, onupdate=utc_now
    )

    plan: Mapped[InvestmentPlanModel] = relationship(back_populates="investments")


class TradingPairModel(Base):
    __tablename__ = "trading_pairs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    symbol: Mapped[str] = mapped_column(String(32), unique=True)
    base_asset: Mapped[str] = mapped_column(String(16))
    quote_asset: Mapped[str] = mapped_column(String(16))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    min_order_size: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("0.001"))
    max_order_size: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("1000000"))
    price_precision: Mapped[int] = mapped_column(Integer, default=8)
    amount_precision: Mapped[int] = mapped_column(Integer, default=8)
    maker_fee: Mapped[Decimal] = mapped_column(Numeric(10, 6), default=Decimal("0.001"))
    taker_fee: Mapped[Decimal] = mapped_column(Numeric(10, 6), default=Decimal("0.001"))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)


class OrderModel(Base):
    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint(
            "filled_amount >= 0 AND filled_amount <= amount",
            name="filled_within_amount",
        ),
        Index("ix_orders_book", "trading_pair_id", "side", "status", "price"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    trading_pair_id: Mapped[str] = mapped_column(ForeignKey("trading_pairs.id"))
    type: Mapped[str] = mapped_column(String(16), default="LIMIT")
    side: Mapped[str] = mapped_column(String(8))
    price: Mapped[Optional[Decimal]] = mapped_column(MONEY)
    amount: Mapped[Decimal] = mapped_column(MONEY)
    filled_amount: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("0"))
    status: Mapped[str] = mapped_column(String(20), default="PENDING")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, onupdate=utc_now
    )
    filled_at: Mapped[Optional[datetime]] = mapped_column(DateTime)


class TradeModel(Base):
    __tablename__ = "trades"
    __table_args__ = (Index("ix_trades_pair_created", "trading_pair_id", "created_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    trading_pair_id: Mapped[str] = mapped_column(ForeignKey("trading_pairs.id"))
    buy_order_id: Mapped[Optional[str]] = mapped_column(ForeignKey("orders.id"))
    sell_order_id: Mapped[Optional[str]] = mapped_column(ForeignKey("orders.id"))
    buyer_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    seller_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    amount: Mapped[Decimal] = mapped_column(MONEY)
    price: Mapped[Decimal] = mapped_column(MONEY)
    total_value: Mapped[Decimal] = mapped_column(MONEY)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)

    buyer: Mapped[UserModel] = relationship(foreign_keys=[buyer_id])
    seller: Mapped[UserModel] = relationship(foreign_keys=[seller_id])
