"""
Adapter: Wallet repository.

Implements WalletRepository port over the wallets table. Reads for
mutation lock the row (SELECT ... FOR UPDATE) until the surrounding
unit of work commits or rolls back.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.domain.investments.entities import Wallet
from app.domain.investments.ports import WalletRepository
from app.domain.shared.clock import utc_now
from app.infrastructure.persistence.models import WalletModel


class WalletRepositoryAdapter(WalletRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get_for_update(self, user_id: str) -> Optional[Wallet]:
        row = self._session.scalars(
            select(WalletModel).where(WalletModel.user_id == user_id).with_for_update()
        ).first()
        if row is None:
            return None
        return Wallet(
            id=row.id,
            user_id=row.user_id,
            balance=row.balance,
            token_balance=row.token_balance,
        )

    def set_balance(self, wallet_id: str, balance: Decimal) -> None:
        self._session.execute(
            update(WalletModel)
            .where(WalletModel.id == wallet_id)
            .values(balance=balance, updated_at=utc_now())
        )
