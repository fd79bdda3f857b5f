"""
Adapter: Transaction ledger.

Implements LedgerRepository port. Rows are inserted only; there is no
update or delete path.
"""

import logging
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.investments.entities import LedgerTransaction
from app.domain.investments.ports import LedgerRepository
from app.domain.shared.clock import utc_now
from app.infrastructure.persistence.models import TransactionModel

logger = logging.getLogger(__name__)


class LedgerRepositoryAdapter(LedgerRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def append(self, entry: LedgerTransaction) -> LedgerTransaction:
        row = TransactionModel(
            id=entry.id or str(uuid4()),
            user_id=entry.user_id,
            type=entry.type.value,
            amount=entry.amount,
            status=entry.status.value,
            description=entry.description,
            created_at=entry.created_at or utc_now(),
        )
        self._session.add(row)
        self._session.flush()
        logger.debug("Ledger %s %s for user=%s", row.type, row.amount, row.user_id)
        return LedgerTransaction(
            id=row.id,
            user_id=row.user_id,
            type=entry.type,
            amount=entry.amount,
            status=entry.status,
            description=row.description,
            created_at=row.created_at,
        )
