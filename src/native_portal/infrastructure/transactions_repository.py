"""SQLAlchemy-backed repository for ``native_transactions``."""

from sqlalchemy import text

from native_portal.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from native_portal.domain.models.transactions import RawTransaction
from native_portal.infrastructure.base_repository import SqlAlchemyRepository


SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, user_id, type, amount, created_at
    FROM native_transactions
    WHERE user_id = :user_id
    ORDER BY created_at DESC
    """
)


class SqlAlchemyTransactionsRepository(
    SqlAlchemyRepository,
    TransactionsRepositoryPort,
):
    """Repository backed by SQLAlchemy for ledger rows."""

    def fetch_for_account(self, account_id: int | str) -> list[RawTransaction]:
        """Return the account's ledger rows, newest first."""
        with self._connect("fetching transactions") as conn:
            rows = conn.execute(
                SELECT_TRANSACTIONS_SQL,
                {"user_id": account_id},
            ).all()
        return [
            RawTransaction(
                id=row.id,
                user_id=row.user_id,
                type=row.type,
                amount=row.amount,
                created_at=row.created_at,
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyTransactionsRepository"]
