"""SQLAlchemy-backed repository for ``native_users``."""

from sqlalchemy import text

from native_portal.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from native_portal.domain.errors import AccountNotFoundError
from native_portal.domain.models.accounts import Account
from native_portal.infrastructure.base_repository import SqlAlchemyRepository
from native_portal.utils.number_utils import coerce_float


SELECT_ACCOUNT_BY_EMAIL_SQL = text(
    """
    SELECT id, created_at, fname, lname, email, phone, nic, amount,
           card_url, password
    FROM native_users
    WHERE lower(email) = :email
    LIMIT 1
    """
)

UPDATE_PASSWORD_SQL = text(
    """
    UPDATE native_users
    SET password = :password
    WHERE id = :account_id
    """
)


def _optional_text(value) -> str | None:
    if value is None:
        return None
    return str(value)


class SqlAlchemyAccountsRepository(
    SqlAlchemyRepository,
    AccountsRepositoryPort,
):
    """Repository backed by SQLAlchemy for portal accounts."""

    def find_by_email(self, email: str) -> Account | None:
        """Return the account whose email matches, ignoring case."""
        with self._connect("looking up an account") as conn:
            row = conn.execute(
                SELECT_ACCOUNT_BY_EMAIL_SQL,
                {"email": email.lower()},
            ).first()
        if row is None:
            return None
        return Account(
            id=row.id,
            email=row.email,
            password=row.password or "",
            first_name=row.fname,
            last_name=row.lname,
            phone=_optional_text(row.phone),
            nic=_optional_text(row.nic),
            card_url=row.card_url,
            balance=None if row.amount is None else coerce_float(row.amount),
            created_at=_optional_text(row.created_at),
        )

    def update_password(self, account_id: int | str, password: str) -> None:
        """Store a new credential for the account.

        Raises:
            AccountNotFoundError: If no row has the identifier.
            ServiceUnavailableError: If the update fails.
        """
        with self._begin("updating a password") as conn:
            result = conn.execute(
                UPDATE_PASSWORD_SQL,
                {"password": password, "account_id": account_id},
            )
        if result.rowcount == 0:
            raise AccountNotFoundError()
        self._logger.info(f"Updated password for account {account_id}")


__all__ = ["SqlAlchemyAccountsRepository"]
