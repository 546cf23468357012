"""Port for reading an account's ledger rows."""

from typing import Protocol

from native_portal.domain.models.transactions import RawTransaction


class TransactionsRepositoryPort(Protocol):
    """Port exposing read access to ``native_transactions``."""

    def fetch_for_account(self, account_id: int | str) -> list[RawTransaction]:
        """Return the account's transactions, newest first."""


__all__ = ["TransactionsRepositoryPort"]
