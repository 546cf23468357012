"""Use case to load and project an account's transaction history."""

from native_portal.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from native_portal.domain.models.transactions import Transaction
from native_portal.domain.services.projection import project_transactions
from native_portal.infrastructure.logging.logger import get_app_logger


class GetTransactionHistoryUseCase:
    """Fetch raw ledger rows for an account and project them."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: int | str) -> list[Transaction]:
        """Return the account's projected transactions, newest first.

        Args:
            account_id: Identifier of the signed-in account.

        Returns:
            list[Transaction]: Signed transactions in repository order.
        """
        rows = self._transactions_repository.fetch_for_account(account_id)
        self._logger.info(
            f"Fetched {len(rows)} transactions for account {account_id}"
        )
        return project_transactions(rows)


__all__ = ["GetTransactionHistoryUseCase"]
