"""Domain models package."""

from .accounts import Account, Session
from .transactions import (
    CategoryFilter,
    ListViewState,
    RawTransaction,
    SortDirection,
    SortField,
    Transaction,
    TransactionCategory,
    TransactionPage,
    TransactionTotals,
)

__all__ = [
    "Account",
    "Session",
    "CategoryFilter",
    "ListViewState",
    "RawTransaction",
    "SortDirection",
    "SortField",
    "Transaction",
    "TransactionCategory",
    "TransactionPage",
    "TransactionTotals",
]
