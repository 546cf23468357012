"""Domain models for transaction history and its list view."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionCategory(str, Enum):
    """Projected transaction category, valued by its display label."""

    PURCHASE = "Purchase"
    TOP_UP = "Top-up"


class CategoryFilter(str, Enum):
    """Category filter offered by the transaction list."""

    ALL = "All"
    PURCHASE = "Purchase"
    TOP_UP = "Top-up"

    @property
    def category(self) -> TransactionCategory | None:
        """Return the category kept by this filter, or None for All."""
        if self is CategoryFilter.ALL:
            return None
        return TransactionCategory(self.value)


class SortField(str, Enum):
    DATE = "date"
    CATEGORY = "category"
    AMOUNT = "amount"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


@dataclass(frozen=True)
class RawTransaction:
    """Ledger row read from ``native_transactions``.

    Attributes:
        id: Transaction identifier.
        user_id: Owning account identifier.
        type: Raw category tag ("top up" means credit).
        amount: Unsigned magnitude as a number or numeric string.
        created_at: Creation timestamp (ISO string or datetime).
    """

    id: int | str
    user_id: int | str | None
    type: str | None
    amount: str | int | float | Decimal | None
    created_at: str | datetime | None


@dataclass(frozen=True)
class Transaction:
    """Normalized, signed transaction view model."""

    id: int | str
    timestamp: str
    amount: float
    category: TransactionCategory


@dataclass(frozen=True)
class ListViewState:
    """Filter, sort and page selection of the transaction list."""

    filter: CategoryFilter = CategoryFilter.ALL
    sort_field: SortField = SortField.DATE
    sort_direction: SortDirection = SortDirection.DESCENDING
    page: int = 1


@dataclass(frozen=True)
class TransactionPage:
    """One page of the transaction list plus pagination metadata."""

    rows: list[Transaction] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 1
    page: int = 1

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class TransactionTotals:
    """Aggregated credit and debit totals of a transaction list."""

    top_up_total: float
    purchase_total: float

    @property
    def net(self) -> float:
        """Return top-ups minus purchases."""
        return self.top_up_total - self.purchase_total


__all__ = [
    "TransactionCategory",
    "CategoryFilter",
    "SortField",
    "SortDirection",
    "RawTransaction",
    "Transaction",
    "ListViewState",
    "TransactionPage",
    "TransactionTotals",
]
