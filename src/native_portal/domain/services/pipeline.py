"""Filter, sort and paginate projected transactions.

The pipeline is a pure function of its inputs: callers recompute it
whenever the source list, the filter, the sort or the page changes.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import datetime, timezone

from native_portal.domain.constants import PAGE_SIZE
from native_portal.domain.models.transactions import (
    CategoryFilter,
    ListViewState,
    SortDirection,
    SortField,
    Transaction,
    TransactionPage,
)


def timestamp_instant(timestamp: str) -> float:
    """Convert an ISO timestamp into comparable epoch seconds.

    Naive timestamps are read as UTC. Unparseable values map to negative
    infinity so they sort as the earliest instant.
    """
    text = (timestamp or "").strip()
    if not text:
        return float("-inf")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return float("-inf")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


_SORT_KEYS: dict[SortField, Callable[[Transaction], object]] = {
    SortField.DATE: lambda txn: timestamp_instant(txn.timestamp),
    SortField.CATEGORY: lambda txn: txn.category.value,
    SortField.AMOUNT: lambda txn: txn.amount,
}


def filter_transactions(
    transactions: Sequence[Transaction],
    category_filter: CategoryFilter | str = CategoryFilter.ALL,
) -> list[Transaction]:
    """Keep transactions matching the category filter, in input order."""
    category = CategoryFilter(category_filter).category
    if category is None:
        return list(transactions)
    return [txn for txn in transactions if txn.category is category]


def sort_transactions(
    transactions: Sequence[Transaction],
    sort_field: SortField | str = SortField.DATE,
    sort_direction: SortDirection | str = SortDirection.DESCENDING,
) -> list[Transaction]:
    """Stable sort by field; descending mirrors ascending.

    Transactions with equal keys keep their relative input order in both
    directions.
    """
    key = _SORT_KEYS[SortField(sort_field)]
    descending = SortDirection(sort_direction) is SortDirection.DESCENDING
    return sorted(transactions, key=key, reverse=descending)


def total_pages_for(count: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a requested page into ``[1, total_pages]``."""
    return min(max(int(page), 1), max(total_pages, 1))


def paginate(
    transactions: Sequence[Transaction],
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> TransactionPage:
    """Slice one page out of an already filtered and sorted list.

    Args:
        transactions: Filtered and sorted transactions.
        page: Requested 1-based page; out-of-range values are clamped.
        page_size: Rows per page.

    Returns:
        TransactionPage: Rows of the clamped page with pagination metadata.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    total_count = len(transactions)
    total_pages = total_pages_for(total_count, page_size)
    current = clamp_page(page, total_pages)
    start = (current - 1) * page_size
    end = min(current * page_size, total_count)
    return TransactionPage(
        rows=list(transactions[start:end]),
        total_count=total_count,
        total_pages=total_pages,
        page=current,
    )


def apply_list_pipeline(
    transactions: Sequence[Transaction],
    category_filter: CategoryFilter | str = CategoryFilter.ALL,
    sort_field: SortField | str = SortField.DATE,
    sort_direction: SortDirection | str = SortDirection.DESCENDING,
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> TransactionPage:
    """Filter, sort and paginate transactions.

    Args:
        transactions: Projected transactions, in source order.
        category_filter: All, Purchase or Top-up.
        sort_field: date, category or amount.
        sort_direction: asc or desc.
        page: Requested 1-based page.
        page_size: Rows per page.

    Returns:
        TransactionPage: The requested (clamped) page. Empty input yields an
        empty first page with ``total_pages == 1``.
    """
    filtered = filter_transactions(transactions, category_filter)
    ordered = sort_transactions(filtered, sort_field, sort_direction)
    return paginate(ordered, page=page, page_size=page_size)


def apply_view_state(
    transactions: Sequence[Transaction],
    state: ListViewState,
    page_size: int = PAGE_SIZE,
) -> TransactionPage:
    """Run the pipeline with the selections held by a view state."""
    return apply_list_pipeline(
        transactions,
        category_filter=state.filter,
        sort_field=state.sort_field,
        sort_direction=state.sort_direction,
        page=state.page,
        page_size=page_size,
    )


def toggle_sort(
    state: ListViewState,
    sort_field: SortField | str,
) -> ListViewState:
    """Return the state after a sort header is selected.

    Re-selecting the active field flips the direction; a new field starts
    descending. The page always resets to 1.
    """
    field = SortField(sort_field)
    if field is state.sort_field:
        direction = state.sort_direction.toggled()
    else:
        direction = SortDirection.DESCENDING
    return replace(state, sort_field=field, sort_direction=direction, page=1)


__all__ = [
    "timestamp_instant",
    "filter_transactions",
    "sort_transactions",
    "total_pages_for",
    "clamp_page",
    "paginate",
    "apply_list_pipeline",
    "apply_view_state",
    "toggle_sort",
]
