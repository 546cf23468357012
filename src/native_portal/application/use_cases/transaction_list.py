"""Stateful transaction list used by the dashboard.

The controller owns the projected source list and the current
:class:`ListViewState`, and recomputes the page from scratch on every read.
Changing the filter or the sort resets the page to 1; replacing the source
list keeps the current page, clamped to the new page count.
"""

from collections.abc import Sequence
from dataclasses import replace

from native_portal.domain.constants import PAGE_SIZE
from native_portal.domain.models.transactions import (
    CategoryFilter,
    ListViewState,
    SortField,
    Transaction,
    TransactionPage,
)
from native_portal.domain.services.pipeline import (
    apply_view_state,
    clamp_page,
    filter_transactions,
    sort_transactions,
    total_pages_for,
    toggle_sort,
)


class TransactionListController:
    """Hold list inputs and produce the visible page."""

    def __init__(
        self,
        transactions: Sequence[Transaction] = (),
        state: ListViewState | None = None,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self._transactions = list(transactions)
        self._state = state or ListViewState()
        self._page_size = page_size
        self._state = replace(
            self._state,
            page=self._clamped(self._state.page),
        )

    @property
    def state(self) -> ListViewState:
        return self._state

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def replace_transactions(
        self,
        transactions: Sequence[Transaction],
    ) -> None:
        """Swap in refreshed data without resetting the page."""
        self._transactions = list(transactions)
        self._state = replace(
            self._state,
            page=self._clamped(self._state.page),
        )

    def set_filter(self, category_filter: CategoryFilter | str) -> None:
        selected = CategoryFilter(category_filter)
        if selected is self._state.filter:
            return
        self._state = replace(self._state, filter=selected, page=1)

    def select_sort(self, sort_field: SortField | str) -> None:
        """Apply a sort header click (toggle or switch field)."""
        self._state = toggle_sort(self._state, sort_field)

    def go_to_page(self, page: int) -> None:
        self._state = replace(self._state, page=self._clamped(page))

    def current_page(self) -> TransactionPage:
        return apply_view_state(
            self._transactions,
            self._state,
            page_size=self._page_size,
        )

    def visible_transactions(self) -> list[Transaction]:
        """Return the filtered and sorted list across all pages."""
        filtered = filter_transactions(self._transactions, self._state.filter)
        return sort_transactions(
            filtered,
            self._state.sort_field,
            self._state.sort_direction,
        )

    def _clamped(self, page: int) -> int:
        filtered = filter_transactions(self._transactions, self._state.filter)
        total_pages = total_pages_for(len(filtered), self._page_size)
        return clamp_page(page, total_pages)


__all__ = ["TransactionListController"]
