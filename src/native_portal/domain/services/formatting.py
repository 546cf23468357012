"""Display helpers for the dashboard: names, amounts, dates and totals."""

from collections.abc import Iterable
from datetime import date, datetime, timezone

from native_portal.domain.models.transactions import (
    Transaction,
    TransactionCategory,
    TransactionTotals,
)


def display_name(
    first_name: str | None,
    last_name: str | None,
    email: str | None,
) -> str:
    """Return the greeting name for an account.

    Uses the first and last names when any is set, otherwise the email
    local part with its first character upper-cased.
    """
    parts = [part.strip() for part in (first_name, last_name) if part]
    name = " ".join(part for part in parts if part)
    if name:
        return name
    local_part = (email or "").split("@")[0]
    return local_part[:1].upper() + local_part[1:]


def format_amount(amount: float) -> str:
    """Format a signed amount as ``+$1,234.50`` or ``-$89.99``."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}${abs(amount):,.2f}"


def _parse_timestamp(timestamp: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat((timestamp or "").strip())
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed


def format_date(timestamp: str) -> str:
    """Format an ISO timestamp as ``Jan 15, 2024``.

    Unparseable input is returned unchanged.
    """
    parsed = _parse_timestamp(timestamp)
    if parsed is None:
        return timestamp
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def summarize_transactions(
    transactions: Iterable[Transaction],
) -> TransactionTotals:
    """Sum top-ups and purchase magnitudes separately."""
    top_up_total = 0.0
    purchase_total = 0.0
    for txn in transactions:
        if txn.category is TransactionCategory.TOP_UP:
            top_up_total += txn.amount
        else:
            purchase_total += abs(txn.amount)
    return TransactionTotals(
        top_up_total=top_up_total,
        purchase_total=purchase_total,
    )


def daily_net_amounts(
    transactions: Iterable[Transaction],
) -> list[tuple[date, float]]:
    """Return per-day signed sums in ascending date order.

    Transactions with unparseable timestamps are left out.
    """
    totals: dict[date, float] = {}
    for txn in transactions:
        parsed = _parse_timestamp(txn.timestamp)
        if parsed is None:
            continue
        day = parsed.date()
        totals[day] = totals.get(day, 0.0) + txn.amount
    return sorted(totals.items())


__all__ = [
    "display_name",
    "format_amount",
    "format_date",
    "summarize_transactions",
    "daily_net_amounts",
]
