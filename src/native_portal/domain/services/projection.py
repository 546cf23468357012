"""Projection of raw ledger rows into signed transaction view models."""

from collections.abc import Iterable
from datetime import datetime

from native_portal.domain.constants import TOP_UP_TAG
from native_portal.domain.models.transactions import (
    RawTransaction,
    Transaction,
    TransactionCategory,
)
from native_portal.domain.services.normalization import normalize_category_tag
from native_portal.utils.number_utils import coerce_float


def categorize(tag: str | None) -> TransactionCategory:
    """Map a raw category tag to its projected category.

    Only a case-insensitive "top up" is a credit; anything else is a
    purchase.
    """
    if normalize_category_tag(tag) == TOP_UP_TAG:
        return TransactionCategory.TOP_UP
    return TransactionCategory.PURCHASE


def _timestamp_text(created_at: str | datetime | None) -> str:
    if created_at is None:
        return ""
    if isinstance(created_at, datetime):
        return created_at.isoformat()
    return str(created_at)


def project_transaction(raw: RawTransaction) -> Transaction:
    """Project a raw ledger row into a signed transaction.

    Args:
        raw: Row read from ``native_transactions``.

    Returns:
        Transaction: Positive amount for top-ups, negative for purchases.
        Unparseable or non-finite amounts project to 0.0.
    """
    category = categorize(raw.type)
    magnitude = abs(coerce_float(raw.amount))
    if category is TransactionCategory.TOP_UP:
        amount = magnitude
    else:
        # -0.0 would render as a negative zero
        amount = -magnitude if magnitude else 0.0
    return Transaction(
        id=raw.id,
        timestamp=_timestamp_text(raw.created_at),
        amount=amount,
        category=category,
    )


def project_transactions(rows: Iterable[RawTransaction]) -> list[Transaction]:
    """Project every raw row, preserving input order."""
    return [project_transaction(row) for row in rows]


__all__ = ["categorize", "project_transaction", "project_transactions"]
