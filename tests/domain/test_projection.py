"""Tests for transaction projection."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from native_portal.domain.models.transactions import (
    RawTransaction,
    TransactionCategory,
)
from native_portal.domain.services.projection import (
    categorize,
    project_transaction,
    project_transactions,
)


def _raw(tag, amount, created_at="2024-01-15T10:00:00", txn_id=1):
    return RawTransaction(
        id=txn_id,
        user_id=7,
        type=tag,
        amount=amount,
        created_at=created_at,
    )


@pytest.mark.parametrize("tag", ["top up", "Top Up", "TOP UP", "  top up "])
def test_top_up_tags_project_to_positive_amounts(tag) -> None:
    """Any casing of "top up" is a credit."""
    txn = project_transaction(_raw(tag, "100"))

    assert txn.category is TransactionCategory.TOP_UP
    assert txn.amount == 100.0


@pytest.mark.parametrize("tag", ["purchase", "Top-up", "topup", "", None])
def test_other_tags_project_to_negative_amounts(tag) -> None:
    """Everything that is not "top up" is a purchase."""
    txn = project_transaction(_raw(tag, 45.5))

    assert txn.category is TransactionCategory.PURCHASE
    assert txn.amount == -45.5


def test_numeric_inputs_of_every_kind_are_accepted() -> None:
    assert project_transaction(_raw("top up", 12)).amount == 12.0
    assert project_transaction(_raw("top up", " 12.25 ")).amount == 12.25
    assert project_transaction(_raw("top up", Decimal("3.10"))).amount == 3.1


@pytest.mark.parametrize(
    "amount",
    ["abc", "", None, "nan", "inf", float("nan"), float("-inf"), "1,200"],
)
def test_unparseable_amounts_project_to_zero(amount) -> None:
    """Unparseable or non-finite amounts become exactly zero."""
    purchase = project_transaction(_raw("purchase", amount))
    top_up = project_transaction(_raw("top up", amount))

    assert purchase.amount == 0.0
    assert top_up.amount == 0.0
    assert str(purchase.amount) == "0.0"


def test_negative_raw_magnitude_keeps_sign_convention() -> None:
    assert project_transaction(_raw("top up", "-20")).amount == 20.0
    assert project_transaction(_raw("purchase", "-20")).amount == -20.0


def test_datetime_timestamps_become_iso_strings() -> None:
    created = datetime(2024, 1, 2, 8, 30, tzinfo=timezone.utc)

    txn = project_transaction(_raw("top up", 1, created_at=created))

    assert txn.timestamp == "2024-01-02T08:30:00+00:00"


def test_missing_timestamp_projects_to_empty_string() -> None:
    projected = project_transaction(_raw("top up", 1, created_at=None))

    assert projected.timestamp == ""


def test_project_transactions_preserves_order() -> None:
    rows = [_raw("top up", 1, txn_id=1), _raw("purchase", 2, txn_id=2)]

    result = project_transactions(rows)

    assert [txn.id for txn in result] == [1, 2]


def test_categorize_handles_missing_tag() -> None:
    assert categorize(None) is TransactionCategory.PURCHASE
