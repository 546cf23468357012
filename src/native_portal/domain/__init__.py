"""Domain package for business rules and core models."""

from .constants import MIN_PASSWORD_LENGTH, PAGE_SIZE, TOP_UP_TAG
from .errors import (
    AccountNotFoundError,
    InvalidCredentialError,
    PortalError,
    ServiceUnavailableError,
    SessionRequiredError,
    ValidationError,
    WrongOldPasswordError,
)
from .models import (
    Account,
    CategoryFilter,
    ListViewState,
    RawTransaction,
    Session,
    SortDirection,
    SortField,
    Transaction,
    TransactionCategory,
    TransactionPage,
    TransactionTotals,
)

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "PAGE_SIZE",
    "TOP_UP_TAG",
    "AccountNotFoundError",
    "InvalidCredentialError",
    "PortalError",
    "ServiceUnavailableError",
    "SessionRequiredError",
    "ValidationError",
    "WrongOldPasswordError",
    "Account",
    "CategoryFilter",
    "ListViewState",
    "RawTransaction",
    "Session",
    "SortDirection",
    "SortField",
    "Transaction",
    "TransactionCategory",
    "TransactionPage",
    "TransactionTotals",
]
