"""Application use cases package."""

from .change_password import ChangePasswordUseCase
from .get_transaction_history import GetTransactionHistoryUseCase
from .manage_session import SignInUseCase, SignOutUseCase, require_session
from .transaction_list import TransactionListController
from .verify_credentials import VerifyCredentialsUseCase

__all__ = [
    "ChangePasswordUseCase",
    "GetTransactionHistoryUseCase",
    "SignInUseCase",
    "SignOutUseCase",
    "require_session",
    "TransactionListController",
    "VerifyCredentialsUseCase",
]
