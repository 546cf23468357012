"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .credentials import CredentialPolicyPort
from .database import DatabaseEnginePort
from .session_store import SessionStorePort
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "CredentialPolicyPort",
    "DatabaseEnginePort",
    "SessionStorePort",
    "TransactionsRepositoryPort",
]
