"""Composition root for wiring infrastructure adapters."""

import uuid
from collections.abc import MutableMapping
from pathlib import Path

from native_portal.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from native_portal.application.ports.credentials import CredentialPolicyPort
from native_portal.application.ports.database import DatabaseEnginePort
from native_portal.application.ports.session_store import SessionStorePort
from native_portal.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from native_portal.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from native_portal.infrastructure.credentials import (
    BcryptCredentialPolicy,
    PlaintextCredentialPolicy,
)
from native_portal.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from native_portal.infrastructure.logging.logger import get_app_logger
from native_portal.infrastructure.session_store import (
    CLIENT_TOKEN_KEY,
    JsonFileStorage,
    KeyValueSessionStore,
)
from native_portal.infrastructure.settings import PortalSettings
from native_portal.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the native_users repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the native_transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(resolved_db)


def build_credential_policy(
    settings: PortalSettings | None = None,
) -> CredentialPolicyPort:
    """Return the configured credential policy."""
    resolved = settings or PortalSettings.from_env()
    if resolved.credential_scheme == "plaintext":
        return PlaintextCredentialPolicy()
    if resolved.credential_scheme == "bcrypt":
        return BcryptCredentialPolicy()
    raise ValueError(
        "Unsupported credential scheme: "
        f"{resolved.credential_scheme}. Expected plaintext or bcrypt."
    )


def build_session_store(
    storage: MutableMapping | None = None,
    settings: PortalSettings | None = None,
) -> SessionStorePort:
    """Return the configured session store.

    Args:
        storage: Per-client mapping (the caller passes
            ``st.session_state``). The streamlit backend keeps the session
            in it; the file backend keeps only a client token there and
            writes the session to a file named after that token.
        settings: Optional settings override.
    """
    resolved = settings or PortalSettings.from_env()
    logger = get_app_logger()
    if resolved.session_backend == "file":
        if resolved.session_file is None:
            raise RuntimeError("File session backend requires SESSION_FILE.")
        session_file = resolved.session_file
        if storage is not None:
            session_file = _client_session_file(session_file, storage)
        return KeyValueSessionStore(
            JsonFileStorage(session_file, logger=logger),
            logger=logger,
        )
    if resolved.session_backend == "streamlit":
        if storage is None:
            raise RuntimeError(
                "Streamlit session backend requires a storage mapping."
            )
        return KeyValueSessionStore(storage, logger=logger)
    raise ValueError(
        "Unsupported session backend: "
        f"{resolved.session_backend}. Expected streamlit or file."
    )


def _client_session_file(base: Path, storage: MutableMapping) -> Path:
    """Return the session file owned by the client behind ``storage``.

    A random token is stored on first use, so each browser session maps to
    its own ``<stem>_<token><suffix>`` file next to ``base``.
    """
    token = storage.get(CLIENT_TOKEN_KEY)
    if not token:
        token = uuid.uuid4().hex
        storage[CLIENT_TOKEN_KEY] = token
    return base.with_name(f"{base.stem}_{token}{base.suffix}")


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_transactions_repository",
    "build_credential_policy",
    "build_session_store",
]
