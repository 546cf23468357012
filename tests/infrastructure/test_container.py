"""Tests for the composition root."""

from pathlib import Path

import pytest

from native_portal.domain.models.accounts import Account
from native_portal.infrastructure import container
from native_portal.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from native_portal.infrastructure.credentials import (
    BcryptCredentialPolicy,
    PlaintextCredentialPolicy,
)
from native_portal.infrastructure.session_store import (
    CLIENT_TOKEN_KEY,
    JsonFileStorage,
    KeyValueSessionStore,
)
from native_portal.infrastructure.settings import PortalSettings
from native_portal.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def test_build_repositories_use_given_port() -> None:
    db_port = object()

    accounts = container.build_accounts_repository(db_port)
    transactions = container.build_transactions_repository(db_port)

    assert isinstance(accounts, SqlAlchemyAccountsRepository)
    assert isinstance(transactions, SqlAlchemyTransactionsRepository)
    assert accounts._db_port is db_port
    assert transactions._db_port is db_port


@pytest.mark.parametrize(
    ("scheme", "expected"),
    [
        ("plaintext", PlaintextCredentialPolicy),
        ("bcrypt", BcryptCredentialPolicy),
    ],
)
def test_build_credential_policy_by_scheme(scheme, expected) -> None:
    settings = PortalSettings(credential_scheme=scheme)

    assert isinstance(container.build_credential_policy(settings), expected)


def test_build_credential_policy_rejects_unknown_scheme() -> None:
    with pytest.raises(ValueError):
        container.build_credential_policy(
            PortalSettings(credential_scheme="md5")
        )


def test_build_session_store_streamlit_uses_given_mapping() -> None:
    storage: dict[str, str] = {}
    settings = PortalSettings(session_backend="streamlit")

    store = container.build_session_store(storage, settings=settings)

    assert isinstance(store, KeyValueSessionStore)
    assert store._storage is storage


def test_build_session_store_streamlit_requires_mapping() -> None:
    with pytest.raises(RuntimeError):
        container.build_session_store(
            None,
            settings=PortalSettings(session_backend="streamlit"),
        )


def test_build_session_store_file_backend(tmp_path: Path) -> None:
    settings = PortalSettings(
        session_backend="file",
        session_file=tmp_path / "session.json",
    )

    store = container.build_session_store(settings=settings)

    assert isinstance(store._storage, JsonFileStorage)
    assert store._storage.path == tmp_path / "session.json"


def test_build_session_store_rejects_unknown_backend() -> None:
    with pytest.raises(ValueError):
        container.build_session_store(
            {},
            settings=PortalSettings(session_backend="redis"),
        )


def test_file_backend_keeps_one_file_per_client(tmp_path: Path) -> None:
    settings = PortalSettings(
        session_backend="file",
        session_file=tmp_path / "session.json",
    )
    first_client: dict[str, str] = {}
    second_client: dict[str, str] = {}
    account = Account(id=5, email="ann@example.com", password="pw")

    first = container.build_session_store(first_client, settings=settings)
    second = container.build_session_store(second_client, settings=settings)
    first.establish(account)

    assert first._storage.path != second._storage.path
    assert first._storage.path.parent == tmp_path
    assert first.current().email == "ann@example.com"
    assert second.current() is None

    second.establish(Account(id=6, email="bo@example.com", password="pw"))
    second.clear()

    assert second.current() is None
    assert first.current().account_id == 5


def test_file_backend_reuses_client_file(tmp_path: Path) -> None:
    settings = PortalSettings(
        session_backend="file",
        session_file=tmp_path / "session.json",
    )
    client: dict[str, str] = {}

    first = container.build_session_store(client, settings=settings)
    first.establish(Account(id=5, email="ann@example.com", password="pw"))
    rerun = container.build_session_store(client, settings=settings)

    assert client[CLIENT_TOKEN_KEY]
    assert rerun._storage.path == first._storage.path
    assert rerun.current().account_id == 5
