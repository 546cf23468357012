"""Tests for the SQLAlchemy accounts repository."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from native_portal.domain.errors import (
    CONFIGURATION_MISSING_MESSAGE,
    AccountNotFoundError,
    ServiceUnavailableError,
)
from native_portal.domain.models.accounts import Account
from native_portal.infrastructure import db as db_module
from native_portal.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)


INSERT_USER_SQL = text(
    """
    INSERT INTO native_users (
        id, created_at, fname, lname, email, phone, nic, amount,
        card_url, password
    )
    VALUES (
        :id, :created_at, :fname, :lname, :email, :phone, :nic, :amount,
        :card_url, :password
    )
    """
)


def _seed(engine, **overrides) -> None:
    row = {
        "id": 1,
        "created_at": "2024-01-01T00:00:00",
        "fname": "Ann",
        "lname": "Lee",
        "email": "Ann@Example.com",
        "phone": "0771234567",
        "nic": None,
        "amount": "1500.50",
        "card_url": "cards/1.png",
        "password": "right",
    }
    row.update(overrides)
    with engine.begin() as conn:
        conn.execute(INSERT_USER_SQL, row)


def test_find_by_email_matches_case_insensitively(db_port, sqlite_engine):
    _seed(sqlite_engine)
    repository = SqlAlchemyAccountsRepository(db_port, logger=MagicMock())

    account = repository.find_by_email("ann@example.com")

    assert account == Account(
        id=1,
        email="Ann@Example.com",
        password="right",
        first_name="Ann",
        last_name="Lee",
        phone="0771234567",
        nic=None,
        card_url="cards/1.png",
        balance=1500.5,
        created_at="2024-01-01T00:00:00",
    )


def test_find_by_email_returns_none_when_missing(db_port):
    repository = SqlAlchemyAccountsRepository(db_port, logger=MagicMock())

    assert repository.find_by_email("nobody@example.com") is None


def test_update_password_persists_value(db_port, sqlite_engine):
    _seed(sqlite_engine)
    repository = SqlAlchemyAccountsRepository(db_port, logger=MagicMock())

    repository.update_password(1, "new123")

    assert repository.find_by_email("ann@example.com").password == "new123"


def test_update_password_raises_for_unknown_id(db_port):
    repository = SqlAlchemyAccountsRepository(db_port, logger=MagicMock())

    with pytest.raises(AccountNotFoundError):
        repository.update_password(99, "new123")


def test_database_errors_become_service_unavailable():
    engine = MagicMock()
    engine.connect.side_effect = OperationalError("SELECT", {}, Exception())
    db_port = SimpleNamespace(get_data_engine=lambda: engine)
    logger = MagicMock()
    repository = SqlAlchemyAccountsRepository(db_port, logger=logger)

    with pytest.raises(ServiceUnavailableError):
        repository.find_by_email("ann@example.com")

    logger.error.assert_called_once()


def test_missing_configuration_becomes_service_unavailable():
    def _missing():
        raise RuntimeError("Missing environment variable: DATA_DB_URL")

    db_port = SimpleNamespace(get_data_engine=_missing)
    repository = SqlAlchemyAccountsRepository(db_port, logger=MagicMock())

    with pytest.raises(ServiceUnavailableError) as excinfo:
        repository.find_by_email("ann@example.com")

    assert str(excinfo.value) == CONFIGURATION_MISSING_MESSAGE


def test_malformed_database_url_becomes_service_unavailable(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("DATA_DB_URL", "not a url")
    monkeypatch.setattr(db_module, "_data_engine", None)
    logger = MagicMock()
    repository = SqlAlchemyAccountsRepository(
        db_module.SqlAlchemyDatabaseEngineAdapter(),
        logger=logger,
    )

    with pytest.raises(ServiceUnavailableError) as excinfo:
        repository.find_by_email("ann@example.com")

    assert str(excinfo.value) == CONFIGURATION_MISSING_MESSAGE
    assert isinstance(excinfo.value.__cause__, ArgumentError)
    logger.error.assert_called_once()
