"""Tests for the ChangePasswordUseCase."""

from unittest.mock import MagicMock

import pytest

from native_portal.application.use_cases.change_password import (
    ChangePasswordUseCase,
)
from native_portal.domain.errors import (
    AccountNotFoundError,
    ServiceUnavailableError,
    ValidationError,
    WrongOldPasswordError,
)
from native_portal.domain.models.accounts import Account
from native_portal.infrastructure.credentials import PlaintextCredentialPolicy


class _InMemoryAccounts:
    """Accounts repository keeping rows in a dict keyed by email."""

    def __init__(self, *accounts: Account) -> None:
        self.rows = {account.email: account for account in accounts}
        self.updates: list[tuple] = []

    def find_by_email(self, email: str):
        return self.rows.get(email)

    def update_password(self, account_id, password: str) -> None:
        self.updates.append((account_id, password))
        for email, account in self.rows.items():
            if account.id == account_id:
                self.rows[email] = Account(
                    id=account.id,
                    email=account.email,
                    password=password,
                )


def _use_case(repository, **kwargs) -> ChangePasswordUseCase:
    kwargs.setdefault("credential_policy", PlaintextCredentialPolicy())
    return ChangePasswordUseCase(
        repository,
        logger=MagicMock(),
        usage_logger=MagicMock(),
        **kwargs,
    )


def test_execute_persists_new_password() -> None:
    repository = _InMemoryAccounts(
        Account(id=3, email="a@b.com", password="old")
    )

    result = _use_case(repository).execute(
        "a@b.com", "old", "new1xx", "new1xx"
    )

    assert result is None
    assert repository.rows["a@b.com"].password == "new1xx"
    assert repository.updates == [(3, "new1xx")]


def test_execute_rejects_mismatch_without_backend_call() -> None:
    repository = MagicMock()

    with pytest.raises(ValidationError) as excinfo:
        _use_case(repository).execute("a@b.com", "old", "abc", "xyz")

    assert "confirm_password" in excinfo.value.field_errors
    repository.find_by_email.assert_not_called()
    repository.update_password.assert_not_called()


def test_execute_raises_not_found() -> None:
    repository = _InMemoryAccounts()

    with pytest.raises(AccountNotFoundError):
        _use_case(repository).execute("a@b.com", "old", "new123", "new123")


def test_execute_rejects_wrong_old_password() -> None:
    repository = _InMemoryAccounts(
        Account(id=3, email="a@b.com", password="actual")
    )

    with pytest.raises(WrongOldPasswordError):
        _use_case(repository).execute("a@b.com", "guess", "new123", "new123")

    assert repository.updates == []


def test_execute_surfaces_update_failure() -> None:
    repository = MagicMock()
    repository.find_by_email.return_value = Account(
        id=3,
        email="a@b.com",
        password="old",
    )
    repository.update_password.side_effect = ServiceUnavailableError()

    with pytest.raises(ServiceUnavailableError):
        _use_case(repository).execute("a@b.com", "old", "new123", "new123")

    repository.update_password.assert_called_once_with(3, "new123")


def test_execute_stores_encoded_password() -> None:
    repository = _InMemoryAccounts(
        Account(id=3, email="a@b.com", password="h")
    )
    policy = MagicMock()
    policy.verify.return_value = True
    policy.encode.return_value = "encoded"

    _use_case(repository, credential_policy=policy).execute(
        "a@b.com", "old", "new123", "new123"
    )

    assert repository.updates == [(3, "encoded")]
    policy.encode.assert_called_once_with("new123")


def test_credential_policy_is_required() -> None:
    with pytest.raises(TypeError):
        ChangePasswordUseCase(MagicMock(), logger=MagicMock())
