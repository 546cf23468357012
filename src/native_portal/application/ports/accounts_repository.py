"""Port for reading and updating portal accounts."""

from typing import Protocol

from native_portal.domain.models.accounts import Account


class AccountsRepositoryPort(Protocol):
    """Port exposing account lookup and credential updates."""

    def find_by_email(self, email: str) -> Account | None:
        """Return the account for a normalized email, or None."""

    def update_password(self, account_id: int | str, password: str) -> None:
        """Persist a new stored credential for the account."""


__all__ = ["AccountsRepositoryPort"]
