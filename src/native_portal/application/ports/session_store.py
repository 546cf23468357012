"""Port for the client-side session."""

from typing import Protocol

from native_portal.domain.models.accounts import Account, Session


class SessionStorePort(Protocol):
    """Durable record of the authenticated account."""

    def establish(self, account: Account) -> Session:
        """Persist an authenticated session for the account."""

    def current(self) -> Session | None:
        """Return the active session, or None when signed out."""

    def clear(self) -> None:
        """Remove every session entry."""


__all__ = ["SessionStorePort"]
