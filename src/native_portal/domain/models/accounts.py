"""Domain models for portal accounts and sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Registered user record read from ``native_users``.

    Attributes:
        id: Stable account identifier.
        email: Login email, compared case-insensitively.
        password: Stored credential (plaintext or hash, per policy).
        first_name: Optional display first name.
        last_name: Optional display last name.
        phone: Opaque phone string.
        nic: Opaque national identity string.
        card_url: Optional activation card image reference.
        balance: Optional account balance.
        created_at: Creation timestamp as returned by the database.
    """

    id: int | str
    email: str
    password: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    nic: str | None = None
    card_url: str | None = None
    balance: float | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class Session:
    """Authenticated account context held by the client."""

    authenticated: bool
    email: str
    account_id: int | str | None = None
    first_name: str | None = None
    last_name: str | None = None
    card_url: str | None = None

    @classmethod
    def from_account(cls, account: Account) -> "Session":
        """Build the minimal session projection of an account."""
        return cls(
            authenticated=True,
            email=account.email,
            account_id=account.id,
            first_name=account.first_name,
            last_name=account.last_name,
            card_url=account.card_url,
        )


__all__ = ["Account", "Session"]
