"""Credential policies for stored passwords.

``PlaintextCredentialPolicy`` matches the existing ``native_users`` data,
which stores passwords as plaintext. ``BcryptCredentialPolicy`` stores
salted one-way hashes and should be used once the table is migrated.
"""

import hmac

import bcrypt

from native_portal.application.ports.credentials import CredentialPolicyPort


class PlaintextCredentialPolicy(CredentialPolicyPort):
    """Exact-match comparison against a plaintext stored value."""

    def verify(self, supplied: str, stored: str) -> bool:
        if supplied is None or stored is None:
            return False
        return hmac.compare_digest(
            supplied.encode("utf-8"),
            stored.encode("utf-8"),
        )

    def encode(self, password: str) -> str:
        return password


class BcryptCredentialPolicy(CredentialPolicyPort):
    """Salted bcrypt hashes."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def verify(self, supplied: str, stored: str) -> bool:
        if not supplied or not stored:
            return False
        try:
            return bcrypt.checkpw(
                supplied.encode("utf-8"),
                stored.encode("utf-8"),
            )
        except ValueError:
            # stored value is not a bcrypt hash
            return False

    def encode(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


__all__ = ["PlaintextCredentialPolicy", "BcryptCredentialPolicy"]
