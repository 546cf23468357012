"""Port for comparing and encoding stored credentials."""

from typing import Protocol


class CredentialPolicyPort(Protocol):
    """Policy deciding how passwords are stored and checked."""

    def verify(self, supplied: str, stored: str) -> bool:
        """Return True when the supplied password matches the stored one."""

    def encode(self, password: str) -> str:
        """Return the value to store for a new password."""


__all__ = ["CredentialPolicyPort"]
