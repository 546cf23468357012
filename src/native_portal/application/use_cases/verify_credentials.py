"""Use case to check an email and password against the stored account."""

from native_portal.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from native_portal.application.ports.credentials import CredentialPolicyPort
from native_portal.domain.errors import (
    AccountNotFoundError,
    InvalidCredentialError,
)
from native_portal.domain.models.accounts import Account
from native_portal.domain.services.validation import validate_credentials_input
from native_portal.infrastructure.logging.logger import get_app_logger


class VerifyCredentialsUseCase:
    """Accept or reject a sign-in attempt.

    The lookup is the only side effect, so the use case is safe to retry.
    """

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        credential_policy: CredentialPolicyPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing account lookups.
            credential_policy: Policy comparing stored credentials.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._credential_policy = credential_policy
        self._logger = logger or get_app_logger()

    def execute(self, email: str, password: str) -> Account:
        """Return the account matching the credentials.

        Args:
            email: Raw email; trimmed and lower-cased before lookup.
            password: Password compared to the stored credential.

        Returns:
            Account: The verified account.

        Raises:
            ValidationError: If the input is malformed (no lookup is made).
            AccountNotFoundError: If no account uses the email.
            InvalidCredentialError: If the password does not match.
            ServiceUnavailableError: If the lookup fails.
        """
        normalized = validate_credentials_input(email, password)
        account = self._accounts_repository.find_by_email(normalized)
        if account is None:
            self._logger.info(f"Sign-in rejected: no account for {normalized}")
            raise AccountNotFoundError()
        if not self._credential_policy.verify(password, account.password):
            self._logger.info(
                f"Sign-in rejected: wrong password for account {account.id}"
            )
            raise InvalidCredentialError()
        return account


__all__ = ["VerifyCredentialsUseCase"]
