"""Use case to replace an account's password.

The flow is linear and stops at the first failing step:

* validate the four form inputs locally;
* look up the account by normalized email;
* check the current password against the stored credential;
* persist the new credential.
"""

from native_portal.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from native_portal.application.ports.credentials import CredentialPolicyPort
from native_portal.domain.errors import (
    AccountNotFoundError,
    WrongOldPasswordError,
)
from native_portal.domain.services.validation import validate_password_change
from native_portal.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class ChangePasswordUseCase:
    """Validate, re-verify and persist a new password."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        credential_policy: CredentialPolicyPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing lookups and updates.
            credential_policy: Policy comparing and encoding passwords.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user activity.
        """
        self._accounts_repository = accounts_repository
        self._credential_policy = credential_policy
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        email: str,
        old_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        """Change the password; returns None on success.

        Raises:
            ValidationError: If any input is invalid (no remote call made).
            AccountNotFoundError: If no account uses the email.
            WrongOldPasswordError: If the current password does not match.
            ServiceUnavailableError: If the lookup or update fails.
        """
        normalized = validate_password_change(
            email,
            old_password,
            new_password,
            confirm_password,
        )
        account = self._accounts_repository.find_by_email(normalized)
        if account is None:
            self._logger.info(
                f"Password change rejected: no account for {normalized}"
            )
            raise AccountNotFoundError()
        if not self._credential_policy.verify(old_password, account.password):
            self._logger.info(
                "Password change rejected: wrong current password for "
                f"account {account.id}"
            )
            raise WrongOldPasswordError()

        self._accounts_repository.update_password(
            account.id,
            self._credential_policy.encode(new_password),
        )
        self._usage_logger.info(f"Password changed for account {account.id}")


__all__ = ["ChangePasswordUseCase"]
