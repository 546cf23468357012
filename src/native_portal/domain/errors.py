"""Domain errors raised by portal use cases.

Every error carries a message that can be shown to the user as-is.
"""

from collections.abc import Mapping


GENERIC_FAILURE_MESSAGE = "Something went wrong. Please try again."
CONFIGURATION_MISSING_MESSAGE = (
    "App configuration missing. Please try again later."
)


class PortalError(Exception):
    """Base class for errors surfaced to the presentation layer."""

    default_message = GENERIC_FAILURE_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PortalError):
    """Malformed input detected before any remote call.

    Attributes:
        field_errors: Mapping of input field name to its error message, in
            the order the fields were checked.
    """

    default_message = "Please correct the highlighted fields."

    def __init__(self, field_errors: Mapping[str, str]) -> None:
        self.field_errors = dict(field_errors)
        first = next(iter(self.field_errors.values()), None)
        super().__init__(first)


class AccountNotFoundError(PortalError):
    default_message = "No account found with this email."


class InvalidCredentialError(PortalError):
    default_message = "Incorrect password."


class WrongOldPasswordError(PortalError):
    default_message = "Current password is incorrect."


class ServiceUnavailableError(PortalError):
    default_message = GENERIC_FAILURE_MESSAGE


class SessionRequiredError(PortalError):
    """No authenticated session; the caller should route to login."""

    default_message = "Please sign in to continue."


__all__ = [
    "GENERIC_FAILURE_MESSAGE",
    "CONFIGURATION_MISSING_MESSAGE",
    "PortalError",
    "ValidationError",
    "AccountNotFoundError",
    "InvalidCredentialError",
    "WrongOldPasswordError",
    "ServiceUnavailableError",
    "SessionRequiredError",
]
