"""Domain validation helpers for sign-in and password change forms."""

import re

from native_portal.domain.constants import EMAIL_PATTERN, MIN_PASSWORD_LENGTH
from native_portal.domain.errors import ValidationError
from native_portal.domain.services.normalization import normalize_email


_EMAIL_RE = re.compile(EMAIL_PATTERN)


def is_valid_email(email: str) -> bool:
    """Return True when the email has a basic ``local@domain.tld`` shape."""
    return bool(_EMAIL_RE.match(email))


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def _check_email(email: str, errors: dict[str, str]) -> None:
    if not email:
        errors["email"] = "Email is required."
    elif not is_valid_email(email):
        errors["email"] = "Enter a valid email address."


def validate_credentials_input(email: str | None, password: str | None) -> str:
    """Validate sign-in input before any lookup.

    Args:
        email: Raw email.
        password: Raw password; only checked for emptiness.

    Returns:
        str: Normalized email.

    Raises:
        ValidationError: If the email is malformed or the password is empty.
    """
    normalized = normalize_email(email)
    errors: dict[str, str] = {}
    _check_email(normalized, errors)
    if _is_blank(password):
        errors["password"] = "Password is required."
    if errors:
        raise ValidationError(errors)
    return normalized


def validate_password_change(
    email: str | None,
    old_password: str | None,
    new_password: str | None,
    confirm_password: str | None,
) -> str:
    """Validate password change input before any lookup.

    Args:
        email: Raw email.
        old_password: Current password as typed.
        new_password: Desired password.
        confirm_password: Confirmation of the desired password.

    Returns:
        str: Normalized email.

    Raises:
        ValidationError: With one entry per failing field.
    """
    normalized = normalize_email(email)
    errors: dict[str, str] = {}
    _check_email(normalized, errors)
    if _is_blank(old_password):
        errors["old_password"] = "Current password is required."
    if _is_blank(new_password):
        errors["new_password"] = "New password is required."
    if _is_blank(confirm_password):
        errors["confirm_password"] = "Please confirm the new password."
    elif new_password != confirm_password:
        errors["confirm_password"] = "New passwords do not match"
    if "new_password" not in errors:
        if len(new_password) < MIN_PASSWORD_LENGTH:
            errors["new_password"] = (
                f"New password must be at least {MIN_PASSWORD_LENGTH} "
                "characters"
            )
        elif "old_password" not in errors and new_password == old_password:
            errors["new_password"] = (
                "New password must differ from the current password."
            )
    if errors:
        raise ValidationError(errors)
    return normalized


__all__ = [
    "is_valid_email",
    "validate_credentials_input",
    "validate_password_change",
]
