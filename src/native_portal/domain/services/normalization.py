"""Domain normalization helpers."""


def normalize_email(email: str | None) -> str:
    """Normalize an email address into its lookup key.

    Args:
        email: Raw email as typed by the user.

    Returns:
        str: Trimmed, lower-cased email ("" when missing).
    """
    if not email:
        return ""
    return email.strip().lower()


def normalize_category_tag(tag: str | None) -> str:
    """Normalize a raw ledger category tag for comparison.

    Args:
        tag: Raw category tag from ``native_transactions``.

    Returns:
        str: Trimmed, lower-cased tag ("" when missing).
    """
    if not tag:
        return ""
    return str(tag).strip().lower()


__all__ = ["normalize_email", "normalize_category_tag"]
