"""Domain constants for the account portal."""

PAGE_SIZE = 10

TOP_UP_TAG = "top up"

MIN_PASSWORD_LENGTH = 6

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


__all__ = ["PAGE_SIZE", "TOP_UP_TAG", "MIN_PASSWORD_LENGTH", "EMAIL_PATTERN"]
