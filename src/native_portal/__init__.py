"""Native account portal: sign-in, transaction history and password change."""

__version__ = "0.1.0"
