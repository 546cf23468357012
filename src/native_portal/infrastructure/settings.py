"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from native_portal.infrastructure.logging.logger import get_app_logger
from native_portal.utils.utils import get_project_root


@dataclass(frozen=True)
class PortalSettings:
    """Runtime settings for the portal.

    Attributes:
        session_backend: Session storage (streamlit or file).
        session_file: JSON file used by the file session backend.
        credential_scheme: Password storage policy (plaintext or bcrypt).
        redirect_delay_seconds: Pause before routing to login after a
            password change.
        transactions_cache_ttl: Seconds the dashboard caches transaction
            loads.
    """

    session_backend: str = "streamlit"
    session_file: Path | None = None
    credential_scheme: str = "plaintext"
    redirect_delay_seconds: float = 2.0
    transactions_cache_ttl: int = 60

    @classmethod
    def from_env(cls) -> "PortalSettings":
        """Build settings from environment variables.

        Returns:
            PortalSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        session_backend = (
            os.getenv("SESSION_BACKEND", "streamlit").strip().lower()
        )
        credential_scheme = (
            os.getenv("CREDENTIAL_SCHEME", "plaintext").strip().lower()
        )
        raw_session_file = os.getenv("SESSION_FILE")
        if raw_session_file:
            session_file = Path(raw_session_file).expanduser().resolve()
        else:
            session_file = cls._default_session_file()
        redirect_delay = cls._parse_number(
            "PASSWORD_CHANGE_REDIRECT_SECONDS",
            float,
            cls.redirect_delay_seconds,
            logger=logger,
        )
        cache_ttl = cls._parse_number(
            "TRANSACTIONS_CACHE_TTL",
            int,
            cls.transactions_cache_ttl,
            logger=logger,
        )
        return cls(
            session_backend=session_backend,
            session_file=session_file,
            credential_scheme=credential_scheme,
            redirect_delay_seconds=redirect_delay,
            transactions_cache_ttl=cache_ttl,
        )

    @staticmethod
    def _default_session_file() -> Path:
        return get_project_root() / ".session" / "session.json"

    @staticmethod
    def _parse_number(name: str, kind, default, logger):
        """Parse a non-negative number, falling back to the default.

        Args:
            name: Environment variable name.
            kind: Conversion callable (int or float).
            default: Value used when unset or invalid.
            logger: Logger used for warnings.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = kind(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative {name}={raw!r}; using {default}")
            return default
        return value


__all__ = ["PortalSettings"]
