"""Use cases for signing in and out, and for guarding protected views."""

from native_portal.application.ports.session_store import SessionStorePort
from native_portal.application.use_cases.verify_credentials import (
    VerifyCredentialsUseCase,
)
from native_portal.domain.errors import SessionRequiredError
from native_portal.domain.models.accounts import Session
from native_portal.infrastructure.logging.logger import get_usage_logger


class SignInUseCase:
    """Verify credentials and establish the session on success."""

    def __init__(
        self,
        verify_credentials: VerifyCredentialsUseCase,
        session_store: SessionStorePort,
        usage_logger=None,
    ) -> None:
        self._verify_credentials = verify_credentials
        self._session_store = session_store
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self, email: str, password: str) -> Session:
        """Sign the user in.

        Raises:
            PortalError: Any error from credential verification; the
                session is left untouched.
        """
        account = self._verify_credentials.execute(email, password)
        session = self._session_store.establish(account)
        self._usage_logger.info(f"Signed in account {account.id}")
        return session


class SignOutUseCase:
    """Clear the session before routing back to login."""

    def __init__(self, session_store: SessionStorePort, usage_logger=None):
        self._session_store = session_store
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self) -> None:
        session = self._session_store.current()
        self._session_store.clear()
        if session is not None:
            self._usage_logger.info(f"Signed out {session.email}")


def require_session(session_store: SessionStorePort) -> Session:
    """Return the active session for a protected view.

    Raises:
        SessionRequiredError: When nobody is signed in; the caller should
            route to the login view.
    """
    session = session_store.current()
    if session is None or not session.authenticated:
        raise SessionRequiredError()
    return session


__all__ = ["SignInUseCase", "SignOutUseCase", "require_session"]
