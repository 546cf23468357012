"""Session storage backed by a string key-value mapping.

The session is kept under three independent keys, matching the browser
storage layout of the web client:

* ``isLoggedIn``: the string ``"true"`` while signed in;
* ``userEmail``: the active account email;
* ``native_user``: JSON projection of the account (id, names, email,
  card image).

``KeyValueSessionStore`` works over any ``MutableMapping``: a plain dict,
Streamlit's ``st.session_state``, or :class:`JsonFileStorage` for a durable
file without expiry.
"""

import json
from collections.abc import Iterator, MutableMapping
from pathlib import Path

from native_portal.application.ports.session_store import SessionStorePort
from native_portal.domain.models.accounts import Account, Session
from native_portal.infrastructure.logging.logger import get_app_logger


LOGGED_IN_KEY = "isLoggedIn"
USER_EMAIL_KEY = "userEmail"
USER_PROFILE_KEY = "native_user"

SESSION_KEYS = (LOGGED_IN_KEY, USER_EMAIL_KEY, USER_PROFILE_KEY)

# Names the per-client session file. Not cleared on sign-out.
CLIENT_TOKEN_KEY = "sessionToken"


class JsonFileStorage(MutableMapping):
    """String mapping persisted as a JSON object in a single file.

    Every read reloads the file and every write rewrites it, so the last
    writer wins.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            self._logger.warning(
                f"Ignoring unreadable session file {self._path}: {exc}"
            )
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def _save(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data), encoding="utf-8")

    def __getitem__(self, key: str) -> str:
        return self._load()[key]

    def __setitem__(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def __delitem__(self, key: str) -> None:
        data = self._load()
        del data[key]
        self._save(data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._load())

    def __len__(self) -> int:
        return len(self._load())


class KeyValueSessionStore(SessionStorePort):
    """SessionStorePort over a string key-value mapping."""

    def __init__(self, storage: MutableMapping, logger=None) -> None:
        """Initialize the store.

        Args:
            storage: Mapping receiving the three session keys.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()

    def establish(self, account: Account) -> Session:
        """Persist the authenticated flag and the account projection."""
        session = Session.from_account(account)
        self._storage[LOGGED_IN_KEY] = "true"
        self._storage[USER_EMAIL_KEY] = account.email
        self._storage[USER_PROFILE_KEY] = json.dumps(
            {
                "id": account.id,
                "fname": account.first_name,
                "lname": account.last_name,
                "email": account.email,
                "card_url": account.card_url,
            }
        )
        return session

    def current(self) -> Session | None:
        """Return the stored session, or None when the flag is absent."""
        if self._storage.get(LOGGED_IN_KEY) != "true":
            return None
        profile = self._read_profile()
        email = self._storage.get(USER_EMAIL_KEY) or profile.get("email") or ""
        return Session(
            authenticated=True,
            email=email,
            account_id=profile.get("id"),
            first_name=profile.get("fname"),
            last_name=profile.get("lname"),
            card_url=profile.get("card_url"),
        )

    def clear(self) -> None:
        """Remove every session key."""
        for key in SESSION_KEYS:
            if key in self._storage:
                del self._storage[key]

    def _read_profile(self) -> dict:
        raw = self._storage.get(USER_PROFILE_KEY)
        if not raw:
            return {}
        try:
            profile = json.loads(raw)
        except ValueError:
            self._logger.warning("Stored session profile is not valid JSON")
            return {}
        return profile if isinstance(profile, dict) else {}


__all__ = [
    "LOGGED_IN_KEY",
    "USER_EMAIL_KEY",
    "USER_PROFILE_KEY",
    "CLIENT_TOKEN_KEY",
    "JsonFileStorage",
    "KeyValueSessionStore",
]
