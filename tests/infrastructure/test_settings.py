"""Tests for infrastructure settings."""

from pathlib import Path

import pytest

from native_portal.infrastructure import settings as settings_module
from native_portal.infrastructure.settings import PortalSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in (
        "SESSION_BACKEND",
        "SESSION_FILE",
        "CREDENTIAL_SCHEME",
        "PASSWORD_CHANGE_REDIRECT_SECONDS",
        "TRANSACTIONS_CACHE_TTL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    settings = PortalSettings.from_env()

    assert settings.session_backend == "streamlit"
    assert settings.credential_scheme == "plaintext"
    assert settings.redirect_delay_seconds == 2.0
    assert settings.transactions_cache_ttl == 60
    assert settings.session_file.name == "session.json"


def test_from_env_reads_values(monkeypatch, tmp_path: Path) -> None:
    session_file = tmp_path / "state.json"
    monkeypatch.setenv("SESSION_BACKEND", " FILE ")
    monkeypatch.setenv("SESSION_FILE", str(session_file))
    monkeypatch.setenv("CREDENTIAL_SCHEME", "bcrypt")
    monkeypatch.setenv("PASSWORD_CHANGE_REDIRECT_SECONDS", "0.5")
    monkeypatch.setenv("TRANSACTIONS_CACHE_TTL", "0")

    settings = PortalSettings.from_env()

    assert settings.session_backend == "file"
    assert settings.session_file == session_file.resolve()
    assert settings.credential_scheme == "bcrypt"
    assert settings.redirect_delay_seconds == 0.5
    assert settings.transactions_cache_ttl == 0


def test_from_env_falls_back_on_invalid_numbers(monkeypatch) -> None:
    monkeypatch.setenv("PASSWORD_CHANGE_REDIRECT_SECONDS", "soon")
    monkeypatch.setenv("TRANSACTIONS_CACHE_TTL", "-5")

    settings = PortalSettings.from_env()

    assert settings.redirect_delay_seconds == 2.0
    assert settings.transactions_cache_ttl == 60
