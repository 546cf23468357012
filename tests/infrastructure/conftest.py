"""Shared fixtures for infrastructure tests."""

from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool


CREATE_USERS_SQL = """
CREATE TABLE native_users (
    id INTEGER PRIMARY KEY,
    created_at TEXT,
    fname TEXT,
    lname TEXT,
    email TEXT,
    phone TEXT,
    nic TEXT,
    amount TEXT,
    card_url TEXT,
    password TEXT
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE native_transactions (
    id INTEGER PRIMARY KEY,
    user_id INTEGER,
    type TEXT,
    amount TEXT,
    created_at TEXT
)
"""


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine holding the portal tables."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        conn.execute(text(CREATE_USERS_SQL))
        conn.execute(text(CREATE_TRANSACTIONS_SQL))
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(sqlite_engine):
    """DatabaseEnginePort fake returning the SQLite engine."""
    return SimpleNamespace(get_data_engine=lambda: sqlite_engine)
