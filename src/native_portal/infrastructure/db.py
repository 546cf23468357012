"""Database infrastructure for the account portal.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the hosted portal database. It belongs to the
infrastructure layer because it deals with external systems (PostgreSQL).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from native_portal.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    The project ``.env`` file is loaded first so local runs pick it up.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for a PostgreSQL database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_data_engine: Optional[Engine] = None


def get_data_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the portal database.

    Returns:
        Engine: Lazily initialized engine connected to ``DATA_DB_URL``.
    """
    global _data_engine
    if _data_engine is None:
        db_url = _get_env_var("DATA_DB_URL")
        _data_engine = _create_engine(db_url)
    return _data_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def get_data_engine(self) -> Engine:
        """Get the engine for the portal database.

        Returns:
            Engine: SQLAlchemy engine connected to the portal database.
        """
        return get_data_engine()


__all__ = [
    "get_data_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
