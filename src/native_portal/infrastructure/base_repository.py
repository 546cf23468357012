"""Shared plumbing for SQLAlchemy-backed portal repositories."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from native_portal.application.ports.database import DatabaseEnginePort
from native_portal.domain.errors import (
    CONFIGURATION_MISSING_MESSAGE,
    ServiceUnavailableError,
)
from native_portal.infrastructure.logging.logger import get_app_logger


class SqlAlchemyRepository:
    """Base class translating driver failures into domain errors."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portal engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def _engine(self) -> Engine:
        try:
            return self._db_port.get_data_engine()
        except (RuntimeError, SQLAlchemyError) as exc:
            self._logger.error(f"Database is not configured: {exc}")
            raise ServiceUnavailableError(
                CONFIGURATION_MISSING_MESSAGE
            ) from exc

    @contextmanager
    def _connect(self, action: str) -> Iterator[Connection]:
        """Yield a read connection, mapping SQLAlchemy errors."""
        engine = self._engine()
        try:
            with engine.connect() as conn:
                yield conn
        except SQLAlchemyError as exc:
            self._logger.error(f"Database error while {action}: {exc}")
            raise ServiceUnavailableError() from exc

    @contextmanager
    def _begin(self, action: str) -> Iterator[Connection]:
        """Yield a transactional connection, mapping SQLAlchemy errors."""
        engine = self._engine()
        try:
            with engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            self._logger.error(f"Database error while {action}: {exc}")
            raise ServiceUnavailableError() from exc


__all__ = ["SqlAlchemyRepository"]
