"""Database ports for the account portal.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the hosted portal database.

    Repositories can depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_data_engine(self) -> Engine:
        """Get the engine for the portal database.

        Returns:
            Engine: SQLAlchemy engine holding native_users and
            native_transactions.
        """


__all__ = ["DatabaseEnginePort"]
