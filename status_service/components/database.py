"""Database component reporting SQLAlchemy connectivity as status and readiness."""

from __future__ import annotations

import logging

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from status_service.domain import StatusReport

logger = logging.getLogger(__name__)


def db_create_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine checked by the database component.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")

    return create_engine(database_url, pool_pre_ping=True)


class DatabaseComponent:
    """Component backed by SQLAlchemy engine connectivity checks."""

    def __init__(self, engine: Engine, component_name: str = "database"):
        """Initialize database component.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.
            component_name: Registration key of the component.

        Raises:
            ValueError: Raised when engine is None or the name is blank.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        if not component_name.strip():
            raise ValueError("component_name must not be blank")
        self._engine = engine
        self._component_name = component_name.strip()

    def name(self) -> str:
        """Return the registration key of the component.

        Returns:
            str: Component name, `database` unless overridden.
        """

        return self._component_name

    def db_connection_label(self) -> str:
        """Return the target database URL with the password hidden."""

        return self._engine.url.render_as_string(hide_password=True)

    def close(self) -> None:
        """Dispose pooled connections of the checked engine."""

        self._engine.dispose()

    def status(self, request: Request | None) -> StatusReport:
        """Report connectivity of the database target.

        Args:
            request: Triggering HTTP request; unused by this component.

        Returns:
            StatusReport: 200 when `SELECT 1` succeeds, 503 otherwise.
        """

        _ = request
        return self._db_check_connectivity()

    def ready(self) -> StatusReport:
        """Report whether the database accepts connections right now.

        Returns:
            StatusReport: 200 when `SELECT 1` succeeds, 503 otherwise.
        """

        return self._db_check_connectivity()

    def _db_check_connectivity(self) -> StatusReport:
        target = self.db_connection_label()
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return StatusReport(code=200, metadata={"target": target, "detail": "database connectivity verified"})
        except SQLAlchemyError as error:
            logger.warning("database connectivity check failed for %s: %s", target, error)
            return StatusReport(code=503, metadata={"target": target, "detail": "database connectivity check failed"})
