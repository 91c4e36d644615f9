"""Database engine utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url


def db_create_engine(database_url: str, statement_timeout_ms: int | None = None) -> Engine:
    """Create the SQLAlchemy engine for application database access.

    Args:
        database_url: SQLAlchemy database URL.
        statement_timeout_ms: Optional per-statement timeout applied on PostgreSQL connections.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank or the timeout is not positive.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")
    if statement_timeout_ms is not None and statement_timeout_ms <= 0:
        raise ValueError("statement_timeout_ms must be > 0")

    connect_args: dict[str, object] = {}
    if statement_timeout_ms is not None and make_url(database_url).get_backend_name() == "postgresql":
        connect_args["options"] = f"-c statement_timeout={int(statement_timeout_ms)}"

    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)
