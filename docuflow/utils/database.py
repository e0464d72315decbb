"""
Direct database access.

Used to apply migrations over a Postgres connection when DATABASE_URL is
configured, bypassing the exec_sql RPC.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for a one-off script run."""
    return create_engine(
        database_url,
        pool_pre_ping=True,
        connect_args={"connect_timeout": 10},
    )


def execute_sql(database_url: str, sql: str) -> None:
    """
    Execute SQL text in a single transaction.

    The text is sent to the driver as is, so it may contain several
    statements and dollar-quoted function bodies.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the connection or any
            statement fails (the transaction is rolled back)
    """
    engine = create_db_engine(database_url)
    try:
        with engine.begin() as conn:
            # no_parameters keeps literal % signs away from the driver's paramstyle
            conn.execution_options(no_parameters=True).exec_driver_sql(sql)
        logger.debug(f"Executed {len(sql)} bytes of SQL")
    finally:
        engine.dispose()
