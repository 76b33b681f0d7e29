"""DuckDB connection management."""

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH, DEFAULT_ADMIN, FIRST_BALLOT_ID


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if ledger tables already exist."""
    result = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'ledger_state'"
    ).fetchone()
    return result[0] > 0


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def bootstrap_state(conn: duckdb.DuckDBPyConnection, admin: str) -> None:
    """Insert the singleton ledger state row if missing."""
    row = conn.execute("SELECT COUNT(*) FROM ledger_state").fetchone()
    if row[0]:
        return

    conn.execute(
        "INSERT INTO ledger_state (id, admin, next_ballot_id) VALUES (1, ?, ?)",
        [admin, FIRST_BALLOT_ID],
    )
    logger.info("Ledger state created (admin={})", admin)


def connect(db_path: str = DB_PATH, admin: str = DEFAULT_ADMIN) -> duckdb.DuckDBPyConnection:
    """Open a ledger database, creating tables and state on first use.

    ``admin`` only applies when the state row is created; an existing
    database keeps its stored admin.
    """
    conn = duckdb.connect(db_path)
    init_tables(conn)
    bootstrap_state(conn, admin)
    logger.debug("DB connected: {}", db_path)
    return conn


def connect_read_only(db_path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open an existing ledger database for reporting."""
    conn = duckdb.connect(db_path, read_only=True)
    logger.debug("DB connected: {} (read_only=True)", db_path)
    return conn
