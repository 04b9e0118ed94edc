"""Store factory functions for creating store instances."""

import os
from pathlib import Path
from typing import Optional

from pesatrack.database.models import DEFAULT_STORE_TIMEOUT
from pesatrack.database.sqlalchemy_db import SQLAlchemyLedgerStore


def create_sqlite_store(
    database_path: Optional[str] = None, timeout: float = DEFAULT_STORE_TIMEOUT
) -> SQLAlchemyLedgerStore:
    """Create a SQLite-backed ledger store.

    Args:
        database_path: Path to SQLite database file. If None, checks PESATRACK_DB_PATH
            environment variable, then defaults to ~/.pesatrack/pesatrack.db
        timeout: Seconds a store call may wait on a locked database

    Returns:
        SQLAlchemyLedgerStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("PESATRACK_DB_PATH")

    if database_path is None:
        db_dir = Path.home() / ".pesatrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "pesatrack.db")

    return SQLAlchemyLedgerStore(f"sqlite:///{database_path}", timeout=timeout)
