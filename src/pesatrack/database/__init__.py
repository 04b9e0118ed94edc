"""Database layer for pesatrack application."""

from pesatrack.database.base import LedgerStore
from pesatrack.database.factories import create_sqlite_store

__all__ = ["LedgerStore", "create_sqlite_store"]
