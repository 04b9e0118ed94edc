"""Shared pytest fixtures for pesatrack tests."""

import tempfile
import os
from datetime import datetime
from pathlib import Path
import pytest

from pesatrack.database.factories import create_sqlite_store
from pesatrack.domain.aggregation import AggregationService
from pesatrack.domain.entities import Direction, LedgerEntry
from pesatrack.domain.ingestion import IngestionService
from pesatrack.domain.ledger import LedgerService
from pesatrack.domain.query import EntryQueryService


@pytest.fixture
def temp_db():
    """Create a temporary store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create store
    db = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def ingestion_service(temp_db):
    """Create an IngestionService with a temporary store."""
    return IngestionService(temp_db)


@pytest.fixture
def aggregation_service(temp_db):
    """Create an AggregationService with a temporary store."""
    return AggregationService(temp_db)


@pytest.fixture
def query_service(temp_db):
    """Create an EntryQueryService with a temporary store."""
    return EntryQueryService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary store."""
    return LedgerService(temp_db)


@pytest.fixture
def make_entry():
    """Build unsaved ledger entries with sensible defaults."""

    def _make_entry(
        description="Naivas Supermarket",
        amount=100.0,
        direction=Direction.DEBIT,
        category="Groceries",
        date=datetime(2024, 1, 15, 10, 0),
        balance=0.0,
        receipt_number=None,
    ):
        return LedgerEntry(
            id=None,
            date=date,
            description=description,
            amount=amount,
            direction=direction,
            category=category,
            balance=balance,
            receipt_number=receipt_number,
            created_at=datetime(2024, 2, 1, 9, 0),
        )

    return _make_entry


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
