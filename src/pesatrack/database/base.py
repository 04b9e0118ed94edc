"""Abstract ledger store interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from pesatrack.domain.entities import (
    CategoryAggregate,
    DateRange,
    EntryFilters,
    LedgerEntry,
    MonthlyAggregate,
)


class LedgerStore(ABC):
    """Abstract persistence interface for ledger entries.

    Implementations raise ``StoreUnavailable`` on timeouts or connection
    failures and ``BatchPersistFailed`` when a batch insert is rejected. They
    never retry on their own.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize store schema (create tables)."""
        pass

    @abstractmethod
    def insert_entries(self, entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
        """Insert a batch of entries atomically.

        Returns the persisted entries with IDs assigned, in input order.
        Either every entry is stored or none is.
        """
        pass

    @abstractmethod
    def get_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get entry by ID."""
        pass

    @abstractmethod
    def update_entry_category(self, entry_id: int, category: str) -> Optional[LedgerEntry]:
        """Set an entry's category. Returns the updated entry, or None if missing."""
        pass

    @abstractmethod
    def find_entries(
        self, filters: EntryFilters, offset: int, limit: int
    ) -> tuple[list[LedgerEntry], int]:
        """Find entries matching filters, newest first.

        Returns the requested slice and the total number of matches.
        """
        pass

    @abstractmethod
    def aggregate_by_category(
        self, date_range: Optional[DateRange] = None
    ) -> list[CategoryAggregate]:
        """Sum and count debit entries per category, largest total first."""
        pass

    @abstractmethod
    def aggregate_by_month(self) -> list[MonthlyAggregate]:
        """Sum and count debit entries per calendar month, oldest first."""
        pass

    @abstractmethod
    def list_categories(self) -> list[str]:
        """List distinct categories currently assigned to entries."""
        pass
