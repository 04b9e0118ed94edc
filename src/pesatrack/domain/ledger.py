"""Ledger entry correction domain service."""

from typing import Optional

from pesatrack.database.base import LedgerStore
from pesatrack.domain.classifier import Classifier
from pesatrack.domain.entities import LedgerEntry
from pesatrack.domain.errors import EntryNotFound, ValidationError
from pesatrack.logging_setup import get_logger

logger = get_logger(__name__)


class LedgerService:
    """Service for reading and correcting stored entries.

    Category is the only field that can change after ingestion.
    """

    def __init__(self, store: LedgerStore, classifier: Optional[Classifier] = None):
        """Initialize ledger service.

        Args:
            store: Ledger store instance
            classifier: Classifier used by reclassify; defaults to the
                built-in rule table
        """
        self.store = store
        self.classifier = classifier or Classifier()

    def get_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get entry by ID.

        Returns:
            LedgerEntry or None if not found
        """
        return self.store.get_entry(entry_id)

    def update_category(self, entry_id: int, category: str) -> LedgerEntry:
        """Set an entry's category.

        Args:
            entry_id: Entry ID
            category: New category label

        Returns:
            The updated entry

        Raises:
            ValidationError: If the category is blank
            EntryNotFound: If the entry doesn't exist
        """
        category = (category or "").strip()
        if not category:
            raise ValidationError("Category must not be empty")

        entry = self.store.update_entry_category(entry_id, category)
        if entry is None:
            raise EntryNotFound(entry_id)
        logger.debug("Entry %d categorized as %r", entry_id, category)
        return entry

    def reclassify(self, entry_id: int) -> LedgerEntry:
        """Re-run the classifier on a stored entry's description.

        Raises:
            EntryNotFound: If the entry doesn't exist
        """
        entry = self.store.get_entry(entry_id)
        if entry is None:
            raise EntryNotFound(entry_id)
        return self.update_category(entry_id, self.classifier.classify(entry.description))

    def list_categories(self) -> list[str]:
        """List categories currently in use."""
        return self.store.list_categories()
