"""Paginated entry listing."""

from typing import Optional

from pesatrack.database.base import LedgerStore
from pesatrack.domain.entities import EntryFilters, EntryPage
from pesatrack.domain.errors import ValidationError

DEFAULT_PAGE_SIZE = 50


class EntryQueryService:
    """Service for listing ledger entries page by page."""

    def __init__(self, store: LedgerStore):
        self.store = store

    def list_entries(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        filters: Optional[EntryFilters] = None,
    ) -> EntryPage:
        """List entries newest first.

        A page past the last one comes back empty with the correct total.

        Args:
            page: 1-indexed page number
            page_size: Maximum number of entries on the page
            filters: Optional filters; absent fields impose no constraint

        Raises:
            ValidationError: If page or page_size is less than 1
            StoreUnavailable: If the store cannot be reached
        """
        if page < 1:
            raise ValidationError(f"Page must be at least 1, got {page}")
        if page_size < 1:
            raise ValidationError(f"Page size must be at least 1, got {page_size}")

        entries, total = self.store.find_entries(
            filters or EntryFilters(),
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        return EntryPage(
            entries=tuple(entries),
            total_count=total,
            page=page,
            page_size=page_size,
        )
