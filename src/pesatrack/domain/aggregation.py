"""Spending aggregation domain service."""

from datetime import date
from typing import Optional

from pesatrack.database.base import LedgerStore
from pesatrack.domain.entities import CategoryAggregate, DateRange, MonthlyAggregate
from pesatrack.domain.errors import ValidationError


class AggregationService:
    """Service for grouped spending totals.

    Only debit entries count as spending. Every call recomputes from the
    stored entries; nothing is cached.
    """

    def __init__(self, store: LedgerStore):
        """Initialize aggregation service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def aggregate_by_category(
        self, date_range: Optional[DateRange] = None
    ) -> list[CategoryAggregate]:
        """Get spending per category, largest total first.

        Args:
            date_range: Optional inclusive bounds on the entry date

        Returns:
            List of category aggregates

        Raises:
            ValidationError: If the range starts after it ends
            StoreUnavailable: If the store cannot be reached
        """
        if (
            date_range is not None
            and date_range.start is not None
            and date_range.end is not None
            and date_range.start > date_range.end
        ):
            raise ValidationError("Start date must not be after end date")
        return self.store.aggregate_by_category(date_range)

    def aggregate_by_category_for_dates(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[CategoryAggregate]:
        """Get spending per category between two calendar dates, inclusive."""
        if start_date is None and end_date is None:
            return self.aggregate_by_category()
        return self.aggregate_by_category(DateRange.from_dates(start_date, end_date))

    def aggregate_by_month(self) -> list[MonthlyAggregate]:
        """Get spending per calendar month, oldest first."""
        return self.store.aggregate_by_month()

    def total_spending(self, aggregates: list[CategoryAggregate]) -> float:
        """Sum the totals of a category breakdown."""
        return sum(aggregate.total_amount for aggregate in aggregates)
