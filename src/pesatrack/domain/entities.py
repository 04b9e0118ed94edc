"""Domain model entities for pesatrack.

These are pure data classes representing ledger concepts, independent of
database schema. The store converts its rows into these entities so the
pipeline and reporting services never see ORM objects.
"""

from dataclasses import dataclass, field
from datetime import datetime, date, time
from enum import Enum
from typing import Optional

# One raw statement line: field label -> string value.
RawRow = dict[str, str]

CATEGORY_UNCATEGORIZED = "Uncategorized"
CATEGORY_OTHER = "Other"


class Direction(str, Enum):
    """Money flow of a ledger entry."""

    DEBIT = "debit"
    CREDIT = "credit"


class RowStatus(str, Enum):
    """Result of running one raw row through the pipeline."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ParsedRow:
    """Logical fields resolved from a raw row, still unconverted strings."""

    date: Optional[str] = None
    amount: Optional[str] = None
    description: Optional[str] = None
    balance: Optional[str] = None
    receipt_number: Optional[str] = None


@dataclass(frozen=True)
class LedgerEntry:
    """Normalized, classified statement entry.

    ``id`` is None until the store has persisted the entry.
    """

    id: Optional[int]
    date: datetime
    description: str
    amount: float
    direction: Direction
    category: str
    balance: Optional[float]
    receipt_number: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class ClassificationRule:
    """Ordered (keyword set, category) pair.

    ``refinements`` are checked, in order, only once this rule's keywords
    match. When none of them matches, ``fallback_category`` applies if set;
    otherwise evaluation continues with the next rule in the table.
    """

    keywords: tuple[str, ...]
    category: Optional[str]
    refinements: tuple["ClassificationRule", ...] = ()
    fallback_category: Optional[str] = None

    def matches(self, text: str) -> bool:
        """Return True if the lowercased text contains any keyword."""
        return any(keyword in text for keyword in self.keywords)


@dataclass(frozen=True)
class DateRange:
    """Inclusive datetime bounds; a missing side is unbounded."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @classmethod
    def from_dates(
        cls, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> "DateRange":
        """Build a range covering whole calendar days."""
        start = datetime.combine(start_date, time.min) if start_date else None
        end = datetime.combine(end_date, time.max) if end_date else None
        return cls(start=start, end=end)

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None


@dataclass(frozen=True)
class EntryFilters:
    """Conjunctive listing filters; None imposes no constraint."""

    category: Optional[str] = None
    direction: Optional[Direction] = None
    date_range: Optional[DateRange] = None


@dataclass(frozen=True)
class EntryPage:
    """One page of a listing, with its own pagination metadata."""

    entries: tuple[LedgerEntry, ...]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return (self.total_count + self.page_size - 1) // self.page_size


@dataclass(frozen=True)
class CategoryAggregate:
    """Debit total and count for one category."""

    category: str
    total_amount: float
    count: int


@dataclass(frozen=True)
class MonthlyAggregate:
    """Debit total and count for one calendar month."""

    year: int
    month: int
    total_amount: float
    count: int


@dataclass(frozen=True)
class RowOutcome:
    """Per-row pipeline result."""

    row_number: int
    status: RowStatus
    entry: Optional[LedgerEntry] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class IngestResult:
    """Outcome of one ingestion batch."""

    accepted: tuple[LedgerEntry, ...] = ()
    rejected_count: int = 0
    skipped_count: int = 0
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def accepted_count(self) -> int:
        return len(self.accepted)
