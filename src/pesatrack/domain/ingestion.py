"""Statement ingestion domain service."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import datetime, UTC
from typing import Optional, Sequence

from pesatrack.database.base import LedgerStore
from pesatrack.domain.classifier import Classifier
from pesatrack.domain.entities import IngestResult, RawRow, RowOutcome, RowStatus
from pesatrack.domain.errors import RowRejected, row_rejected
from pesatrack.domain.normalizer import normalize
from pesatrack.domain.row_parser import FieldAliases, parse_row
from pesatrack.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_WORKERS = 4


class IngestionService:
    """Turns raw statement rows into stored, classified ledger entries."""

    def __init__(
        self,
        store: LedgerStore,
        aliases: Optional[FieldAliases] = None,
        classifier: Optional[Classifier] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        """Initialize ingestion service.

        Args:
            store: Ledger store that receives accepted entries
            aliases: Column alias table; defaults to FieldAliases()
            classifier: Classifier; defaults to the built-in rule table
            max_workers: Upper bound on rows processed concurrently
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.store = store
        self.aliases = aliases or FieldAliases()
        self.classifier = classifier or Classifier()
        self.max_workers = max_workers

    def process_row(self, raw: RawRow, row_number: int, created_at: datetime) -> RowOutcome:
        """Parse, normalize and classify one row without touching the store."""
        parsed = parse_row(raw, self.aliases)
        if parsed is None:
            return RowOutcome(row_number=row_number, status=RowStatus.SKIPPED)

        try:
            entry = normalize(parsed, created_at)
        except RowRejected as e:
            return RowOutcome(row_number=row_number, status=RowStatus.REJECTED, reason=e.reason)

        entry = replace(entry, category=self.classifier.classify(entry.description))
        return RowOutcome(row_number=row_number, status=RowStatus.ACCEPTED, entry=entry)

    def process_rows(
        self,
        rows: Sequence[RawRow],
        created_at: Optional[datetime] = None,
        first_row_number: int = 1,
    ) -> list[RowOutcome]:
        """Process rows on a bounded worker pool.

        Outcomes are returned in input order.
        """
        if created_at is None:
            created_at = datetime.now(UTC).replace(tzinfo=None)
        numbered = list(enumerate(rows, start=first_row_number))

        def run(item: tuple[int, RawRow]) -> RowOutcome:
            row_number, raw = item
            return self.process_row(raw, row_number, created_at)

        if self.max_workers == 1 or len(numbered) <= 1:
            return [run(item) for item in numbered]

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(numbered))) as pool:
            return list(pool.map(run, numbered))

    def ingest(self, rows: Sequence[RawRow], first_row_number: int = 1) -> IngestResult:
        """Ingest a batch of raw rows.

        Rejected rows are counted and reported but never stop the batch. The
        accepted entries are saved with one store call.

        Args:
            rows: Raw row records
            first_row_number: Number reported for the first row in error
                messages (2 for a CSV file with a header line)

        Returns:
            IngestResult with the stored entries and rejection details

        Raises:
            BatchPersistFailed: If the store rejects the batch
            StoreUnavailable: If the store cannot be reached
        """
        outcomes = self.process_rows(rows, first_row_number=first_row_number)

        entries = []
        errors = []
        skipped = 0
        for outcome in outcomes:
            if outcome.status is RowStatus.ACCEPTED:
                entries.append(outcome.entry)
            elif outcome.status is RowStatus.REJECTED:
                logger.debug("Rejected row %d: %s", outcome.row_number, outcome.reason)
                errors.append(row_rejected(outcome.reason, outcome.row_number))
            else:
                skipped += 1

        stored = self.store.insert_entries(entries) if entries else []
        logger.info(
            "Ingested %d rows: %d accepted, %d rejected, %d skipped",
            len(outcomes),
            len(stored),
            len(errors),
            skipped,
        )
        return IngestResult(
            accepted=tuple(stored),
            rejected_count=len(errors),
            skipped_count=skipped,
            errors=tuple(errors),
        )
