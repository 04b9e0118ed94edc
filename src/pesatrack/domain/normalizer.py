"""Entry normalization: parsed strings to a typed ledger entry."""

from datetime import datetime
from typing import Optional

from pesatrack.domain.entities import (
    CATEGORY_UNCATEGORIZED,
    Direction,
    LedgerEntry,
    ParsedRow,
)
from pesatrack.domain.errors import RowRejected
from pesatrack.logging_setup import get_logger
from pesatrack.utils.amount_parser import parse_amount
from pesatrack.utils.date_parser import parse_timestamp

logger = get_logger(__name__)


def normalize(parsed: ParsedRow, created_at: datetime) -> LedgerEntry:
    """Convert a parsed row into an unclassified, unsaved ledger entry.

    The sign of the source amount decides the direction (negative is a
    debit) and only the magnitude is kept in ``amount``.

    Args:
        parsed: Row with logical fields resolved
        created_at: Ingestion timestamp shared by the batch

    Returns:
        LedgerEntry with ``id`` None and category "Uncategorized"

    Raises:
        RowRejected: If the description is empty or the amount or date is
            missing or unparseable
    """
    description = (parsed.description or "").strip()
    if not description:
        raise RowRejected("Missing description")

    if parsed.amount is None:
        raise RowRejected("Missing amount")
    try:
        signed_amount = parse_amount(parsed.amount)
    except ValueError as e:
        raise RowRejected(str(e))

    if parsed.date is None:
        raise RowRejected("Missing date")
    try:
        entry_date = parse_timestamp(parsed.date)
    except ValueError as e:
        raise RowRejected(str(e))

    return LedgerEntry(
        id=None,
        date=entry_date,
        description=description,
        amount=abs(signed_amount),
        direction=Direction.DEBIT if signed_amount < 0 else Direction.CREDIT,
        category=CATEGORY_UNCATEGORIZED,
        balance=_normalize_balance(parsed.balance),
        receipt_number=parsed.receipt_number or None,
        created_at=created_at,
    )


def _normalize_balance(balance: Optional[str]) -> Optional[float]:
    if balance is None:
        return 0.0
    try:
        return parse_amount(balance)
    except ValueError:
        logger.debug("Ignoring unparseable balance %r", balance)
        return None
