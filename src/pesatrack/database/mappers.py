"""Mapper functions to convert between domain entities and SQLAlchemy models.

This layer isolates the conversion logic so the schema can change without
touching the domain services.
"""

from pesatrack.domain import entities as domain
from pesatrack.database.models import LedgerEntry as ORMLedgerEntry


def entry_to_domain(orm_entry: ORMLedgerEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy LedgerEntry model to domain LedgerEntry entity."""
    return domain.LedgerEntry(
        id=orm_entry.id,
        date=orm_entry.date,
        description=orm_entry.description,
        amount=float(orm_entry.amount),
        direction=domain.Direction(orm_entry.direction),
        category=orm_entry.category,
        balance=orm_entry.balance,
        receipt_number=orm_entry.receipt_number,
        created_at=orm_entry.created_at,
    )


def entry_to_orm(entry: domain.LedgerEntry) -> ORMLedgerEntry:
    """Build an unsaved SQLAlchemy model from a domain entry.

    The entry's ID is ignored; the database assigns one on insert.
    """
    return ORMLedgerEntry(
        date=entry.date,
        description=entry.description,
        amount=entry.amount,
        direction=entry.direction.value,
        category=entry.category,
        balance=entry.balance,
        receipt_number=entry.receipt_number,
        created_at=entry.created_at,
    )
