"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StoreError(DomainError):
    """The store could not complete a request."""


class RowRejected(ValidationError):
    """A raw row could not be turned into a ledger entry.

    Raised by the parser and normalizer and absorbed by the ingestion
    pipeline into its rejected count.
    """

    def __init__(self, reason: str, row_number: Optional[int] = None):
        self.reason = reason
        self.row_number = row_number
        super().__init__(row_rejected(reason, row_number))


class EntryNotFound(NotFoundError):
    """No ledger entry exists with the requested ID."""

    def __init__(self, entry_id: int):
        self.entry_id = entry_id
        super().__init__(entry_not_found(entry_id))


class BatchPersistFailed(StoreError):
    """The store rejected a whole ingestion batch."""

    def __init__(self, attempted: int, cause: Optional[str] = None):
        self.attempted = attempted
        self.cause = cause
        super().__init__(batch_persist_failed(attempted, cause))


class StoreUnavailable(StoreError):
    """The store timed out or could not be reached."""

    def __init__(self, operation: str, cause: Optional[str] = None):
        self.operation = operation
        self.cause = cause
        super().__init__(store_unavailable(operation, cause))


def row_rejected(reason: str, row_number: Optional[int] = None) -> str:
    """Return message for a rejected row."""
    if row_number is None:
        return reason
    return f"Row {row_number}: {reason}"


def entry_not_found(entry_id: int) -> str:
    """Return message for missing ledger entry."""
    return f"Entry {entry_id} not found"


def batch_persist_failed(attempted: int, cause: Optional[str] = None) -> str:
    """Return message when a batch insert fails."""
    message = (
        f"Failed to save batch of {attempted} entr{'ies' if attempted != 1 else 'y'}"
    )
    if cause:
        message = f"{message}: {cause}"
    return message


def store_unavailable(operation: str, cause: Optional[str] = None) -> str:
    """Return message when the store cannot be reached."""
    message = f"Store unavailable during {operation}"
    if cause:
        message = f"{message}: {cause}"
    return message
