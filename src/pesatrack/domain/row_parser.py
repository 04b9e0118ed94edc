"""Raw statement row parsing."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pesatrack.domain.entities import ParsedRow, RawRow
from pesatrack.domain.errors import ValidationError

LOGICAL_FIELDS = ("date", "amount", "description", "balance", "receipt_number")


@dataclass(frozen=True)
class FieldAliases:
    """Accepted column labels per logical field, in priority order."""

    date: tuple[str, ...] = ("Date", "Completion Time")
    amount: tuple[str, ...] = ("Amount", "Transaction Amount")
    description: tuple[str, ...] = ("Description", "Narrative", "Details")
    balance: tuple[str, ...] = ("Balance",)
    receipt_number: tuple[str, ...] = ("Receipt No.", "Receipt No")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FieldAliases":
        """Build an alias table from configuration data.

        Fields that are not mentioned keep their defaults. ``receipt`` is
        accepted as a shorter key for ``receipt_number``.

        Raises:
            ValidationError: If a field name is unknown or its aliases are
                not a non-empty list of strings
        """
        overrides: dict[str, tuple[str, ...]] = {}
        for key, labels in data.items():
            field_name = "receipt_number" if key == "receipt" else key
            if field_name not in LOGICAL_FIELDS:
                raise ValidationError(f"Unknown alias field '{key}'")
            if isinstance(labels, str):
                labels = [labels]
            if not labels or not all(isinstance(label, str) and label for label in labels):
                raise ValidationError(f"Aliases for '{key}' must be a non-empty list of strings")
            overrides[field_name] = tuple(labels)
        return cls(**overrides)


def resolve_field(raw: RawRow, aliases: tuple[str, ...]) -> Optional[str]:
    """Return the first present, non-blank value among the aliases."""
    for alias in aliases:
        value = raw.get(alias)
        if value is not None and value.strip():
            return value.strip()
    return None


def parse_row(raw: RawRow, aliases: FieldAliases) -> Optional[ParsedRow]:
    """Resolve a raw row's logical fields.

    Returns None when neither a description nor an amount is present; such a
    row (a blank line or a statement footer) is not a candidate entry.
    """
    description = resolve_field(raw, aliases.description)
    amount = resolve_field(raw, aliases.amount)
    if description is None and amount is None:
        return None

    return ParsedRow(
        date=resolve_field(raw, aliases.date),
        amount=amount,
        description=description,
        balance=resolve_field(raw, aliases.balance),
        receipt_number=resolve_field(raw, aliases.receipt_number),
    )
