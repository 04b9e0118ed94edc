"""Tests for entry corrections."""

from dataclasses import replace

import pytest

from pesatrack.domain.classifier import Classifier, rule
from pesatrack.domain.errors import EntryNotFound, ValidationError
from pesatrack.domain.ledger import LedgerService


@pytest.fixture
def stored_entry(temp_db, make_entry):
    """Store one entry and return it."""
    (entry,) = temp_db.insert_entries(
        [make_entry(description="Naivas Westlands", category="Other", receipt_number="QA1")]
    )
    return entry


def test_update_category_changes_only_category(ledger_service, stored_entry):
    """Test every other field is left untouched."""
    updated = ledger_service.update_category(stored_entry.id, "Groceries")

    assert updated == replace(stored_entry, category="Groceries")
    assert ledger_service.get_entry(stored_entry.id).category == "Groceries"


def test_update_category_strips_whitespace(ledger_service, stored_entry):
    """Test the category label is trimmed."""
    assert ledger_service.update_category(stored_entry.id, "  Dining ").category == "Dining"


def test_update_category_not_found(ledger_service):
    """Test updating a missing entry raises EntryNotFound."""
    with pytest.raises(EntryNotFound, match="Entry 999 not found") as excinfo:
        ledger_service.update_category(999, "Groceries")

    assert excinfo.value.entry_id == 999


def test_update_category_blank(ledger_service, stored_entry):
    """Test a blank category is rejected."""
    with pytest.raises(ValidationError, match="must not be empty"):
        ledger_service.update_category(stored_entry.id, "   ")


def test_get_entry_missing(ledger_service):
    """Test a missing entry comes back as None."""
    assert ledger_service.get_entry(12345) is None


def test_reclassify_uses_current_rules(temp_db, stored_entry):
    """Test reclassify re-runs the classifier on the stored description."""
    assert LedgerService(temp_db).reclassify(stored_entry.id).category == "Groceries"

    custom = LedgerService(temp_db, classifier=Classifier((rule("Shopping", "naivas"),)))
    assert custom.reclassify(stored_entry.id).category == "Shopping"


def test_reclassify_not_found(ledger_service):
    """Test reclassifying a missing entry raises EntryNotFound."""
    with pytest.raises(EntryNotFound):
        ledger_service.reclassify(999)


def test_list_categories(ledger_service, temp_db, make_entry):
    """Test distinct categories in use, sorted."""
    temp_db.insert_entries(
        [
            make_entry(category="Transport"),
            make_entry(category="Airtime"),
            make_entry(category="Transport"),
        ]
    )

    assert ledger_service.list_categories() == ["Airtime", "Transport"]
