"""Tests for CLI commands."""

import json

import pytest
from pesatrack.cli.main import cli
from pesatrack.domain.entities import Direction


@pytest.fixture
def invoke(cli_runner, temp_db):
    """Invoke the CLI against the temporary store."""

    def _invoke(*args):
        return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])

    return _invoke


@pytest.fixture
def imported(invoke, fixtures_dir):
    """Import the sample statement through the CLI."""
    result = invoke("import", str(fixtures_dir / "mpesa_statement.csv"))
    assert result.exit_code == 0
    return result


def test_help_does_not_open_store(cli_runner):
    """Test --help works without a database."""
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "import" in result.output
    assert "summary" in result.output


def test_import_successful(imported):
    """Test importing a statement reports every outcome."""
    assert "Import complete" in imported.output
    assert "Imported: 6 entries" in imported.output
    assert "Rejected: 1 rows" in imported.output
    assert "Skipped: 1 blank rows" in imported.output
    assert "Row 9: Could not parse amount" in imported.output


def test_import_alternate_format(invoke, fixtures_dir):
    """Test a semicolon export with alternate column labels."""
    result = invoke("import", str(fixtures_dir / "bank_export.csv"))

    assert result.exit_code == 0
    assert "Imported: 3 entries" in result.output
    assert "Rejected: 0 rows" in result.output


def test_import_with_config_aliases(invoke, tmp_path):
    """Test alias tables come from the config file."""
    statement = tmp_path / "statement.csv"
    statement.write_text("When,What,Paid Out\n2024-01-01,Matatu fare,-80\n")
    config_file = tmp_path / "pesatrack.json"
    config_file.write_text(
        json.dumps({"aliases": {"date": ["When"], "description": ["What"], "amount": ["Paid Out"]}})
    )

    result = invoke("--config", str(config_file), "import", str(statement))

    assert result.exit_code == 0
    assert "Imported: 1 entries" in result.output


def test_import_missing_file(invoke, tmp_path):
    """Test importing a missing file fails."""
    result = invoke("import", str(tmp_path / "missing.csv"))
    assert result.exit_code != 0


def test_missing_config_file(invoke, tmp_path):
    """Test a missing config file is reported."""
    result = invoke("--config", str(tmp_path / "missing.json"), "categories")

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_view_entries(invoke, imported):
    """Test the default listing."""
    result = invoke("view")

    assert result.exit_code == 0
    assert "Page 1 of 1 (6 entries)" in result.output
    assert "Bolt ride Kilimani" in result.output
    # Newest first
    assert result.output.index("Bolt ride") < result.output.index("Uber ride")


def test_view_filters(invoke, imported):
    """Test listing filters."""
    transport = invoke("view", "--category", "Transport")
    credits = invoke("view", "--direction", "credit")
    january = invoke("view", "--start-date", "2024-01-01", "--end-date", "2024-01-31")

    assert "(2 entries)" in transport.output
    assert "(1 entries)" in credits.output
    assert "Received from John Doe" in credits.output
    assert "(5 entries)" in january.output


def test_view_pagination(invoke, imported):
    """Test paging through entries."""
    second = invoke("view", "--page", "2", "--page-size", "4")
    beyond = invoke("view", "--page", "5", "--page-size", "4")

    assert "Page 2 of 2 (6 entries)" in second.output
    assert beyond.exit_code == 0
    assert "past the last page" in beyond.output


def test_view_invalid_page(invoke):
    """Test page numbers must be positive."""
    result = invoke("view", "--page", "0")

    assert result.exit_code == 1
    assert "Page must be at least 1" in result.output


def test_view_verbose(invoke, imported):
    """Test verbose output shows receipt and balance."""
    result = invoke("view", "--verbose", "--category", "Groceries")

    assert "Receipt: QA2" in result.output
    assert "Balance: KES 8,249.50" in result.output


def test_view_empty(invoke):
    """Test listing an empty store."""
    result = invoke("view")

    assert result.exit_code == 0
    assert "No entries found." in result.output


def test_summary(invoke, imported):
    """Test spending by category."""
    result = invoke("summary")

    assert result.exit_code == 0
    assert "Groceries" in result.output
    assert "KES 1,250.50" in result.output
    assert "KES 800.00" in result.output
    # Credits are not spending
    assert "John Doe" not in result.output
    assert result.output.index("Groceries") < result.output.index("Transport")


def test_summary_date_range(invoke, imported):
    """Test summary bounded by dates."""
    result = invoke("summary", "--start-date", "2024-02-01")

    assert result.exit_code == 0
    assert "Transport" in result.output
    assert "KES 300.00" in result.output
    assert "Groceries" not in result.output


def test_summary_conflicting_periods(invoke):
    """Test only one period flag is allowed."""
    result = invoke("summary", "--this-month", "--last-month")

    assert result.exit_code == 1
    assert "Only one period option" in result.output


def test_summary_empty(invoke):
    """Test summary over an empty store."""
    result = invoke("summary")

    assert result.exit_code == 0
    assert "No spending found." in result.output


def test_monthly(invoke, imported):
    """Test spending by month, oldest first."""
    result = invoke("monthly")

    assert result.exit_code == 0
    assert "January 2024" in result.output
    assert "February 2024" in result.output
    assert result.output.index("January 2024") < result.output.index("February 2024")
    assert "KES 2,850.50" in result.output


def test_categorize_entry(invoke, temp_db, make_entry):
    """Test assigning a category to one entry."""
    (entry,) = temp_db.insert_entries([make_entry(category="Other")])

    result = invoke("categorize", str(entry.id), "Household")

    assert result.exit_code == 0
    assert f"Entry {entry.id} categorized as 'Household'" in result.output
    assert "Household" in invoke("categories").output


def test_categorize_multiple_entries(invoke, temp_db, make_entry):
    """Test bulk categorize with one missing entry."""
    (entry,) = temp_db.insert_entries([make_entry(category="Other")])

    result = invoke("categorize", str(entry.id), "999", "Household")

    assert result.exit_code == 1
    assert "Results: 1 succeeded, 1 failed" in result.output
    assert "Entry 999 not found" in result.output


def test_categorize_missing_entry(invoke):
    """Test categorizing a missing entry."""
    result = invoke("categorize", "999", "Household")

    assert result.exit_code == 1
    assert "Entry 999 not found" in result.output


def test_categorize_blank_category(invoke, temp_db, make_entry):
    """Test a blank category is rejected."""
    (entry,) = temp_db.insert_entries([make_entry()])

    result = invoke("categorize", str(entry.id), "  ")

    assert result.exit_code == 1
    assert "Category must not be empty" in result.output


def test_reclassify(invoke, temp_db, make_entry):
    """Test re-running the rules on a stored entry."""
    (entry,) = temp_db.insert_entries(
        [make_entry(description="Naivas Westlands", category="Other")]
    )

    result = invoke("reclassify", str(entry.id))

    assert result.exit_code == 0
    assert f"Entry {entry.id} reclassified as 'Groceries'" in result.output


def test_reclassify_with_rules_file(invoke, temp_db, make_entry, fixtures_dir, tmp_path):
    """Test reclassify follows the configured rules file."""
    (entry,) = temp_db.insert_entries(
        [make_entry(description="Paybill 4000", direction=Direction.DEBIT, category="Other")]
    )
    config_file = tmp_path / "pesatrack.json"
    config_file.write_text(json.dumps({"rules_file": str(fixtures_dir / "rules.json")}))

    result = invoke("--config", str(config_file), "reclassify", str(entry.id))

    assert result.exit_code == 0
    assert "reclassified as 'Bills'" in result.output


def test_classify(invoke):
    """Test classifying a description without storing it."""
    result = invoke("classify", "Paybill KPLC prepaid")

    assert result.exit_code == 0
    assert result.output.strip() == "Electricity"


def test_rules(invoke):
    """Test listing the rule table."""
    result = invoke("rules")

    assert result.exit_code == 0
    assert "1. Airtime [airtime, fuliza]" in result.output
    assert "(falls through) [paybill, pbl]" in result.output
    assert "  1. Electricity [kplc, power, electricity]" in result.output
    assert "Otherwise: Other" in result.output


def test_categories_empty(invoke):
    """Test listing categories of an empty store."""
    result = invoke("categories")

    assert result.exit_code == 0
    assert "No categories found" in result.output


def test_categories(invoke, imported):
    """Test categories in use after an import."""
    result = invoke("categories")

    for category in ("Airtime", "Electricity", "Groceries", "Other", "Transport"):
        assert f"  {category}" in result.output
