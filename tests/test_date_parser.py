"""Tests for statement timestamp and CLI date parsing."""

from datetime import date, datetime, timedelta

import pytest
from dateutil.relativedelta import relativedelta

from pesatrack.utils.date_parser import get_date_range, parse_date, parse_timestamp


@pytest.mark.parametrize(
    "value, expected",
    [
        # M-Pesa "Completion Time" column
        ("2024-01-15 14:32:10", datetime(2024, 1, 15, 14, 32, 10)),
        ("2024-01-15 14:32", datetime(2024, 1, 15, 14, 32)),
        # App exports with a 12 hour clock
        ("15/01/2024 2:32 PM", datetime(2024, 1, 15, 14, 32)),
        ("Jan 15, 2024 9:05 AM", datetime(2024, 1, 15, 9, 5)),
        ("2024-01-15", datetime(2024, 1, 15)),
    ],
)
def test_parse_timestamp_statement_formats(value, expected):
    """Test the timestamp layouts found in statement exports."""
    assert parse_timestamp(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-15T10:00:00+03:00", datetime(2024, 1, 15, 7, 0)),
        ("2024-01-15T08:00:00Z", datetime(2024, 1, 15, 8, 0)),
        ("2024-01-31T23:30:00-05:00", datetime(2024, 2, 1, 4, 30)),
    ],
)
def test_parse_timestamp_converts_offsets_to_utc(value, expected):
    """Test offset timestamps become the same instant in naive UTC."""
    result = parse_timestamp(value)

    assert result.tzinfo is None
    assert result == expected


def test_parse_timestamp_naive_values_unchanged():
    """Test timestamps without an offset are stored as written."""
    assert parse_timestamp("2024-01-31 23:30:00") == datetime(2024, 1, 31, 23, 30)


def test_parse_timestamp_dayfirst():
    """Test ambiguous day/month order follows dayfirst."""
    assert parse_timestamp("01/02/2024 08:00").month == 1
    assert parse_timestamp("01/02/2024 08:00", dayfirst=True).month == 2
    # Unambiguous dates parse the same either way
    assert parse_timestamp("25/02/2024").day == 25


@pytest.mark.parametrize("value", ["", "   ", "not a date", "2024-02-30 10:00"])
def test_parse_timestamp_invalid(value):
    """Test empty and unparseable timestamps raise ValueError."""
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_parse_date_cli_bound():
    """Test an explicit --start-date/--end-date value."""
    assert parse_date(" 2024-01-15 ") == date(2024, 1, 15)


def test_parse_date_relative_words():
    """Test the relative words accepted for CLI bounds."""
    today = date.today()

    assert parse_date("today") == today
    assert parse_date("Yesterday") == today - timedelta(days=1)
    assert parse_date("this month") == today.replace(day=1)
    assert parse_date("last month") == (today - relativedelta(months=1)).replace(day=1)
    assert parse_date("this year") == date(today.year, 1, 1)
    assert parse_date("last year") == date(today.year - 1, 1, 1)


def test_parse_date_invalid():
    """Test unknown words are rejected."""
    with pytest.raises(ValueError):
        parse_date("last invalid")


@pytest.mark.parametrize(
    "period", ["this-month", "this-year", "this-week", "last-month", "last-year", "last-week"]
)
def test_get_date_range_is_ordered(period):
    """Test every period starts on or before it ends and never runs past today."""
    start, end = get_date_range(period)

    assert start <= end <= date.today()


def test_get_date_range_current_periods_end_today():
    """Test "this" periods run up to today."""
    today = date.today()

    assert get_date_range("this-month") == (today.replace(day=1), today)
    assert get_date_range("this-year") == (date(today.year, 1, 1), today)
    assert get_date_range("this-week")[0] == today - timedelta(days=today.weekday())


def test_get_date_range_previous_periods_are_whole():
    """Test "last" periods cover a full month, year or Monday-Sunday week."""
    today = date.today()

    month_start, month_end = get_date_range("last-month")
    assert month_start.day == 1
    assert month_end + timedelta(days=1) == today.replace(day=1)

    assert get_date_range("last-year") == (date(today.year - 1, 1, 1), date(today.year - 1, 12, 31))

    week_start, week_end = get_date_range("last-week")
    assert (week_start.weekday(), week_end.weekday()) == (0, 6)
    assert (week_end - week_start).days == 6


def test_get_date_range_invalid_period():
    """Test unknown periods are rejected."""
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-month")
