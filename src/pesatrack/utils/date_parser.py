"""Date parsing utilities."""

from datetime import date, datetime, timedelta, timezone
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_timestamp(value: str, dayfirst: bool = False) -> datetime:
    """Parse a statement timestamp permissively.

    Accepts anything dateutil understands, e.g. "2024-01-15 14:32:10",
    "15/01/2024 2:32 PM" or "Jan 15, 2024". Values with a UTC offset are
    converted to UTC and naive values are kept as written, so the result is
    always a naive, comparable instant.

    Args:
        value: Timestamp string
        dayfirst: Interpret ambiguous "01/02/2024" style dates as day first

    Returns:
        Naive datetime (UTC when the input carried an offset)

    Raises:
        ValueError: If the string is empty or cannot be parsed
    """
    if not value or not value.strip():
        raise ValueError("Empty date string")

    try:
        parsed = date_parser.parse(value.strip(), dayfirst=dayfirst)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{value.strip()}': {e}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.replace(tzinfo=None)


def parse_date(date_str: str) -> date:
    """Parse a CLI date argument into a date.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative words "today", "yesterday", "this month", "last month",
    "this year" and "last year" (the latter four resolve to the first day of
    the period).

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    return parse_timestamp(date_str).date()


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-month, this-year, this-week, last-month,
            last-year, last-week

    Returns:
        Tuple of (start_date, end_date); "this" periods end today

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()
    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)
    week_start = today - timedelta(days=today.weekday())

    if period == "this-month":
        return (month_start, today)
    if period == "this-year":
        return (year_start, today)
    if period == "this-week":
        return (week_start, today)
    if period == "last-month":
        return (month_start - relativedelta(months=1), month_start - timedelta(days=1))
    if period == "last-year":
        return (year_start - relativedelta(years=1), year_start - timedelta(days=1))
    if period == "last-week":
        return (week_start - timedelta(days=7), week_start - timedelta(days=1))

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: this-month, this-year, "
        "this-week, last-month, last-year, last-week"
    )
