"""CLI helpers for date range resolution."""

from typing import Optional

import click

from pesatrack.domain.entities import DateRange
from pesatrack.utils.date_parser import get_date_range, parse_date


def _fail(ctx: click.Context, message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def _parse_bound(ctx: click.Context, label: str, value: Optional[str]):
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        _fail(ctx, f"Invalid {label} date: {e}")


def resolve_cli_date_range(
    ctx: click.Context,
    *,
    start_date: Optional[str],
    end_date: Optional[str],
    period_flags: dict[str, bool],
) -> Optional[DateRange]:
    """Turn period flags or --start-date/--end-date into a DateRange.

    Period flags are keyed by period name ("this-month", "last-week", ...)
    and are mutually exclusive with each other and with explicit dates.
    Returns None when nothing bounds the range.
    """
    periods = [period for period, is_set in period_flags.items() if is_set]
    flag_names = ", ".join(f"--{period}" for period in period_flags)

    if len(periods) > 1:
        _fail(ctx, f"Only one period option ({flag_names}) can be specified at a time.")
    if periods and (start_date or end_date):
        _fail(ctx, "Period options cannot be combined with --start-date or --end-date.")

    if periods:
        start, end = get_date_range(periods[0])
    else:
        start = _parse_bound(ctx, "start", start_date)
        end = _parse_bound(ctx, "end", end_date)

    if start is None and end is None:
        return None
    if start is not None and end is not None and start > end:
        _fail(ctx, "Start date must not be after end date.")
    return DateRange.from_dates(start, end)
