"""Spending summary commands."""

import calendar

import click
from pesatrack.cli.date_filters import resolve_cli_date_range
from pesatrack.cli.error_handling import handle_domain_error
from pesatrack.domain.aggregation import AggregationService
from pesatrack.domain.errors import DomainError


@click.command("summary")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'this month')")
@click.option("--this-month", is_flag=True, help="Filter to current month")
@click.option("--this-year", is_flag=True, help="Filter to current year")
@click.option("--this-week", is_flag=True, help="Filter to current week")
@click.option("--last-month", is_flag=True, help="Filter to previous month")
@click.option("--last-year", is_flag=True, help="Filter to previous year")
@click.option("--last-week", is_flag=True, help="Filter to previous week")
@click.pass_context
def summary(
    ctx,
    start_date: str,
    end_date: str,
    this_month: bool,
    this_year: bool,
    this_week: bool,
    last_month: bool,
    last_year: bool,
    last_week: bool,
):
    """Show spending per category, largest first.

    Only debit entries count as spending. Without a date filter every
    stored entry is included.
    """
    service = AggregationService(ctx.obj["store"])

    date_range = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "this-year": this_year,
            "this-week": this_week,
            "last-month": last_month,
            "last-year": last_year,
            "last-week": last_week,
        },
    )

    try:
        aggregates = service.aggregate_by_category(date_range)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not aggregates:
        click.echo("No spending found.")
        return

    click.echo("\nSpending by Category:")
    click.echo("-" * 80)
    click.echo(f"{'Category':<42} {'Entries':>8} {'Total':>28}")
    click.echo("-" * 80)
    for aggregate in aggregates:
        total_str = f"KES {aggregate.total_amount:,.2f}"
        click.echo(f"{aggregate.category:<42} {aggregate.count:>8} {total_str:>28}")

    click.echo("-" * 80)
    total_str = f"KES {service.total_spending(aggregates):,.2f}"
    click.echo(f"{'Total':<42} {sum(a.count for a in aggregates):>8} {total_str:>28}")
    click.echo("=" * 80)


@click.command("monthly")
@click.pass_context
def monthly(ctx):
    """Show spending per calendar month, oldest first."""
    service = AggregationService(ctx.obj["store"])

    try:
        aggregates = service.aggregate_by_month()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not aggregates:
        click.echo("No spending found.")
        return

    click.echo("\nSpending by Month:")
    click.echo("-" * 60)
    click.echo(f"{'Month':<22} {'Entries':>8} {'Total':>28}")
    click.echo("-" * 60)
    for aggregate in aggregates:
        label = f"{calendar.month_name[aggregate.month]} {aggregate.year}"
        total_str = f"KES {aggregate.total_amount:,.2f}"
        click.echo(f"{label:<22} {aggregate.count:>8} {total_str:>28}")


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary)
    cli.add_command(monthly)
