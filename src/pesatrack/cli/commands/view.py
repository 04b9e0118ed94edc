"""Entry viewing commands."""

import click
from pesatrack.cli.date_filters import resolve_cli_date_range
from pesatrack.cli.error_handling import handle_domain_error
from pesatrack.domain.entities import Direction, EntryFilters
from pesatrack.domain.errors import DomainError
from pesatrack.domain.query import DEFAULT_PAGE_SIZE, EntryQueryService


def _format_amount(entry) -> str:
    sign = "-" if entry.direction == Direction.DEBIT else "+"
    return f"{sign}KES {entry.amount:,.2f}"


@click.command("view")
@click.option("--page", type=int, default=1, show_default=True, help="Page number")
@click.option(
    "--page-size", type=int, default=DEFAULT_PAGE_SIZE, show_default=True, help="Entries per page"
)
@click.option("--category", help="Only entries with this category")
@click.option(
    "--direction",
    type=click.Choice([d.value for d in Direction], case_sensitive=False),
    help="Only debits or only credits",
)
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--verbose", "-v", is_flag=True, help="Show all fields including balance and receipt number")
@click.pass_context
def view_entries(
    ctx,
    page: int,
    page_size: int,
    category: str,
    direction: str,
    start_date: str,
    end_date: str,
    verbose: bool,
):
    """View stored entries, newest first, one page at a time.

    Use --verbose to show balance, receipt number and import time.
    """
    store = ctx.obj["store"]
    service = EntryQueryService(store)

    date_range = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags={}
    )
    filters = EntryFilters(
        category=category,
        direction=Direction(direction.lower()) if direction else None,
        date_range=date_range,
    )

    try:
        result = service.list_entries(page=page, page_size=page_size, filters=filters)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not result.entries:
        if result.total_count:
            click.echo(f"Page {page} is past the last page ({result.total_pages}).")
        else:
            click.echo("No entries found.")
        return

    click.echo(
        f"\nPage {result.page} of {result.total_pages} ({result.total_count} entries):"
    )

    if verbose:
        click.echo("=" * 100)
        for entry in result.entries:
            click.echo(f"\nEntry ID: {entry.id}")
            click.echo(f"  Date: {entry.date:%Y-%m-%d %H:%M:%S}")
            click.echo(f"  Amount: {_format_amount(entry)}")
            click.echo(f"  Category: {entry.category}")
            click.echo(f"  Description: {entry.description}")
            if entry.balance is not None:
                click.echo(f"  Balance: KES {entry.balance:,.2f}")
            if entry.receipt_number:
                click.echo(f"  Receipt: {entry.receipt_number}")
            click.echo(f"  Imported: {entry.created_at:%Y-%m-%d %H:%M:%S}")
            click.echo("-" * 100)
    else:
        click.echo("-" * 100)
        click.echo(
            f"{'ID':<6} {'Date':<12} {'Amount':>16}  {'Category':<20} {'Description':<40}"
        )
        click.echo("-" * 100)
        for entry in result.entries:
            click.echo(
                f"{entry.id:<6} {entry.date:%Y-%m-%d}   {_format_amount(entry):>16}  "
                f"{entry.category:<20} {entry.description[:40]:<40}"
            )


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_entries)
