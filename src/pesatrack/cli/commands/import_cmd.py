"""CSV statement import command."""

import click
from pesatrack.cli.error_handling import build_classifier_or_exit, handle_domain_error
from pesatrack.domain.errors import DomainError
from pesatrack.domain.ingestion import IngestionService
from pesatrack.utils.csv_reader import read_statement_rows


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_csv(ctx, csv_file: str):
    """Import and categorize entries from a CSV statement export."""
    store = ctx.obj["store"]
    config = ctx.obj["config"]
    service = IngestionService(
        store,
        aliases=config.aliases,
        classifier=build_classifier_or_exit(ctx),
        max_workers=config.max_workers,
    )

    try:
        rows = read_statement_rows(csv_file)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        # Line 1 of the file is the header
        result = service.ingest(rows, first_row_number=2)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result.accepted_count} entries")
    click.echo(f"  Rejected: {result.rejected_count} rows")
    if result.skipped_count:
        click.echo(f"  Skipped: {result.skipped_count} blank rows")
    for error in result.errors:
        click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
