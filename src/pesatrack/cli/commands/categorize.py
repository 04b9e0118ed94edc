"""Category correction commands."""

import click
from pesatrack.cli.error_handling import build_classifier_or_exit
from pesatrack.domain.errors import DomainError
from pesatrack.domain.ledger import LedgerService


def _unique(entry_ids: tuple[int, ...]) -> list[int]:
    """Remove duplicates while preserving order."""
    unique_ids = []
    seen = set()
    for entry_id in entry_ids:
        if entry_id not in seen:
            unique_ids.append(entry_id)
            seen.add(entry_id)
    return unique_ids


def _apply_to_entries(ctx, unique_ids: list[int], action, verb: str) -> None:
    """Run action on each entry and report per-entry results."""
    successes = []
    errors = []

    for entry_id in unique_ids:
        try:
            entry = action(entry_id)
            successes.append(entry_id)
            if len(unique_ids) == 1:
                click.echo(f"Entry {entry_id} {verb} as '{entry.category}'")
            else:
                click.echo(f"✓ Entry {entry_id} {verb} as '{entry.category}'")
        except DomainError as e:
            errors.append((entry_id, str(e)))
            if len(unique_ids) > 1:
                click.echo(f"✗ Entry {entry_id}: {e}")

    if len(unique_ids) > 1:
        click.echo(f"\nResults: {len(successes)} succeeded, {len(errors)} failed")
        if errors:
            ctx.exit(1)
    elif errors:
        click.echo(f"Error: {errors[0][1]}", err=True)
        ctx.exit(1)


@click.command("categorize")
@click.argument("entry_ids", nargs=-1, required=True, type=int)
@click.argument("category", nargs=1)
@click.pass_context
def categorize_entries(ctx, entry_ids: tuple[int, ...], category: str):
    """Assign a category to one or more entries.

    Examples:
        pesatrack categorize 1 "Groceries"
        pesatrack categorize 1 2 3 4 5 "Transport"
    """
    service = LedgerService(ctx.obj["store"])

    if not category.strip():
        click.echo("Error: Category must not be empty", err=True)
        ctx.exit(1)

    unique_ids = _unique(entry_ids)
    if len(unique_ids) > 1:
        click.echo(f"Categorizing {len(unique_ids)} entries as '{category.strip()}'...")

    _apply_to_entries(
        ctx,
        unique_ids,
        lambda entry_id: service.update_category(entry_id, category),
        "categorized",
    )


@click.command("reclassify")
@click.argument("entry_ids", nargs=-1, required=True, type=int)
@click.pass_context
def reclassify_entries(ctx, entry_ids: tuple[int, ...]):
    """Re-run the classification rules on one or more stored entries.

    Useful after changing the rules file in the config.
    """
    service = LedgerService(ctx.obj["store"], classifier=build_classifier_or_exit(ctx))
    _apply_to_entries(ctx, _unique(entry_ids), service.reclassify, "reclassified")


def register_commands(cli):
    """Register categorize and reclassify commands with main CLI."""
    cli.add_command(categorize_entries)
    cli.add_command(reclassify_entries)
