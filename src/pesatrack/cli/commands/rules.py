"""Classification rule and category commands."""

import click
from pesatrack.cli.error_handling import build_classifier_or_exit, handle_domain_error
from pesatrack.domain.entities import ClassificationRule
from pesatrack.domain.errors import DomainError
from pesatrack.domain.ledger import LedgerService


def print_rule_tree(rules: tuple[ClassificationRule, ...], indent: int = 0) -> None:
    """Recursively print rules in evaluation order."""
    for position, rule in enumerate(rules, start=1):
        prefix = "  " * indent
        keywords = ", ".join(rule.keywords)
        if rule.refinements:
            label = rule.fallback_category or "(falls through)"
            click.echo(f"{prefix}{position}. {label} [{keywords}]")
            print_rule_tree(rule.refinements, indent + 1)
        else:
            click.echo(f"{prefix}{position}. {rule.category} [{keywords}]")


@click.command("rules")
@click.pass_context
def list_rules(ctx):
    """List classification rules in the order they are evaluated."""
    classifier = build_classifier_or_exit(ctx)

    click.echo("\nClassification rules (first match wins):")
    print_rule_tree(classifier.rules)
    click.echo(f"Otherwise: {classifier.default_category}")


@click.command("classify")
@click.argument("description")
@click.pass_context
def classify_description(ctx, description: str):
    """Show the category a description would be given."""
    classifier = build_classifier_or_exit(ctx)
    click.echo(classifier.classify(description))


@click.command("categories")
@click.pass_context
def list_categories(ctx):
    """List categories currently used by stored entries."""
    service = LedgerService(ctx.obj["store"])

    try:
        categories = service.list_categories()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not categories:
        click.echo("No categories found. Run 'import' to load a statement.")
        return

    click.echo("\nCategories:")
    for category in categories:
        click.echo(f"  {category}")


def register_commands(cli):
    """Register rule and category commands with main CLI."""
    cli.add_command(list_rules)
    cli.add_command(classify_description)
    cli.add_command(list_categories)
