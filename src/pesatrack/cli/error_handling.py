"""CLI error handling helpers."""

import click

from pesatrack.config import PesaTrackConfig
from pesatrack.domain.classifier import Classifier
from pesatrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def build_classifier_or_exit(ctx: click.Context) -> Classifier:
    """Build the configured classifier, or exit if its rules file is bad."""
    config: PesaTrackConfig = ctx.obj["config"]
    try:
        return config.build_classifier()
    except (DomainError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
