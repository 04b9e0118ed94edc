"""Main CLI entry point."""

import click
from pesatrack.config import load_config
from pesatrack.database.factories import create_sqlite_store
from pesatrack.domain.errors import DomainError
from pesatrack.logging_setup import configure_logging

# Import and register all commands at module level
from pesatrack.cli.commands import (
    import_cmd,
    view,
    summary,
    categorize,
    rules,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PESATRACK_DB_PATH environment variable)",
    envvar="PESATRACK_DB_PATH",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    help="Path to JSON config file (overrides PESATRACK_CONFIG environment variable)",
    envvar="PESATRACK_CONFIG",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. INFO or DEBUG (overrides PESATRACK_LOG_LEVEL)",
    envvar="PESATRACK_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, config_path: str | None, log_level: str | None):
    """Pesatrack - mobile money statement tracker.

    Import M-Pesa statement exports, categorize every entry automatically,
    and report spending by category and month.
    """
    ctx.ensure_object(dict)

    # Initialize store only when actually running a command (not for help)
    if ctx.invoked_subcommand is not None:
        try:
            configure_logging(log_level)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

        try:
            config = load_config(config_path)
        except (DomainError, FileNotFoundError) as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

        store = create_sqlite_store(database_path=db_path, timeout=config.store_timeout)
        store.connect()
        store.initialize_schema()
        ctx.obj["config"] = config
        ctx.obj["store"] = store
        ctx.call_on_close(store.disconnect)


# Register all commands
import_cmd.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
categorize.register_commands(cli)
rules.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
