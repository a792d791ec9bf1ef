"""Main CLI entry point."""

import logging

import click
from barakainvest.database.factories import create_sqlite_database
from barakainvest.domain.session import PortfolioSession

# Import and register all commands at module level
from barakainvest.cli.commands import (
    account,
    add,
    backup,
    reset,
    summary,
    transaction,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BARAKA_DB_PATH environment variable)",
    envvar="BARAKA_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="BARAKA_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """BarakaInvest - Profit-sharing investment tracker.

    Track participation, sukuk, gold and real-estate accounts. Every balance
    statement is classified, and an account's whole history is recomputed
    whenever a statement is added, edited or deleted.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db
        ctx.obj["session"] = PortfolioSession(db)


# Register all commands
account.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
backup.register_commands(cli)
summary.register_commands(cli)
reset.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
