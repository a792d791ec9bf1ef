"""Database reset command."""

import click


@click.command("reset")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def reset_database(ctx, yes: bool):
    """Delete every account and balance entry."""
    if not yes and not click.confirm("Reset everything? Your data will be lost."):
        click.echo("Reset cancelled.")
        return

    if not ctx.obj["session"].reset():
        click.echo("Error: Could not clear the database", err=True)
        ctx.exit(1)
    click.echo("All accounts and balance entries deleted.")


def register_commands(cli):
    """Register reset command with main CLI."""
    cli.add_command(reset_database)
