"""Backup import and export commands."""

from datetime import date

import click
from barakainvest.cli.error_handling import handle_domain_error
from barakainvest.domain.backup import BackupService


@click.command("import")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", is_flag=True, help="Merge without asking for confirmation")
@click.pass_context
def import_backup(ctx, backup_file: str, yes: bool):
    """Merge a CSV backup into the local portfolio.

    Accounts and entries whose ID already exists are left untouched.
    """
    service = BackupService(ctx.obj["session"])

    try:
        preview = service.preview_file(backup_file)
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    banks = sorted({acc.bank_name for acc in preview.accounts})
    click.echo("Validation successful:")
    click.echo(f"  Accounts found: {len(preview.accounts)}")
    click.echo(f"  Records found: {len(preview.transactions)}")
    if banks:
        click.echo(f"  Banks: {', '.join(banks)}")

    if not yes and not click.confirm("Merge into the existing local database?"):
        click.echo("Import cancelled.")
        return

    try:
        result = service.import_file(backup_file)
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    click.echo(f"  Accounts added: {result.accounts_added}")
    click.echo(f"  Entries added: {result.transactions_added}")
    if result.skipped_rows:
        click.echo(f"  Skipped rows: {result.skipped_rows}")


@click.command("export")
@click.argument("backup_file", type=click.Path(dir_okay=False), required=False)
@click.pass_context
def export_backup(ctx, backup_file: str | None):
    """Write the whole portfolio to a CSV backup.

    Defaults to BarakaInvest_Backup_<today>.csv in the current directory.
    """
    service = BackupService(ctx.obj["session"])
    target = backup_file or f"BarakaInvest_Backup_{date.today().isoformat()}.csv"

    try:
        path = service.export_file(target)
    except OSError as e:
        click.echo(f"Error: Could not write backup: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Exported backup to {path}")


def register_commands(cli):
    """Register backup commands with main CLI."""
    cli.add_command(import_backup)
    cli.add_command(export_backup)
