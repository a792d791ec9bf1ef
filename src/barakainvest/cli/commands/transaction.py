"""Balance entry management commands."""

import click
from barakainvest.cli.account_resolution import (
    resolve_account_or_exit,
    resolve_transaction_or_exit,
)
from barakainvest.cli.commands.add import parse_amount_option
from barakainvest.cli.error_handling import handle_domain_error
from barakainvest.cli.formatting import format_money, trend_marker
from barakainvest.domain.account import AccountService
from barakainvest.domain.transaction import TransactionService
from barakainvest.utils.date_parser import get_date_range, parse_date


@click.group()
def transaction_group():
    """Manage balance entries."""
    pass


@transaction_group.command("edit")
@click.argument("transaction", metavar="TRANSACTION_ID")
@click.option("--date", help="New statement date")
@click.option("--balance", help="New statement balance")
@click.option("--deposit", help="New deposit amount")
@click.option("--withdrawal", help="New withdrawal amount")
@click.pass_context
def edit_transaction(
    ctx,
    transaction: str,
    date: str | None,
    balance: str | None,
    deposit: str | None,
    withdrawal: str | None,
) -> None:
    """Edit a balance entry.

    Updates only the fields that are provided; every later entry of the same
    account is recomputed.

    Examples:
        baraka transaction edit 9c1e --balance 1050
        baraka transaction edit 9c1e --date 2024-02-01 --deposit 100
    """
    transaction_service = TransactionService(ctx.obj["session"])
    transaction_id = resolve_transaction_or_exit(ctx, transaction_service, transaction)

    entry_date = None
    if date is not None:
        try:
            entry_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        transaction_service.update_transaction(
            transaction_id=transaction_id,
            date=entry_date,
            current_balance=parse_amount_option(ctx, "balance", balance),
            user_deposit=parse_amount_option(ctx, "deposit", deposit),
            withdrawal=parse_amount_option(ctx, "withdrawal", withdrawal),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated balance entry {transaction_id}")


@transaction_group.command("list")
@click.option("--account", help="Account ID, ID prefix or bank name")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option(
    "--period",
    help="Named period: this-month, this-year, this-week, last-month, last-year, last-week",
)
@click.pass_context
def list_transactions(
    ctx, account: str | None, start_date: str | None, end_date: str | None, period: str | None
):
    """List balance entries, newest first."""
    session = ctx.obj["session"]
    service = TransactionService(session)
    account_service = AccountService(session)

    start = end = None
    if period:
        try:
            start, end = get_date_range(period)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
    try:
        if start_date:
            start = parse_date(start_date)
        if end_date:
            end = parse_date(end_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)

    account_id = None
    if account:
        account_id = resolve_account_or_exit(ctx, account_service, account)

    transactions = service.list_transactions(
        account_id=account_id, start_date=start, end_date=end
    )
    if not transactions:
        click.echo("No balance entries found.")
        return

    accounts = {acc.id: acc for acc in account_service.list_accounts()}

    click.echo(f"\nFound {len(transactions)} balance entr{'y' if len(transactions) == 1 else 'ies'}:")
    click.echo("-" * 100)
    click.echo(f"{'ID':<9} {'Date':<11} {'Account':<20} {'Balance':>20} {'Profit':>20}  Type")
    click.echo("-" * 100)
    for txn in transactions:
        acc = accounts.get(txn.account_id)
        bank_name = acc.bank_name if acc else "Unknown"
        currency = acc.currency if acc else "TRY"
        click.echo(
            f"{txn.id[:8]:<9} {str(txn.date):<11} {bank_name[:20]:<20} "
            f"{format_money(txn.current_balance, currency):>20} "
            f"{trend_marker(txn.calculated_profit)}{format_money(txn.calculated_profit, currency):>19}  "
            f"{txn.type.value}"
        )


@transaction_group.command("delete")
@click.argument("transaction", metavar="TRANSACTION_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction: str, yes: bool) -> None:
    """Delete a balance entry.

    Examples:
        baraka transaction delete 9c1e
    """
    transaction_service = TransactionService(ctx.obj["session"])
    transaction_id = resolve_transaction_or_exit(ctx, transaction_service, transaction)

    if not yes and not click.confirm(f"Are you sure you want to delete balance entry {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        transaction_service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted balance entry {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
