"""Add balance entry command."""

import click
from decimal import Decimal
from barakainvest.cli.account_resolution import resolve_account_or_exit
from barakainvest.cli.error_handling import handle_domain_error
from barakainvest.cli.formatting import format_money, format_percent
from barakainvest.domain.account import AccountService
from barakainvest.domain.transaction import TransactionService
from barakainvest.utils.amount_parser import parse_amount
from barakainvest.utils.date_parser import parse_date


def parse_amount_option(ctx: click.Context, label: str, value: str | None) -> Decimal | None:
    """Parse an amount option or exit with a CLI error."""
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.command("add")
@click.option("--account", required=True, help="Account ID, ID prefix or bank name")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Statement date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--balance", required=True, help="Balance shown on the statement")
@click.option("--deposit", default="0", show_default=True, help="Money you added since the last entry")
@click.option("--withdrawal", default="0", show_default=True, help="Money you took out since the last entry")
@click.option("--dry-run", is_flag=True, help="Show the detected profit without saving the entry")
@click.pass_context
def add_entry(
    ctx,
    account: str,
    date: str,
    balance: str,
    deposit: str,
    withdrawal: str,
    dry_run: bool,
):
    """Record a new balance entry for an account.

    Profit is detected automatically from the balance change minus your own
    deposits and withdrawals. Entries may be back-dated; later entries are
    recomputed.

    Examples:
        baraka add --account "Kuveyt Turk" --balance 101250
        baraka add --account 3f2a --date 2024-03-01 --balance 52000 --deposit 1500
        baraka add --account "Kuveyt Turk" --balance 101250 --dry-run
    """
    session = ctx.obj["session"]
    account_service = AccountService(session)
    transaction_service = TransactionService(session)

    account_id = resolve_account_or_exit(ctx, account_service, account)

    try:
        entry_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    current_balance = parse_amount_option(ctx, "balance", balance)
    user_deposit = parse_amount_option(ctx, "deposit", deposit)
    withdrawn = parse_amount_option(ctx, "withdrawal", withdrawal)

    if dry_run:
        acc = account_service.get_account(account_id)
        try:
            stats = transaction_service.preview_profit(
                account_id, current_balance, user_deposit, withdrawn
            )
        except ValueError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Preview against current balance {format_money(acc.current_balance, acc.currency)}")
        click.echo(
            f"  Auto-detected profit: {format_money(stats.profit_amount, acc.currency)} "
            f"({format_percent(stats.profit_percentage)})"
        )
        click.echo(f"  Type: {stats.type.value}")
        click.echo("Dry run: nothing saved.")
        return

    try:
        transaction_id = transaction_service.record_transaction(
            account_id=account_id,
            date=entry_date,
            current_balance=current_balance,
            user_deposit=user_deposit,
            withdrawal=withdrawn,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    acc = account_service.get_account(account_id)
    txn = transaction_service.get_transaction(transaction_id)
    click.echo(f"Recorded balance entry {transaction_id}")
    click.echo(f"  Account: {acc.bank_name}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Balance: {format_money(txn.current_balance, acc.currency)}")
    click.echo(
        f"  Auto-detected profit: {format_money(txn.calculated_profit, acc.currency)} "
        f"({format_percent(txn.profit_percentage)})"
    )
    click.echo(f"  Type: {txn.type.value}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
