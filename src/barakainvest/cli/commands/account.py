"""Account management commands."""

import click
from barakainvest.cli.account_resolution import resolve_account_or_exit
from barakainvest.cli.error_handling import handle_domain_error
from barakainvest.cli.formatting import format_money, format_percent, trend_marker
from barakainvest.domain.account import AccountService
from barakainvest.domain.entities import Currency, InvestmentType, RiskLevel
from barakainvest.domain.resolvers import (
    resolve_currency,
    resolve_investment_type,
    resolve_risk_level,
)
from barakainvest.utils.amount_parser import parse_amount
from barakainvest.utils.date_parser import parse_date

INVESTMENT_TYPE_CHOICES = [t.name.lower().replace("_", "-") for t in InvestmentType]


@click.group()
def account_group():
    """Manage investment accounts."""
    pass


@account_group.command("create")
@click.argument("bank_name", metavar="BANK_NAME")
@click.option("--capital", "capital", required=True, help="Initial capital (e.g., 100000 or 1,500.50)")
@click.option(
    "--currency",
    type=click.Choice([c.value for c in Currency], case_sensitive=False),
    default=Currency.TRY.value,
    show_default=True,
)
@click.option(
    "--type",
    "investment_type",
    type=click.Choice(INVESTMENT_TYPE_CHOICES, case_sensitive=False),
    default="participation",
    show_default=True,
    help="Investment type",
)
@click.option(
    "--risk",
    type=click.Choice([r.value for r in RiskLevel], case_sensitive=False),
    default=RiskLevel.LOW.value,
    show_default=True,
)
@click.option("--start-date", help="Start date (defaults to today)")
@click.option("--maturity", type=int, default=12, show_default=True, help="Maturity in months")
@click.pass_context
def create_account(
    ctx,
    bank_name: str,
    capital: str,
    currency: str,
    investment_type: str,
    risk: str,
    start_date: str | None,
    maturity: int,
):
    """Open a new investment account.

    Examples:
        baraka account create "Kuveyt Turk" --capital 100000
        baraka account create "Albaraka" --capital 5000 --currency USD --type sukuk --risk Medium
    """
    service = AccountService(ctx.obj["session"])

    try:
        initial_capital = parse_amount(capital)
    except ValueError as e:
        click.echo(f"Error: Invalid capital: {e}", err=True)
        ctx.exit(1)

    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    try:
        account_id = service.create_account(
            bank_name=bank_name,
            initial_capital=initial_capital,
            currency=resolve_currency(currency),
            investment_type=resolve_investment_type(investment_type.replace("-", "_")),
            risk_level=resolve_risk_level(risk),
            start_date=start,
            maturity_period=maturity,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    account = service.get_account(account_id)
    click.echo(f"Created account '{account.bank_name}' (ID: {account_id})")
    click.echo(f"  Capital: {format_money(account.initial_capital, account.currency)}")
    click.echo(f"  Type: {account.investment_type.value}")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts with balance and ROI."""
    service = AccountService(ctx.obj["session"])

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 100)
    for acc in accounts:
        performance = service.get_account_performance(acc.id)
        click.echo(
            f"{acc.id[:8]} | {acc.bank_name:20s} | {acc.investment_type.value:26s} | "
            f"{format_money(acc.current_balance, acc.currency):>20s} | "
            f"{trend_marker(performance.roi)} {format_percent(performance.roi)} ROI"
        )


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str) -> None:
    """Show an account and its statement history in date order.

    ACCOUNT can be an account ID, an ID prefix or a bank name.
    """
    service = AccountService(ctx.obj["session"])
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.get_account(account_id)
    performance = service.get_account_performance(account_id)

    click.echo(f"\n{acc.bank_name} ({acc.currency.value})")
    click.echo(f"  ID: {acc.id}")
    click.echo(f"  Type: {acc.investment_type.value}")
    click.echo(f"  Risk: {acc.risk_level.value}")
    click.echo(f"  Start date: {acc.start_date} | Maturity: {acc.maturity_period} months")
    click.echo(f"  Initial capital: {format_money(acc.initial_capital, acc.currency)}")
    click.echo(f"  Current balance: {format_money(acc.current_balance, acc.currency)}")
    click.echo(f"  Total profit: {format_money(performance.total_profit, acc.currency)}")
    click.echo(f"  ROI: {format_percent(performance.roi)}")

    chain = service.get_account_chain(account_id)
    if not chain:
        click.echo("\nNo balance entries yet.")
        return

    click.echo("\n" + "-" * 110)
    click.echo(
        f"{'ID':<9} {'Date':<11} {'Previous':>15} {'Balance':>15} {'Deposit':>12} "
        f"{'Withdrawal':>12} {'Profit':>14} {'Profit %':>9}  Type"
    )
    click.echo("-" * 110)
    for txn in chain:
        click.echo(
            f"{txn.id[:8]:<9} {str(txn.date):<11} {txn.previous_balance:>15,.2f} "
            f"{txn.current_balance:>15,.2f} {txn.user_deposit:>12,.2f} {txn.withdrawal:>12,.2f} "
            f"{txn.calculated_profit:>14,.2f} {txn.profit_percentage:>8.2f}%  {txn.type.value}"
        )


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account and all of its balance entries.

    ACCOUNT can be an account ID, an ID prefix or a bank name.

    Examples:
        baraka account delete "Kuveyt Turk"
        baraka account delete 3f2a --yes
    """
    service = AccountService(ctx.obj["session"])
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.get_account(account_id)
    count = len(service.get_account_chain(account_id))

    if not yes and not click.confirm(
        f"Delete account '{acc.bank_name}' and its {count} balance "
        f"entr{'y' if count == 1 else 'ies'}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        removed = service.delete_account(account_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted account '{acc.bank_name}' and {removed} balance entr{'y' if removed == 1 else 'ies'}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
