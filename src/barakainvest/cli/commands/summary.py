"""Portfolio summary command."""

import click
from barakainvest.cli.formatting import format_money, format_percent
from barakainvest.domain.summary import SummaryService


@click.command("summary")
@click.option("--history", is_flag=True, help="Show the cumulative profit series")
@click.pass_context
def show_summary(ctx, history: bool):
    """Show portfolio totals, allocation and best/worst performers."""
    service = SummaryService(ctx.obj["session"])
    summary = service.build_summary()

    click.echo("\nPortfolio")
    click.echo("=" * 60)
    for currency, totals in summary.currency_totals.items():
        click.echo(
            f"  {currency.value} capital: {format_money(totals.capital, currency):>20}   "
            f"profit: {format_money(totals.profit, currency):>20}"
        )
    click.echo(f"  Accounts: {summary.account_count}")
    click.echo(f"  Last entry: {summary.last_entry_date or 'N/A'}")

    if summary.best_performer is not None:
        best = summary.best_performer
        worst = summary.worst_performer
        click.echo(f"  Best performer: {best.account.bank_name} ({format_percent(best.roi)} ROI)")
        click.echo(f"  Worst performer: {worst.account.bank_name} ({format_percent(worst.roi)} ROI)")

    if summary.allocation_by_bank:
        click.echo("\nAllocation by bank")
        click.echo("-" * 60)
        for item in summary.allocation_by_bank:
            click.echo(f"  {item.bank_name:30s} {format_money(item.balance, item.currency):>20}")

    if summary.allocation_by_type:
        click.echo("\nAllocation by type")
        click.echo("-" * 60)
        for investment_type, value in summary.allocation_by_type.items():
            click.echo(f"  {investment_type.value:30s} {value:>20,.2f}")

    click.echo("\nRisk distribution")
    click.echo("-" * 60)
    for level, value in summary.risk_distribution.items():
        click.echo(f"  {level.value:30s} {value:>20,.2f}")

    if history and summary.cumulative_profit:
        click.echo("\nCumulative profit")
        click.echo("-" * 60)
        for point in summary.cumulative_profit:
            totals = "   ".join(
                format_money(total, currency) for currency, total in point.totals.items()
            )
            click.echo(f"  {point.date}   {totals}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(show_summary)
