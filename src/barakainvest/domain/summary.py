"""Portfolio summary domain service."""

from decimal import Decimal
from typing import Optional

from barakainvest.domain.account import AccountService
from barakainvest.domain.entities import (
    AccountPerformance,
    BankAllocation,
    Currency,
    CurrencyTotals,
    CumulativeProfitPoint,
    InvestmentType,
    PortfolioSummary,
    RiskLevel,
)
from barakainvest.domain.profit import ZERO
from barakainvest.domain.session import PortfolioSession

CENTS = Decimal("0.01")


class SummaryService:
    """Service for building dashboard figures over the whole portfolio."""

    def __init__(self, session: PortfolioSession):
        """Initialize summary service.

        Args:
            session: Portfolio session owning the current state
        """
        self.session = session
        self.account_service = AccountService(session)

    def build_summary(self) -> PortfolioSummary:
        """Build every dashboard figure in one pass over the current state."""
        state = self.session.state
        performers = self.get_performances()
        dates = [txn.date for txn in state.transactions]

        return PortfolioSummary(
            currency_totals=self.get_currency_totals(),
            account_count=len(state.accounts),
            last_entry_date=max(dates) if dates else None,
            allocation_by_bank=self.get_allocation_by_bank(),
            allocation_by_type=self.get_allocation_by_type(),
            risk_distribution=self.get_risk_distribution(),
            cumulative_profit=self.get_cumulative_profit(),
            best_performer=max(performers, key=lambda p: p.roi) if performers else None,
            worst_performer=min(performers, key=lambda p: p.roi) if performers else None,
        )

    def get_currency_totals(self) -> dict[Currency, CurrencyTotals]:
        """Sum initial capital and calculated profit per currency.

        Every currency of the enumeration is present, with zero totals when
        no account uses it.
        """
        capital = {currency: ZERO for currency in Currency}
        profit = {currency: ZERO for currency in Currency}
        for performance in self.get_performances():
            currency = performance.account.currency
            capital[currency] += performance.account.initial_capital
            profit[currency] += performance.total_profit
        return {
            currency: CurrencyTotals(capital=capital[currency], profit=profit[currency])
            for currency in Currency
        }

    def get_performances(self) -> list[AccountPerformance]:
        """Return profit and ROI for every account."""
        return [
            self.account_service.get_account_performance(acc.id)
            for acc in self.session.state.accounts
        ]

    def get_allocation_by_bank(self) -> tuple[BankAllocation, ...]:
        """Current balance per account, in account order."""
        return tuple(
            BankAllocation(bank_name=acc.bank_name, balance=acc.current_balance, currency=acc.currency)
            for acc in self.session.state.accounts
        )

    def get_allocation_by_type(self) -> dict[InvestmentType, Decimal]:
        """Sum current balances per investment type (only types in use)."""
        allocation: dict[InvestmentType, Decimal] = {}
        for acc in self.session.state.accounts:
            allocation[acc.investment_type] = allocation.get(acc.investment_type, ZERO) + acc.current_balance
        return allocation

    def get_risk_distribution(self) -> dict[RiskLevel, Decimal]:
        """Sum current balances per risk level (every level present)."""
        distribution = {level: ZERO for level in RiskLevel}
        for acc in self.session.state.accounts:
            distribution[acc.risk_level] += acc.current_balance
        return distribution

    def get_cumulative_profit(self) -> tuple[CumulativeProfitPoint, ...]:
        """Running profit per currency over the distinct transaction dates."""
        state = self.session.state
        currency_by_account: dict[str, Currency] = {acc.id: acc.currency for acc in state.accounts}
        running = {currency: ZERO for currency in Currency}

        points = []
        for day in sorted({txn.date for txn in state.transactions}):
            for txn in state.transactions:
                if txn.date != day:
                    continue
                currency: Optional[Currency] = currency_by_account.get(txn.account_id)
                if currency is not None:
                    running[currency] += txn.calculated_profit
            points.append(
                CumulativeProfitPoint(
                    date=day,
                    totals={currency: total.quantize(CENTS) for currency, total in running.items()},
                )
            )
        return tuple(points)
