"""Account domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from barakainvest.domain.entities import (
    Account as AccountEntity,
    AccountPerformance,
    Currency,
    InvestmentType,
    RiskLevel,
    Transaction as TransactionEntity,
)
from barakainvest.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    negative_amount,
)
from barakainvest.domain.healing import sort_chain
from barakainvest.domain.profit import HUNDRED, ZERO
from barakainvest.domain.session import PortfolioSession
from barakainvest.domain.state import AddAccount, DeleteAccount
from barakainvest.utils.ids import generate_id


class AccountService:
    """Service for managing investment accounts."""

    def __init__(self, session: PortfolioSession):
        """Initialize account service.

        Args:
            session: Portfolio session owning the current state
        """
        self.session = session

    def create_account(
        self,
        bank_name: str,
        initial_capital: Decimal,
        currency: Currency = Currency.TRY,
        investment_type: InvestmentType = InvestmentType.PARTICIPATION,
        risk_level: RiskLevel = RiskLevel.LOW,
        start_date: Optional[date] = None,
        maturity_period: int = 12,
    ) -> str:
        """Create a new account.

        Args:
            bank_name: Bank holding the account
            initial_capital: Opening capital, anchors the profit chain
            currency: Account currency
            investment_type: Kind of investment
            risk_level: Advisory risk profile
            start_date: Opening date (defaults to today)
            maturity_period: Maturity in months

        Returns:
            Account ID

        Raises:
            ValidationError: If bank name is empty or capital/maturity is negative
        """
        if not bank_name or not bank_name.strip():
            raise ValidationError("Please enter a bank name")
        if initial_capital < ZERO:
            raise ValidationError(negative_amount("Initial capital", initial_capital))
        if maturity_period < 0:
            raise ValidationError("Maturity period cannot be negative")

        account = AccountEntity(
            id=generate_id(),
            bank_name=bank_name.strip(),
            currency=currency,
            investment_type=investment_type,
            start_date=start_date or date.today(),
            maturity_period=maturity_period,
            risk_level=risk_level,
            initial_capital=initial_capital,
            current_balance=initial_capital,
        )
        self.session.dispatch(AddAccount(account))
        return account.id

    def get_account(self, account_id: str) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.session.state.get_account(account_id)

    def require_account(self, account_id: str) -> AccountEntity:
        """Get account by ID or raise NotFoundError."""
        account = self.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts in creation order."""
        return list(self.session.state.accounts)

    def find_accounts_by_bank(self, bank_name: str) -> list[AccountEntity]:
        """List accounts whose bank name matches, ignoring case."""
        wanted = bank_name.strip().lower()
        return [acc for acc in self.session.state.accounts if acc.bank_name.lower() == wanted]

    def delete_account(self, account_id: str) -> int:
        """Delete an account together with all of its transactions.

        Args:
            account_id: Account ID to delete

        Returns:
            Number of transactions deleted with the account

        Raises:
            NotFoundError: If account not found
        """
        self.require_account(account_id)
        removed = len(self.get_account_chain(account_id))
        self.session.dispatch(DeleteAccount(account_id))
        return removed

    def get_account_chain(self, account_id: str) -> list[TransactionEntity]:
        """Return the account's transactions in date order."""
        return sort_chain(
            txn for txn in self.session.state.transactions if txn.account_id == account_id
        )

    def get_account_performance(self, account_id: str) -> AccountPerformance:
        """Compute total profit and ROI of an account.

        ROI is total profit as a percentage of initial capital, or 0 when the
        account has no positive capital.

        Raises:
            NotFoundError: If account not found
        """
        account = self.require_account(account_id)
        total_profit = sum(
            (txn.calculated_profit for txn in self.get_account_chain(account_id)), ZERO
        )
        if account.initial_capital > ZERO:
            roi = total_profit / account.initial_capital * HUNDRED
        else:
            roi = ZERO
        return AccountPerformance(account=account, total_profit=total_profit, roi=roi)
