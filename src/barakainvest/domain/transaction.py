"""Transaction domain service."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from barakainvest.domain.entities import (
    ProfitStats,
    Transaction as TransactionEntity,
)
from barakainvest.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    negative_amount,
    transaction_not_found,
)
from barakainvest.domain.profit import ZERO, classify
from barakainvest.domain.session import PortfolioSession
from barakainvest.domain.state import DeleteTransaction, SaveTransaction
from barakainvest.utils.ids import generate_id


def _validate_flows(user_deposit: Decimal, withdrawal: Decimal) -> None:
    if user_deposit < ZERO:
        raise ValidationError(negative_amount("Deposit", user_deposit))
    if withdrawal < ZERO:
        raise ValidationError(negative_amount("Withdrawal", withdrawal))


class TransactionService:
    """Service for recording balance statements.

    Every create, edit or delete re-heals the affected account's whole chain
    through the session, so derived fields are never set here.
    """

    def __init__(self, session: PortfolioSession):
        """Initialize transaction service.

        Args:
            session: Portfolio session owning the current state
        """
        self.session = session

    def _require_account(self, account_id: str) -> None:
        if self.session.state.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

    def record_transaction(
        self,
        account_id: str,
        date: date,
        current_balance: Decimal,
        user_deposit: Decimal = ZERO,
        withdrawal: Decimal = ZERO,
    ) -> str:
        """Record a balance statement.

        Args:
            account_id: Account ID
            date: Statement date
            current_balance: Balance shown on the statement
            user_deposit: Money added by the account holder since the last statement
            withdrawal: Money taken out since the last statement

        Returns:
            Transaction ID

        Raises:
            NotFoundError: If account doesn't exist
            ValidationError: If deposit or withdrawal is negative
        """
        self._require_account(account_id)
        _validate_flows(user_deposit, withdrawal)

        transaction = TransactionEntity(
            id=generate_id(),
            account_id=account_id,
            date=date,
            current_balance=current_balance,
            user_deposit=user_deposit,
            withdrawal=withdrawal,
        )
        self.session.dispatch(SaveTransaction(transaction))
        return transaction.id

    def get_transaction(self, transaction_id: str) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.session.state.get_transaction(transaction_id)

    def update_transaction(
        self,
        transaction_id: str,
        date: Optional[date] = None,
        current_balance: Optional[Decimal] = None,
        user_deposit: Optional[Decimal] = None,
        withdrawal: Optional[Decimal] = None,
    ) -> None:
        """Update the input fields of a statement.

        Only provided fields change. Derived fields of this and every later
        statement of the account are recomputed.

        Raises:
            NotFoundError: If transaction doesn't exist
            ValidationError: If deposit or withdrawal is negative
        """
        txn = self.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        changes = {}
        if date is not None:
            changes["date"] = date
        if current_balance is not None:
            changes["current_balance"] = current_balance
        if user_deposit is not None:
            changes["user_deposit"] = user_deposit
        if withdrawal is not None:
            changes["withdrawal"] = withdrawal

        updated = replace(txn, **changes)
        _validate_flows(updated.user_deposit, updated.withdrawal)
        self.session.dispatch(SaveTransaction(updated))

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a statement and re-heal its account.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        if self.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.session.dispatch(DeleteTransaction(transaction_id))

    def list_transactions(
        self,
        account_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionEntity]:
        """List statements, newest first.

        Args:
            account_id: Optional account ID filter
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
        """
        transactions = [
            txn
            for txn in self.session.state.transactions
            if (account_id is None or txn.account_id == account_id)
            and (start_date is None or txn.date >= start_date)
            and (end_date is None or txn.date <= end_date)
        ]
        return sorted(transactions, key=lambda txn: txn.date, reverse=True)

    def preview_profit(
        self,
        account_id: str,
        current_balance: Decimal,
        user_deposit: Decimal = ZERO,
        withdrawal: Decimal = ZERO,
    ) -> ProfitStats:
        """Classify a prospective statement against the account's current balance.

        Raises:
            NotFoundError: If account doesn't exist
        """
        account = self.session.state.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return classify(account.current_balance, current_balance, user_deposit, withdrawal)
