"""Mapper functions to convert between domain models and SQLAlchemy models.

Enum-valued fields are stored by value and resolved through the domain's
default policies on the way back, so a row written by an older version with
an unknown value still loads.
"""

from decimal import Decimal

from barakainvest.domain import entities as domain
from barakainvest.domain.resolvers import (
    resolve_currency,
    resolve_investment_type,
    resolve_risk_level,
    resolve_transaction_type,
)
from barakainvest.database.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
)


def _decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        bank_name=orm_account.bank_name,
        currency=resolve_currency(orm_account.currency),
        investment_type=resolve_investment_type(orm_account.investment_type),
        start_date=orm_account.start_date,
        maturity_period=orm_account.maturity_period or 0,
        risk_level=resolve_risk_level(orm_account.risk_level),
        initial_capital=_decimal(orm_account.initial_capital),
        current_balance=_decimal(orm_account.current_balance),
    )


def account_to_orm(account: domain.Account, position: int) -> ORMAccount:
    """Convert domain Account entity to a new SQLAlchemy Account model."""
    return ORMAccount(
        id=account.id,
        position=position,
        bank_name=account.bank_name,
        currency=account.currency.value,
        investment_type=account.investment_type.value,
        start_date=account.start_date,
        maturity_period=account.maturity_period,
        risk_level=account.risk_level.value,
        initial_capital=account.initial_capital,
        current_balance=account.current_balance,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        date=orm_transaction.date,
        previous_balance=_decimal(orm_transaction.previous_balance),
        current_balance=_decimal(orm_transaction.current_balance),
        user_deposit=_decimal(orm_transaction.user_deposit),
        withdrawal=_decimal(orm_transaction.withdrawal),
        calculated_profit=_decimal(orm_transaction.calculated_profit),
        profit_percentage=_decimal(orm_transaction.profit_percentage),
        type=resolve_transaction_type(orm_transaction.type),
    )


def transaction_to_orm(transaction: domain.Transaction, position: int) -> ORMTransaction:
    """Convert domain Transaction entity to a new SQLAlchemy Transaction model."""
    return ORMTransaction(
        id=transaction.id,
        position=position,
        account_id=transaction.account_id,
        date=transaction.date,
        previous_balance=transaction.previous_balance,
        current_balance=transaction.current_balance,
        user_deposit=transaction.user_deposit,
        withdrawal=transaction.withdrawal,
        calculated_profit=transaction.calculated_profit,
        profit_percentage=transaction.profit_percentage,
        type=transaction.type.value,
    )
