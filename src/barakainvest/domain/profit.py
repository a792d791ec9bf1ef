"""Profit classifier for profit-sharing balance statements.

Profit is whatever the balance moved by that was not caused by the account
holder::

    profit = (current - previous) - (deposit - withdrawal)
    profit % = profit / base * 100

The base is the previous balance. Accounts that start at zero (or below) have
no meaningful previous balance, so the deposit stands in for it, and 1 is used
when there is neither. The percentage is a convention in that last case, not a
true rate.
"""

from decimal import Decimal
from typing import Union

from barakainvest.domain.entities import ProfitStats, TransactionType

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")


def to_decimal(value: Number) -> Decimal:
    """Convert a numeric value to Decimal via its string form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def profit_base(previous_balance: Number, user_deposit: Number = 0) -> Decimal:
    """Return the denominator used for the profit percentage."""
    previous_balance = to_decimal(previous_balance)
    user_deposit = to_decimal(user_deposit)
    if previous_balance > ZERO:
        return previous_balance
    if user_deposit > ZERO:
        return user_deposit
    return ONE


def classify_type(
    profit_amount: Decimal, user_deposit: Decimal, withdrawal: Decimal
) -> TransactionType:
    """Tag a statement. Any withdrawal wins over deposits and profit."""
    if withdrawal > ZERO:
        return TransactionType.WITHDRAWAL
    if user_deposit > ZERO and profit_amount > ZERO:
        return TransactionType.MIXED
    if user_deposit > ZERO:
        return TransactionType.USER_DEPOSIT
    return TransactionType.BANK_PROFIT


def classify(
    previous_balance: Number,
    current_balance: Number,
    user_deposit: Number = 0,
    withdrawal: Number = 0,
) -> ProfitStats:
    """Compute profit amount, profit percentage and type of a statement.

    Args:
        previous_balance: Balance before this statement
        current_balance: Statement balance
        user_deposit: Money added by the account holder
        withdrawal: Money taken out by the account holder

    Returns:
        ProfitStats for the statement. Inputs are not range-checked and the
        function never raises for well-typed numbers.
    """
    previous_balance = to_decimal(previous_balance)
    current_balance = to_decimal(current_balance)
    user_deposit = to_decimal(user_deposit)
    withdrawal = to_decimal(withdrawal)

    diff = current_balance - previous_balance
    net_external_flow = user_deposit - withdrawal
    profit_amount = diff - net_external_flow

    base = profit_base(previous_balance, user_deposit)
    profit_percentage = (profit_amount / base) * HUNDRED

    return ProfitStats(
        profit_amount=profit_amount,
        profit_percentage=profit_percentage,
        type=classify_type(profit_amount, user_deposit, withdrawal),
    )
