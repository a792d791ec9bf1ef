"""Default policies for raw values arriving at the domain boundary.

Unknown or malformed values never reject a record; they resolve to a fixed
default instead. Each policy is a named function so it can be tested directly.
"""

import re
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, TypeVar

from barakainvest.domain.entities import (
    Currency,
    InvestmentType,
    RiskLevel,
    TransactionType,
)
from barakainvest.utils.amount_parser import parse_amount
from barakainvest.utils.date_parser import parse_date

E = TypeVar("E", bound=Enum)

DEFAULT_CURRENCY = Currency.TRY
DEFAULT_INVESTMENT_TYPE = InvestmentType.PARTICIPATION
DEFAULT_RISK_LEVEL = RiskLevel.LOW
DEFAULT_TRANSACTION_TYPE = TransactionType.BANK_PROFIT
MATURITY_MONTHS = re.compile(r"^(\d{1,4})(?:\.0*)?$")


def _resolve_enum(enum_cls: type[E], raw: Optional[str], default: E) -> E:
    """Match ``raw`` against member values and names, ignoring case."""
    if raw is None:
        return default
    if isinstance(raw, enum_cls):
        return raw
    key = str(raw).strip().upper()
    if not key:
        return default
    for member in enum_cls:
        if key == str(member.value).upper() or key == member.name:
            return member
    return default


def resolve_currency(raw: Optional[str]) -> Currency:
    """Resolve a currency code, defaulting to TRY."""
    return _resolve_enum(Currency, raw, DEFAULT_CURRENCY)


def resolve_investment_type(raw: Optional[str]) -> InvestmentType:
    """Resolve an investment type, defaulting to a participation account."""
    return _resolve_enum(InvestmentType, raw, DEFAULT_INVESTMENT_TYPE)


def resolve_risk_level(raw: Optional[str]) -> RiskLevel:
    """Resolve a risk level, defaulting to Low."""
    return _resolve_enum(RiskLevel, raw, DEFAULT_RISK_LEVEL)


def resolve_transaction_type(raw: Optional[str]) -> TransactionType:
    """Resolve a transaction type tag, defaulting to BANK_PROFIT."""
    return _resolve_enum(TransactionType, raw, DEFAULT_TRANSACTION_TYPE)


def resolve_number(raw: Optional[str], default: Decimal = Decimal("0")) -> Decimal:
    """Parse a number, returning ``default`` for empty or malformed input."""
    if raw is None or not str(raw).strip():
        return default
    try:
        value = parse_amount(str(raw))
    except ValueError:
        return default
    if not value.is_finite():
        return default
    return value


def resolve_maturity(raw: Optional[str], default: int = 0) -> int:
    """Parse a maturity in whole months (at most four digits), else ``default``."""
    match = MATURITY_MONTHS.match(str(raw).strip()) if raw is not None else None
    return int(match.group(1)) if match else default


def resolve_date(raw: Optional[str], default: Optional[date] = None) -> date:
    """Parse a date, returning ``default`` (today if not given) on failure."""
    fallback = default if default is not None else date.today()
    if raw is None or not str(raw).strip():
        return fallback
    try:
        return parse_date(str(raw))
    except ValueError:
        return fallback
