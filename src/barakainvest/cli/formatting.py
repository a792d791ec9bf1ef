"""Display helpers shared by commands."""

from decimal import Decimal

from barakainvest.domain.entities import Currency


def format_money(amount: Decimal, currency: Currency | str) -> str:
    """Format an amount with thousands separators and its currency code."""
    code = currency.value if isinstance(currency, Currency) else (currency or "TRY")
    return f"{amount or 0:,.2f} {code}"


def format_percent(value: Decimal) -> str:
    """Format a percentage with sign and two decimals."""
    return f"{value:+.2f}%"


def trend_marker(value: Decimal) -> str:
    """Arrow showing whether a profit figure went up or down."""
    if value > 0:
        return "▲"
    if value < 0:
        return "▼"
    return " "
