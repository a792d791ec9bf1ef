"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

CURRENCY_SYMBOLS = re.compile(r"[$€£¥₺]")
CURRENCY_CODES = re.compile(r"\s*(TRY|TL|USD)$", re.IGNORECASE)
DECIMAL_COMMA = re.compile(r"^-?\d+,\d{1,2}$")


def _normalize_separators(amount_str: str) -> str:
    """Return the amount with '.' as the only decimal separator.

    Turkish statements write 1.234,56 where English ones write 1,234.56.
    Whichever separator comes last is the decimal point. A lone comma
    followed by one or two digits ("12,5", "12,50") is also a decimal
    comma; "25,000" stays a thousands separator.
    """
    if "," in amount_str and "." in amount_str:
        if amount_str.rfind(",") > amount_str.rfind("."):
            return amount_str.replace(".", "").replace(",", ".")
        return amount_str.replace(",", "")
    if DECIMAL_COMMA.match(amount_str):
        return amount_str.replace(",", ".")
    return amount_str.replace(",", "")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "1250.50" and "1,250.50"
    - "1.250,50" (Turkish grouping)
    - "₺1250", "1250 TL", "1250 TRY", "$40", "40 USD"
    - "(123.45)" (negative in parentheses)

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()
    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]

    text = CURRENCY_CODES.sub("", CURRENCY_SYMBOLS.sub("", text)).strip()
    text = _normalize_separators(text.replace(" ", ""))

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'") from None
    return -amount if negative else amount
