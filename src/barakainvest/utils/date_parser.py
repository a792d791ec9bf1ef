"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def _period_start(period: str, today: date, offset: int) -> date:
    """First day of the month/year/week ``offset`` periods away from today."""
    if period == "month":
        return (today + relativedelta(months=offset)).replace(day=1)
    if period == "year":
        return today.replace(month=1, day=1) + relativedelta(years=offset)
    if period == "week":
        return today - timedelta(days=today.weekday()) + timedelta(weeks=offset)
    raise ValueError(f"Unknown period '{period}'")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024", ...) and the
    relative forms "today", "yesterday", "tomorrow" and "last/this/next"
    followed by "week", "month" or "year" (resolving to the first day of that
    period).

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    offsets = {"last": -1, "this": 0, "next": 1}
    words = date_str.split()
    if len(words) == 2 and words[0] in offsets:
        return _period_start(words[1], today, offsets[words[0]])

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named statement period.

    Args:
        period: One of this-month, this-year, this-week, last-month,
            last-year, last-week

    Returns:
        Tuple of (start_date, end_date). "this-*" periods end today.

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    try:
        which, unit = period.split("-")
    except ValueError:
        which, unit = period, ""

    if which == "this" and unit in ("week", "month", "year"):
        return (_period_start(unit, today, 0), today)
    if which == "last" and unit in ("week", "month", "year"):
        start_date = _period_start(unit, today, -1)
        end_date = _period_start(unit, today, 0) - timedelta(days=1)
        return (start_date, end_date)

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: this-month, this-year, "
        "this-week, last-month, last-year, last-week"
    )
