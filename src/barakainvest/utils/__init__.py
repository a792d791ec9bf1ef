"""Utility functions for barakainvest."""

from barakainvest.utils.date_parser import parse_date
from barakainvest.utils.amount_parser import parse_amount
from barakainvest.utils.ids import generate_id

__all__ = ["parse_date", "parse_amount", "generate_id"]
