"""Utility functions for pesatrack."""

from pesatrack.utils.date_parser import parse_date, parse_timestamp, get_date_range
from pesatrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_timestamp", "get_date_range", "parse_amount"]
