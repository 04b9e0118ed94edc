"""Amount parsing utilities."""

import math
import re

_CURRENCY_PATTERN = re.compile(r"(?i)ksh\.?|kes|[$€£¥]")


def parse_amount(amount_str: str) -> float:
    """Parse an amount string into a signed float.

    Handles various formats:
    - "123.45"
    - "-123.45"
    - "Ksh 1,234.56"
    - "KES -50"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Float amount, sign preserved

    Raises:
        ValueError: If amount string cannot be parsed or is not finite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency markers
    amount_str = _CURRENCY_PATTERN.sub("", amount_str)

    # Remove commas and inner spaces
    amount_str = amount_str.replace(",", "").replace(" ", "")

    try:
        amount = float(amount_str)
    except ValueError as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not math.isfinite(amount):
        raise ValueError(f"Amount '{amount_str}' is not a finite number")

    return -amount if is_negative else amount
