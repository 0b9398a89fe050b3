"""Display formatting for currency amounts and dates."""

import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_CENTS = Decimal("0.01")


def format_currency(amount: Any) -> str:
    """
    Format an amount as US dollars.

    Args:
        amount: Signed int, float or Decimal

    Returns:
        String such as "$1,234.56" or "-$100.00"; "$0.00" for non-numeric
        or non-finite input
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        logger.warning("Invalid amount for currency formatting", amount=repr(amount))
        return "$0.00"

    if isinstance(amount, float) and not math.isfinite(amount):
        logger.warning("Invalid amount for currency formatting", amount=repr(amount))
        return "$0.00"

    if isinstance(amount, Decimal) and not amount.is_finite():
        logger.warning("Invalid amount for currency formatting", amount=repr(amount))
        return "$0.00"

    # Decimal(float) is exact, so half-up rounding acts on the true binary value
    value = Decimal(amount)

    with localcontext() as ctx:
        # Room for every integer digit plus cents and a rounding carry
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        rounded = value.quantize(_CENTS, rounding=ROUND_HALF_UP)

        if rounded.is_zero():
            return "$0.00"

        sign = "-" if rounded < 0 else ""
        return f"{sign}${abs(rounded):,.2f}"


def _parse_date(date_string: str) -> datetime:
    text = date_string.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_date(date_string: Any) -> str:
    """
    Format an ISO-8601 date or date-time as "Jan 15, 2024".

    The calendar date is rendered as written, without timezone conversion.
    Input that cannot be parsed is returned unchanged.
    """
    if not isinstance(date_string, str):
        logger.warning("Invalid date string", value=repr(date_string))
        return date_string

    try:
        parsed = _parse_date(date_string)
    except ValueError:
        logger.warning("Invalid date string", value=date_string)
        return date_string

    month = MONTH_ABBREVIATIONS[parsed.month - 1]
    return f"{month} {parsed.day}, {parsed.year}"
