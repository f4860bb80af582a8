"""Display formatting for typed field values"""

import math
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Union

from artist_contracts.models.template import FieldType

CURRENCY_SYMBOL = "£"

# Fixed English month names; strftime("%B") follows the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

Number = Union[int, float, Decimal]

# Optional sign, ASCII digits, optional fraction; thousands commas are stripped first
NUMERIC_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)


def format_date(value: date) -> str:
    """Format a date as '15 January 2025'"""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


def format_currency(amount: Number) -> str:
    """Format a number as GBP with grouping and two decimals, e.g. £1,500,000.00"""
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def format_number(value: Number) -> str:
    """Plain numeric string without grouping; integral floats drop the '.0'"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_date(value: Any) -> Optional[date]:
    """Return a date for date objects and ISO-8601 strings, else None"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def parse_number(value: Any) -> Optional[Number]:
    """Return a number for numeric values and numeric strings, else None"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, Decimal)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    text = value.strip().replace(",", "")
    if not NUMERIC_PATTERN.fullmatch(text):
        return None
    if "." in text:
        return Decimal(text)
    return int(text)


def format_value(value: Any, field_type: Optional[FieldType] = None) -> str:
    """Convert a field value to its contract display string.

    The declared field type decides the format: ``currency`` fields get
    symbol, grouping and two decimals, ``date`` fields the long date form.
    Untyped values are formatted by their Python type. Strings that cannot
    be read as the declared type are returned unchanged.
    """
    if field_type == FieldType.DATE:
        parsed = parse_date(value)
        if parsed is not None:
            return format_date(parsed)
    elif field_type in (FieldType.CURRENCY, FieldType.NUMBER):
        number = parse_number(value)
        if number is not None:
            if field_type == FieldType.CURRENCY:
                return format_currency(number)
            return format_number(number)

    if isinstance(value, (date, datetime)):
        return format_date(value)
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)
