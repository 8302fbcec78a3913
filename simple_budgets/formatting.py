"""Parsing of operator input and formatting of amounts for display."""

from __future__ import annotations

import math
import re
from typing import Union

from .config import MONTHS_PER_YEAR
from .exceptions import ValidationError

# Plain decimals only: no digit separators, no surrounding whitespace
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(text: str, field: str = 'value', allow_negative: bool = False) -> float:
    """Parse a decimal amount typed by the operator.

    Args:
        text: The raw text, e.g. ``"1200"`` or ``"12.50"``
        field: Name of the argument, used in error reports
        allow_negative: Whether values below zero are accepted

    Returns:
        The parsed amount

    Raises:
        ValidationError: If the text is not a finite number, or is negative
            when ``allow_negative`` is False

    Example:
        >>> parse_amount("1200")
        1200.0
    """
    if not isinstance(text, str) or not _DECIMAL_PATTERN.fullmatch(text):
        raise ValidationError(field, text, "The provided value is not a valid number.")
    try:
        value = float(text)
    except ValueError:
        raise ValidationError(field, text, "The provided value is not a valid number.") from None
    if not math.isfinite(value):
        raise ValidationError(field, text, "The provided value is not a valid number.")
    if value < 0 and not allow_negative:
        raise ValidationError(field, text, "The provided value cannot be negative.")
    return value


def parse_bool(text: str, field: str = 'expandable') -> bool:
    """Parse the literal ``true`` or ``false``.

    Raises:
        ValidationError: For anything else, including other capitalisations
    """
    if text == 'true':
        return True
    if text == 'false':
        return False
    raise ValidationError(field, text, "The provided value is not a boolean value.")


def annual_to_monthly(value: float) -> float:
    return value / MONTHS_PER_YEAR


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a currency amount with proper formatting.

    Example:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(1234.56, include_sign=False)
        '1,234.56'
    """
    formatted = f"{amount:,.2f}"
    return f"${formatted}" if include_sign else formatted
