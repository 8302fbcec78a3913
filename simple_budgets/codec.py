"""Text encoding for budgets.

A part is written as::

    <len(name)>?<name><monthly value>?<true|false>

The name is length-prefixed, so it may contain any character,
including the delimiters. Each part is followed by a tab. The fixed
parts come first, then a single newline, then the expandable parts::

    6?Rent 1200?false\t5?Power80?false\t
    4?Fun 50?true\t

Monthly values are plain positional decimals (``1200``, ``12.5``); no
exponent is ever written.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .exceptions import DecodeError, ValidationError
from .logging_config import get_logger
from .models import Budget, BudgetPart

logger = get_logger("codec")

FIELD_DELIMITER = '?'
RECORD_SEPARATOR = '\t'
SECTION_SEPARATOR = '\n'

_DIGITS = frozenset('0123456789')
_VALUE_CHARS = _DIGITS | {'.'}
_BOOL_LITERALS = {'true': True, 'false': False}


def format_value(value: float) -> str:
    """Format ``value`` as the shortest positional decimal that reads back exactly."""
    return np.format_float_positional(float(value), trim='-')


def encode_part(part: BudgetPart) -> str:
    return (
        f"{len(part.name)}{FIELD_DELIMITER}{part.name}"
        f"{format_value(part.monthly_value)}{FIELD_DELIMITER}"
        f"{'true' if part.expandable else 'false'}"
    )


def encode_budget(budget: Budget) -> str:
    fixed = ''.join(encode_part(part) + RECORD_SEPARATOR for part in budget.fixed_parts)
    expandable = ''.join(encode_part(part) + RECORD_SEPARATOR for part in budget.expandable_parts)
    return fixed + SECTION_SEPARATOR + expandable


def _read_part(text: str, pos: int) -> Tuple[BudgetPart, int]:
    """Read one part starting at ``pos``; stop before the record separator."""
    start = pos
    end = len(text)

    digits_end = pos
    while digits_end < end and text[digits_end] in _DIGITS:
        digits_end += 1
    if digits_end == pos:
        raise DecodeError("expected a name length", pos)
    if digits_end >= end:
        raise DecodeError("missing delimiter after name length", digits_end)
    length = int(text[pos:digits_end])
    pos = digits_end + 1

    if pos + length > end:
        raise DecodeError(
            f"name is {length} characters but only {end - pos} remain", pos
        )
    name = text[pos:pos + length]
    pos += length

    value_start = pos
    while pos < end and text[pos] in _VALUE_CHARS:
        pos += 1
    value_text = text[value_start:pos]
    try:
        monthly_value = float(value_text)
    except ValueError:
        raise DecodeError(f"invalid monthly value {value_text!r}", value_start) from None
    # The character ending the value is a delimiter and is discarded.
    pos += 1

    flag_start = min(pos, end)
    flag_end = text.find(RECORD_SEPARATOR, flag_start)
    if flag_end == -1:
        flag_end = end
    flag_text = text[flag_start:flag_end]
    if flag_text not in _BOOL_LITERALS:
        raise DecodeError(f"invalid expandable flag {flag_text!r}", flag_start)

    try:
        part = BudgetPart(name, monthly_value, _BOOL_LITERALS[flag_text])
    except ValidationError as exc:
        raise DecodeError(str(exc), start) from exc
    return part, flag_end


def decode_part(text: str) -> BudgetPart:
    """Decode a single part encoding (without its trailing separator)."""
    part, pos = _read_part(text, 0)
    if pos != len(text):
        raise DecodeError("unexpected characters after part", pos)
    return part


def _read_section(text: str, pos: int, stop_at_section_end: bool) -> Tuple[List[BudgetPart], int]:
    parts: List[BudgetPart] = []
    end = len(text)
    while pos < end:
        if stop_at_section_end and text[pos] == SECTION_SEPARATOR:
            return parts, pos + 1
        part, pos = _read_part(text, pos)
        if pos >= end:
            raise DecodeError(f"part {part.name!r} is not terminated by a tab", pos)
        parts.append(part)
        pos += 1
    return parts, pos


def decode_budget(text: str) -> Budget:
    """Decode text produced by :func:`encode_budget`.

    Raises:
        DecodeError: If any part is malformed, or a part's expandable flag
            contradicts the section it was found in.
    """
    fixed, pos = _read_section(text, 0, stop_at_section_end=True)
    expandable, _ = _read_section(text, pos, stop_at_section_end=False)

    for part in fixed:
        if part.expandable:
            raise DecodeError(f"expandable part {part.name!r} found among fixed parts", 0)
    for part in expandable:
        if not part.expandable:
            raise DecodeError(f"fixed part {part.name!r} found among expandable parts", pos)

    logger.debug("decoded %d fixed and %d expandable parts", len(fixed), len(expandable))
    return Budget(fixed, expandable)
