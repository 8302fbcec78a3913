"""Typed exceptions for the budget planner.

Every error carries a ``code`` class attribute so callers can branch on
the type (or the code) rather than on message wording.

    BudgetError (base)
    |
    +-- DecodeError       persisted text could not be turned into a Budget
    +-- ValidationError   caller-supplied value rejected before use
"""

from __future__ import annotations

from typing import Any


class BudgetError(Exception):
    """Base class for all budget planner errors."""

    code: str = "BUDGET_ERROR"


class DecodeError(BudgetError):
    """Raised when budget text is malformed.

    Decoding is all-or-nothing: when this is raised no partial Budget
    has been produced.
    """

    code: str = "DECODE_ERROR"

    def __init__(self, reason: str, position: int = 0):
        self.reason = reason
        self.position = position
        super().__init__(f"Failed to parse budget at offset {position}: {reason}")


class ValidationError(BudgetError, ValueError):
    """Raised when a name, amount or flag supplied by the operator is invalid."""

    code: str = "VALIDATION_ERROR"

    def __init__(self, field: str, value: Any, message: str):
        self.field = field
        self.value = value
        super().__init__(message)
