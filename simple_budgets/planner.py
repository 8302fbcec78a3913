"""Operations offered to the command shell and the dashboard.

These functions are the whole surface the front ends use: creating,
loading and saving a budget, appending parts, and producing the preview
and allocation rows they render.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from .allocation import AllocationResult
from .codec import decode_budget, encode_budget
from .models import Budget, BudgetPart
from .storage import BudgetFileStorage


def new_budget() -> Budget:
    return Budget()


def load_budget(text: str) -> Budget:
    """Decode persisted budget text.

    Raises:
        DecodeError: If the text is not a valid budget
    """
    return decode_budget(text)


def save_budget(budget: Budget) -> str:
    return encode_budget(budget)


def insert(budget: Budget, name: str, monthly_value: float, expandable: bool) -> BudgetPart:
    """Append a new part to ``budget`` and return it."""
    part = BudgetPart(name, monthly_value, expandable)
    budget.push_part(part)
    return part


def preview(budget: Budget) -> List[Tuple[str, float, bool]]:
    return budget.preview()


def allocate(budget: Budget, income: float) -> List[Tuple[str, float]]:
    """Return ``(name, amount)`` rows for ``income``, ending with the leftover row."""
    return budget.allocate(income).rows()


def allocate_result(budget: Budget, income: float) -> AllocationResult:
    return budget.allocate(income)


def open_budget_file(path: Union[str, Path]) -> Budget:
    return BudgetFileStorage(path).load()


def write_budget_file(path: Union[str, Path], budget: Budget) -> None:
    BudgetFileStorage(path).save(budget)
