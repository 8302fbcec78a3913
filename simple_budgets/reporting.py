"""Tabular views of a budget and of an allocation.

The ``*_frame`` functions return numeric DataFrames for further use (the
dashboard displays them directly). The ``render_*`` functions return the
plain-text tables printed by the shell.
"""

from __future__ import annotations

import pandas as pd

from .allocation import AllocationResult
from .config import LEFTOVER_LABEL
from .formatting import format_currency
from .models import Budget

PREVIEW_COLUMNS = ['Name', 'Monthly Value', 'Expandable']
ALLOCATION_COLUMNS = ['Name', 'Section', 'Monthly Value', 'Divided Value']


def preview_frame(budget: Budget) -> pd.DataFrame:
    """Return one row per part: fixed parts first, then expandable parts."""
    return pd.DataFrame(budget.preview(), columns=PREVIEW_COLUMNS)


def allocation_frame(result: AllocationResult) -> pd.DataFrame:
    """Return one row per allocated part followed by the leftover row.

    ``Monthly Value`` is empty (NaN) on the leftover row.
    """
    rows = [
        {
            'Name': line.name,
            'Section': 'Expandable' if line.expandable else 'Fixed',
            'Monthly Value': line.nominal,
            'Divided Value': line.allocated,
        }
        for line in result.lines()
    ]
    rows.append({
        'Name': LEFTOVER_LABEL,
        'Section': 'Leftover',
        'Monthly Value': float('nan'),
        'Divided Value': result.leftover,
    })
    return pd.DataFrame(rows, columns=ALLOCATION_COLUMNS)


def render_preview(budget: Budget) -> str:
    if budget.is_empty():
        return "The budget has no parts yet."
    df = preview_frame(budget)
    df['Monthly Value'] = df['Monthly Value'].map(format_currency)
    df['Expandable'] = df['Expandable'].map(lambda flag: 'true' if flag else 'false')
    return df.to_string(index=False)


def render_allocation(result: AllocationResult) -> str:
    df = allocation_frame(result)[['Name', 'Divided Value']].copy()
    df['Divided Value'] = df['Divided Value'].map(format_currency)
    return df.to_string(index=False)
