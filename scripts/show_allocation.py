#!/usr/bin/env python3
"""Print how an income would be divided across a saved budget."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from simple_budgets.formatting import format_currency
from simple_budgets.planner import allocate_result, open_budget_file
from simple_budgets.reporting import render_allocation, render_preview


def main(path: Path, income: float) -> None:
    budget = open_budget_file(path)

    print(f"Budget parts in {path}:")
    print(render_preview(budget))

    result = allocate_result(budget, income)
    print(f"\nDivided income of {format_currency(income)}:")
    print(render_allocation(result))


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Show the allocation of an income over a budget file.')
    parser.add_argument('path', type=Path, help='Budget file to read')
    parser.add_argument('--income', type=float, required=True, help='Monthly income to divide')
    args = parser.parse_args()
    main(args.path, args.income)
