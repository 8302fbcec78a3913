#!/usr/bin/env python3
"""Lightweight validator for saved budget files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from simple_budgets.exceptions import DecodeError
from simple_budgets.storage import BudgetFileStorage


def validate_budget_file(path: Path) -> Optional[str]:
    """Return an error description for ``path``, or None when it decodes."""
    storage = BudgetFileStorage(path)
    if not storage.exists():
        return "file does not exist"
    try:
        storage.load()
    except (DecodeError, OSError) as exc:
        return str(exc)
    return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Check that budget files can be loaded.')
    parser.add_argument('paths', nargs='+', type=Path, help='Budget files to check')
    args = parser.parse_args(argv)

    issues = []
    for path in args.paths:
        error = validate_budget_file(path)
        if error:
            issues.append((path, error))

    if issues:
        print("Budget validation failed:")
        for path, message in issues:
            print(f"  - {path}: {message}")
        return 1

    print("All budget files validated successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
