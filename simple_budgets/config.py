"""Configuration management for the budget planner.

This module centralizes all configuration values including paths,
defaults, and environment variable overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in simple_budgets/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directory
DATA_DIR = Path(os.getenv("SIMPLE_BUDGETS_DATA_DIR", _PROJECT_ROOT / "data"))

# Budget file opened by the dashboard when none is chosen
DEFAULT_BUDGET_PATH = Path(
    os.getenv("SIMPLE_BUDGETS_FILE", DATA_DIR / "budget.txt")
).resolve()

LOG_LEVEL = os.getenv("SIMPLE_BUDGETS_LOG_LEVEL", "WARNING")

# Values entered through ``insert`` are annual figures
MONTHS_PER_YEAR = 12

LEFTOVER_LABEL = "Leftover Money"


def ensure_data_directories() -> None:
    """Create the data directory if it doesn't exist."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def get_default_budget_path() -> str:
    """Get the default budget file path as a string."""
    return str(DEFAULT_BUDGET_PATH)
