#!/usr/bin/env python3
"""Direct launcher for the Simple Budgets dashboard.

This script launches Streamlit on ``simple_budgets/dashboard.py`` from the
project root so the package is importable from the page.
"""

import subprocess
import sys
from pathlib import Path

# Get the project root and the dashboard page
project_root = Path(__file__).parent.resolve()
dashboard_page = project_root / "simple_budgets" / "dashboard.py"

if __name__ == "__main__":
    # Forward any extra arguments (e.g. --server.port) to Streamlit
    raise SystemExit(subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(dashboard_page),
        *sys.argv[1:],
    ], cwd=project_root).returncode)
