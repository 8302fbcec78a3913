"""Streamlit page for viewing and extending a budget file.

Launch with ``python run_dashboard.py`` or::

    streamlit run simple_budgets/dashboard.py

The budget being edited lives in ``st.session_state`` and is only
written back to disk when the save button is pressed.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import streamlit as st

# Add project root to path for imports
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from simple_budgets.config import ensure_data_directories, get_default_budget_path
from simple_budgets.exceptions import DecodeError, ValidationError
from simple_budgets.formatting import annual_to_monthly, format_currency
from simple_budgets.planner import allocate_result, insert, new_budget
from simple_budgets.reporting import allocation_frame, preview_frame
from simple_budgets.storage import BudgetFileStorage
from simple_budgets.visualization import create_allocation_chart

BUDGET_KEY = 'budget'
PATH_KEY = 'budget_path'


def _load_budget_state(path: str) -> Optional[str]:
    """Load ``path`` into session state. Returns an error message on failure.

    A path that does not exist yet starts a new, empty budget.
    """
    storage = BudgetFileStorage(path)
    if storage.exists():
        try:
            budget = storage.load()
        except (DecodeError, OSError) as exc:
            return str(exc)
    else:
        budget = new_budget()
    st.session_state[BUDGET_KEY] = budget
    st.session_state[PATH_KEY] = path
    return None


def _ensure_budget_state(path: str) -> Optional[str]:
    if st.session_state.get(PATH_KEY) != path or BUDGET_KEY not in st.session_state:
        return _load_budget_state(path)
    return None


def _save_budget_state() -> None:
    BudgetFileStorage(st.session_state[PATH_KEY]).save(st.session_state[BUDGET_KEY])


def main() -> None:
    st.set_page_config(page_title="Simple Budgets", layout="wide")
    st.title("Simple Budgets")
    ensure_data_directories()

    path = st.text_input("Budget file", value=get_default_budget_path())
    error = _ensure_budget_state(path)
    if error:
        st.error(f"Failed to read input file as a budget: {error}")
        return
    budget = st.session_state[BUDGET_KEY]

    with st.form("insert_part", clear_on_submit=True):
        st.subheader("Insert a budget part")
        name = st.text_input("Name")
        annual = st.number_input("Annual value", min_value=0.0, step=100.0)
        expandable = st.checkbox("Expandable", help="Funded only from income left after fixed parts.")
        submitted = st.form_submit_button("Insert")
    if submitted:
        try:
            part = insert(budget, name, annual_to_monthly(annual), expandable)
        except ValidationError as exc:
            st.error(str(exc))
        else:
            st.success(f"Pushed budget: {part.name} ({format_currency(part.monthly_value)}/mo)")

    st.subheader("Budget parts")
    if budget.is_empty():
        st.info("The budget has no parts yet.")
    else:
        st.dataframe(preview_frame(budget), hide_index=True, use_container_width=True)

    st.subheader("Calculate")
    income = st.number_input("Monthly income", value=0.0, step=100.0)
    result = allocate_result(budget, income)
    st.dataframe(allocation_frame(result), hide_index=True, use_container_width=True)
    st.plotly_chart(create_allocation_chart(result), use_container_width=True)

    if st.button("Save budget"):
        try:
            _save_budget_state()
        except OSError as exc:
            st.error(str(exc))
        else:
            st.success(f"Budget file saved to {path}.")


if __name__ == "__main__":
    main()
