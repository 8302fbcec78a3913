"""Top-level package for Simple Budgets.

A personal monthly-budget planner. A budget is a list of fixed parts,
funded first and in order, and expandable parts, which share whatever
income remains without exceeding their own monthly value. The primary
modules are:

* ``models`` – the budget, its parts and the per-run accumulators
* ``allocation`` – dividing an income across a budget
* ``codec`` – the length-prefixed text format budgets are saved in
* ``shell`` – the interactive command line front end
* ``dashboard`` – a Streamlit page over the same operations

To start the interactive shell from the command line you can execute:

```bash
simple-budgets budget.txt new
```
"""

from .allocation import AllocationLine, AllocationResult, allocate_income
from .codec import decode_budget, encode_budget
from .exceptions import BudgetError, DecodeError, ValidationError
from .models import Budget, BudgetPart, BudgetPrinciple
from .planner import (
    allocate,
    insert,
    load_budget,
    new_budget,
    preview,
    save_budget,
)

__all__ = [
    "AllocationLine",
    "AllocationResult",
    "Budget",
    "BudgetError",
    "BudgetPart",
    "BudgetPrinciple",
    "DecodeError",
    "ValidationError",
    "allocate",
    "allocate_income",
    "decode_budget",
    "encode_budget",
    "insert",
    "load_budget",
    "new_budget",
    "preview",
    "save_budget",
]
