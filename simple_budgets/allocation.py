"""Income allocation across a budget's line items.

Allocation runs in two stages:

1. Fixed parts are funded in insertion order. Each takes its full
   monthly value while the pool covers it; the first part the pool
   cannot cover takes whatever is left, and every later fixed part
   gets nothing.
2. The remaining pool is water-filled across the expandable parts:
   every part that is not yet at its cap is raised by the same amount
   each round, until either the pool runs dry or every part is full.
   Whatever is still in the pool after that is the leftover.

Everything here is pure: the budget is read, never modified, and the
:class:`~simple_budgets.models.BudgetPrinciple` accumulators are thrown
away once the result has been built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import LEFTOVER_LABEL
from .logging_config import get_logger
from .models import Budget, BudgetPart, BudgetPrinciple

logger = get_logger("allocation")


@dataclass(frozen=True)
class AllocationLine:
    """Amount granted to one part by an allocation run."""

    name: str
    nominal: float
    allocated: float
    expandable: bool

    def is_fully_funded(self) -> bool:
        return self.allocated >= self.nominal


@dataclass(frozen=True)
class AllocationResult:
    """Outcome of distributing one income figure over a budget."""

    income: float
    fixed: Tuple[AllocationLine, ...]
    expandable: Tuple[AllocationLine, ...]
    leftover: float

    def lines(self) -> Tuple[AllocationLine, ...]:
        return self.fixed + self.expandable

    @property
    def total_allocated(self) -> float:
        return sum(line.allocated for line in self.lines())

    def rows(self) -> List[Tuple[str, float]]:
        """Return ``(name, amount)`` rows: fixed, expandable, then leftover."""
        rows = [(line.name, line.allocated) for line in self.lines()]
        rows.append((LEFTOVER_LABEL, self.leftover))
        return rows


def exhaust_fixed_parts(
    parts: Sequence[BudgetPart], income: float
) -> Tuple[List[AllocationLine], float]:
    """Fund fixed parts in order and return their lines plus the remaining pool."""
    pool = income
    lines: List[AllocationLine] = []

    for part in parts:
        if pool <= 0:
            granted = 0.0
        elif pool > part.monthly_value:
            granted = part.monthly_value
            pool -= granted
        else:
            granted = pool
            pool = 0.0
        lines.append(AllocationLine(part.name, part.monthly_value, granted, False))

    return lines, pool


def fill_expandable_parts(
    parts: Sequence[BudgetPart], pool: float
) -> Tuple[List[AllocationLine], float]:
    """Water-fill ``pool`` across expandable parts, capped at their monthly value.

    Each round raises every active (not yet full) principle by the
    smallest remaining capacity among them. When the pool cannot pay
    that amount to every active principle it is split evenly between
    them instead, which ends the run.

    Returns the lines for each part, in order, and the unallocated pool.
    """
    principles = [BudgetPrinciple.from_part(part) for part in parts]
    active = [principle for principle in principles if not principle.is_full()]
    rounds = 0

    while pool > 0 and active:
        rounds += 1
        increment = min(principle.remaining for principle in active)
        count = len(active)

        if pool / count >= increment:
            for principle in active:
                principle.add_value(increment)
            pool = max(pool - increment * count, 0.0)
            active = [principle for principle in active if not principle.is_full()]
            logger.debug(
                "round %d: raised %d parts by %.6f, %d still open, pool %.6f",
                rounds, count, increment, len(active), pool,
            )
        else:
            share = pool / count
            for principle in active:
                principle.add_value(share)
            logger.debug("round %d: split remaining %.6f across %d parts", rounds, pool, count)
            pool = 0.0

    lines = [
        AllocationLine(principle.name, principle.max_value, principle.current_value, True)
        for principle in principles
    ]
    return lines, pool


def allocate_income(budget: Budget, income: float) -> AllocationResult:
    """Run the fixed then expandable allocation for ``income``."""
    income = float(income)
    fixed_lines, pool = exhaust_fixed_parts(budget.fixed_parts, income)
    expandable_lines, leftover = fill_expandable_parts(budget.expandable_parts, pool)

    logger.debug(
        "allocated %.2f across %d fixed and %d expandable parts, leftover %.2f",
        income, len(fixed_lines), len(expandable_lines), leftover,
    )
    return AllocationResult(
        income=income,
        fixed=tuple(fixed_lines),
        expandable=tuple(expandable_lines),
        leftover=leftover,
    )
