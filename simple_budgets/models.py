"""Budget data model.

A :class:`Budget` holds two append-only lists of :class:`BudgetPart`:
fixed parts, funded first and in insertion order, and expandable parts,
funded symmetrically from whatever income remains. A
:class:`BudgetPrinciple` is the scratch accumulator built for each
expandable part during one allocation run.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

from .exceptions import ValidationError

if TYPE_CHECKING:
    from .allocation import AllocationResult


@dataclass(frozen=True)
class BudgetPart:
    """One line item of a budget, with its value expressed per month."""

    name: str
    monthly_value: float
    expandable: bool

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValidationError('name', self.name, "Budget part name cannot be empty.")
        if not isinstance(self.expandable, bool):
            raise ValidationError('expandable', self.expandable, "The provided value is not a boolean value.")
        if isinstance(self.monthly_value, bool):
            raise ValidationError('monthly_value', self.monthly_value, "The provided value is not a valid number.")
        try:
            value = float(self.monthly_value)
        except (TypeError, ValueError):
            raise ValidationError(
                'monthly_value', self.monthly_value, "The provided value is not a valid number."
            ) from None
        if not math.isfinite(value) or value < 0:
            raise ValidationError(
                'monthly_value', self.monthly_value, "The monthly value must be a non-negative number."
            )
        object.__setattr__(self, 'monthly_value', value)

    def row(self) -> Tuple[str, float, bool]:
        return (self.name, self.monthly_value, self.expandable)


@dataclass
class BudgetPrinciple:
    """Progress of one expandable part toward its cap during an allocation."""

    name: str
    max_value: float
    current_value: float = 0.0

    @classmethod
    def from_part(cls, part: BudgetPart) -> 'BudgetPrinciple':
        return cls(name=part.name, max_value=part.monthly_value)

    @property
    def remaining(self) -> float:
        return self.max_value - self.current_value

    def is_full(self) -> bool:
        return self.current_value >= self.max_value

    def add_value(self, value: float) -> None:
        # Snap to the cap so a filled principle never drifts above or below it.
        if value >= self.remaining:
            self.current_value = self.max_value
        else:
            self.current_value += value


class Budget:
    """Ordered fixed and expandable line items.

    Parts can only be appended. The lists are owned by the budget; the
    ``fixed_parts`` and ``expandable_parts`` properties hand out tuples so
    callers cannot mutate them behind its back.
    """

    def __init__(
        self,
        fixed_parts: Optional[Iterable[BudgetPart]] = None,
        expandable_parts: Optional[Iterable[BudgetPart]] = None,
    ):
        self._fixed_parts: List[BudgetPart] = []
        self._expandable_parts: List[BudgetPart] = []

        for part in fixed_parts or ():
            if part.expandable:
                raise ValueError(f"Part {part.name!r} is expandable and cannot be added as fixed")
            self._fixed_parts.append(part)
        for part in expandable_parts or ():
            if not part.expandable:
                raise ValueError(f"Part {part.name!r} is fixed and cannot be added as expandable")
            self._expandable_parts.append(part)

    @property
    def fixed_parts(self) -> Tuple[BudgetPart, ...]:
        return tuple(self._fixed_parts)

    @property
    def expandable_parts(self) -> Tuple[BudgetPart, ...]:
        return tuple(self._expandable_parts)

    def push_part(self, part: BudgetPart) -> None:
        """Append ``part`` to the list matching its expandable flag."""
        if part.expandable:
            self._expandable_parts.append(part)
        else:
            self._fixed_parts.append(part)

    def parts(self) -> Iterator[BudgetPart]:
        """Iterate fixed parts, then expandable parts, each in insertion order."""
        yield from self._fixed_parts
        yield from self._expandable_parts

    def preview(self) -> List[Tuple[str, float, bool]]:
        return [part.row() for part in self.parts()]

    def allocate(self, income: float) -> 'AllocationResult':
        """Distribute ``income`` across the parts without modifying the budget."""
        from .allocation import allocate_income

        return allocate_income(self, income)

    def is_empty(self) -> bool:
        return not self._fixed_parts and not self._expandable_parts

    def __len__(self) -> int:
        return len(self._fixed_parts) + len(self._expandable_parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Budget):
            return NotImplemented
        return (
            self._fixed_parts == other._fixed_parts
            and self._expandable_parts == other._expandable_parts
        )

    def __repr__(self) -> str:
        return (
            f"Budget(fixed_parts={self._fixed_parts!r}, "
            f"expandable_parts={self._expandable_parts!r})"
        )
