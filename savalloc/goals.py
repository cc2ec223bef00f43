# savalloc/goals.py
"""
Savings goal specification and progress module.

Purpose
-------
Domain-level abstraction for a savings goal: a named target amount plus
the percentage of the current income balance that each allocation pass
moves to savings on its behalf.

Progress Semantics
------------------
Progress is measured against the *pooled* savings balance:

    progress(goal) = savings_balance / goal.target_amount * 100

Every goal is compared to the same shared balance; there are no per-goal
sub-balances. Two goals with the same target therefore always report the
same progress, and progress may exceed 100%.

Design Principles
-----------------
- Immutable specifications: goals are frozen dataclasses
- Decimal arithmetic throughout
- Percentages are not required to sum to 100 across goals

Example
-------
>>> from decimal import Decimal
>>> from savalloc.goals import SavingsGoal, goal_progress
>>>
>>> car = SavingsGoal("Car", Decimal("200"), Decimal("50"))
>>> goal_progress(Decimal("150"), car)
Decimal('75.00')
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .exceptions import ValidationError
from .utils import MAX_AMOUNT, MIN_AMOUNT, format_currency, format_percent, to_decimal

__all__ = [
    "SavingsGoal",
    "goal_progress",
    "describe_goal",
    "describe_progress",
]

_HUNDRED = Decimal(100)


# ---------------------------------------------------------------------------
# Goal Specification
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SavingsGoal:
    """
    User-defined savings goal.

    Parameters
    ----------
    name : str
        Goal label. Not required to be unique.
    target_amount : Decimal
        Amount to save, must be > 0.
    allocation_percentage : Decimal
        Percentage of the current income balance allocated per pass,
        must be in (0, 100].

    Notes
    -----
    - Integer and string inputs are converted to Decimal.
    - Floats are rejected to keep the arithmetic exact.

    Examples
    --------
    >>> SavingsGoal("Emergency", 1000, 25)
    SavingsGoal(name='Emergency', target_amount=Decimal('1000'), allocation_percentage=Decimal('25'))
    """
    name: str
    target_amount: Decimal
    allocation_percentage: Decimal

    def __post_init__(self):
        """Normalize to Decimal and validate ranges."""
        target = to_decimal(self.target_amount, name="target_amount")
        pct = to_decimal(self.allocation_percentage, name="allocation_percentage")

        if target <= 0:
            raise ValidationError(f"target_amount must be > 0, got {target}")
        if not (MIN_AMOUNT <= target <= MAX_AMOUNT):
            raise ValidationError(
                f"target_amount must be in [{MIN_AMOUNT}, {MAX_AMOUNT}], got {target}"
            )
        if not (0 < pct <= _HUNDRED):
            raise ValidationError(
                f"allocation_percentage must be in (0, 100], got {pct}"
            )

        object.__setattr__(self, "target_amount", target)
        object.__setattr__(self, "allocation_percentage", pct)

    def allocation_for(self, income_balance: Decimal) -> Decimal:
        """Amount this goal draws from *income_balance*: balance * pct / 100."""
        amount = income_balance * self.allocation_percentage / _HUNDRED
        # Context rounding near 28 digits may overshoot; never exceed the balance
        return min(amount, income_balance)

    def as_tuple(self) -> tuple:
        """(name, target_amount, allocation_percentage)."""
        return (self.name, self.target_amount, self.allocation_percentage)


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------

def goal_progress(savings_balance: Decimal, goal: SavingsGoal) -> Decimal:
    """
    Percentage of *goal* covered by the pooled savings balance.

    Parameters
    ----------
    savings_balance : Decimal
        Shared savings balance (not a per-goal amount).
    goal : SavingsGoal
        Goal whose target is the denominator.

    Returns
    -------
    Decimal
        savings_balance / target_amount * 100, unbounded above.
    """
    return savings_balance / goal.target_amount * _HUNDRED


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

def describe_goal(goal: SavingsGoal, currency: str = "$") -> str:
    """One-line summary used by goal listings."""
    return (
        f"Savings Goal: {goal.name}, "
        f"Target Amount: {format_currency(goal.target_amount, currency)}, "
        f"Allocation Percentage: {goal.allocation_percentage}%"
    )


def describe_progress(goal: SavingsGoal, savings_balance: Decimal) -> str:
    """One-line progress report, e.g. "Progress towards 'Car' savings goal: 75.00%"."""
    progress = goal_progress(savings_balance, goal)
    return f"Progress towards '{goal.name}' savings goal: {format_percent(progress)}"
