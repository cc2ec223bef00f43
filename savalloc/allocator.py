"""
Savings allocator: the SavAlloc object graph.

Purpose
-------
SavingsAllocator owns the income account, the savings account and the
ordered goal list. It applies the allocation rule, prints the reports
and keeps the goal file in sync.

Allocation Rule
---------------
Goals are processed in insertion order. Each goal moves

    amount = income.balance * pct / 100

from income to savings, where income.balance is the balance *after* the
previous goals have drawn from it. With goals at 50% and 50% and an
income of 200, the first moves 100 and the second 50.

Percentages are not checked against 100 in total.

Example
-------
>>> from decimal import Decimal
>>> from pathlib import Path
>>> allocator = SavingsAllocator(Decimal("200"), data_file=Path("userdata.txt"))
>>> allocator.add_goal("G1", Decimal("100"), Decimal("50"))
>>> allocator.add_goal("G2", Decimal("100"), Decimal("50"))
>>> allocator.allocate()
>>> allocator.savings.balance, allocator.income.balance
(Decimal('150'), Decimal('50'))
"""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path
from typing import List, Tuple

from .accounts import Account
from .config import DEFAULT_DATA_FILE
from .exceptions import SavAllocError
from .goals import SavingsGoal, describe_goal, describe_progress
from .serialization import iter_goals, save_goals
from .utils import format_currency

__all__ = [
    "SavingsAllocator",
]

logger = logging.getLogger(__name__)


class SavingsAllocator:
    """
    Owner of the income/savings accounts and the goal list.

    Parameters
    ----------
    initial_income : Decimal
        Deposited into the income account on construction.
    data_file : Path, default Path("userdata.txt")
        Goal file loaded on construction and rewritten on every add and
        every allocation pass.
    currency : str, default "$"
        Symbol used in printed amounts.

    Notes
    -----
    Storage failures never propagate: they are logged and the allocator
    keeps working with whatever goals it holds.
    """

    def __init__(
        self,
        initial_income: Decimal,
        data_file: Path = DEFAULT_DATA_FILE,
        currency: str = "$",
    ):
        self.currency = currency
        self._data_file = Path(data_file)

        self._income = Account("Income", currency=currency)
        self._income.deposit(initial_income)

        self._savings = Account("Savings", currency=currency)

        self._goals: List[SavingsGoal] = []

        self._load()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def income(self) -> Account:
        return self._income

    @property
    def savings(self) -> Account:
        return self._savings

    @property
    def goals(self) -> Tuple[SavingsGoal, ...]:
        """Goals in insertion order (a snapshot, not the live list)."""
        return tuple(self._goals)

    @property
    def data_file(self) -> Path:
        return self._data_file

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_goal(self, name: str, target_amount: Decimal, allocation_percentage: Decimal) -> SavingsGoal:
        """
        Append a goal, persist the list and print a confirmation.

        Raises
        ------
        ValidationError
            If the target or percentage is out of range. Nothing is
            appended or saved in that case.
        """
        goal = SavingsGoal(name, target_amount, allocation_percentage)
        self._goals.append(goal)
        print(
            f"Added savings goal '{goal.name}' with a target amount of "
            f"{format_currency(goal.target_amount, self.currency)} and allocation "
            f"percentage of {goal.allocation_percentage}%."
        )
        self._save()
        return goal

    def allocate(self) -> None:
        """Run one allocation pass over all goals, then persist the list."""
        for goal in self._goals:
            amount = goal.allocation_for(self._income.balance)
            self._savings.deposit(amount)
            self._income.withdraw(amount)

            print(f"Allocated {goal.allocation_percentage}% of income to '{goal.name}' savings goal.")
        self._save()

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def display_balances(self) -> None:
        print(f"Income Account Balance: {format_currency(self._income.balance, self.currency)}")
        print(f"Savings Account Balance: {format_currency(self._savings.balance, self.currency)}")

    def display_goals(self) -> None:
        for goal in self._goals:
            print(describe_goal(goal, self.currency))

    def display_progress(self) -> None:
        """Progress of every goal against the shared savings balance."""
        for goal in self._goals:
            print(describe_progress(goal, self._savings.balance))

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> None:
        # Goals read before a bad line are kept; the rest of the file is not read.
        try:
            for goal in iter_goals(self._data_file):
                self._goals.append(goal)
        except (OSError, UnicodeDecodeError, SavAllocError) as e:
            logger.error("Error loading user data: %s", e)
        else:
            logger.debug("Loaded %d goal(s) from %s", len(self._goals), self._data_file)

    def _save(self) -> None:
        try:
            save_goals(self._data_file, self._goals)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("Error saving user data: %s", e)
