"""
SavAlloc — Automatic Savings Allocator

A console tool that moves a share of income into savings for each
user-defined goal and reports progress, keeping goals in a text file
between runs.

Modules
-------
- accounts      : Income/savings balances with guarded withdrawals
- goals         : Savings goal specification and pooled progress
- allocator     : Allocation pass, reports and goal persistence
- serialization : Goal file line codec and load/save
- config        : Pydantic goal validation and environment settings
- cli           : Interactive console entry point

"""

__version__ = "0.1.0"

from .accounts import Account
from .goals import SavingsGoal, goal_progress
from .allocator import SavingsAllocator
from . import utils
