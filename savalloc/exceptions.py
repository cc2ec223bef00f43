"""
Custom exceptions for SavAlloc.

Purpose
-------
Provides a small exception hierarchy for the seams between SavAlloc
modules. None of these reach the user as a traceback: the CLI turns
validation failures into re-prompts, and the allocator turns storage
failures into logged errors.

Exception Hierarchy
-------------------
SavAllocError (base)
└── ValidationError - Invalid amount, percentage or goal values
    └── GoalFormatError - Unparseable goal line in the data file

Usage
-----
>>> from savalloc.exceptions import ValidationError
>>>
>>> raise ValidationError("target_amount must be > 0, got -5")
>>>
>>> # Catch all SavAlloc exceptions
>>> try:
...     goal = parse_goal_line(line)
... except SavAllocError as e:
...     logger.error(f"Bad goal line: {e}")
"""


class SavAllocError(Exception):
    """
    Base exception for all SavAlloc errors.

    Examples
    --------
    >>> try:
    ...     goals = load_goals(path)
    ... except SavAllocError as e:
    ...     logger.error(f"Error loading user data: {e}")
    """
    pass


class ValidationError(SavAllocError):
    """
    Value validation failures.

    Raised when an amount or percentage fails its range check:
    - Non-positive target amount
    - Allocation percentage outside (0, 100]
    - Non-numeric or non-finite decimal input

    Examples
    --------
    >>> raise ValidationError(
    ...     f"allocation_percentage must be in (0, 100], got {pct}"
    ... )
    """
    pass


class GoalFormatError(ValidationError):
    """
    Unparseable goal line in the persisted goal file.

    Raised when a line has the expected three fields but its target
    amount or allocation percentage cannot be turned into a valid goal.
    Lines with the wrong field count are skipped instead.

    Examples
    --------
    >>> raise GoalFormatError(
    ...     f"Line 3: target amount 'abc' is not a number"
    ... )
    """
    pass
