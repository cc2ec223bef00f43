"""
Serialization module for SavAlloc goal persistence.

Purpose
-------
Reads and writes the goal list as a flat text file, one goal per line:

    name,target_amount,allocation_percentage

The format has no header, no escaping and no versioning. A name that
contains a comma produces a line with more than three fields, which is
skipped on the next load.

Parsing Rules
-------------
- A line that does not split into exactly three fields is skipped.
- A three-field line whose numbers do not parse, or whose values are out
  of range, raises GoalFormatError and ends the load.
- Decimals are written with str() so the entered precision survives.

Example
-------
>>> from pathlib import Path
>>> from savalloc.goals import SavingsGoal
>>> from savalloc.serialization import save_goals, load_goals
>>>
>>> save_goals(Path("userdata.txt"), [SavingsGoal("Car", 5000, 20)])
>>> load_goals(Path("userdata.txt"))
[SavingsGoal(name='Car', target_amount=Decimal('5000'), allocation_percentage=Decimal('20'))]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from pydantic import ValidationError as PydanticValidationError

from .config import GoalConfig
from .exceptions import GoalFormatError
from .goals import SavingsGoal

__all__ = [
    "FIELD_SEPARATOR",
    "format_goal_line",
    "parse_goal_line",
    "iter_goals",
    "load_goals",
    "save_goals",
]

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","


# ---------------------------------------------------------------------------
# Line codec
# ---------------------------------------------------------------------------

def format_goal_line(goal: SavingsGoal) -> str:
    """Render *goal* as ``name,target,percentage`` (no trailing newline)."""
    return FIELD_SEPARATOR.join(
        [goal.name, str(goal.target_amount), str(goal.allocation_percentage)]
    )


def parse_goal_line(line: str, lineno: Optional[int] = None) -> Optional[SavingsGoal]:
    """
    Parse one persisted line into a SavingsGoal.

    Parameters
    ----------
    line : str
        Raw line, with or without its line terminator.
    lineno : int, optional
        1-based line number, only used in error messages.

    Returns
    -------
    SavingsGoal or None
        None when the line does not have exactly three fields.

    Raises
    ------
    GoalFormatError
        If the numeric fields cannot be parsed or fail range validation.
    """
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != 3:
        return None

    name, target, pct = parts
    where = f"line {lineno}: " if lineno is not None else ""
    try:
        config = GoalConfig.model_validate({
            "name": name,
            "target_amount": target.strip(),
            "allocation_percentage": pct.strip(),
        })
    except PydanticValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise GoalFormatError(f"{where}invalid {fields} in {line.rstrip()!r}") from e

    return SavingsGoal(
        name=config.name,
        target_amount=config.target_amount,
        allocation_percentage=config.allocation_percentage,
    )


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------

def iter_goals(path: Path) -> Iterator[SavingsGoal]:
    """
    Yield goals from *path* in file order, skipping malformed lines.

    Yields nothing when the file does not exist. GoalFormatError and
    OSError propagate to the caller at the point of failure, after all
    earlier goals have been yielded.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No goal file at %s", path)
        return

    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            goal = parse_goal_line(line, lineno)
            if goal is None:
                logger.debug("Skipping malformed line %d in %s", lineno, path)
                continue
            yield goal


def load_goals(path: Path) -> List[SavingsGoal]:
    """Read all goals from *path* (empty list if the file is missing)."""
    return list(iter_goals(path))


def save_goals(path: Path, goals: Iterable[SavingsGoal]) -> None:
    """
    Overwrite *path* with one line per goal.

    The content is encoded before the file is opened, so a goal that
    cannot be written as UTF-8 raises UnicodeEncodeError and leaves the
    existing file untouched.
    """
    path = Path(path)
    payload = "".join(format_goal_line(goal) + "\n" for goal in goals).encode("utf-8")
    with open(path, "wb") as f:
        f.write(payload)
    logger.debug("Saved goals to %s", path)
