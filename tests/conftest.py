"""
Pytest configuration and fixtures for SavAlloc test suite.

Fixtures keep every test on its own goal file under tmp_path so nothing
touches userdata.txt in the working directory.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import List

import pytest

from savalloc.allocator import SavingsAllocator
from savalloc.goals import SavingsGoal


# ---------------------------------------------------------------------------
# File Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def data_file(tmp_path) -> Path:
    """Path of a (not yet existing) goal file."""
    return tmp_path / "userdata.txt"


@pytest.fixture
def write_data_file(data_file):
    """Factory writing raw text to the goal file."""
    def _write(text: str) -> Path:
        data_file.write_text(text, encoding="utf-8")
        return data_file
    return _write


# ---------------------------------------------------------------------------
# Goal Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def half_goals() -> List[SavingsGoal]:
    """Two goals, each 50% with a target of 100."""
    return [
        SavingsGoal("G1", Decimal("100"), Decimal("50")),
        SavingsGoal("G2", Decimal("100"), Decimal("50")),
    ]


@pytest.fixture
def car_goal() -> SavingsGoal:
    """Single goal: Car, target 200, 25%."""
    return SavingsGoal("Car", Decimal("200"), Decimal("25"))


# ---------------------------------------------------------------------------
# Allocator Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_allocator(data_file):
    """Factory for allocators bound to the test goal file."""
    def _make(income="200", **kwargs) -> SavingsAllocator:
        kwargs.setdefault("data_file", data_file)
        return SavingsAllocator(Decimal(income), **kwargs)
    return _make


@pytest.fixture
def allocator(make_allocator) -> SavingsAllocator:
    """Allocator with an income of 200 and no goals."""
    return make_allocator("200")


# ---------------------------------------------------------------------------
# Logging Isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() between tests."""
    yield
    logger = logging.getLogger("savalloc")
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
