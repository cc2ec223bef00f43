"""
Command-Line Interface for SavAlloc.

Purpose
-------
Interactive console session: read an initial income, collect savings
goals until the user types "done", show balances and goals, run one
allocation pass and show the updated balances and goal progress.

The command takes no functional options; everything is prompted.
Settings (data file, log level, currency symbol) come from SAVALLOC_*
environment variables, see savalloc.config.AppSettings.

Example Usage
-------------
    $ savalloc
    Enter your initial income: 200
    ...

    # Keep goals somewhere else
    $ SAVALLOC_DATA_FILE=~/goals.txt savalloc

    # Show version
    $ savalloc --version
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .allocator import SavingsAllocator
from .config import AppSettings
from .exceptions import ValidationError
from .goals import goal_progress
from .utils import configure_logging, format_currency, format_percent, parse_positive_decimal

DONE_KEYWORD = "done"

INCOME_ERROR = "Invalid input. Please enter a valid positive number for initial income."
TARGET_ERROR = "Invalid input. Please enter a valid positive number for target amount."
PERCENT_ERROR = (
    "Invalid input. Please enter a valid positive number between 0 and 100 "
    "for allocation percentage."
)


def _prompt_text(label: str) -> str:
    # default="" returns an empty answer instead of re-asking silently
    return click.prompt(label, default="", show_default=False, prompt_suffix=": ")


def prompt_decimal(label: str, error: str, upper: Optional[Decimal] = None) -> Decimal:
    """Prompt until a positive decimal (optionally <= *upper*) is entered."""
    while True:
        text = _prompt_text(label)
        try:
            return parse_positive_decimal(text, name=label, upper=upper)
        except ValidationError:
            click.echo(error)


def collect_goals(allocator: SavingsAllocator) -> int:
    """Prompt for goals until "done"; return how many were added."""
    added = 0
    click.echo("Add your savings goals:")
    while True:
        name = _prompt_text(
            f"Enter goal name (or type '{DONE_KEYWORD}' to finish adding goals)"
        ).strip()
        if name.lower() == DONE_KEYWORD:
            break

        target = prompt_decimal("Enter target amount", TARGET_ERROR)
        pct = prompt_decimal("Enter allocation percentage", PERCENT_ERROR, upper=Decimal(100))

        allocator.add_goal(name, target, pct)
        added += 1
    return added


def print_summary(console: Console, allocator: SavingsAllocator) -> None:
    """Render goals and pooled progress as a Rich table."""
    if not allocator.goals:
        console.print("No savings goals defined.")
        return

    table = Table(title="Savings Goals", show_header=True)
    table.add_column("Goal", style="cyan")
    table.add_column("Target", justify="right")
    table.add_column("Allocation", justify="right")
    table.add_column("Progress", style="green", justify="right")

    for goal in allocator.goals:
        table.add_row(
            goal.name,
            format_currency(goal.target_amount, allocator.currency),
            f"{goal.allocation_percentage}%",
            format_percent(goal_progress(allocator.savings.balance, goal)),
        )

    console.print(table)


@click.command()
@click.version_option(version=__version__, prog_name="savalloc")
def main() -> None:
    """
    Automatic Savings Allocator.

    Prompts for an initial income and savings goals, then moves a share
    of income into savings for each goal and reports progress. Goals are
    kept in a text file between runs (SAVALLOC_DATA_FILE, default
    ./userdata.txt).
    """
    settings = AppSettings()
    configure_logging(settings.log_level)
    console = Console()

    console.print(Panel("Welcome to Automatic Savings Allocator!", border_style="blue"))

    initial_income = prompt_decimal("Enter your initial income", INCOME_ERROR)

    allocator = SavingsAllocator(
        initial_income,
        data_file=settings.data_file,
        currency=settings.currency_symbol,
    )

    collect_goals(allocator)

    click.echo("Initial Account Balances:")
    allocator.display_balances()
    allocator.display_goals()

    allocator.allocate()

    click.echo("\nUpdated Account Balances:")
    allocator.display_balances()
    allocator.display_progress()

    click.echo()
    print_summary(console, allocator)


if __name__ == "__main__":
    main()
