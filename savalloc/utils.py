"""General utilities for SavAlloc

Contents
--------
- Validation helpers (decimal parsing with range checks)
- Formatting helpers (currency, percentages)
- Logging setup for the console entry point
"""

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import ValidationError

__all__ = [
    # Validation
    "MAX_AMOUNT",
    "MIN_AMOUNT",
    "to_decimal",
    "parse_number",
    "parse_positive_decimal",
    # Formatting
    "format_currency",
    "format_percent",
    # Logging
    "configure_logging",
]

DecimalLike = Union[Decimal, int, str]

# Largest value of a 96-bit fixed-point decimal: 2**96 - 1
MAX_AMOUNT = Decimal("79228162514264337593543950335")
# Smallest positive value of the same type
MIN_AMOUNT = Decimal("1e-28")

_CENT = Decimal("0.01")

# Optional sign, digits with "," group separators, optional fraction. No exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d[\d,]*(?:\.\d*)?|\.\d+)")


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def to_decimal(value: DecimalLike, *, name: str = "value") -> Decimal:
    """Convert *value* to a finite Decimal, raising ValidationError otherwise.

    Floats are rejected so that binary rounding never enters the books.
    """
    if isinstance(value, float):
        raise ValidationError(f"{name} must be a Decimal, int or str, got float {value!r}.")
    try:
        result = Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{name} is not a number: {value!r}.") from None
    if not result.is_finite():
        raise ValidationError(f"{name} must be finite, got {value!r}.")
    return result


def parse_number(text: str, *, name: str = "value") -> Decimal:
    """
    Parse user-typed *text* the way a ledger number is written.

    Accepts surrounding whitespace, a leading sign, "," thousands
    separators and a decimal point. Exponents ("1e5"), "NaN" and
    "Infinity" are rejected.

    Examples
    --------
    >>> parse_number(" 1,250.50 ")
    Decimal('1250.50')
    """
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        raise ValidationError(f"{name} is not a number: {text!r}.")
    return to_decimal(stripped.replace(",", ""), name=name)


def parse_positive_decimal(
    text: DecimalLike,
    *,
    name: str = "value",
    upper: Optional[Decimal] = None,
) -> Decimal:
    """Parse *text* as a Decimal in (0, upper], never above MAX_AMOUNT."""
    if isinstance(text, str):
        value = parse_number(text, name=name)
    else:
        value = to_decimal(text, name=name)
    if value <= 0:
        raise ValidationError(f"{name} must be positive (got {value}).")
    limit = MAX_AMOUNT if upper is None else min(upper, MAX_AMOUNT)
    if value > limit:
        raise ValidationError(f"{name} must be <= {limit} (got {value}).")
    return value


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_currency(value: Decimal, symbol: str = "$") -> str:
    """
    Format a monetary amount with thousands separators and two decimals.

    Rounds half away from zero, the way ledgers usually print cents.
    Precision grows with the magnitude so large amounts print in full.

    Examples
    --------
    >>> format_currency(Decimal("1234.5"))
    '$1,234.50'
    >>> format_currency(Decimal("0.005"), symbol="€")
    '€0.01'
    """
    amount = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
        if amount < 0:
            return f"-{symbol}{-amount:,.2f}"
        return f"{symbol}{amount:,.2f}"


def format_percent(value: Decimal, decimals: int = 2) -> str:
    """Format *value* (already in percent units) with a fixed number of decimals."""
    value = Decimal(value)
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        return f"{value.quantize(quantum, rounding=ROUND_HALF_UP):.{decimals}f}%"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a RichHandler to the ``savalloc`` package logger.

    Only the package logger is touched, so records still propagate to the
    root logger (and to pytest's caplog). Calling twice replaces the level
    but never stacks handlers.
    """
    logger = logging.getLogger("savalloc")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
