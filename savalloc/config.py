"""
Configuration management module for SavAlloc.

Purpose
-------
Centralized configuration using Pydantic models for type-safe validation
of goal fields and application settings. Settings come from environment
variables (prefix ``SAVALLOC_``) or a local ``.env`` file.

Example
-------
>>> from savalloc.config import GoalConfig, AppSettings
>>> cfg = GoalConfig(name="Car", target_amount="5000", allocation_percentage="20")
>>> cfg.target_amount
Decimal('5000')
>>>
>>> settings = AppSettings()
>>> settings.data_file
PosixPath('userdata.txt')
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import MAX_AMOUNT, MIN_AMOUNT

__all__ = [
    "GoalConfig",
    "AppSettings",
    "DEFAULT_DATA_FILE",
]

DEFAULT_DATA_FILE = Path("userdata.txt")


# ---------------------------------------------------------------------------
# Goal Configuration
# ---------------------------------------------------------------------------

class GoalConfig(BaseModel):
    """
    Validated fields of one savings goal.

    Attributes
    ----------
    name : str
        Goal label. May be empty and may repeat; uniqueness is a convention.
    target_amount : Decimal
        Amount the goal aims for (must be positive).
    allocation_percentage : Decimal
        Share of the current income balance moved per allocation pass,
        in (0, 100].

    Examples
    --------
    >>> GoalConfig(name="Holiday", target_amount=1200, allocation_percentage=10)
    GoalConfig(name='Holiday', target_amount=Decimal('1200'), allocation_percentage=Decimal('10'))
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        description="Goal name"
    )
    target_amount: Decimal = Field(
        ge=MIN_AMOUNT,
        le=MAX_AMOUNT,
        allow_inf_nan=False,
        description="Target amount (must be positive)"
    )
    allocation_percentage: Decimal = Field(
        gt=0,
        le=100,
        allow_inf_nan=False,
        description="Percentage of current income allocated per pass"
    )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Environment variables are prefixed with SAVALLOC_
    (e.g., SAVALLOC_DATA_FILE=/tmp/goals.txt).

    Attributes
    ----------
    data_file : Path
        Goal list file, relative paths resolve against the working directory.
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    currency_symbol : str
        Prefix used when printing amounts.
    """

    model_config = SettingsConfigDict(
        env_prefix="SAVALLOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_file: Path = Field(
        default=DEFAULT_DATA_FILE,
        description="Path of the persisted goal list"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Currency symbol for printed amounts"
    )
