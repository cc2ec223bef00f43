"""
Account balances for SavAlloc.

An Account is a named Decimal balance that supports unconditional
deposits and guarded withdrawals. Every transaction is reported on
stdout; a withdrawal larger than the balance is reported and skipped
rather than raised.

Example
-------
>>> from decimal import Decimal
>>> acc = Account("Income")
>>> acc.deposit(Decimal("200"))
Deposited $200.00 into Income account.
>>> acc.withdraw(Decimal("500"))
Insufficient funds in Income account.
False
>>> acc.balance
Decimal('200')
"""

from __future__ import annotations

from decimal import Decimal

from .utils import format_currency, to_decimal

__all__ = [
    "Account",
]


class Account:
    """
    Named balance owned by a SavingsAllocator.

    Parameters
    ----------
    name : str
        Account label used in transaction messages (e.g., "Income").
    currency : str, default "$"
        Symbol used when printing amounts.

    Notes
    -----
    - The balance starts at zero and only changes through deposit/withdraw.
    - After any successful withdrawal the balance is non-negative.
    """

    def __init__(self, name: str, currency: str = "$"):
        self.name = name
        self.currency = currency
        self._balance = Decimal(0)

    @property
    def balance(self) -> Decimal:
        """Current balance."""
        return self._balance

    def deposit(self, amount: Decimal) -> None:
        """Add *amount* to the balance and report the transaction."""
        amount = to_decimal(amount, name="amount")
        self._balance += amount
        print(f"Deposited {format_currency(amount, self.currency)} into {self.name} account.")

    def withdraw(self, amount: Decimal) -> bool:
        """
        Remove *amount* from the balance if it is covered.

        Returns
        -------
        bool
            True if the withdrawal happened. On insufficient funds a notice
            is printed, the balance is untouched and False is returned.
        """
        amount = to_decimal(amount, name="amount")
        if amount > self._balance:
            print(f"Insufficient funds in {self.name} account.")
            return False

        self._balance -= amount
        print(f"Withdrawn {format_currency(amount, self.currency)} from {self.name} account.")
        return True

    def __repr__(self) -> str:
        return f"Account(name={self.name!r}, balance={self._balance})"
