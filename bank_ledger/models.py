"""
Data models for the bank ledger.

This module contains the account record owned by the ledger and the
read-only snapshot handed out to callers.
"""

from dataclasses import dataclass
from decimal import (ROUND_HALF_UP, Context, Decimal, DivisionByZero, Inexact,
                     InvalidOperation, Overflow)
from typing import NamedTuple

CENT = Decimal('0.01')

# Balance arithmetic raises Inexact instead of rounding
MONEY_CONTEXT = Context(prec=40, traps=[InvalidOperation, DivisionByZero, Overflow, Inexact])


def format_money(amount: Decimal) -> str:
    """Format an amount for display, rounded half-up to two decimals."""
    return f"₹{amount.quantize(CENT, rounding=ROUND_HALF_UP)}"


class AccountSnapshot(NamedTuple):
    """Immutable view of an account at a point in time."""
    account_number: int
    holder_name: str
    balance: Decimal


@dataclass
class Account:
    """Represents a bank account."""

    account_number: int
    holder_name: str
    balance: Decimal = Decimal('0')

    def __post_init__(self):
        """Initialize account after creation."""
        # Ensure balance is a Decimal
        if not isinstance(self.balance, Decimal):
            self.balance = Decimal(str(self.balance))

    def can_withdraw(self, amount: Decimal) -> bool:
        """Check if withdrawal is possible without going below zero."""
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        return amount <= self.balance

    def withdraw(self, amount: Decimal) -> bool:
        """
        Withdraw money from account.

        Raises decimal.Inexact when the new balance cannot be held exactly.
        """
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        if amount <= 0:
            return False

        if not self.can_withdraw(amount):
            return False

        self.balance = MONEY_CONTEXT.subtract(self.balance, amount)
        return True

    def deposit(self, amount: Decimal) -> bool:
        """
        Deposit money to account.

        Raises decimal.Inexact when the new balance cannot be held exactly.
        """
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        if amount <= 0:
            return False

        self.balance = MONEY_CONTEXT.add(self.balance, amount)
        return True

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(self.account_number, self.holder_name, self.balance)

    def __str__(self) -> str:
        return (f"Account Number: {self.account_number}, "
                f"Name: {self.holder_name}, "
                f"Balance: {format_money(self.balance)}")
