"""
Ledger for the bank accounts.

This module contains the business logic for creating accounts and moving
money in and out of them. Every successful change is written through to
the attached store before the result is returned.
"""

import logging
from decimal import Decimal, Inexact, InvalidOperation
from typing import Dict, List, Optional, Tuple, Union

from .models import Account, AccountSnapshot
from .results import Err, ErrorKind, Ok, Result
from .store import FIRST_ACCOUNT_NUMBER, AccountStore

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float, str]

_FORBIDDEN_NAME_CHARS = ("|", "\r", "\n")


def _to_decimal(amount: Amount) -> Optional[Decimal]:
    if isinstance(amount, bool):
        return None
    if isinstance(amount, Decimal):
        return amount
    try:
        return Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return None


class Ledger:
    """Registry of accounts and the only place balances change."""

    def __init__(self, accounts: Optional[Dict[int, Account]] = None,
                 next_account_number: int = FIRST_ACCOUNT_NUMBER,
                 store: Optional[AccountStore] = None):
        """Initialize ledger from existing accounts and an optional store."""
        self._accounts: Dict[int, Account] = dict(accounts or {})
        self.next_account_number = next_account_number
        self.store = store

    @classmethod
    def open(cls, path: str = "accounts.txt") -> "Ledger":
        """Load the accounts file at ``path`` and bind the ledger to it."""
        store = AccountStore(path)
        state = store.load()
        return cls(state.accounts, state.next_account_number, store)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._accounts

    def save(self) -> bool:
        """Persist every account to the attached store, if any."""
        if self.store is None:
            return True
        return self.store.save(self._accounts.values())

    def _check_amount(self, amount: Amount) -> Union[Decimal, Err]:
        value = _to_decimal(amount)
        if value is None or not value.is_finite():
            return Err(ErrorKind.INVALID_AMOUNT, f"Invalid amount: {amount}")
        if value <= 0:
            return Err(ErrorKind.INVALID_AMOUNT, "Amount should be greater than 0.")
        return value

    def _find(self, account_number: int) -> Union[Account, Err]:
        account = self._accounts.get(account_number)
        if account is None:
            return Err(ErrorKind.ACCOUNT_NOT_FOUND, "Account not found.")
        return account

    def create_account(self, holder_name: str) -> Result[int]:
        """Open a new account with a zero balance and return its number."""
        if not isinstance(holder_name, str) or not holder_name.strip():
            return Err(ErrorKind.INVALID_INPUT, "Name cannot be empty.")

        name = holder_name.strip()
        if any(ch in name for ch in _FORBIDDEN_NAME_CHARS):
            return Err(ErrorKind.INVALID_INPUT,
                       "Name cannot contain '|' or line breaks.")

        account_number = self.next_account_number
        self.next_account_number += 1
        self._accounts[account_number] = Account(account_number, name, Decimal('0'))
        self.save()

        logger.info(f"Created account {account_number} for {name}")
        return Ok(account_number)

    def deposit(self, account_number: int, amount: Amount) -> Result[Decimal]:
        """Deposit money to an account."""
        value = self._check_amount(amount)
        if isinstance(value, Err):
            return value

        account = self._find(account_number)
        if isinstance(account, Err):
            return account

        try:
            account.deposit(value)
        except Inexact:
            return Err(ErrorKind.INVALID_AMOUNT, "Amount cannot be held exactly in the balance.")
        self.save()

        logger.info(f"Deposited {value} to account {account_number}")
        return Ok(account.balance)

    def withdraw(self, account_number: int, amount: Amount) -> Result[Decimal]:
        """Withdraw money from an account."""
        value = self._check_amount(amount)
        if isinstance(value, Err):
            return value

        account = self._find(account_number)
        if isinstance(account, Err):
            return account

        try:
            if not account.withdraw(value):
                return Err(ErrorKind.INSUFFICIENT_FUNDS, "Insufficient balance.")
        except Inexact:
            return Err(ErrorKind.INVALID_AMOUNT, "Amount cannot be held exactly in the balance.")
        self.save()

        logger.info(f"Withdrew {value} from account {account_number}")
        return Ok(account.balance)

    def get_balance(self, account_number: int) -> Result[Tuple[str, Decimal]]:
        """Get holder name and balance of an account."""
        account = self._find(account_number)
        if isinstance(account, Err):
            return account
        return Ok((account.holder_name, account.balance))

    def list_accounts(self) -> List[AccountSnapshot]:
        """All accounts, in the order they were created or loaded."""
        return [account.snapshot() for account in self._accounts.values()]
