"""
Flat-file storage for the bank ledger.

This module reads and writes the full set of accounts as a pipe-delimited
text file, one ``account_number|holder_name|balance`` record per line.
"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, Iterable, NamedTuple, Optional

from .models import Account

FIELD_SEPARATOR = "|"
FIRST_ACCOUNT_NUMBER = 1001

# Undecodable bytes round-trip through load and save unchanged
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"


class LedgerState(NamedTuple):
    """Accounts read from disk and the number the next account should get."""
    accounts: Dict[int, Account]
    next_account_number: int


def format_line(account: Account) -> str:
    """Serialize an account to a record line (without the newline)."""
    return FIELD_SEPARATOR.join(
        [str(account.account_number), account.holder_name, str(account.balance)]
    )


def parse_line(line: str) -> Optional[Account]:
    """
    Parse a record line.

    Returns None when the line does not have exactly three fields.
    Raises ValueError when it does but the number, name or balance is unusable.
    """
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != 3:
        return None

    account_number = int(parts[0])
    if not parts[1].strip():
        raise ValueError("Empty holder name")

    try:
        balance = Decimal(parts[2].strip())
    except InvalidOperation:
        raise ValueError(f"Invalid balance: {parts[2]!r}")

    if not balance.is_finite() or balance < 0:
        raise ValueError(f"Invalid balance: {parts[2]!r}")

    return Account(account_number=account_number, holder_name=parts[1], balance=balance)


class AccountStore:
    """Manages the accounts file for the ledger."""

    def __init__(self, path: str = "accounts.txt"):
        """Initialize store for the given file path."""
        self.path = Path(path)
        self.logger = logging.getLogger(__name__)

    def empty_state(self) -> LedgerState:
        return LedgerState({}, FIRST_ACCOUNT_NUMBER)

    def load(self) -> LedgerState:
        """Read every account from the file."""
        if not self.path.exists():
            self.logger.info(f"No accounts file at {self.path}, starting empty")
            return self.empty_state()

        accounts: Dict[int, Account] = {}
        highest = FIRST_ACCOUNT_NUMBER - 1
        try:
            with open(self.path, "r", encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
                for line_no, line in enumerate(f, start=1):
                    try:
                        account = parse_line(line)
                    except ValueError as e:
                        self.logger.warning(f"Skipping line {line_no} of {self.path}: {e}")
                        continue

                    if account is None:
                        self.logger.debug(f"Ignoring line {line_no} of {self.path}")
                        continue

                    accounts[account.account_number] = account
                    highest = max(highest, account.account_number)
        except OSError as e:
            self.logger.error(f"Error reading accounts file: {e}")
            return self.empty_state()

        self.logger.info(f"Loaded {len(accounts)} account(s) from {self.path}")
        return LedgerState(accounts, highest + 1)

    def save(self, accounts: Iterable[Account]) -> bool:
        """Rewrite the file with the given accounts, in order."""
        try:
            with open(self.path, "w", encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
                for account in accounts:
                    f.write(format_line(account) + "\n")
            return True
        except OSError as e:
            self.logger.error(f"Error saving accounts to file: {e}")
            return False
