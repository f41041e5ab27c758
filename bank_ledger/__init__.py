"""
Bank Ledger

A single-user bank account ledger with flat-file persistence and a CLI.
Supports account creation, deposits, withdrawals and balance inquiries.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from .models import Account, AccountSnapshot
from .results import Err, ErrorKind, LedgerError, Ok, Result
from .store import AccountStore, LedgerState
from .ledger import Ledger
from .cli import main


def create_ledger(path: str = "accounts.txt") -> Ledger:
    """
    Create a Ledger loaded from, and writing through to, a file.

    Args:
        path: Path to the accounts file

    Returns:
        Ledger instance
    """
    return Ledger.open(path)


__all__ = [
    "Account",
    "AccountSnapshot",
    "AccountStore",
    "Err",
    "ErrorKind",
    "Ledger",
    "LedgerError",
    "LedgerState",
    "Ok",
    "Result",
    "create_ledger",
    "main"
]
