"""
Typed results for ledger operations.

Ledger operations return ``Ok(value)`` on success and ``Err(kind, message)``
on a validation failure, so callers can branch on the outcome without
catching exceptions. ``unwrap()`` converts back to the exception style.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar('T')


class ErrorKind(Enum):
    """Kinds of recoverable ledger failures."""
    INVALID_INPUT = "invalid_input"
    INVALID_AMOUNT = "invalid_amount"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class LedgerError(Exception):
    """Raised by ``Err.unwrap()``."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error kind and a human-readable message."""

    kind: ErrorKind
    message: str

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise LedgerError(self.kind, self.message)


Result = Union[Ok[T], Err]
