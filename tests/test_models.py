"""
Tests for the models and results modules.

This module contains tests for the Account model, its snapshot,
and the typed Ok/Err results returned by the ledger.
"""

import pytest
from decimal import Decimal, Inexact

from bank_ledger.models import Account, AccountSnapshot
from bank_ledger.results import Err, ErrorKind, LedgerError, Ok


class TestAccount:
    """Test Account model."""

    def test_account_default_balance(self):
        """Test account is created with a zero balance."""
        account = Account(1001, "Alice")

        assert account.account_number == 1001
        assert account.holder_name == "Alice"
        assert account.balance == Decimal('0')

    def test_balance_conversion_to_decimal(self):
        """Test that float and int balances are converted to Decimal."""
        account = Account(1001, "Alice", 250.5)
        assert isinstance(account.balance, Decimal)
        assert account.balance == Decimal('250.5')

        account = Account(1002, "Bob", 100)
        assert account.balance == Decimal('100')

    def test_deposit_valid_amount(self):
        """Test depositing a positive amount."""
        account = Account(1001, "Alice", Decimal('100.00'))

        assert account.deposit(Decimal('50.25')) is True
        assert account.balance == Decimal('150.25')

    def test_deposit_non_positive_amount(self):
        """Test depositing zero or a negative amount."""
        account = Account(1001, "Alice", Decimal('100.00'))

        assert account.deposit(Decimal('0')) is False
        assert account.deposit(Decimal('-10')) is False
        assert account.balance == Decimal('100.00')

    def test_withdraw_entire_balance(self):
        """Test withdrawing exactly the balance."""
        account = Account(1001, "Alice", Decimal('100.00'))

        assert account.withdraw(Decimal('100.00')) is True
        assert account.balance == Decimal('0')

    def test_withdraw_more_than_balance(self):
        """Test withdrawal that would make the balance negative."""
        account = Account(1001, "Alice", Decimal('100.00'))

        assert account.can_withdraw(Decimal('100.01')) is False
        assert account.withdraw(Decimal('100.01')) is False
        assert account.balance == Decimal('100.00')

    def test_withdraw_float_amount(self):
        """Test that float amounts are converted before withdrawal."""
        account = Account(1001, "Alice", Decimal('0.3'))

        assert account.withdraw(0.1) is True
        assert account.balance == Decimal('0.2')

    def test_deposit_raises_instead_of_rounding(self):
        """Test a deposit that needs more digits than the money context holds."""
        account = Account(1001, "Alice", Decimal('1E+50'))

        with pytest.raises(Inexact):
            account.deposit(Decimal('0.01'))
        assert account.balance == Decimal('1E+50')

    def test_snapshot(self):
        """Test snapshot is a detached tuple of the account fields."""
        account = Account(1001, "Alice", Decimal('10'))
        snapshot = account.snapshot()

        assert snapshot == AccountSnapshot(1001, "Alice", Decimal('10'))
        account.deposit(Decimal('5'))
        assert snapshot.balance == Decimal('10')

    def test_str_rounds_to_two_decimals(self):
        """Test display form of an account."""
        account = Account(1001, "Alice", Decimal('12.345'))
        assert str(account) == "Account Number: 1001, Name: Alice, Balance: ₹12.35"


class TestResults:
    """Test Ok and Err results."""

    def test_ok(self):
        result = Ok(1001)

        assert result.is_ok() is True
        assert result.is_err() is False
        assert result.unwrap() == 1001

    def test_err(self):
        result = Err(ErrorKind.ACCOUNT_NOT_FOUND, "Account not found.")

        assert result.is_ok() is False
        assert result.is_err() is True
        with pytest.raises(LedgerError, match="Account not found") as exc_info:
            result.unwrap()
        assert exc_info.value.kind == ErrorKind.ACCOUNT_NOT_FOUND

    def test_results_compare_by_value(self):
        assert Ok(Decimal('5')) == Ok(Decimal('5.0'))
        assert Err(ErrorKind.INVALID_AMOUNT, "x") != Err(ErrorKind.INVALID_INPUT, "x")
