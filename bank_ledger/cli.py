"""
CLI interface for the bank ledger.

This module provides a command-line interface for managing bank accounts:
one command per operation, plus an interactive menu.
"""

import logging
from decimal import Decimal, InvalidOperation

import click

from .ledger import Ledger
from .models import format_money
from .results import Err

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

MENU = [
    ("1", "Create New Account"),
    ("2", "Deposit Amount"),
    ("3", "Withdraw Amount"),
    ("4", "Check Balance"),
    ("5", "View All Accounts"),
    ("q", "Quit"),
]


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the ledger package."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    # No-op when the root logger already has handlers
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("bank_ledger").setLevel(log_level)


class BankCLI:
    """CLI wrapper for ledger operations."""

    def __init__(self, data_file: str = "accounts.txt"):
        """Initialize CLI with the accounts file."""
        self.data_file = data_file
        self.ledger = Ledger.open(data_file)

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return format_money(amount)

    def display_name(self, name: str) -> str:
        """Holder name safe to print; undecodable file bytes show as U+FFFD."""
        return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")

    def parse_amount(self, amount_str: str) -> Decimal:
        """Parse amount input."""
        clean_str = (amount_str or "").replace('₹', '').replace(',', '').strip()
        if not clean_str:
            raise ValueError("Amount cannot be empty.")
        try:
            amount = Decimal(clean_str)
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {amount_str}")
        if not amount.is_finite():
            raise ValueError(f"Invalid amount: {amount_str}")
        return amount

    def parse_account_number(self, account_str: str) -> int:
        """Parse account number input."""
        clean_str = (account_str or "").strip()
        if not clean_str:
            raise ValueError("Account number cannot be empty.")
        try:
            return int(clean_str)
        except ValueError:
            raise ValueError("Invalid account number.")

    def report_error(self, message: str) -> None:
        click.echo(f"❌ Error: {message}", err=True)

    def create_account(self, name: str) -> bool:
        result = self.ledger.create_account(name)
        if isinstance(result, Err):
            self.report_error(result.message)
            return False

        click.echo(f"✅ Account created successfully! Account Number: {result.value}")
        return True

    def deposit(self, account_str: str, amount_str: str) -> bool:
        try:
            account_number = self.parse_account_number(account_str)
            amount = self.parse_amount(amount_str)
        except ValueError as e:
            self.report_error(str(e))
            return False

        result = self.ledger.deposit(account_number, amount)
        if isinstance(result, Err):
            self.report_error(result.message)
            return False

        click.echo(f"✅ {self.format_currency(amount)} deposited to Account {account_number}. "
                   f"New Balance: {self.format_currency(result.value)}")
        return True

    def withdraw(self, account_str: str, amount_str: str) -> bool:
        try:
            account_number = self.parse_account_number(account_str)
            amount = self.parse_amount(amount_str)
        except ValueError as e:
            self.report_error(str(e))
            return False

        result = self.ledger.withdraw(account_number, amount)
        if isinstance(result, Err):
            self.report_error(result.message)
            return False

        click.echo(f"✅ {self.format_currency(amount)} withdrawn from Account {account_number}. "
                   f"New Balance: {self.format_currency(result.value)}")
        return True

    def balance(self, account_str: str) -> bool:
        try:
            account_number = self.parse_account_number(account_str)
        except ValueError as e:
            self.report_error(str(e))
            return False

        result = self.ledger.get_balance(account_number)
        if isinstance(result, Err):
            self.report_error(result.message)
            return False

        holder_name, balance = result.value
        click.echo(f"\n💰 Balance Details")
        click.echo(f"Account Number: {account_number}")
        click.echo(f"Account Holder: {self.display_name(holder_name)}")
        click.echo(f"Current Balance: {self.format_currency(balance)}")
        return True

    def list_accounts(self) -> bool:
        accounts = self.ledger.list_accounts()
        if not accounts:
            click.echo("No accounts found.")
            return True

        click.echo("----- All Accounts -----")
        for snapshot in accounts:
            click.echo(f"Account Number: {snapshot.account_number}, "
                       f"Name: {self.display_name(snapshot.holder_name)}, "
                       f"Balance: {self.format_currency(snapshot.balance)}")
        return True


@click.group()
@click.option('--data-file', default='accounts.txt', envvar='BANK_LEDGER_FILE',
              show_default=True, help='Accounts file path')
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, data_file, log_level):
    """Bank Ledger CLI"""
    setup_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj['cli'] = BankCLI(data_file)


@cli.command()
@click.option('--name', prompt='Account holder name', help='Account holder name')
@click.pass_context
def create_account(ctx, name):
    """Create a new bank account."""
    ctx.obj['cli'].create_account(name)


@cli.command()
@click.option('--account', prompt='Account number', help='Account number')
@click.option('--amount', prompt='Deposit amount', help='Amount to deposit')
@click.pass_context
def deposit(ctx, account, amount):
    """Deposit money to an account."""
    ctx.obj['cli'].deposit(account, amount)


@cli.command()
@click.option('--account', prompt='Account number', help='Account number')
@click.option('--amount', prompt='Withdrawal amount', help='Amount to withdraw')
@click.pass_context
def withdraw(ctx, account, amount):
    """Withdraw money from an account."""
    ctx.obj['cli'].withdraw(account, amount)


@cli.command()
@click.option('--account', prompt='Account number', help='Account number')
@click.pass_context
def balance(ctx, account):
    """Check account balance."""
    ctx.obj['cli'].balance(account)


@cli.command()
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    ctx.obj['cli'].list_accounts()


@cli.command()
@click.pass_context
def interactive(ctx):
    """Run the menu-driven account manager."""
    bank_cli = ctx.obj['cli']
    click.echo(f"Application started. {len(bank_cli.ledger)} account(s) loaded.")

    try:
        while True:
            click.echo("\n🏦 Bank Account Manager")
            for key, label in MENU:
                click.echo(f"  {key}) {label}")
            choice = click.prompt("Choose an option",
                                  type=click.Choice([key for key, _ in MENU]),
                                  show_choices=False)

            if choice == "1":
                bank_cli.create_account(click.prompt("Enter account holder name", default="",
                                                     show_default=False))
            elif choice == "2":
                account = click.prompt("Enter account number", default="", show_default=False)
                amount = click.prompt("Enter amount to deposit", default="", show_default=False)
                bank_cli.deposit(account, amount)
            elif choice == "3":
                account = click.prompt("Enter account number", default="", show_default=False)
                amount = click.prompt("Enter amount to withdraw", default="", show_default=False)
                bank_cli.withdraw(account, amount)
            elif choice == "4":
                bank_cli.balance(click.prompt("Enter account number", default="",
                                              show_default=False))
            elif choice == "5":
                bank_cli.list_accounts()
            else:
                break
    except click.Abort:
        click.echo()
    finally:
        bank_cli.ledger.save()

    click.echo("👋 Goodbye!")


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
