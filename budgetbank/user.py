"""Users with bank accounts, bills and debts."""

from __future__ import annotations

import warnings
from pathlib import Path

from .account import Account
from .bill import Bill
from .debt import Debt

ACCOUNTS_FILE = Path("accounts.txt")


def load_accounts(path: str | Path, username: str) -> list[Account]:
    """Read the accounts of ``username`` from a ``user,name,balance`` file."""
    path = Path(path)
    if not path.is_file():
        return []
    accounts = []
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\n")
            owner, sep, rest = line.partition(",")
            if not sep or owner != username:
                continue
            name, sep, balance_text = rest.partition(",")
            if not sep:
                raise ValueError(f"Malformed account line: {line!r}")
            accounts.append(Account(float(balance_text), name))
    return accounts


class User:
    """A user of the budget application."""

    def __init__(
        self,
        username: str,
        password: str,
        accounts_path: str | Path = ACCOUNTS_FILE,
    ) -> None:
        self.username = username
        self.password = password
        self.accounts_path = Path(accounts_path)
        self.is_logged_in = False
        self.income = 0.0
        self.id = 0
        self.bank_accounts: list[Account] = load_accounts(self.accounts_path, username)
        self.bills: list[Bill] = []
        self.debts: list[Debt] = []

    def __repr__(self) -> str:
        return f"User(username={self.username!r}, id={self.id})"

    def login(self) -> None:
        self.is_logged_in = True

    def logout(self) -> None:
        self.is_logged_in = False

    def create_bank_account(self, initial_balance: float, account_name: str) -> Account:
        """Open a new account and append it to the accounts file."""
        account = Account(initial_balance, account_name)
        self.bank_accounts.append(account)
        with self.accounts_path.open("a", encoding="utf-8") as handle:
            handle.write(f"{self.username},{account_name},{initial_balance:g}\n")
        return account

    def account(self, index: int) -> Account:
        """Return the bank account at ``index``."""
        if not 0 <= index < len(self.bank_accounts):
            raise IndexError("Invalid account selection.")
        return self.bank_accounts[index]

    def add_bill(self, bill: Bill) -> None:
        self.bills.append(bill)

    def add_debt(self, debt: Debt) -> None:
        self.debts.append(debt)

    def total_monthly_bills(self) -> float:
        return sum(bill.amount for bill in self.bills)

    def total_monthly_debts(self) -> float:
        return sum(debt.monthly_payment() for debt in self.debts)

    def _debt(self, index: int) -> Debt:
        if not 0 <= index < len(self.debts):
            raise IndexError("Invalid debt index.")
        return self.debts[index]

    def _bill(self, index: int) -> Bill:
        if not 0 <= index < len(self.bills):
            raise IndexError("Invalid bill index.")
        return self.bills[index]

    def pay_debt(self, index: int, amount: float, bank_account: int) -> None:
        """Pay ``amount`` towards a debt; warns if below the monthly payment."""
        debt = self._debt(index)
        monthly = debt.monthly_payment()
        if amount < monthly:
            warnings.warn(
                f"Payment amount is less than the monthly payment of {monthly:.2f}",
                stacklevel=2,
            )
        self.account(bank_account).withdraw(amount)

    def pay_bill(self, index: int, amount: float, bank_account: int) -> None:
        """Pay a bill; the amount must cover the bill."""
        bill = self._bill(index)
        if amount < bill.amount:
            raise ValueError(
                f"Payment amount is less than the bill amount of {bill.amount:.2f}"
            )
        self.account(bank_account).withdraw(amount)

    def payoff_bill(self, index: int, bank_account: int) -> Bill:
        """Pay the full amount of a bill and return it."""
        bill = self._bill(index)
        self.account(bank_account).withdraw(bill.amount)
        return bill

    def payoff_debt(self, index: int, bank_account: int) -> Debt:
        """Pay one monthly instalment of a debt and return it."""
        debt = self._debt(index)
        self.account(bank_account).withdraw(debt.monthly_payment())
        return debt