"""Interactive menu for a logged-in user's accounts, bills and debts."""

from __future__ import annotations

import sys
import warnings
from typing import Callable, TextIO

from .account import Account
from .bill import Bill
from .debt import Debt
from .user import User

MENU_OPTIONS = (
    "View Account Details",
    "Deposit Funds",
    "Withdraw Funds",
    "Set Income",
    "Create Bank Account",
    "View Financial Summary",
    "Pay Bill",
    "Pay Debt",
    "Payoff Bill",
    "Payoff Debt",
    "Add Bill",
    "Add Debt",
    "Log out and Exit",
)


def _clear_screen(out: TextIO) -> None:
    isatty = getattr(out, "isatty", None)
    if isatty is not None and isatty():
        out.write("\033[2J\033[H")
        out.flush()


class AccountMenu:
    """Menu of account operations for one user."""

    def __init__(
        self,
        user: User,
        input_func: Callable[[str], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.user = user
        self._input = input_func if input_func is not None else input
        self.out = out if out is not None else sys.stdout
        self.running = False
        self._handlers: dict[int, Callable[[], None]] = {
            1: self.view_account_details,
            2: self.deposit_funds,
            3: self.withdraw_funds,
            4: self.set_income,
            5: self.create_bank_account,
            6: self.view_financial_summary,
            7: self.pay_bill,
            8: self.pay_debt,
            9: self.payoff_bill,
            10: self.payoff_debt,
            11: self.add_bill,
            12: self.add_debt,
            13: self.logout_and_exit,
        }

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_int(self, prompt: str) -> int:
        text = self._ask(prompt)
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"Invalid number: {text!r}") from None

    def _ask_float(self, prompt: str) -> float:
        text = self._ask(prompt)
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"Invalid amount: {text!r}") from None

    def display_menu(self) -> None:
        """Show the menu and handle choices until the user logs out."""
        self.running = True
        self._say(f"Welcome {self.user.username}")
        while self.running:
            self._say("Account Menu:")
            for number, label in enumerate(MENU_OPTIONS, start=1):
                self._say(f"{number}. {label}")
            try:
                text = self._ask("Please enter an option: ")
                try:
                    choice = int(text)
                except ValueError:
                    self._say("Invalid choice. Please try again.")
                    continue
                self.handle_user_selection(choice)
            except EOFError:
                self.logout_and_exit()

    def handle_user_selection(self, choice: int) -> None:
        """Run the operation for a menu choice, reporting its errors."""
        handler = self._handlers.get(choice)
        if handler is None:
            self._say("Invalid choice. Please try again.")
            return
        try:
            handler()
        except (ValueError, IndexError) as err:
            self._say(str(err))

    def _open_account(self, balance: float, name: str) -> Account:
        account = self.user.create_bank_account(balance, name)
        self._say(
            f"Bank account '{name}' created for user {self.user.username} "
            f"with initial balance {balance:.2f}"
        )
        return account

    def view_account_details(self) -> None:
        _clear_screen(self.out)
        self._say("View Account Details selected.")
        accounts = self.user.bank_accounts
        if not accounts:
            self._say("No bank accounts found.")
            answer = self._ask("Create a bank account? (y/n): ")
            if answer[:1] in ("y", "Y"):
                balance = self._ask_float("Enter initial balance for the new account: ")
                name = self._ask("Enter a name for the new account: ")
                self._open_account(balance, name)
            return
        for index, account in enumerate(accounts):
            self._say(f"[{index}] {account.name}")
            self.out.write(account.details())

    def deposit_funds(self) -> None:
        _clear_screen(self.out)
        self._say("Deposit Funds selected.")
        if not self.user.bank_accounts:
            self._say("No bank accounts found to deposit into.")
            return
        self._say(f"Found {len(self.user.bank_accounts)} bank account(s).")
        index = self._ask_int("Choose an account to deposit into: ")
        amount = self._ask_float("Enter amount to deposit: ")
        account = self.user.account(index)
        account.deposit(amount)
        self._say(f"Deposited {amount:.2f} into your account.")
        self._say(f"Current Balance: {account.balance:.2f}")

    def withdraw_funds(self) -> None:
        _clear_screen(self.out)
        self._say("Withdraw Funds Selected.")
        index = self._ask_int("Choose what account to withdraw from: ")
        if not self.user.bank_accounts:
            self._say("No bank accounts found to withdraw from.")
            return
        account = self.user.account(index)
        amount = self._ask_float("Enter amount to withdraw: ")
        account.withdraw(amount)
        self._say(f"Withdrew {amount:.2f} from your account.")
        self._say(f"Current Balance: {account.balance:.2f}")

    def set_income(self) -> None:
        _clear_screen(self.out)
        self._say("Set Income Selected.")
        amount = self._ask_float("Enter income: ")
        self.user.income = amount
        self._say(f"Income has been set to {amount:.2f}.")
        self._say(f"Current Income: {self.user.income:.2f}")

    def create_bank_account(self) -> None:
        """Open an account; anything but 1 at the follow-up prompt exits."""
        _clear_screen(self.out)
        self._say("Create Bank Account Selected.")
        balance = self._ask_float("Enter Initial Balance: ")
        name = self._ask("Enter Account Name: ")
        account = self._open_account(balance, name)
        self._say("Account Created!")
        answer = self._ask("Press 1 to View the New Account: ")
        if answer == "1":
            self.out.write(account.details())
        else:
            self._say("Invalid input, exiting...")
            raise SystemExit(0)

    def view_financial_summary(self) -> None:
        _clear_screen(self.out)
        self._say("Financial Summary:")
        self._say(f"Current Income: {self.user.income:.2f}")
        self._say("Bank Accounts Info:")
        for account in self.user.bank_accounts:
            self.out.write(account.details())
        self._say("Bills:")
        for bill in self.user.bills:
            self.out.write(bill.details())
        self._say("Debts:")
        for debt in self.user.debts:
            self.out.write(debt.details())
        self._say(f"Total Monthly Bills: {self.user.total_monthly_bills():.2f}")
        self._say(f"Total Monthly Debts: {self.user.total_monthly_debts():.2f}")

    def _list_bills(self) -> bool:
        if not self.user.bills:
            self._say("No bills found.")
            return False
        for index, bill in enumerate(self.user.bills):
            self._say(f"[{index}] {bill.amount:.2f} due {bill.due_date} {bill.description}")
        return True

    def _list_debts(self) -> bool:
        if not self.user.debts:
            self._say("No debts found.")
            return False
        for index, debt in enumerate(self.user.debts):
            self._say(f"[{index}] {debt.name} monthly {debt.monthly_payment():.2f}")
        return True

    def pay_bill(self) -> None:
        _clear_screen(self.out)
        self._say("Pay Bill:")
        if not self._list_bills():
            return
        index = self._ask_int("Select Which Bill To Pay: ")
        amount = self._ask_float("Enter payment amount: ")
        account = self._ask_int("Select the account to pay from: ")
        self.user.pay_bill(index, amount, account)
        self._say(f"Paid {amount:.2f} towards bill {index}.")

    def pay_debt(self) -> None:
        _clear_screen(self.out)
        self._say("Pay Debt:")
        if not self._list_debts():
            return
        index = self._ask_int("Select Which Debt To Pay: ")
        amount = self._ask_float("Enter payment amount: ")
        account = self._ask_int("Select the account to pay from: ")
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            self.user.pay_debt(index, amount, account)
        for warning in caught:
            self._say(str(warning.message))
        self._say(f"Paid {amount:.2f} towards debt {index}.")

    def payoff_bill(self) -> None:
        _clear_screen(self.out)
        self._say("Payoff Bill:")
        if not self._list_bills():
            return
        index = self._ask_int("Select Which Bill To Pay Off: ")
        account = self._ask_int("Select the account to pay from: ")
        bill = self.user.payoff_bill(index, account)
        self._say(f"Paid off bill due on: {bill.due_date}")

    def payoff_debt(self) -> None:
        _clear_screen(self.out)
        self._say("Payoff Debt:")
        if not self._list_debts():
            return
        index = self._ask_int("Select Which Debt To Pay Off: ")
        account = self._ask_int("Select the account to pay from: ")
        debt = self.user.payoff_debt(index, account)
        self.out.write(debt.details())

    def add_bill(self) -> None:
        _clear_screen(self.out)
        self._say("Add Bill:")
        amount = self._ask_float("Enter bill amount: ")
        due_date = self._ask("Enter due date: ")
        description = self._ask("Enter description: ")
        category = self._ask("Enter category: ")
        self.user.add_bill(Bill(amount, due_date, description, category))
        self._say("Bill added.")

    def add_debt(self) -> None:
        _clear_screen(self.out)
        self._say("Add Debt:")
        principal = self._ask_float("Enter principal: ")
        rate = self._ask_float("Enter yearly interest rate (%): ")
        term = self._ask_int("Enter term in months: ")
        name = self._ask("Enter a name for the debt: ")
        self.user.add_debt(Debt(principal, rate, term, name))
        self._say("Debt added.")

    def logout_and_exit(self) -> None:
        self._say("Logging out and exiting.")
        self.user.logout()
        self.running = False