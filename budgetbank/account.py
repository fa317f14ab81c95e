"""Bank accounts holding a balance."""

from __future__ import annotations

from dataclasses import dataclass


class InsufficientFundsError(ValueError):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, amount: float, balance: float) -> None:
        super().__init__(f"Insufficient funds for withdrawal of {amount:.2f}")
        self.amount = amount
        self.balance = balance


@dataclass
class Account:
    """A named bank account."""

    balance: float
    name: str
    income_vs_expense: float = 0.0
    is_negative_balance: bool = False

    def deposit(self, amount: float) -> None:
        """Add a non-negative amount to the balance."""
        if amount < 0:
            raise ValueError("Deposit amount must be positive.")
        self.balance += amount

    def withdraw(self, amount: float) -> None:
        """Take an amount from the balance; it may not exceed the balance."""
        if amount > self.balance:
            raise InsufficientFundsError(amount, self.balance)
        self.balance -= amount

    def details(self) -> str:
        """Return a printable summary of the account."""
        lines = [
            f"Account Balance: {self.balance:.2f}",
            f"Income vs Expense: {self.income_vs_expense:.2f}",
        ]
        if self.is_negative_balance:
            lines.append("Warning: Account has a negative balance!")
        return "\n".join(lines) + "\n"