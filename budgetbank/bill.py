"""Recurring bills."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Bill:
    """A bill with an amount and a due date."""

    amount: float
    due_date: str
    description: str = ""
    category: str = ""

    def details(self) -> str:
        """Return a printable summary of the bill."""
        return (
            "Bill Details:\n"
            f"Amount: {self.amount:.2f}\n"
            f"Due Date: {self.due_date}\n"
            f"Description: {self.description}\n"
            f"Category: {self.category}\n"
        )