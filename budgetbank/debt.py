"""Amortised debts."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Debt:
    """A loan repaid in equal monthly instalments.

    ``interest_rate`` is the yearly rate in percent.
    """

    principal: float
    interest_rate: float
    term_months: int
    name: str = ""

    def monthly_payment(self) -> float:
        """Return the fixed monthly instalment (NaN for a zero rate)."""
        monthly_rate = self.interest_rate / 12.0 / 100.0
        denominator = 1 - (1 + monthly_rate) ** -self.term_months
        if denominator == 0:
            return math.nan
        return (self.principal * monthly_rate) / denominator

    def total_payment(self) -> float:
        """Return the sum of all instalments."""
        return self.monthly_payment() * self.term_months

    def details(self) -> str:
        """Return a printable summary of the debt."""
        return (
            "Debt Details:\n"
            f"Name: {self.name}\n"
            f"Principal: {self.principal:.2f}\n"
            f"Interest Rate: {self.interest_rate:.2f}%\n"
            f"Term (months): {self.term_months}\n"
            f"Monthly Payment: {self.monthly_payment():.2f}\n"
            f"Total Payment: {self.total_payment():.2f}\n"
        )