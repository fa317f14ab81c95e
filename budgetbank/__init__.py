"""Interactive budgeting app for bank accounts, income, bills and debts."""

__version__ = "0.1.0"
__all__ = ["__version__"]