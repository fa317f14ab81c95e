# budgetbank

A small interactive budgeting app for the terminal. Register a user, log in,
then keep track of bank accounts, income, bills and debts.

## Installing

```
pip install .
```

## Running

```
budgetbank
```

Options:

- `--users-file PATH`: file of registered users (default `users.txt`)
- `--accounts-file PATH`: file of bank accounts (default `accounts.txt`)

Both default paths are relative to the current working directory.

The intro menu offers:

1. Login: asks for a username and password until they match a registered user.
2. Register: asks for a username and password, registers the user with the
   next free id, then asks you to log in.
3. Exit.

Once logged in, the account menu offers:

1. View Account Details (offers to create an account if you have none)
2. Deposit Funds
3. Withdraw Funds
4. Set Income
5. Create Bank Account
6. View Financial Summary (income, accounts, bills, debts and monthly totals)
7. Pay Bill
8. Pay Debt
9. Payoff Bill (pays the full bill amount)
10. Payoff Debt (pays one monthly instalment)
11. Add Bill
12. Add Debt
13. Log out and Exit

Accounts are chosen by their index, starting at 0. Errors such as an
insufficient balance or an invalid index are printed and the menu is shown
again. After creating a bank account you are asked to press 1 to view it;
any other answer ends the program. End of input (Ctrl-D) logs out.

## Files

Each line of the users file is `username,password,id`; each line of the
accounts file is `username,account_name,balance`. Passwords are stored as
plain text. Accounts are loaded for a user when the user is loaded, and a
line is appended whenever an account is created.

## What is not saved

Only users and newly created accounts are written to disk. Income, bills,
debts, and changes to balances from deposits, withdrawals and payments live
in memory and are lost when the program ends; the balance stored for an
account is always its initial balance.

## Using it as a library

```python
from budgetbank.account import Account, InsufficientFundsError
from budgetbank.bill import Bill
from budgetbank.debt import Debt

account = Account(100.0, "checking")
account.deposit(50.0)          # negative amounts raise ValueError
try:
    account.withdraw(500.0)
except InsufficientFundsError:
    print("not enough money")

loan = Debt(1200.0, 6.0, 12, "car")   # yearly rate in percent
print(loan.monthly_payment(), loan.total_payment())

rent = Bill(800.0, "2024-01-01", "rent", "housing")
print(rent.details())
```

`Debt.monthly_payment()` returns NaN when the interest rate is zero.

`budgetbank.user.User` gathers accounts, bills and debts for one person:
`create_bank_account`, `account`, `add_bill`, `add_debt`,
`total_monthly_bills`, `total_monthly_debts`, `pay_bill`, `pay_debt`,
`payoff_bill` and `payoff_debt`. `pay_bill` raises `ValueError` if the
amount is below the bill; `pay_debt` issues a warning if the amount is below
the monthly payment. `budgetbank.user.load_accounts(path, username)` reads a
user's accounts from an accounts file.

`budgetbank.users.Users` loads the users file, and provides `register_user`,
`validate_credentials` and `login_user`, which raises
`InvalidCredentialsError` for a wrong username or password.

`budgetbank.account_menu.AccountMenu`, `budgetbank.intro_menu.IntroMenu` and
`budgetbank.bank_app.BankApp` take an optional input function and output
stream, so the menus can be driven from code.

## Tests

```
pip install .[test]
pytest
```