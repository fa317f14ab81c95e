import io

import pytest

from budgetbank.account import Account
from budgetbank.account_menu import AccountMenu
from budgetbank.bill import Bill
from budgetbank.debt import Debt
from budgetbank.user import User, load_accounts


def scripted(*answers):
    pending = list(answers)

    def fake_input(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return fake_input


@pytest.fixture
def user(tmp_path):
    return User("alice", "password", tmp_path / "accounts.txt")


def make_menu(user, *answers):
    out = io.StringIO()
    return AccountMenu(user, scripted(*answers), out), out


def test_deposit_adds_to_chosen_account(user):
    user.bank_accounts.append(Account(100.0, "checking"))
    menu, out = make_menu(user, "0", "50")
    menu.handle_user_selection(2)
    assert user.bank_accounts[0].balance == pytest.approx(150.0)
    assert "Deposited 50.00 into your account." in out.getvalue()


def test_deposit_without_accounts(user):
    menu, out = make_menu(user)
    menu.handle_user_selection(2)
    assert "No bank accounts found to deposit into." in out.getvalue()


def test_negative_deposit_is_reported(user):
    user.bank_accounts.append(Account(100.0, "checking"))
    menu, out = make_menu(user, "0", "-5")
    menu.handle_user_selection(2)
    assert user.bank_accounts[0].balance == 100.0
    assert "Deposit amount must be positive." in out.getvalue()


def test_withdraw_insufficient_funds_keeps_balance(user):
    user.bank_accounts.append(Account(100.0, "checking"))
    menu, out = make_menu(user, "0", "500")
    menu.handle_user_selection(3)
    assert user.bank_accounts[0].balance == 100.0
    assert "Insufficient funds for withdrawal of 500.00" in out.getvalue()


def test_withdraw_invalid_account(user):
    user.bank_accounts.append(Account(100.0, "checking"))
    menu, out = make_menu(user, "3")
    menu.handle_user_selection(3)
    assert "Invalid account selection." in out.getvalue()


def test_set_income(user):
    menu, _ = make_menu(user, "1200")
    menu.handle_user_selection(4)
    assert user.income == 1200.0


def test_create_bank_account_persists(user, tmp_path):
    menu, out = make_menu(user, "25", "savings", "1")
    menu.handle_user_selection(5)
    assert [account.name for account in user.bank_accounts] == ["savings"]
    loaded = load_accounts(tmp_path / "accounts.txt", "alice")
    assert loaded == user.bank_accounts
    assert user.bank_accounts[0].details() in out.getvalue()


def test_create_bank_account_other_answer_exits(user):
    menu, _ = make_menu(user, "25", "savings", "2")
    with pytest.raises(SystemExit):
        menu.handle_user_selection(5)


def test_view_details_offers_account_creation(user):
    menu, _ = make_menu(user, "y", "40", "wallet")
    menu.handle_user_selection(1)
    assert [(a.name, a.balance) for a in user.bank_accounts] == [("wallet", 40.0)]


def test_view_details_lists_accounts(user):
    account = Account(75.0, "checking")
    user.bank_accounts.append(account)
    menu, out = make_menu(user)
    menu.handle_user_selection(1)
    assert account.details() in out.getvalue()


def test_add_bill(user):
    menu, _ = make_menu(user, "60", "2024-05-01", "Power", "Utilities")
    menu.handle_user_selection(11)
    assert user.bills == [Bill(60.0, "2024-05-01", "Power", "Utilities")]


def test_add_debt(user):
    menu, _ = make_menu(user, "1200", "12", "12", "car")
    menu.handle_user_selection(12)
    assert user.debts == [Debt(1200.0, 12.0, 12, "car")]


def test_pay_bill_withdraws_amount(user):
    user.bank_accounts.append(Account(100.0, "checking"))
    user.add_bill(Bill(30.0, "2024-05-01"))
    menu, _ = make_menu(user, "0", "30", "0")
    menu.handle_user_selection(7)
    assert user.bank_accounts[0].balance == pytest.approx(70.0)


def test_pay_bill_below_amount_is_reported(user):
    user.bank_accounts.append(Account(100.0, "checking"))
    user.add_bill(Bill(30.0, "2024-05-01"))
    menu, out = make_menu(user, "0", "10", "0")
    menu.handle_user_selection(7)
    assert user.bank_accounts[0].balance == 100.0
    assert "Payment amount is less than the bill amount of 30.00" in out.getvalue()


def test_pay_debt_below_monthly_warns_and_pays(user):
    user.bank_accounts.append(Account(1000.0, "checking"))
    user.add_debt(Debt(1200.0, 12.0, 12, "car"))
    menu, out = make_menu(user, "0", "50", "0")
    menu.handle_user_selection(8)
    assert "Payment amount is less than the monthly payment" in out.getvalue()
    assert user.bank_accounts[0].balance == pytest.approx(950.0)


def test_payoff_bill(user):
    user.bank_accounts.append(Account(100.0, "checking"))
    user.add_bill(Bill(40.0, "2024-06-01"))
    menu, out = make_menu(user, "0", "0")
    menu.handle_user_selection(9)
    assert user.bank_accounts[0].balance == pytest.approx(60.0)
    assert "Paid off bill due on: 2024-06-01" in out.getvalue()


def test_payoff_debt(user):
    user.bank_accounts.append(Account(1000.0, "checking"))
    debt = Debt(1200.0, 12.0, 12, "car")
    user.add_debt(debt)
    menu, out = make_menu(user, "0", "0")
    menu.handle_user_selection(10)
    assert user.bank_accounts[0].balance == pytest.approx(1000.0 - debt.monthly_payment())
    assert debt.details() in out.getvalue()


def test_financial_summary_includes_items(user):
    bill = Bill(60.0, "2024-05-01", "Power", "Utilities")
    debt = Debt(1200.0, 12.0, 12, "car")
    user.add_bill(bill)
    user.add_debt(debt)
    menu, out = make_menu(user)
    menu.handle_user_selection(6)
    text = out.getvalue()
    assert bill.details() in text
    assert debt.details() in text


def test_display_menu_logs_out(user):
    user.login()
    menu, out = make_menu(user, "13")
    menu.display_menu()
    assert not user.is_logged_in
    assert "Logging out and exiting." in out.getvalue()


def test_display_menu_reports_invalid_choice(user):
    menu, out = make_menu(user, "99", "abc", "13")
    menu.display_menu()
    assert out.getvalue().count("Invalid choice. Please try again.") == 2
    assert not menu.running