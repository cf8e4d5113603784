import pytest
from behavioral.command.account_processing import SimpleAccount, Transaction
from behavioral.command.bank_account_command import Action


@pytest.mark.unit
def test_deposit_then_withdraw_then_refused():
    acc = SimpleAccount()
    assert acc.process(Transaction(Action.DEPOSIT, 100)) is True
    assert acc.balance == 100
    assert acc.process(Transaction(Action.WITHDRAW, 50)) is True
    assert acc.balance == 50
    bad = Transaction(Action.WITHDRAW, 100)
    acc.process(bad)
    assert bad.success is False
    assert acc.balance == 50


@pytest.mark.unit
def test_withdraw_exact_balance_and_zero():
    acc = SimpleAccount(balance=250)
    assert acc.process(Transaction(Action.WITHDRAW, 250)) is True
    assert acc.process(Transaction(Action.WITHDRAW, 0)) is True
    assert acc.process(Transaction(Action.WITHDRAW, 1)) is False
    assert acc.balance == 0


@pytest.mark.unit
def test_success_flag_starts_false_and_command_can_be_reused():
    acc = SimpleAccount()
    t = Transaction(Action.DEPOSIT, 100)
    assert t.success is False
    acc.process(t)
    t.action = Action.WITHDRAW
    t.amount = 50
    acc.process(t)
    assert t.success is True
    assert acc.balance == 50


@pytest.mark.unit
def test_process_all_counts_successes():
    acc = SimpleAccount()
    batch = [
        Transaction(Action.DEPOSIT, 1000),
        Transaction(Action.WITHDRAW, 300),
        Transaction(Action.DEPOSIT, 500),
        Transaction(Action.WITHDRAW, 1200),
        Transaction(Action.WITHDRAW, 1),
    ]
    assert acc.process_all(batch) == 4
    assert acc.balance == 0
    assert [t.success for t in batch] == [True, True, True, True, False]
