import logging

from behavioral.command import bank_account_demo


def test_demo_reports_every_step(caplog):
    with caplog.at_level(logging.INFO, logger="behavioral.command.bank_account_demo"):
        assert bank_account_demo.main() == 0
    text = caplog.text
    assert "--- Money transfers ---" in text
    assert "Batch executed: balance=200" in text
    assert "Batch undone: balance=0" in text
    assert "Dependent batch: succeeded=False, balance=100" in text
    assert "Transfer 300 from -> to: succeeded=True, from=700, to=300" in text
    assert "Undo transfer: from=1000, to=0" in text
    assert "Transfer 2000 from -> to: succeeded=False, from=1000, to=0" in text
