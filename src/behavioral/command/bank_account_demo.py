"""
bank_account_demo.py — walk-through of the bank account commands.

Run with ``python -m behavioral.command.bank_account_demo``; every step is
reported on the ``behavioral.command.bank_account_demo`` logger.
"""

import logging

from behavioral.command.account_processing import SimpleAccount, Transaction
from behavioral.command.bank_account_command import (
    Action, BankAccount, BankAccountCommand, CompositeCommand,
    DependentCompositeCommand, TransferCommand,
)

logger = logging.getLogger(__name__)


def _simple_commands() -> None:
    account = SimpleAccount()
    for transaction in (Transaction(Action.DEPOSIT, 100),
                        Transaction(Action.WITHDRAW, 50),
                        Transaction(Action.WITHDRAW, 100)):
        account.process(transaction)
        logger.info("%s %d: success=%s, balance=%d",
                    transaction.action.name.lower(), transaction.amount,
                    transaction.success, account.balance)


def _single_commands() -> None:
    account = BankAccount("main")
    deposit = BankAccountCommand(account, Action.DEPOSIT, 100)
    withdraw = BankAccountCommand(account, Action.WITHDRAW, 50)
    for cmd in (deposit, withdraw):
        cmd.execute()
        logger.info("%s: balance=%d", cmd.description, account.balance)
    for cmd in (withdraw, deposit):
        cmd.undo()
        logger.info("Undo %s: balance=%d", cmd.description, account.balance)


def _batches() -> None:
    account = BankAccount("batch")
    batch = CompositeCommand([
        BankAccountCommand(account, Action.DEPOSIT, 500),
        BankAccountCommand(account, Action.WITHDRAW, 200),
        BankAccountCommand(account, Action.WITHDRAW, 100),
    ])
    batch.execute()
    logger.info("Batch executed: balance=%d", account.balance)
    batch.undo()
    logger.info("Batch undone: balance=%d", account.balance)

    account.deposit(100)
    dependent = DependentCompositeCommand([
        BankAccountCommand(account, Action.WITHDRAW, 700),
        BankAccountCommand(account, Action.DEPOSIT, 100),
    ])
    dependent.execute()
    logger.info("Dependent batch: succeeded=%s, balance=%d", dependent.succeeded, account.balance)


def _transfers() -> None:
    source, destination = BankAccount("from"), BankAccount("to")
    source.deposit(1000)

    transfer = TransferCommand(source, destination, 300)
    transfer.execute()
    logger.info("%s: succeeded=%s, from=%d, to=%d",
                transfer.description, transfer.succeeded, source.balance, destination.balance)
    transfer.undo()
    logger.info("Undo transfer: from=%d, to=%d", source.balance, destination.balance)

    blocked = TransferCommand(source, destination, 2000)
    blocked.execute()
    logger.info("%s: succeeded=%s, from=%d, to=%d",
                blocked.description, blocked.succeeded, source.balance, destination.balance)


def main() -> int:
    for title, step in (("Data-driven commands", _simple_commands),
                        ("Individual commands with undo", _single_commands),
                        ("Composite commands", _batches),
                        ("Money transfers", _transfers)):
        logger.info("--- %s ---", title)
        step()
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    raise SystemExit(main())
