"""
Data-driven Command variant.

Here a command is plain data (what to do and how much) and the receiver decides
how to process it, recording the outcome back on the command. There is no undo
and no overdraft: a withdrawal needs the full amount on the balance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from behavioral.command.bank_account_command import Action

logger = logging.getLogger(__name__)

__all__ = ["Transaction", "SimpleAccount"]


@dataclass(slots=True)
class Transaction:
    """
    A request to move money, processed by `SimpleAccount.process`.

    :param action: Action.DEPOSIT or Action.WITHDRAW.
    :param amount: Amount to move.
    :param success: Outcome of the last processing; False until processed.
    """
    action: Action
    amount: int = 0
    success: bool = False


@dataclass(slots=True)
class SimpleAccount:
    balance: int = 0

    def process(self, transaction: Transaction) -> bool:
        """
        Applies a transaction and stores the outcome on it.

        :param transaction: Transaction to apply; may be re-used with new values.
        :return: The transaction's new `success` value.
        """
        if transaction.action is Action.DEPOSIT:
            self.balance += transaction.amount
            transaction.success = True
        else:
            transaction.success = self.balance >= transaction.amount
            if transaction.success:
                self.balance -= transaction.amount
            else:
                logger.info("Refused withdrawal of %d, balance is %d", transaction.amount, self.balance)
        return transaction.success

    def process_all(self, transactions: Iterable[Transaction]) -> int:
        """
        Processes transactions in order; a failure does not stop the rest.

        :param transactions: Transactions to apply.
        :return: Number of successful transactions.
        """
        return sum(1 for t in transactions if self.process(t))
