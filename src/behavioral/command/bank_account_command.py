from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "AccountError",
    "BankAccount",
    "Action",
    "Command",
    "BankAccountCommand",
    "CompositeCommand",
    "DependentCompositeCommand",
    "AtomicCompositeCommand",
    "TransferCommand",
]


# ==========================
# Module: bank_account_command
# Purpose: Reversible deposit/withdraw commands against an in-memory account,
#          grouped into unconditional, dependent (fail-fast) and atomic composites.
# Failures are reported through the `succeeded` flag, never raised.
# ==========================


class AccountError(ValueError):
    """
    Raised when an account operation is called with an invalid amount.
    Insufficient funds is not an error; it is reported as a failed withdrawal.
    """


@dataclass(slots=True)
class BankAccount:
    """
    Simple bank account receiver.

    :param name: Account identifier used in descriptions and logs.
    :param balance: Current balance.
    :param overdraft_limit: Lowest balance a withdrawal may reach (e.g., -500).
    """
    name: str = "account"
    balance: int = 0
    overdraft_limit: int = -500

    def deposit(self, amount: int) -> None:
        """
        Adds money to the account. Always succeeds.

        :param amount: Amount to add; must be >= 0.
        :raises AccountError: If the amount is negative.
        """
        _check_amount(amount)
        self.balance += amount
        logger.debug("Deposited %d to %s, balance now %d", amount, self.name, self.balance)

    def withdraw(self, amount: int) -> bool:
        """
        Removes money if the overdraft limit allows it.

        :param amount: Amount to remove; must be >= 0.
        :return: True if withdrawn; False if it would go below the overdraft limit.
        :raises AccountError: If the amount is negative.
        """
        _check_amount(amount)
        if self.balance - amount < self.overdraft_limit:
            logger.info("Cannot withdraw %d from %s, would exceed overdraft limit %d",
                        amount, self.name, self.overdraft_limit)
            return False
        self.balance -= amount
        logger.debug("Withdrew %d from %s, balance now %d", amount, self.name, self.balance)
        return True


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise AccountError(f"Amount must be non-negative, got {amount}.")


class Action(Enum):
    DEPOSIT = auto()
    WITHDRAW = auto()


class Command(ABC):
    """
    Base interface for reversible commands.

    `succeeded` is None until the command runs, then True or False.
    `undo()` must be a no-op for a command that did not succeed.

    :param description: Short, human-readable description of the command.
    """

    def __init__(self, description: str) -> None:
        self._description = description
        self.succeeded: Optional[bool] = None

    @property
    def description(self) -> str:
        """
        :return: Command description string.
        """
        return self._description

    @abstractmethod
    def execute(self) -> None:
        """
        Performs the action and records the outcome in `succeeded`.
        """

    @abstractmethod
    def undo(self) -> None:
        """
        Reverses the effects of `execute()`.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._description!r}, succeeded={self.succeeded})"


class BankAccountCommand(Command):
    """
    Deposits into or withdraws from a single account. Undo applies the inverse operation.

    :param account: Target account (referenced, never copied).
    :param action: Action.DEPOSIT or Action.WITHDRAW.
    :param amount: Amount to move; must be >= 0.
    """

    def __init__(self, account: BankAccount, action: Action, amount: int) -> None:
        _check_amount(amount)
        verb = "Deposit" if action is Action.DEPOSIT else "Withdraw"
        super().__init__(description=f"{verb} {amount} ({account.name})")
        self._account = account
        self._action = action
        self._amount = amount

    @property
    def account(self) -> BankAccount:
        return self._account

    @property
    def action(self) -> Action:
        return self._action

    @property
    def amount(self) -> int:
        return self._amount

    def execute(self) -> None:
        """Apply the action; a deposit always succeeds, a withdrawal may be refused."""
        if self._action is Action.DEPOSIT:
            self._account.deposit(self._amount)
            self.succeeded = True
        else:
            self.succeeded = self._account.withdraw(self._amount)

    def undo(self) -> None:
        """Apply the inverse action, only if `execute()` succeeded."""
        if not self.succeeded:
            return
        if self._action is Action.DEPOSIT:
            if not self._account.withdraw(self._amount):
                logger.warning("Undo of '%s' refused by %s (balance %d)",
                               self._description, self._account.name, self._account.balance)
        else:
            self._account.deposit(self._amount)


class CompositeCommand(Command):
    """
    Runs an ordered sequence of commands. Every sub-command is executed even if an
    earlier one failed; undo walks the sequence in reverse and relies on each
    sub-command's own guard.

    :param items: Ordered sub-commands; composites may be nested.
    :param description: Short description for the composite.
    """

    def __init__(self, items: Optional[Iterable[Command]] = None, description: str = "Composite") -> None:
        super().__init__(description=description)
        self._items: List[Command] = list(items) if items else []

    def add(self, cmd: Command) -> None:
        """
        Appends a sub-command to the composite.

        :param cmd: Command to add.
        """
        self._items.append(cmd)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Command:
        return self._items[index]

    def execute(self) -> None:
        for cmd in self._items:
            cmd.execute()
        self.succeeded = True
        logger.debug("Composite '%s' ran %d commands", self._description, len(self._items))

    def undo(self) -> None:
        # No aggregate check here: each sub-command ignores undo if it did not succeed.
        for cmd in reversed(self._items):
            cmd.undo()


class DependentCompositeCommand(CompositeCommand):
    """
    Fail-fast composite: each sub-command runs only if every earlier one succeeded.

    On the first failure execution stops, later sub-commands keep `succeeded is None`
    and the composite reports `succeeded = False`. Sub-commands that already ran are
    left applied. Undo is allowed only after overall success.
    """

    def __init__(self, items: Optional[Iterable[Command]] = None,
                 description: str = "Dependent composite") -> None:
        super().__init__(items, description=description)

    def execute(self) -> None:
        self.succeeded = self._run_until_failure() is None

    def undo(self) -> None:
        if not self.succeeded:
            return
        super().undo()

    def _run_until_failure(self) -> Optional[int]:
        """
        Executes sub-commands in order and stops at the first failure.

        :return: Index of the failing sub-command, or None if all succeeded.
        """
        for index, cmd in enumerate(self._items):
            cmd.execute()
            if not cmd.succeeded:
                logger.info("Composite '%s' stopped at '%s' (%d of %d)",
                            self._description, cmd.description, index + 1, len(self._items))
                return index
        return None


class AtomicCompositeCommand(DependentCompositeCommand):
    """
    All-or-nothing composite: like the dependent composite, but on failure the
    sub-commands that already succeeded are undone in reverse order, so a failed
    run leaves every account as it found it.
    """

    def __init__(self, items: Optional[Iterable[Command]] = None,
                 description: str = "Atomic composite") -> None:
        super().__init__(items, description=description)

    def execute(self) -> None:
        failed_at = self._run_until_failure()
        if failed_at is None:
            self.succeeded = True
            return
        for cmd in reversed(self._items[:failed_at]):
            cmd.undo()
        logger.info("Composite '%s' rolled back %d commands", self._description, failed_at)
        self.succeeded = False


class TransferCommand(DependentCompositeCommand):
    """
    Moves money between two accounts: withdraw from source, then deposit to destination.
    If the withdrawal is refused the deposit never runs and both balances are unchanged.

    :param source: Account to withdraw from.
    :param destination: Account to deposit into.
    :param amount: Amount to transfer; must be >= 0.
    """

    def __init__(self, source: BankAccount, destination: BankAccount, amount: int) -> None:
        super().__init__(
            [
                BankAccountCommand(source, Action.WITHDRAW, amount),
                BankAccountCommand(destination, Action.DEPOSIT, amount),
            ],
            description=f"Transfer {amount} {source.name} -> {destination.name}",
        )
