"""Bank accounts with per-kind withdrawal fees."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod

from .people import Holder


class WithdrawalError(Exception):
    """A withdrawal could not be made."""


class InsufficientFundsError(WithdrawalError):
    """The balance does not cover the amount plus its fee."""


class InvalidAmountError(WithdrawalError):
    """The amount plus its fee is not positive."""


class Account(ABC):
    """An account; the kind of account sets its withdrawal fee."""

    _live = 0

    def __init__(self, number: str, holder: Holder) -> None:
        self._number = number
        self._holder = holder
        self._balance = 0.0
        Account._live += 1
        weakref.finalize(self, Account._release)

    @staticmethod
    def _release() -> None:
        Account._live -= 1

    @classmethod
    def total_accounts(cls) -> int:
        """Number of accounts currently alive."""
        return Account._live

    @property
    def number(self) -> str:
        return self._number

    @property
    def holder(self) -> Holder:
        return self._holder

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> None:
        """Add to the balance; non-positive amounts are ignored."""
        if amount <= 0:
            return
        self._balance += amount

    def __iadd__(self, amount: float) -> Account:
        self.deposit(amount)
        return self

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._balance < other._balance

    def withdraw(self, amount: float) -> float:
        """Take the amount plus its fee from the balance and return the new balance."""
        total = amount + amount * self.withdrawal_fee()
        if total <= 0:
            raise InvalidAmountError(f"invalid amount: {amount}")
        if total > self._balance:
            raise InsufficientFundsError(
                f"balance {self._balance:.2f} does not cover {total:.2f}"
            )
        self._balance -= total
        return self._balance

    @abstractmethod
    def withdrawal_fee(self) -> float:
        """Fraction of a withdrawal charged as fee."""


class CheckingAccount(Account):
    """Checking account: 5% fee, may transfer to other accounts."""

    def withdrawal_fee(self) -> float:
        return 0.05

    def transfer(self, destination: Account, amount: float) -> None:
        """Move the amount to another account; nothing happens if the withdrawal fails."""
        try:
            self.withdraw(amount)
        except WithdrawalError:
            return
        destination.deposit(amount)


class SavingsAccount(Account):
    """Savings account: 3% fee."""

    def withdrawal_fee(self) -> float:
        return 0.03