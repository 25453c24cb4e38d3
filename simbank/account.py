"""
Account – the single registered account and its base-currency balance.
"""
import logging
import math
from typing import Optional

from .currency import BASE_CURRENCY, Currency
from .errors import InsufficientFundsError, NoAccountError, RangeError

logger = logging.getLogger(__name__)


class Account:
    """
    Holds the account name (set once) and the balance in the base currency.
    The balance never goes below zero.
    """

    def __init__(self):
        self.name: Optional[str] = None
        self.balance: float = 0.0
        self.currency: Currency = BASE_CURRENCY

    @property
    def is_registered(self) -> bool:
        return self.name is not None

    def register(self, name: str) -> bool:
        """
        Register `name` if no account exists yet.
        Returns False without touching the account when one is already registered.
        """
        if self.is_registered:
            logger.info("Registration ignored, account %r already exists", self.name)
            return False
        self.name = name
        logger.info("Registered account %r", name)
        return True

    def require_registered(self) -> None:
        """Raise NoAccountError if no name has been registered."""
        if not self.is_registered:
            raise NoAccountError()

    def deposit(self, amount: float) -> float:
        """Add a positive amount to the balance and return the new balance."""
        self.require_registered()
        _check_positive(amount)
        self.balance += amount
        logger.info("Deposit of %s, balance now %s", amount, self.balance)
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Subtract a positive amount no larger than the balance; return the new balance."""
        self.require_registered()
        _check_positive(amount)
        if _exceeds(amount, self.balance):
            raise InsufficientFundsError()
        # Never below zero, even with float residue.
        self.balance = max(self.balance - amount, 0.0)
        logger.info("Withdrawal of %s, balance now %s", amount, self.balance)
        return self.balance

    def reset(self) -> None:
        self.name = None
        self.balance = 0.0


def _check_positive(amount: float) -> None:
    if not math.isfinite(amount):
        raise RangeError("Invalid Input! Amount must be a finite number.")
    if amount <= 0:
        raise RangeError("Invalid Input! Amount must be greater than 0.")


def _exceeds(amount: float, balance: float) -> bool:
    """True if `amount` is more than `balance`, ignoring float residue."""
    return amount > balance and not math.isclose(amount, balance, rel_tol=1e-9, abs_tol=1e-9)
