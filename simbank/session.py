"""
Session – the state of one program run: the account and the rate table.
"""
import logging
from typing import Iterator, Optional

from .account import Account
from .config import CONFIG
from .currency import CATALOG, RateTable
from .errors import RangeError
from .interest import InterestRow, project_interest

logger = logging.getLogger(__name__)


class Session:
    """
    Owns the Account and the RateTable for one run and exposes the guarded
    transactions over them. Built unregistered with a zero balance and no
    foreign rates; `close()` discards everything.
    """

    def __init__(self, annual_rate: Optional[float] = None, days_in_year: Optional[int] = None):
        self.account = Account()
        self.rates = RateTable()
        self.annual_rate = CONFIG["annual_interest_rate"] if annual_rate is None else annual_rate
        self.days_in_year = CONFIG["days_in_year"] if days_in_year is None else days_in_year
        self.closed = False

    def register(self, name: str) -> bool:
        return self.account.register(name)

    def deposit(self, amount: float) -> float:
        return self.account.deposit(amount)

    def withdraw(self, amount: float) -> float:
        return self.account.withdraw(amount)

    def record_rate(self, index: int, rate: float) -> None:
        self.account.require_registered()
        self.rates.record(index, rate)

    def exchange(self, amount: float, source: int, target: int) -> float:
        """
        Quote `amount` of currency `source` in currency `target`.
        The balance is not touched.
        """
        self.account.require_registered()
        if source == target:
            raise RangeError("Source and exchange currency must differ.")
        if amount <= 0:
            raise RangeError("Invalid Amount! Amount must be greater than 0.")
        result = self.rates.quote(amount, source, target)
        logger.info("Exchange quote %s %s -> %s %s",
                    amount, CATALOG[source].symbol, result, CATALOG[target].symbol)
        return result

    def project_interest(self, days: int) -> Iterator[InterestRow]:
        self.account.require_registered()
        return project_interest(self.account.balance, days, self.annual_rate, self.days_in_year)

    def close(self) -> None:
        """Discard the account and every recorded rate."""
        self.account.reset()
        self.rates.clear()
        self.closed = True
        logger.info("Session closed")
