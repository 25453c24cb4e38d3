"""
Currency catalog and RateTable – exchange rates relative to the base currency.
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import MissingRateError, RangeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Currency:
    name: str
    symbol: str
    index: int


# Fixed, ordered catalog. Index 0 is the base currency.
CATALOG: List[Currency] = [
    Currency("Philippine Peso", "PHP", 0),
    Currency("United States Dollar", "USD", 1),
    Currency("Japanese Yen", "JPY", 2),
    Currency("British Pound Sterling", "GBP", 3),
    Currency("Euro", "EUR", 4),
    Currency("Chinese Yuan Renminbi", "CNY", 5),
]

BASE_INDEX = 0
BASE_CURRENCY = CATALOG[BASE_INDEX]

ALL_INDICES = range(0, len(CATALOG))
FOREIGN_INDICES = range(1, len(CATALOG))


def get_currency(index: int) -> Currency:
    """Return the catalog entry at `index`; raise RangeError outside the catalog."""
    if index not in ALL_INDICES:
        raise RangeError(f"Unsupported currency index: {index}")
    return CATALOG[index]


def convert(amount: float, source_rate: float, target_rate: float) -> float:
    """
    Convert `amount` between two currencies given their rates.

    Rates are units of base currency per 1 unit of the currency, so the
    amount goes to base by multiplying and out of base by dividing.
    """
    return amount * (source_rate / target_rate)


class RateTable:
    """
    Exchange rates relative to the base currency (PHP).

    A slot holds None until a rate is recorded for it; the base slot is
    always 1.0.
    """

    def __init__(self):
        self._rates: Dict[int, Optional[float]] = {c.index: None for c in CATALOG}
        self._rates[BASE_INDEX] = 1.0

    def get(self, index: int) -> Optional[float]:
        """Return the recorded rate for `index`, or None when it is absent."""
        get_currency(index)
        return self._rates[index]

    def require(self, index: int) -> float:
        """Return the recorded rate for `index`; raise MissingRateError when absent."""
        rate = self.get(index)
        if rate is None:
            raise MissingRateError()
        return rate

    def record(self, index: int, rate: float) -> None:
        """Set the rate for a foreign currency, overwriting any earlier value."""
        if index not in FOREIGN_INDICES:
            raise RangeError(f"Rate for currency index {index} cannot be recorded.")
        if not math.isfinite(rate) or rate <= 0:
            raise RangeError("Exchange rate must be greater than 0.")
        self._rates[index] = rate
        logger.info("Recorded rate 1 %s = %s %s", CATALOG[index].symbol, rate, BASE_CURRENCY.symbol)

    def quote(self, amount: float, source: int, target: int) -> float:
        """Convert `amount` of currency `source` into currency `target`."""
        return convert(amount, self.require(source), self.require(target))

    def recorded(self) -> Dict[int, float]:
        """Return every rate on record, keyed by currency index."""
        return {i: r for i, r in self._rates.items() if r is not None}

    def clear(self) -> None:
        """Forget every foreign rate; the base rate stays 1.0."""
        for index in FOREIGN_INDICES:
            self._rates[index] = None
