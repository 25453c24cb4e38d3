"""
Simple daily interest projection.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Iterator

from .errors import RangeError

logger = logging.getLogger(__name__)

_MINOR = Decimal("0.01")

# Wide enough to quantize any finite float to two decimals.
_PRECISION = 400


def round2(value: float) -> float:
    """Round to two decimals, half-up."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return float(Decimal(str(value)).quantize(_MINOR, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class InterestRow:
    day: int
    interest: float
    balance: float


def daily_interest(balance: float, annual_rate: float, days_in_year: int) -> float:
    """One day's interest on `balance`, rounded to two decimals."""
    return round2(balance * (annual_rate / days_in_year))


def project_interest(balance: float, days: int, annual_rate: float = 0.05,
                     days_in_year: int = 365) -> Iterator[InterestRow]:
    """
    Project `days` rows of simple interest, one row at a time.

    The daily amount is computed once from the starting balance and added
    unchanged every day; it is not recomputed on the running total.
    """
    if days < 0:
        raise RangeError("Number of days cannot be negative.")
    interest = daily_interest(balance, annual_rate, days_in_year)
    logger.info("Projecting %d day(s) at %s/day from balance %s", days, interest, balance)
    return _rows(balance, days, interest)


def _rows(balance: float, days: int, interest: float) -> Iterator[InterestRow]:
    total = balance
    for day in range(1, days + 1):
        total += interest
        yield InterestRow(day, interest, total)
