"""
SimBank – a single-account banking session driven from the terminal.
"""
from .account import Account
from .currency import BASE_CURRENCY, CATALOG, Currency, RateTable
from .menu import MenuController
from .session import Session

__all__ = [
    "Account", "BASE_CURRENCY", "CATALOG", "Currency", "MenuController",
    "RateTable", "Session",
]
