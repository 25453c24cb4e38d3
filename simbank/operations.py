"""
Interactive transactions – one function per menu entry.

Every function takes the Session and the Console. Each prompted field runs
its own validation loop; NoAccountError and MissingRateError are raised
out of the operation for the menu controller to report.
"""
from typing import Optional, Sequence

from .console import Console
from .currency import ALL_INDICES, CATALOG, FOREIGN_INDICES, RateTable
from .errors import RangeError
from .session import Session
from .validation import (
    parse_account_name, parse_amount, parse_currency_index, parse_days,
    parse_rate, parse_yes_no, prompt_until_valid,
)


# ── Display helpers ───────────────────────────────────────────────────────────

def show_account(session: Session, console: Console) -> None:
    account = session.account
    console.say(f"Account Name: {account.name}")
    console.say(f"Current Balance: {account.balance:.2f}")
    console.say(f"Currency: {account.currency.symbol}")
    console.say()


def show_currencies(console: Console, indices: Sequence[int] = ALL_INDICES,
                    rates: Optional[RateTable] = None) -> None:
    on_record = rates.recorded() if rates is not None else None
    for index in indices:
        c = CATALOG[index]
        line = f"[{c.index}]. {c.name} ({c.symbol})"
        if on_record is not None:
            line += f" - {on_record[index]:g}" if index in on_record else " - not recorded"
        console.say(line)
    console.say()


# ── Transactions ──────────────────────────────────────────────────────────────

def register_account_name(session: Session, console: Console) -> None:
    console.say("Register Account Name")
    if session.account.is_registered:
        console.say("An account already exists.")
        return
    name = prompt_until_valid(console, "Enter Account Name: ", parse_account_name)
    session.register(name)
    console.say(f"Account '{name}' registered.")


def deposit_amount(session: Session, console: Console) -> None:
    session.account.require_registered()
    console.say("Deposit Amount")
    show_account(session, console)

    def accept(text):
        return session.deposit(parse_amount(text))

    balance = prompt_until_valid(console, "Deposit Amount: ", accept)
    console.say(f"New Balance: {balance:.2f}")


def withdraw_amount(session: Session, console: Console) -> None:
    session.account.require_registered()
    console.say("Withdraw Amount")
    show_account(session, console)

    # The balance check runs against the balance at the time of each attempt.
    def accept(text):
        return session.withdraw(parse_amount(text))

    balance = prompt_until_valid(console, "Withdraw Amount: ", accept)
    console.say(f"New Balance: {balance:.2f}")


def _select_rated_currency(session: Session, text: str, exclude: Optional[int] = None) -> int:
    index = parse_currency_index(text)
    if index == exclude:
        raise RangeError("Invalid choice! Source and exchange currency must differ.")
    session.rates.require(index)
    return index


def currency_exchange(session: Session, console: Console) -> None:
    session.account.require_registered()
    while True:
        console.say("Foreign Currency Exchange")
        show_currencies(console)

        source = prompt_until_valid(console, "Source Currency Option: ",
                                    lambda text: _select_rated_currency(session, text))
        amount = prompt_until_valid(console, "Source Amount: ",
                                    lambda text: parse_amount(text, "Invalid Amount!"))

        console.say("Exchanged Currency Options:")
        show_currencies(console)
        target = prompt_until_valid(console, "Exchange Currency: ",
                                    lambda text: _select_rated_currency(session, text, exclude=source))

        exchanged = session.exchange(amount, source, target)
        console.say(f"Exchanged Amount: {exchanged:.2f} {CATALOG[target].symbol}")

        again = prompt_until_valid(console, "Convert Another Currency (Y/N)?: ",
                                   lambda text: parse_yes_no(text, "Invalid input. Try again!"))
        if again == "N":
            return


def record_exchange_rate(session: Session, console: Console) -> None:
    session.account.require_registered()
    console.say("Record Exchange Rates")
    show_currencies(console, FOREIGN_INDICES, session.rates)

    index = prompt_until_valid(console, "Select Foreign Currency: ",
                               lambda text: parse_currency_index(text, FOREIGN_INDICES))
    rate = prompt_until_valid(console, "Exchange Rate: ", parse_rate)
    session.record_rate(index, rate)
    console.say(f"Recorded rate: 1 {CATALOG[index].symbol} = {rate:g} {session.account.currency.symbol}")


def show_interest_computation(session: Session, console: Console) -> None:
    session.account.require_registered()
    console.say("Show Interest Amount")
    show_account(session, console)
    console.say(f"Interest Rate: {session.annual_rate * 100:g}%")
    console.say()

    days = prompt_until_valid(console, "Total Number of Days: ", parse_days)
    rows = session.project_interest(days)

    console.say(f"{'Day':<5} | {'Interest':<10} | Balance")
    for row in rows:
        console.say(f"{row.day:<5} | {row.interest:<10.2f} | {row.balance:.2f}")


# Menu number -> (label, operation)
OPERATIONS = {
    1: ("Register Account Name", register_account_name),
    2: ("Deposit Amount", deposit_amount),
    3: ("Withdraw Amount", withdraw_amount),
    4: ("Currency Exchange", currency_exchange),
    5: ("Record Exchange Rates", record_exchange_rate),
    6: ("Show Interest Computation", show_interest_computation),
}
