"""
Input validation – pydantic models for every prompted field, plus the
reprompt loop that drives them.

Each parse_* function takes the raw text typed by the operator and either
returns the accepted value or raises one of:
  ParseError  – the text is not a number of the right kind
  RangeError  – the number (or text) is outside the allowed domain
"""
import logging
from typing import Callable, Sequence, TypeVar

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from .currency import ALL_INDICES
from .errors import InputRejected, ParseError, RangeError, UnrecognizedMenuChoice

logger = logging.getLogger(__name__)

T = TypeVar("T")

MENU_OPTIONS = range(1, 7)

# pydantic error types that mean "could not read a number at all"
_PARSE_ERROR_TYPES = {
    "float_parsing", "float_type", "finite_number",
    "int_parsing", "int_parsing_size", "int_type", "int_from_float",
}


# ── Field models ──────────────────────────────────────────────────────────────

class AmountEntry(BaseModel):
    amount: float = Field(allow_inf_nan=False)

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v):
        if v <= 0:
            raise ValueError("Amount must be positive")
        return v


class RateEntry(BaseModel):
    rate: float = Field(allow_inf_nan=False)

    @field_validator("rate")
    @classmethod
    def rate_positive(cls, v):
        if v <= 0:
            raise ValueError("Rate must be positive")
        return v


class CurrencySelection(BaseModel):
    index: int

    @field_validator("index")
    @classmethod
    def index_allowed(cls, v, info: ValidationInfo):
        allowed = (info.context or {}).get("allowed", ALL_INDICES)
        if v not in allowed:
            raise ValueError(f"Currency index must be between {allowed[0]} and {allowed[-1]}")
        return v


class DaysEntry(BaseModel):
    days: int = Field(ge=0)


class MenuSelection(BaseModel):
    option: int = Field(ge=MENU_OPTIONS[0], le=MENU_OPTIONS[-1])


class AccountNameEntry(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Account name cannot be empty")
        return v


class YesNoAnswer(BaseModel):
    answer: str

    @field_validator("answer")
    @classmethod
    def answer_yes_or_no(cls, v):
        v = v.strip().upper()
        if v not in ("Y", "N"):
            raise ValueError("Answer must be Y or N")
        return v


# ── Parsers ───────────────────────────────────────────────────────────────────

def _is_parse_failure(exc: ValidationError) -> bool:
    return any(err["type"] in _PARSE_ERROR_TYPES for err in exc.errors())


def _validate(model, data: dict, parse_message: str, range_message: str, context=None):
    try:
        return model.model_validate(data, context=context)
    except ValidationError as exc:
        if _is_parse_failure(exc):
            raise ParseError(parse_message) from exc
        raise RangeError(range_message) from exc


def parse_amount(text: str, message: str = "Invalid Input!") -> float:
    entry = _validate(AmountEntry, {"amount": text.strip()},
                      f"{message} Please enter a number.",
                      f"{message} Amount must be greater than 0.")
    return entry.amount


def parse_rate(text: str) -> float:
    entry = _validate(RateEntry, {"rate": text.strip()},
                      "Invalid rate! Please enter a number.",
                      "Invalid rate! Please enter a value greater than 0.")
    return entry.rate


def parse_currency_index(text: str, allowed: Sequence[int] = ALL_INDICES) -> int:
    entry = _validate(CurrencySelection, {"index": text.strip()},
                      "Invalid choice! Please enter a number.",
                      f"Invalid choice! Please enter a number from {allowed[0]} to {allowed[-1]}.",
                      context={"allowed": allowed})
    return entry.index


def parse_days(text: str) -> int:
    entry = _validate(DaysEntry, {"days": text.strip()},
                      "Invalid Input! Please enter a whole number of days.",
                      "Invalid Input! Number of days cannot be negative.")
    return entry.days


def parse_account_name(text: str) -> str:
    entry = _validate(AccountNameEntry, {"name": text},
                      "Invalid Input! Please enter an account name.",
                      "Invalid Input! Account name cannot be empty.")
    return entry.name


def parse_yes_no(text: str, message: str = "Invalid Input!") -> str:
    entry = _validate(YesNoAnswer, {"answer": text}, message, message)
    return entry.answer


def parse_menu_choice(text: str) -> int:
    """Return the selected option number; raise UnrecognizedMenuChoice for anything else."""
    try:
        return MenuSelection.model_validate({"option": text.strip()}).option
    except ValidationError as exc:
        raise UnrecognizedMenuChoice() from exc


# ── Validation loop ───────────────────────────────────────────────────────────

def prompt_until_valid(console, prompt: str, parse: Callable[[str], T]) -> T:
    """
    Ask `prompt` until `parse` accepts the answer.

    InputRejected errors are shown to the operator and the field is asked
    again; any other error (including OperationAborted) propagates.
    """
    while True:
        text = console.ask(prompt)
        try:
            return parse(text)
        except InputRejected as exc:
            logger.debug("Rejected %r at %r: %s", text, prompt, exc)
            console.say(str(exc))
