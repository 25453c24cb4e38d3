"""
Error taxonomy for the banking session.

Every exception carries the operator-visible message as ``str(exc)``.
"""


class BankingError(Exception):
    """Base exception for all banking-session errors."""
    pass


class InputRejected(BankingError):
    """Raised when a single input is rejected; the field is prompted again."""
    pass


class ParseError(InputRejected):
    """Raised when input is not a valid integer or decimal number."""
    pass


class RangeError(InputRejected):
    """Raised when a parsed value is outside its allowed domain."""
    pass


class InsufficientFundsError(InputRejected):
    """Raised when a withdrawal exceeds the current balance."""

    def __init__(self, message: str = "Insufficient Balance!"):
        super().__init__(message)


class OperationAborted(BankingError):
    """Raised when an operation cannot continue; it is reported once and the operation ends."""
    pass


class NoAccountError(OperationAborted):
    """Raised when an operation needs a registered account and there is none."""

    def __init__(self, message: str = "No account registered yet. Please register an account name first."):
        super().__init__(message)


class MissingRateError(OperationAborted):
    """Raised when a currency with no recorded exchange rate is selected."""

    def __init__(self, message: str = ("Exchange rate for selected currency is not recorded yet. "
                                       "Please record the exchange rate first.")):
        super().__init__(message)


class UnrecognizedMenuChoice(BankingError):
    """Raised when the menu selection is not one of the listed options."""

    def __init__(self, message: str = "Invalid choice!"):
        super().__init__(message)
