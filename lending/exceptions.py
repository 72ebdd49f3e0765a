"""
Custom exception classes for the lending core.

The core is lenient by default and never raises during normal fee processing.
These exceptions surface only for invalid construction input or when a caller
opts into strict mode.
"""


class LendingError(Exception):
    """Base class for every error raised by the lending core."""

    default_message = "Error: lending operation failed"

    def __init__(self, message: str = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InsufficientFundsError(LendingError):
    """Raised in strict mode when a deduction exceeds the available balance."""

    default_message = "Error: insufficient funds"

    def __init__(self, message: str = None, balance=None, amount=None) -> None:
        self.balance = balance
        self.amount = amount
        if message is None and balance is not None and amount is not None:
            message = f"Error: insufficient funds (balance {balance}, needs {amount})"
        super().__init__(message)


class TransactionClosedError(LendingError):
    """Raised in strict mode when an already processed transaction is processed again."""

    default_message = "Error: transaction already closed"


class InvalidAttributeError(LendingError, ValueError):
    """Raised when an entity or item is constructed with an out-of-range attribute."""

    default_message = "Error: invalid attribute"
