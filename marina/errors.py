"""
Design (errors.py)
- Purpose: Operator-facing error taxonomy. Operations raise these; the shell prints
           str(exc) and keeps looping.
- Side effects: None.
"""

from decimal import Decimal


class MarinaError(Exception):
    """Base class for every recoverable error in the boat manager."""


class CapacityError(MarinaError):
    def __init__(self, capacity: int):
        super().__init__("Boat limit reached!")
        self.capacity = capacity


class BoatNotFoundError(MarinaError):
    def __init__(self, name: str):
        super().__init__("No boat with that name")
        self.name = name


class OverpaymentError(MarinaError):
    """Payment larger than the balance; carries the balance so it can be shown."""

    def __init__(self, name: str, balance: Decimal, amount: Decimal):
        super().__init__(f"That is more than the amount owed, ${balance:.2f}")
        self.name = name
        self.balance = balance
        self.amount = amount


class InvalidAmountError(MarinaError):
    def __init__(self, text: str):
        super().__init__(f"Invalid amount {text!r}")
        self.text = text


class BoatParseError(MarinaError):
    """A data line or CSV entry that could not be turned into a Boat."""

    def __init__(self, reason: str, line: str, line_number: int | None = None):
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"Bad boat record ({where}{reason}): {line!r}")
        self.reason = reason
        self.line = line
        self.line_number = line_number


class StorageError(MarinaError):
    """The data file could not be written."""
