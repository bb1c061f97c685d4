"""
Design (utils.py)
- Purpose: Reusable rendering and number-parsing helpers shared by storage, operations
           and the shell.
- Side effects: None.
- Thread-safety: Stateless; safe to call from anywhere.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .models import (
    LandLocation,
    Location,
    NoLocation,
    SlipLocation,
    StorageLocation,
    TrailorLocation,
)


def parse_decimal(text: str) -> Decimal:
    """
    Purpose: Parse a user/file number into a finite Decimal.
    Raises: ValueError for empty, non-numeric, NaN or infinite input.
    """
    raw = (text or "").strip()
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"not a number: {raw!r}") from None
    if not value.is_finite():
        raise ValueError(f"not a finite number: {raw!r}")
    return value


CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Whole cents, half up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    return f"{to_cents(amount):.2f}"


def format_length(length: Decimal) -> str:
    """Feet with no decimals, as written to the data file."""
    return f"{length:.0f}"


def location_token(location: Location) -> str:
    """
    Purpose: Render a location the way the data file stores it.
    Outputs: "26" for slips/storage, "B" for land, the tag for trailers, "" when unknown.
    """
    if isinstance(location, (SlipLocation, StorageLocation)):
        return str(location.number)
    if isinstance(location, LandLocation):
        return location.bay
    if isinstance(location, TrailorLocation):
        return location.tag
    if isinstance(location, NoLocation):
        return ""
    raise TypeError(f"unknown location variant {location!r}")


def location_display(location: Location) -> str:
    """
    Purpose: Render a location for the inventory listing (column layout of the menu).
    """
    if isinstance(location, (SlipLocation, StorageLocation)):
        return f"  # {location.number}"
    if isinstance(location, LandLocation):
        return f"     {location.bay}"
    if isinstance(location, TrailorLocation):
        return f"{location.tag:>7}"
    if isinstance(location, NoLocation):
        return ""
    raise TypeError(f"unknown location variant {location!r}")
