"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (Boat) and the
           storage-type tagged location that goes with each one.
- Inputs: Field values (str / Decimal / int).
- Outputs: Dataclass instances and StorageType members.
- Side effects: None.
- Thread-safety: Plain containers; the app is single-threaded.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from enum import Enum
from typing import Union

from .config import TRAILOR_TAG_MAX


class StorageType(Enum):
    """
    Design (StorageType)
    - Purpose: Where a boat is kept; selects both the billing rate and the location shape.
    - Values are the canonical lowercase file tokens ("trailor" is the historical spelling).
    """
    SLIP = "slip"
    LAND = "land"
    TRAILOR = "trailor"
    STORAGE = "storage"
    INVALID = "invalid"

    @classmethod
    def parse(cls, text: str) -> "StorageType":
        """Case-insensitive lookup; anything unrecognized maps to INVALID."""
        token = (text or "").strip().lower()
        for member in cls:
            if member is not cls.INVALID and member.value == token:
                return member
        return cls.INVALID

    @property
    def token(self) -> str:
        return self.value


@dataclass(frozen=True)
class SlipLocation:
    number: int


@dataclass(frozen=True)
class LandLocation:
    bay: str

    def __post_init__(self) -> None:
        if len(self.bay) != 1:
            raise ValueError(f"bay must be a single character, got {self.bay!r}")


@dataclass(frozen=True)
class TrailorLocation:
    tag: str

    def __post_init__(self) -> None:
        if len(self.tag) > TRAILOR_TAG_MAX:
            raise ValueError(f"trailer tag longer than {TRAILOR_TAG_MAX} characters")


@dataclass(frozen=True)
class StorageLocation:
    number: int


@dataclass(frozen=True)
class NoLocation:
    """Placeholder carried by boats whose storage type did not parse."""


Location = Union[SlipLocation, LandLocation, TrailorLocation, StorageLocation, NoLocation]

# storage type -> the only location variant allowed with it
LOCATION_TYPES = {
    StorageType.SLIP: SlipLocation,
    StorageType.LAND: LandLocation,
    StorageType.TRAILOR: TrailorLocation,
    StorageType.STORAGE: StorageLocation,
    StorageType.INVALID: NoLocation,
}


def parse_location(storage_type: StorageType, text: str) -> Location:
    """
    Purpose: Build the location variant for a storage type from its file/CSV text.
    Inputs: storage_type, raw location text.
    Outputs: One of the Location variants.
    Raises: ValueError when the text does not fit the type (non-integer slip, empty bay...).
    """
    raw = (text or "").strip()
    if storage_type is StorageType.SLIP:
        return SlipLocation(int(raw))
    if storage_type is StorageType.LAND:
        if not raw:
            raise ValueError("missing bay letter")
        return LandLocation(raw[0])
    if storage_type is StorageType.TRAILOR:
        if not raw:
            raise ValueError("missing trailer tag")
        return TrailorLocation(raw[:TRAILOR_TAG_MAX])
    if storage_type is StorageType.STORAGE:
        return StorageLocation(int(raw))
    return NoLocation()


@dataclass
class Boat:
    """
    Design (Boat)
    - Purpose: One inventory record.
    - Fields:
        name: display name; compared case-insensitively.
        length: feet, positive; used as the billing multiplier.
        storage_type: StorageType member.
        location: variant matching storage_type (see LOCATION_TYPES).
        amount_owed: current balance, never negative.
    """
    name: str
    length: Decimal
    storage_type: StorageType
    location: Location
    amount_owed: Decimal = Decimal("0.00")

    def __post_init__(self) -> None:
        expected = LOCATION_TYPES[self.storage_type]
        if not isinstance(self.location, expected):
            raise ValueError(
                f"{self.storage_type.token} boat needs {expected.__name__}, "
                f"got {type(self.location).__name__}"
            )
        if self.length <= 0:
            raise ValueError("length must be positive")
        # saved as whole feet, so it must round to at least 1
        if self.length.quantize(Decimal(1), rounding=ROUND_HALF_EVEN) < 1:
            raise ValueError(f"length {self.length} rounds to 0 feet")
        if self.amount_owed < 0:
            raise ValueError("amount owed cannot be negative")

    @property
    def key(self) -> str:
        """Case-insensitive lookup/sort key."""
        return self.name.lower()
