"""
Design (operations.py)
- Purpose: The menu actions (add, remove, inventory, monthly charge, payment) as plain
           functions over a BoatRepo, so the shell only maps keys to calls.
- Inputs: BoatRepo plus the raw operator text for each action.
- Outputs: Boats / listings; errors are raised as MarinaError subclasses.
- Side effects: Mutate the repo (add/remove/charge/payment). Nothing touches disk.
"""

from decimal import Decimal
from typing import Iterator, List

from .config import MONTHLY_RATES
from .errors import BoatNotFoundError, CapacityError, InvalidAmountError, OverpaymentError
from .logging import get_logger
from .models import Boat, StorageType
from .repository import BoatRepo
from .storage import parse_boat_line
from .utils import location_display, parse_decimal, to_cents

logger = get_logger(__name__)


def add_boat(repo: BoatRepo, csv: str) -> Boat:
    """
    Purpose: Parse one CSV entry (same format as a data-file line) and insert it.
    Raises: CapacityError if the repo is full (checked first), BoatParseError on bad input.
    """
    if repo.is_full:
        raise CapacityError(repo.capacity)
    result = parse_boat_line(csv)
    if not result.ok:
        raise result.error
    repo.insert(result.boat)
    logger.debug("Added boat %r", result.boat.name)
    return result.boat


def remove_boat(repo: BoatRepo, name: str) -> Boat:
    boat = repo.remove_by_name(name)
    logger.debug("Removed boat %r", boat.name)
    return boat


def parse_amount(text: str) -> Decimal:
    """Payment amounts are non-negative numbers, rounded to cents; zero is a no-op."""
    try:
        amount = parse_decimal(text)
    except ValueError:
        raise InvalidAmountError(text.strip()) from None
    if amount < 0:
        raise InvalidAmountError(text.strip())
    return to_cents(amount)


def accept_payment(repo: BoatRepo, name: str, amount: Decimal) -> Boat:
    """
    Purpose: Apply a payment against a boat's balance.
    Raises: BoatNotFoundError, InvalidAmountError (amount < 0),
            OverpaymentError when amount exceeds the balance (balance unchanged).
    """
    boat = repo.find_by_name(name)
    if boat is None:
        raise BoatNotFoundError(name)
    if amount < 0:
        raise InvalidAmountError(str(amount))
    amount = to_cents(amount)
    balance = to_cents(boat.amount_owed)
    if amount > balance:
        raise OverpaymentError(boat.name, balance, amount)
    boat.amount_owed = balance - amount
    logger.debug("Payment of %s from %r, balance now %s", amount, boat.name, boat.amount_owed)
    return boat


def monthly_charge(boat: Boat) -> Decimal:
    """length * per-foot rate; zero for boats whose storage type did not parse."""
    rate = MONTHLY_RATES.get(boat.storage_type.token)
    if rate is None:
        return Decimal("0.00")
    return to_cents(boat.length * rate)


def apply_monthly_charges(repo: BoatRepo) -> List[Boat]:
    """
    Purpose: Bill every boat for one month.
    Outputs: Boats that were skipped because their storage type is INVALID.
    """
    skipped: List[Boat] = []
    for boat in repo:
        if boat.storage_type is StorageType.INVALID:
            logger.warning("Boat %r has no valid storage type; not billed", boat.name)
            skipped.append(boat)
            continue
        boat.amount_owed = to_cents(boat.amount_owed + monthly_charge(boat))
    logger.debug("Applied monthly charges to %d boat(s)", len(repo) - len(skipped))
    return skipped


def format_inventory_line(boat: Boat) -> str:
    return (
        f"{boat.name:<20} {boat.length:4.0f}' {boat.storage_type.token:>8} "
        f"{location_display(boat.location)}   Owes ${to_cents(boat.amount_owed):7.2f}"
    )


class InventoryListing:
    """
    Lazy view of the inventory: each iteration walks the repo as it is at that moment,
    so the same listing can be printed again after the repo changes.
    """

    def __init__(self, repo: BoatRepo):
        self.repo = repo

    def __iter__(self) -> Iterator[str]:
        for boat in self.repo:
            yield format_inventory_line(boat)

    def __len__(self) -> int:
        return len(self.repo)


def list_inventory(repo: BoatRepo) -> InventoryListing:
    return InventoryListing(repo)
